"""
Runs the validation pipeline on one generated artifact.

Reads:
  - a raw model response (.md / .txt), a bare HTML document (.html),
    or a generation payload (.json with "html", "css", "js")

Produces:
  - <input>.validation.json next to the input
  - the validation report on stdout
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from codeguard.config.settings import LOG_LEVEL

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("run_validation")

from codeguard.validation.pipeline import (  # noqa: E402
    GenerationPayloadError,
    parse_generation_payload,
    project_from_response,
    run_validation_pipeline,
)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Validate and sanitize generated web code.")
    parser.add_argument("input", type=Path, help="Model response, HTML file or JSON payload")
    parser.add_argument(
        "--separate-assets",
        action="store_true",
        help="Split inline <style>/<script> blocks into CSS/JS before validating",
    )
    parser.add_argument("--output", type=Path, default=None, help="Where to write the JSON result")
    args = parser.parse_args(argv)

    input_file: Path = args.input
    output_file: Path = args.output or input_file.with_suffix(".validation.json")

    logger.info("Loading input: %s", input_file)
    try:
        raw = input_file.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        logger.error("Input is not valid UTF-8: %s", e)
        return 2

    # -----------------------------------------------------------------------
    # Build the project
    # -----------------------------------------------------------------------
    if input_file.suffix == ".json":
        try:
            project = parse_generation_payload(raw)
        except GenerationPayloadError as e:
            logger.error("Rejected payload: %s", e.errors)
            return 2
    else:
        project = project_from_response(raw, separate_assets=args.separate_assets)

    logger.info("html  : %d chars", len(project.html))
    logger.info("css   : %d chars", len(project.css or ""))
    logger.info("js    : %d chars", len(project.js or ""))

    # -----------------------------------------------------------------------
    # Run pipeline
    # -----------------------------------------------------------------------
    result = run_validation_pipeline(project)

    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(result, f, ensure_ascii=False, indent=2)
    logger.info("Output saved to: %s", output_file)

    # -----------------------------------------------------------------------
    # Summary
    # -----------------------------------------------------------------------
    diag = result["diagnostics"]
    print("\n" + "=" * 70)
    print("VALIDATION RESULT — SUMMARY")
    print("=" * 70)
    print(f"ruleset     : {result['validator_version']['ruleset_version']}")
    print(f"blocked     : {diag['blocked']}")
    print(f"errors      : {diag['error_count']}")
    print(f"warnings    : {diag['warning_count']}")
    removed = {rule: n for rule, n in diag["sanitizer_removals"].items() if n}
    if removed:
        print(f"sanitized   : {removed}")
    print("-" * 70)
    print(result["report"])
    print("=" * 70 + "\n")

    return 1 if diag["blocked"] else 0


if __name__ == "__main__":
    sys.exit(main())
