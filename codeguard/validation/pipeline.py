"""
Pipeline Orchestrator — main entry point for validating one generated artifact.

Executes the stages:
    1. Payload parsing (JSON parse + schema conformance) or response extraction
    2. Project validation (HTML → CSS → JS)
    3. Sanitization (independent pass over the original HTML)
    4. Report rendering
    5. Metrics + output assembly

The validators only classify. The pipeline never refuses an artifact: it
marks it ``blocked`` when the verdict is invalid and leaves enforcement to
the caller (preview, export, deploy).
"""
import json
import logging
import time
from typing import List, Optional

from jsonschema import ValidationError as SchemaValidationError
from jsonschema import validate
from pydantic import ValidationError as ModelValidationError

from codeguard.config import settings
from codeguard.config.schemas import GENERATION_PAYLOAD_SCHEMA
from codeguard.models.project_io import GeneratedProject
from codeguard.models.validation import ValidationResult
from codeguard.models.validator_version import ValidatorVersion
from codeguard.validation.extraction import extract_code, extract_separated_code
from codeguard.validation.metrics import (
    record_blocked,
    record_result,
    record_sanitizer_removals,
    timed_stage,
)
from codeguard.validation.project import validate_project
from codeguard.validation.report import format_report
from codeguard.validation.sanitizer import sanitize_html_with_stats

logger = logging.getLogger(__name__)


class GenerationPayloadError(ValueError):
    """Raised when a generation payload cannot be turned into a project."""

    def __init__(self, errors: List[str]) -> None:
        self.errors = errors
        super().__init__(f"Invalid generation payload: {errors}")


# ======================================================================
# Stage 1: Input
# ======================================================================

def parse_generation_payload(payload: str | dict) -> GeneratedProject:
    """
    Parse and schema-check a JSON payload from the generation backend.

    Args:
        payload: Raw JSON string or already-decoded dict.

    Returns:
        GeneratedProject.

    Raises:
        GenerationPayloadError: invalid JSON or schema violation.
    """
    if isinstance(payload, dict):
        data = payload
    else:
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise GenerationPayloadError([f"Invalid JSON: {e}"]) from e

    try:
        validate(instance=data, schema=GENERATION_PAYLOAD_SCHEMA["schema"])
    except SchemaValidationError as e:
        raise GenerationPayloadError([f"Schema violation: {e.message}"]) from e

    try:
        return GeneratedProject(**data)
    except ModelValidationError as e:
        raise GenerationPayloadError([err["msg"] for err in e.errors()]) from e


def project_from_response(
    text: str,
    separate_assets: Optional[bool] = None,
) -> GeneratedProject:
    """
    Build a project from a free-text model response.

    When no code can be located the project gets empty HTML, which the
    HTML validator reports as an error.

    Args:
        text: Model response (markdown or bare document).
        separate_assets: Split inline <style>/<script> into CSS/JS.
                         Defaults to settings.SEPARATE_ASSETS.
    """
    if separate_assets is None:
        separate_assets = settings.SEPARATE_ASSETS

    code = extract_code(text)
    if code is None:
        logger.warning(
            "No code found in model response: '%s...'",
            text[: settings.MAX_CODE_LOG_CHARS],
        )
        return GeneratedProject(html="")

    if separate_assets:
        return extract_separated_code(code).to_project()
    return GeneratedProject(html=code)


# ======================================================================
# Stages 2-5
# ======================================================================

def run_validation_pipeline(
    project: GeneratedProject,
    validator_version: Optional[ValidatorVersion] = None,
    inline_style_limit: Optional[int] = None,
) -> dict:
    """
    Validate, sanitize and report on one generated project.

    Args:
        project: The generated artifact.
        validator_version: Recorded in the output. Defaults to current pins.
        inline_style_limit: Defaults to settings.INLINE_STYLE_LIMIT.

    Returns:
        Output dict conforming to VALIDATION_OUTPUT_SCHEMA.
    """
    start_time = time.monotonic()

    if validator_version is None:
        validator_version = ValidatorVersion()
    if inline_style_limit is None:
        inline_style_limit = settings.INLINE_STYLE_LIMIT

    # ==================================================================
    # Stage 2: Validate
    # ==================================================================
    with timed_stage("validate_project"):
        result: ValidationResult = validate_project(
            project.html,
            project.css,
            project.js,
            inline_style_limit=inline_style_limit,
        )

    # ==================================================================
    # Stage 3: Sanitize (stats pass; same output as result.sanitized)
    # ==================================================================
    with timed_stage("sanitize"):
        sanitized_html, removals = sanitize_html_with_stats(project.html)

    # ==================================================================
    # Stage 4: Report
    # ==================================================================
    report = format_report(result)

    # ==================================================================
    # Stage 5: Metrics + assembly
    # ==================================================================
    record_result(result)
    record_sanitizer_removals(removals)

    blocked = not result.is_valid
    if blocked:
        record_blocked()
        logger.warning("Generated code failed validation: %s", list(result.errors))
    elif result.warnings:
        logger.info("Generated code valid with %d warning(s)", len(result.warnings))

    elapsed_ms = int((time.monotonic() - start_time) * 1000)

    return {
        "validator_version": validator_version.to_dict(),
        "result": result.to_dict(),
        "report": report,
        "artifact": {
            "html": sanitized_html,
            "css": project.css,
            "js": project.js,
        },
        "diagnostics": {
            "blocked": blocked,
            "error_count": len(result.errors),
            "warning_count": len(result.warnings),
            "sanitizer_removals": removals,
        },
        "processing_metadata": {
            "duration_ms": elapsed_ms,
            "html_chars": len(project.html),
            "css_chars": len(project.css or ""),
            "js_chars": len(project.js or ""),
        },
    }
