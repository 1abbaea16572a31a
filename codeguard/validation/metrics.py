"""
Prometheus Metrics — validation pipeline observability.

Exposes counters and histograms for:
- Validation errors and warnings per language
- Sanitizer removals per denylist rule
- Artifacts blocked by a failing verdict
- Stage processing latency

Only the pipeline records metrics; the validators and the sanitizer stay
free of side effects.

Usage
-----
    from codeguard.validation.metrics import record_result, timed_stage

    with timed_stage("validate_project"):
        result = validate_project(html, css, js)

    record_result(result)
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Dict, Generator

from prometheus_client import Counter, Histogram

from codeguard.config.constants import SECTION_PREFIXES
from codeguard.models.validation import ValidationResult

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Validation errors, labelled by language section.
VALIDATION_ERRORS: Counter = Counter(
    "codeguard_validation_errors_total",
    "Total validation errors by language",
    ["language"],
)

# Validation warnings, labelled by language section.
VALIDATION_WARNINGS: Counter = Counter(
    "codeguard_validation_warnings_total",
    "Total validation warnings by language",
    ["language"],
)

# Constructs removed by the sanitizer, labelled by denylist rule.
SANITIZER_REMOVALS: Counter = Counter(
    "codeguard_sanitizer_removals_total",
    "Dangerous constructs removed by the sanitizer, by rule",
    ["rule"],
)

# How many artifacts carried a blocking (invalid) verdict.
BLOCKED_ARTIFACTS: Counter = Counter(
    "codeguard_blocked_artifacts_total",
    "Generated artifacts whose verdict was invalid",
)

# Processing latency per pipeline stage (seconds).
STAGE_LATENCY: Histogram = Histogram(
    "codeguard_stage_processing_seconds",
    "Processing time per validation stage in seconds",
    ["stage"],
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def _language_of(message: str) -> str:
    for language, prefix in SECTION_PREFIXES.items():
        if message.startswith(prefix):
            return language
    return "unknown"


def record_result(result: ValidationResult) -> None:
    """Increment error/warning counters, labelled by each entry's language prefix."""
    for error in result.errors:
        VALIDATION_ERRORS.labels(language=_language_of(error)).inc()
    for warning in result.warnings:
        VALIDATION_WARNINGS.labels(language=_language_of(warning)).inc()


def record_sanitizer_removals(removals: Dict[str, int]) -> None:
    """Increment the removal counter for every rule that matched."""
    for rule, count in removals.items():
        if count:
            SANITIZER_REMOVALS.labels(rule=rule).inc(count)


def record_blocked() -> None:
    BLOCKED_ARTIFACTS.inc()


@contextmanager
def timed_stage(stage: str) -> Generator[None, None, None]:
    """
    Context manager that records stage processing latency.

    Usage::

        with timed_stage("sanitize"):
            sanitized = sanitize_html(html)
    """
    with STAGE_LATENCY.labels(stage=stage).time():
        yield
