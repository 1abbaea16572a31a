"""
Project Validation — composes the per-language validators and the sanitizer.
"""
from typing import List, Optional

from codeguard.config.constants import INLINE_STYLE_LIMIT, SECTION_PREFIXES
from codeguard.models.validation import ValidationResult
from codeguard.validation.css_validator import validate_css
from codeguard.validation.html_validator import validate_html
from codeguard.validation.js_validator import validate_js
from codeguard.validation.sanitizer import sanitize_html


def _prefixed(prefix: str, messages: tuple) -> List[str]:
    return [f"{prefix}{m}" for m in messages]


def validate_project(
    html: str,
    css: Optional[str] = None,
    js: Optional[str] = None,
    inline_style_limit: int = INLINE_STYLE_LIMIT,
) -> ValidationResult:
    """
    Validate a full project (HTML + optional CSS + optional JS).

    Omitted (or empty) CSS/JS count as trivially valid. Entries are prefixed
    with their language and concatenated in HTML → CSS → JS order.
    ``sanitized`` is the sanitized HTML, produced regardless of the verdict.

    Args:
        html: Generated HTML.
        css: Generated stylesheet, if any.
        js: Generated script, if any.
        inline_style_limit: Forwarded to the HTML inline-style check.

    Returns:
        Combined ValidationResult.
    """
    sections = [
        ("html", validate_html(html, inline_style_limit)),
        ("css", validate_css(css) if css else ValidationResult()),
        ("js", validate_js(js) if js else ValidationResult()),
    ]

    errors: List[str] = []
    warnings: List[str] = []
    for language, result in sections:
        prefix = SECTION_PREFIXES[language]
        errors.extend(_prefixed(prefix, result.errors))
        warnings.extend(_prefixed(prefix, result.warnings))

    return ValidationResult.build(
        errors=errors,
        warnings=warnings,
        sanitized=sanitize_html(html),
    )
