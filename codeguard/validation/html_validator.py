"""
HTML Validation — heuristic structural and safety checks.

Implements:
- Empty-code detection (the only HTML error)
- Missing <html>/<head>/<body> detection
- Tag-balance ledger (unclosed tag suspicion)
- Suspicious script markers
- Inline style abuse

Every check is an independent predicate over the raw text (pattern scan →
count/list). None of them parses HTML: interleaved mismatches such as
``<a><b></a></b>`` balance per name and are not reported.
"""
import re
from collections import Counter
from dataclasses import dataclass
from typing import List

from codeguard.config.constants import (
    INLINE_STYLE_LIMIT,
    SELF_CLOSING_TAGS,
    STRUCTURAL_TAGS,
    SUSPICIOUS_HTML_MARKERS,
)
from codeguard.models.validation import ValidationResult

EMPTY_CODE_ERROR: str = "Generated code is empty"

_OPENING_TAG_RE = re.compile(r"<(?!/)([\w-]+)(?:\s[^>]*)?>")
_CLOSING_TAG_RE = re.compile(r"</([\w-]+)>")
_INLINE_STYLE_RE = re.compile(r'style\s*=\s*"')


@dataclass(frozen=True)
class TagLedger:
    """Opening and closing tag names in document order."""

    opening: List[str]
    closing: List[str]


# ======================================================================
# Individual checks
# ======================================================================

def check_structure(code: str) -> List[str]:
    """One warning per structural tag whose ``<name`` substring is absent."""
    return [
        f"No <{tag}> tag detected"
        for tag in STRUCTURAL_TAGS
        if f"<{tag}" not in code
    ]


def scan_tags(code: str) -> TagLedger:
    """Build the tag-balance ledger by pattern scan."""
    return TagLedger(
        opening=_OPENING_TAG_RE.findall(code),
        closing=_CLOSING_TAG_RE.findall(code),
    )


def find_unclosed_tags(ledger: TagLedger) -> List[str]:
    """
    Names opened more often than closed, excluding self-closing tags.

    Each name appears once, in order of its first opening tag.
    """
    closes = Counter(ledger.closing)
    remaining = Counter(ledger.opening)
    remaining.subtract(closes)

    unclosed: List[str] = []
    for name in ledger.opening:
        if name in SELF_CLOSING_TAGS or name in unclosed:
            continue
        if remaining[name] > 0:
            unclosed.append(name)
    return unclosed


def check_suspicious_scripts(code: str) -> List[str]:
    if any(marker in code for marker in SUSPICIOUS_HTML_MARKERS):
        return ["Potentially dangerous JavaScript detected"]
    return []


def count_inline_styles(code: str) -> int:
    return len(_INLINE_STYLE_RE.findall(code))


def check_inline_styles(code: str, limit: int = INLINE_STYLE_LIMIT) -> List[str]:
    count = count_inline_styles(code)
    if count > limit:
        return [f"Many inline styles ({count}). Consider using CSS classes."]
    return []


# ======================================================================
# Entry point
# ======================================================================

def validate_html(code: str, inline_style_limit: int = INLINE_STYLE_LIMIT) -> ValidationResult:
    """
    Validate an HTML document or fragment.

    Only empty (or whitespace-only) input is an error; every other finding
    is a warning. ``sanitized`` is always the unmodified input: sanitization
    is a separate step (see :func:`codeguard.validation.sanitizer.sanitize_html`).

    Args:
        code: HTML produced by the generator.
        inline_style_limit: Inline ``style="`` attributes tolerated before warning.

    Returns:
        ValidationResult with errors, warnings and the original code.
    """
    if len(code.strip()) == 0:
        return ValidationResult.build(errors=[EMPTY_CODE_ERROR], sanitized=code)

    warnings: List[str] = []
    warnings.extend(check_structure(code))

    unclosed = find_unclosed_tags(scan_tags(code))
    if unclosed:
        warnings.append(f"Potentially unclosed tags: {', '.join(unclosed)}")

    warnings.extend(check_suspicious_scripts(code))
    warnings.extend(check_inline_styles(code, inline_style_limit))

    return ValidationResult.build(warnings=warnings, sanitized=code)
