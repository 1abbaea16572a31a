"""
Report rendering — turns a ValidationResult into text for the chat UI.

Decoration (bold markers, emoji) is cosmetic; section order (errors, then
warnings) and per-section numbering starting at 1 are not.
"""
from typing import Iterable, List

from codeguard.config.constants import ALL_CLEAR_MESSAGE, ERRORS_HEADING, WARNINGS_HEADING
from codeguard.models.validation import ValidationResult


def _numbered(items: Iterable[str]) -> List[str]:
    return [f"{i}. {item}" for i, item in enumerate(items, start=1)]


def format_report(result: ValidationResult) -> str:
    """Render *result* as a plain-text report with lightweight markup."""
    if result.is_valid and not result.warnings:
        return ALL_CLEAR_MESSAGE

    lines: List[str] = []

    if not result.is_valid:
        lines.extend([ERRORS_HEADING, ""])
        lines.extend(_numbered(result.errors))
        lines.append("")

    if result.warnings:
        lines.extend([WARNINGS_HEADING, ""])
        lines.extend(_numbered(result.warnings))

    return "\n".join(lines).rstrip("\n") + "\n"
