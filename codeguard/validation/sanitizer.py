"""
HTML Sanitizer — denylist-based removal of dangerous constructs.

Applies an ordered list of textual removals, each rule's output feeding the
next:
    1. Inline event handlers (onerror, onload, onclick, onmouseover) with a
       double- or single-quoted value; case-insensitive, whitespace allowed
       around ``=``.
    2. ``javascript:`` (case-insensitive); the rest of the attribute value
       is kept, so ``href="javascript:void(0)"`` becomes ``href="void(0)"``.
    3. ``data:text/html`` (case-insensitive).

No parsing happens. The patterns can match text that is not an attribute
(e.g. ``data-onclick="..."`` or prose in a <p>) and miss unquoted handlers.
"""
import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Tuple

from codeguard.config.constants import DANGEROUS_EVENT_HANDLERS, DANGEROUS_URI_FRAGMENTS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SanitizeRule:
    """A single removal step of the sanitizer pipeline."""

    name: str
    pattern: re.Pattern[str]

    def apply(self, code: str) -> Tuple[str, int]:
        return self.pattern.subn("", code)


def event_handler_rule(attribute: str) -> SanitizeRule:
    return SanitizeRule(
        name=attribute,
        pattern=re.compile(rf"{re.escape(attribute)}\s*=\s*(?:\"[^\"]*\"|'[^']*')", re.IGNORECASE),
    )


def literal_rule(fragment: str) -> SanitizeRule:
    return SanitizeRule(name=fragment, pattern=re.compile(re.escape(fragment), re.IGNORECASE))


def build_rules(
    event_handlers: List[str] = DANGEROUS_EVENT_HANDLERS,
    uri_fragments: List[str] = DANGEROUS_URI_FRAGMENTS,
) -> List[SanitizeRule]:
    """Compile the denylist into an ordered rule list (handlers first)."""
    return [event_handler_rule(a) for a in event_handlers] + [
        literal_rule(f) for f in uri_fragments
    ]


SANITIZE_RULES: List[SanitizeRule] = build_rules()


def sanitize_html_with_stats(
    code: str,
    rules: List[SanitizeRule] | None = None,
) -> Tuple[str, Dict[str, int]]:
    """
    Sanitize *code* and report how many matches each rule removed.

    Returns:
        ``(sanitized, removals)`` where *removals* maps rule name → count
        for every rule in the pipeline.
    """
    if rules is None:
        rules = SANITIZE_RULES

    sanitized = code
    removals: Dict[str, int] = {}
    for rule in rules:
        sanitized, removed = rule.apply(sanitized)
        removals[rule.name] = removed

    total = sum(removals.values())
    if total:
        logger.debug("Sanitizer removed %d dangerous construct(s): %s", total, removals)

    return sanitized, removals


def sanitize_html(code: str) -> str:
    """Return a copy of *code* with denylisted constructs removed."""
    sanitized, _ = sanitize_html_with_stats(code)
    return sanitized
