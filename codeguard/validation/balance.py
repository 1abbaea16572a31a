"""
Delimiter balance counting — shared by the CSS and JS validators.

Counts raw token occurrences only: a ``{`` inside a string literal or a
comment is counted like structural code, so an imbalance is a *suspected*
syntax error, never a proven one.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class BalanceCount:
    """Occurrence counts for one open/close token pair."""

    opening: int
    closing: int

    @property
    def is_balanced(self) -> bool:
        return self.opening == self.closing


def count_pair(text: str, open_token: str, close_token: str) -> BalanceCount:
    """
    Count occurrences of *open_token* and *close_token* in *text*.

    Args:
        text: Code to scan.
        open_token: Opening delimiter, e.g. ``"{"``.
        close_token: Matching closing delimiter, e.g. ``"}"``.

    Returns:
        BalanceCount with both counts.
    """
    return BalanceCount(opening=text.count(open_token), closing=text.count(close_token))


def describe_imbalance(name: str, count: BalanceCount) -> str:
    """Human-readable error for an imbalanced pair."""
    return f"Unbalanced {name}: {count.opening} opening, {count.closing} closing"
