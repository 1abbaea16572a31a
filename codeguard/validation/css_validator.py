"""
CSS Validation — brace balance and double-semicolon detection.
"""
from typing import List

from codeguard.config.constants import CSS_BRACE_PAIR
from codeguard.models.validation import ValidationResult
from codeguard.validation.balance import count_pair, describe_imbalance


def validate_css(code: str) -> ValidationResult:
    """
    Validate a stylesheet.

    Empty CSS is valid: a project does not need a stylesheet.
    """
    errors: List[str] = []
    warnings: List[str] = []

    if len(code.strip()) == 0:
        return ValidationResult.build()

    open_token, close_token, name = CSS_BRACE_PAIR
    braces = count_pair(code, open_token, close_token)
    if not braces.is_balanced:
        errors.append(describe_imbalance(name, braces))

    if ";;" in code:
        warnings.append("Double semicolons detected")

    return ValidationResult.build(errors=errors, warnings=warnings)
