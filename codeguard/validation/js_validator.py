"""
JavaScript Validation — delimiter balance and unsafe API usage.

Checks:
- ``{}``, ``[]`` and ``()`` balance, one error per imbalanced pair
- ``eval(`` usage
- ``innerHTML`` without any ``textContent`` in the same text
"""
from typing import List

from codeguard.config.constants import JS_DELIMITER_PAIRS
from codeguard.models.validation import ValidationResult
from codeguard.validation.balance import count_pair, describe_imbalance


def check_delimiters(code: str) -> List[str]:
    """Independent balance check per delimiter pair; up to three errors."""
    errors: List[str] = []
    for open_token, close_token, name in JS_DELIMITER_PAIRS:
        count = count_pair(code, open_token, close_token)
        if not count.is_balanced:
            errors.append(describe_imbalance(name, count))
    return errors


def check_unsafe_apis(code: str) -> List[str]:
    warnings: List[str] = []

    if "eval(" in code:
        warnings.append("eval() usage detected (potentially dangerous)")

    # Whole-text co-occurrence, not line-local
    if "innerHTML" in code and "textContent" not in code:
        warnings.append("innerHTML usage detected. Consider textContent to avoid XSS.")

    return warnings


def validate_js(code: str) -> ValidationResult:
    """
    Validate a script. Empty JS is valid.

    Returns:
        ValidationResult with delimiter errors and unsafe-API warnings.
    """
    if len(code.strip()) == 0:
        return ValidationResult.build()

    return ValidationResult.build(
        errors=check_delimiters(code),
        warnings=check_unsafe_apis(code),
    )
