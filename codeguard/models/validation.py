"""
ValidationResult — verdict of a validation pass over generated code.
"""
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating generated HTML/CSS/JS."""

    errors: Tuple[str, ...] = field(default=())
    warnings: Tuple[str, ...] = field(default=())
    sanitized: Optional[str] = None

    @classmethod
    def build(
        cls,
        errors: Iterable[str] = (),
        warnings: Iterable[str] = (),
        sanitized: Optional[str] = None,
    ) -> "ValidationResult":
        """Freeze accumulated check output into a result."""
        return cls(errors=tuple(errors), warnings=tuple(warnings), sanitized=sanitized)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "sanitized": self.sanitized,
        }

    def __repr__(self) -> str:
        state = "valid" if self.is_valid else "invalid"
        return f"ValidationResult({state}, errors={len(self.errors)}, warnings={len(self.warnings)})"
