"""
ValidatorVersion — frozen dataclass for deterministic reproducibility.

Every pipeline run records the full ValidatorVersion so a verdict can be
traced back to the exact rule set and denylist that produced it.
"""
from dataclasses import dataclass

from codeguard.config.constants import (
    DENYLIST_VERSION,
    RULESET_VERSION,
    SELF_CLOSING_VERSION,
)


@dataclass(frozen=True)
class ValidatorVersion:
    """Contract of version to guarantee repeatability."""

    ruleset_version: str = RULESET_VERSION
    denylist_version: str = DENYLIST_VERSION
    self_closing_version: str = SELF_CLOSING_VERSION
    schema_version: str = "generated-project-v1"

    def to_dict(self) -> dict:
        return {
            "ruleset_version": self.ruleset_version,
            "denylist_version": self.denylist_version,
            "self_closing_version": self.self_closing_version,
            "schema_version": self.schema_version,
        }

    def __repr__(self) -> str:
        return f"Validator-{self.ruleset_version}-{self.denylist_version}"
