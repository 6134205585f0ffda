# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Certification outcome for one pattern."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from omniquality.enums import EnumCertificationLevel


class ModelCertificationStatus(BaseModel):
    """Certification decision plus the tier it earned.

    Attributes:
        certified: Whether the pattern passed the certification gate.
        level: Tier on the certification ladder (NONE when not certified).
        requirements_met: Requirements the pattern satisfied.
        next_level: Next tier up, or None at PLATINUM.
        requirements_for_next_level: What the pattern needs to reach ``next_level``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    certified: bool = False
    level: EnumCertificationLevel = EnumCertificationLevel.NONE
    requirements_met: tuple[str, ...] = Field(default=())
    next_level: EnumCertificationLevel | None = None
    requirements_for_next_level: tuple[str, ...] = Field(default=())

    @model_validator(mode="after")
    def _check_level(self) -> ModelCertificationStatus:
        if self.certified == (self.level is EnumCertificationLevel.NONE):
            raise ValueError(
                "certified patterns need a tier above NONE and uncertified "
                f"patterns must be NONE (certified={self.certified}, level={self.level.value})"
            )
        return self


def check_certification_chain(
    *,
    certified: bool,
    meets_threshold: bool,
    critical_issues: tuple[str, ...],
) -> None:
    """Enforce certified => meets_threshold => no critical issues.

    Raises:
        ValueError: If either implication is broken.
    """
    if certified and not meets_threshold:
        raise ValueError("a certified pattern must meet the quality threshold")
    if meets_threshold and critical_issues:
        raise ValueError("a pattern with critical issues cannot meet the threshold")


__all__ = ["ModelCertificationStatus", "check_certification_chain"]
