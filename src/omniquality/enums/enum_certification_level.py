# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Certification tier ladder."""

from __future__ import annotations

from enum import Enum


class EnumCertificationLevel(str, Enum):
    """Certification tiers, ordered NONE < BRONZE < SILVER < GOLD < PLATINUM.

    A certified pattern is at least BRONZE; the tier then follows the quality
    score cut points in ``CERTIFICATION_LADDER``. An uncertified pattern is
    always NONE.
    """

    NONE = "none"
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"

    @property
    def rank(self) -> int:
        return _LEVEL_ORDER.index(self)

    def next_level(self) -> EnumCertificationLevel | None:
        """Return the tier above this one, or None at the top of the ladder."""
        index = self.rank + 1
        return _LEVEL_ORDER[index] if index < len(_LEVEL_ORDER) else None


_LEVEL_ORDER: tuple[EnumCertificationLevel, ...] = (
    EnumCertificationLevel.NONE,
    EnumCertificationLevel.BRONZE,
    EnumCertificationLevel.SILVER,
    EnumCertificationLevel.GOLD,
    EnumCertificationLevel.PLATINUM,
)

# Minimum quality score for each certified tier, highest first.
CERTIFICATION_LADDER: tuple[tuple[float, EnumCertificationLevel], ...] = (
    (95.0, EnumCertificationLevel.PLATINUM),
    (90.0, EnumCertificationLevel.GOLD),
    (85.0, EnumCertificationLevel.SILVER),
    (0.0, EnumCertificationLevel.BRONZE),
)


def certification_level_for_score(
    score: float, *, certified: bool
) -> EnumCertificationLevel:
    """Select the ladder tier for a score.

    Args:
        score: Overall quality score (0-100).
        certified: Whether the certification gate passed.

    Returns:
        NONE when not certified, otherwise the highest tier whose cut point
        the score reaches.
    """
    if not certified:
        return EnumCertificationLevel.NONE
    for cut_point, level in CERTIFICATION_LADDER:
        if score >= cut_point:
            return level
    return EnumCertificationLevel.BRONZE


def minimum_score_for_level(level: EnumCertificationLevel) -> float | None:
    """Return the cut point for ``level``, or None for NONE."""
    for cut_point, candidate in CERTIFICATION_LADDER:
        if candidate is level:
            return cut_point
    return None


__all__ = [
    "CERTIFICATION_LADDER",
    "EnumCertificationLevel",
    "certification_level_for_score",
    "minimum_score_for_level",
]
