# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Letter grades derived from a 0-100 quality score."""

from __future__ import annotations

from enum import Enum

# (lower bound inclusive, grade) from best to worst. Fixed so grades stay
# comparable across configurations.
_GRADE_BANDS: tuple[tuple[float, str], ...] = (
    (90.0, "A"),
    (80.0, "B"),
    (70.0, "C"),
    (60.0, "D"),
)


class EnumQualityGrade(str, Enum):
    """Letter grade for a quality score.

    Bands:
        A >= 90, B >= 80, C >= 70, D >= 60, F otherwise.

    Example:
        >>> EnumQualityGrade.from_score(88.75)
        <EnumQualityGrade.B: 'B'>
        >>> EnumQualityGrade.A.meets(EnumQualityGrade.C)
        True
    """

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @classmethod
    def from_score(cls, score: float) -> EnumQualityGrade:
        """Map a 0-100 score onto its grade band."""
        for lower_bound, grade in _GRADE_BANDS:
            if score >= lower_bound:
                return cls(grade)
        return cls.F

    @property
    def rank(self) -> int:
        """Ordinal where A is highest (4) and F is lowest (0)."""
        return {"A": 4, "B": 3, "C": 2, "D": 1, "F": 0}[self.value]

    @property
    def lower_bound(self) -> float:
        """Lowest score that earns this grade (0.0 for F)."""
        for bound, grade in _GRADE_BANDS:
            if grade == self.value:
                return bound
        return 0.0

    def meets(self, required: EnumQualityGrade) -> bool:
        """Return True if this grade is at least as good as ``required``."""
        return self.rank >= required.rank


__all__ = ["EnumQualityGrade"]
