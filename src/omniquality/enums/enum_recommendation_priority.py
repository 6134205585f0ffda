# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Priority and effort labels attached to remediation guidance."""

from enum import Enum


class EnumRecommendationPriority(str, Enum):
    """Priority of a recommendation or suggestion.

    CRITICAL is only used by the quality system for category scores that
    sit far below their minimum; the assessor and validator use HIGH and below.
    """

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort key where CRITICAL sorts first."""
        return {"critical": 0, "high": 1, "medium": 2, "low": 3}[self.value]


class EnumImprovementEffort(str, Enum):
    """Estimated effort to close a category shortfall."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


__all__ = ["EnumImprovementEffort", "EnumRecommendationPriority"]
