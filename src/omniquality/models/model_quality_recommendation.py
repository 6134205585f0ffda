# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Remediation guidance attached to quality reports and assessments."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omniquality.enums import (
    EnumImprovementEffort,
    EnumQualityCategory,
    EnumRecommendationPriority,
)


class ModelQualityRecommendation(BaseModel):
    """A prioritised recommendation for one quality category.

    Attributes:
        category: Category the recommendation addresses.
        priority: Urgency of the recommendation.
        message: Human-readable guidance.
        current_score: Category score at assessment time.
        target_score: Minimum the category should reach.
        actions: Concrete improvement actions, most useful first.
        estimated_impact: Expected gain in overall quality score points.
        effort: Estimated effort to close the gap.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    category: EnumQualityCategory
    priority: EnumRecommendationPriority
    message: str = Field(..., min_length=1)
    current_score: float = Field(..., ge=0.0, le=100.0)
    target_score: float = Field(..., ge=0.0, le=100.0)
    actions: tuple[str, ...] = Field(default=())
    estimated_impact: float = Field(default=0.0, ge=0.0)
    effort: EnumImprovementEffort = Field(default=EnumImprovementEffort.MEDIUM)


__all__ = ["ModelQualityRecommendation"]
