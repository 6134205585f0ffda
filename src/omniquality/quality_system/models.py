# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Data models for the stateful quality system.

Thresholds are configuration (unknown keys rejected). Assessments and the
export payload are persisted records (unknown keys ignored) so payloads
written by newer versions still import.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from omniquality.enums import (
    EnumQualityCategory,
    EnumQualityGrade,
    EnumQualityTrend,
    EnumRecommendationPriority,
)
from omniquality.models import (
    ModelCategoryMinimums,
    ModelCategoryWeights,
    ModelCertificationStatus,
    ModelPerformanceThresholds,
    ModelQualityRecommendation,
    check_certification_chain,
    require_all_categories,
    require_score_range,
)

logger = logging.getLogger(__name__)

EXPORT_SCHEMA_VERSION = "1.0"


def _default_category_minimums() -> ModelCategoryMinimums:
    return ModelCategoryMinimums(
        functionality=75.0,
        reliability=70.0,
        usability=60.0,
        efficiency=60.0,
        maintainability=60.0,
        portability=65.0,
        validation=75.0,
        conformance=70.0,
    )


class ModelQualityThresholds(BaseModel):
    """Process-wide quality thresholds for one quality system instance.

    Attributes:
        min_overall_score: Overall score required to meet the threshold.
        required_grade: Minimum letter grade required to meet the threshold.
        category_minimums: Per-category minimums for standards compliance.
        performance_thresholds: Performance limits.
        category_weights: Relative weights for the overall score.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    min_overall_score: float = Field(default=70.0, ge=0.0, le=100.0)
    required_grade: EnumQualityGrade = Field(default=EnumQualityGrade.C)
    category_minimums: ModelCategoryMinimums = Field(
        default_factory=_default_category_minimums
    )
    performance_thresholds: ModelPerformanceThresholds = Field(
        default_factory=ModelPerformanceThresholds
    )
    category_weights: ModelCategoryWeights = Field(default_factory=ModelCategoryWeights)

    @property
    def effective_minimum_score(self) -> float:
        """Lowest overall score satisfying both the score and grade gates."""
        return max(self.min_overall_score, self.required_grade.lower_bound)


class ModelQualityAssessment(BaseModel):
    """One recorded quality assessment.

    Invariants: certified => meets_threshold => no critical issues, and
    quality_grade is the band of quality_score.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    pattern_name: str = Field(..., min_length=1)
    quality_score: float = Field(..., ge=0.0, le=100.0)
    quality_grade: EnumQualityGrade
    category_scores: dict[EnumQualityCategory, float]
    standards_compliance: dict[EnumQualityCategory, bool]
    meets_threshold: bool
    quality_trend: EnumQualityTrend = EnumQualityTrend.STABLE
    certification: ModelCertificationStatus = Field(
        default_factory=ModelCertificationStatus
    )
    recommendations: tuple[ModelQualityRecommendation, ...] = Field(default=())
    critical_issues: tuple[str, ...] = Field(default=())
    warnings: tuple[str, ...] = Field(default=())
    assessed_at: datetime

    @field_validator("category_scores")
    @classmethod
    def _validate_scores(
        cls, value: dict[EnumQualityCategory, float]
    ) -> dict[EnumQualityCategory, float]:
        return require_score_range(require_all_categories(value))

    @field_validator("standards_compliance")
    @classmethod
    def _validate_compliance(
        cls, value: dict[EnumQualityCategory, bool]
    ) -> dict[EnumQualityCategory, bool]:
        return require_all_categories(value)

    @model_validator(mode="after")
    def _check_chain(self) -> ModelQualityAssessment:
        expected_grade = EnumQualityGrade.from_score(self.quality_score)
        if self.quality_grade is not expected_grade:
            raise ValueError(
                f"quality_grade {self.quality_grade.value} does not match "
                f"quality_score {self.quality_score} (expected {expected_grade.value})"
            )
        check_certification_chain(
            certified=self.certification.certified,
            meets_threshold=self.meets_threshold,
            critical_issues=self.critical_issues,
        )
        return self


class ModelQualityTrendAnalysis(BaseModel):
    """Portfolio trend: latest scores against each pattern's previous entry.

    Attributes:
        overall_trend: Direction of the portfolio average.
        trend_strength: Absolute percentage change.
        current_average: Mean latest score of patterns with two or more entries.
        previous_average: Mean previous score of the same patterns.
        change: ``current_average - previous_average``.
        change_percent: ``change`` as a percentage of ``previous_average``.
        category_trends: Direction of each category's average.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    overall_trend: EnumQualityTrend = EnumQualityTrend.STABLE
    trend_strength: float = Field(default=0.0, ge=0.0)
    current_average: float = 0.0
    previous_average: float = 0.0
    change: float = 0.0
    change_percent: float = 0.0
    category_trends: dict[EnumQualityCategory, EnumQualityTrend] = Field(
        default_factory=lambda: dict.fromkeys(EnumQualityCategory, EnumQualityTrend.STABLE)
    )


class ModelQualityMetrics(BaseModel):
    """Portfolio aggregates derived from the latest assessment per pattern."""

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    total_patterns: int = Field(default=0, ge=0)
    patterns_passing_threshold: int = Field(default=0, ge=0)
    average_quality_score: float = Field(default=0.0, ge=0.0, le=100.0)
    quality_distribution: dict[EnumQualityGrade, int] = Field(
        default_factory=lambda: dict.fromkeys(EnumQualityGrade, 0)
    )
    trend_analysis: ModelQualityTrendAnalysis = Field(
        default_factory=ModelQualityTrendAnalysis
    )
    top_performing_patterns: tuple[str, ...] = Field(default=())
    patterns_needing_attention: tuple[str, ...] = Field(default=())


class ModelQualityActionItem(BaseModel):
    """A follow-up derived from critical issues and urgent recommendations."""

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    title: str = Field(..., min_length=1)
    description: str = Field(default="")
    priority: EnumRecommendationPriority
    related_pattern: str = Field(default="")
    estimated_impact: float = Field(default=0.0, ge=0.0)


class ModelQualityExport(BaseModel):
    """Self-describing snapshot of a quality system's full state.

    Attributes:
        schema_version: Payload format marker.
        exported_at: When the snapshot was taken.
        thresholds: Active threshold configuration.
        history: Pattern name to its assessments, oldest first.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    schema_version: Literal["1.0"] = EXPORT_SCHEMA_VERSION
    exported_at: datetime
    thresholds: ModelQualityThresholds = Field(default_factory=ModelQualityThresholds)
    history: dict[str, tuple[ModelQualityAssessment, ...]] = Field(default_factory=dict)

    @field_validator("thresholds", mode="before")
    @classmethod
    def _drop_unknown_threshold_keys(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        known = set(ModelQualityThresholds.model_fields)
        unknown = sorted(set(value) - known)
        if unknown:
            logger.warning("Ignoring unknown threshold keys in import: %s", unknown)
        return {key: item for key, item in value.items() if key in known}

    @model_validator(mode="after")
    def _check_history_names(self) -> ModelQualityExport:
        for name, entries in self.history.items():
            mismatched = [e.pattern_name for e in entries if e.pattern_name != name]
            if mismatched:
                raise ValueError(
                    f"history for {name!r} contains assessments of {sorted(set(mismatched))}"
                )
        return self


__all__ = [
    "EXPORT_SCHEMA_VERSION",
    "ModelQualityActionItem",
    "ModelQualityAssessment",
    "ModelQualityExport",
    "ModelQualityMetrics",
    "ModelQualityThresholds",
    "ModelQualityTrendAnalysis",
]
