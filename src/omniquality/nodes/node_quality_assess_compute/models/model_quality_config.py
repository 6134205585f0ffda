# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Quality assessor configuration.

Every recognised option is enumerated with its default; unknown keys are
rejected. ``QualityAssessorSettings`` loads the same structure from the
environment, using ``__`` to reach nested fields, e.g.
``PATTERN_QUALITY_QUALITY_STANDARDS__RELIABILITY=90``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from omniquality.models import (
    ModelCategoryMinimums,
    ModelCategoryWeights,
    ModelPerformanceThresholds,
)


class ModelQualityConfig(BaseModel):
    """Configuration for ``assess_quality``.

    Attributes:
        minimum_quality_score: Overall score required to meet the threshold.
        enable_certification: When true, performance thresholds participate
            in the certification decision (if metrics were collected).
        performance_thresholds: Certification performance limits.
        quality_standards: Per-category minimums for standards compliance.
        category_weights: Relative weights for the overall score.
        reliability_penalty_per_critical: Reliability points removed per
            critical validation issue.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    minimum_quality_score: float = Field(default=75.0, ge=0.0, le=100.0)
    enable_certification: bool = Field(default=True)
    performance_thresholds: ModelPerformanceThresholds = Field(
        default_factory=ModelPerformanceThresholds
    )
    quality_standards: ModelCategoryMinimums = Field(
        default_factory=ModelCategoryMinimums
    )
    category_weights: ModelCategoryWeights = Field(default_factory=ModelCategoryWeights)
    reliability_penalty_per_critical: float = Field(default=20.0, ge=0.0, le=100.0)


class QualityAssessorSettings(BaseSettings):
    """Quality assessor configuration loaded from the environment.

    Environment variables:
        PATTERN_QUALITY_MINIMUM_QUALITY_SCORE: float (default 75)
        PATTERN_QUALITY_ENABLE_CERTIFICATION: bool (default True)
        PATTERN_QUALITY_PERFORMANCE_THRESHOLDS__<FIELD>: nested override
        PATTERN_QUALITY_QUALITY_STANDARDS__<CATEGORY>: nested override
        PATTERN_QUALITY_CATEGORY_WEIGHTS__<CATEGORY>: nested override
        PATTERN_QUALITY_RELIABILITY_PENALTY_PER_CRITICAL: float (default 20)
    """

    model_config = SettingsConfigDict(
        env_prefix="PATTERN_QUALITY_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    minimum_quality_score: float = Field(default=75.0, ge=0.0, le=100.0)
    enable_certification: bool = Field(default=True)
    performance_thresholds: ModelPerformanceThresholds = Field(
        default_factory=ModelPerformanceThresholds
    )
    quality_standards: ModelCategoryMinimums = Field(
        default_factory=ModelCategoryMinimums
    )
    category_weights: ModelCategoryWeights = Field(default_factory=ModelCategoryWeights)
    reliability_penalty_per_critical: float = Field(default=20.0, ge=0.0, le=100.0)

    def to_config(self) -> ModelQualityConfig:
        """Convert settings to a frozen ModelQualityConfig instance."""
        return ModelQualityConfig(
            minimum_quality_score=self.minimum_quality_score,
            enable_certification=self.enable_certification,
            performance_thresholds=self.performance_thresholds,
            quality_standards=self.quality_standards,
            category_weights=self.category_weights,
            reliability_penalty_per_critical=self.reliability_penalty_per_critical,
        )


__all__ = ["ModelQualityConfig", "QualityAssessorSettings"]
