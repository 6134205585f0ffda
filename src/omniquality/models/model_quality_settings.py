# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Per-category minimums, weights, and performance thresholds.

Shared by the quality assessor configuration and the quality system
thresholds. Every model enumerates the eight quality categories as explicit
fields and rejects unknown keys.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from omniquality.enums import EnumQualityCategory


class ModelCategoryMinimums(BaseModel):
    """Minimum acceptable score (0-100) for each quality category."""

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    functionality: float = Field(default=80.0, ge=0.0, le=100.0)
    reliability: float = Field(default=85.0, ge=0.0, le=100.0)
    usability: float = Field(default=75.0, ge=0.0, le=100.0)
    efficiency: float = Field(default=70.0, ge=0.0, le=100.0)
    maintainability: float = Field(default=75.0, ge=0.0, le=100.0)
    portability: float = Field(default=70.0, ge=0.0, le=100.0)
    validation: float = Field(default=70.0, ge=0.0, le=100.0)
    conformance: float = Field(default=80.0, ge=0.0, le=100.0)

    def minimum_for(self, category: EnumQualityCategory) -> float:
        """Return the configured minimum for ``category``."""
        return float(getattr(self, category.value))


class ModelCategoryWeights(BaseModel):
    """Relative weight of each category in the overall quality score.

    Weights are normalised by their sum, so only ratios matter. Default is
    equal weighting.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    functionality: float = Field(default=1.0, ge=0.0)
    reliability: float = Field(default=1.0, ge=0.0)
    usability: float = Field(default=1.0, ge=0.0)
    efficiency: float = Field(default=1.0, ge=0.0)
    maintainability: float = Field(default=1.0, ge=0.0)
    portability: float = Field(default=1.0, ge=0.0)
    validation: float = Field(default=1.0, ge=0.0)
    conformance: float = Field(default=1.0, ge=0.0)

    @model_validator(mode="after")
    def _check_positive_total(self) -> ModelCategoryWeights:
        if self.total <= 0.0:
            raise ValueError("category weights must sum to a positive value")
        return self

    @property
    def total(self) -> float:
        return sum(self.weight_for(category) for category in EnumQualityCategory)

    def weight_for(self, category: EnumQualityCategory) -> float:
        """Return the raw weight for ``category``."""
        return float(getattr(self, category.value))

    def normalized(self) -> dict[EnumQualityCategory, float]:
        """Return weights scaled to sum to 1.0."""
        total = self.total
        return {
            category: self.weight_for(category) / total
            for category in EnumQualityCategory
        }


class ModelPerformanceThresholds(BaseModel):
    """Performance limits a pattern must respect to be certified.

    Attributes:
        max_execution_time_ms: Upper bound on average execution time.
        min_throughput: Minimum executions per second.
        max_memory_mb: Upper bound on estimated memory use.
        min_reliability: Minimum pass rate, as a percentage.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    max_execution_time_ms: float = Field(default=5000.0, gt=0.0)
    min_throughput: float = Field(default=1.0, ge=0.0)
    max_memory_mb: float = Field(default=100.0, gt=0.0)
    min_reliability: float = Field(default=95.0, ge=0.0, le=100.0)


__all__ = [
    "ModelCategoryMinimums",
    "ModelCategoryWeights",
    "ModelPerformanceThresholds",
]
