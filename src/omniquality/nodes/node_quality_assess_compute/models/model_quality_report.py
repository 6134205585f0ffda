# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Quality report models produced by the quality assessor."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from omniquality.enums import EnumQualityCategory, EnumQualityGrade, EnumQualityTrend
from omniquality.models import (
    ModelCertificationStatus,
    ModelQualityRecommendation,
    check_certification_chain,
    require_all_categories,
    require_score_range,
)


class ModelQualityReport(BaseModel):
    """Multi-category quality verdict for one pattern.

    Invariant: certified => meets_threshold => no critical issues.

    Attributes:
        pattern_name: Assessed pattern.
        quality_score: Weighted mean of the eight category scores.
        quality_grade: Letter grade for ``quality_score``.
        category_scores: Score (0-100) per quality category.
        standards_compliance: Whether each category reaches its minimum.
        certification: Certification decision and tier.
        meets_threshold: ``quality_score >= minimum`` and no critical issues.
        performance_thresholds_met: None when performance was not evaluated.
        quality_trend: Always STABLE for a history-free assessment.
        recommendations: Shortfall guidance, worst category first.
        critical_issues: Critical validation findings.
        warnings: Non-blocking findings from validation and testing.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    pattern_name: str = Field(default="")
    quality_score: float = Field(..., ge=0.0, le=100.0)
    quality_grade: EnumQualityGrade
    category_scores: dict[EnumQualityCategory, float]
    standards_compliance: dict[EnumQualityCategory, bool]
    certification: ModelCertificationStatus = Field(
        default_factory=ModelCertificationStatus
    )
    meets_threshold: bool
    performance_thresholds_met: bool | None = None
    quality_trend: EnumQualityTrend = EnumQualityTrend.STABLE
    recommendations: tuple[ModelQualityRecommendation, ...] = Field(default=())
    critical_issues: tuple[str, ...] = Field(default=())
    warnings: tuple[str, ...] = Field(default=())

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
    def _check_chain(self) -> ModelQualityReport:
        check_certification_chain(
            certified=self.certification.certified,
            meets_threshold=self.meets_threshold,
            critical_issues=self.critical_issues,
        )
        return self

    @property
    def non_compliant_categories(self) -> tuple[EnumQualityCategory, ...]:
        return tuple(c for c, ok in self.standards_compliance.items() if not ok)


class ModelBatchAssessment(BaseModel):
    """Outcome of assessing many patterns.

    Attributes:
        reports: Reports for every pattern that could be assessed.
        skipped: Pattern name to the reason it was skipped.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    reports: dict[str, ModelQualityReport] = Field(default_factory=dict)
    skipped: dict[str, str] = Field(default_factory=dict)


class ModelStandardsComplianceSummary(BaseModel):
    """Portfolio partition by standards compliance.

    Attributes:
        compliant: Meet the threshold and every category minimum.
        requires_improvement: Meet the threshold but miss a category minimum.
        non_compliant: Do not meet the threshold.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    compliant: tuple[str, ...] = Field(default=())
    requires_improvement: tuple[str, ...] = Field(default=())
    non_compliant: tuple[str, ...] = Field(default=())


__all__ = [
    "ModelBatchAssessment",
    "ModelQualityReport",
    "ModelStandardsComplianceSummary",
]
