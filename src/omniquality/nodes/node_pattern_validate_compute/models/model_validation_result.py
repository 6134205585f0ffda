# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Validation result models produced by the pattern validator."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from omniquality.enums import EnumIssueSeverity, EnumRecommendationPriority


class ModelValidationIssue(BaseModel):
    """A single structural finding.

    Attributes:
        code: Stable machine-readable identifier (e.g. ``missing-identity``).
        description: Human-readable explanation.
        severity: Issue severity after strict-mode escalation.
        deduction: Points removed from the score for this issue.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    code: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    severity: EnumIssueSeverity
    deduction: int = Field(default=0, ge=0)


class ModelValidationSuggestion(BaseModel):
    """Improvement advice derived from absent best-practice markers."""

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    message: str = Field(..., min_length=1)
    priority: EnumRecommendationPriority


class ModelComplianceChecks(BaseModel):
    """Eight independent, informational structure probes.

    None of these affect the score; they describe the template's shape.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    has_identity: bool = False
    has_purpose: bool = False
    has_steps: bool = False
    has_output: bool = False
    has_instructions: bool = False
    has_scoring: bool = False
    meets_word_count: bool = False
    has_required_sections: bool = False

    @property
    def passed_count(self) -> int:
        return sum(1 for value in self.model_dump().values() if value)

    @property
    def total_count(self) -> int:
        return len(type(self).model_fields)


class ModelValidationResult(BaseModel):
    """Outcome of validating one pattern.

    ``is_valid`` is true iff ``score >= minimum_score`` and there are no
    critical issues; ``minimum_score`` records the threshold that was applied.

    Attributes:
        pattern_name: Name of the validated template.
        is_valid: Overall verdict.
        score: 0-100 after deductions.
        minimum_score: Configured minimum used for ``is_valid``.
        word_count: Words counted across the structural fields.
        follows_structure: Identity, steps, output sections and instructions are
            all non-empty.
        issues: Findings in detection order.
        suggestions: Best-practice advice, at most five.
        compliance_checks: Informational structure probes.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    pattern_name: str = Field(default="")
    is_valid: bool
    score: int = Field(..., ge=0, le=100)
    minimum_score: int = Field(default=70, ge=0, le=100)
    word_count: int = Field(default=0, ge=0)
    follows_structure: bool = False
    issues: tuple[ModelValidationIssue, ...] = Field(default=())
    suggestions: tuple[ModelValidationSuggestion, ...] = Field(default=())
    compliance_checks: ModelComplianceChecks = Field(
        default_factory=ModelComplianceChecks
    )

    @model_validator(mode="after")
    def _check_verdict(self) -> ModelValidationResult:
        expected = self.score >= self.minimum_score and not self.has_critical_issues
        if self.is_valid != expected:
            raise ValueError(
                f"is_valid={self.is_valid} contradicts score={self.score}, "
                f"minimum_score={self.minimum_score}, "
                f"critical_issues={len(self.critical_issues)}"
            )
        return self

    @property
    def critical_issues(self) -> tuple[ModelValidationIssue, ...]:
        return tuple(
            issue for issue in self.issues if issue.severity is EnumIssueSeverity.CRITICAL
        )

    @property
    def warning_issues(self) -> tuple[ModelValidationIssue, ...]:
        return tuple(
            issue for issue in self.issues if issue.severity is EnumIssueSeverity.WARNING
        )

    @property
    def has_critical_issues(self) -> bool:
        return bool(self.critical_issues)


class ModelSpecificationCheck(BaseModel):
    """Result of checking a template against a pattern specification."""

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    pattern_name: str = Field(default="")
    compliant: bool
    missing_sections: tuple[str, ...] = Field(default=())
    word_count: int = Field(default=0, ge=0)
    meets_word_count: bool = True
    has_scoring: bool = True
    has_recommendations: bool = True
    issues: tuple[str, ...] = Field(default=())


__all__ = [
    "ModelComplianceChecks",
    "ModelSpecificationCheck",
    "ModelValidationIssue",
    "ModelValidationResult",
    "ModelValidationSuggestion",
]
