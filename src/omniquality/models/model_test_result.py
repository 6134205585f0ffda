# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Result of a single test (one sample, scenario, or category test)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ModelTestResult(BaseModel):
    """Outcome of one test.

    Attributes:
        test_name: Human-readable test name.
        passed: Whether the test met its pass rule.
        score: Points earned (0..max_score).
        max_score: Points available.
        details: Free-text summary.
        errors: Errors captured while running the test. Non-empty only on failure.
        warnings: Non-fatal findings.
        execution_time_ms: Wall-clock duration. Observational only.
        sections_expected: Number of output sections the test looked for.
        sections_matched: Number of those sections found.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    test_name: str = Field(..., min_length=1)
    passed: bool
    score: float = Field(..., ge=0.0)
    max_score: float = Field(default=100.0, gt=0.0)
    details: str = Field(default="")
    errors: tuple[str, ...] = Field(default=())
    warnings: tuple[str, ...] = Field(default=())
    execution_time_ms: float = Field(default=0.0, ge=0.0)
    sections_expected: int = Field(default=0, ge=0)
    sections_matched: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_consistency(self) -> ModelTestResult:
        if self.score > self.max_score:
            raise ValueError(
                f"score {self.score} exceeds max_score {self.max_score}"
            )
        if self.errors and self.passed:
            raise ValueError("a passing test cannot carry errors")
        if self.sections_matched > self.sections_expected:
            raise ValueError("sections_matched cannot exceed sections_expected")
        return self

    @property
    def percentage(self) -> float:
        """Score as a percentage of max_score."""
        return self.score / self.max_score * 100.0

    @property
    def section_match_ratio(self) -> float | None:
        """Fraction of expected sections found, or None when none were expected."""
        if self.sections_expected == 0:
            return None
        return self.sections_matched / self.sections_expected


__all__ = ["ModelTestResult"]
