# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Orchestrated five-category test suite result for one pattern.

Produced by the test suite orchestrator and consumed by the quality system,
which projects the named category tests onto quality categories.
"""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, model_validator

from omniquality.enums import EnumQualityGrade
from omniquality.models.model_test_result import ModelTestResult

SYNTAX_TESTS: Final[str] = "Syntax Tests"
STRUCTURE_TESTS: Final[str] = "Structure Tests"
OUTPUT_TESTS: Final[str] = "Output Tests"
INTEGRATION_TESTS: Final[str] = "Integration Tests"
PERFORMANCE_TESTS: Final[str] = "Performance Tests"
SUITE_EXECUTION: Final[str] = "Test Suite Execution"

CATEGORY_TEST_NAMES: Final[tuple[str, ...]] = (
    SYNTAX_TESTS,
    STRUCTURE_TESTS,
    OUTPUT_TESTS,
    INTEGRATION_TESTS,
    PERFORMANCE_TESTS,
)


class ModelPatternTestSuiteResult(BaseModel):
    """Aggregated result of the five category tests for one pattern.

    Attributes:
        pattern_name: Pattern under test.
        overall_score: Weighted score (0-100).
        max_score: Sum of weights scaled to 100.
        pass_rate: Percentage of category tests that passed.
        total_tests: Number of category tests run.
        passed_tests: Number that passed.
        failed_tests: Number that failed.
        execution_time_ms: Wall-clock time for the whole suite.
        test_results: Per-category results in run order.
        quality_grade: Letter grade for ``overall_score``.
        recommendations: Improvement advice derived from the results.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    pattern_name: str = Field(..., min_length=1)
    overall_score: float = Field(..., ge=0.0, le=100.0)
    max_score: float = Field(default=100.0, ge=0.0)
    pass_rate: float = Field(..., ge=0.0, le=100.0)
    total_tests: int = Field(..., ge=0)
    passed_tests: int = Field(..., ge=0)
    failed_tests: int = Field(..., ge=0)
    execution_time_ms: float = Field(default=0.0, ge=0.0)
    test_results: tuple[ModelTestResult, ...] = Field(default=())
    quality_grade: EnumQualityGrade
    recommendations: tuple[str, ...] = Field(default=())

    @model_validator(mode="after")
    def _check_counts(self) -> ModelPatternTestSuiteResult:
        if self.passed_tests > self.total_tests:
            raise ValueError("passed_tests cannot exceed total_tests")
        return self

    def get_test(self, test_name: str) -> ModelTestResult | None:
        """Return the result named ``test_name``, if it ran."""
        for result in self.test_results:
            if result.test_name == test_name:
                return result
        return None

    def test_percentage(self, test_name: str) -> float:
        """Return ``test_name``'s score as a percentage, 0.0 if it did not run."""
        result = self.get_test(test_name)
        return result.percentage if result is not None else 0.0


__all__ = [
    "CATEGORY_TEST_NAMES",
    "INTEGRATION_TESTS",
    "ModelPatternTestSuiteResult",
    "OUTPUT_TESTS",
    "PERFORMANCE_TESTS",
    "STRUCTURE_TESTS",
    "SUITE_EXECUTION",
    "SYNTAX_TESTS",
]
