# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Output test suite result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from omniquality.enums import EnumSuiteHealth
from omniquality.models import ModelTestResult


class ModelPerformanceMetrics(BaseModel):
    """Timing and footprint metrics collected across a suite's executions.

    ``estimated_memory_mb`` is a heuristic peak per execution; None when the
    producer did not estimate it.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    average_execution_time_ms: float = Field(..., ge=0.0)
    slowest_test: str = Field(default="")
    slowest_execution_time_ms: float = Field(default=0.0, ge=0.0)
    fastest_test: str = Field(default="")
    fastest_execution_time_ms: float = Field(default=0.0, ge=0.0)
    throughput_per_second: float = Field(default=0.0, ge=0.0)
    estimated_memory_mb: float | None = Field(default=None, ge=0.0)


class ModelTestSuiteSummary(BaseModel):
    """Categorical roll-up of a suite."""

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    overall_health: EnumSuiteHealth
    critical_issues: tuple[str, ...] = Field(default=())
    recommendations: tuple[str, ...] = Field(default=())


class ModelTestSuite(BaseModel):
    """Aggregate of every sample, scenario, and validation-sample test.

    Attributes:
        pattern_name: Pattern under test.
        total_tests: Samples + scenarios + validation samples.
        passed_tests: Passing entries across all three classes.
        failed_tests: ``total_tests - passed_tests``.
        average_score: Mean per-entry score (0-100), 0 for an empty suite.
        execution_time_ms: Wall-clock time for the whole run. Reporting only.
        results: Per-entry results in run order.
        summary: Health roll-up.
        performance: Timing metrics, None when collection is disabled.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    pattern_name: str = Field(default="")
    total_tests: int = Field(..., ge=0)
    passed_tests: int = Field(..., ge=0)
    failed_tests: int = Field(..., ge=0)
    average_score: float = Field(..., ge=0.0, le=100.0)
    execution_time_ms: float = Field(default=0.0, ge=0.0)
    results: tuple[ModelTestResult, ...] = Field(default=())
    summary: ModelTestSuiteSummary
    performance: ModelPerformanceMetrics | None = None

    @model_validator(mode="after")
    def _check_counts(self) -> ModelTestSuite:
        if self.passed_tests > self.total_tests:
            raise ValueError("passed_tests cannot exceed total_tests")
        if self.passed_tests + self.failed_tests != self.total_tests:
            raise ValueError("passed_tests + failed_tests must equal total_tests")
        if len(self.results) != self.total_tests:
            raise ValueError("results must contain exactly total_tests entries")
        return self

    @property
    def pass_rate(self) -> float:
        """Fraction of passing entries (0.0 for an empty suite)."""
        return self.passed_tests / self.total_tests if self.total_tests else 0.0


__all__ = [
    "ModelPerformanceMetrics",
    "ModelTestSuite",
    "ModelTestSuiteSummary",
]
