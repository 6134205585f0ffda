# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Output tester configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ModelOutputTestConfig(BaseModel):
    """Configuration for grading generated outputs.

    Attributes:
        timeout_ms: Per-execution timeout. An execution exceeding it becomes a
            failed test with a timeout error.
        enable_performance_metrics: Collect timing metrics for the suite.
        pass_threshold: Minimum score for samples and validation samples.
        scenario_pass_threshold: Minimum score for behavioural scenarios.
        max_recommendations: Cap on suite-level recommendations.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    timeout_ms: float = Field(default=30000.0, gt=0.0)
    enable_performance_metrics: bool = Field(default=True)
    pass_threshold: float = Field(default=70.0, ge=0.0, le=100.0)
    scenario_pass_threshold: float = Field(default=60.0, ge=0.0, le=100.0)
    max_recommendations: int = Field(default=5, ge=0)


class OutputTesterSettings(BaseSettings):
    """Output tester configuration loaded from the environment.

    Environment variables:
        PATTERN_OUTPUT_TEST_TIMEOUT_MS: float (default 30000)
        PATTERN_OUTPUT_TEST_ENABLE_PERFORMANCE_METRICS: bool (default True)
        PATTERN_OUTPUT_TEST_PASS_THRESHOLD: float (default 70)
        PATTERN_OUTPUT_TEST_SCENARIO_PASS_THRESHOLD: float (default 60)
        PATTERN_OUTPUT_TEST_MAX_RECOMMENDATIONS: int (default 5)
    """

    model_config = SettingsConfigDict(
        env_prefix="PATTERN_OUTPUT_TEST_",
        extra="ignore",
    )

    timeout_ms: float = Field(default=30000.0, gt=0.0)
    enable_performance_metrics: bool = Field(default=True)
    pass_threshold: float = Field(default=70.0, ge=0.0, le=100.0)
    scenario_pass_threshold: float = Field(default=60.0, ge=0.0, le=100.0)
    max_recommendations: int = Field(default=5, ge=0)

    def to_config(self) -> ModelOutputTestConfig:
        """Convert settings to a frozen ModelOutputTestConfig instance."""
        return ModelOutputTestConfig(
            timeout_ms=self.timeout_ms,
            enable_performance_metrics=self.enable_performance_metrics,
            pass_threshold=self.pass_threshold,
            scenario_pass_threshold=self.scenario_pass_threshold,
            max_recommendations=self.max_recommendations,
        )


__all__ = ["ModelOutputTestConfig", "OutputTesterSettings"]
