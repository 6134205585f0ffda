# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Per-pattern configuration for the test suite orchestrator."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_REQUIRED_PATTERN_SECTIONS: Final[tuple[str, ...]] = (
    "# IDENTITY and PURPOSE",
    "# STEPS",
    "# OUTPUT",
    "# OUTPUT INSTRUCTIONS",
)

_WEIGHT_TOLERANCE = 1e-6


class ModelScoringCriteria(BaseModel):
    """Category weights for the overall suite score.

    The five weights must sum to 1.0; a configuration that does not is
    rejected at construction time.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    syntax_weight: float = Field(default=0.2, ge=0.0, le=1.0)
    structure_weight: float = Field(default=0.25, ge=0.0, le=1.0)
    output_weight: float = Field(default=0.3, ge=0.0, le=1.0)
    integration_weight: float = Field(default=0.15, ge=0.0, le=1.0)
    performance_weight: float = Field(default=0.1, ge=0.0, le=1.0)
    min_passing_score: float = Field(default=70.0, ge=0.0, le=100.0)

    @model_validator(mode="after")
    def _check_weight_sum(self) -> ModelScoringCriteria:
        total = (
            self.syntax_weight
            + self.structure_weight
            + self.output_weight
            + self.integration_weight
            + self.performance_weight
        )
        if abs(total - 1.0) > _WEIGHT_TOLERANCE:
            raise ValueError(f"scoring weights must sum to 1.0, got {total:.6f}")
        return self


class ModelSuitePerformanceThresholds(BaseModel):
    """Performance limits for the orchestrated performance test."""

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    max_execution_time_ms: float = Field(default=5000.0, gt=0.0)
    max_memory_bytes: int = Field(default=100 * 1024 * 1024, gt=0)
    min_throughput: float = Field(default=10.0, ge=0.0)


class ModelIntegrationProfile(BaseModel):
    """Declared compatibility with downstream systems.

    Attributes:
        registry_compatible: Pattern can be published to the registry.
        export_compatible: Pattern can be exported.
        chaining_compatible: Pattern can be chained with other patterns.
        command_compatible: Pattern's command structure is usable as-is.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    registry_compatible: bool = True
    export_compatible: bool = True
    chaining_compatible: bool = True
    command_compatible: bool = True


class ModelPatternTestConfig(BaseModel):
    """Everything the orchestrator needs to test one pattern.

    Attributes:
        pattern_name: Registry key.
        pattern_content: Raw pattern markdown.
        sample_inputs: Inputs executed by the output and performance tests.
        expected_output_structure: Section labels every output must contain.
        required_sections: Headings the pattern text must contain.
        scoring_criteria: Category weights.
        performance_thresholds: Performance limits.
        integration: Downstream compatibility flags.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    pattern_name: str = Field(..., min_length=1)
    pattern_content: str = Field(default="")
    sample_inputs: tuple[str, ...] = Field(default=())
    expected_output_structure: tuple[str, ...] = Field(default=())
    required_sections: tuple[str, ...] = Field(
        default=DEFAULT_REQUIRED_PATTERN_SECTIONS
    )
    scoring_criteria: ModelScoringCriteria = Field(default_factory=ModelScoringCriteria)
    performance_thresholds: ModelSuitePerformanceThresholds = Field(
        default_factory=ModelSuitePerformanceThresholds
    )
    integration: ModelIntegrationProfile = Field(default_factory=ModelIntegrationProfile)


__all__ = [
    "DEFAULT_REQUIRED_PATTERN_SECTIONS",
    "ModelIntegrationProfile",
    "ModelPatternTestConfig",
    "ModelScoringCriteria",
    "ModelSuitePerformanceThresholds",
]
