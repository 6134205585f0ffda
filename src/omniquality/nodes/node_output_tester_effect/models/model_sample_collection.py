# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Sample inputs and behavioural scenarios fed to the output tester."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omniquality.enums import EnumTestScenarioType
from omniquality.models import ModelPatternSpecification, ModelPatternTemplate


class ModelSampleInput(BaseModel):
    """One sample input.

    Attributes:
        sample_id: Identifier used in test names.
        content: Input text handed to the execution provider.
        description: Optional human description.
        expected_sections: Sections this sample's output must contain, on top
            of the specification's required sections.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    sample_id: str = Field(..., min_length=1)
    content: str = Field(default="")
    description: str = Field(default="")
    expected_sections: tuple[str, ...] = Field(default=())


class ModelTestScenario(BaseModel):
    """A behavioural scenario (edge case, error handling, ...)."""

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    name: str = Field(..., min_length=1)
    scenario_type: EnumTestScenarioType = EnumTestScenarioType.EDGE_CASE
    input_content: str = Field(default="")
    description: str = Field(default="")


class ModelSampleCollection(BaseModel):
    """The three test classes run for one pattern.

    ``validation_samples`` are graded exactly like ``samples``; they are kept
    separate because they are typically authored by a different source.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    samples: tuple[ModelSampleInput, ...] = Field(default=())
    test_scenarios: tuple[ModelTestScenario, ...] = Field(default=())
    validation_samples: tuple[ModelSampleInput, ...] = Field(default=())

    @property
    def total_count(self) -> int:
        return len(self.samples) + len(self.test_scenarios) + len(self.validation_samples)


class ModelOutputTestRequest(BaseModel):
    """One entry of a batch output-test run."""

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    template: ModelPatternTemplate
    samples: ModelSampleCollection = Field(default_factory=ModelSampleCollection)
    specification: ModelPatternSpecification = Field(
        default_factory=ModelPatternSpecification
    )


__all__ = [
    "ModelOutputTestRequest",
    "ModelSampleCollection",
    "ModelSampleInput",
    "ModelTestScenario",
]
