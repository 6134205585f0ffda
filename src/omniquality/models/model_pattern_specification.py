# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pattern specification: declared expectations for a pattern's output."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelOutputSectionSpec(BaseModel):
    """One declared output section."""

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    name: str = Field(..., min_length=1)
    description: str = Field(default="")
    required: bool = Field(default=True)


class ModelValidationCriteria(BaseModel):
    """Criteria generated output must satisfy.

    Attributes:
        required_sections: Section names that must appear in every output.
        scoring_required: Output must contain a numeric score or rating.
        recommendations_required: Output must contain recommendations.
        minimum_word_count: Minimum words per generated output.
        quality_checks: Free-form labels of additional checks (informational).
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    required_sections: tuple[str, ...] = Field(default=())
    scoring_required: bool = Field(default=False)
    recommendations_required: bool = Field(default=False)
    minimum_word_count: int = Field(default=0, ge=0)
    quality_checks: tuple[str, ...] = Field(default=())


class ModelPatternSpecification(BaseModel):
    """Expectations supplied by the sample/specification builder."""

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    name: str = Field(default="")
    category: str = Field(default="")
    description: str = Field(default="")
    output_sections: tuple[ModelOutputSectionSpec, ...] = Field(default=())
    validation_criteria: ModelValidationCriteria = Field(
        default_factory=ModelValidationCriteria
    )

    @property
    def required_output_sections(self) -> tuple[str, ...]:
        """Required section names, declared sections first, deduplicated."""
        names = [section.name for section in self.output_sections if section.required]
        names.extend(self.validation_criteria.required_sections)
        return tuple(dict.fromkeys(names))


__all__ = [
    "ModelOutputSectionSpec",
    "ModelPatternSpecification",
    "ModelValidationCriteria",
]
