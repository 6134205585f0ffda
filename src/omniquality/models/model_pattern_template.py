# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pattern template: the unit under assessment.

Produced by an upstream pattern analyzer; the pipeline only reads it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelPatternStructure(BaseModel):
    """Structural fields extracted from a pattern.

    Attributes:
        identity: The "IDENTITY" prose (who the model should act as).
        purpose: The "PURPOSE" prose (what the pattern achieves).
        steps: Ordered processing steps.
        output_sections: Declared output section names.
        output_instructions: Output-formatting instructions.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    identity: str = Field(default="", description="Identity prose")
    purpose: str = Field(default="", description="Purpose prose")
    steps: tuple[str, ...] = Field(default=(), description="Ordered steps")
    output_sections: tuple[str, ...] = Field(
        default=(), description="Declared output section names"
    )
    output_instructions: tuple[str, ...] = Field(
        default=(), description="Output-formatting instructions"
    )


class ModelPatternTemplate(BaseModel):
    """A candidate pattern with its declared metadata.

    Attributes:
        name: Pattern identifier (e.g. ``analyze_wireframe_flow``).
        category: Free-form category label.
        description: One-paragraph description of the pattern.
        structure: Extracted structural fields.
        best_practices: Declared best-practice references.
        sample_inputs: Declared sample inputs.
        expected_output_format: Declared output format description.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    name: str = Field(default="", description="Pattern identifier")
    category: str = Field(default="", description="Category label")
    description: str = Field(default="", description="Pattern description")
    structure: ModelPatternStructure = Field(default_factory=ModelPatternStructure)
    best_practices: tuple[str, ...] = Field(default=())
    sample_inputs: tuple[str, ...] = Field(default=())
    expected_output_format: str = Field(default="")


__all__ = ["ModelPatternStructure", "ModelPatternTemplate"]
