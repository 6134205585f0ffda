# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Portfolio views and the export payload of the test suite orchestrator."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from omniquality.enums import EnumQualityGrade
from omniquality.models import ModelPatternTestSuiteResult


class ModelPatternMetrics(BaseModel):
    """Category percentages of one pattern's latest suite result."""

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    syntax_score: float = Field(default=0.0, ge=0.0, le=100.0)
    structure_score: float = Field(default=0.0, ge=0.0, le=100.0)
    output_score: float = Field(default=0.0, ge=0.0, le=100.0)
    integration_score: float = Field(default=0.0, ge=0.0, le=100.0)
    performance_score: float = Field(default=0.0, ge=0.0, le=100.0)
    overall_quality: float = Field(default=0.0, ge=0.0, le=100.0)


class ModelPatternRanking(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    pattern_name: str
    score: float
    grade: EnumQualityGrade


class ModelTestResultsExport(BaseModel):
    """Portable snapshot of every stored suite result."""

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)

    exported_at: datetime
    total_patterns: int = Field(default=0, ge=0)
    results: dict[str, ModelPatternTestSuiteResult] = Field(default_factory=dict)


__all__ = ["ModelPatternMetrics", "ModelPatternRanking", "ModelTestResultsExport"]
