# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Stateful quality system: assessment history, portfolio metrics, thresholds.

    from omniquality.quality_system import QualityAssuranceSystem

    system = QualityAssuranceSystem()
    system.assess_pattern_quality("extract_wisdom", suite_result, content)
    metrics = system.get_quality_metrics()
"""

from omniquality.quality_system.heuristics import (
    build_assessment,
    project_suite_scores,
    quality_trend,
)
from omniquality.quality_system.models import (
    EXPORT_SCHEMA_VERSION,
    ModelQualityActionItem,
    ModelQualityAssessment,
    ModelQualityExport,
    ModelQualityMetrics,
    ModelQualityThresholds,
    ModelQualityTrendAnalysis,
)
from omniquality.quality_system.report import (
    action_plan,
    render_quality_system_report,
    system_recommendations,
)
from omniquality.quality_system.system import QualityAssuranceSystem

__all__ = [
    "EXPORT_SCHEMA_VERSION",
    "ModelQualityActionItem",
    "ModelQualityAssessment",
    "ModelQualityExport",
    "ModelQualityMetrics",
    "ModelQualityThresholds",
    "ModelQualityTrendAnalysis",
    "QualityAssuranceSystem",
    "action_plan",
    "build_assessment",
    "project_suite_scores",
    "quality_trend",
    "render_quality_system_report",
    "system_recommendations",
]
