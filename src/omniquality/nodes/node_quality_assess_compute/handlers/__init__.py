# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for QualityAssessCompute node."""

from omniquality.nodes.node_quality_assess_compute.handlers.handler_category_projections import (
    project_category_scores,
)
from omniquality.nodes.node_quality_assess_compute.handlers.handler_improvement_strategies import (
    IMPROVEMENT_STRATEGIES,
    RESOURCES,
    resources_for,
    strategies_for,
)
from omniquality.nodes.node_quality_assess_compute.handlers.handler_quality_assess import (
    assess_multiple_patterns,
    assess_quality,
    ensure_standards_compliance,
)
from omniquality.nodes.node_quality_assess_compute.handlers.handler_quality_report import (
    generate_quality_report,
)
from omniquality.nodes.node_quality_assess_compute.handlers.handler_quality_scoring import (
    build_certification_status,
    clamp_score,
    shortfall_recommendations,
    standards_compliance,
    weighted_quality_score,
)

__all__ = [
    "IMPROVEMENT_STRATEGIES",
    "RESOURCES",
    "assess_multiple_patterns",
    "assess_quality",
    "build_certification_status",
    "clamp_score",
    "ensure_standards_compliance",
    "generate_quality_report",
    "project_category_scores",
    "resources_for",
    "shortfall_recommendations",
    "standards_compliance",
    "strategies_for",
    "weighted_quality_score",
]
