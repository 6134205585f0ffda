# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""QualityAssessCompute node package.

Merges a validation result and an output test suite into a weighted,
eight-category quality report with a certification decision.
"""

from omniquality.nodes.node_quality_assess_compute.handlers import (
    assess_multiple_patterns,
    assess_quality,
    ensure_standards_compliance,
    generate_quality_report,
)
from omniquality.nodes.node_quality_assess_compute.models import (
    ModelBatchAssessment,
    ModelQualityConfig,
    ModelQualityReport,
    ModelStandardsComplianceSummary,
    QualityAssessorSettings,
)

__all__ = [
    "ModelBatchAssessment",
    "ModelQualityConfig",
    "ModelQualityReport",
    "ModelStandardsComplianceSummary",
    "QualityAssessorSettings",
    "assess_multiple_patterns",
    "assess_quality",
    "ensure_standards_compliance",
    "generate_quality_report",
]
