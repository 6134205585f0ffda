# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for QualityAssessCompute node."""

from omniquality.nodes.node_quality_assess_compute.models.model_quality_config import (
    ModelQualityConfig,
    QualityAssessorSettings,
)
from omniquality.nodes.node_quality_assess_compute.models.model_quality_report import (
    ModelBatchAssessment,
    ModelQualityReport,
    ModelStandardsComplianceSummary,
)

__all__ = [
    "ModelBatchAssessment",
    "ModelQualityConfig",
    "ModelQualityReport",
    "ModelStandardsComplianceSummary",
    "QualityAssessorSettings",
]
