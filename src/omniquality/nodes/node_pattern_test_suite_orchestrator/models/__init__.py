# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for PatternTestSuiteOrchestrator node."""

from omniquality.nodes.node_pattern_test_suite_orchestrator.models.model_pattern_test_config import (
    DEFAULT_REQUIRED_PATTERN_SECTIONS,
    ModelIntegrationProfile,
    ModelPatternTestConfig,
    ModelScoringCriteria,
    ModelSuitePerformanceThresholds,
)
from omniquality.nodes.node_pattern_test_suite_orchestrator.models.model_suite_outputs import (
    ModelPatternMetrics,
    ModelPatternRanking,
    ModelTestResultsExport,
)

__all__ = [
    "DEFAULT_REQUIRED_PATTERN_SECTIONS",
    "ModelIntegrationProfile",
    "ModelPatternMetrics",
    "ModelPatternRanking",
    "ModelPatternTestConfig",
    "ModelScoringCriteria",
    "ModelSuitePerformanceThresholds",
    "ModelTestResultsExport",
]
