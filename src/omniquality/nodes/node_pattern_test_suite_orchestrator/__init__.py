# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""PatternTestSuiteOrchestrator node package.

Runs syntax, structure, output, integration and performance tests over a
set of registered patterns and renders a consolidated markdown report.
"""

from omniquality.nodes.node_pattern_test_suite_orchestrator.handlers import (
    calculate_suite_results,
    generate_suite_report,
    run_test_suite,
)
from omniquality.nodes.node_pattern_test_suite_orchestrator.models import (
    ModelIntegrationProfile,
    ModelPatternMetrics,
    ModelPatternRanking,
    ModelPatternTestConfig,
    ModelScoringCriteria,
    ModelSuitePerformanceThresholds,
)
from omniquality.nodes.node_pattern_test_suite_orchestrator.node import (
    PatternTestSuiteOrchestrator,
)

__all__ = [
    "ModelIntegrationProfile",
    "ModelPatternMetrics",
    "ModelPatternRanking",
    "ModelPatternTestConfig",
    "ModelScoringCriteria",
    "ModelSuitePerformanceThresholds",
    "PatternTestSuiteOrchestrator",
    "calculate_suite_results",
    "generate_suite_report",
    "run_test_suite",
]
