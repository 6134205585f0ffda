# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for PatternTestSuiteOrchestrator node."""

from omniquality.nodes.node_pattern_test_suite_orchestrator.handlers.handler_category_checks import (
    estimate_memory_bytes,
    execution_template,
    run_integration_checks,
    run_output_checks,
    run_performance_checks,
    run_structure_checks,
    run_syntax_checks,
)
from omniquality.nodes.node_pattern_test_suite_orchestrator.handlers.handler_suite_report import (
    generate_suite_report,
)
from omniquality.nodes.node_pattern_test_suite_orchestrator.handlers.handler_suite_scoring import (
    calculate_suite_results,
    category_weight,
    failed_suite_result,
    run_test_suite,
    suite_recommendations,
)

__all__ = [
    "calculate_suite_results",
    "category_weight",
    "estimate_memory_bytes",
    "execution_template",
    "failed_suite_result",
    "generate_suite_report",
    "run_integration_checks",
    "run_output_checks",
    "run_performance_checks",
    "run_structure_checks",
    "run_syntax_checks",
    "run_test_suite",
    "suite_recommendations",
]
