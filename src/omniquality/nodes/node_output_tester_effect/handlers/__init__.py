# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for OutputTesterEffect node."""

from omniquality.nodes.node_output_tester_effect.handlers.handler_output_scoring import (
    OutputGrade,
    actionability_score,
    extract_output_sections,
    grade_output,
    specificity_score,
)
from omniquality.nodes.node_output_tester_effect.handlers.handler_output_test import (
    run_batch_output_tests,
    run_pattern_output_tests,
)
from omniquality.nodes.node_output_tester_effect.handlers.handler_test_report import (
    generate_test_report,
)
from omniquality.nodes.node_output_tester_effect.handlers.protocol_pattern_executor import (
    ProtocolPatternExecutor,
    SimulatedPatternExecutor,
)

__all__ = [
    "OutputGrade",
    "ProtocolPatternExecutor",
    "SimulatedPatternExecutor",
    "actionability_score",
    "extract_output_sections",
    "generate_test_report",
    "grade_output",
    "run_batch_output_tests",
    "run_pattern_output_tests",
    "specificity_score",
]
