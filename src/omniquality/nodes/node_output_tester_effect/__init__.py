# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""OutputTesterEffect node package.

Runs a pattern's samples through an injected execution provider and grades
the generated output for structural conformance.
"""

from omniquality.nodes.node_output_tester_effect.handlers import (
    ProtocolPatternExecutor,
    SimulatedPatternExecutor,
    generate_test_report,
    run_batch_output_tests,
    run_pattern_output_tests,
)
from omniquality.nodes.node_output_tester_effect.models import (
    ModelOutputTestConfig,
    ModelSampleCollection,
    ModelTestSuite,
    OutputTesterSettings,
)

__all__ = [
    "ModelOutputTestConfig",
    "ModelSampleCollection",
    "ModelTestSuite",
    "OutputTesterSettings",
    "ProtocolPatternExecutor",
    "SimulatedPatternExecutor",
    "generate_test_report",
    "run_batch_output_tests",
    "run_pattern_output_tests",
]
