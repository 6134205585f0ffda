# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pattern quality nodes.

Import from the specific node package:

    from omniquality.nodes.node_pattern_validate_compute import validate_pattern
    from omniquality.nodes.node_output_tester_effect import run_pattern_output_tests
    from omniquality.nodes.node_quality_assess_compute import assess_quality
    from omniquality.nodes.node_pattern_test_suite_orchestrator import (
        PatternTestSuiteOrchestrator,
    )
"""

__all__: list[str] = []
