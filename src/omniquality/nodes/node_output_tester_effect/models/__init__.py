# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for OutputTesterEffect node."""

from omniquality.nodes.node_output_tester_effect.models.model_output_test_config import (
    ModelOutputTestConfig,
    OutputTesterSettings,
)
from omniquality.nodes.node_output_tester_effect.models.model_sample_collection import (
    ModelOutputTestRequest,
    ModelSampleCollection,
    ModelSampleInput,
    ModelTestScenario,
)
from omniquality.nodes.node_output_tester_effect.models.model_test_suite import (
    ModelPerformanceMetrics,
    ModelTestSuite,
    ModelTestSuiteSummary,
)

__all__ = [
    "ModelOutputTestConfig",
    "ModelOutputTestRequest",
    "ModelPerformanceMetrics",
    "ModelSampleCollection",
    "ModelSampleInput",
    "ModelTestScenario",
    "ModelTestSuite",
    "ModelTestSuiteSummary",
    "OutputTesterSettings",
]
