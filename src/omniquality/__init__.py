# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""OmniQuality - validation and quality certification for prompt patterns.

The pipeline runs in five stages, each usable on its own:

- validate a pattern template's structure
- test its generated outputs through an injected executor
- assess quality across eight categories and certify it
- keep assessment history and portfolio metrics
- orchestrate weighted test suites across many patterns

Quick Start - Structural Validation:
    from omniquality import validate_pattern

    result = validate_pattern(template)
    if result.is_valid:
        print(result.score)
"""

from omniquality.exceptions import (
    PatternQualityError,
    QualityConfigurationError,
    QualityDataImportError,
    UnknownPatternError,
)
from omniquality.models import (
    ModelPatternSpecification,
    ModelPatternStructure,
    ModelPatternTemplate,
)
from omniquality.nodes.node_output_tester_effect import (
    ProtocolPatternExecutor,
    SimulatedPatternExecutor,
    run_pattern_output_tests,
)
from omniquality.nodes.node_pattern_test_suite_orchestrator import (
    ModelPatternTestConfig,
    PatternTestSuiteOrchestrator,
)
from omniquality.nodes.node_pattern_validate_compute import validate_pattern
from omniquality.nodes.node_quality_assess_compute import assess_quality
from omniquality.quality_system import (
    ModelQualityThresholds,
    QualityAssuranceSystem,
)

__version__ = "0.1.0"

__all__ = [
    # Exceptions
    "PatternQualityError",
    "QualityConfigurationError",
    "QualityDataImportError",
    "UnknownPatternError",
    # Types
    "ModelPatternSpecification",
    "ModelPatternStructure",
    "ModelPatternTemplate",
    "ModelPatternTestConfig",
    "ModelQualityThresholds",
    "ProtocolPatternExecutor",
    "SimulatedPatternExecutor",
    # Main API
    "PatternTestSuiteOrchestrator",
    "QualityAssuranceSystem",
    "assess_quality",
    "run_pattern_output_tests",
    "validate_pattern",
]
