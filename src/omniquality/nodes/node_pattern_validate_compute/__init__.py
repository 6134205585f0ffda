# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""PatternValidateCompute node package.

Pure structural validation of pattern templates: deduction-based scoring,
informational compliance checks, and best-practice suggestions.
"""

from omniquality.nodes.node_pattern_validate_compute.handlers import (
    generate_validation_report,
    validate_against_specification,
    validate_pattern,
    validate_patterns,
)
from omniquality.nodes.node_pattern_validate_compute.models import (
    ModelValidationResult,
    ModelValidatorConfig,
    ValidatorSettings,
)

__all__ = [
    "ModelValidationResult",
    "ModelValidatorConfig",
    "ValidatorSettings",
    "generate_validation_report",
    "validate_against_specification",
    "validate_pattern",
    "validate_patterns",
]
