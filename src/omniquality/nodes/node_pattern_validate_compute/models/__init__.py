# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for PatternValidateCompute node."""

from omniquality.nodes.node_pattern_validate_compute.models.model_validation_result import (
    ModelComplianceChecks,
    ModelSpecificationCheck,
    ModelValidationIssue,
    ModelValidationResult,
    ModelValidationSuggestion,
)
from omniquality.nodes.node_pattern_validate_compute.models.model_validator_config import (
    DEFAULT_REQUIRED_SECTIONS,
    ModelValidatorConfig,
    ValidatorSettings,
)

__all__ = [
    "DEFAULT_REQUIRED_SECTIONS",
    "ModelComplianceChecks",
    "ModelSpecificationCheck",
    "ModelValidationIssue",
    "ModelValidationResult",
    "ModelValidationSuggestion",
    "ModelValidatorConfig",
    "ValidatorSettings",
]
