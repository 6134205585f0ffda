# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for PatternValidateCompute node."""

from omniquality.nodes.node_pattern_validate_compute.handlers.handler_validate import (
    validate_against_specification,
    validate_pattern,
    validate_patterns,
)
from omniquality.nodes.node_pattern_validate_compute.handlers.handler_validation_report import (
    generate_validation_report,
)

__all__ = [
    "generate_validation_report",
    "validate_against_specification",
    "validate_pattern",
    "validate_patterns",
]
