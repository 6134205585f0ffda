# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Kinds of behavioural test scenarios run by the output tester."""

from enum import Enum


class EnumTestScenarioType(str, Enum):
    EDGE_CASE = "edge_case"
    ERROR_HANDLING = "error_handling"
    MINIMAL_CONTENT = "minimal_content"
    COMPREHENSIVE = "comprehensive"


__all__ = ["EnumTestScenarioType"]
