# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Categorical roll-up of an output test suite."""

from enum import Enum


class EnumSuiteHealth(str, Enum):
    """Overall health of a test suite.

    Bands (checked top-down):
        EXCELLENT: average >= 85, pass rate >= 0.9, no critical issues
        GOOD:      average >= 70, pass rate >= 0.8, no critical issues
        FAIR:      average >= 60, pass rate >= 0.6
        POOR:      anything else
    """

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


__all__ = ["EnumSuiteHealth"]
