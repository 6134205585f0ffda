# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Severity levels for validation issues."""

from enum import Enum


class EnumIssueSeverity(str, Enum):
    """Severity attached to every validation issue.

    Rules:
        - CRITICAL: blocks validity and certification regardless of score.
        - WARNING: deducts score but does not block on its own. Escalated to
          CRITICAL when the validator runs in strict mode.
        - INFO: advisory finding with a small or zero deduction.

    Example:
        >>> EnumIssueSeverity("critical") is EnumIssueSeverity.CRITICAL
        True
    """

    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


__all__ = ["EnumIssueSeverity"]
