# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Direction of a quality score relative to its own history."""

from enum import Enum


class EnumQualityTrend(str, Enum):
    """Quality trend label.

    The first assessment recorded for a pattern is always STABLE because
    there is no baseline to compare against.
    """

    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


__all__ = ["EnumQualityTrend"]
