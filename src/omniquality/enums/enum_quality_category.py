# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Closed set of quality dimensions scored for every pattern.

Six dimensions follow the ISO/IEC 25010 product-quality vocabulary; the
remaining two fold in the pipeline's own stages (structural validation and
output conformance). The set is exhaustive: every category-score mapping in
the package must carry exactly these eight keys.
"""

from enum import Enum


class EnumQualityCategory(str, Enum):
    """Quality dimension identifiers.

    Attributes:
        FUNCTIONALITY: Does the pattern produce the output it promises.
        RELIABILITY: How consistently its tests pass.
        USABILITY: How easy the pattern is to read and apply.
        EFFICIENCY: Execution time against the configured budget.
        MAINTAINABILITY: Structural completeness of the template.
        PORTABILITY: How well the pattern fits other tooling.
        VALIDATION: Structural policy conformance from the validator.
        CONFORMANCE: Match between generated and declared output sections.
    """

    FUNCTIONALITY = "functionality"
    RELIABILITY = "reliability"
    USABILITY = "usability"
    EFFICIENCY = "efficiency"
    MAINTAINABILITY = "maintainability"
    PORTABILITY = "portability"
    VALIDATION = "validation"
    CONFORMANCE = "conformance"


__all__ = ["EnumQualityCategory"]
