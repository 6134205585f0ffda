# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Validation helpers for per-category mappings.

Category maps are keyed by ``EnumQualityCategory`` and must be exhaustive:
a report with seven categories is as invalid as one with a misspelt key.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar

from omniquality.enums import EnumQualityCategory

_V = TypeVar("_V")


def require_all_categories(
    value: Mapping[EnumQualityCategory, _V],
) -> dict[EnumQualityCategory, _V]:
    """Ensure ``value`` has exactly one entry per quality category.

    Returns:
        The mapping, re-ordered to enum declaration order.

    Raises:
        ValueError: If any category is missing.
    """
    missing = [category.value for category in EnumQualityCategory if category not in value]
    if missing:
        raise ValueError(f"missing quality categories: {', '.join(missing)}")
    return {category: value[category] for category in EnumQualityCategory}


def require_score_range(
    value: Mapping[EnumQualityCategory, float],
) -> dict[EnumQualityCategory, float]:
    """Ensure every category score lies within [0, 100]."""
    out_of_range = {
        category.value: score
        for category, score in value.items()
        if not 0.0 <= score <= 100.0
    }
    if out_of_range:
        raise ValueError(f"category scores out of range [0, 100]: {out_of_range}")
    return dict(value)


__all__ = ["require_all_categories", "require_score_range"]
