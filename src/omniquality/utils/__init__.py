# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Utility modules for omniquality.

Available modules:
- util_text_metrics: word counts and keyword probes
- util_config_loader: YAML configuration loading (import by full path)
"""

from omniquality.utils.util_text_metrics import (
    contains_any,
    count_words,
    has_example_language,
    has_priority_language,
    has_recommendation_language,
    has_scoring_language,
    section_present,
)

__all__ = [
    "contains_any",
    "count_words",
    "has_example_language",
    "has_priority_language",
    "has_recommendation_language",
    "has_scoring_language",
    "section_present",
]
