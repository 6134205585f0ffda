# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Statistical text probes shared by validation, testing, and assessment.

These are structural proxies only (word counts, keyword presence). Nothing
here interprets the meaning of pattern content.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_SCORING_RE = re.compile(
    r"\d+\s*/\s*\d+|\d+\s*%|\(1-10\)|0-100|\bscor(?:e|es|ing)\b|\brat(?:e|ing|ings)\b",
    re.IGNORECASE,
)
_PRIORITY_RE = re.compile(
    r"\bpriorit(?:y|ies|ize|ise)\b|HIGH\s*/\s*MEDIUM\s*/\s*LOW|\b(?:high|medium|low)\s+priority\b",
    re.IGNORECASE,
)
_RECOMMENDATION_RE = re.compile(
    r"\brecommend(?:s|ed|ation|ations)?\b|\bsuggest(?:s|ed|ion|ions)?\b",
    re.IGNORECASE,
)
_EXAMPLE_RE = re.compile(r"\bexamples?\b|\bfor instance\b|\be\.g\.", re.IGNORECASE)


def count_words(*texts: str) -> int:
    """Count whitespace-separated words across all ``texts``."""
    return sum(len(text.split()) for text in texts if text)


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """Case-insensitive check for any of ``keywords`` in ``text``."""
    lowered = text.lower()
    return any(keyword.lower() in lowered for keyword in keywords)


def has_scoring_language(text: str) -> bool:
    """True if ``text`` mentions a numeric scale, percentage, score, or rating."""
    return bool(_SCORING_RE.search(text))


def has_priority_language(text: str) -> bool:
    """True if ``text`` mentions priorities or HIGH/MEDIUM/LOW labels."""
    return bool(_PRIORITY_RE.search(text))


def has_recommendation_language(text: str) -> bool:
    return bool(_RECOMMENDATION_RE.search(text))


def has_example_language(text: str) -> bool:
    return bool(_EXAMPLE_RE.search(text))


def section_present(section: str, candidates: Iterable[str]) -> bool:
    """True if ``section`` is a case-insensitive substring of any candidate."""
    needle = section.strip().lower()
    if not needle:
        return True
    return any(needle in candidate.lower() for candidate in candidates)


__all__ = [
    "contains_any",
    "count_words",
    "has_example_language",
    "has_priority_language",
    "has_recommendation_language",
    "has_scoring_language",
    "section_present",
]
