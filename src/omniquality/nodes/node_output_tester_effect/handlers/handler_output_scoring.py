# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Grading of one generated output. Pure functions, no I/O.

Score composition (0-100):

    section match ratio          x 40
    content-quality flag ratio   x 30
    format-compliance flag ratio x 20
    mean(specificity, actionability) x 0.1

Content-quality flags: examples, recommendations, quantitative assessments,
priority levels, professional tone, appropriate length.
Format-compliance flags: markdown structure, section labels, consistent
headings, scoring (when required), word count.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from omniquality.models import ModelPatternTemplate, ModelValidationCriteria
from omniquality.utils.util_text_metrics import (
    count_words,
    has_recommendation_language,
    has_scoring_language,
    section_present,
)

_SECTION_WEIGHT = 40.0
_CONTENT_WEIGHT = 30.0
_FORMAT_WEIGHT = 20.0
_HEURISTIC_WEIGHT = 0.1

_SPECIFICITY_BASE = 50
_ACTIONABILITY_BASE = 40
_ACTION_WORD_BONUS = 8
_DETAILED_OUTPUT_CHARS = 500
_PROFESSIONAL_MIN_CHARS = 100

_HEADING_RE = re.compile(r"^\s*#{1,6}\s+(.+?)\s*$", re.MULTILINE)
_LABEL_RE = re.compile(r"^\s*([A-Z][A-Z0-9 &/\-]{2,}):", re.MULTILINE)
_QUANTITATIVE_RE = re.compile(r"\d+\s*/\s*\d+|\d+\s*%|\d+\.\d+")
_PRIORITY_LABEL_RE = re.compile(r"\b(?:HIGH|MEDIUM|LOW)\b")
_EXAMPLE_RE = re.compile(r"example|specific|instance", re.IGNORECASE)
_IMPROVEMENT_RE = re.compile(r"recommend|improve|optimi[sz]e", re.IGNORECASE)
_INFORMAL_WORDS: tuple[str, ...] = ("awesome", "terrible")
_ACTION_WORDS: tuple[str, ...] = (
    "improve",
    "optimize",
    "add",
    "remove",
    "change",
    "implement",
    "test",
    "consider",
)


@dataclass(frozen=True)
class OutputGrade:
    """Grading breakdown for one generated output."""

    score: float
    sections_expected: int
    sections_matched: int
    missing_sections: tuple[str, ...]
    content_flags: dict[str, bool] = field(default_factory=dict)
    format_flags: dict[str, bool] = field(default_factory=dict)
    specificity: int = 0
    actionability: int = 0
    warnings: tuple[str, ...] = ()

    @property
    def section_ratio(self) -> float:
        if self.sections_expected == 0:
            return 1.0
        return self.sections_matched / self.sections_expected


def extract_output_sections(output: str) -> tuple[str, ...]:
    """Return markdown headings and ``UPPER CASE LABEL:`` prefixes in ``output``."""
    headings = _HEADING_RE.findall(output)
    labels = _LABEL_RE.findall(output)
    return tuple(dict.fromkeys([*headings, *labels]))


def specificity_score(output: str) -> int:
    """Heuristic 0-100 measure of concrete detail in ``output``."""
    score = _SPECIFICITY_BASE
    lowered = output.lower()
    if "specific" in lowered:
        score += 10
    if "example" in lowered:
        score += 10
    if re.search(r"\d", output):
        score += 15
    if "%" in output:
        score += 10
    if len(output) > _DETAILED_OUTPUT_CHARS:
        score += 15
    return min(100, score)


def actionability_score(output: str) -> int:
    """Heuristic 0-100 measure of actionable guidance in ``output``."""
    lowered = output.lower()
    score = _ACTIONABILITY_BASE
    score += _ACTION_WORD_BONUS * sum(1 for word in _ACTION_WORDS if word in lowered)
    if _PRIORITY_LABEL_RE.search(output):
        score += 15
    if "recommend" in lowered:
        score += 10
    return min(100, score)


def grade_output(
    output: str,
    template: ModelPatternTemplate,
    expected_sections: tuple[str, ...],
    criteria: ModelValidationCriteria,
) -> OutputGrade:
    """Grade one generated output against its expectations.

    Args:
        output: Generated text.
        template: Pattern that produced it (for section label checks).
        expected_sections: Sections the output must contain.
        criteria: Scoring, recommendation, and word-count requirements.

    Returns:
        Grade with the composite score and per-flag breakdown.
    """
    found = extract_output_sections(output)
    missing = tuple(s for s in expected_sections if not section_present(s, found))
    matched = len(expected_sections) - len(missing)
    words = count_words(output)
    meets_word_count = words >= criteria.minimum_word_count

    content_flags = {
        "has_examples": bool(_EXAMPLE_RE.search(output)),
        "has_recommendations": bool(_IMPROVEMENT_RE.search(output)),
        "has_quantitative": bool(_QUANTITATIVE_RE.search(output)),
        "has_priority_levels": bool(_PRIORITY_LABEL_RE.search(output)),
        "professional_tone": (
            len(output) > _PROFESSIONAL_MIN_CHARS
            and not any(word in output.lower() for word in _INFORMAL_WORDS)
        ),
        "appropriate_length": meets_word_count,
    }
    declared = template.structure.output_sections
    format_flags = {
        "follows_structure": "#" in output and "\n" in output,
        "proper_section_labels": (
            not declared or any(section_present(s, found) for s in declared)
        ),
        "consistent_formatting": "# " in output or "## " in output,
        "includes_scoring": (
            not criteria.scoring_required or has_scoring_language(output)
        ),
        "meets_word_count": meets_word_count,
    }

    specificity = specificity_score(output)
    actionability = actionability_score(output)
    section_ratio = matched / len(expected_sections) if expected_sections else 1.0
    content_ratio = sum(content_flags.values()) / len(content_flags)
    format_ratio = sum(format_flags.values()) / len(format_flags)
    score = (
        section_ratio * _SECTION_WEIGHT
        + content_ratio * _CONTENT_WEIGHT
        + format_ratio * _FORMAT_WEIGHT
        + (specificity + actionability) / 2 * _HEURISTIC_WEIGHT
    )

    warnings: list[str] = []
    if missing:
        warnings.append(f"Missing output sections: {', '.join(missing)}")
    if criteria.scoring_required and not format_flags["includes_scoring"]:
        warnings.append("Output lacks the required scoring system")
    if criteria.recommendations_required and not has_recommendation_language(output):
        warnings.append("Output lacks the required recommendations")
    if not meets_word_count:
        warnings.append(
            f"Output below minimum word count ({words} < {criteria.minimum_word_count})"
        )

    return OutputGrade(
        score=round(min(100.0, score), 2),
        sections_expected=len(expected_sections),
        sections_matched=matched,
        missing_sections=missing,
        content_flags=content_flags,
        format_flags=format_flags,
        specificity=specificity,
        actionability=actionability,
        warnings=tuple(warnings),
    )


__all__ = [
    "OutputGrade",
    "actionability_score",
    "extract_output_sections",
    "grade_output",
    "specificity_score",
]
