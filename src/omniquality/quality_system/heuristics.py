# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pure scoring helpers for the quality system.

Category projection from an orchestrated test suite result:

    validation       Syntax Tests percentage
    conformance      Structure Tests percentage
    functionality    Output Tests percentage
    portability      Integration Tests percentage
    efficiency       Performance Tests percentage
    reliability      suite pass rate
    usability        content heuristic, base 70
    maintainability  content heuristic, base 60

A category test that did not run scores 0.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from datetime import datetime

from omniquality.enums import (
    EnumImprovementEffort,
    EnumQualityCategory,
    EnumQualityGrade,
    EnumQualityTrend,
    EnumRecommendationPriority,
)
from omniquality.models import (
    INTEGRATION_TESTS,
    OUTPUT_TESTS,
    PERFORMANCE_TESTS,
    STRUCTURE_TESTS,
    SYNTAX_TESTS,
    ModelPatternTestSuiteResult,
    ModelQualityRecommendation,
)
from omniquality.nodes.node_quality_assess_compute.handlers.handler_improvement_strategies import (
    strategies_for,
)
from omniquality.nodes.node_quality_assess_compute.handlers.handler_quality_scoring import (
    build_certification_status,
    clamp_score,
    effort_for_shortfall,
    standards_compliance,
    weighted_quality_score,
)
from omniquality.quality_system.models import (
    ModelQualityAssessment,
    ModelQualityThresholds,
)

CRITICAL_SCORE = 50.0
WARNING_SCORE = 70.0
RECOMMENDATION_SCORE = 80.0
TREND_WINDOW = 3
TREND_MARGIN = 1.0
# Share of the remaining headroom a recommendation is expected to recover.
_IMPACT_RECOVERY = 0.7

_HEADING_RE = re.compile(r"^# ", re.MULTILINE)

_TEST_CATEGORY_MAP: tuple[tuple[EnumQualityCategory, str], ...] = (
    (EnumQualityCategory.VALIDATION, SYNTAX_TESTS),
    (EnumQualityCategory.CONFORMANCE, STRUCTURE_TESTS),
    (EnumQualityCategory.FUNCTIONALITY, OUTPUT_TESTS),
    (EnumQualityCategory.PORTABILITY, INTEGRATION_TESTS),
    (EnumQualityCategory.EFFICIENCY, PERFORMANCE_TESTS),
)


def usability_from_content(pattern_content: str | None) -> float:
    score = 70.0
    if pattern_content:
        lowered = pattern_content.lower()
        if "step-by-step" in lowered or "instructions" in lowered:
            score += 10.0
        if "example" in lowered or "sample" in lowered:
            score += 10.0
        if "OUTPUT INSTRUCTIONS" in pattern_content:
            score += 10.0
    return clamp_score(score)


def maintainability_from_content(pattern_content: str | None) -> float:
    score = 60.0
    if pattern_content:
        if len(_HEADING_RE.findall(pattern_content)) >= 4:
            score += 15.0
        if all(
            heading in pattern_content
            for heading in ("# IDENTITY and PURPOSE", "# STEPS", "# OUTPUT")
        ):
            score += 15.0
        if "- " in pattern_content and "INPUT:" in pattern_content:
            score += 10.0
    return clamp_score(score)


def project_suite_scores(
    test_results: ModelPatternTestSuiteResult, pattern_content: str | None
) -> dict[EnumQualityCategory, float]:
    """Project an orchestrated suite result onto the eight categories."""
    scores = {
        category: clamp_score(test_results.test_percentage(test_name))
        for category, test_name in _TEST_CATEGORY_MAP
    }
    scores[EnumQualityCategory.RELIABILITY] = clamp_score(test_results.pass_rate)
    scores[EnumQualityCategory.USABILITY] = usability_from_content(pattern_content)
    scores[EnumQualityCategory.MAINTAINABILITY] = maintainability_from_content(
        pattern_content
    )
    return {category: round(scores[category], 2) for category in EnumQualityCategory}


def quality_trend(current: float, previous_scores: Sequence[float]) -> EnumQualityTrend:
    """Compare ``current`` with the last ``TREND_WINDOW`` scores.

    A strictly monotone run (window plus ``current``) follows its direction
    regardless of step size. Otherwise ``current`` must clear the window mean
    by ``TREND_MARGIN``. Empty history is STABLE.
    """
    window = list(previous_scores)[-TREND_WINDOW:]
    if not window:
        return EnumQualityTrend.STABLE
    run = [*window, current]
    steps = [later - earlier for earlier, later in zip(run, run[1:])]
    if all(step > 0 for step in steps):
        return EnumQualityTrend.IMPROVING
    if all(step < 0 for step in steps):
        return EnumQualityTrend.DECLINING
    baseline = sum(window) / len(window)
    if current > baseline + TREND_MARGIN:
        return EnumQualityTrend.IMPROVING
    if current < baseline - TREND_MARGIN:
        return EnumQualityTrend.DECLINING
    return EnumQualityTrend.STABLE


def _recommendation_priority(score: float) -> EnumRecommendationPriority:
    if score < 60.0:
        return EnumRecommendationPriority.CRITICAL
    if score < WARNING_SCORE:
        return EnumRecommendationPriority.HIGH
    return EnumRecommendationPriority.MEDIUM


def improvement_recommendations(
    category_scores: Mapping[EnumQualityCategory, float],
    thresholds: ModelQualityThresholds,
) -> tuple[ModelQualityRecommendation, ...]:
    """Recommendations for every category below 80, most urgent first.

    Ordered by priority, then by estimated impact descending.
    """
    weights = thresholds.category_weights.normalized()
    recommendations = []
    for category in EnumQualityCategory:
        score = category_scores[category]
        if score >= RECOMMENDATION_SCORE:
            continue
        recommendations.append(
            ModelQualityRecommendation(
                category=category,
                priority=_recommendation_priority(score),
                message=(
                    f"Improve {category.value} quality: current score is {score:.1f}%"
                ),
                current_score=score,
                target_score=RECOMMENDATION_SCORE,
                actions=strategies_for(category, 3),
                estimated_impact=round(
                    (100.0 - score) * weights[category] * _IMPACT_RECOVERY, 2
                ),
                effort=effort_for_shortfall(RECOMMENDATION_SCORE - score),
            )
        )
    recommendations.sort(key=lambda rec: (rec.priority.rank, -rec.estimated_impact))
    return tuple(recommendations)


def critical_issues_for(
    category_scores: Mapping[EnumQualityCategory, float],
    test_results: ModelPatternTestSuiteResult | None,
) -> tuple[str, ...]:
    issues = [
        f"Critical {category.value} quality issue: score {score:.1f}% is below "
        f"{CRITICAL_SCORE:.0f}%"
        for category, score in category_scores.items()
        if score < CRITICAL_SCORE
    ]
    if test_results is not None:
        issues.extend(
            f"{result.test_name}: {error}"
            for result in test_results.test_results
            if not result.passed
            for error in result.errors
        )
    return tuple(issues)


def warnings_for(
    category_scores: Mapping[EnumQualityCategory, float],
    test_results: ModelPatternTestSuiteResult | None,
) -> tuple[str, ...]:
    warnings = [
        f"{category.value} score ({score:.1f}%) is below recommended threshold "
        f"({WARNING_SCORE:.0f}%)"
        for category, score in category_scores.items()
        if CRITICAL_SCORE <= score < WARNING_SCORE
    ]
    if test_results is not None:
        warnings.extend(
            f"{result.test_name}: {warning}"
            for result in test_results.test_results
            for warning in result.warnings
        )
    return tuple(warnings)


def build_assessment(
    *,
    pattern_name: str,
    category_scores: Mapping[EnumQualityCategory, float],
    thresholds: ModelQualityThresholds,
    previous_scores: Sequence[float],
    assessed_at: datetime,
    test_results: ModelPatternTestSuiteResult | None = None,
) -> ModelQualityAssessment:
    """Derive a full assessment from category scores and prior history."""
    scores = {category: category_scores[category] for category in EnumQualityCategory}
    quality_score = weighted_quality_score(scores, thresholds.category_weights)
    critical_issues = critical_issues_for(scores, test_results)
    return ModelQualityAssessment(
        pattern_name=pattern_name,
        quality_score=quality_score,
        quality_grade=EnumQualityGrade.from_score(quality_score),
        category_scores=scores,
        quality_trend=quality_trend(quality_score, previous_scores),
        recommendations=improvement_recommendations(scores, thresholds),
        critical_issues=critical_issues,
        warnings=warnings_for(scores, test_results),
        assessed_at=assessed_at,
        **threshold_verdicts(quality_score, scores, critical_issues, thresholds),
    )


def threshold_verdicts(
    quality_score: float,
    category_scores: Mapping[EnumQualityCategory, float],
    critical_issues: Sequence[str],
    thresholds: ModelQualityThresholds,
) -> dict[str, object]:
    """Threshold-dependent fields of an assessment.

    Recomputed whenever stored scores are read back under new thresholds;
    the scores themselves never change.
    """
    minimum = thresholds.effective_minimum_score
    return {
        "meets_threshold": quality_score >= minimum and not critical_issues,
        "standards_compliance": standards_compliance(
            category_scores, thresholds.category_minimums
        ),
        "certification": build_certification_status(
            quality_score=quality_score,
            minimum_quality_score=minimum,
            critical_issue_count=len(critical_issues),
            performance_met=None,
        ),
    }


def reinterpret(
    assessment: ModelQualityAssessment, thresholds: ModelQualityThresholds
) -> ModelQualityAssessment:
    """Return ``assessment`` with its verdicts re-derived under ``thresholds``."""
    return assessment.model_copy(
        update=threshold_verdicts(
            assessment.quality_score,
            assessment.category_scores,
            assessment.critical_issues,
            thresholds,
        )
    )


__all__ = [
    "CRITICAL_SCORE",
    "RECOMMENDATION_SCORE",
    "TREND_MARGIN",
    "TREND_WINDOW",
    "WARNING_SCORE",
    "build_assessment",
    "critical_issues_for",
    "improvement_recommendations",
    "maintainability_from_content",
    "project_suite_scores",
    "quality_trend",
    "reinterpret",
    "threshold_verdicts",
    "usability_from_content",
    "warnings_for",
]
