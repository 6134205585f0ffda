# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Score aggregation shared by the assessor and the quality system.

Pure functions over category-score mappings. Grade bands and the
certification ladder live on their enums and are not configurable.
"""

from __future__ import annotations

from collections.abc import Mapping

from omniquality.enums import (
    EnumImprovementEffort,
    EnumQualityCategory,
    EnumRecommendationPriority,
    certification_level_for_score,
    minimum_score_for_level,
)
from omniquality.models import (
    ModelCategoryMinimums,
    ModelCategoryWeights,
    ModelCertificationStatus,
    ModelQualityRecommendation,
)
from omniquality.nodes.node_quality_assess_compute.handlers.handler_improvement_strategies import (
    strategies_for,
)

_HIGH_PRIORITY_SHORTFALL = 15.0
_MEDIUM_PRIORITY_SHORTFALL = 5.0
_CRITICAL_CATEGORY_SCORE = 50.0
_LOW_EFFORT_SHORTFALL = 10.0
_MEDIUM_EFFORT_SHORTFALL = 25.0
_ACTIONS_PER_RECOMMENDATION = 3


def clamp_score(value: float) -> float:
    """Clamp ``value`` to [0, 100]."""
    return max(0.0, min(100.0, value))


def weighted_quality_score(
    category_scores: Mapping[EnumQualityCategory, float],
    weights: ModelCategoryWeights,
) -> float:
    """Weighted mean of the eight category scores, rounded to 2 decimals.

    Example:
        Scores {95, 90, 85, 92, 88, 80, 90, 90} with equal weights give 88.75.
    """
    normalized = weights.normalized()
    total = sum(category_scores[c] * normalized[c] for c in EnumQualityCategory)
    return round(clamp_score(total), 2)


def standards_compliance(
    category_scores: Mapping[EnumQualityCategory, float],
    minimums: ModelCategoryMinimums,
) -> dict[EnumQualityCategory, bool]:
    """Compare each category independently against its configured minimum."""
    return {
        category: category_scores[category] >= minimums.minimum_for(category)
        for category in EnumQualityCategory
    }


def effort_for_shortfall(shortfall: float) -> EnumImprovementEffort:
    if shortfall <= _LOW_EFFORT_SHORTFALL:
        return EnumImprovementEffort.LOW
    if shortfall <= _MEDIUM_EFFORT_SHORTFALL:
        return EnumImprovementEffort.MEDIUM
    return EnumImprovementEffort.HIGH


def shortfall_priority(score: float, minimum: float) -> EnumRecommendationPriority:
    """Priority for a category below its minimum.

    HIGH for a critical shortfall (score < 50 or >= 15 points short),
    MEDIUM for 5-15 points short, LOW for a marginal miss.
    """
    shortfall = minimum - score
    if score < _CRITICAL_CATEGORY_SCORE or shortfall >= _HIGH_PRIORITY_SHORTFALL:
        return EnumRecommendationPriority.HIGH
    if shortfall >= _MEDIUM_PRIORITY_SHORTFALL:
        return EnumRecommendationPriority.MEDIUM
    return EnumRecommendationPriority.LOW


def shortfall_recommendations(
    category_scores: Mapping[EnumQualityCategory, float],
    minimums: ModelCategoryMinimums,
    weights: ModelCategoryWeights,
) -> tuple[ModelQualityRecommendation, ...]:
    """One recommendation per category below its minimum, worst score first.

    Ties on score keep category declaration order.
    """
    normalized = weights.normalized()
    recommendations: list[ModelQualityRecommendation] = []
    for category in EnumQualityCategory:
        score = category_scores[category]
        minimum = minimums.minimum_for(category)
        if score >= minimum:
            continue
        shortfall = minimum - score
        recommendations.append(
            ModelQualityRecommendation(
                category=category,
                priority=shortfall_priority(score, minimum),
                message=(
                    f"Improve {category.value}: score {score:.1f} is below "
                    f"the minimum of {minimum:.1f}"
                ),
                current_score=score,
                target_score=minimum,
                actions=strategies_for(category, _ACTIONS_PER_RECOMMENDATION),
                estimated_impact=round(shortfall * normalized[category], 2),
                effort=effort_for_shortfall(shortfall),
            )
        )
    recommendations.sort(key=lambda rec: rec.current_score)
    return tuple(recommendations)


def build_certification_status(
    *,
    quality_score: float,
    minimum_quality_score: float,
    critical_issue_count: int,
    performance_met: bool | None,
) -> ModelCertificationStatus:
    """Decide certification and describe the path to the next tier.

    Certified iff the score reaches ``minimum_quality_score``, there are no
    critical issues, and performance was either not evaluated (None) or met.

    Args:
        quality_score: Overall score.
        minimum_quality_score: Score required by the overall gate.
        critical_issue_count: Critical findings blocking the gate.
        performance_met: Performance verdict, None when not evaluated.
    """
    score_ok = quality_score >= minimum_quality_score
    certified = score_ok and critical_issue_count == 0 and performance_met is not False
    level = certification_level_for_score(quality_score, certified=certified)

    requirements_met: list[str] = []
    if score_ok:
        requirements_met.append(
            f"Quality score {quality_score:.1f} meets minimum {minimum_quality_score:.1f}"
        )
    if critical_issue_count == 0:
        requirements_met.append("No critical issues")
    if performance_met:
        requirements_met.append("Performance thresholds met")

    next_level = level.next_level()
    needed: list[str] = []
    if next_level is not None:
        if not score_ok:
            needed.append(f"Reach quality score {minimum_quality_score:.1f}")
        if critical_issue_count:
            needed.append(f"Resolve {critical_issue_count} critical issue(s)")
        if performance_met is False:
            needed.append("Meet all performance thresholds")
        cut_point = minimum_score_for_level(next_level)
        if cut_point and quality_score < cut_point:
            needed.append(f"Raise quality score to {cut_point:.1f}")

    return ModelCertificationStatus(
        certified=certified,
        level=level,
        requirements_met=tuple(requirements_met),
        next_level=next_level,
        requirements_for_next_level=tuple(needed),
    )


__all__ = [
    "build_certification_status",
    "clamp_score",
    "effort_for_shortfall",
    "shortfall_priority",
    "shortfall_recommendations",
    "standards_compliance",
    "weighted_quality_score",
]
