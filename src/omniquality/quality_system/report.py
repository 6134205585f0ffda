# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Portfolio report rendering for the quality system."""

from __future__ import annotations

from collections.abc import Mapping

from omniquality.enums import EnumQualityTrend, EnumRecommendationPriority
from omniquality.quality_system.models import (
    ModelQualityActionItem,
    ModelQualityAssessment,
    ModelQualityMetrics,
)

_PASSING_SHARE_TARGET = 0.8
_SYSTEM_SCORE_TARGET = 70.0
_CRITICAL_ISSUE_IMPACT = 15.0
_URGENT = (EnumRecommendationPriority.CRITICAL, EnumRecommendationPriority.HIGH)


def system_recommendations(metrics: ModelQualityMetrics) -> tuple[str, ...]:
    """Portfolio-level advice derived from the metrics."""
    if metrics.total_patterns == 0:
        return ()
    recommendations: list[str] = []
    if metrics.average_quality_score < _SYSTEM_SCORE_TARGET:
        recommendations.append(
            "System-wide quality improvement needed: average score below threshold"
        )
    if metrics.patterns_passing_threshold / metrics.total_patterns < _PASSING_SHARE_TARGET:
        recommendations.append(
            "Focus on bringing more patterns up to minimum quality standards"
        )
    if metrics.trend_analysis.overall_trend is EnumQualityTrend.DECLINING:
        recommendations.append(
            "Quality trend is declining: implement immediate improvement measures"
        )
    if metrics.patterns_needing_attention:
        recommendations.append(
            f"{len(metrics.patterns_needing_attention)} pattern(s) require immediate attention"
        )
    return tuple(recommendations)


def action_plan(
    assessments: Mapping[str, ModelQualityAssessment],
) -> tuple[ModelQualityActionItem, ...]:
    """Action items from critical issues and critical/high recommendations."""
    items: list[ModelQualityActionItem] = []
    for name, assessment in assessments.items():
        items.extend(
            ModelQualityActionItem(
                title=f"Resolve critical issue in {name}",
                description=issue,
                priority=EnumRecommendationPriority.CRITICAL,
                related_pattern=name,
                estimated_impact=_CRITICAL_ISSUE_IMPACT,
            )
            for issue in assessment.critical_issues
        )
        items.extend(
            ModelQualityActionItem(
                title=f"Improve {rec.category.value} in {name}",
                description=rec.message,
                priority=rec.priority,
                related_pattern=name,
                estimated_impact=rec.estimated_impact,
            )
            for rec in assessment.recommendations
            if rec.priority in _URGENT
        )
    # stable sort keeps pattern order within a priority
    items.sort(key=lambda item: item.priority.rank)
    return tuple(items)


def render_quality_system_report(
    *,
    metrics: ModelQualityMetrics,
    assessments: Mapping[str, ModelQualityAssessment],
    report_period: str = "current",
) -> str:
    trend = metrics.trend_analysis
    lines = [
        "# Quality Assurance Report",
        "",
        f"**Report Period**: {report_period}",
        "",
        "## Summary",
        "",
        f"- **Total Patterns**: {metrics.total_patterns}",
        f"- **Passing Threshold**: {metrics.patterns_passing_threshold}",
        f"- **Average Quality Score**: {metrics.average_quality_score:.1f}",
        f"- **Overall Trend**: {trend.overall_trend.value} ({trend.change_percent:+.2f}%)",
        "",
        "## Quality Distribution",
        "",
    ]
    lines.extend(
        f"- **{grade.value}**: {count}"
        for grade, count in metrics.quality_distribution.items()
    )

    if metrics.top_performing_patterns:
        lines.extend(["", "## Top Performing Patterns", ""])
        lines.extend(f"1. {name}" for name in metrics.top_performing_patterns)

    if metrics.patterns_needing_attention:
        lines.extend(["", "## Patterns Needing Attention", ""])
        lines.extend(f"- {name}" for name in metrics.patterns_needing_attention)

    recommendations = system_recommendations(metrics)
    if recommendations:
        lines.extend(["", "## System Recommendations", ""])
        lines.extend(f"- {rec}" for rec in recommendations)

    plan = action_plan(assessments)
    if plan:
        lines.extend(["", "## Action Plan", ""])
        lines.extend(
            f"- [{item.priority.value.upper()}] {item.title}: {item.description}"
            for item in plan
        )

    lines.extend(["", "## Pattern Assessments", ""])
    for name, assessment in assessments.items():
        lines.append(
            f"- **{name}**: {assessment.quality_score:.1f} "
            f"({assessment.quality_grade.value}, {assessment.quality_trend.value})"
            + ("" if assessment.meets_threshold else " - below threshold")
        )
    lines.append("")
    return "\n".join(lines)


__all__ = ["action_plan", "render_quality_system_report", "system_recommendations"]
