# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Markdown rendering of quality reports."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping

from omniquality.enums import EnumQualityGrade
from omniquality.nodes.node_quality_assess_compute.models.model_quality_report import (
    ModelQualityReport,
)


def generate_quality_report(reports: Mapping[str, ModelQualityReport]) -> str:
    """Render quality reports as markdown.

    Args:
        reports: Mapping of pattern name to quality report.

    Returns:
        Markdown with a summary, a grade distribution, and one section per
        pattern listing category scores and recommendations.
    """
    if not reports:
        return "# Pattern Quality Report\n\nNo quality reports available.\n"

    total = len(reports)
    certified = sum(1 for report in reports.values() if report.certification.certified)
    passing = sum(1 for report in reports.values() if report.meets_threshold)
    average = sum(report.quality_score for report in reports.values()) / total
    grades = Counter(report.quality_grade for report in reports.values())

    lines = [
        "# Pattern Quality Report",
        "",
        "## Summary",
        "",
        f"- **Patterns Assessed**: {total}",
        f"- **Meeting Threshold**: {passing}",
        f"- **Certified**: {certified}",
        f"- **Average Quality Score**: {average:.1f}",
        "",
        "## Grade Distribution",
        "",
    ]
    lines.extend(f"- **{grade.value}**: {grades.get(grade, 0)}" for grade in EnumQualityGrade)
    lines.append("")

    for name, report in reports.items():
        cert = report.certification
        lines.extend(
            [
                f"## {name}",
                "",
                f"- **Quality Score**: {report.quality_score:.1f} ({report.quality_grade.value})",
                f"- **Meets Threshold**: {'yes' if report.meets_threshold else 'no'}",
                f"- **Certification**: {cert.level.value}"
                + ("" if cert.certified else " (not certified)"),
                "",
                "| Category | Score | Compliant |",
                "|---|---|---|",
            ]
        )
        for category, score in report.category_scores.items():
            ok = "yes" if report.standards_compliance[category] else "no"
            lines.append(f"| {category.value} | {score:.1f} | {ok} |")
        if report.critical_issues:
            lines.extend(["", "### Critical Issues", ""])
            lines.extend(f"- {issue}" for issue in report.critical_issues)
        if report.recommendations:
            lines.extend(["", "### Recommendations", ""])
            lines.extend(
                f"- [{rec.priority.value.upper()}] {rec.message}"
                for rec in report.recommendations
            )
        if cert.next_level is not None and cert.requirements_for_next_level:
            lines.extend(["", f"### Path to {cert.next_level.value}", ""])
            lines.extend(f"- {req}" for req in cert.requirements_for_next_level)
        lines.append("")

    return "\n".join(lines)


__all__ = ["generate_quality_report"]
