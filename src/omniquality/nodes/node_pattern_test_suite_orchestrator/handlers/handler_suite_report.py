# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Markdown rendering of orchestrated suite results."""

from __future__ import annotations

from collections.abc import Mapping

from omniquality.models import ModelPatternTestSuiteResult


def generate_suite_report(
    results: Mapping[str, ModelPatternTestSuiteResult],
    min_passing_score: float = 70.0,
) -> str:
    """Render suite results as markdown.

    Args:
        results: Mapping of pattern name to suite result.
        min_passing_score: Cut-off for counting a pattern as passing.

    Returns:
        Markdown with a summary, one subsection per pattern and a
        consolidated recommendations section.
    """
    if not results:
        return "# Pattern Test Suite Report\n\nNo test results available. Run tests first.\n"

    total = len(results)
    passing = sum(1 for r in results.values() if r.overall_score >= min_passing_score)
    average = sum(r.overall_score for r in results.values()) / total

    lines = [
        "# Pattern Test Suite Report",
        "",
        "## Summary",
        "",
        f"- **Total Patterns Tested**: {total}",
        f"- **Patterns Passing (>={min_passing_score:.0f}%)**: {passing}",
        f"- **Average Quality Score**: {average:.1f}%",
        f"- **Overall Pass Rate**: {passing / total * 100:.1f}%",
        "",
        "## Pattern Results",
        "",
    ]
    for name, result in results.items():
        lines.extend(
            [
                f"### {name}",
                "",
                f"- **Quality Grade**: {result.quality_grade.value}",
                f"- **Overall Score**: {result.overall_score:.1f}%",
                f"- **Pass Rate**: {result.pass_rate:.1f}%",
                f"- **Tests Passed**: {result.passed_tests}/{result.total_tests}",
                f"- **Execution Time**: {result.execution_time_ms:.0f}ms",
                "",
                "#### Test Breakdown",
                "",
            ]
        )
        for test in result.test_results:
            status = "PASS" if test.passed else "FAIL"
            lines.append(
                f"- [{status}] **{test.test_name}**: {test.score:.0f}/{test.max_score:.0f} "
                f"({test.percentage:.1f}%)"
            )
        lines.extend(["", "---", ""])

    lines.extend(["## Recommendations", ""])
    any_recommendation = False
    for name, result in results.items():
        for rec in result.recommendations:
            lines.append(f"- **{name}**: {rec}")
            any_recommendation = True
    if not any_recommendation:
        lines.append("- No recommendations.")
    lines.append("")
    return "\n".join(lines)


__all__ = ["generate_suite_report"]
