# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Markdown rendering of output test suites."""

from __future__ import annotations

from collections.abc import Mapping

from omniquality.nodes.node_output_tester_effect.models.model_test_suite import (
    ModelTestSuite,
)


def generate_test_report(suites: Mapping[str, ModelTestSuite]) -> str:
    """Render output test suites as markdown.

    Args:
        suites: Mapping of pattern name to suite.

    Returns:
        Markdown with a summary and one section per pattern.
    """
    if not suites:
        return "# Output Test Report\n\nNo test results available.\n"

    total_tests = sum(suite.total_tests for suite in suites.values())
    passed_tests = sum(suite.passed_tests for suite in suites.values())
    average = sum(suite.average_score for suite in suites.values()) / len(suites)
    pass_rate = passed_tests / total_tests * 100 if total_tests else 0.0

    lines = [
        "# Output Test Report",
        "",
        "## Summary",
        "",
        f"- **Patterns Tested**: {len(suites)}",
        f"- **Total Tests**: {total_tests}",
        f"- **Passed Tests**: {passed_tests}",
        f"- **Pass Rate**: {pass_rate:.1f}%",
        f"- **Average Score**: {average:.1f}",
        "",
    ]

    for name, suite in suites.items():
        lines.extend(
            [
                f"## {name}",
                "",
                f"- **Health**: {suite.summary.overall_health.value}",
                f"- **Tests Passed**: {suite.passed_tests}/{suite.total_tests}",
                f"- **Average Score**: {suite.average_score:.1f}",
                f"- **Execution Time**: {suite.execution_time_ms:.0f}ms",
            ]
        )
        if suite.performance is not None:
            lines.append(
                f"- **Throughput**: {suite.performance.throughput_per_second:.2f} tests/sec"
            )
            if suite.performance.estimated_memory_mb is not None:
                lines.append(
                    f"- **Estimated Memory**: {suite.performance.estimated_memory_mb:.1f}MB"
                )
        lines.extend(["", "### Results", ""])
        for result in suite.results:
            status = "PASS" if result.passed else "FAIL"
            lines.append(f"- [{status}] **{result.test_name}**: {result.score:.1f}/{result.max_score:.0f}")
        if suite.summary.critical_issues:
            lines.extend(["", "### Critical Issues", ""])
            lines.extend(f"- {issue}" for issue in suite.summary.critical_issues)
        if suite.summary.recommendations:
            lines.extend(["", "### Recommendations", ""])
            lines.extend(f"- {rec}" for rec in suite.summary.recommendations)
        lines.append("")

    return "\n".join(lines)


__all__ = ["generate_test_report"]
