# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Markdown rendering of validation results."""

from __future__ import annotations

from collections.abc import Mapping

from omniquality.nodes.node_pattern_validate_compute.models.model_validation_result import (
    ModelValidationResult,
)


def generate_validation_report(results: Mapping[str, ModelValidationResult]) -> str:
    """Render a batch of validation results as a markdown report.

    Args:
        results: Mapping of pattern name to validation result.

    Returns:
        Markdown text with a summary section and one subsection per pattern.
    """
    if not results:
        return "# Pattern Validation Report\n\nNo validation results available.\n"

    total = len(results)
    valid = sum(1 for result in results.values() if result.is_valid)
    average = sum(result.score for result in results.values()) / total

    lines: list[str] = [
        "# Pattern Validation Report",
        "",
        "## Summary",
        "",
        f"- **Total Patterns**: {total}",
        f"- **Valid Patterns**: {valid}",
        f"- **Invalid Patterns**: {total - valid}",
        f"- **Average Score**: {average:.1f}",
        "",
        "## Pattern Results",
        "",
    ]

    for name, result in results.items():
        status = "VALID" if result.is_valid else "INVALID"
        checks = result.compliance_checks
        lines.extend(
            [
                f"### {name or '<unnamed>'}",
                "",
                f"- **Status**: {status}",
                f"- **Score**: {result.score}/100 (minimum {result.minimum_score})",
                f"- **Word Count**: {result.word_count}",
                f"- **Compliance Checks**: {checks.passed_count}/{checks.total_count} passed",
            ]
        )
        if result.issues:
            lines.extend(["", "#### Issues", ""])
            lines.extend(
                f"- [{issue.severity.value.upper()}] {issue.description}"
                for issue in result.issues
            )
        if result.suggestions:
            lines.extend(["", "#### Suggestions", ""])
            lines.extend(
                f"- ({suggestion.priority.value}) {suggestion.message}"
                for suggestion in result.suggestions
            )
        lines.extend(["", "---", ""])

    return "\n".join(lines)


__all__ = ["generate_validation_report"]
