# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Improvement strategies and reference resources per quality category."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

from omniquality.enums import EnumQualityCategory

IMPROVEMENT_STRATEGIES: Final = MappingProxyType(
    {
        EnumQualityCategory.FUNCTIONALITY: (
            "Test the pattern with more diverse sample inputs",
            "Make every declared output section appear in generated output",
            "Add more detailed analysis sections",
            "Strengthen scoring and recommendation quality",
        ),
        EnumQualityCategory.RELIABILITY: (
            "Fix the samples and scenarios that fail consistently",
            "Resolve critical validation issues",
            "Add edge-case and error-handling scenarios",
            "Tighten output instructions so results are reproducible",
        ),
        EnumQualityCategory.USABILITY: (
            "Simplify the step-by-step instructions",
            "Add examples of expected input and output",
            "Add an OUTPUT INSTRUCTIONS section with explicit formatting rules",
            "State the expert role clearly in the identity",
        ),
        EnumQualityCategory.EFFICIENCY: (
            "Shorten the prompt to reduce execution time",
            "Remove redundant steps",
            "Reduce the number of output sections generated per run",
            "Cache or reuse shared context between runs",
        ),
        EnumQualityCategory.MAINTAINABILITY: (
            "Organise the pattern into IDENTITY and PURPOSE, STEPS, OUTPUT and OUTPUT INSTRUCTIONS",
            "Break long steps into smaller bulleted steps",
            "Keep one concern per output section",
            "Add an INPUT: placeholder",
        ),
        EnumQualityCategory.PORTABILITY: (
            "Follow the standard section layout so registries can ingest the pattern",
            "Write a description of at least one full sentence",
            "Reference the best practices the pattern follows",
            "Verify the pattern chains with related patterns",
        ),
        EnumQualityCategory.VALIDATION: (
            "Add every required section",
            "Fix markdown formatting issues",
            "Add scoring and prioritization instructions",
            "Reach the minimum word count",
        ),
        EnumQualityCategory.CONFORMANCE: (
            "Align generated output headings with declared output sections",
            "Name output sections exactly as the specification does",
            "Add a scoring scale such as (1-10) or 0-100",
            "Add HIGH/MEDIUM/LOW prioritization",
        ),
    }
)

RESOURCES: Final = MappingProxyType(
    {
        EnumQualityCategory.FUNCTIONALITY: (
            "Output Format Standards",
            "Sample Input/Output Examples",
        ),
        EnumQualityCategory.RELIABILITY: ("Scenario Testing Guide", "Failure Triage Checklist"),
        EnumQualityCategory.USABILITY: ("Prompt Writing Guidelines", "Usability Review Checklist"),
        EnumQualityCategory.EFFICIENCY: ("Prompt Size Budgeting", "Benchmarking Guide"),
        EnumQualityCategory.MAINTAINABILITY: ("Pattern Template Guide", "Section Writing Guide"),
        EnumQualityCategory.PORTABILITY: ("Registry Integration Guide", "Pattern Chaining Guide"),
        EnumQualityCategory.VALIDATION: ("Pattern Template Guide", "Markdown Formatting Guide"),
        EnumQualityCategory.CONFORMANCE: ("Output Structure Specification", "Scoring Scale Guide"),
    }
)


def strategies_for(category: EnumQualityCategory, limit: int | None = None) -> tuple[str, ...]:
    """Return improvement actions for ``category``, optionally truncated."""
    actions = IMPROVEMENT_STRATEGIES[category]
    return actions if limit is None else actions[:limit]


def resources_for(category: EnumQualityCategory) -> tuple[str, ...]:
    return RESOURCES[category]


__all__ = [
    "IMPROVEMENT_STRATEGIES",
    "RESOURCES",
    "resources_for",
    "strategies_for",
]
