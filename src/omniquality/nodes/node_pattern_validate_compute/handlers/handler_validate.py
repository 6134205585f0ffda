# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

# Copyright (c) 2025 OmniNode Team
"""Structural pattern validation. Pure functions, no I/O.

Scoring is deterministic and deduction-based:

    Finding                              Deduction  Severity
    empty name                           10         critical
    empty identity                       25         critical
    brief identity (< 20 chars)          5          warning
    no steps                             25         critical
    fewer than 3 steps                   10         warning
    no output sections                   25         critical
    fewer than 3 output sections         10         warning
    missing required section (each)      5          warning
    no scoring instructions              10         warning
    no prioritization instructions       5          info
    below minimum word count             10         warning

Score starts at 100 and is floored at 0. Strict mode escalates every
warning to critical. Compliance checks and suggestions are computed after
scoring and never change the score.

A pattern is valid iff score >= minimum_score and it has no critical issues.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from omniquality.enums import EnumIssueSeverity, EnumRecommendationPriority
from omniquality.models import ModelPatternSpecification, ModelPatternTemplate
from omniquality.models.model_pattern_template import ModelPatternStructure
from omniquality.nodes.node_pattern_validate_compute.models.model_validation_result import (
    ModelComplianceChecks,
    ModelSpecificationCheck,
    ModelValidationIssue,
    ModelValidationResult,
    ModelValidationSuggestion,
)
from omniquality.nodes.node_pattern_validate_compute.models.model_validator_config import (
    ModelValidatorConfig,
)
from omniquality.utils.util_text_metrics import (
    contains_any,
    count_words,
    has_example_language,
    has_priority_language,
    has_recommendation_language,
    has_scoring_language,
    section_present,
)

logger = logging.getLogger(__name__)

_START_SCORE = 100

_DEDUCT_MISSING_NAME = 10
_DEDUCT_MISSING_IDENTITY = 25
_DEDUCT_BRIEF_IDENTITY = 5
_DEDUCT_MISSING_STEPS = 25
_DEDUCT_FEW_STEPS = 10
_DEDUCT_MISSING_OUTPUT = 25
_DEDUCT_FEW_OUTPUT_SECTIONS = 10
_DEDUCT_MISSING_REQUIRED_SECTION = 5
_DEDUCT_MISSING_SCORING = 10
_DEDUCT_MISSING_PRIORITIZATION = 5
_DEDUCT_LOW_WORD_COUNT = 10

_MIN_IDENTITY_CHARS = 20
_MIN_PURPOSE_CHARS = 15
_MIN_STEPS = 3
_MIN_STEP_CHARS = 10
_MIN_OUTPUT_SECTIONS = 3
_MIN_INSTRUCTIONS = 2
_MIN_INSTRUCTION_CHARS = 10
_RECOMMENDED_STEPS = 5
_MIN_ACTION_STEP_RATIO = 0.6
_MAX_SUGGESTIONS = 5

_EXPERTISE_MARKERS: tuple[str, ...] = ("you are", "expert", "specialist")
_ACTION_VERBS: tuple[str, ...] = (
    "analyze",
    "analyse",
    "extract",
    "identify",
    "evaluate",
    "assess",
    "examine",
    "review",
    "compare",
    "create",
)


@dataclass(frozen=True)
class _StructureView:
    """Whitespace-trimmed view of a template's structure with empties dropped."""

    identity: str
    purpose: str
    steps: tuple[str, ...]
    sections: tuple[str, ...]
    instructions: tuple[str, ...]

    @classmethod
    def of(cls, structure: ModelPatternStructure) -> _StructureView:
        return cls(
            identity=structure.identity.strip(),
            purpose=structure.purpose.strip(),
            steps=tuple(s.strip() for s in structure.steps if s.strip()),
            sections=tuple(s.strip() for s in structure.output_sections if s.strip()),
            instructions=tuple(
                s.strip() for s in structure.output_instructions if s.strip()
            ),
        )

    @property
    def word_count(self) -> int:
        return count_words(self.identity, self.purpose, *self.steps, *self.instructions)

    @property
    def directive_text(self) -> str:
        """Text where scoring and prioritization directives are expected."""
        return "\n".join((*self.instructions, *self.sections, *self.steps))

    @property
    def present_sections(self) -> tuple[str, ...]:
        """Output section names plus the structural blocks that are populated."""
        blocks: list[str] = list(self.sections)
        if self.identity:
            blocks.append("IDENTITY")
        if self.purpose:
            blocks.append("PURPOSE")
        if self.identity and self.purpose:
            blocks.append("IDENTITY and PURPOSE")
        if self.steps:
            blocks.append("STEPS")
        if self.sections:
            blocks.append("OUTPUT")
        if self.instructions:
            blocks.append("OUTPUT INSTRUCTIONS")
        return tuple(blocks)

    @property
    def follows_structure(self) -> bool:
        return bool(self.identity and self.steps and self.sections and self.instructions)


class _IssueCollector:
    """Accumulates issues, applying strict-mode escalation."""

    def __init__(self, strict_mode: bool) -> None:
        self._strict_mode = strict_mode
        self.issues: list[ModelValidationIssue] = []

    def add(
        self,
        code: str,
        description: str,
        severity: EnumIssueSeverity,
        deduction: int,
    ) -> None:
        if self._strict_mode and severity is EnumIssueSeverity.WARNING:
            severity = EnumIssueSeverity.CRITICAL
        self.issues.append(
            ModelValidationIssue(
                code=code,
                description=description,
                severity=severity,
                deduction=deduction,
            )
        )

    @property
    def total_deduction(self) -> int:
        return sum(issue.deduction for issue in self.issues)


def _missing_required_sections(
    view: _StructureView, required_sections: Iterable[str]
) -> list[str]:
    present = view.present_sections
    return [section for section in required_sections if not section_present(section, present)]


def _collect_issues(
    template: ModelPatternTemplate,
    view: _StructureView,
    config: ModelValidatorConfig,
) -> _IssueCollector:
    collector = _IssueCollector(config.strict_mode)
    critical = EnumIssueSeverity.CRITICAL
    warning = EnumIssueSeverity.WARNING

    if not template.name.strip():
        collector.add("missing-name", "Pattern name is empty", critical, _DEDUCT_MISSING_NAME)

    if not view.identity:
        collector.add(
            "missing-identity",
            "Identity section is empty",
            critical,
            _DEDUCT_MISSING_IDENTITY,
        )
    elif len(view.identity) < _MIN_IDENTITY_CHARS:
        collector.add(
            "brief-identity",
            f"Identity section is too brief ({len(view.identity)} chars, "
            f"expected at least {_MIN_IDENTITY_CHARS})",
            warning,
            _DEDUCT_BRIEF_IDENTITY,
        )

    if not view.steps:
        collector.add("missing-steps", "Pattern defines no steps", critical, _DEDUCT_MISSING_STEPS)
    elif len(view.steps) < _MIN_STEPS:
        collector.add(
            "few-steps",
            f"Pattern defines {len(view.steps)} steps, expected at least {_MIN_STEPS}",
            warning,
            _DEDUCT_FEW_STEPS,
        )

    if not view.sections:
        collector.add(
            "missing-output",
            "Pattern declares no output sections",
            critical,
            _DEDUCT_MISSING_OUTPUT,
        )
    elif len(view.sections) < _MIN_OUTPUT_SECTIONS:
        collector.add(
            "few-output-sections",
            f"Pattern declares {len(view.sections)} output sections, "
            f"expected at least {_MIN_OUTPUT_SECTIONS}",
            warning,
            _DEDUCT_FEW_OUTPUT_SECTIONS,
        )

    for section in _missing_required_sections(view, config.required_sections):
        collector.add(
            "missing-required-section",
            f"Missing required section: {section}",
            warning,
            _DEDUCT_MISSING_REQUIRED_SECTION,
        )

    directives = view.directive_text
    if not has_scoring_language(directives):
        collector.add(
            "missing-scoring",
            "No scoring or rating instructions found",
            warning,
            _DEDUCT_MISSING_SCORING,
        )
    if not has_priority_language(directives):
        collector.add(
            "missing-prioritization",
            "No prioritization instructions found",
            EnumIssueSeverity.INFO,
            _DEDUCT_MISSING_PRIORITIZATION,
        )

    word_count = view.word_count
    if word_count < config.minimum_word_count:
        collector.add(
            "low-word-count",
            f"Word count {word_count} is below the minimum of {config.minimum_word_count}",
            warning,
            _DEDUCT_LOW_WORD_COUNT,
        )

    return collector


def _compliance_checks(
    view: _StructureView, config: ModelValidatorConfig
) -> ModelComplianceChecks:
    return ModelComplianceChecks(
        has_identity=(
            len(view.identity) >= _MIN_IDENTITY_CHARS
            and contains_any(view.identity, _EXPERTISE_MARKERS)
        ),
        has_purpose=len(view.purpose) >= _MIN_PURPOSE_CHARS,
        has_steps=(
            len(view.steps) >= _MIN_STEPS
            and all(len(step) >= _MIN_STEP_CHARS for step in view.steps)
        ),
        has_output=len(view.sections) >= _MIN_OUTPUT_SECTIONS,
        has_instructions=(
            len(view.instructions) >= _MIN_INSTRUCTIONS
            and all(len(item) >= _MIN_INSTRUCTION_CHARS for item in view.instructions)
        ),
        has_scoring=has_scoring_language(view.directive_text),
        meets_word_count=view.word_count >= config.minimum_word_count,
        has_required_sections=not _missing_required_sections(view, config.required_sections),
    )


def _action_step_ratio(steps: tuple[str, ...]) -> float:
    if not steps:
        return 0.0
    with_action = sum(1 for step in steps if contains_any(step, _ACTION_VERBS))
    return with_action / len(steps)


def _suggestions(
    view: _StructureView,
    issues: list[ModelValidationIssue],
    config: ModelValidatorConfig,
) -> tuple[ModelValidationSuggestion, ...]:
    high = EnumRecommendationPriority.HIGH
    medium = EnumRecommendationPriority.MEDIUM
    low = EnumRecommendationPriority.LOW
    critical_count = sum(1 for i in issues if i.severity is EnumIssueSeverity.CRITICAL)
    missing_sections = _missing_required_sections(view, config.required_sections)

    # (applies, priority, message) in priority order
    table: tuple[tuple[bool, EnumRecommendationPriority, str], ...] = (
        (
            critical_count > 0,
            high,
            f"Resolve the {critical_count} critical issue(s) before publishing this pattern",
        ),
        (
            bool(missing_sections),
            high,
            "Add the missing required sections: " + ", ".join(missing_sections),
        ),
        (
            not has_scoring_language(view.directive_text),
            medium,
            "Add a numeric scoring scale (for example 1-10 or 0-100) to the output instructions",
        ),
        (
            not has_priority_language(view.directive_text),
            medium,
            "Label recommendations with HIGH/MEDIUM/LOW priority",
        ),
        (
            len(view.steps) < _RECOMMENDED_STEPS,
            medium,
            f"Expand the processing steps to at least {_RECOMMENDED_STEPS} for a more thorough analysis",
        ),
        (
            bool(view.identity) and not contains_any(view.identity, _EXPERTISE_MARKERS),
            low,
            'State the expert role explicitly in the identity (for example "You are an expert ...")',
        ),
        (
            bool(view.steps) and _action_step_ratio(view.steps) < _MIN_ACTION_STEP_RATIO,
            low,
            "Start steps with analytical action verbs such as analyze, extract or evaluate",
        ),
        (
            not has_example_language("\n".join(view.instructions)),
            low,
            "Include examples in the output instructions",
        ),
    )
    suggestions = [
        ModelValidationSuggestion(message=message, priority=priority)
        for applies, priority, message in table
        if applies
    ]
    return tuple(suggestions[:_MAX_SUGGESTIONS])


def validate_pattern(
    template: ModelPatternTemplate,
    config: ModelValidatorConfig | None = None,
) -> ModelValidationResult:
    """Validate one pattern's structure against the validation policy.

    Never raises for a well-formed template; every deficiency is reported as
    an issue on the returned result.

    Args:
        template: Pattern to validate. Not mutated.
        config: Validation policy. Defaults to ``ModelValidatorConfig()``.

    Returns:
        Frozen validation result. Identical inputs yield identical results.
    """
    config = config or ModelValidatorConfig()
    view = _StructureView.of(template.structure)
    collector = _collect_issues(template, view, config)

    score = max(0, _START_SCORE - collector.total_deduction)
    has_critical = any(
        issue.severity is EnumIssueSeverity.CRITICAL for issue in collector.issues
    )
    is_valid = score >= config.minimum_score and not has_critical

    result = ModelValidationResult(
        pattern_name=template.name,
        is_valid=is_valid,
        score=score,
        minimum_score=config.minimum_score,
        word_count=view.word_count,
        follows_structure=view.follows_structure,
        issues=tuple(collector.issues),
        suggestions=_suggestions(view, collector.issues, config),
        compliance_checks=_compliance_checks(view, config),
    )
    logger.info(
        "Validated pattern %s: score=%d valid=%s issues=%d",
        template.name or "<unnamed>",
        score,
        is_valid,
        len(collector.issues),
    )
    return result


def validate_patterns(
    templates: Iterable[ModelPatternTemplate],
    config: ModelValidatorConfig | None = None,
) -> dict[str, ModelValidationResult]:
    """Validate many patterns independently.

    Args:
        templates: Patterns to validate.
        config: Shared validation policy.

    Returns:
        Mapping of pattern name to result. When two templates share a name the
        later one wins and a warning is logged.
    """
    results: dict[str, ModelValidationResult] = {}
    for template in templates:
        if template.name in results:
            logger.warning(
                "Duplicate pattern name %r in validation batch; keeping the later result",
                template.name,
            )
        results[template.name] = validate_pattern(template, config)
    return results


def validate_against_specification(
    template: ModelPatternTemplate,
    specification: ModelPatternSpecification,
) -> ModelSpecificationCheck:
    """Check a template against the expectations of its specification.

    Args:
        template: Pattern to check.
        specification: Declared expectations (required sections, word count,
            scoring and recommendation requirements).

    Returns:
        Specification check with every unmet expectation listed in ``issues``.
    """
    view = _StructureView.of(template.structure)
    criteria = specification.validation_criteria
    all_text = "\n".join((view.identity, view.purpose, view.directive_text))

    missing = _missing_required_sections(view, specification.required_output_sections)
    word_count = view.word_count
    meets_word_count = word_count >= criteria.minimum_word_count
    has_scoring = not criteria.scoring_required or has_scoring_language(all_text)
    has_recommendations = not criteria.recommendations_required or (
        has_recommendation_language("\n".join((*view.sections, *view.instructions)))
    )

    issues: list[str] = [f"Missing required section: {section}" for section in missing]
    if not meets_word_count:
        issues.append(
            f"Word count {word_count} is below the specification minimum of "
            f"{criteria.minimum_word_count}"
        )
    if not has_scoring:
        issues.append("Specification requires scoring but no scoring keywords were found")
    if not has_recommendations:
        issues.append(
            "Specification requires recommendations but no recommendation section was found"
        )

    return ModelSpecificationCheck(
        pattern_name=template.name,
        compliant=not issues,
        missing_sections=tuple(missing),
        word_count=word_count,
        meets_word_count=meets_word_count,
        has_scoring=has_scoring,
        has_recommendations=has_recommendations,
        issues=tuple(issues),
    )


__all__ = [
    "validate_against_specification",
    "validate_pattern",
    "validate_patterns",
]
