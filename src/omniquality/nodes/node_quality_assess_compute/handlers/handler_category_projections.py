# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Category score projections for the quality assessor.

Each projection is a pure function of its explicit inputs and returns a
score in [0, 100]. No projection reads another category's score, so the
eight can be computed in any order.

    functionality    test_suite.average_score
    reliability      pass rate * 100 - penalty per critical validation issue
    usability        validation_result.score
    efficiency       100 within the time budget, else 100 * budget / elapsed
    maintainability  steps (40) + output sections (30) + instructions (30)
    portability      follows structure (60) + description (20) + practices (20)
    validation       passed compliance checks / total checks * 100
    conformance      mean section match ratio of the suite's results * 100
"""

from __future__ import annotations

from omniquality.enums import EnumQualityCategory
from omniquality.models import ModelPatternSpecification, ModelPatternTemplate
from omniquality.nodes.node_output_tester_effect.models.model_test_suite import (
    ModelTestSuite,
)
from omniquality.nodes.node_pattern_validate_compute.models.model_validation_result import (
    ModelValidationResult,
)
from omniquality.nodes.node_quality_assess_compute.handlers.handler_quality_scoring import (
    clamp_score,
)
from omniquality.nodes.node_quality_assess_compute.models.model_quality_config import (
    ModelQualityConfig,
)
from omniquality.utils.util_text_metrics import section_present

# Counts at which each structural proxy saturates.
_STEPS_SATURATION = 5
_SECTIONS_SATURATION = 5
_INSTRUCTIONS_SATURATION = 3
_MIN_DESCRIPTION_CHARS = 50


def functionality_score(test_suite: ModelTestSuite) -> float:
    return clamp_score(test_suite.average_score)


def reliability_score(
    test_suite: ModelTestSuite,
    validation_result: ModelValidationResult,
    penalty_per_critical: float,
) -> float:
    critical = len(validation_result.critical_issues)
    return clamp_score(test_suite.pass_rate * 100.0 - penalty_per_critical * critical)


def usability_score(validation_result: ModelValidationResult) -> float:
    return float(validation_result.score)


def efficiency_score(test_suite: ModelTestSuite, max_execution_time_ms: float) -> float:
    """Full marks inside the budget, then inversely proportional to elapsed time."""
    elapsed = test_suite.execution_time_ms
    if elapsed <= max_execution_time_ms:
        return 100.0
    return clamp_score(100.0 * max_execution_time_ms / elapsed)


def maintainability_score(template: ModelPatternTemplate) -> float:
    structure = template.structure
    steps = min(len(structure.steps) / _STEPS_SATURATION, 1.0)
    sections = min(len(structure.output_sections) / _SECTIONS_SATURATION, 1.0)
    instructions = min(
        len(structure.output_instructions) / _INSTRUCTIONS_SATURATION, 1.0
    )
    return clamp_score(steps * 40.0 + sections * 30.0 + instructions * 30.0)


def portability_score(
    template: ModelPatternTemplate, validation_result: ModelValidationResult
) -> float:
    score = 60.0 if validation_result.follows_structure else 0.0
    if len(template.description.strip()) >= _MIN_DESCRIPTION_CHARS:
        score += 20.0
    if template.best_practices:
        score += 20.0
    return clamp_score(score)


def validation_score(validation_result: ModelValidationResult) -> float:
    checks = validation_result.compliance_checks
    return clamp_score(100.0 * checks.passed_count / checks.total_count)


def conformance_score(
    template: ModelPatternTemplate,
    test_suite: ModelTestSuite,
    specification: ModelPatternSpecification,
) -> float:
    """Section conformance of generated output.

    Uses the mean section match ratio over results that expected sections.
    Without any, falls back to the share of the specification's required
    sections the template declares, and to 100 when nothing is required.
    """
    ratios = [
        ratio
        for ratio in (result.section_match_ratio for result in test_suite.results)
        if ratio is not None
    ]
    if ratios:
        return clamp_score(100.0 * sum(ratios) / len(ratios))
    required = specification.required_output_sections
    if not required:
        return 100.0
    declared = template.structure.output_sections
    present = sum(1 for section in required if section_present(section, declared))
    return clamp_score(100.0 * present / len(required))


def project_category_scores(
    template: ModelPatternTemplate,
    validation_result: ModelValidationResult,
    test_suite: ModelTestSuite,
    specification: ModelPatternSpecification,
    config: ModelQualityConfig,
) -> dict[EnumQualityCategory, float]:
    """Compute all eight category scores, rounded to 2 decimals."""
    scores = {
        EnumQualityCategory.FUNCTIONALITY: functionality_score(test_suite),
        EnumQualityCategory.RELIABILITY: reliability_score(
            test_suite, validation_result, config.reliability_penalty_per_critical
        ),
        EnumQualityCategory.USABILITY: usability_score(validation_result),
        EnumQualityCategory.EFFICIENCY: efficiency_score(
            test_suite, config.performance_thresholds.max_execution_time_ms
        ),
        EnumQualityCategory.MAINTAINABILITY: maintainability_score(template),
        EnumQualityCategory.PORTABILITY: portability_score(template, validation_result),
        EnumQualityCategory.VALIDATION: validation_score(validation_result),
        EnumQualityCategory.CONFORMANCE: conformance_score(
            template, test_suite, specification
        ),
    }
    return {category: round(score, 2) for category, score in scores.items()}


__all__ = [
    "conformance_score",
    "efficiency_score",
    "functionality_score",
    "maintainability_score",
    "portability_score",
    "project_category_scores",
    "reliability_score",
    "usability_score",
    "validation_score",
]
