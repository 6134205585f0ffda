# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

# Copyright (c) 2025 OmniNode Team
"""Quality assessment: merge validation and output testing into one verdict.

Flow per pattern:
    1. Project the eight category scores (handler_category_projections).
    2. Weighted mean with the configured category weights -> quality_score.
    3. Fixed grade bands -> quality_grade.
    4. Gate: meets_threshold = score >= minimum and no critical issues.
    5. Performance check when certification is enabled and metrics exist.
    6. Certification tier from the fixed ladder.
    7. Shortfall recommendations, worst category first.

Nothing here reads the clock or shared state, so identical inputs and
configuration always give an identical report.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from omniquality.enums import EnumQualityGrade
from omniquality.models import ModelPatternSpecification, ModelPatternTemplate
from omniquality.nodes.node_output_tester_effect.models.model_test_suite import (
    ModelTestSuite,
)
from omniquality.nodes.node_pattern_validate_compute.models.model_validation_result import (
    ModelValidationResult,
)
from omniquality.nodes.node_quality_assess_compute.handlers.handler_category_projections import (
    project_category_scores,
)
from omniquality.nodes.node_quality_assess_compute.handlers.handler_quality_scoring import (
    build_certification_status,
    shortfall_recommendations,
    standards_compliance,
    weighted_quality_score,
)
from omniquality.nodes.node_quality_assess_compute.models.model_quality_config import (
    ModelQualityConfig,
)
from omniquality.nodes.node_quality_assess_compute.models.model_quality_report import (
    ModelBatchAssessment,
    ModelQualityReport,
    ModelStandardsComplianceSummary,
)

logger = logging.getLogger(__name__)


def _performance_failures(
    test_suite: ModelTestSuite, config: ModelQualityConfig
) -> tuple[str, ...] | None:
    """Describe broken performance thresholds.

    Returns None when performance is not part of the decision (certification
    disabled or no metrics collected), otherwise the failures (possibly empty).
    """
    metrics = test_suite.performance
    if not config.enable_certification or metrics is None:
        return None
    thresholds = config.performance_thresholds
    failures: list[str] = []
    if metrics.average_execution_time_ms > thresholds.max_execution_time_ms:
        failures.append(
            f"Average execution time {metrics.average_execution_time_ms:.1f}ms exceeds "
            f"{thresholds.max_execution_time_ms:.1f}ms"
        )
    if metrics.throughput_per_second < thresholds.min_throughput:
        failures.append(
            f"Throughput {metrics.throughput_per_second:.2f}/s is below "
            f"{thresholds.min_throughput:.2f}/s"
        )
    memory_mb = metrics.estimated_memory_mb
    if memory_mb is not None and memory_mb > thresholds.max_memory_mb:
        failures.append(
            f"Estimated memory {memory_mb:.1f}MB exceeds {thresholds.max_memory_mb:.1f}MB"
        )
    reliability = test_suite.pass_rate * 100.0
    if reliability < thresholds.min_reliability:
        failures.append(
            f"Pass rate {reliability:.1f}% is below {thresholds.min_reliability:.1f}%"
        )
    return tuple(failures)


def assess_quality(
    template: ModelPatternTemplate,
    validation_result: ModelValidationResult,
    test_suite: ModelTestSuite,
    specification: ModelPatternSpecification | None = None,
    config: ModelQualityConfig | None = None,
) -> ModelQualityReport:
    """Produce the multi-category quality report for one pattern.

    Args:
        template: Pattern under assessment.
        validation_result: Output of ``validate_pattern`` for the template.
        test_suite: Output of ``run_pattern_output_tests`` for the template.
        specification: Declared expectations, used for the conformance
            fallback when no test result expected any sections.
        config: Assessor configuration. Defaults to ``ModelQualityConfig()``.

    Returns:
        A report satisfying certified => meets_threshold => no critical issues.
    """
    specification = specification or ModelPatternSpecification()
    config = config or ModelQualityConfig()

    category_scores = project_category_scores(
        template, validation_result, test_suite, specification, config
    )
    quality_score = weighted_quality_score(category_scores, config.category_weights)
    grade = EnumQualityGrade.from_score(quality_score)

    critical_issues = tuple(issue.description for issue in validation_result.critical_issues)
    meets_threshold = quality_score >= config.minimum_quality_score and not critical_issues

    performance_failures = _performance_failures(test_suite, config)
    performance_met = None if performance_failures is None else not performance_failures

    certification = build_certification_status(
        quality_score=quality_score,
        minimum_quality_score=config.minimum_quality_score,
        critical_issue_count=len(critical_issues),
        performance_met=performance_met,
    )

    warnings = [issue.description for issue in validation_result.warning_issues]
    seen: set[str] = set(warnings)
    for result in test_suite.results:
        for warning in result.warnings:
            if warning not in seen:
                seen.add(warning)
                warnings.append(warning)
    warnings.extend(test_suite.summary.critical_issues)
    warnings.extend(performance_failures or ())

    report = ModelQualityReport(
        pattern_name=template.name,
        quality_score=quality_score,
        quality_grade=grade,
        category_scores=category_scores,
        standards_compliance=standards_compliance(
            category_scores, config.quality_standards
        ),
        certification=certification,
        meets_threshold=meets_threshold,
        performance_thresholds_met=performance_met,
        recommendations=shortfall_recommendations(
            category_scores, config.quality_standards, config.category_weights
        ),
        critical_issues=critical_issues,
        warnings=tuple(warnings),
    )
    logger.info(
        "Assessed pattern %s: score=%.2f grade=%s certified=%s level=%s",
        report.pattern_name,
        report.quality_score,
        report.quality_grade.value,
        certification.certified,
        certification.level.value,
    )
    return report


def assess_multiple_patterns(
    templates: Iterable[ModelPatternTemplate],
    validation_results: Mapping[str, ModelValidationResult],
    test_suites: Mapping[str, ModelTestSuite],
    specifications: Mapping[str, ModelPatternSpecification] | None = None,
    config: ModelQualityConfig | None = None,
) -> ModelBatchAssessment:
    """Assess many patterns, skipping any without both upstream results.

    A pattern missing from ``validation_results`` or ``test_suites`` is
    recorded in ``skipped`` with the reason instead of failing the batch.
    A missing specification falls back to the default.
    """
    specifications = specifications or {}
    reports: dict[str, ModelQualityReport] = {}
    skipped: dict[str, str] = {}

    for template in templates:
        name = template.name
        missing = [
            label
            for label, mapping in (
                ("validation result", validation_results),
                ("test suite", test_suites),
            )
            if name not in mapping
        ]
        if missing:
            reason = f"Missing {' and '.join(missing)}"
            logger.warning("Skipping quality assessment for pattern %s: %s", name, reason)
            skipped[name] = reason
            continue
        reports[name] = assess_quality(
            template,
            validation_results[name],
            test_suites[name],
            specifications.get(name),
            config,
        )

    logger.info(
        "Batch quality assessment: %d assessed, %d skipped", len(reports), len(skipped)
    )
    return ModelBatchAssessment(reports=reports, skipped=skipped)


def ensure_standards_compliance(
    reports: Iterable[ModelQualityReport],
) -> ModelStandardsComplianceSummary:
    """Partition reports into compliant, requires-improvement and non-compliant.

    Compliance is read from each report's stored verdicts, so the
    configuration that produced the reports is the one applied.
    """
    compliant: list[str] = []
    requires_improvement: list[str] = []
    non_compliant: list[str] = []
    for report in reports:
        if not report.meets_threshold:
            non_compliant.append(report.pattern_name)
        elif report.non_compliant_categories:
            requires_improvement.append(report.pattern_name)
        else:
            compliant.append(report.pattern_name)
    return ModelStandardsComplianceSummary(
        compliant=tuple(compliant),
        requires_improvement=tuple(requires_improvement),
        non_compliant=tuple(non_compliant),
    )


__all__ = [
    "assess_multiple_patterns",
    "assess_quality",
    "ensure_standards_compliance",
]
