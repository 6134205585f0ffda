# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Suite aggregation: five category results into one suite result."""

from __future__ import annotations

import logging
import time

from omniquality.enums import EnumQualityGrade
from omniquality.models import (
    INTEGRATION_TESTS,
    OUTPUT_TESTS,
    PERFORMANCE_TESTS,
    STRUCTURE_TESTS,
    SUITE_EXECUTION,
    SYNTAX_TESTS,
    ModelPatternTestSuiteResult,
    ModelTestResult,
)
from omniquality.nodes.node_output_tester_effect.handlers.protocol_pattern_executor import (
    ProtocolPatternExecutor,
)
from omniquality.nodes.node_pattern_test_suite_orchestrator.handlers.handler_category_checks import (
    run_integration_checks,
    run_output_checks,
    run_performance_checks,
    run_structure_checks,
    run_syntax_checks,
)
from omniquality.nodes.node_pattern_test_suite_orchestrator.models.model_pattern_test_config import (
    ModelPatternTestConfig,
    ModelScoringCriteria,
)

logger = logging.getLogger(__name__)

_EXCELLENT_SCORE = 90.0


def category_weight(test_name: str, criteria: ModelScoringCriteria) -> float:
    """Weight for a named category test (0.0 for anything else)."""
    return {
        SYNTAX_TESTS: criteria.syntax_weight,
        STRUCTURE_TESTS: criteria.structure_weight,
        OUTPUT_TESTS: criteria.output_weight,
        INTEGRATION_TESTS: criteria.integration_weight,
        PERFORMANCE_TESTS: criteria.performance_weight,
    }.get(test_name, 0.0)


def suite_recommendations(
    test_results: tuple[ModelTestResult, ...],
    overall_score: float,
    min_passing_score: float,
) -> tuple[str, ...]:
    recommendations: list[str] = []
    for result in test_results:
        if not result.passed:
            recommendations.append(f"Improve {result.test_name.lower()}: {result.details}")
        recommendations.extend(
            f"Fix error in {result.test_name}: {error}" for error in result.errors
        )
        recommendations.extend(
            f"Address warning in {result.test_name}: {warning}"
            for warning in result.warnings
        )
    if overall_score < min_passing_score:
        recommendations.append(
            f"Overall quality score is below minimum threshold ({min_passing_score:.0f}%). "
            "Focus on major improvements."
        )
    if overall_score >= _EXCELLENT_SCORE:
        recommendations.append(
            "Excellent quality! Consider this pattern ready for production deployment."
        )
    return tuple(recommendations)


def calculate_suite_results(
    pattern_name: str,
    test_results: tuple[ModelTestResult, ...],
    execution_time_ms: float,
    criteria: ModelScoringCriteria,
) -> ModelPatternTestSuiteResult:
    """Weighted overall score, pass rate, grade and recommendations.

    ``overall_score = sum(percentage * weight)`` over the category tests;
    ``max_score`` is the summed weight scaled to 100.
    """
    total = len(test_results)
    passed = sum(1 for result in test_results if result.passed)
    overall = sum(
        result.percentage * category_weight(result.test_name, criteria)
        for result in test_results
    )
    max_score = sum(category_weight(result.test_name, criteria) for result in test_results)
    overall = round(min(overall, 100.0), 2)
    return ModelPatternTestSuiteResult(
        pattern_name=pattern_name,
        overall_score=overall,
        max_score=round(max_score * 100.0, 2),
        pass_rate=passed / total * 100.0 if total else 0.0,
        total_tests=total,
        passed_tests=passed,
        failed_tests=total - passed,
        execution_time_ms=execution_time_ms,
        test_results=test_results,
        quality_grade=EnumQualityGrade.from_score(overall),
        recommendations=suite_recommendations(
            test_results, overall, criteria.min_passing_score
        ),
    )


def failed_suite_result(
    pattern_name: str, error: Exception, execution_time_ms: float
) -> ModelPatternTestSuiteResult:
    """Grade-F result recording an error that aborted the whole suite."""
    return ModelPatternTestSuiteResult(
        pattern_name=pattern_name,
        overall_score=0.0,
        pass_rate=0.0,
        total_tests=1,
        passed_tests=0,
        failed_tests=1,
        execution_time_ms=execution_time_ms,
        test_results=(
            ModelTestResult(
                test_name=SUITE_EXECUTION,
                passed=False,
                score=0.0,
                details=f"Test suite failed to execute: {error}",
                errors=(str(error) or type(error).__name__,),
                execution_time_ms=execution_time_ms,
            ),
        ),
        quality_grade=EnumQualityGrade.F,
        recommendations=("Fix test suite execution errors before proceeding",),
    )


async def run_test_suite(
    config: ModelPatternTestConfig,
    executor: ProtocolPatternExecutor,
    timeout_ms: float,
) -> ModelPatternTestSuiteResult:
    """Run the five category tests for one pattern.

    Never raises: an unexpected error becomes a failed suite result.
    """
    start = time.perf_counter()
    try:
        results = (
            run_syntax_checks(config),
            run_structure_checks(config),
            await run_output_checks(config, executor, timeout_ms),
            run_integration_checks(config),
            await run_performance_checks(config, executor, timeout_ms),
        )
    except Exception as exc:
        elapsed = (time.perf_counter() - start) * 1000
        logger.warning("Test suite failed for pattern %s: %s", config.pattern_name, exc)
        return failed_suite_result(config.pattern_name, exc, elapsed)

    elapsed = (time.perf_counter() - start) * 1000
    suite = calculate_suite_results(
        config.pattern_name, results, elapsed, config.scoring_criteria
    )
    logger.info(
        "Test suite for pattern %s: grade=%s score=%.2f passed=%d/%d",
        suite.pattern_name,
        suite.quality_grade.value,
        suite.overall_score,
        suite.passed_tests,
        suite.total_tests,
    )
    return suite


__all__ = [
    "calculate_suite_results",
    "category_weight",
    "failed_suite_result",
    "run_test_suite",
    "suite_recommendations",
]
