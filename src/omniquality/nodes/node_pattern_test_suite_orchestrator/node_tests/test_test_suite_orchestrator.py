# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Unit tests for the pattern test suite orchestrator.

Covers:
- The five category checks on a complete and an incomplete pattern
- Weighted suite aggregation and grade
- Executor failures recorded as failed tests, never raised
- Quality gate, rankings and category metrics
- Export/import round trip and rejection of malformed payloads
- Forwarding of results to a quality system
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from omniquality.enums import EnumQualityGrade
from omniquality.exceptions import QualityDataImportError, UnknownPatternError
from omniquality.models import (
    INTEGRATION_TESTS,
    OUTPUT_TESTS,
    PERFORMANCE_TESTS,
    STRUCTURE_TESTS,
    SUITE_EXECUTION,
    SYNTAX_TESTS,
    ModelPatternTemplate,
    ModelTestResult,
)
from omniquality.nodes.node_pattern_test_suite_orchestrator import (
    ModelIntegrationProfile,
    ModelPatternTestConfig,
    ModelScoringCriteria,
    PatternTestSuiteOrchestrator,
    calculate_suite_results,
)
from omniquality.nodes.node_pattern_test_suite_orchestrator.handlers import (
    failed_suite_result,
    run_structure_checks,
    run_syntax_checks,
)
from omniquality.quality_system import QualityAssuranceSystem

pytestmark = pytest.mark.unit

_PATTERN = """# IDENTITY and PURPOSE

You are an expert UX analyst specializing in wireframe flow analysis. You evaluate how users move through screens and where they get stuck.

# STEPS

- Analyze the wireframe flow from entry to completion
- Identify navigation dead ends and confusing transitions
- Evaluate form fields and validation feedback

# OUTPUT

- FLOW SUMMARY: overview of the flow
- USABILITY ISSUES: problems found in the flow
- RECOMMENDATIONS: fixes labelled HIGH/MEDIUM/LOW

# OUTPUT INSTRUCTIONS

- Rate each flow (1-10)
- Label every recommendation with a priority

# INPUT

INPUT:
"""


class _FailingExecutor:
    async def execute(self, template: ModelPatternTemplate, sample_input: str) -> str:
        raise RuntimeError("backend offline")


def _strong_config(name: str = "strong") -> ModelPatternTestConfig:
    return ModelPatternTestConfig(
        pattern_name=name,
        pattern_content=_PATTERN,
        sample_inputs=("Checkout flow with three screens", "Signup flow"),
        expected_output_structure=("FLOW SUMMARY", "USABILITY ISSUES", "RECOMMENDATIONS"),
    )


def _weak_config(name: str = "weak") -> ModelPatternTestConfig:
    return ModelPatternTestConfig(
        pattern_name=name,
        pattern_content="Just summarize the text.",
        integration=ModelIntegrationProfile(
            registry_compatible=False,
            export_compatible=False,
            chaining_compatible=False,
            command_compatible=False,
        ),
    )


def _category_result(name: str, score: float, max_score: float) -> ModelTestResult:
    return ModelTestResult(
        test_name=name, passed=score >= max_score * 0.7, score=score, max_score=max_score
    )


# =============================================================================
# Category checks
# =============================================================================


def test_syntax_checks_full_marks() -> None:
    result = run_syntax_checks(_strong_config())

    assert result.score == 20.0
    assert result.passed is True
    assert result.warnings == ()


def test_syntax_checks_missing_sections() -> None:
    result = run_syntax_checks(_weak_config())

    assert result.score == 0.0
    assert result.passed is False
    assert "Missing required section: # STEPS" in result.errors


def test_structure_checks_full_marks() -> None:
    result = run_structure_checks(_strong_config())

    assert result.score == 25.0
    assert result.passed is True


def test_structure_checks_partial_output_coverage() -> None:
    config = _strong_config().model_copy(
        update={"expected_output_structure": ("FLOW SUMMARY", "RISK MATRIX")}
    )

    result = run_structure_checks(config)

    assert result.score == 20.0
    assert "Missing output sections: RISK MATRIX" in result.warnings


def test_passing_check_demotes_errors_to_warnings() -> None:
    config = _strong_config().model_copy(
        update={"required_sections": (*_strong_config().required_sections, "# EXAMPLES")}
    )

    result = run_syntax_checks(config)

    assert result.passed is True
    assert result.errors == ()
    assert "Missing required section: # EXAMPLES" in result.warnings


# =============================================================================
# Suite aggregation
# =============================================================================


def test_calculate_suite_results_weighted_score() -> None:
    results = (
        _category_result(SYNTAX_TESTS, 16.0, 20.0),
        _category_result(STRUCTURE_TESTS, 20.0, 25.0),
        _category_result(OUTPUT_TESTS, 24.0, 30.0),
        _category_result(INTEGRATION_TESTS, 12.0, 15.0),
        _category_result(PERFORMANCE_TESTS, 8.0, 10.0),
    )

    suite = calculate_suite_results("p", results, 12.0, ModelScoringCriteria())

    assert suite.overall_score == 80.0
    assert suite.max_score == 100.0
    assert suite.quality_grade is EnumQualityGrade.B
    assert suite.pass_rate == 100.0
    assert suite.total_tests == 5


def test_failed_suite_result_is_grade_f() -> None:
    suite = failed_suite_result("p", RuntimeError("boom"), 3.0)

    assert suite.quality_grade is EnumQualityGrade.F
    assert suite.total_tests == suite.failed_tests == 1
    assert suite.test_results[0].test_name == SUITE_EXECUTION
    assert suite.test_results[0].errors == ("boom",)


def test_scoring_weights_must_sum_to_one() -> None:
    with pytest.raises(ValidationError):
        ModelScoringCriteria(syntax_weight=0.5)


# =============================================================================
# Orchestrator
# =============================================================================


@pytest.mark.asyncio
async def test_strong_pattern_scores_grade_a() -> None:
    orchestrator = PatternTestSuiteOrchestrator([_strong_config()])

    result = await orchestrator.run_pattern_tests("strong")

    assert result.overall_score == 100.0
    assert result.quality_grade is EnumQualityGrade.A
    assert result.passed_tests == result.total_tests == 5
    assert [test.test_name for test in result.test_results] == [
        SYNTAX_TESTS,
        STRUCTURE_TESTS,
        OUTPUT_TESTS,
        INTEGRATION_TESTS,
        PERFORMANCE_TESTS,
    ]
    assert any(rec.startswith("Excellent quality!") for rec in result.recommendations)
    assert orchestrator.get_test_results("strong") == result


@pytest.mark.asyncio
async def test_unknown_pattern_raises() -> None:
    orchestrator = PatternTestSuiteOrchestrator()

    with pytest.raises(UnknownPatternError, match="No test configuration found for pattern: ghost"):
        await orchestrator.run_pattern_tests("ghost")


@pytest.mark.asyncio
async def test_executor_failure_is_recorded_not_raised() -> None:
    orchestrator = PatternTestSuiteOrchestrator(
        [_strong_config()], executor=_FailingExecutor()
    )

    result = await orchestrator.run_pattern_tests("strong")

    output = result.get_test(OUTPUT_TESTS)
    performance = result.get_test(PERFORMANCE_TESTS)
    assert output is not None and performance is not None
    assert output.passed is False
    assert "Failed to process sample: Signup flow - backend offline" in output.errors
    assert performance.errors == ("Performance test execution failed: backend offline",)
    assert result.total_tests == 5


@pytest.mark.asyncio
async def test_run_all_and_rankings() -> None:
    orchestrator = PatternTestSuiteOrchestrator([_weak_config(), _strong_config()])

    results = await orchestrator.run_all_pattern_tests()

    assert list(results) == ["weak", "strong"]
    assert orchestrator.get_patterns_needing_improvement() == ("weak",)
    assert orchestrator.validate_pattern_quality("strong") is True
    assert orchestrator.validate_pattern_quality("weak") is False
    assert orchestrator.validate_pattern_quality("never-run") is False
    top = orchestrator.get_top_performing_patterns(limit=1)
    assert [ranking.pattern_name for ranking in top] == ["strong"]
    assert top[0].grade is EnumQualityGrade.A
    assert results["weak"].quality_grade is EnumQualityGrade.F


@pytest.mark.asyncio
async def test_pattern_metrics() -> None:
    orchestrator = PatternTestSuiteOrchestrator([_weak_config()])
    await orchestrator.run_pattern_tests("weak")

    metrics = orchestrator.get_pattern_metrics("weak")

    assert metrics is not None
    assert metrics.syntax_score == 0.0
    assert metrics.integration_score == 0.0
    assert metrics.performance_score == 100.0
    assert orchestrator.get_pattern_metrics("strong") is None


@pytest.mark.asyncio
async def test_export_import_round_trip() -> None:
    source = PatternTestSuiteOrchestrator([_strong_config(), _weak_config()])
    await source.run_all_pattern_tests()

    target = PatternTestSuiteOrchestrator()
    target.import_test_results(source.export_test_results())

    assert target.get_all_test_results() == source.get_all_test_results()


@pytest.mark.asyncio
async def test_malformed_import_leaves_results_untouched() -> None:
    orchestrator = PatternTestSuiteOrchestrator([_strong_config()])
    await orchestrator.run_pattern_tests("strong")

    with pytest.raises(QualityDataImportError):
        orchestrator.import_test_results('{"results": "not a mapping"}')

    assert set(orchestrator.get_all_test_results()) == {"strong"}


@pytest.mark.asyncio
async def test_clear_test_results() -> None:
    orchestrator = PatternTestSuiteOrchestrator([_strong_config()])
    await orchestrator.run_pattern_tests("strong")

    orchestrator.clear_test_results()

    assert orchestrator.get_all_test_results() == {}
    assert orchestrator.get_test_config("strong") is not None


@pytest.mark.asyncio
async def test_results_forwarded_to_quality_system() -> None:
    system = QualityAssuranceSystem()
    orchestrator = PatternTestSuiteOrchestrator(
        [_strong_config()], quality_system=system
    )

    await orchestrator.run_pattern_tests("strong")

    assessment = system.get_pattern_assessment("strong")
    assert assessment is not None
    assert len(system.get_pattern_history("strong")) == 1


@pytest.mark.asyncio
async def test_suite_report() -> None:
    orchestrator = PatternTestSuiteOrchestrator([_strong_config(), _weak_config()])
    await orchestrator.run_all_pattern_tests()

    report = orchestrator.generate_test_report()

    assert report.startswith("# Pattern Test Suite Report")
    assert "**Total Patterns Tested**: 2" in report
    assert "### strong" in report
    assert "- **weak**: " in report


def test_suite_report_without_results() -> None:
    assert "Run tests first." in PatternTestSuiteOrchestrator().generate_test_report()
