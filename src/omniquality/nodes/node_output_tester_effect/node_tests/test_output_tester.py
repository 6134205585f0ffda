# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Unit tests for the output tester.

Covers:
- Suite counts across samples, scenarios and validation samples
- Section conformance grading of generated output
- Executor failure, timeout, non-text output and grading errors become
  failed results, never exceptions
- Performance metrics toggle
- Batch runs and the markdown report

Protocol conformance is asserted inline in the mock executors' constructors.
"""

from __future__ import annotations

import pytest

from omniquality.enums import EnumSuiteHealth
from omniquality.models import ModelPatternSpecification, ModelPatternTemplate
from omniquality.models.model_pattern_specification import (
    ModelOutputSectionSpec,
    ModelValidationCriteria,
)
from omniquality.nodes.node_output_tester_effect import (
    ModelOutputTestConfig,
    ModelSampleCollection,
    OutputTesterSettings,
    ProtocolPatternExecutor,
    SimulatedPatternExecutor,
    generate_test_report,
    run_batch_output_tests,
    run_pattern_output_tests,
)
from omniquality.nodes.node_output_tester_effect.handlers import handler_output_test
from omniquality.nodes.node_output_tester_effect.handlers.handler_output_scoring import (
    extract_output_sections,
    grade_output,
)
from omniquality.nodes.node_output_tester_effect.models import (
    ModelOutputTestRequest,
    ModelSampleInput,
)

pytestmark = pytest.mark.unit


# =============================================================================
# Grading
# =============================================================================


def test_extract_output_sections_reads_headings_and_labels() -> None:
    output = "# SUMMARY\ntext\n## Details\nRISK LEVEL: high\n"

    assert extract_output_sections(output) == ("SUMMARY", "Details", "RISK LEVEL")


def test_grade_output_full_section_match(
    wireframe_template: ModelPatternTemplate, conformant_output: str
) -> None:
    grade = grade_output(
        conformant_output,
        wireframe_template,
        wireframe_template.structure.output_sections,
        ModelValidationCriteria(scoring_required=True),
    )

    assert grade.sections_matched == grade.sections_expected == 3
    assert grade.missing_sections == ()
    assert grade.format_flags["includes_scoring"] is True
    assert 90.0 <= grade.score <= 100.0


def test_grade_output_reports_missing_sections(
    wireframe_template: ModelPatternTemplate,
) -> None:
    grade = grade_output(
        "# FLOW SUMMARY\n\nOnly one section here.",
        wireframe_template,
        ("FLOW SUMMARY", "RISKS"),
        ModelValidationCriteria(),
    )

    assert grade.missing_sections == ("RISKS",)
    assert grade.section_ratio == 0.5
    assert any("RISKS" in warning for warning in grade.warnings)


# =============================================================================
# run_pattern_output_tests
# =============================================================================


@pytest.mark.asyncio
async def test_suite_counts_every_test_class(
    wireframe_template: ModelPatternTemplate,
    sample_collection: ModelSampleCollection,
    conformant_executor: ProtocolPatternExecutor,
) -> None:
    suite = await run_pattern_output_tests(
        wireframe_template, sample_collection, executor=conformant_executor
    )

    assert suite.total_tests == sample_collection.total_count == 4
    assert suite.passed_tests == 4
    assert suite.failed_tests == 0
    assert len(conformant_executor.calls) == 4  # type: ignore[attr-defined]
    assert [result.test_name for result in suite.results] == [
        "Sample: checkout",
        "Sample: signup",
        "Scenario (edge_case): empty input",
        "Validation: onboarding",
    ]


@pytest.mark.asyncio
async def test_conformant_suite_is_healthy(
    wireframe_template: ModelPatternTemplate,
    sample_collection: ModelSampleCollection,
    conformant_executor: ProtocolPatternExecutor,
) -> None:
    suite = await run_pattern_output_tests(
        wireframe_template,
        sample_collection,
        executor=conformant_executor,
    )

    assert suite.pass_rate == 1.0
    assert suite.summary.overall_health is EnumSuiteHealth.EXCELLENT
    assert suite.summary.critical_issues == ()
    assert all(result.section_match_ratio == 1.0 for result in suite.results)


@pytest.mark.asyncio
async def test_simulated_executor_is_the_default(
    wireframe_template: ModelPatternTemplate,
    sample_collection: ModelSampleCollection,
) -> None:
    suite = await run_pattern_output_tests(wireframe_template, sample_collection)

    assert suite.total_tests == 4
    assert suite.passed_tests == 4


@pytest.mark.asyncio
async def test_missing_required_section_fails_samples(
    wireframe_template: ModelPatternTemplate,
    sample_collection: ModelSampleCollection,
    conformant_executor: ProtocolPatternExecutor,
) -> None:
    specification = ModelPatternSpecification(
        output_sections=(ModelOutputSectionSpec(name="RISK ASSESSMENT"),)
    )

    suite = await run_pattern_output_tests(
        wireframe_template,
        sample_collection,
        specification,
        executor=conformant_executor,
    )

    samples = [r for r in suite.results if r.test_name.startswith("Sample:")]
    assert samples
    assert not any(result.passed for result in samples)
    assert all(result.sections_matched == 0 for result in samples)
    assert "Ensure every required output section is generated" in suite.summary.recommendations


@pytest.mark.asyncio
async def test_per_sample_expected_sections_are_added(
    wireframe_template: ModelPatternTemplate, conformant_executor: ProtocolPatternExecutor
) -> None:
    samples = ModelSampleCollection(
        samples=(
            ModelSampleInput(
                sample_id="checkout",
                content="Checkout flow",
                expected_sections=("APPENDIX",),
            ),
        )
    )
    specification = ModelPatternSpecification(
        output_sections=(ModelOutputSectionSpec(name="FLOW SUMMARY"),)
    )

    suite = await run_pattern_output_tests(
        wireframe_template,
        samples,
        specification,
        executor=conformant_executor,
    )

    result = suite.results[0]
    assert result.sections_expected == 2
    assert result.sections_matched == 1
    assert result.passed is False


@pytest.mark.asyncio
async def test_executor_failure_becomes_failed_result(
    wireframe_template: ModelPatternTemplate,
    sample_collection: ModelSampleCollection,
    failing_executor: ProtocolPatternExecutor,
) -> None:
    suite = await run_pattern_output_tests(
        wireframe_template, sample_collection, executor=failing_executor
    )

    assert suite.total_tests == 4
    assert suite.passed_tests == 0
    assert suite.average_score == 0.0
    assert suite.summary.overall_health is EnumSuiteHealth.POOR
    assert all(
        result.errors == ("Test execution failed: model backend unavailable",)
        for result in suite.results
    )
    assert len(suite.summary.critical_issues) == 4
    assert "Improve error handling for inputs that fail to execute" in (
        suite.summary.recommendations
    )


@pytest.mark.asyncio
async def test_executor_timeout_becomes_failed_result(
    wireframe_template: ModelPatternTemplate,
    slow_executor: ProtocolPatternExecutor,
) -> None:
    samples = ModelSampleCollection(
        samples=(ModelSampleInput(sample_id="slow", content="Checkout flow"),)
    )

    suite = await run_pattern_output_tests(
        wireframe_template,
        samples,
        config=ModelOutputTestConfig(timeout_ms=50.0),
        executor=slow_executor,
    )

    result = suite.results[0]
    assert result.passed is False
    assert result.errors == ("Execution timed out after 50ms",)


@pytest.mark.asyncio
async def test_non_text_output_fails_only_that_entry(
    wireframe_template: ModelPatternTemplate,
    sample_collection: ModelSampleCollection,
    partially_broken_executor: ProtocolPatternExecutor,
) -> None:
    suite = await run_pattern_output_tests(
        wireframe_template, sample_collection, executor=partially_broken_executor
    )

    assert suite.total_tests == 4
    assert suite.passed_tests == 3
    assert suite.failed_tests == 1
    broken = {result.test_name: result for result in suite.results}["Sample: signup"]
    assert broken.passed is False
    assert broken.score == 0.0
    assert broken.errors == (
        "Test execution failed: executor returned NoneType instead of text",
    )
    assert suite.summary.critical_issues == (
        "Sample: signup: Test execution failed: executor returned NoneType instead of text",
    )


@pytest.mark.asyncio
async def test_grading_error_becomes_failed_result(
    wireframe_template: ModelPatternTemplate,
    sample_collection: ModelSampleCollection,
    conformant_executor: ProtocolPatternExecutor,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def broken_grader(*args, **kwargs):
        raise ValueError("unparseable output")

    monkeypatch.setattr(handler_output_test, "grade_output", broken_grader)

    suite = await run_pattern_output_tests(
        wireframe_template, sample_collection, executor=conformant_executor
    )

    assert suite.total_tests == 4
    assert suite.passed_tests == 0
    assert all(
        result.errors == ("Output grading failed: unparseable output",)
        for result in suite.results
    )


@pytest.mark.asyncio
async def test_batch_keeps_other_samples_when_one_output_is_not_text(
    wireframe_template: ModelPatternTemplate,
    sample_collection: ModelSampleCollection,
    partially_broken_executor: ProtocolPatternExecutor,
) -> None:
    requests = [ModelOutputTestRequest(template=wireframe_template, samples=sample_collection)]

    suites = await run_batch_output_tests(requests, executor=partially_broken_executor)

    suite = suites["analyze_wireframe_flow"]
    assert suite.total_tests == 4
    assert suite.passed_tests == 3


@pytest.mark.asyncio
async def test_empty_collection_yields_empty_poor_suite(
    wireframe_template: ModelPatternTemplate,
) -> None:
    suite = await run_pattern_output_tests(wireframe_template, ModelSampleCollection())

    assert suite.total_tests == 0
    assert suite.average_score == 0.0
    assert suite.pass_rate == 0.0
    assert suite.performance is None
    assert suite.summary.overall_health is EnumSuiteHealth.POOR


@pytest.mark.asyncio
async def test_performance_metrics_can_be_disabled(
    wireframe_template: ModelPatternTemplate,
    sample_collection: ModelSampleCollection,
    conformant_executor: ProtocolPatternExecutor,
) -> None:
    enabled = await run_pattern_output_tests(
        wireframe_template, sample_collection, executor=conformant_executor
    )
    disabled = await run_pattern_output_tests(
        wireframe_template,
        sample_collection,
        config=ModelOutputTestConfig(enable_performance_metrics=False),
        executor=conformant_executor,
    )

    assert enabled.performance is not None
    assert enabled.performance.slowest_test
    assert 10.0 < enabled.performance.estimated_memory_mb < 11.0
    assert disabled.performance is None


# =============================================================================
# Batch and reporting
# =============================================================================


@pytest.mark.asyncio
async def test_batch_isolates_patterns(
    wireframe_template: ModelPatternTemplate,
    sample_collection: ModelSampleCollection,
) -> None:
    other = wireframe_template.model_copy(update={"name": "summarize_meeting"})
    requests = [
        ModelOutputTestRequest(template=wireframe_template, samples=sample_collection),
        ModelOutputTestRequest(template=other, samples=sample_collection),
    ]

    suites = await run_batch_output_tests(requests, executor=SimulatedPatternExecutor())

    assert list(suites) == ["analyze_wireframe_flow", "summarize_meeting"]
    assert all(suite.total_tests == 4 for suite in suites.values())


@pytest.mark.asyncio
async def test_report_lists_results_and_issues(
    wireframe_template: ModelPatternTemplate,
    sample_collection: ModelSampleCollection,
    conformant_executor: ProtocolPatternExecutor,
    failing_executor: ProtocolPatternExecutor,
) -> None:
    good = await run_pattern_output_tests(
        wireframe_template,
        sample_collection,
        executor=conformant_executor,
    )
    bad = await run_pattern_output_tests(
        wireframe_template, sample_collection, executor=failing_executor
    )

    report = generate_test_report({"good": good, "bad": bad})

    assert report.startswith("# Output Test Report")
    assert "**Patterns Tested**: 2" in report
    assert "- **Estimated Memory**: 10." in report
    assert "[PASS] **Sample: checkout**" in report
    assert "### Critical Issues" in report


def test_report_without_suites() -> None:
    assert "No test results available." in generate_test_report({})


def test_output_tester_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PATTERN_OUTPUT_TEST_TIMEOUT_MS", "1500")
    monkeypatch.setenv("PATTERN_OUTPUT_TEST_PASS_THRESHOLD", "80")

    config = OutputTesterSettings().to_config()

    assert config.timeout_ms == 1500.0
    assert config.pass_threshold == 80.0
    assert config.scenario_pass_threshold == 60.0
