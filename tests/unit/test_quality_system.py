# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for the stateful quality assurance system.

Covers:
- Assessment from category scores and from orchestrated suite results
- Trend detection against recent history
- Portfolio metrics, grade distribution and attention list
- Threshold updates re-deriving verdicts without rewriting history
- Export/import round trip and rejection of malformed payloads
- Concurrent recording and instance isolation
"""

from __future__ import annotations

import json
from concurrent.futures import ThreadPoolExecutor

import pytest
from pydantic import ValidationError

from omniquality.enums import (
    EnumCertificationLevel,
    EnumQualityCategory,
    EnumQualityGrade,
    EnumQualityTrend,
    EnumRecommendationPriority,
)
from omniquality.exceptions import QualityConfigurationError, QualityDataImportError
from omniquality.models import (
    INTEGRATION_TESTS,
    OUTPUT_TESTS,
    PERFORMANCE_TESTS,
    STRUCTURE_TESTS,
    SYNTAX_TESTS,
    ModelPatternTestSuiteResult,
    ModelTestResult,
)
from omniquality.quality_system import system as system_module
from omniquality.quality_system import (
    ModelQualityAssessment,
    ModelQualityThresholds,
    QualityAssuranceSystem,
    quality_trend,
)

pytestmark = pytest.mark.unit

_CATEGORIES = tuple(EnumQualityCategory)


def _uniform(score: float) -> dict[EnumQualityCategory, float]:
    return dict.fromkeys(_CATEGORIES, score)


def _suite_result(
    *, output_score: float = 30.0, output_errors: tuple[str, ...] = ()
) -> ModelPatternTestSuiteResult:
    results = (
        ModelTestResult(test_name=SYNTAX_TESTS, passed=True, score=18.0, max_score=20.0),
        ModelTestResult(test_name=STRUCTURE_TESTS, passed=True, score=20.0, max_score=25.0),
        ModelTestResult(
            test_name=OUTPUT_TESTS,
            passed=output_score >= 21.0,
            score=output_score,
            max_score=30.0,
            errors=output_errors,
        ),
        ModelTestResult(
            test_name=INTEGRATION_TESTS,
            passed=True,
            score=15.0,
            max_score=15.0,
            warnings=("Pattern command structure may need adjustment",),
        ),
        ModelTestResult(test_name=PERFORMANCE_TESTS, passed=True, score=10.0, max_score=10.0),
    )
    passed = sum(1 for result in results if result.passed)
    return ModelPatternTestSuiteResult(
        pattern_name="extract_wisdom",
        overall_score=90.0,
        pass_rate=passed / len(results) * 100.0,
        total_tests=len(results),
        passed_tests=passed,
        failed_tests=len(results) - passed,
        test_results=results,
        quality_grade=EnumQualityGrade.A,
    )


@pytest.fixture
def system() -> QualityAssuranceSystem:
    return QualityAssuranceSystem()


@pytest.fixture
def portfolio(system: QualityAssuranceSystem) -> QualityAssuranceSystem:
    """Four patterns graded A, C, D and F."""
    for name, score in (("alpha", 92.0), ("bravo", 78.0), ("charlie", 65.0), ("delta", 45.0)):
        system.assess_category_scores(name, _uniform(score))
    return system


# =============================================================================
# Assessment
# =============================================================================


def test_assessment_from_category_scores(system: QualityAssuranceSystem) -> None:
    scores = dict(zip(_CATEGORIES, (95.0, 90.0, 85.0, 92.0, 88.0, 80.0, 90.0, 90.0), strict=True))

    assessment = system.assess_category_scores("extract_wisdom", scores)

    assert assessment.quality_score == 88.75
    assert assessment.quality_grade is EnumQualityGrade.B
    assert assessment.meets_threshold is True
    assert assessment.quality_trend is EnumQualityTrend.STABLE
    assert assessment.certification.level is EnumCertificationLevel.SILVER
    assert assessment.recommendations == ()
    assert assessment.critical_issues == ()


def test_low_categories_produce_prioritised_recommendations(
    system: QualityAssuranceSystem,
) -> None:
    scores = _uniform(90.0)
    scores[EnumQualityCategory.EFFICIENCY] = 55.0
    scores[EnumQualityCategory.USABILITY] = 65.0
    scores[EnumQualityCategory.PORTABILITY] = 75.0

    assessment = system.assess_category_scores("p", scores)

    assert [rec.priority for rec in assessment.recommendations] == [
        EnumRecommendationPriority.CRITICAL,
        EnumRecommendationPriority.HIGH,
        EnumRecommendationPriority.MEDIUM,
    ]
    assert assessment.recommendations[0].category is EnumQualityCategory.EFFICIENCY
    assert len(assessment.warnings) == 2


def test_category_below_fifty_is_critical(system: QualityAssuranceSystem) -> None:
    scores = _uniform(95.0)
    scores[EnumQualityCategory.RELIABILITY] = 40.0

    assessment = system.assess_category_scores("p", scores)

    assert assessment.meets_threshold is False
    assert assessment.certification.certified is False
    assert assessment.critical_issues == (
        "Critical reliability quality issue: score 40.0% is below 50%",
    )


def test_assessment_from_suite_result(system: QualityAssuranceSystem) -> None:
    content = "# IDENTITY and PURPOSE\n\n# STEPS\n\n- step\n\n# OUTPUT\n\n# OUTPUT INSTRUCTIONS\n\nINPUT:"

    assessment = system.assess_pattern_quality("extract_wisdom", _suite_result(), content)

    scores = assessment.category_scores
    assert scores[EnumQualityCategory.VALIDATION] == 90.0
    assert scores[EnumQualityCategory.CONFORMANCE] == 80.0
    assert scores[EnumQualityCategory.FUNCTIONALITY] == 100.0
    assert scores[EnumQualityCategory.PORTABILITY] == 100.0
    assert scores[EnumQualityCategory.EFFICIENCY] == 100.0
    assert scores[EnumQualityCategory.RELIABILITY] == 100.0
    assert scores[EnumQualityCategory.USABILITY] == 90.0
    assert scores[EnumQualityCategory.MAINTAINABILITY] == 100.0
    assert (
        "Integration Tests: Pattern command structure may need adjustment"
        in assessment.warnings
    )


def test_content_heuristics_default_without_content(system: QualityAssuranceSystem) -> None:
    assessment = system.assess_pattern_quality("extract_wisdom", _suite_result())

    assert assessment.category_scores[EnumQualityCategory.USABILITY] == 70.0
    assert assessment.category_scores[EnumQualityCategory.MAINTAINABILITY] == 60.0


def test_failed_test_errors_become_critical_issues(system: QualityAssuranceSystem) -> None:
    suite = _suite_result(output_score=9.0, output_errors=("Failed to process sample: x - boom",))

    assessment = system.assess_pattern_quality("extract_wisdom", suite)

    assert "Output Tests: Failed to process sample: x - boom" in assessment.critical_issues
    assert assessment.meets_threshold is False


# =============================================================================
# Trends
# =============================================================================


def test_quality_trend_without_history_is_stable() -> None:
    assert quality_trend(42.0, []) is EnumQualityTrend.STABLE


def test_trend_follows_recent_history(system: QualityAssuranceSystem) -> None:
    trends = [
        system.assess_category_scores("p", _uniform(score)).quality_trend
        for score in (70.0, 75.0, 80.0, 72.5, 75.5)
    ]

    assert trends == [
        EnumQualityTrend.STABLE,
        EnumQualityTrend.IMPROVING,
        EnumQualityTrend.IMPROVING,
        EnumQualityTrend.DECLINING,
        EnumQualityTrend.STABLE,
    ]
    assert len(system.get_pattern_history("p")) == 5


def test_small_steady_gains_read_as_improving(system: QualityAssuranceSystem) -> None:
    trends = [
        system.assess_category_scores("p", _uniform(50.0 + 0.4 * step)).quality_trend
        for step in range(20)
    ]

    assert trends[0] is EnumQualityTrend.STABLE
    assert set(trends[1:]) == {EnumQualityTrend.IMPROVING}


def test_small_steady_losses_read_as_declining() -> None:
    assert quality_trend(79.7, [80.9, 80.5, 80.1]) is EnumQualityTrend.DECLINING
    assert quality_trend(80.3, [80.9, 80.5, 80.1]) is EnumQualityTrend.STABLE


def test_portfolio_trend_analysis(system: QualityAssuranceSystem) -> None:
    system.assess_category_scores("p", _uniform(70.0))
    system.assess_category_scores("p", _uniform(80.0))

    trend = system.get_quality_metrics().trend_analysis

    assert trend.overall_trend is EnumQualityTrend.IMPROVING
    assert trend.previous_average == 70.0
    assert trend.current_average == 80.0
    assert trend.change == 10.0
    assert trend.category_trends[EnumQualityCategory.USABILITY] is EnumQualityTrend.IMPROVING


# =============================================================================
# Portfolio metrics
# =============================================================================


def test_quality_metrics_distribution(portfolio: QualityAssuranceSystem) -> None:
    metrics = portfolio.get_quality_metrics()

    assert metrics.total_patterns == 4
    assert metrics.patterns_passing_threshold == 2
    assert metrics.average_quality_score == 70.0
    assert metrics.quality_distribution == {
        EnumQualityGrade.A: 1,
        EnumQualityGrade.B: 0,
        EnumQualityGrade.C: 1,
        EnumQualityGrade.D: 1,
        EnumQualityGrade.F: 1,
    }
    assert metrics.top_performing_patterns == ("alpha", "bravo", "charlie", "delta")
    assert set(metrics.patterns_needing_attention) == {"charlie", "delta"}


def test_patterns_needing_attention_ordering(portfolio: QualityAssuranceSystem) -> None:
    flagged = portfolio.get_patterns_needing_attention()

    assert [a.pattern_name for a in flagged] == ["delta", "charlie"]


def test_patterns_needing_attention_custom_threshold(
    portfolio: QualityAssuranceSystem,
) -> None:
    flagged = portfolio.get_patterns_needing_attention(threshold=80.0)

    assert [a.pattern_name for a in flagged] == ["delta", "charlie", "bravo"]


def test_monitor_returns_latest_without_recording(portfolio: QualityAssuranceSystem) -> None:
    portfolio.assess_category_scores("alpha", _uniform(96.0))

    snapshot = portfolio.monitor_deployed_patterns()

    assert set(snapshot) == {"alpha", "bravo", "charlie", "delta"}
    assert snapshot["alpha"].quality_score == 96.0
    assert len(portfolio.get_pattern_history("alpha")) == 2


def test_empty_system_metrics(system: QualityAssuranceSystem) -> None:
    metrics = system.get_quality_metrics()

    assert metrics.total_patterns == 0
    assert metrics.average_quality_score == 0.0
    assert system.get_pattern_assessment("missing") is None
    assert system.get_pattern_history("missing") == ()


def test_quality_report_sections(portfolio: QualityAssuranceSystem) -> None:
    report = portfolio.generate_quality_report(report_period="2025-Q3")

    assert report.startswith("# Quality Assurance Report")
    assert "**Report Period**: 2025-Q3" in report
    assert "## Patterns Needing Attention" in report
    assert "## Action Plan" in report
    assert "[CRITICAL] Resolve critical issue in delta" in report


# =============================================================================
# Thresholds
# =============================================================================


def test_threshold_update_rederives_latest_not_history(
    portfolio: QualityAssuranceSystem,
) -> None:
    portfolio.update_quality_thresholds({"min_overall_score": 80.0})

    assert portfolio.get_pattern_assessment("bravo").meets_threshold is False
    assert portfolio.get_pattern_history("bravo")[0].meets_threshold is True
    assert portfolio.get_quality_metrics().patterns_passing_threshold == 1


def test_required_grade_raises_effective_minimum(system: QualityAssuranceSystem) -> None:
    thresholds = system.update_quality_thresholds({"required_grade": "B"})

    assert thresholds.effective_minimum_score == 80.0
    assert system.assess_category_scores("p", _uniform(78.0)).meets_threshold is False


def test_nested_threshold_update_merges(system: QualityAssuranceSystem) -> None:
    system.update_quality_thresholds({"category_minimums": {"validation": 90.0}})

    minimums = system.get_quality_thresholds().category_minimums
    assert minimums.validation == 90.0
    assert minimums.functionality == 75.0


@pytest.mark.parametrize(
    "updates",
    [{"min_overall_score": 150.0}, {"unknown_option": True}, {"category_minimums": {"speed": 1}}],
)
def test_invalid_threshold_update_rejected(
    system: QualityAssuranceSystem, updates: dict[str, object]
) -> None:
    before = system.get_quality_thresholds()

    with pytest.raises(QualityConfigurationError):
        system.update_quality_thresholds(updates)

    assert system.get_quality_thresholds() == before


def test_threshold_update_accepts_model(system: QualityAssuranceSystem) -> None:
    thresholds = ModelQualityThresholds(min_overall_score=85.0)

    assert system.update_quality_thresholds(thresholds) is thresholds


# =============================================================================
# Persistence
# =============================================================================


def test_export_import_round_trip(portfolio: QualityAssuranceSystem) -> None:
    portfolio.assess_category_scores("alpha", _uniform(94.0))
    portfolio.update_quality_thresholds({"min_overall_score": 75.0})

    restored = QualityAssuranceSystem()
    restored.import_quality_data(portfolio.export_quality_data())

    assert restored.get_quality_thresholds() == portfolio.get_quality_thresholds()
    for name in ("alpha", "bravo", "charlie", "delta"):
        assert restored.get_pattern_history(name) == portfolio.get_pattern_history(name)
    assert restored.get_quality_metrics() == portfolio.get_quality_metrics()


def test_import_replaces_named_history_and_keeps_others(
    portfolio: QualityAssuranceSystem,
) -> None:
    other = QualityAssuranceSystem()
    other.assess_category_scores("alpha", _uniform(50.0))

    portfolio.import_quality_data(other.export_quality_data())

    assert len(portfolio.get_pattern_history("alpha")) == 1
    assert portfolio.get_pattern_assessment("alpha").quality_score == 50.0
    assert portfolio.get_pattern_assessment("bravo") is not None


def test_import_ignores_unknown_threshold_keys(portfolio: QualityAssuranceSystem) -> None:
    payload = json.loads(portfolio.export_quality_data())
    payload["thresholds"]["legacy_option"] = 1

    restored = QualityAssuranceSystem()
    restored.import_quality_data(json.dumps(payload))

    assert restored.get_quality_metrics().total_patterns == 4


@pytest.mark.parametrize(
    "mutate",
    [
        lambda payload: payload.pop("exported_at"),
        lambda payload: payload.update(schema_version="0.9"),
        lambda payload: payload["history"].update(alpha=payload["history"]["bravo"]),
        lambda payload: payload["history"]["delta"][0].update(quality_grade="A"),
    ],
)
def test_malformed_import_rejected_and_state_untouched(
    portfolio: QualityAssuranceSystem, mutate
) -> None:
    payload = json.loads(portfolio.export_quality_data())
    mutate(payload)
    before = portfolio.get_quality_metrics()

    with pytest.raises(QualityDataImportError):
        portfolio.import_quality_data(json.dumps(payload))

    assert portfolio.get_quality_metrics() == before


def test_import_rejects_invalid_json(system: QualityAssuranceSystem) -> None:
    with pytest.raises(QualityDataImportError):
        system.import_quality_data("{not json")


def test_clear_history(portfolio: QualityAssuranceSystem) -> None:
    portfolio.clear_history("delta")
    assert portfolio.get_pattern_assessment("delta") is None
    assert portfolio.get_quality_metrics().total_patterns == 3

    portfolio.clear_history()
    assert portfolio.get_all_assessments() == {}


# =============================================================================
# Concurrency and isolation
# =============================================================================


def test_concurrent_assessments_are_all_recorded(system: QualityAssuranceSystem) -> None:
    def record(index: int) -> None:
        system.assess_category_scores(f"pattern-{index % 4}", _uniform(60.0 + index % 40))

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(record, range(200)))

    assert sum(len(system.get_pattern_history(f"pattern-{i}")) for i in range(4)) == 200
    assert system.get_quality_metrics().total_patterns == 4


@pytest.mark.parametrize("reset", ["clear", "import"])
def test_assessment_lands_in_history_replaced_mid_record(
    system: QualityAssuranceSystem, monkeypatch: pytest.MonkeyPatch, reset: str
) -> None:
    system.assess_category_scores("p", _uniform(70.0))
    empty_export = QualityAssuranceSystem().export_quality_data()
    real_build = system_module.build_assessment

    def build_after_reset(**kwargs):
        if reset == "clear":
            system.clear_history("p")
        else:
            payload = json.loads(empty_export)
            payload["history"] = {"p": []}
            system.import_quality_data(json.dumps(payload))
        return real_build(**kwargs)

    monkeypatch.setattr(system_module, "build_assessment", build_after_reset)
    system.assess_category_scores("p", _uniform(80.0))

    history = system.get_pattern_history("p")
    assert [entry.quality_score for entry in history] == [80.0]
    assert system.get_pattern_assessment("p") is not None


def test_assessment_grade_must_match_score(system: QualityAssuranceSystem) -> None:
    assessment = system.assess_category_scores("p", _uniform(45.0))
    data = assessment.model_dump()
    data["quality_grade"] = EnumQualityGrade.A

    with pytest.raises(ValidationError, match="does not match"):
        ModelQualityAssessment.model_validate(data)


def test_instances_do_not_share_state() -> None:
    first, second = QualityAssuranceSystem(), QualityAssuranceSystem()
    first.assess_category_scores("p", _uniform(90.0))
    first.update_quality_thresholds({"min_overall_score": 95.0})

    assert second.get_all_assessments() == {}
    assert second.get_quality_thresholds().min_overall_score == 70.0
