# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Stateful quality assurance system.

Holds an append-only assessment history per pattern name plus the active
threshold configuration. Each instance owns its own state; there is no
module-level registry, so independent systems coexist freely.

Thread Safety:
    A registry lock guards the pattern-lock map, the history map and the
    thresholds. Each pattern has its own lock guarding its history list, so
    assessing two different patterns never contends beyond the brief
    registry lookup.

Thresholds:
    Stored category scores are never rewritten. Every read path re-derives
    ``meets_threshold``, standards compliance and certification from the
    stored scores under the thresholds active at read time.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError

from omniquality.enums import EnumQualityCategory, EnumQualityGrade, EnumQualityTrend
from omniquality.exceptions import QualityConfigurationError, QualityDataImportError
from omniquality.models import ModelPatternTestSuiteResult
from omniquality.quality_system.heuristics import (
    build_assessment,
    project_suite_scores,
    reinterpret,
)
from omniquality.quality_system.models import (
    ModelQualityAssessment,
    ModelQualityExport,
    ModelQualityMetrics,
    ModelQualityThresholds,
    ModelQualityTrendAnalysis,
)
from omniquality.quality_system.report import render_quality_system_report

logger = logging.getLogger(__name__)

TOP_PERFORMER_COUNT = 5
# Percentage change in the portfolio average that counts as a trend.
PORTFOLIO_TREND_PERCENT = 2.0


def _merge(base: dict[str, Any], updates: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in updates.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _direction(current: float, previous: float) -> tuple[EnumQualityTrend, float]:
    if previous <= 0.0:
        return EnumQualityTrend.STABLE, 0.0
    change_percent = (current - previous) / previous * 100.0
    if change_percent > PORTFOLIO_TREND_PERCENT:
        return EnumQualityTrend.IMPROVING, change_percent
    if change_percent < -PORTFOLIO_TREND_PERCENT:
        return EnumQualityTrend.DECLINING, change_percent
    return EnumQualityTrend.STABLE, change_percent


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def _needs_attention(assessment: ModelQualityAssessment, threshold: float | None) -> bool:
    if assessment.critical_issues:
        return True
    if threshold is None:
        return not assessment.meets_threshold
    return assessment.quality_score < threshold


class QualityAssuranceSystem:
    """Assessment history, portfolio metrics and threshold management.

    Example:
        >>> system = QualityAssuranceSystem()
        >>> assessment = system.assess_category_scores("demo", scores)
        >>> system.get_quality_metrics().total_patterns
        1
    """

    def __init__(self, thresholds: ModelQualityThresholds | None = None) -> None:
        self._thresholds = thresholds or ModelQualityThresholds()
        # pattern name -> assessments, oldest first
        self._history: dict[str, list[ModelQualityAssessment]] = {}
        self._pattern_locks: dict[str, threading.Lock] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Assessment
    # ------------------------------------------------------------------

    def assess_pattern_quality(
        self,
        pattern_name: str,
        test_results: ModelPatternTestSuiteResult,
        pattern_content: str | None = None,
    ) -> ModelQualityAssessment:
        """Assess one pattern from its orchestrated test results and record it.

        Args:
            pattern_name: History key for the pattern.
            test_results: Five-category suite result for the pattern.
            pattern_content: Raw pattern text for the content heuristics.

        Returns:
            The recorded assessment, with its trend against prior history.
        """
        scores = project_suite_scores(test_results, pattern_content)
        return self._record(pattern_name, scores, test_results)

    def assess_category_scores(
        self,
        pattern_name: str,
        category_scores: Mapping[EnumQualityCategory, float],
    ) -> ModelQualityAssessment:
        """Record an assessment from already-projected category scores."""
        return self._record(pattern_name, category_scores, None)

    def _record(
        self,
        pattern_name: str,
        category_scores: Mapping[EnumQualityCategory, float],
        test_results: ModelPatternTestSuiteResult | None,
    ) -> ModelQualityAssessment:
        with self._lock:
            thresholds = self._thresholds
            pattern_lock = self._pattern_locks.setdefault(pattern_name, threading.Lock())

        with pattern_lock:
            with self._lock:
                previous_scores = [
                    entry.quality_score for entry in self._history.get(pattern_name, ())
                ]
            assessment = build_assessment(
                pattern_name=pattern_name,
                category_scores=category_scores,
                thresholds=thresholds,
                previous_scores=previous_scores,
                assessed_at=datetime.now(UTC),
                test_results=test_results,
            )
            # import/clear may have replaced the list or dropped the lock while grading
            with self._lock:
                self._pattern_locks.setdefault(pattern_name, pattern_lock)
                self._history.setdefault(pattern_name, []).append(assessment)

        logger.info(
            "Quality assessment recorded for %s: score=%.2f grade=%s trend=%s",
            pattern_name,
            assessment.quality_score,
            assessment.quality_grade.value,
            assessment.quality_trend.value,
        )
        return assessment

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def _snapshot(self) -> tuple[ModelQualityThresholds, dict[str, list[ModelQualityAssessment]]]:
        with self._lock:
            thresholds = self._thresholds
            items = [
                (name, self._pattern_locks.setdefault(name, threading.Lock()), history)
                for name, history in self._history.items()
            ]
        snapshot: dict[str, list[ModelQualityAssessment]] = {}
        for name, pattern_lock, history in items:
            with pattern_lock:
                if history:
                    snapshot[name] = list(history)
        return thresholds, snapshot

    def _latest(self) -> dict[str, ModelQualityAssessment]:
        thresholds, snapshot = self._snapshot()
        return {
            name: reinterpret(history[-1], thresholds)
            for name, history in snapshot.items()
        }

    def get_pattern_assessment(self, pattern_name: str) -> ModelQualityAssessment | None:
        """Latest assessment for ``pattern_name`` under current thresholds."""
        return self._latest().get(pattern_name)

    def get_pattern_history(self, pattern_name: str) -> tuple[ModelQualityAssessment, ...]:
        """All recorded assessments for ``pattern_name``, oldest first, as stored."""
        _, snapshot = self._snapshot()
        return tuple(snapshot.get(pattern_name, ()))

    def get_all_assessments(self) -> dict[str, ModelQualityAssessment]:
        return self._latest()

    def monitor_deployed_patterns(self) -> dict[str, ModelQualityAssessment]:
        """Read-only snapshot of the most recent assessment per pattern."""
        return self._latest()

    def get_patterns_needing_attention(
        self, threshold: float | None = None
    ) -> tuple[ModelQualityAssessment, ...]:
        """Latest assessments failing the threshold or carrying critical issues.

        Args:
            threshold: Score cut-off overriding the configured gate.

        Returns:
            Most critical issues first, then lowest score first.
        """
        flagged = [
            assessment
            for assessment in self._latest().values()
            if _needs_attention(assessment, threshold)
        ]
        flagged.sort(
            key=lambda a: (-len(a.critical_issues), a.quality_score, a.pattern_name)
        )
        return tuple(flagged)

    def get_quality_metrics(self) -> ModelQualityMetrics:
        """Recompute portfolio aggregates from the live history."""
        thresholds, snapshot = self._snapshot()
        latest = [reinterpret(history[-1], thresholds) for history in snapshot.values()]
        total = len(latest)

        distribution = dict.fromkeys(EnumQualityGrade, 0)
        for assessment in latest:
            distribution[assessment.quality_grade] += 1

        ranked = sorted(latest, key=lambda a: (-a.quality_score, a.pattern_name))
        return ModelQualityMetrics(
            total_patterns=total,
            patterns_passing_threshold=sum(1 for a in latest if a.meets_threshold),
            average_quality_score=round(_mean([a.quality_score for a in latest]), 2),
            quality_distribution=distribution,
            trend_analysis=self._trend_analysis(snapshot),
            top_performing_patterns=tuple(
                a.pattern_name for a in ranked[:TOP_PERFORMER_COUNT]
            ),
            patterns_needing_attention=tuple(
                a.pattern_name for a in latest if _needs_attention(a, None)
            ),
        )

    @staticmethod
    def _trend_analysis(
        snapshot: Mapping[str, list[ModelQualityAssessment]],
    ) -> ModelQualityTrendAnalysis:
        """Compare each pattern's latest entry with its previous one."""
        pairs = [(history[-2], history[-1]) for history in snapshot.values() if len(history) >= 2]
        if not pairs:
            return ModelQualityTrendAnalysis()

        current = _mean([latest.quality_score for _, latest in pairs])
        previous = _mean([prior.quality_score for prior, _ in pairs])
        overall, change_percent = _direction(current, previous)
        category_trends = {
            category: _direction(
                _mean([latest.category_scores[category] for _, latest in pairs]),
                _mean([prior.category_scores[category] for prior, _ in pairs]),
            )[0]
            for category in EnumQualityCategory
        }
        return ModelQualityTrendAnalysis(
            overall_trend=overall,
            trend_strength=round(abs(change_percent), 2),
            current_average=round(current, 2),
            previous_average=round(previous, 2),
            change=round(current - previous, 2),
            change_percent=round(change_percent, 2),
            category_trends=category_trends,
        )

    # ------------------------------------------------------------------
    # Thresholds
    # ------------------------------------------------------------------

    def get_quality_thresholds(self) -> ModelQualityThresholds:
        with self._lock:
            return self._thresholds

    def update_quality_thresholds(
        self, updates: ModelQualityThresholds | Mapping[str, Any]
    ) -> ModelQualityThresholds:
        """Replace or partially update the thresholds.

        Nested mappings merge into the current values, so
        ``{"category_minimums": {"validation": 80}}`` changes one minimum.

        Raises:
            QualityConfigurationError: If the merged configuration is invalid.
        """
        with self._lock:
            if isinstance(updates, ModelQualityThresholds):
                new_thresholds = updates
            else:
                merged = _merge(self._thresholds.model_dump(), updates)
                try:
                    new_thresholds = ModelQualityThresholds.model_validate(merged)
                except ValidationError as exc:
                    raise QualityConfigurationError(
                        f"Invalid quality thresholds: {exc}"
                    ) from exc
            self._thresholds = new_thresholds
        logger.info(
            "Quality thresholds updated: min_overall_score=%.1f required_grade=%s",
            new_thresholds.min_overall_score,
            new_thresholds.required_grade.value,
        )
        return new_thresholds

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def export_quality_data(self) -> str:
        """Serialize thresholds and the full history as JSON."""
        thresholds, snapshot = self._snapshot()
        payload = ModelQualityExport(
            exported_at=datetime.now(UTC),
            thresholds=thresholds,
            history={name: tuple(history) for name, history in snapshot.items()},
        )
        return payload.model_dump_json(indent=2)

    def import_quality_data(self, payload: str | bytes) -> None:
        """Restore state from an ``export_quality_data`` payload.

        Thresholds are replaced; each imported pattern's history replaces any
        existing history for that name. Patterns absent from the payload are
        kept.

        Raises:
            QualityDataImportError: If the payload is malformed. State is
                left untouched.
        """
        try:
            data = ModelQualityExport.model_validate_json(payload)
        except ValidationError as exc:
            logger.warning("Rejected quality data import: %d error(s)", exc.error_count())
            raise QualityDataImportError(f"Failed to import quality data: {exc}") from exc

        with self._lock:
            self._thresholds = data.thresholds
            for name, entries in data.history.items():
                self._pattern_locks.setdefault(name, threading.Lock())
                self._history[name] = list(entries)
        logger.info("Imported quality data for %d pattern(s)", len(data.history))

    def clear_history(self, pattern_name: str | None = None) -> None:
        """Forget one pattern's history, or every pattern's when name is None."""
        with self._lock:
            if pattern_name is None:
                self._history.clear()
                self._pattern_locks.clear()
            else:
                self._history.pop(pattern_name, None)
                self._pattern_locks.pop(pattern_name, None)

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def generate_quality_report(self, report_period: str = "current") -> str:
        """Markdown report with metrics, recommendations and an action plan."""
        return render_quality_system_report(
            metrics=self.get_quality_metrics(),
            assessments=self._latest(),
            report_period=report_period,
        )


__all__ = ["PORTFOLIO_TREND_PERCENT", "TOP_PERFORMER_COUNT", "QualityAssuranceSystem"]
