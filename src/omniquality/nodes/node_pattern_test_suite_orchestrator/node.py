# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pattern Test Suite Orchestrator Node.

Thin stateful shell over the suite handlers: keeps the registered test
configurations and the latest suite result per pattern, and optionally
forwards every result to a quality system.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from pydantic import ValidationError

from omniquality.exceptions import QualityDataImportError, UnknownPatternError
from omniquality.models import CATEGORY_TEST_NAMES, ModelPatternTestSuiteResult
from omniquality.nodes.node_output_tester_effect.handlers.protocol_pattern_executor import (
    ProtocolPatternExecutor,
    SimulatedPatternExecutor,
)
from omniquality.nodes.node_pattern_test_suite_orchestrator.handlers import (
    generate_suite_report,
    run_test_suite,
)
from omniquality.nodes.node_pattern_test_suite_orchestrator.models import (
    ModelPatternMetrics,
    ModelPatternRanking,
    ModelPatternTestConfig,
    ModelTestResultsExport,
)

if TYPE_CHECKING:
    from omniquality.quality_system import QualityAssuranceSystem

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 30000.0
DEFAULT_MIN_SCORE = 70.0


class PatternTestSuiteOrchestrator:
    """Batch-runs the five category tests over registered patterns.

    Args:
        configs: Initial test configurations.
        executor: Execution provider. Defaults to ``SimulatedPatternExecutor``.
        quality_system: When given, every suite result is also assessed and
            recorded there.
        timeout_ms: Per-execution timeout for the output and performance tests.
    """

    def __init__(
        self,
        configs: Iterable[ModelPatternTestConfig] = (),
        *,
        executor: ProtocolPatternExecutor | None = None,
        quality_system: QualityAssuranceSystem | None = None,
        timeout_ms: float = DEFAULT_TIMEOUT_MS,
    ) -> None:
        self._executor = executor or SimulatedPatternExecutor()
        self._quality_system = quality_system
        self._timeout_ms = timeout_ms
        self._configs: dict[str, ModelPatternTestConfig] = {}
        self._results: dict[str, ModelPatternTestSuiteResult] = {}
        for config in configs:
            self.add_test_config(config)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def add_test_config(self, config: ModelPatternTestConfig) -> None:
        """Register or replace the configuration for ``config.pattern_name``."""
        self._configs[config.pattern_name] = config

    def get_test_config(self, pattern_name: str) -> ModelPatternTestConfig | None:
        return self._configs.get(pattern_name)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def run_pattern_tests(self, pattern_name: str) -> ModelPatternTestSuiteResult:
        """Run the suite for one registered pattern and store the result.

        Raises:
            UnknownPatternError: If no configuration is registered for the name.
        """
        config = self._configs.get(pattern_name)
        if config is None:
            raise UnknownPatternError(pattern_name)

        result = await run_test_suite(config, self._executor, self._timeout_ms)
        self._results[pattern_name] = result
        if self._quality_system is not None:
            self._quality_system.assess_pattern_quality(
                pattern_name, result, config.pattern_content
            )
        return result

    async def run_all_pattern_tests(self) -> dict[str, ModelPatternTestSuiteResult]:
        """Run every registered pattern concurrently, in registration order."""
        names = list(self._configs)
        logger.info("Running test suites for %d pattern(s)", len(names))
        results = await asyncio.gather(*(self.run_pattern_tests(name) for name in names))
        return dict(zip(names, results, strict=True))

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def get_test_results(self, pattern_name: str) -> ModelPatternTestSuiteResult | None:
        return self._results.get(pattern_name)

    def get_all_test_results(self) -> dict[str, ModelPatternTestSuiteResult]:
        return dict(self._results)

    def clear_test_results(self) -> None:
        self._results.clear()

    def get_pattern_metrics(self, pattern_name: str) -> ModelPatternMetrics | None:
        """Category percentages of the stored result, or None if never run."""
        result = self._results.get(pattern_name)
        if result is None:
            return None
        syntax, structure, output, integration, performance = (
            result.test_percentage(name) for name in CATEGORY_TEST_NAMES
        )
        return ModelPatternMetrics(
            syntax_score=syntax,
            structure_score=structure,
            output_score=output,
            integration_score=integration,
            performance_score=performance,
            overall_quality=result.overall_score,
        )

    def validate_pattern_quality(
        self, pattern_name: str, min_score: float = DEFAULT_MIN_SCORE
    ) -> bool:
        """Quality gate: True iff a stored result reaches ``min_score``."""
        result = self._results.get(pattern_name)
        return result is not None and result.overall_score >= min_score

    def get_patterns_needing_improvement(
        self, min_score: float = DEFAULT_MIN_SCORE
    ) -> tuple[str, ...]:
        return tuple(
            name for name, result in self._results.items() if result.overall_score < min_score
        )

    def get_top_performing_patterns(self, limit: int = 5) -> tuple[ModelPatternRanking, ...]:
        ranked = sorted(
            self._results.items(), key=lambda item: (-item[1].overall_score, item[0])
        )
        return tuple(
            ModelPatternRanking(
                pattern_name=name, score=result.overall_score, grade=result.quality_grade
            )
            for name, result in ranked[:limit]
        )

    # ------------------------------------------------------------------
    # Persistence and reporting
    # ------------------------------------------------------------------

    def export_test_results(self) -> str:
        payload = ModelTestResultsExport(
            exported_at=datetime.now(UTC),
            total_patterns=len(self._results),
            results=dict(self._results),
        )
        return payload.model_dump_json(indent=2)

    def import_test_results(self, payload: str | bytes) -> None:
        """Replace all stored results with those in ``payload``.

        Raises:
            QualityDataImportError: If the payload is malformed. Stored
                results are left untouched.
        """
        try:
            data = ModelTestResultsExport.model_validate_json(payload)
        except ValidationError as exc:
            logger.warning("Rejected test results import: %d error(s)", exc.error_count())
            raise QualityDataImportError(f"Failed to import test results: {exc}") from exc
        self._results = dict(data.results)
        logger.info("Imported test results for %d pattern(s)", len(self._results))

    def generate_test_report(
        self, results: dict[str, ModelPatternTestSuiteResult] | None = None
    ) -> str:
        return generate_suite_report(self._results if results is None else results)


__all__ = ["PatternTestSuiteOrchestrator"]
