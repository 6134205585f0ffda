# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

# Copyright (c) 2025 OmniNode Team
"""The five orchestrated category tests.

Each check returns one ModelTestResult on a fixed point scale and passes at
70% of its maximum:

    Syntax       20  4 per required heading (max 16), markdown 2, INPUT: 2
    Structure    25  identity 5/2, steps 5/2, output coverage 10, scale 3, priority 2
    Output       30  sample success ratio * 30, +2 at >= 80%, +3 when all pass
    Integration  15  registry 5, export 5, chaining 3, command 2
    Performance  10  time 4/2, memory 3/1, throughput 3/1

Errors found by a check that still passes are reported as warnings, since a
passing result carries no errors.
"""

from __future__ import annotations

import asyncio
import logging
import re
import time

from omniquality.models import (
    INTEGRATION_TESTS,
    OUTPUT_TESTS,
    PERFORMANCE_TESTS,
    STRUCTURE_TESTS,
    SYNTAX_TESTS,
    ModelPatternStructure,
    ModelPatternTemplate,
    ModelTestResult,
)
from omniquality.nodes.node_output_tester_effect.handlers.protocol_pattern_executor import (
    ProtocolPatternExecutor,
)
from omniquality.nodes.node_pattern_test_suite_orchestrator.models.model_pattern_test_config import (
    ModelPatternTestConfig,
)
from omniquality.utils.util_text_metrics import section_present

logger = logging.getLogger(__name__)

SYNTAX_MAX = 20.0
STRUCTURE_MAX = 25.0
OUTPUT_MAX = 30.0
INTEGRATION_MAX = 15.0
PERFORMANCE_MAX = 10.0
PASS_RATIO = 0.7

PERFORMANCE_RUNS = 5
_BASE_MEMORY_BYTES = 10 * 1024 * 1024
_MEMORY_BYTES_PER_CHAR = 1024

_IDENTITY_RE = re.compile(r"# IDENTITY and PURPOSE\s*\n\n([^#]+)")
_STEPS_RE = re.compile(r"# STEPS\s*\n\n([^#]+)")
_OUTPUT_RE = re.compile(r"# OUTPUT\s*\n\n([^#]+)")
_BULLET_RE = re.compile(r"^- ", re.MULTILINE)
_MIN_IDENTITY_CHARS = 100
_MIN_STEPS = 3


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


def _result(
    name: str,
    score: float,
    max_score: float,
    details: str,
    errors: list[str],
    warnings: list[str],
    start: float,
) -> ModelTestResult:
    passed = score >= max_score * PASS_RATIO
    if passed:
        warnings = [*errors, *warnings]
        errors = []
    return ModelTestResult(
        test_name=name,
        passed=passed,
        score=min(score, max_score),
        max_score=max_score,
        details=details,
        errors=tuple(errors),
        warnings=tuple(warnings),
        execution_time_ms=_elapsed_ms(start),
    )


def execution_template(config: ModelPatternTestConfig) -> ModelPatternTemplate:
    """Minimal template handed to the executor for this pattern."""
    return ModelPatternTemplate(
        name=config.pattern_name,
        structure=ModelPatternStructure(
            output_sections=config.expected_output_structure
        ),
    )


def estimate_memory_bytes(config: ModelPatternTestConfig) -> int:
    return _BASE_MEMORY_BYTES + len(config.pattern_content) * _MEMORY_BYTES_PER_CHAR


def run_syntax_checks(config: ModelPatternTestConfig) -> ModelTestResult:
    start = time.perf_counter()
    content = config.pattern_content
    errors: list[str] = []
    warnings: list[str] = []

    section_points = 0.0
    for section in config.required_sections:
        if section in content:
            section_points += 4.0
        else:
            errors.append(f"Missing required section: {section}")
    score = min(section_points, 16.0)

    if "# " in content and "- " in content:
        score += 2.0
    else:
        warnings.append("Pattern should use proper markdown formatting")
    if "INPUT:" in content:
        score += 2.0
    else:
        warnings.append("Pattern should include INPUT: placeholder")

    return _result(
        SYNTAX_TESTS,
        score,
        SYNTAX_MAX,
        f"Syntax validation completed. Score: {score:.0f}/{SYNTAX_MAX:.0f}",
        errors,
        warnings,
        start,
    )


def run_structure_checks(config: ModelPatternTestConfig) -> ModelTestResult:
    start = time.perf_counter()
    content = config.pattern_content
    errors: list[str] = []
    warnings: list[str] = []
    score = 0.0

    identity = _IDENTITY_RE.search(content)
    if identity is None:
        errors.append("Missing or malformed IDENTITY and PURPOSE section")
    elif len(identity.group(1).strip()) > _MIN_IDENTITY_CHARS:
        score += 5.0
    else:
        warnings.append("Identity section should be more detailed")
        score += 2.0

    steps = _STEPS_RE.search(content)
    if steps is None:
        errors.append("Missing or malformed STEPS section")
    elif len(_BULLET_RE.findall(steps.group(1).strip())) >= _MIN_STEPS:
        score += 5.0
    else:
        warnings.append(f"Steps section should have at least {_MIN_STEPS} steps")
        score += 2.0

    output = _OUTPUT_RE.search(content)
    if output is None:
        errors.append("Missing or malformed OUTPUT section")
    else:
        output_text = output.group(1).strip()
        expected = config.expected_output_structure
        missing = [section for section in expected if section not in output_text]
        covered = (len(expected) - len(missing)) / len(expected) if expected else 1.0
        score += round(covered * 10.0)
        if missing:
            warnings.append(f"Missing output sections: {', '.join(missing)}")

    if "(1-10)" in content or "0-100" in content:
        score += 3.0
    else:
        warnings.append("Pattern should include scoring system (1-10 or 0-100)")
    if "HIGH/MEDIUM/LOW" in content or "priority" in content:
        score += 2.0
    else:
        warnings.append("Pattern should include prioritization system")

    return _result(
        STRUCTURE_TESTS,
        score,
        STRUCTURE_MAX,
        f"Structure validation completed. Score: {score:.0f}/{STRUCTURE_MAX:.0f}",
        errors,
        warnings,
        start,
    )


async def run_output_checks(
    config: ModelPatternTestConfig,
    executor: ProtocolPatternExecutor,
    timeout_ms: float,
) -> ModelTestResult:
    """Execute every sample input and check the expected sections appear."""
    start = time.perf_counter()
    errors: list[str] = []
    warnings: list[str] = []
    template = execution_template(config)
    samples = config.sample_inputs
    if not samples:
        return _result(
            OUTPUT_TESTS,
            0.0,
            OUTPUT_MAX,
            "Output tests skipped: no sample inputs configured",
            ["No sample inputs configured"],
            warnings,
            start,
        )

    successful = 0
    for sample in samples:
        try:
            output = await asyncio.wait_for(
                executor.execute(template, sample), timeout=timeout_ms / 1000.0
            )
        except TimeoutError:
            errors.append(f"Sample timed out after {timeout_ms:.0f}ms: {sample}")
            continue
        except Exception as exc:
            errors.append(f"Failed to process sample: {sample} - {exc}")
            continue
        if all(
            section_present(section, (output,))
            for section in config.expected_output_structure
        ):
            successful += 1
        else:
            warnings.append(f'Sample "{sample}" missing required output sections')

    success_rate = successful / len(samples)
    score = float(round(success_rate * OUTPUT_MAX))
    if success_rate >= 0.8:
        score += 2.0
    if successful == len(samples):
        score += 3.0

    return _result(
        OUTPUT_TESTS,
        score,
        OUTPUT_MAX,
        (
            f"Output tests completed. {successful}/{len(samples)} samples passed. "
            f"Score: {min(score, OUTPUT_MAX):.0f}/{OUTPUT_MAX:.0f}"
        ),
        errors,
        warnings,
        start,
    )


def run_integration_checks(config: ModelPatternTestConfig) -> ModelTestResult:
    start = time.perf_counter()
    profile = config.integration
    warnings: list[str] = []
    score = 0.0
    for compatible, points, warning in (
        (profile.registry_compatible, 5.0, "Pattern may not be compatible with registry system"),
        (profile.export_compatible, 5.0, "Pattern may not be compatible with export systems"),
        (profile.chaining_compatible, 3.0, "Pattern may not support chaining functionality"),
        (profile.command_compatible, 2.0, "Pattern command structure may need adjustment"),
    ):
        if compatible:
            score += points
        else:
            warnings.append(warning)

    return _result(
        INTEGRATION_TESTS,
        score,
        INTEGRATION_MAX,
        f"Integration tests completed. Score: {score:.0f}/{INTEGRATION_MAX:.0f}",
        [],
        warnings,
        start,
    )


async def run_performance_checks(
    config: ModelPatternTestConfig,
    executor: ProtocolPatternExecutor,
    timeout_ms: float,
) -> ModelTestResult:
    """Time repeated executions of the first sample against the thresholds."""
    start = time.perf_counter()
    thresholds = config.performance_thresholds
    warnings: list[str] = []
    template = execution_template(config)
    sample = config.sample_inputs[0] if config.sample_inputs else ""

    try:
        run_start = time.perf_counter()
        for _ in range(PERFORMANCE_RUNS):
            await asyncio.wait_for(
                executor.execute(template, sample), timeout=timeout_ms / 1000.0
            )
        average_ms = _elapsed_ms(run_start) / PERFORMANCE_RUNS
    except TimeoutError:
        return _result(
            PERFORMANCE_TESTS,
            0.0,
            PERFORMANCE_MAX,
            "Performance test failed",
            [f"Performance test timed out after {timeout_ms:.0f}ms"],
            warnings,
            start,
        )
    except Exception as exc:
        logger.warning(
            "Performance test execution failed (pattern=%s): %s", config.pattern_name, exc
        )
        return _result(
            PERFORMANCE_TESTS,
            0.0,
            PERFORMANCE_MAX,
            "Performance test failed",
            [f"Performance test execution failed: {exc}"],
            warnings,
            start,
        )

    score = 0.0
    if average_ms <= thresholds.max_execution_time_ms:
        score += 4.0
    else:
        warnings.append(
            f"Average execution time ({average_ms:.1f}ms) exceeds threshold "
            f"({thresholds.max_execution_time_ms:.0f}ms)"
        )
        score += 2.0

    if estimate_memory_bytes(config) <= thresholds.max_memory_bytes:
        score += 3.0
    else:
        warnings.append("Estimated memory usage exceeds threshold")
        score += 1.0

    throughput = 1000.0 / average_ms if average_ms > 0 else float("inf")
    if throughput >= thresholds.min_throughput:
        score += 3.0
    else:
        warnings.append(
            f"Throughput ({throughput:.2f} patterns/sec) below threshold "
            f"({thresholds.min_throughput:.2f})"
        )
        score += 1.0

    return _result(
        PERFORMANCE_TESTS,
        score,
        PERFORMANCE_MAX,
        (
            f"Performance tests completed. Avg execution: {average_ms:.2f}ms. "
            f"Score: {score:.0f}/{PERFORMANCE_MAX:.0f}"
        ),
        [],
        warnings,
        start,
    )


__all__ = [
    "INTEGRATION_MAX",
    "OUTPUT_MAX",
    "PASS_RATIO",
    "PERFORMANCE_MAX",
    "PERFORMANCE_RUNS",
    "STRUCTURE_MAX",
    "SYNTAX_MAX",
    "estimate_memory_bytes",
    "execution_template",
    "run_integration_checks",
    "run_output_checks",
    "run_performance_checks",
    "run_structure_checks",
    "run_syntax_checks",
]
