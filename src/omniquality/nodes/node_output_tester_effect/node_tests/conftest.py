# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Shared fixtures for node_output_tester_effect tests.

Provides mock implementations of ProtocolPatternExecutor plus a template
and sample collection used across the output tester tests.
"""

from __future__ import annotations

import asyncio

import pytest

from omniquality.enums import EnumTestScenarioType
from omniquality.models import ModelPatternStructure, ModelPatternTemplate
from omniquality.nodes.node_output_tester_effect.handlers import ProtocolPatternExecutor
from omniquality.nodes.node_output_tester_effect.models import (
    ModelSampleCollection,
    ModelSampleInput,
    ModelTestScenario,
)

# =============================================================================
# Mock implementations
# =============================================================================


class MockPatternExecutor:
    """Executor returning a fixed response and recording every call."""

    def __init__(self, response: str) -> None:
        self._response = response
        self.calls: list[str] = []
        assert isinstance(self, ProtocolPatternExecutor)

    async def execute(self, template: ModelPatternTemplate, sample_input: str) -> str:
        self.calls.append(sample_input)
        return self._response


class FailingPatternExecutor:
    """Executor that always raises."""

    def __init__(self) -> None:
        assert isinstance(self, ProtocolPatternExecutor)

    async def execute(self, template: ModelPatternTemplate, sample_input: str) -> str:
        raise RuntimeError("model backend unavailable")


class SlowPatternExecutor:
    """Executor that sleeps longer than any timeout used in tests."""

    def __init__(self, delay_seconds: float = 1.0) -> None:
        self._delay_seconds = delay_seconds
        assert isinstance(self, ProtocolPatternExecutor)

    async def execute(self, template: ModelPatternTemplate, sample_input: str) -> str:
        await asyncio.sleep(self._delay_seconds)
        return ""


class PartiallyBrokenPatternExecutor:
    """Executor returning None for one input and a fixed response otherwise."""

    def __init__(self, response: str, broken_input: str) -> None:
        self._response = response
        self._broken_input = broken_input
        assert isinstance(self, ProtocolPatternExecutor)

    async def execute(self, template: ModelPatternTemplate, sample_input: str) -> str:
        if sample_input == self._broken_input:
            return None  # type: ignore[return-value]
        return self._response


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def wireframe_template() -> ModelPatternTemplate:
    return ModelPatternTemplate(
        name="analyze_wireframe_flow",
        category="analysis",
        description="Analyzes wireframe user flows for usability issues.",
        structure=ModelPatternStructure(
            identity="You are an expert UX analyst who evaluates wireframe flows.",
            purpose="Evaluate user flows in wireframes and surface usability problems.",
            steps=(
                "Analyze the wireframe flow",
                "Identify navigation dead ends",
                "Evaluate form fields",
            ),
            output_sections=("FLOW SUMMARY", "USABILITY ISSUES", "RECOMMENDATIONS"),
            output_instructions=("Rate each flow on a 1-10 scale",),
        ),
    )


@pytest.fixture
def sample_collection() -> ModelSampleCollection:
    """Two samples, one scenario and one validation sample."""
    return ModelSampleCollection(
        samples=(
            ModelSampleInput(sample_id="checkout", content="Checkout flow with three steps"),
            ModelSampleInput(sample_id="signup", content="Signup flow with email confirmation"),
        ),
        test_scenarios=(
            ModelTestScenario(
                name="empty input",
                scenario_type=EnumTestScenarioType.EDGE_CASE,
                input_content="",
            ),
        ),
        validation_samples=(
            ModelSampleInput(sample_id="onboarding", content="Onboarding tour for new users"),
        ),
    )


@pytest.fixture
def conformant_output() -> str:
    return (
        "# FLOW SUMMARY\n\nThe checkout flow has three steps. Score: 7/10.\n\n"
        "# USABILITY ISSUES\n\nFor example, the specific error message is vague.\n\n"
        "# RECOMMENDATIONS\n\nHIGH: Improve the error message and add inline validation.\n"
    )


@pytest.fixture
def failing_executor() -> FailingPatternExecutor:
    return FailingPatternExecutor()


@pytest.fixture
def slow_executor() -> SlowPatternExecutor:
    return SlowPatternExecutor()


@pytest.fixture
def conformant_executor(conformant_output: str) -> MockPatternExecutor:
    return MockPatternExecutor(conformant_output)


@pytest.fixture
def partially_broken_executor(conformant_output: str) -> PartiallyBrokenPatternExecutor:
    return PartiallyBrokenPatternExecutor(
        conformant_output, broken_input="Signup flow with email confirmation"
    )
