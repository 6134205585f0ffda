# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pattern execution provider protocol.

The output tester never runs a pattern against a language model itself. It
asks an injected executor for generated text and only grades conformance.
Any backend (a prompt runner, a recorded-output store, a mock for testing)
can be plugged in by satisfying ``ProtocolPatternExecutor``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from omniquality.models import ModelPatternTemplate


@runtime_checkable
class ProtocolPatternExecutor(Protocol):
    """Produces generated text for a pattern and one input."""

    async def execute(self, template: ModelPatternTemplate, sample_input: str) -> str:
        """Run ``template`` against ``sample_input``.

        Args:
            template: Pattern to execute.
            sample_input: Input text.

        Returns:
            The generated output text.

        Raises:
            Exception: Any failure. The output tester records it as a failed
                test rather than propagating it.
        """
        ...


class SimulatedPatternExecutor:
    """Deterministic executor that echoes the template's declared sections.

    Produces one markdown section per declared output section, so a
    well-formed template yields structurally conformant output.
    """

    async def execute(self, template: ModelPatternTemplate, sample_input: str) -> str:
        label = sample_input.strip().splitlines()[0][:80] if sample_input.strip() else "empty input"
        sections = [
            f"# {section}\n\n"
            f"Simulated analysis for {section.lower()} based on input: {label}\n\n"
            "Detailed analysis would appear here with specific examples and recommendations.\n"
            for section in template.structure.output_sections
        ]
        return "\n".join(sections)


__all__ = ["ProtocolPatternExecutor", "SimulatedPatternExecutor"]
