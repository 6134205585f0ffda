# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Validator configuration.

``ModelValidatorConfig`` is the frozen, explicit configuration consumed by
``validate_pattern``. ``ValidatorSettings`` loads the same options from the
environment.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REQUIRED_SECTIONS: tuple[str, ...] = ("IDENTITY", "STEPS", "OUTPUT")


class ModelValidatorConfig(BaseModel):
    """Structural validation policy.

    Attributes:
        strict_mode: Escalate every WARNING issue to CRITICAL.
        minimum_score: Score a pattern needs to be valid (0-100).
        required_sections: Section identifiers that must appear (case-insensitive
            substring match) among the template's output sections.
        minimum_word_count: Minimum words across identity, purpose, steps and
            output instructions.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    strict_mode: bool = Field(default=False)
    minimum_score: int = Field(default=70, ge=0, le=100)
    required_sections: tuple[str, ...] = Field(default=DEFAULT_REQUIRED_SECTIONS)
    minimum_word_count: int = Field(default=200, ge=0)


class ValidatorSettings(BaseSettings):
    """Validator configuration loaded from the environment.

    Environment variables:
        PATTERN_VALIDATOR_STRICT_MODE: bool (default False)
        PATTERN_VALIDATOR_MINIMUM_SCORE: int (default 70)
        PATTERN_VALIDATOR_REQUIRED_SECTIONS: JSON list (default ["IDENTITY","STEPS","OUTPUT"])
        PATTERN_VALIDATOR_MINIMUM_WORD_COUNT: int (default 200)
    """

    model_config = SettingsConfigDict(
        env_prefix="PATTERN_VALIDATOR_",
        extra="ignore",
    )

    strict_mode: bool = Field(default=False)
    minimum_score: int = Field(default=70, ge=0, le=100)
    required_sections: tuple[str, ...] = Field(default=DEFAULT_REQUIRED_SECTIONS)
    minimum_word_count: int = Field(default=200, ge=0)

    def to_config(self) -> ModelValidatorConfig:
        """Convert settings to a frozen ModelValidatorConfig instance."""
        return ModelValidatorConfig(
            strict_mode=self.strict_mode,
            minimum_score=self.minimum_score,
            required_sections=self.required_sections,
            minimum_word_count=self.minimum_word_count,
        )


__all__ = [
    "DEFAULT_REQUIRED_SECTIONS",
    "ModelValidatorConfig",
    "ValidatorSettings",
]
