# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""YAML configuration loading.

Every loader reads a YAML document, interpolates ``${VAR_NAME}`` references
from the environment, and validates the result against a frozen config
model. Any parse, interpolation or schema failure is raised as
QualityConfigurationError listing each offending location.

Example:
    thresholds = load_quality_thresholds("config/quality_thresholds.yaml")
    configs = load_test_configs("config/patterns.yaml")
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from omniquality.exceptions import QualityConfigurationError
from omniquality.nodes.node_pattern_test_suite_orchestrator.models.model_pattern_test_config import (
    ModelPatternTestConfig,
)
from omniquality.nodes.node_pattern_validate_compute.models.model_validator_config import (
    ModelValidatorConfig,
)
from omniquality.nodes.node_quality_assess_compute.models.model_quality_config import (
    ModelQualityConfig,
)
from omniquality.quality_system.models import ModelQualityThresholds

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)

_ENV_VAR_RE = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)\}")


def _interpolate_env_vars(value: Any) -> Any:
    if isinstance(value, str):
        for var_name in _ENV_VAR_RE.findall(value):
            env_value = os.environ.get(var_name)
            if env_value is None:
                raise QualityConfigurationError(
                    f"Environment variable '{var_name}' is not set "
                    f"(referenced in value: {value})"
                )
            value = value.replace(f"${{{var_name}}}", env_value)
        return value
    if isinstance(value, dict):
        return {key: _interpolate_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_interpolate_env_vars(item) for item in value]
    return value


def format_validation_error(exc: ValidationError) -> str:
    """Render every pydantic error as ``loc: msg``, one per line."""
    return "\n".join(
        f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
        for error in exc.errors()
    )


def load_yaml_document(path: str | Path) -> Any:
    """Parse a YAML file with environment interpolation.

    Returns:
        The parsed document; an empty file yields an empty mapping.

    Raises:
        FileNotFoundError: If the file does not exist.
        QualityConfigurationError: If the YAML is malformed or references an
            unset environment variable.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise QualityConfigurationError(f"Malformed YAML in {path}: {exc}") from exc
    return _interpolate_env_vars(data if data is not None else {})


def _validate(model: type[_ModelT], data: Any, source: str) -> _ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise QualityConfigurationError(
            f"Invalid {model.__name__} in {source}:\n{format_validation_error(exc)}"
        ) from exc


def load_model(model: type[_ModelT], path: str | Path) -> _ModelT:
    """Load one YAML document into ``model``."""
    config = _validate(model, load_yaml_document(path), str(path))
    logger.debug("Loaded %s from %s", model.__name__, path)
    return config


def load_quality_thresholds(path: str | Path) -> ModelQualityThresholds:
    return load_model(ModelQualityThresholds, path)


def load_quality_config(path: str | Path) -> ModelQualityConfig:
    return load_model(ModelQualityConfig, path)


def load_validator_config(path: str | Path) -> ModelValidatorConfig:
    return load_model(ModelValidatorConfig, path)


def load_test_configs(path: str | Path) -> tuple[ModelPatternTestConfig, ...]:
    """Load orchestrator test configurations.

    Accepts either a top-level list or a mapping with a ``patterns`` list.

    Raises:
        QualityConfigurationError: On any invalid entry, naming its index.
    """
    document = load_yaml_document(path)
    entries = document.get("patterns", []) if isinstance(document, dict) else document
    if not isinstance(entries, list):
        raise QualityConfigurationError(
            f"Expected a list of pattern test configurations in {path}"
        )
    configs = tuple(
        _validate(ModelPatternTestConfig, entry, f"{path} (entry {index})")
        for index, entry in enumerate(entries)
    )
    logger.info("Loaded %d pattern test configuration(s) from %s", len(configs), path)
    return configs


__all__ = [
    "format_validation_error",
    "load_model",
    "load_quality_config",
    "load_quality_thresholds",
    "load_test_configs",
    "load_validator_config",
    "load_yaml_document",
]
