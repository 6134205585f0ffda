# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exception hierarchy for the pattern quality pipeline.

Pattern-quality findings (missing sections, low scores, failed samples) are
never raised; they are returned as data. The exceptions below are reserved
for contract violations by the caller:

    PatternQualityError
    ├── QualityConfigurationError   invalid configuration or lookup key
    │   └── UnknownPatternError     orchestrator asked for an unknown pattern
    └── QualityDataImportError      malformed quality export payload
"""

from __future__ import annotations


class PatternQualityError(Exception):
    """Base class for all omniquality errors."""


class QualityConfigurationError(PatternQualityError, ValueError):
    """Raised when a configuration is rejected at load or lookup time.

    Subclasses ValueError so callers catching pydantic validation failures
    (which are also ValueErrors) handle both uniformly.
    """


class UnknownPatternError(QualityConfigurationError):
    """Raised when an operation names a pattern that has no configuration."""

    def __init__(self, pattern_name: str) -> None:
        self.pattern_name = pattern_name
        super().__init__(f"No test configuration found for pattern: {pattern_name}")


class QualityDataImportError(PatternQualityError):
    """Raised when a quality export payload cannot be imported.

    The importing system is left exactly as it was before the call.
    """


__all__ = [
    "PatternQualityError",
    "QualityConfigurationError",
    "QualityDataImportError",
    "UnknownPatternError",
]
