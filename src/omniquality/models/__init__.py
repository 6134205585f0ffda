# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Shared models for the pattern quality pipeline."""

from omniquality.models.model_category_scores import (
    require_all_categories,
    require_score_range,
)
from omniquality.models.model_certification_status import (
    ModelCertificationStatus,
    check_certification_chain,
)
from omniquality.models.model_pattern_specification import (
    ModelOutputSectionSpec,
    ModelPatternSpecification,
    ModelValidationCriteria,
)
from omniquality.models.model_pattern_template import (
    ModelPatternStructure,
    ModelPatternTemplate,
)
from omniquality.models.model_pattern_test_suite_result import (
    CATEGORY_TEST_NAMES,
    INTEGRATION_TESTS,
    OUTPUT_TESTS,
    PERFORMANCE_TESTS,
    STRUCTURE_TESTS,
    SUITE_EXECUTION,
    SYNTAX_TESTS,
    ModelPatternTestSuiteResult,
)
from omniquality.models.model_quality_recommendation import (
    ModelQualityRecommendation,
)
from omniquality.models.model_quality_settings import (
    ModelCategoryMinimums,
    ModelCategoryWeights,
    ModelPerformanceThresholds,
)
from omniquality.models.model_test_result import ModelTestResult

__all__ = [
    "CATEGORY_TEST_NAMES",
    "INTEGRATION_TESTS",
    "ModelCategoryMinimums",
    "ModelCategoryWeights",
    "ModelCertificationStatus",
    "ModelOutputSectionSpec",
    "ModelPatternSpecification",
    "ModelPatternStructure",
    "ModelPatternTemplate",
    "ModelPatternTestSuiteResult",
    "ModelPerformanceThresholds",
    "ModelQualityRecommendation",
    "ModelTestResult",
    "ModelValidationCriteria",
    "OUTPUT_TESTS",
    "PERFORMANCE_TESTS",
    "STRUCTURE_TESTS",
    "SUITE_EXECUTION",
    "SYNTAX_TESTS",
    "check_certification_chain",
    "require_all_categories",
    "require_score_range",
]
