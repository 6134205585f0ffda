# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
Pattern Quality Enums Package.

Single import location for every closed enumeration used by the pipeline:

    from omniquality.enums import (
        EnumIssueSeverity,
        EnumQualityCategory,
        EnumQualityGrade,
    )
"""

from omniquality.enums.enum_certification_level import (
    CERTIFICATION_LADDER,
    EnumCertificationLevel,
    certification_level_for_score,
    minimum_score_for_level,
)
from omniquality.enums.enum_issue_severity import EnumIssueSeverity
from omniquality.enums.enum_quality_category import EnumQualityCategory
from omniquality.enums.enum_quality_grade import EnumQualityGrade
from omniquality.enums.enum_quality_trend import EnumQualityTrend
from omniquality.enums.enum_recommendation_priority import (
    EnumImprovementEffort,
    EnumRecommendationPriority,
)
from omniquality.enums.enum_suite_health import EnumSuiteHealth
from omniquality.enums.enum_test_scenario_type import EnumTestScenarioType

__all__ = [
    "CERTIFICATION_LADDER",
    "EnumCertificationLevel",
    "EnumImprovementEffort",
    "EnumIssueSeverity",
    "EnumQualityCategory",
    "EnumQualityGrade",
    "EnumQualityTrend",
    "EnumRecommendationPriority",
    "EnumSuiteHealth",
    "EnumTestScenarioType",
    "certification_level_for_score",
    "minimum_score_for_level",
]
