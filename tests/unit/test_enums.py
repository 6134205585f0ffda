# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for shared enums: grade bands, certification ladder, priorities."""

import pytest

from omniquality.enums import (
    EnumCertificationLevel,
    EnumQualityCategory,
    EnumQualityGrade,
    EnumRecommendationPriority,
    certification_level_for_score,
    minimum_score_for_level,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("score", "grade"),
    [
        (100.0, EnumQualityGrade.A),
        (90.0, EnumQualityGrade.A),
        (89.99, EnumQualityGrade.B),
        (80.0, EnumQualityGrade.B),
        (70.0, EnumQualityGrade.C),
        (60.0, EnumQualityGrade.D),
        (59.99, EnumQualityGrade.F),
        (0.0, EnumQualityGrade.F),
    ],
)
def test_grade_bands(score: float, grade: EnumQualityGrade) -> None:
    assert EnumQualityGrade.from_score(score) is grade


def test_grade_lower_bounds_and_ordering():
    assert [grade.lower_bound for grade in EnumQualityGrade] == [90.0, 80.0, 70.0, 60.0, 0.0]
    assert EnumQualityGrade.A.meets(EnumQualityGrade.C)
    assert EnumQualityGrade.C.meets(EnumQualityGrade.C)
    assert not EnumQualityGrade.D.meets(EnumQualityGrade.C)


@pytest.mark.parametrize(
    ("score", "level"),
    [
        (97.0, EnumCertificationLevel.PLATINUM),
        (95.0, EnumCertificationLevel.PLATINUM),
        (92.0, EnumCertificationLevel.GOLD),
        (85.0, EnumCertificationLevel.SILVER),
        (84.9, EnumCertificationLevel.BRONZE),
        (10.0, EnumCertificationLevel.BRONZE),
    ],
)
def test_certified_ladder(score: float, level: EnumCertificationLevel) -> None:
    assert certification_level_for_score(score, certified=True) is level


def test_uncertified_is_always_none():
    assert certification_level_for_score(99.0, certified=False) is EnumCertificationLevel.NONE


def test_certification_next_level_and_cut_points():
    assert EnumCertificationLevel.NONE.next_level() is EnumCertificationLevel.BRONZE
    assert EnumCertificationLevel.GOLD.next_level() is EnumCertificationLevel.PLATINUM
    assert EnumCertificationLevel.PLATINUM.next_level() is None
    assert minimum_score_for_level(EnumCertificationLevel.GOLD) == 90.0
    assert minimum_score_for_level(EnumCertificationLevel.NONE) is None


def test_recommendation_priority_rank_sorts_critical_first():
    ordered = sorted(EnumRecommendationPriority, key=lambda p: p.rank, reverse=True)
    assert ordered[-1] is EnumRecommendationPriority.CRITICAL
    assert ordered[0] is EnumRecommendationPriority.LOW


def test_eight_quality_categories():
    assert len(EnumQualityCategory) == 8
    assert EnumQualityCategory("conformance") is EnumQualityCategory.CONFORMANCE
