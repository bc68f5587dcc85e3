# mentor_matching/analysis/quality.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..models import FACTOR_NAMES, MentorshipMatch
from ..config import (
    SCORE_BUCKETS,
    FACTOR_LABELS,
    LOW_AVERAGE_COMPATIBILITY,
    WEAK_FACTOR_THRESHOLD,
    MIN_HEALTHY_MATCH_COUNT,
)

NOT_ENOUGH_PARTICIPANTS = "매칭할 수 있는 참가자가 부족합니다."
LOW_QUALITY_MESSAGE = "전체적인 매칭 품질이 낮습니다. 참가자 프로필을 더 상세히 수집해보세요."
RECRUIT_MORE_MESSAGE = "더 많은 참가자를 모집하여 다양한 매칭 옵션을 제공해보세요."


@dataclass
class ScoreBucket:
    range: str
    count: int


@dataclass
class FactorAverage:
    factor: str
    average_score: float


@dataclass
class QualityReport:
    average_compatibility: float
    score_distribution: List[ScoreBucket] = field(default_factory=list)
    factor_analysis: List[FactorAverage] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    # matches whose score lands in no bucket (below 0.5, or exactly 1.0)
    unbucketed_count: int = 0


def _score_distribution(matches: List[MentorshipMatch]) -> tuple[List[ScoreBucket], int]:
    counts = [0] * len(SCORE_BUCKETS)
    unbucketed = 0

    for match in matches:
        score = match.compatibility_score
        for i, (_, lo, hi) in enumerate(SCORE_BUCKETS):
            if lo <= score < hi:
                counts[i] += 1
                break
        else:
            unbucketed += 1

    buckets = [ScoreBucket(range=label, count=c) for (label, _, _), c in zip(SCORE_BUCKETS, counts)]
    return buckets, unbucketed


def _factor_analysis(matches: List[MentorshipMatch]) -> List[FactorAverage]:
    sums = {name: 0.0 for name in FACTOR_NAMES}
    for match in matches:
        for name, value in match.matching_factors.as_dict().items():
            sums[name] += value
    return [FactorAverage(factor=name, average_score=sums[name] / len(matches)) for name in FACTOR_NAMES]


def analyze_matching_quality(matches: List[MentorshipMatch]) -> QualityReport:
    """
    Aggregate report over a finished match list: mean compatibility,
    a fixed-bucket histogram, per-factor means and improvement suggestions.
    """
    if not matches:
        return QualityReport(
            average_compatibility=0.0,
            recommendations=[NOT_ENOUGH_PARTICIPANTS],
        )

    average = sum(m.compatibility_score for m in matches) / len(matches)
    distribution, unbucketed = _score_distribution(matches)
    factors = _factor_analysis(matches)

    recommendations: List[str] = []

    if average < LOW_AVERAGE_COMPATIBILITY:
        recommendations.append(LOW_QUALITY_MESSAGE)

    # first minimum wins on ties
    weakest = factors[0]
    for fa in factors[1:]:
        if fa.average_score < weakest.average_score:
            weakest = fa

    if weakest.average_score < WEAK_FACTOR_THRESHOLD:
        recommendations.append(f"{FACTOR_LABELS[weakest.factor]} 측면에서 개선이 필요합니다.")

    if len(matches) < MIN_HEALTHY_MATCH_COUNT:
        recommendations.append(RECRUIT_MORE_MESSAGE)

    return QualityReport(
        average_compatibility=average,
        score_distribution=distribution,
        factor_analysis=factors,
        recommendations=recommendations,
        unbucketed_count=unbucketed,
    )
