# mentor_matching/analysis/recommend.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..models import MentorProfile, MenteeProfile
from ..config import RECOMMENDATION_MIN_SCORE, RECOMMENDATION_LIMIT_DEFAULT
from ..scoring.compatibility import calculate_compatibility_score
from ..scoring.factors import experience_gap


@dataclass
class MentorRecommendation:
    mentor: MentorProfile
    score: float
    reasons: List[str]


def _shared_areas(mentor: MentorProfile, mentee: MenteeProfile) -> List[str]:
    """Mentor areas that contain, or are contained in, any mentee interest."""
    shared = []
    for area in mentor.expertise_areas:
        a = area.lower()
        if any(i.lower() in a or a in i.lower() for i in mentee.interested_areas):
            shared.append(area)
    return shared


def generate_recommendation_reasons(mentor: MentorProfile, mentee: MenteeProfile) -> List[str]:
    """
    Plain-language reasons why `mentor` suits `mentee`.
    Each reason is independent; the list may be empty.
    """
    reasons: List[str] = []

    shared = _shared_areas(mentor, mentee)
    if shared:
        reasons.append(f"{', '.join(shared)} 분야의 전문 지식을 보유하고 있습니다")

    gap = experience_gap(mentor, mentee)
    if gap == 1:
        reasons.append("적절한 경험 차이로 실질적인 조언을 제공할 수 있습니다")
    elif gap == 2:
        reasons.append("풍부한 경험을 바탕으로 전략적 가이드를 제공할 수 있습니다")

    if mentor.industry and mentee.industry and mentor.industry.lower() == mentee.industry.lower():
        reasons.append("같은 업계에서의 실무 경험을 공유할 수 있습니다")

    if (
        mentor.mentoring_preferences.preferred_communication_style
        == mentee.mentorship_preferences.communication_style
    ):
        reasons.append("선호하는 소통 방식이 일치합니다")

    # keep the mentor's day order, drop duplicates
    mentee_days = set(mentee.availability.preferred_days)
    common_days = [d for d in dict.fromkeys(mentor.availability.preferred_days) if d in mentee_days]
    if common_days:
        reasons.append(f"{', '.join(common_days)} 일정이 맞습니다")

    return reasons


def recommend_mentors_for_mentee(
    mentee: MenteeProfile,
    available_mentors: List[MentorProfile],
    limit: int = RECOMMENDATION_LIMIT_DEFAULT,
) -> List[MentorRecommendation]:
    """
    Rank available mentors for one mentee using the default criteria.
    Scores below RECOMMENDATION_MIN_SCORE are dropped; at most `limit` returned.
    """
    ranked: List[MentorRecommendation] = []

    for mentor in available_mentors:
        if not mentor.availability.is_available:
            continue
        score = calculate_compatibility_score(mentor, mentee)
        if score < RECOMMENDATION_MIN_SCORE:
            continue
        ranked.append(
            MentorRecommendation(
                mentor=mentor,
                score=score,
                reasons=generate_recommendation_reasons(mentor, mentee),
            )
        )

    ranked.sort(key=lambda r: r.score, reverse=True)
    return ranked[:limit]
