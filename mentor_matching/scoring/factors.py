# mentor_matching/scoring/factors.py
from __future__ import annotations

from typing import Iterable, Set

from ..models import MentorProfile, MenteeProfile
from ..config import EXPERIENCE_LEVELS, RELATED_INDUSTRIES


def _overlap_ratio(a: Set[str], b: Set[str]) -> float:
    """
    |a ∩ b| / max(|a|, |b|).
    Two empty sets share nothing, so they score 0.0.
    """
    denom = max(len(a), len(b))
    if denom == 0:
        return 0.0
    return len(a & b) / denom


def _lowered(xs: Iterable[str]) -> Set[str]:
    return {x.lower() for x in xs}


def expertise_alignment(mentor: MentorProfile, mentee: MenteeProfile) -> float:
    """
    Jaccard similarity between mentor expertise areas and mentee interests,
    compared case-insensitively. 0.0 when neither side declared anything.
    """
    mentor_areas = _lowered(mentor.expertise_areas)
    mentee_interests = _lowered(mentee.interested_areas)

    union = mentor_areas | mentee_interests
    if not union:
        return 0.0
    return len(mentor_areas & mentee_interests) / len(union)


def availability_alignment(mentor: MentorProfile, mentee: MenteeProfile) -> float:
    """
    Mean of three sub-scores: preferred-day overlap, preferred-hour overlap and
    time zone (1.0 same zone, 0.5 otherwise). 0.0 if either side is unavailable.
    """
    m_av = mentor.availability
    e_av = mentee.availability

    if not m_av.is_available or not e_av.is_available:
        return 0.0

    day_alignment = _overlap_ratio(set(m_av.preferred_days), set(e_av.preferred_days))
    hour_alignment = _overlap_ratio(set(m_av.preferred_hours), set(e_av.preferred_hours))
    timezone_alignment = 1.0 if m_av.time_zone == e_av.time_zone else 0.5

    return (day_alignment + hour_alignment + timezone_alignment) / 3


def communication_style_match(mentor: MentorProfile, mentee: MenteeProfile) -> float:
    mentor_style = mentor.mentoring_preferences.preferred_communication_style
    mentee_style = mentee.mentorship_preferences.communication_style

    if mentor_style == mentee_style:
        return 1.0
    if mentor_style == "mixed" or mentee_style == "mixed":
        return 0.8
    return 0.4


def _same_industry_group(a: str, b: str) -> bool:
    for key, related in RELATED_INDUSTRIES.items():
        if (a == key or a in related) and (b == key or b in related):
            return True
    return False


def industry_alignment(mentor: MentorProfile, mentee: MenteeProfile) -> float:
    """
    1.0 same industry, 0.7 related (same group in RELATED_INDUSTRIES),
    0.2 unrelated, 0.5 when either side left it blank.
    """
    if not mentor.industry or not mentee.industry:
        return 0.5

    mentor_industry = mentor.industry.lower()
    mentee_industry = mentee.industry.lower()

    if mentor_industry == mentee_industry:
        return 1.0
    if _same_industry_group(mentor_industry, mentee_industry):
        return 0.7
    return 0.2


def experience_gap(mentor: MentorProfile, mentee: MenteeProfile) -> int:
    return EXPERIENCE_LEVELS[mentor.experience_level] - EXPERIENCE_LEVELS[mentee.current_level]


def experience_gap_score(mentor: MentorProfile, mentee: MenteeProfile) -> float:
    gap = experience_gap(mentor, mentee)

    if 1 <= gap <= 2:
        return 1.0
    if gap == 3:
        return 0.7
    if gap == 0:
        return 0.5
    if gap < 0:
        return 0.2
    # gap > 3 cannot happen on a four-level scale
    return 0.1
