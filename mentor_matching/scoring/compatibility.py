# mentor_matching/scoring/compatibility.py
from __future__ import annotations

import math
from typing import Optional

from ..models import MentorProfile, MenteeProfile, MatchingCriteria, MatchingFactors
from .factors import (
    expertise_alignment,
    availability_alignment,
    communication_style_match,
    industry_alignment,
    experience_gap_score,
)


def round_score(value: float) -> float:
    """Round half-up to two decimals (0.125 -> 0.13, not banker's rounding)."""
    return math.floor(value * 100 + 0.5) / 100


def compute_matching_factors(mentor: MentorProfile, mentee: MenteeProfile) -> MatchingFactors:
    return MatchingFactors(
        expertise_alignment=expertise_alignment(mentor, mentee),
        availability_alignment=availability_alignment(mentor, mentee),
        communication_style_match=communication_style_match(mentor, mentee),
        industry_alignment=industry_alignment(mentor, mentee),
        experience_level_gap=experience_gap_score(mentor, mentee),
    )


def weighted_score(factors: MatchingFactors, criteria: MatchingCriteria) -> float:
    """
    Weighted sum of the five factors, rounded to 2 decimals.

    Not clamped: weights summing above 1.0 can push the result past 1.0.
    """
    total = (
        factors.expertise_alignment * criteria.expertise_weight
        + factors.availability_alignment * criteria.availability_weight
        + factors.communication_style_match * criteria.communication_weight
        + factors.industry_alignment * criteria.industry_weight
        + factors.experience_level_gap * criteria.experience_gap_weight
    )
    return round_score(total)


def calculate_compatibility_score(
    mentor: MentorProfile,
    mentee: MenteeProfile,
    criteria: Optional[MatchingCriteria] = None,
) -> float:
    if criteria is None:
        criteria = MatchingCriteria()
    return weighted_score(compute_matching_factors(mentor, mentee), criteria)
