# mentor_matching/matching/matcher.py
from __future__ import annotations

import random
import string
import time
from typing import Callable, Dict, List, Optional, Tuple

from ..models import (
    MentorProfile,
    MenteeProfile,
    MatchingCriteria,
    MatchingFactors,
    MatchStatus,
    MentorshipMatch,
)
from ..scoring.compatibility import compute_matching_factors, weighted_score

Clock = Callable[[], int]
IdFactory = Callable[[int], str]

_ID_ALPHABET = string.ascii_lowercase + string.digits
_id_rng = random.Random()


def wall_clock_ms() -> int:
    return int(time.time() * 1000)


def generate_match_id(now_ms: int) -> str:
    """match_<ms>_<9 random base36 chars>. Unique enough, not cryptographic."""
    suffix = "".join(_id_rng.choices(_ID_ALPHABET, k=9))
    return f"match_{now_ms}_{suffix}"


def build_candidates(
    mentors: List[MentorProfile],
    mentees: List[MenteeProfile],
    criteria: MatchingCriteria,
) -> List[Tuple[MentorProfile, MenteeProfile, float, MatchingFactors]]:
    """
    Score every available (mentor, mentee) pair and keep those at or above
    criteria.min_compatibility_score, sorted by score descending.

    The sort is stable, so equal scores keep mentor-major input order.
    """
    available_mentors = [m for m in mentors if m.availability.is_available]
    available_mentees = [e for e in mentees if e.availability.is_available]

    candidates = []
    for mentor in available_mentors:
        for mentee in available_mentees:
            factors = compute_matching_factors(mentor, mentee)
            score = weighted_score(factors, criteria)
            if score >= criteria.min_compatibility_score:
                candidates.append((mentor, mentee, score, factors))

    candidates.sort(key=lambda c: c[2], reverse=True)
    return candidates


def find_best_matches(
    mentors: List[MentorProfile],
    mentees: List[MenteeProfile],
    criteria: Optional[MatchingCriteria] = None,
    clock: Optional[Clock] = None,
    id_factory: Optional[IdFactory] = None,
) -> List[MentorshipMatch]:
    """
    Greedy score-priority assignment.

    Walks the ranked candidate list once; a pair is matched if both the
    mentor and the mentee are still under their caps, otherwise it is
    skipped for good. Not a maximum-weight matching.
    """
    if criteria is None:
        criteria = MatchingCriteria()
    clock = clock or wall_clock_ms
    id_factory = id_factory or generate_match_id

    candidates = build_candidates(mentors, mentees, criteria)

    mentor_load: Dict[str, int] = {}
    mentee_load: Dict[str, int] = {}
    matches: List[MentorshipMatch] = []

    for mentor, mentee, score, factors in candidates:
        m_count = mentor_load.get(mentor.user_id, 0)
        e_count = mentee_load.get(mentee.user_id, 0)

        if m_count >= criteria.max_matches_per_mentor:
            continue
        if e_count >= criteria.max_matches_per_mentee:
            continue

        now = clock()
        matches.append(
            MentorshipMatch(
                match_id=id_factory(now),
                session_id=mentor.session_id,
                mentor_id=mentor.user_id,
                mentee_id=mentee.user_id,
                compatibility_score=score,
                matching_factors=factors,
                status=MatchStatus.PENDING,
                matched_at=now,
            )
        )
        mentor_load[mentor.user_id] = m_count + 1
        mentee_load[mentee.user_id] = e_count + 1

    return matches
