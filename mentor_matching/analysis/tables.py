# mentor_matching/analysis/tables.py
from __future__ import annotations

from typing import List, Optional

import pandas as pd

from ..models import FACTOR_NAMES, MentorProfile, MenteeProfile, MatchingCriteria, MentorshipMatch
from ..scoring.compatibility import calculate_compatibility_score


def compatibility_matrix(
    mentors: List[MentorProfile],
    mentees: List[MenteeProfile],
    criteria: Optional[MatchingCriteria] = None,
) -> pd.DataFrame:
    """
    Mentee x mentor compatibility scores (index: mentee ids, columns: mentor ids).
    Includes unavailable profiles; their availability factor is simply 0.
    """
    mentor_ids = [m.user_id for m in mentors]
    mentee_ids = [e.user_id for e in mentees]

    rows = [
        [calculate_compatibility_score(m, e, criteria) for m in mentors]
        for e in mentees
    ]
    return pd.DataFrame(rows, index=mentee_ids, columns=mentor_ids, dtype=float)


MATCH_COLUMNS = [
    "match_id", "mentor_id", "mentee_id", "compatibility_score", *FACTOR_NAMES, "status",
]


def matches_to_frame(matches: List[MentorshipMatch]) -> pd.DataFrame:
    """One row per match, with the five factor scores as columns."""
    records = []
    for m in matches:
        row = {
            "match_id": m.match_id,
            "mentor_id": m.mentor_id,
            "mentee_id": m.mentee_id,
            "compatibility_score": m.compatibility_score,
            "status": m.status.value,
        }
        row.update(m.matching_factors.as_dict())
        records.append(row)

    return pd.DataFrame(records, columns=MATCH_COLUMNS)
