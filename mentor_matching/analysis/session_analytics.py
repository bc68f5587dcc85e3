# mentor_matching/analysis/session_analytics.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from ..models import MentorProfile, MenteeProfile, MentorshipMatch, MatchStatus
from ..config import TOP_EXPERTISE_AREAS_LIMIT
from ..matching.matcher import wall_clock_ms
from .quality import analyze_matching_quality


def _zero_satisfaction() -> Dict[str, float]:
    return {"overall": 0.0, "mentor_satisfaction": 0.0, "mentee_satisfaction": 0.0}


@dataclass
class MentorshipAnalytics:
    session_id: str
    total_matches: int
    active_matches: int
    completed_matches: int
    average_compatibility_score: float
    top_expertise_areas: List[Tuple[str, int]]
    participation_rate: Dict[str, int]
    improvement_areas: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    generated_at: int = 0
    # no session tracking yet, so these stay at zero
    success_rate: float = 0.0
    average_session_duration: float = 0.0
    satisfaction_scores: Dict[str, float] = field(default_factory=_zero_satisfaction)


def top_expertise_areas(
    mentors: List[MentorProfile],
    limit: int = TOP_EXPERTISE_AREAS_LIMIT,
) -> List[Tuple[str, int]]:
    """Most common mentor expertise areas as (area, count), highest first."""
    counts: Dict[str, int] = {}
    for m in mentors:
        for area in m.expertise_areas:
            counts[area] = counts.get(area, 0) + 1

    return sorted(counts.items(), key=lambda kv: kv[1], reverse=True)[:limit]


def build_session_analytics(
    session_id: str,
    mentors: List[MentorProfile],
    mentees: List[MenteeProfile],
    matches: List[MentorshipMatch],
    clock: Optional[Callable[[], int]] = None,
) -> MentorshipAnalytics:
    """
    Session-level summary of a matching run. Counts participants as given,
    so callers decide whether unavailable profiles are included.
    """
    clock = clock or wall_clock_ms
    report = analyze_matching_quality(matches)

    return MentorshipAnalytics(
        session_id=session_id,
        total_matches=len(matches),
        active_matches=sum(1 for m in matches if m.status == MatchStatus.ACTIVE),
        completed_matches=sum(1 for m in matches if m.status == MatchStatus.COMPLETED),
        average_compatibility_score=report.average_compatibility,
        top_expertise_areas=top_expertise_areas(mentors),
        participation_rate={"mentors": len(mentors), "mentees": len(mentees)},
        improvement_areas=list(report.recommendations),
        recommendations=list(report.recommendations),
        generated_at=clock(),
    )
