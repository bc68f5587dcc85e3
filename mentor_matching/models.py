# mentor_matching/models.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set

from .config import (
    EXPERTISE_WEIGHT_DEFAULT,
    AVAILABILITY_WEIGHT_DEFAULT,
    COMMUNICATION_WEIGHT_DEFAULT,
    INDUSTRY_WEIGHT_DEFAULT,
    EXPERIENCE_GAP_WEIGHT_DEFAULT,
    MIN_COMPATIBILITY_SCORE_DEFAULT,
    MAX_MATCHES_PER_MENTOR_DEFAULT,
    MAX_MATCHES_PER_MENTEE_DEFAULT,
)


@dataclass
class Availability:
    is_available: bool
    time_zone: str
    preferred_days: Set[str] = field(default_factory=set)
    preferred_hours: Set[str] = field(default_factory=set)


@dataclass
class MentoringPreferences:
    preferred_communication_style: str  # formal | casual | mixed
    max_mentees: int = 3
    feedback_style: str = "detailed"


@dataclass
class MentorshipPreferences:
    communication_style: str  # formal | casual | mixed
    preferred_mentor_experience: str = "any"
    feedback_frequency: str = "weekly"
    learning_style: str = "visual"


@dataclass
class MentorProfile:
    user_id: str
    session_id: str
    name: str
    expertise_areas: List[str]
    experience_level: str  # beginner | intermediate | advanced | expert
    mentoring_preferences: MentoringPreferences
    availability: Availability
    industry: Optional[str] = None
    job_title: Optional[str] = None
    years_of_experience: Optional[int] = None


@dataclass
class MenteeProfile:
    user_id: str
    session_id: str
    name: str
    interested_areas: List[str]
    current_level: str  # beginner | intermediate | advanced
    mentorship_preferences: MentorshipPreferences
    availability: Availability
    industry: Optional[str] = None
    learning_goals: List[str] = field(default_factory=list)
    background: Optional[str] = None


@dataclass
class MatchingCriteria:
    expertise_weight: float = EXPERTISE_WEIGHT_DEFAULT
    availability_weight: float = AVAILABILITY_WEIGHT_DEFAULT
    communication_weight: float = COMMUNICATION_WEIGHT_DEFAULT
    industry_weight: float = INDUSTRY_WEIGHT_DEFAULT
    experience_gap_weight: float = EXPERIENCE_GAP_WEIGHT_DEFAULT
    min_compatibility_score: float = MIN_COMPATIBILITY_SCORE_DEFAULT
    max_matches_per_mentor: int = MAX_MATCHES_PER_MENTOR_DEFAULT
    max_matches_per_mentee: int = MAX_MATCHES_PER_MENTEE_DEFAULT

    def __post_init__(self) -> None:
        # Weights are not required to sum to 1, only to be non-negative.
        weights = {
            "expertise_weight": self.expertise_weight,
            "availability_weight": self.availability_weight,
            "communication_weight": self.communication_weight,
            "industry_weight": self.industry_weight,
            "experience_gap_weight": self.experience_gap_weight,
        }
        negative = [name for name, w in weights.items() if w < 0]
        if negative:
            raise ValueError(
                f"Matching weights must be non-negative, got negative: {', '.join(negative)}."
            )
        if self.max_matches_per_mentor < 0 or self.max_matches_per_mentee < 0:
            raise ValueError(
                f"Invalid capacity: max_matches_per_mentor={self.max_matches_per_mentor}, "
                f"max_matches_per_mentee={self.max_matches_per_mentee}."
            )


FACTOR_NAMES = (
    "expertise_alignment",
    "availability_alignment",
    "communication_style_match",
    "industry_alignment",
    "experience_level_gap",
)


@dataclass(frozen=True)
class MatchingFactors:
    expertise_alignment: float
    availability_alignment: float
    communication_style_match: float
    industry_alignment: float
    experience_level_gap: float

    def as_dict(self) -> Dict[str, float]:
        """Factor name -> score, in FACTOR_NAMES order."""
        return {name: getattr(self, name) for name in FACTOR_NAMES}


class MatchStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"


@dataclass(frozen=True)
class MentorshipMatch:
    match_id: str
    session_id: str
    mentor_id: str
    mentee_id: str
    compatibility_score: float
    matching_factors: MatchingFactors
    status: MatchStatus = MatchStatus.PENDING
    matched_at: int = 0  # ms since epoch
