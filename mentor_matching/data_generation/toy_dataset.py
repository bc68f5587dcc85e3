# mentor_matching/data_generation/toy_dataset.py
from __future__ import annotations

import random
from typing import List, Optional, Tuple

from ..models import (
    Availability,
    MentoringPreferences,
    MentorshipPreferences,
    MentorProfile,
    MenteeProfile,
)
from ..config import (
    NUM_MENTORS_DEFAULT,
    NUM_MENTEES_DEFAULT,
    UNAVAILABLE_RATIO_DEFAULT,
    DEFAULT_SEED,
    DEFAULT_SESSION_ID,
    EXPERIENCE_LEVELS,
    MENTEE_LEVELS,
    COMMUNICATION_STYLES,
    TOY_TOPICS,
    TOY_INDUSTRIES,
    TOY_DAYS,
    TOY_HOURS,
    TOY_TIME_ZONES,
)


def _random_availability(rng: random.Random, unavailable_ratio: float) -> Availability:
    return Availability(
        is_available=rng.random() >= unavailable_ratio,
        time_zone=rng.choice(TOY_TIME_ZONES),
        preferred_days=set(rng.sample(TOY_DAYS, k=rng.randint(1, 4))),
        preferred_hours=set(rng.sample(TOY_HOURS, k=rng.randint(1, 2))),
    )


def create_toy_mentors(
    num_mentors: int,
    rng: random.Random,
    session_id: str = DEFAULT_SESSION_ID,
    unavailable_ratio: float = UNAVAILABLE_RATIO_DEFAULT,
) -> List[MentorProfile]:
    # mentors skew senior: intermediate and up
    mentor_levels = [lvl for lvl in EXPERIENCE_LEVELS if lvl != "beginner"]

    mentors: List[MentorProfile] = []
    for i in range(1, num_mentors + 1):
        mentors.append(
            MentorProfile(
                user_id=f"M{i:03d}",
                session_id=session_id,
                name=f"Mentor {i}",
                expertise_areas=rng.sample(TOY_TOPICS, k=rng.randint(2, 4)),
                experience_level=rng.choice(mentor_levels),
                industry=rng.choice(TOY_INDUSTRIES),
                years_of_experience=rng.randint(3, 25),
                mentoring_preferences=MentoringPreferences(
                    preferred_communication_style=rng.choice(COMMUNICATION_STYLES),
                ),
                availability=_random_availability(rng, unavailable_ratio),
            )
        )
    return mentors


def create_toy_mentees(
    num_mentees: int,
    rng: random.Random,
    session_id: str = DEFAULT_SESSION_ID,
    unavailable_ratio: float = UNAVAILABLE_RATIO_DEFAULT,
) -> List[MenteeProfile]:
    mentees: List[MenteeProfile] = []
    for i in range(1, num_mentees + 1):
        mentees.append(
            MenteeProfile(
                user_id=f"E{i:03d}",
                session_id=session_id,
                name=f"Mentee {i}",
                interested_areas=rng.sample(TOY_TOPICS, k=rng.randint(1, 3)),
                current_level=rng.choice(MENTEE_LEVELS),
                industry=rng.choice(TOY_INDUSTRIES),
                mentorship_preferences=MentorshipPreferences(
                    communication_style=rng.choice(COMMUNICATION_STYLES),
                ),
                availability=_random_availability(rng, unavailable_ratio),
            )
        )
    return mentees


def make_toy_profiles(
    num_mentors: int = NUM_MENTORS_DEFAULT,
    num_mentees: int = NUM_MENTEES_DEFAULT,
    seed: Optional[int] = DEFAULT_SEED,
    unavailable_ratio: float = UNAVAILABLE_RATIO_DEFAULT,
    session_id: str = DEFAULT_SESSION_ID,
) -> Tuple[List[MentorProfile], List[MenteeProfile]]:
    """
    Return reproducible (mentors, mentees) for a single session.
    Roughly `unavailable_ratio` of each side is marked unavailable.
    """
    if num_mentors < 0 or num_mentees < 0:
        raise ValueError(
            f"Profile counts must be non-negative: num_mentors={num_mentors}, "
            f"num_mentees={num_mentees}."
        )
    if not 0.0 <= unavailable_ratio <= 1.0:
        raise ValueError(f"unavailable_ratio={unavailable_ratio} must be within [0, 1].")

    rng = random.Random(seed)
    mentors = create_toy_mentors(num_mentors, rng, session_id, unavailable_ratio)
    mentees = create_toy_mentees(num_mentees, rng, session_id, unavailable_ratio)
    return mentors, mentees
