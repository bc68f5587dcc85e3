# tests/profiles.py
"""Small profile builders shared by the test modules."""
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mentor_matching.models import (
    Availability,
    MentoringPreferences,
    MentorshipPreferences,
    MentorProfile,
    MenteeProfile,
)

SESSION = "s1"


def make_mentor(
    user_id="M1",
    expertise=("Python",),
    level="advanced",
    industry=None,
    style="casual",
    available=True,
    tz="Asia/Seoul",
    days=("mon",),
    hours=("evening",),
):
    return MentorProfile(
        user_id=user_id,
        session_id=SESSION,
        name=f"Mentor {user_id}",
        expertise_areas=list(expertise),
        experience_level=level,
        industry=industry,
        mentoring_preferences=MentoringPreferences(preferred_communication_style=style),
        availability=Availability(
            is_available=available,
            time_zone=tz,
            preferred_days=set(days),
            preferred_hours=set(hours),
        ),
    )


def make_mentee(
    user_id="E1",
    interests=("Python",),
    level="beginner",
    industry=None,
    style="casual",
    available=True,
    tz="Asia/Seoul",
    days=("mon",),
    hours=("evening",),
):
    return MenteeProfile(
        user_id=user_id,
        session_id=SESSION,
        name=f"Mentee {user_id}",
        interested_areas=list(interests),
        current_level=level,
        industry=industry,
        mentorship_preferences=MentorshipPreferences(communication_style=style),
        availability=Availability(
            is_available=available,
            time_zone=tz,
            preferred_days=set(days),
            preferred_hours=set(hours),
        ),
    )
