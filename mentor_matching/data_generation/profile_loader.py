# mentor_matching/data_generation/profile_loader.py
from __future__ import annotations

import csv
from typing import Dict, List, Optional

from ..models import (
    Availability,
    MentoringPreferences,
    MentorshipPreferences,
    MentorProfile,
    MenteeProfile,
)
from ..config import (
    CSV_LIST_SEPARATOR,
    COMMUNICATION_STYLES,
    EXPERIENCE_LEVELS,
    MENTEE_LEVELS,
)

_COMMON_COLUMNS = [
    "user_id", "session_id", "name", "industry", "communication_style",
    "is_available", "time_zone", "preferred_days", "preferred_hours",
]
MENTOR_COLUMNS = _COMMON_COLUMNS + ["expertise_areas", "experience_level"]
MENTEE_COLUMNS = _COMMON_COLUMNS + ["interested_areas", "current_level"]

# read when present, otherwise left at the model defaults
MENTOR_OPTIONAL_COLUMNS = ["job_title", "years_of_experience"]
MENTEE_OPTIONAL_COLUMNS = ["learning_goals", "background"]

_TRUE_VALUES = {"true", "yes", "y", "1"}
_FALSE_VALUES = {"false", "no", "n", "0", ""}


def _split_list(cell: Optional[str]) -> List[str]:
    return [x.strip() for x in (cell or "").split(CSV_LIST_SEPARATOR) if x.strip()]


def _parse_bool(cell: str, line: int) -> bool:
    v = (cell or "").strip().lower()
    if v in _TRUE_VALUES:
        return True
    if v in _FALSE_VALUES:
        return False
    raise ValueError(f"Line {line}: cannot read is_available value {cell!r}.")


def _check_choice(value: str, allowed, column: str, line: int) -> str:
    if value not in allowed:
        raise ValueError(
            f"Line {line}: {column}={value!r} is not one of {', '.join(allowed)}."
        )
    return value


def _optional(cell: Optional[str]) -> Optional[str]:
    cell = (cell or "").strip()
    return cell or None


def _read_rows(path: str, required: List[str]) -> List[Dict[str, str]]:
    with open(path, "r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        missing = [c for c in required if c not in (reader.fieldnames or [])]
        if missing:
            raise ValueError(f"{path}: missing column(s): {', '.join(missing)}.")
        rows = list(reader)

    # DictReader fills cells missing from a short row with None
    for line, row in enumerate(rows, start=2):
        short = [c for c in required if row.get(c) is None]
        if short:
            raise ValueError(f"{path}: line {line}: missing value(s) for {', '.join(short)}.")
    return rows


def _optional_int(cell: Optional[str], column: str, line: int) -> Optional[int]:
    cell = (cell or "").strip()
    if not cell:
        return None
    try:
        return int(cell)
    except ValueError:
        raise ValueError(f"Line {line}: {column}={cell!r} is not a whole number.") from None


def _availability(row: Dict[str, str], line: int) -> Availability:
    return Availability(
        is_available=_parse_bool(row["is_available"], line),
        time_zone=row["time_zone"].strip(),
        preferred_days=set(_split_list(row["preferred_days"])),
        preferred_hours=set(_split_list(row["preferred_hours"])),
    )


def load_mentor_profiles(path: str) -> List[MentorProfile]:
    """
    Reads a CSV with a header row containing MENTOR_COLUMNS.
    List cells (expertise_areas, preferred_days, preferred_hours) are
    separated by CSV_LIST_SEPARATOR, e.g. "Python;Leadership".
    MENTOR_OPTIONAL_COLUMNS are read when the header has them.
    """
    mentors: List[MentorProfile] = []
    # header is line 1
    for line, row in enumerate(_read_rows(path, MENTOR_COLUMNS), start=2):
        level = _check_choice(row["experience_level"].strip().lower(), list(EXPERIENCE_LEVELS), "experience_level", line)
        style = _check_choice(row["communication_style"].strip().lower(), COMMUNICATION_STYLES, "communication_style", line)
        mentors.append(
            MentorProfile(
                user_id=row["user_id"].strip(),
                session_id=row["session_id"].strip(),
                name=row["name"].strip(),
                expertise_areas=_split_list(row["expertise_areas"]),
                experience_level=level,
                industry=_optional(row["industry"]),
                job_title=_optional(row.get("job_title")),
                years_of_experience=_optional_int(row.get("years_of_experience"), "years_of_experience", line),
                mentoring_preferences=MentoringPreferences(preferred_communication_style=style),
                availability=_availability(row, line),
            )
        )
    return mentors


def load_mentee_profiles(path: str) -> List[MenteeProfile]:
    """Same format as load_mentor_profiles, with MENTEE_COLUMNS and MENTEE_OPTIONAL_COLUMNS."""
    mentees: List[MenteeProfile] = []
    for line, row in enumerate(_read_rows(path, MENTEE_COLUMNS), start=2):
        level = _check_choice(row["current_level"].strip().lower(), MENTEE_LEVELS, "current_level", line)
        style = _check_choice(row["communication_style"].strip().lower(), COMMUNICATION_STYLES, "communication_style", line)
        mentees.append(
            MenteeProfile(
                user_id=row["user_id"].strip(),
                session_id=row["session_id"].strip(),
                name=row["name"].strip(),
                interested_areas=_split_list(row["interested_areas"]),
                current_level=level,
                industry=_optional(row["industry"]),
                learning_goals=_split_list(row.get("learning_goals")),
                background=_optional(row.get("background")),
                mentorship_preferences=MentorshipPreferences(communication_style=style),
                availability=_availability(row, line),
            )
        )
    return mentees
