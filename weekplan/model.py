"""
Central data model definitions used across the project.

Two kinds of activity can live in a schedule:
- Course: an offering from the catalog (name, section, credits, instructor)
- Event: a personal, user-created appointment (title + free-text details)

Both share a title and a weekly meeting window. Meeting days are strings of
single-letter day codes (M T W H F S U), times are 24h integers in
"hundreds" notation (1330 = 1:30PM). The special day string "A" means
"arranged" (no fixed time) and is only valid for courses.

Course names are one to four ASCII letters, a space and three digits
("CSC 216"); accented or other non-ASCII letters are rejected.

Setters validate before assigning and constructors raise before returning,
so a failed call never leaves a half-valid activity behind.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from weekplan.errors import InvalidArgument

UPPER_HOUR = 24
UPPER_MINUTE = 60

ARRANGED = "A"
COURSE_DAYS = "MTWHF"
EVENT_DAYS = "MTWHFSU"

MIN_NAME_LENGTH = 5
MAX_NAME_LENGTH = 8
MIN_CREDITS = 1
MAX_CREDITS = 5

# L[LLL] NNN
_NAME_RE = re.compile(r"[A-Za-z]{1,4} [0-9]{3}")
_SECTION_RE = re.compile(r"[0-9]{3}")

_MEETING_ERROR = "Invalid meeting days and times."


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_title(title: object) -> str:
    if not isinstance(title, str) or not title:
        raise InvalidArgument("Invalid title.")
    return title


def validate_meeting_time(meeting_days: object, start_time: object, end_time: object) -> tuple[str, int, int]:
    """
    Checks shared by every activity: days present, both times on the clock,
    and no overnight windows (end before start).
    """
    if not isinstance(meeting_days, str) or not meeting_days:
        raise InvalidArgument(_MEETING_ERROR)
    if not _is_int(start_time) or not _is_int(end_time):
        raise InvalidArgument(_MEETING_ERROR)

    for t in (start_time, end_time):
        hours, minutes = divmod(t, 100)
        if not (0 <= hours < UPPER_HOUR) or not (0 <= minutes < UPPER_MINUTE):
            raise InvalidArgument(_MEETING_ERROR)

    if end_time < start_time:
        raise InvalidArgument(_MEETING_ERROR)

    return meeting_days, start_time, end_time


def _check_day_letters(meeting_days: str, allowed: str) -> None:
    seen: set[str] = set()
    for day in meeting_days:
        if day not in allowed or day in seen:
            raise InvalidArgument(_MEETING_ERROR)
        seen.add(day)


def validate_course_meeting(meeting_days: object, start_time: object, end_time: object) -> tuple[str, int, int]:
    validate_meeting_time(meeting_days, start_time, end_time)
    if meeting_days == ARRANGED:
        if start_time != 0 or end_time != 0:
            raise InvalidArgument(_MEETING_ERROR)
        return validate_meeting_time(ARRANGED, 0, 0)
    _check_day_letters(meeting_days, COURSE_DAYS)
    return validate_meeting_time(meeting_days, start_time, end_time)


def validate_event_meeting(meeting_days: object, start_time: object, end_time: object) -> tuple[str, int, int]:
    validate_meeting_time(meeting_days, start_time, end_time)
    _check_day_letters(meeting_days, EVENT_DAYS)
    return meeting_days, start_time, end_time


def validate_course_name(name: object) -> str:
    if not isinstance(name, str) or not (MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH):
        raise InvalidArgument("Invalid course name.")
    if not _NAME_RE.fullmatch(name):
        raise InvalidArgument("Invalid course name.")
    return name


def validate_section(section: object) -> str:
    if not isinstance(section, str) or not _SECTION_RE.fullmatch(section):
        raise InvalidArgument("Invalid section.")
    return section


def validate_credits(credits: object) -> int:
    if not _is_int(credits) or not (MIN_CREDITS <= credits <= MAX_CREDITS):
        raise InvalidArgument("Invalid credits.")
    return credits


def validate_instructor_id(instructor_id: object) -> str:
    if not isinstance(instructor_id, str) or not instructor_id:
        raise InvalidArgument("Invalid instructor id.")
    return instructor_id


def validate_event_details(event_details: object) -> str:
    # empty details are fine, missing ones are not
    if not isinstance(event_details, str):
        raise InvalidArgument("Invalid event details.")
    return event_details


def format_time(time: int) -> str:
    """
    Convert 24h 'hundreds' time to a 12h label, e.g. 1330 -> '1:30PM'.
    """
    hours, minutes = divmod(time, 100)
    label = "AM"
    if hours > 12:
        hours -= 12
        label = "PM"
    elif hours == 0:
        hours = 12
    elif hours == 12:
        label = "PM"
    return f"{hours}:{minutes:02d}{label}"


# ---------------------------------------------------------------------------
# Activities
# ---------------------------------------------------------------------------


class Activity(ABC):
    """
    Shared behaviour of everything that can be put into a schedule.

    Concrete kinds are dataclasses; structural equality (==) compares all
    of their fields and never matches across kinds.
    """

    title: str
    meeting_days: str
    start_time: int
    end_time: int

    @staticmethod
    @abstractmethod
    def validate_meeting(meeting_days: object, start_time: object, end_time: object) -> tuple[str, int, int]:
        """Return the normalized (days, start, end) or raise InvalidArgument."""

    @abstractmethod
    def is_duplicate(self, other: "Activity") -> bool:
        """Domain-level sameness, weaker than ==."""

    @abstractmethod
    def short_display(self) -> list[str]:
        ...

    @abstractmethod
    def long_display(self) -> list[str]:
        ...

    def set_title(self, title: str) -> None:
        self.title = validate_title(title)

    def set_meeting_days_and_time(self, meeting_days: str, start_time: int, end_time: int) -> None:
        days, start, end = self.validate_meeting(meeting_days, start_time, end_time)
        self.meeting_days = days
        self.start_time = start
        self.end_time = end

    def is_arranged(self) -> bool:
        return ARRANGED in self.meeting_days

    def meeting_string(self) -> str:
        if self.is_arranged():
            return "Arranged"
        return f"{self.meeting_days} {format_time(self.start_time)}-{format_time(self.end_time)}"

    def _meeting_key(self) -> tuple:
        return (self.title, self.meeting_days, self.start_time, self.end_time)

    def check_conflict(self, other: "Activity") -> None:
        """
        Raise ScheduleConflict if both activities meet at an overlapping
        time on at least one common day.
        """
        from weekplan.conflicts import check_conflict

        check_conflict(self, other)


@dataclass
class Course(Activity):
    """
    One catalog offering, e.g. 'CSC 216' section '001'.

    Arranged courses are created with meeting_days='A' and no times.
    """

    name: str
    title: str
    section: str
    credits: int
    instructor_id: str
    meeting_days: str
    start_time: int = 0
    end_time: int = 0

    def __post_init__(self) -> None:
        self.title = validate_title(self.title)
        self.meeting_days, self.start_time, self.end_time = validate_course_meeting(
            self.meeting_days, self.start_time, self.end_time
        )
        self.name = validate_course_name(self.name)
        self.section = validate_section(self.section)
        self.credits = validate_credits(self.credits)
        self.instructor_id = validate_instructor_id(self.instructor_id)

    validate_meeting = staticmethod(validate_course_meeting)

    def set_section(self, section: str) -> None:
        self.section = validate_section(section)

    def set_credits(self, credits: int) -> None:
        self.credits = validate_credits(credits)

    def set_instructor_id(self, instructor_id: str) -> None:
        self.instructor_id = validate_instructor_id(instructor_id)

    def is_duplicate(self, other: Activity) -> bool:
        # a student cannot take two sections of the same course
        return isinstance(other, Course) and other.name == self.name

    def short_display(self) -> list[str]:
        return [self.name, self.section, self.title, self.meeting_string()]

    def long_display(self) -> list[str]:
        return [
            self.name,
            self.section,
            self.title,
            str(self.credits),
            self.instructor_id,
            self.meeting_string(),
            "",
        ]

    # @dataclass drops an inherited __hash__ when eq=True
    def __hash__(self) -> int:
        return hash(self._meeting_key() + (self.name, self.section, self.credits, self.instructor_id))


@dataclass
class Event(Activity):
    """
    A user-defined appointment. Events may meet on weekends (S, U) but are
    never arranged.
    """

    title: str
    meeting_days: str
    start_time: int
    end_time: int
    event_details: str = ""

    def __post_init__(self) -> None:
        self.title = validate_title(self.title)
        self.meeting_days, self.start_time, self.end_time = validate_event_meeting(
            self.meeting_days, self.start_time, self.end_time
        )
        self.event_details = validate_event_details(self.event_details)

    validate_meeting = staticmethod(validate_event_meeting)

    def set_event_details(self, event_details: str) -> None:
        self.event_details = validate_event_details(event_details)

    def __hash__(self) -> int:
        return hash(self._meeting_key() + (self.event_details,))

    def is_duplicate(self, other: Activity) -> bool:
        return isinstance(other, Event) and other.title == self.title

    def short_display(self) -> list[str]:
        return ["", "", self.title, self.meeting_string()]

    def long_display(self) -> list[str]:
        return ["", "", self.title, "", "", self.meeting_string(), self.event_details]
