"""
Record codec (text lines <-> activities).

Catalog files contain one course per line:

    name,title,section,credits,instructor_id,meeting_days[,start_time,end_time]

The start/end pair is present iff meeting_days is not "A" (arranged).
Example:

    CSC 216,Software Development Fundamentals,001,3,sesmith5,MW,1330,1445
    CSC 230,C and Software Tools,001,3,dbsturgi,A

Reading is forgiving: a line that does not describe a valid course is
skipped, and a later line repeating an earlier (name, section) pair is
dropped. Exported schedules use the same format for courses and

    title,meeting_days,start_time,end_time,event_details

for events.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from weekplan.errors import CatalogUnavailable, ExportFailed, InvalidArgument
from weekplan.model import ARRANGED, Activity, Course, Event

log = logging.getLogger(__name__)

_ARRANGED_FIELDS = 6
_TIMED_FIELDS = 8

# plain decimal integers only: no whitespace, no "_" digit groups
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise InvalidArgument(f"Not an integer: {text!r}")
    return int(text)


def parse_course_line(line: str) -> Course:
    """
    Parse exactly one catalog line into a Course.
    Raises InvalidArgument if the line is malformed or the course is invalid.
    """
    parts = line.rstrip("\r\n").split(",")
    if len(parts) < _ARRANGED_FIELDS:
        raise InvalidArgument(f"Too few fields: {line!r}")

    name, title, section, credits_s, instructor_id, meeting_days = parts[:_ARRANGED_FIELDS]
    credits = _parse_int(credits_s)

    if meeting_days == ARRANGED:
        if len(parts) != _ARRANGED_FIELDS:
            raise InvalidArgument(f"Arranged course with meeting times: {line!r}")
        return Course(name, title, section, credits, instructor_id, meeting_days)

    if len(parts) != _TIMED_FIELDS:
        raise InvalidArgument(f"Expected {_TIMED_FIELDS} fields: {line!r}")

    start_time = _parse_int(parts[6])
    end_time = _parse_int(parts[7])
    return Course(name, title, section, credits, instructor_id, meeting_days, start_time, end_time)


def parse_course_records(lines: Iterable[str]) -> list[Course]:
    """
    Turn catalog lines into validated, de-duplicated courses (first wins).
    """
    courses: list[Course] = []
    seen: set[tuple[str, str]] = set()

    for lineno, line in enumerate(lines, start=1):
        try:
            course = parse_course_line(line)
        except InvalidArgument as exc:
            log.debug("Skipping catalog line %d: %s", lineno, exc)
            continue

        key = (course.name, course.section)
        if key in seen:
            log.debug("Skipping catalog line %d: duplicate %s-%s", lineno, *key)
            continue
        seen.add(key)
        courses.append(course)

    return courses


def read_course_records(path: str | Path) -> list[Course]:
    """
    Read a catalog file. Raises CatalogUnavailable if it cannot be read.
    """
    catalog_path = Path(path)
    try:
        text = catalog_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogUnavailable() from exc

    courses = parse_course_records(text.splitlines())
    log.info("Loaded %d courses from %s", len(courses), catalog_path)
    return courses


def format_activity_record(activity: Activity) -> str:
    if isinstance(activity, Course):
        fields = [
            activity.name,
            activity.title,
            activity.section,
            str(activity.credits),
            activity.instructor_id,
            activity.meeting_days,
        ]
        if activity.meeting_days != ARRANGED:
            fields += [str(activity.start_time), str(activity.end_time)]
        return ",".join(fields)

    if isinstance(activity, Event):
        return (
            f"{activity.title},{activity.meeting_days},"
            f"{activity.start_time},{activity.end_time},{activity.event_details}"
        )

    raise TypeError(f"Unsupported activity: {type(activity).__name__}")


def write_activity_records(path: str | Path, activities: Iterable[Activity]) -> int:
    """
    Write one record per activity. Returns the number of records written.
    Raises ExportFailed if the file cannot be written.
    """
    out = Path(path)
    lines = [format_activity_record(a) for a in activities]
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    except OSError as exc:
        raise ExportFailed() from exc
    return len(lines)
