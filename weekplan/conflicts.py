"""
Conflict detection.

Two activities conflict if they share at least one meeting day and their
time windows overlap on it. Windows are closed intervals, so touching
endpoints count as a conflict:
    start <= other_end AND other_start <= end

Arranged courses have no fixed time and never conflict with anything.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from weekplan.errors import ScheduleConflict
from weekplan.model import ARRANGED

if TYPE_CHECKING:
    from weekplan.model import Activity


def _overlaps(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    return a_start <= b_end and b_start <= a_end


def check_conflict(a: Activity, b: Activity) -> None:
    """
    Raise ScheduleConflict on the first shared day with overlapping times.
    Symmetric: check_conflict(a, b) fails iff check_conflict(b, a) fails.
    """
    if ARRANGED in a.meeting_days or ARRANGED in b.meeting_days:
        return

    for day in a.meeting_days:
        if day not in b.meeting_days:
            continue
        if _overlaps(a.start_time, a.end_time, b.start_time, b.end_time):
            raise ScheduleConflict()


def has_conflict(a: Activity, b: Activity) -> bool:
    try:
        check_conflict(a, b)
    except ScheduleConflict:
        return True
    return False


def find_conflicts(candidate: Activity, activities: Iterable[Activity]) -> list[Activity]:
    """
    Return every activity that conflicts with candidate, in input order.
    """
    return [other for other in activities if has_conflict(candidate, other)]
