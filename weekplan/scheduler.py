"""
Schedule manager.

Owns one session's state:
- catalog: the courses loaded from a catalog file (never modified afterwards)
- schedule: the user's ordered list of courses and events
- title: the schedule's display name

Every add re-checks the whole schedule for duplicates and time conflicts,
so the schedule can never contain either. One manager per session; it is
not meant to be shared between threads.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from weekplan.errors import DuplicateActivity, InvalidArgument, ScheduleConflict
from weekplan.model import Activity, Course, Event
from weekplan.records import read_course_records, write_activity_records

log = logging.getLogger(__name__)

DEFAULT_TITLE = "My Schedule"


class ScheduleManager:
    def __init__(self, catalog: Iterable[Course] = ()) -> None:
        self._catalog: list[Course] = list(catalog)
        self._schedule: list[Activity] = []
        self._title = DEFAULT_TITLE

    @classmethod
    def from_file(cls, catalog_path: str | Path) -> "ScheduleManager":
        """
        Load the catalog from a text file.
        Raises CatalogUnavailable if the file cannot be read.
        """
        return cls(read_course_records(catalog_path))

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def catalog(self) -> tuple[Course, ...]:
        return tuple(self._catalog)

    @property
    def schedule(self) -> tuple[Activity, ...]:
        return tuple(self._schedule)

    @property
    def title(self) -> str:
        return self._title

    def get_course_catalog(self) -> list[list[str]]:
        """One 4-column row per catalog course: name, section, title, meeting."""
        return [c.short_display() for c in self._catalog]

    def get_scheduled_activities(self) -> list[list[str]]:
        return [a.short_display() for a in self._schedule]

    def get_full_scheduled_activities(self) -> list[list[str]]:
        """
        One 7-column row per scheduled activity: name, section, title,
        credits, instructor, meeting, event details.
        """
        return [a.long_display() for a in self._schedule]

    def find_in_catalog(self, name: str, section: str) -> Optional[Course]:
        for course in self._catalog:
            if course.name == name and course.section == section:
                return course
        return None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _check_can_add(self, candidate: Activity, duplicate_msg: str, conflict_msg: str) -> None:
        for scheduled in self._schedule:
            if scheduled.is_duplicate(candidate):
                raise DuplicateActivity(duplicate_msg)
            try:
                candidate.check_conflict(scheduled)
            except ScheduleConflict as exc:
                raise ScheduleConflict(conflict_msg) from exc

    def add_course_to_schedule(self, name: str, section: str) -> bool:
        """
        Add a catalog course. Returns False if (name, section) is not in the
        catalog. Raises DuplicateActivity if a course with the same name is
        already scheduled, ScheduleConflict if it overlaps anything scheduled.
        """
        course = self.find_in_catalog(name, section)
        if course is None:
            log.debug("Course %s-%s not in catalog", name, section)
            return False

        self._check_can_add(
            course,
            duplicate_msg=f"You are already enrolled in {name}",
            conflict_msg="The course cannot be added due to a conflict.",
        )
        self._schedule.append(course)
        log.debug("Added course %s-%s", name, section)
        return True

    def add_event_to_schedule(
        self, title: str, meeting_days: str, start_time: int, end_time: int, event_details: str
    ) -> Event:
        event = Event(title, meeting_days, start_time, end_time, event_details)
        self._check_can_add(
            event,
            duplicate_msg=f"You have already created an event called {title}",
            conflict_msg="The event cannot be added due to a conflict.",
        )
        self._schedule.append(event)
        log.debug("Added event %r", title)
        return event

    def remove_from_schedule(self, index: int) -> bool:
        """
        Remove the activity at index. Out-of-range indexes (including
        negative ones) are not an error: nothing happens and False is returned.
        """
        if not (0 <= index < len(self._schedule)):
            return False
        removed = self._schedule.pop(index)
        log.debug("Removed %r", removed.title)
        return True

    def reset_schedule(self) -> None:
        self._schedule = []

    def set_schedule_title(self, title: str) -> None:
        if title is None:
            raise InvalidArgument("Title cannot be null.")
        self._title = title

    def export_schedule(self, path: str | Path) -> int:
        """
        Write the schedule as text records. Raises ExportFailed on I/O errors.
        """
        return write_activity_records(path, self._schedule)
