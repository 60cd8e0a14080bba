"""
Error taxonomy.

Every failure the scheduler reports carries an ErrorKind so that callers
(CLI, interactive menu, tests) can branch on the kind instead of the text.
The message itself is meant to be shown to the user as-is.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_ARGUMENT = "invalid_argument"
    DUPLICATE_ACTIVITY = "duplicate_activity"
    SCHEDULE_CONFLICT = "schedule_conflict"
    CATALOG_UNAVAILABLE = "catalog_unavailable"
    EXPORT_FAILED = "export_failed"


class ScheduleError(Exception):
    """
    Base class for all scheduling errors.
    """

    kind: ErrorKind
    default_message = "Scheduling error."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidArgument(ScheduleError, ValueError):
    """A single field failed validation (name, section, days, times, ...)."""

    kind = ErrorKind.INVALID_ARGUMENT
    default_message = "Invalid argument."


class DuplicateActivity(ScheduleError):
    kind = ErrorKind.DUPLICATE_ACTIVITY
    default_message = "Activity is already in the schedule."


class ScheduleConflict(ScheduleError):
    kind = ErrorKind.SCHEDULE_CONFLICT
    default_message = "Schedule conflict."


class CatalogUnavailable(ScheduleError):
    kind = ErrorKind.CATALOG_UNAVAILABLE
    default_message = "Cannot find file."


class ExportFailed(ScheduleError):
    kind = ErrorKind.EXPORT_FAILED
    default_message = "The file cannot be saved."
