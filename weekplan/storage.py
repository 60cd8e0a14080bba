"""
Persistent storage for the user's schedule between CLI runs.

This module manages a JSON file (by default weekplan/data/schedule.json):

    {
      "title": "My Schedule",
      "activities": [
        {"kind": "course", "name": "CSC 216", "section": "001"},
        {"kind": "event", "title": "Gym", "meeting_days": "MW",
         "start_time": 1800, "end_time": 1900, "event_details": ""}
      ]
    }

Courses are stored by reference (name + section) and looked up in the
catalog again on load, events are stored in full. Loading replays every
entry through the normal add operations, so a saved schedule can never
smuggle in a duplicate or a conflict.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from weekplan.config import default_state_path
from weekplan.errors import ScheduleError
from weekplan.model import Activity, Course, Event
from weekplan.scheduler import ScheduleManager

log = logging.getLogger(__name__)


def _activity_to_dict(activity: Activity) -> dict[str, Any]:
    if isinstance(activity, Course):
        return {"kind": "course", "name": activity.name, "section": activity.section}
    if isinstance(activity, Event):
        return {
            "kind": "event",
            "title": activity.title,
            "meeting_days": activity.meeting_days,
            "start_time": activity.start_time,
            "end_time": activity.end_time,
            "event_details": activity.event_details,
        }
    raise TypeError(f"Unsupported activity: {type(activity).__name__}")


def _restore_entry(manager: ScheduleManager, entry: dict[str, Any]) -> bool:
    kind = entry.get("kind")
    if kind == "course":
        return manager.add_course_to_schedule(str(entry.get("name", "")), str(entry.get("section", "")))
    if kind == "event":
        manager.add_event_to_schedule(
            entry.get("title"),
            entry.get("meeting_days"),
            entry.get("start_time"),
            entry.get("end_time"),
            entry.get("event_details"),
        )
        return True
    raise TypeError(f"Unknown entry kind: {kind!r}")


def load_schedule_state(manager: ScheduleManager, path: str | Path | None = None) -> int:
    """
    Reset manager and restore title + activities from the state file.

    Returns the number of restored activities. A missing or unreadable file
    restores nothing; entries that no longer apply (course dropped from the
    catalog, invalid event) are skipped with a warning.
    """
    state_path = Path(path) if path is not None else default_state_path()
    manager.reset_schedule()

    # First run: nothing saved yet
    if not state_path.exists():
        return 0

    try:
        data = json.loads(state_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        log.warning("Ignoring unreadable schedule state %s: %s", state_path, exc)
        return 0

    if not isinstance(data, dict):
        log.warning("Ignoring schedule state %s: unexpected format", state_path)
        return 0

    title = data.get("title")
    if isinstance(title, str):
        manager.set_schedule_title(title)

    entries = data.get("activities", [])
    if not isinstance(entries, list):
        return 0

    restored = 0
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        if entry.get("kind") not in ("course", "event"):
            log.warning("Dropping saved entry %r: unknown kind", entry)
            continue
        try:
            ok = _restore_entry(manager, entry)
        except ScheduleError as exc:
            log.warning("Dropping saved entry %r: %s", entry, exc)
            continue
        if ok:
            restored += 1
        else:
            log.warning("Dropping saved entry %r: not in catalog", entry)
    return restored


def save_schedule_state(manager: ScheduleManager, path: str | Path | None = None) -> None:
    """
    Save title + activities of manager. Creates parent directories if needed.
    """
    state_path = Path(path) if path is not None else default_state_path()
    state_path.parent.mkdir(parents=True, exist_ok=True)

    payload = {
        "title": manager.title,
        "activities": [_activity_to_dict(a) for a in manager.schedule],
    }
    state_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
