"""
CLI (Command Line Interface).

Quick terminal commands for managing one personal schedule, e.g.:

    weekplan catalog
    weekplan add "CSC 216" 001
    weekplan add-event "Gym" MWF 1800 1900 "leg day"
    weekplan show --full
    weekplan remove 2
    weekplan export schedule.txt
    weekplan interactive

Every command loads the catalog, restores the saved schedule, runs, and
saves the schedule again if it changed. Domain errors (invalid input,
duplicates, conflicts) are printed as-is and give exit code 1.

Note:
- The interactive menu lives in weekplan/interactive.py
- Tables are rendered by weekplan/display.py
"""

from __future__ import annotations

import argparse

from weekplan.config import Settings
from weekplan.conflicts import find_conflicts
from weekplan.display import catalog_table, console, println, schedule_table
from weekplan.errors import CatalogUnavailable, ScheduleError
from weekplan.scheduler import ScheduleManager
from weekplan.storage import load_schedule_state, save_schedule_state
from weekplan.util import configure_logging, parse_time


def _cmd_catalog(args: argparse.Namespace, manager: ScheduleManager) -> int:
    if not manager.catalog:
        println("Catalog is empty.")
        return 0
    console.print(catalog_table(manager))
    return 0


def _cmd_show(args: argparse.Namespace, manager: ScheduleManager) -> int:
    if not manager.schedule:
        println(f"{manager.title}: no activities scheduled.")
        return 0
    console.print(schedule_table(manager, full=args.full))
    return 0


def _cmd_add(args: argparse.Namespace, manager: ScheduleManager) -> int:
    """
    Add a catalog course by name + section.
    """
    name = (args.name or "").strip()
    section = (args.section or "").strip()

    if not manager.add_course_to_schedule(name, section):
        println(f"Not found in catalog: {name} {section}")
        return 1

    println(f"Added: {name} {section} (scheduled: {len(manager.schedule)})")
    return 0


def _cmd_add_event(args: argparse.Namespace, manager: ScheduleManager) -> int:
    event = manager.add_event_to_schedule(args.title, args.days.upper(), args.start, args.end, args.details)
    println(f"Added event: {event.title} | {event.meeting_string()}")
    return 0


def _cmd_remove(args: argparse.Namespace, manager: ScheduleManager) -> int:
    """
    Remove by the 1-based position shown in `weekplan show`.
    """
    position = args.position
    if not manager.remove_from_schedule(position - 1):
        println(f"Nothing to remove at position {position} (scheduled: {len(manager.schedule)})")
        return 1
    println(f"Removed position {position} (scheduled: {len(manager.schedule)})")
    return 0


def _cmd_reset(args: argparse.Namespace, manager: ScheduleManager) -> int:
    manager.reset_schedule()
    println("Schedule cleared.")
    return 0


def _cmd_title(args: argparse.Namespace, manager: ScheduleManager) -> int:
    manager.set_schedule_title(args.text)
    println(f"Schedule title: {manager.title}")
    return 0


def _cmd_check(args: argparse.Namespace, manager: ScheduleManager) -> int:
    """
    Explain whether a catalog course could be added right now.
    """
    name = (args.name or "").strip()
    section = (args.section or "").strip()

    course = manager.find_in_catalog(name, section)
    if course is None:
        println(f"Not found in catalog: {name} {section}")
        return 1

    duplicates = [a for a in manager.schedule if a.is_duplicate(course)]
    # a same-section entry is both a duplicate and a time clash; report it once
    conflicts = [a for a in find_conflicts(course, manager.schedule) if a not in duplicates]
    if not duplicates and not conflicts:
        println(f"{name} {section} ({course.meeting_string()}) fits into the schedule.")
        return 0

    for a in duplicates:
        println(f"- already enrolled: {' '.join(x for x in a.short_display()[:3] if x)}")
    for a in conflicts:
        println(f"- conflicts with: {a.title} ({a.meeting_string()})")
    return 1


def _cmd_export(args: argparse.Namespace, manager: ScheduleManager) -> int:
    """
    Export the schedule into a text file (one record per line).
    """
    if not manager.schedule:
        println("No scheduled activities to export.")
        return 0

    out_path = (args.out or "").strip()
    if not out_path:
        println("Please provide an output file path.")
        return 1

    n = manager.export_schedule(out_path)
    println(f"Exported {n} activities to: {out_path}")
    return 0


# commands that change the schedule and must be saved afterwards
_MUTATING = {"add", "add-event", "remove", "reset", "title"}

_HANDLERS = {
    "catalog": _cmd_catalog,
    "show": _cmd_show,
    "add": _cmd_add,
    "add-event": _cmd_add_event,
    "remove": _cmd_remove,
    "reset": _cmd_reset,
    "title": _cmd_title,
    "check": _cmd_check,
    "export": _cmd_export,
}


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="weekplan", description="weekplan CLI")
    parser.add_argument("--catalog", type=str, default=None, help="Course catalog file")
    parser.add_argument("--state", type=str, default=None, help="Saved schedule (JSON)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("catalog", help="List all catalog courses")

    p_show = sub.add_parser("show", help="Show the current schedule")
    p_show.add_argument("--full", action="store_true", help="Show credits, instructor and event details")

    p_add = sub.add_parser("add", help="Add a catalog course")
    p_add.add_argument("name", type=str, help="Course name (e.g. 'CSC 216')")
    p_add.add_argument("section", type=str, help="Section (e.g. 001)")

    p_event = sub.add_parser("add-event", help="Add a personal event")
    p_event.add_argument("title", type=str, help="Event title")
    p_event.add_argument("days", type=str, help="Meeting days, subset of MTWHFSU (e.g. MWF)")
    p_event.add_argument("start", type=parse_time, help="Start time, 24h (e.g. 1330 or 13:30)")
    p_event.add_argument("end", type=parse_time, help="End time, 24h (e.g. 1445 or 14:45)")
    p_event.add_argument("details", type=str, nargs="?", default="", help="Event details")

    p_remove = sub.add_parser("remove", help="Remove an activity by position")
    p_remove.add_argument("position", type=int, help="Position as shown by 'show' (1-based)")

    sub.add_parser("reset", help="Remove all activities")

    p_title = sub.add_parser("title", help="Rename the schedule")
    p_title.add_argument("text", type=str, help="New title")

    p_check = sub.add_parser("check", help="Check whether a course fits into the schedule")
    p_check.add_argument("name", type=str, help="Course name (e.g. 'CSC 216')")
    p_check.add_argument("section", type=str, help="Section (e.g. 001)")

    p_export = sub.add_parser("export", help="Export the schedule to a text file")
    p_export.add_argument("out", type=str, help="Output file path (e.g. schedule.txt)")

    sub.add_parser("interactive", help="Interactive menu mode")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = Settings.resolve(args.catalog, args.state, args.verbose)
    configure_logging(settings.verbose)

    try:
        manager = ScheduleManager.from_file(settings.catalog_path)
    except CatalogUnavailable as exc:
        println(f"{exc} ({settings.catalog_path})")
        raise SystemExit(1)

    load_schedule_state(manager, settings.state_path)

    if args.command == "interactive":
        from weekplan.interactive import run_interactive

        run_interactive(manager, state_path=settings.state_path)
        raise SystemExit(0)

    handler = _HANDLERS.get(args.command)
    if handler is None:
        raise SystemExit(2)

    try:
        rc = handler(args, manager)
    except ScheduleError as exc:
        println(str(exc))
        raise SystemExit(1)

    if rc == 0 and args.command in _MUTATING:
        try:
            save_schedule_state(manager, settings.state_path)
        except OSError as exc:
            println(f"Could not save schedule to {settings.state_path}: {exc}")
            raise SystemExit(1)
    raise SystemExit(rc)
