from __future__ import annotations

from pathlib import Path
from typing import Optional

from weekplan.conflicts import find_conflicts
from weekplan.display import catalog_table, console, println, prompt, schedule_table
from weekplan.errors import ScheduleError
from weekplan.scheduler import ScheduleManager
from weekplan.storage import save_schedule_state
from weekplan.util import parse_time


def run_interactive(manager: ScheduleManager, state_path: Optional[Path] = None) -> None:
    """
    Interactive menu loop. The schedule is saved after every change.
    """
    while True:
        _print_header(manager)

        choice = prompt(
            "\n[1] Browse catalog\n"
            "[2] Add course\n"
            "[3] Add event\n"
            "[4] View schedule\n"
            "[5] Remove an activity\n"
            "[6] Rename schedule\n"
            "[7] Reset schedule\n"
            "[8] Export schedule\n"
            "[0] Exit\n"
            "Select: "
        ).strip()

        if choice == "0":
            println("Bye.")
            return

        try:
            changed = _dispatch(choice, manager)
        except ScheduleError as exc:
            println(f"Error: {exc}")
            continue

        if changed:
            try:
                save_schedule_state(manager, state_path)
            except OSError as exc:
                println(f"Error: could not save schedule: {exc}")


def _dispatch(choice: str, manager: ScheduleManager) -> bool:
    """
    Run one menu entry. Returns True if the schedule changed.
    """
    if choice == "1":
        _flow_catalog(manager)
    elif choice == "2":
        return _flow_add_course(manager)
    elif choice == "3":
        return _flow_add_event(manager)
    elif choice == "4":
        _flow_view_schedule(manager)
    elif choice == "5":
        return _flow_remove(manager)
    elif choice == "6":
        return _flow_rename(manager)
    elif choice == "7":
        return _flow_reset(manager)
    elif choice == "8":
        _flow_export(manager)
    else:
        println("Invalid choice.")
    return False


def _print_header(manager: ScheduleManager) -> None:
    println("\n=== weekplan (interactive) ===")
    println(f"Schedule: {manager.title} | activities: {len(manager.schedule)} | catalog: {len(manager.catalog)}")


def _flow_catalog(manager: ScheduleManager) -> None:
    if not manager.catalog:
        println("Catalog is empty.")
        return
    console.print(catalog_table(manager))


def _flow_add_course(manager: ScheduleManager) -> bool:
    """
    Ask for name + section and add the course. On a conflict, show which
    scheduled activities are in the way before giving up.
    """
    name = prompt("Course name (e.g. 'CSC 216') [blank = back]: ").strip()
    if not name:
        return False
    section = prompt("Section (e.g. 001): ").strip()

    course = manager.find_in_catalog(name, section)
    if course is None:
        println(f"Not found in catalog: {name} {section}")
        return False

    try:
        manager.add_course_to_schedule(name, section)
    except ScheduleError:
        for other in find_conflicts(course, manager.schedule):
            println(f"  conflicts with: {other.title} ({other.meeting_string()})")
        raise

    println(f"Added: {name} {section} ({course.meeting_string()})")
    return True


def _flow_add_event(manager: ScheduleManager) -> bool:
    title = prompt("Event title [blank = back]: ").strip()
    if not title:
        return False
    days = prompt("Meeting days (subset of MTWHFSU): ").strip().upper()
    start_s = prompt("Start time (e.g. 1330): ")
    end_s = prompt("End time (e.g. 1445): ")
    details = prompt("Details (optional): ").strip()

    try:
        start = parse_time(start_s)
        end = parse_time(end_s)
    except ValueError:
        println("Times must be numbers like 1330 or 13:30.")
        return False

    event = manager.add_event_to_schedule(title, days, start, end, details)
    println(f"Added event: {event.title} ({event.meeting_string()})")
    return True


def _flow_view_schedule(manager: ScheduleManager) -> None:
    if not manager.schedule:
        println("Nothing scheduled yet.")
        return
    full = prompt("Show full details? [y/N]: ").strip().lower() == "y"
    console.print(schedule_table(manager, full=full))


def _flow_remove(manager: ScheduleManager) -> bool:
    if not manager.schedule:
        println("Nothing scheduled yet.")
        return False

    console.print(schedule_table(manager))
    pick = prompt("Enter number to remove (or blank to cancel): ").strip()
    if not pick:
        return False
    if not pick.isdigit():
        println("Not a number.")
        return False

    index = int(pick) - 1
    before = manager.schedule
    if not manager.remove_from_schedule(index):
        println("Out of range.")
        return False
    println(f"Removed: {before[index].title}")
    return True


def _flow_rename(manager: ScheduleManager) -> bool:
    title = prompt(f"New title [{manager.title}]: ")
    if not title.strip():
        return False
    manager.set_schedule_title(title.strip())
    println(f"Schedule title: {manager.title}")
    return True


def _flow_reset(manager: ScheduleManager) -> bool:
    if prompt("Remove ALL activities? [y/N]: ").strip().lower() != "y":
        return False
    manager.reset_schedule()
    println("Schedule cleared.")
    return True


def _flow_export(manager: ScheduleManager) -> None:
    if not manager.schedule:
        println("Nothing scheduled yet.")
        return

    default_path = Path.cwd() / "schedule.txt"
    out_in = prompt(f"Output file [{default_path.name}]: ").strip()
    out_path = Path(out_in) if out_in else default_path

    n = manager.export_schedule(out_path)
    println(f"Exported {n} activities to: {out_path.resolve()}")
