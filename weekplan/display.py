"""
Table rendering for the terminal front-ends (rich).

Rows come straight from the manager's display arrays, so courses and
events line up in the same columns (events leave the course-only
columns empty).
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from weekplan.scheduler import ScheduleManager

console = Console()

SHORT_COLUMNS = ("Name", "Section", "Title", "Meeting Days")
LONG_COLUMNS = ("Name", "Section", "Title", "Credits", "Instructor", "Meeting Days", "Event Details")


def _table(title: str, columns: tuple[str, ...], rows: list[list[str]], numbered: bool) -> Table:
    table = Table(title=escape(title), box=box.SIMPLE)
    if numbered:
        table.add_column("#", justify="right")
    for col in columns:
        table.add_column(col)
    for i, row in enumerate(rows, start=1):
        cells = [escape(c) for c in row]
        if numbered:
            cells.insert(0, str(i))
        table.add_row(*cells)
    return table


def catalog_table(manager: ScheduleManager) -> Table:
    return _table("Course catalog", SHORT_COLUMNS, manager.get_course_catalog(), numbered=False)


def schedule_table(manager: ScheduleManager, full: bool = False) -> Table:
    if full:
        return _table(manager.title, LONG_COLUMNS, manager.get_full_scheduled_activities(), numbered=True)
    return _table(manager.title, SHORT_COLUMNS, manager.get_scheduled_activities(), numbered=True)


def println(msg: str = "") -> None:
    # plain text: menu labels like "[1]" are not markup
    console.print(msg, markup=False, highlight=False)


def prompt(msg: str) -> str:
    return console.input(msg, markup=False)
