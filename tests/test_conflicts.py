"""
Unit tests for conflict detection.

Definition used here:
- A conflict exists if two activities share a meeting day and their
  time windows overlap on it.
- Windows are closed: touching endpoints (end == start) IS a conflict.
- Arranged courses never conflict.
"""

import unittest

from weekplan.conflicts import check_conflict, find_conflicts, has_conflict
from weekplan.errors import ErrorKind, ScheduleConflict
from weekplan.model import Course, Event

TITLE = "Software Development Fundamentals"


def course(days: str, start: int = 0, end: int = 0, name: str = "CSC 216") -> Course:
    return Course(name, TITLE, "001", 3, "sesmith5", days, start, end)


def assert_symmetric(tc: unittest.TestCase, a, b, expected: bool) -> None:
    tc.assertEqual(has_conflict(a, b), expected)
    tc.assertEqual(has_conflict(b, a), expected)


class TestConflicts(unittest.TestCase):
    def test_no_shared_day(self) -> None:
        a1 = course("MW", 1330, 1445)
        a2 = course("TH", 1330, 1445)
        check_conflict(a1, a2)
        check_conflict(a2, a1)
        assert_symmetric(self, a1, a2, False)

    def test_adjacent_windows_do_not_conflict(self) -> None:
        a3 = course("MW", 1330, 1445)
        a4 = course("MW", 1446, 1700)
        assert_symmetric(self, a3, a4, False)

    def test_shared_day_same_window(self) -> None:
        a1 = course("MW", 1330, 1445)
        a2 = course("M", 1330, 1445)
        with self.assertRaises(ScheduleConflict) as ctx:
            a1.check_conflict(a2)
        self.assertEqual(str(ctx.exception), "Schedule conflict.")
        self.assertEqual(ctx.exception.kind, ErrorKind.SCHEDULE_CONFLICT)
        with self.assertRaises(ScheduleConflict):
            a2.check_conflict(a1)

    def test_touching_endpoint_conflicts(self) -> None:
        a3 = course("THF", 1330, 1445)
        a4 = course("MTWHF", 1445, 1700)
        assert_symmetric(self, a3, a4, True)

    def test_containment_conflicts(self) -> None:
        outer = course("W", 800, 1700)
        inner = Event("Lunch", "W", 1200, 1300, "")
        assert_symmetric(self, outer, inner, True)

    def test_arranged_never_conflicts(self) -> None:
        arranged = course("A")
        other = course("MTWHF", 0, 2359)
        assert_symmetric(self, arranged, other, False)
        assert_symmetric(self, arranged, course("A"), False)

    def test_weekend_event_vs_weekday_course(self) -> None:
        assert_symmetric(self, course("MTWHF", 800, 1700), Event("Hike", "SU", 800, 1700, ""), False)

    def test_symmetry_over_many_pairs(self) -> None:
        acts = [
            course("MW", 910, 1100),
            course("TH", 1120, 1310),
            course("MWF", 935, 1025),
            course("A"),
            Event("Gym", "FS", 1000, 1030, ""),
            Event("Call", "H", 1310, 1400, ""),
        ]
        for a in acts:
            for b in acts:
                self.assertEqual(has_conflict(a, b), has_conflict(b, a))

    def test_find_conflicts_lists_all_in_order(self) -> None:
        candidate = course("MWF", 935, 1025)
        scheduled = [
            course("MW", 910, 1100, name="CSC 116"),
            course("TH", 930, 1000, name="CSC 230"),
            Event("Gym", "F", 1025, 1100, ""),
        ]
        self.assertEqual(find_conflicts(candidate, scheduled), [scheduled[0], scheduled[2]])
        self.assertEqual(find_conflicts(course("A"), scheduled), [])


if __name__ == "__main__":
    unittest.main()
