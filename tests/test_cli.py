"""
Tests for CLI entry points.

Every test points --catalog and --state at a temporary directory so the
package's own data files are never touched.
"""

import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

from weekplan.cli import main

CATALOG = """\
CSC 116,Intro to Programming - Java,001,3,jdyoung2,MW,910,1100
CSC 216,Software Development Fundamentals,001,3,sesmith5,TH,1330,1445
CSC 216,Software Development Fundamentals,601,3,jctetter,A
CSC 226,Discrete Mathematics for Computer Scientists,001,3,tmbarnes,MWF,935,1025
"""


class TestCLI(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.dir = Path(self._tmp.name)
        self.catalog = self.dir / "courses.txt"
        self.catalog.write_text(CATALOG, encoding="utf-8")
        self.state = self.dir / "schedule.json"

    def run_cli(self, *argv: str) -> tuple[int, str]:
        out = io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["--catalog", str(self.catalog), "--state", str(self.state), *argv])
        return ctx.exception.code, out.getvalue()

    def saved(self) -> dict:
        return json.loads(self.state.read_text(encoding="utf-8"))

    def test_missing_catalog(self) -> None:
        self.catalog.unlink()
        code, out = self.run_cli("catalog")
        self.assertEqual(code, 1)
        self.assertIn("Cannot find file.", out)

    def test_add_and_remove_roundtrip(self) -> None:
        code, out = self.run_cli("add", "CSC 216", "001")
        self.assertEqual(code, 0)
        self.assertIn("Added: CSC 216 001", out)
        self.assertEqual(self.saved()["activities"], [{"kind": "course", "name": "CSC 216", "section": "001"}])

        code, _ = self.run_cli("remove", "1")
        self.assertEqual(code, 0)
        self.assertEqual(self.saved()["activities"], [])

    def test_add_unknown_course(self) -> None:
        code, out = self.run_cli("add", "CSC 999", "001")
        self.assertEqual(code, 1)
        self.assertIn("Not found in catalog", out)
        self.assertFalse(self.state.exists())

    def test_duplicate_and_conflict_are_reported(self) -> None:
        self.run_cli("add", "CSC 216", "001")
        code, out = self.run_cli("add", "CSC 216", "601")
        self.assertEqual(code, 1)
        self.assertIn("You are already enrolled in CSC 216", out)

        self.run_cli("add", "CSC 116", "001")
        code, out = self.run_cli("add", "CSC 226", "001")
        self.assertEqual(code, 1)
        self.assertIn("The course cannot be added due to a conflict.", out)
        self.assertEqual(len(self.saved()["activities"]), 2)

    def test_add_event(self) -> None:
        code, _ = self.run_cli("add-event", "Gym", "su", "08:00", "0930", "leg day")
        self.assertEqual(code, 0)
        event = self.saved()["activities"][0]
        self.assertEqual(event["meeting_days"], "SU")
        self.assertEqual((event["start_time"], event["end_time"]), (800, 930))

        code, out = self.run_cli("add-event", "Nap", "M", "1400", "1300")
        self.assertEqual(code, 1)
        self.assertIn("Invalid meeting days and times.", out)

    def test_add_event_time_must_be_number(self) -> None:
        code, _ = self.run_cli("add-event", "Gym", "M", "noon", "1300")
        self.assertEqual(code, 2)

    def test_remove_out_of_range(self) -> None:
        code, out = self.run_cli("remove", "3")
        self.assertEqual(code, 1)
        self.assertIn("Nothing to remove", out)

    def test_title_reset_and_show(self) -> None:
        self.run_cli("add", "CSC 216", "601")
        self.assertEqual(self.run_cli("title", "Spring")[0], 0)
        self.assertEqual(self.run_cli("show", "--full")[0], 0)
        self.assertEqual(self.run_cli("reset")[0], 0)
        data = self.saved()
        self.assertEqual(data["title"], "Spring")
        self.assertEqual(data["activities"], [])

    def test_check(self) -> None:
        self.run_cli("add", "CSC 116", "001")
        code, out = self.run_cli("check", "CSC 226", "001")
        self.assertEqual(code, 1)
        self.assertIn("conflicts with: Intro to Programming - Java", out)
        code, _ = self.run_cli("check", "CSC 216", "001")
        self.assertEqual(code, 0)

    def test_export(self) -> None:
        self.run_cli("add", "CSC 216", "001")
        self.run_cli("add-event", "Gym", "SU", "800", "930")
        out_file = self.dir / "export" / "schedule.txt"
        code, _ = self.run_cli("export", str(out_file))
        self.assertEqual(code, 0)
        self.assertEqual(
            out_file.read_text(encoding="utf-8").splitlines(),
            [
                "CSC 216,Software Development Fundamentals,001,3,sesmith5,TH,1330,1445",
                "Gym,SU,800,930,",
            ],
        )

    def test_export_failure(self) -> None:
        self.run_cli("add", "CSC 216", "001")
        code, out = self.run_cli("export", str(self.dir))
        self.assertEqual(code, 1)
        self.assertIn("The file cannot be saved.", out)

    def test_course_names_are_not_case_folded(self) -> None:
        with self.catalog.open("a", encoding="utf-8") as fh:
            fh.write("ma 141,Calculus I,001,4,abc,MW,800,900\n")

        code, out = self.run_cli("add", "ma 141", "001")
        self.assertEqual(code, 0)
        self.assertIn("Added: ma 141 001", out)
        self.assertEqual(self.saved()["activities"], [{"kind": "course", "name": "ma 141", "section": "001"}])

        code, out = self.run_cli("check", "csc 216", "001")
        self.assertEqual(code, 1)
        self.assertIn("Not found in catalog", out)

    def test_check_same_section_reported_once(self) -> None:
        self.run_cli("add", "CSC 216", "001")
        code, out = self.run_cli("check", "CSC 216", "001")
        self.assertEqual(code, 1)
        self.assertIn("already enrolled: CSC 216 001", out)
        self.assertNotIn("conflicts with", out)

    def test_unwritable_state_file(self) -> None:
        # the state path is a directory: loading ignores it, saving fails
        self.state = self.dir
        code, out = self.run_cli("add", "CSC 216", "001")
        self.assertEqual(code, 1)
        self.assertIn("Could not save schedule", out)


if __name__ == "__main__":
    unittest.main()
