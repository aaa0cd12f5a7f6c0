"""
Tests for CLI entry points.

Every test works on a temporary schedule.json via --file
(to avoid touching real user data during tests).
"""

import io
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

from careschedule.cli import main
from careschedule.storage import load_schedule
from careschedule.weather import Weather


def _run(argv: list) -> tuple:
    # main() always ends with SystemExit(code)
    buf = io.StringIO()
    code = None
    with redirect_stdout(buf):
        try:
            main(argv)
        except SystemExit as exc:
            code = exc.code
    return code, buf.getvalue()


class TestCLI(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = str(Path(self._tmp.name) / "schedule.json")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_add_and_conflicts(self) -> None:
        code, _ = _run(["--file", self.path, "add-activity", "a1", "Morning Walk", "10:00 AM", "--date", "Oct5"])
        self.assertEqual(code, 0)
        code, _ = _run(["--file", self.path, "add-appointment", "p1", "Dr. Chen", "10:15am - 11:00am", "--date", "Oct5"])
        self.assertEqual(code, 0)

        code, out = _run(["--file", self.path, "conflicts"])
        self.assertEqual(code, 0)
        self.assertIn("Conflicts found: 1", out)
        self.assertIn("activity-appointment", out)

        code, out = _run(["--file", self.path, "list"])
        self.assertEqual(code, 0)
        self.assertIn("[!] a1", out)
        self.assertIn("[!] p1", out)

    def test_no_conflicts(self) -> None:
        _run(["--file", self.path, "add-activity", "a1", "Walk", "10:00 AM"])
        _run(["--file", self.path, "add-activity", "a2", "Lunch", "10:30 AM"])
        code, out = _run(["--file", self.path, "conflicts"])
        self.assertEqual(code, 0)
        self.assertIn("No conflicts found.", out)

    def test_duplicate_id_is_rejected(self) -> None:
        _run(["--file", self.path, "add-activity", "a1", "Walk", "10:00 AM"])
        code, _ = _run(["--file", self.path, "add-appointment", "a1", "Dr. Chen", "9:00", "--date", "5 Oct"])
        self.assertNotEqual(code, 0)

    def test_empty_id_is_rejected(self) -> None:
        code, _ = _run(["--file", self.path, "add-activity", " ", "Walk", "10:00 AM"])
        self.assertNotEqual(code, 0)

    def test_remove(self) -> None:
        _run(["--file", self.path, "add-activity", "a1", "Walk", "10:00 AM", "--duration", "45"])
        code, _ = _run(["--file", self.path, "remove", "a1"])
        self.assertEqual(code, 0)
        self.assertEqual(load_schedule(self.path), ([], []))

        code, _ = _run(["--file", self.path, "remove", "a1"])
        self.assertNotEqual(code, 0)

    def test_unreadable_file_is_not_overwritten(self) -> None:
        # truncated JSON: writing commands must refuse instead of saving empty lists
        broken = '{"activities": [{"id": "old", "time": "9:00"}], '
        Path(self.path).write_text(broken, encoding="utf-8")
        before = Path(self.path).read_bytes()

        code, out = _run(["--file", self.path, "add-activity", "a1", "Walk", "10:00"])
        self.assertEqual(code, 1)
        self.assertIn("Could not read", out)
        self.assertEqual(Path(self.path).read_bytes(), before)

        code, _ = _run(["--file", self.path, "add-appointment", "p1", "Dr. Chen", "9:00", "--date", "5 Oct"])
        self.assertEqual(code, 1)
        code, _ = _run(["--file", self.path, "remove", "old"])
        self.assertEqual(code, 1)
        self.assertEqual(Path(self.path).read_bytes(), before)

    def test_weather(self) -> None:
        reading = Weather(temperature=21, condition="Partly cloudy", icon="cloud-sun")
        with mock.patch("careschedule.cli.fetch_weather", return_value=reading) as fetch:
            code, out = _run(["weather", "47.05", "8.31"])
        self.assertEqual(code, 0)
        self.assertIn("Partly cloudy", out)
        fetch.assert_called_once_with(47.05, 8.31)


if __name__ == "__main__":
    unittest.main()
