import re
import unittest
from datetime import datetime, timedelta, timezone

from src.logger_utc.formatter import compose_line, format_date, format_timestamp, make_line

TIMESTAMP_RE = re.compile(r"\[\d{4}-\d{2}-\d{2}\] - \[\d{2}:\d{2}-\d{2}\]")


class TestFormatter(unittest.TestCase):
    def test_timestamp_shape_for_current_time(self) -> None:
        self.assertRegex(format_timestamp(), r"^" + TIMESTAMP_RE.pattern + r"$")

    def test_timestamp_zero_padded(self) -> None:
        now = datetime(2024, 1, 5, 3, 4, 9, tzinfo=timezone.utc)
        self.assertEqual(format_timestamp(now), "[2024-01-05] - [03:04-09]")

    def test_timestamp_converts_to_utc(self) -> None:
        plus_two = timezone(timedelta(hours=2))
        now = datetime(2024, 1, 5, 1, 30, 0, tzinfo=plus_two)
        self.assertEqual(format_timestamp(now), "[2024-01-04] - [23:30-00]")
        self.assertEqual(format_date(now), "2024-01-04")

    def test_naive_datetime_taken_as_utc(self) -> None:
        now = datetime(2024, 12, 31, 23, 59, 59)
        self.assertEqual(format_timestamp(now), "[2024-12-31] - [23:59-59]")

    def test_compose_line_passes_message_verbatim(self) -> None:
        prefix = "[2024-01-05] - [03:04-09]"
        for message in ["", "MSG", "first\nsecond\n", "grüße ✓ 日本"]:
            self.assertEqual(compose_line(prefix, message), prefix + " - " + message)

    def test_make_line_has_no_trailing_newline(self) -> None:
        now = datetime(2024, 1, 5, 12, 0, 0, tzinfo=timezone.utc)
        line = make_line("MSG", now)
        self.assertEqual(line, "[2024-01-05] - [12:00-00] - MSG")
        self.assertFalse(line.endswith("\n"))


if __name__ == "__main__":
    unittest.main()
