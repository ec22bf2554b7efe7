import unittest
from datetime import date, datetime
from cafecost.utilities.dates import parse_date, month_diff, month_diff_or_zero, in_window
from cafecost.utilities.numbers import safe_parse, safe_div, format_krw


class TestDates(unittest.TestCase):

    def test_parse_date(self):
        self.assertEqual(parse_date("2024-05-01"), date(2024, 5, 1))
        self.assertEqual(parse_date("2024-05-01T10:00:00"), date(2024, 5, 1))
        self.assertEqual(parse_date(datetime(2024, 5, 1, 9, 30)), date(2024, 5, 1))
        self.assertIsNone(parse_date("not a date"))
        self.assertIsNone(parse_date(""))
        self.assertIsNone(parse_date(None))

    def test_month_diff_counts_last_month_on_same_day(self):
        self.assertEqual(month_diff(date(2024, 1, 15), date(2024, 3, 15)), 3)
        self.assertEqual(month_diff(date(2024, 1, 15), date(2024, 3, 14)), 2)
        self.assertEqual(month_diff(date(2024, 1, 1), date(2025, 12, 31)), 24)

    def test_month_diff_reversed_is_zero(self):
        self.assertEqual(month_diff(date(2024, 3, 1), date(2024, 1, 1)), 0)

    def test_month_diff_or_zero_missing(self):
        self.assertEqual(month_diff_or_zero(None, "2024-01-01"), 0)
        self.assertEqual(month_diff_or_zero("2024-01-01", "garbage"), 0)

    def test_in_window(self):
        today = date(2025, 6, 1)
        self.assertTrue(in_window(today, "2025-01-01", "2025-12-31"))
        self.assertTrue(in_window(today, "2025-06-01", "2025-06-01"))
        self.assertFalse(in_window(today, "2025-07-01", "2025-12-31"))
        self.assertFalse(in_window(today, None, "2025-12-31"))


class TestNumbers(unittest.TestCase):

    def test_safe_parse(self):
        self.assertEqual(safe_parse("12.5"), 12.5)
        self.assertEqual(safe_parse(" 7 "), 7.0)
        self.assertEqual(safe_parse("abc"), 0.0)
        self.assertEqual(safe_parse(None), 0.0)
        self.assertEqual(safe_parse(float("nan")), 0.0)
        self.assertEqual(safe_parse(float("inf")), 0.0)

    def test_safe_parse_int_too_large_for_float(self):
        self.assertEqual(safe_parse(10 ** 400), 0.0)
        self.assertEqual(safe_parse(-(10 ** 400)), 0.0)
        self.assertEqual(safe_parse(str(10 ** 400)), 0.0)

    def test_safe_div(self):
        self.assertEqual(safe_div(10, 4), 2.5)
        self.assertEqual(safe_div(10, 0), 0.0)
        self.assertEqual(safe_div(10, -2), 0.0)

    def test_format_krw(self):
        self.assertEqual(format_krw(2116666.67), "2,116,667")
        self.assertEqual(format_krw("oops"), "0")


if __name__ == "__main__":
    unittest.main()
