"""
Tests for caret diagnostics (lexutil/modules/diagnostics.py)
"""

import json
import logging
import unittest
from unittest.mock import patch
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from lexutil.modules.char_sequence import chars_with_eot
from lexutil.modules.diagnostics import (
    SourceLocation,
    format_pointer,
    get_line_number,
    line_bounds,
    locate,
    log_err,
    log_ok,
)
from lexutil.utils.config import DiagnosticsConfig
from lexutil.utils.structured_logging import JSONFormatter

PLAIN = DiagnosticsConfig(show_line_numbers=False)


class TestLineBounds(unittest.TestCase):

    def test_bounds_exclude_break_and_marker(self):
        seq = chars_with_eot("abc\ndef")
        self.assertEqual(line_bounds(seq, 1), (0, 3))
        self.assertEqual(line_bounds(seq, 5), (4, 7))

    def test_index_on_line_break(self):
        seq = chars_with_eot("abc\ndef")
        self.assertEqual(line_bounds(seq, 3), (0, 3))

    def test_empty_line(self):
        seq = chars_with_eot("a\n\nb")
        self.assertEqual(line_bounds(seq, 2), (2, 2))

    def test_out_of_range(self):
        with self.assertRaises(IndexError):
            line_bounds(chars_with_eot("abc"), 4)


class TestLineNumbers(unittest.TestCase):

    def test_mixed_line_endings(self):
        seq = chars_with_eot("a\r\nb\rc\nd")
        self.assertEqual(get_line_number(seq, 0), 1)
        self.assertEqual(get_line_number(seq, 3), 2)
        self.assertEqual(get_line_number(seq, 5), 3)
        self.assertEqual(get_line_number(seq, 7), 4)

    def test_locate(self):
        seq = chars_with_eot("one\ntwo\nthree")
        location = locate(seq, 10)
        self.assertEqual(location, SourceLocation(line=3, column=3))
        self.assertEqual(str(location), "3:3")

    def test_out_of_range(self):
        with self.assertRaises(IndexError):
            get_line_number(chars_with_eot("abc"), -1)

    def test_crlf_line_feed_stays_on_its_line(self):
        """The LF of a CRLF pair sits one column past the CR, on the same line"""
        seq = chars_with_eot("ab\r\ncd")
        self.assertEqual(locate(seq, 2), SourceLocation(1, 3))
        self.assertEqual(locate(seq, 3), SourceLocation(1, 4))
        self.assertEqual(locate(seq, 4), SourceLocation(2, 1))
        self.assertNotEqual(locate(seq, 3), locate(seq, 0))

    def test_crlf_line_feed_bounds(self):
        seq = chars_with_eot("ab\r\ncd")
        self.assertEqual(line_bounds(seq, 3), (0, 2))
        self.assertEqual(line_bounds(seq, 4), (4, 6))

    def test_leading_crlf(self):
        seq = chars_with_eot("\r\nx")
        self.assertEqual(locate(seq, 1), SourceLocation(1, 2))
        self.assertEqual(locate(seq, 2), SourceLocation(2, 1))


class TestFormatPointer(unittest.TestCase):

    def test_pointer_under_character(self):
        seq = chars_with_eot("abc\ndef")
        self.assertEqual(format_pointer(seq, 5, config=PLAIN), "def\n ^")

    def test_with_message_and_gutter(self):
        seq = chars_with_eot("abc\ndef")
        self.assertEqual(
            format_pointer(seq, 5, "unexpected 'e'"),
            "unexpected 'e'\n2: def\n    ^"
        )

    def test_pointer_aligns_after_control_characters(self):
        """Tabs and non-ASCII are munged, so the caret still lines up"""
        seq = chars_with_eot("\tcafé = x!")
        index = 9  # the '!'
        source_line, pointer_line = format_pointer(seq, index).split("\n")
        self.assertEqual(source_line, "1: .caf. = x!")
        self.assertEqual(source_line[pointer_line.index("^")], "!")

    def test_pointer_at_end_of_input(self):
        seq = chars_with_eot("ab")
        self.assertEqual(format_pointer(seq, 2, config=PLAIN), "ab\n  ^")

    def test_pointer_at_line_break(self):
        seq = chars_with_eot("abc\ndef")
        self.assertEqual(format_pointer(seq, 3, config=PLAIN), "abc\n   ^")

    def test_custom_pointer(self):
        seq = chars_with_eot("xyz")
        config = DiagnosticsConfig(pointer_char="|", show_line_numbers=False)
        self.assertEqual(format_pointer(seq, 0, config=config), "xyz\n|")

    def test_pointer_at_crlf_line_feed(self):
        seq = chars_with_eot("ab\r\ncd")
        self.assertEqual(format_pointer(seq, 3), "1: ab\n      ^")

    def test_pointer_changed_after_construction_rejected(self):
        config = DiagnosticsConfig()
        config.pointer_char = "^^"
        with self.assertRaises(ValueError):
            format_pointer(chars_with_eot("abc"), 0, config=config)

    def test_other_lines_not_included(self):
        seq = chars_with_eot("first\nsecond\nthird")
        text = format_pointer(seq, 8, config=PLAIN)
        self.assertEqual(text, "second\n  ^")

    def test_out_of_range(self):
        with self.assertRaises(IndexError):
            format_pointer(chars_with_eot("abc"), 10)


class TestLogging(unittest.TestCase):

    def setUp(self):
        self.logger = logging.getLogger("lexutil.tests.diagnostics")
        self.seq = chars_with_eot("abc\ndef")

    def test_log_err(self):
        with self.assertLogs(self.logger, level="ERROR") as cm:
            location = log_err(self.logger, self.seq, 5, "unexpected 'e'")

        self.assertEqual(location, SourceLocation(2, 2))
        record = cm.records[0]
        self.assertEqual(record.levelno, logging.ERROR)
        self.assertEqual(record.getMessage(), "2:2: unexpected 'e'\n2: def\n    ^")
        self.assertEqual(record.extra_fields, {
            "source_line": 2,
            "column": 2,
            "index": 5,
            "snippet": "def",
        })

    def test_log_ok_is_debug(self):
        with self.assertLogs(self.logger, level="DEBUG") as cm:
            log_ok(self.logger, self.seq, 0, "matched identifier")

        self.assertEqual(cm.records[0].levelno, logging.DEBUG)
        self.assertIn("1:1: matched identifier", cm.records[0].getMessage())

    def test_disabled_level_skips_formatting(self):
        self.logger.setLevel(logging.INFO)
        try:
            with patch.object(self.logger, "log") as mock_log:
                location = log_ok(self.logger, self.seq, 4, "matched")
        finally:
            self.logger.setLevel(logging.NOTSET)

        mock_log.assert_not_called()
        self.assertEqual(location, SourceLocation(2, 1))

    def test_json_output_carries_location(self):
        with self.assertLogs(self.logger, level="ERROR") as cm:
            log_err(self.logger, chars_with_eot("x\n\ty = 1"), 3, "bad name")

        data = json.loads(JSONFormatter().format(cm.records[0]))
        self.assertEqual(data["source_line"], 2)
        self.assertEqual(data["column"], 2)
        self.assertEqual(data["snippet"], ".y = 1")


if __name__ == '__main__':
    unittest.main()
