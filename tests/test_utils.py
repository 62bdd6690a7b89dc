import datetime as dt
from io import StringIO

import pytz
from dateutil.tz import tzoffset, tzutc

from vcardwriter.base import fold_one_line
from vcardwriter.custom_class import ParameterDict
from vcardwriter.helper import (
    escape_param_value,
    escape_text,
    fold_line,
    format_date,
    format_date_time,
    number_to_string,
    to_list,
)

from .common import CRLF


def test_to_list():
    assert to_list("") == [""]
    assert to_list("Knudson") == ["Knudson"]
    assert to_list(("a", "b")) == ["a", "b"]
    assert to_list(None) == []


def test_escape_text():
    assert escape_text("a\\b;c,d") == "a\\\\b\\;c\\,d"
    assert escape_text("Line1\nLine2") == "Line1\\nLine2"
    assert escape_text("Line1\rLine2") == "Line1\\nLine2"
    assert escape_text("Line1\r\nLine2") == "Line1\\nLine2"
    assert escape_text("Line1\r\n\r\nLine2") == "Line1\\n\\nLine2"


def test_escape_plain_text_unchanged():
    for text in ("", "John Doe", "José García", "mailto:someone@example.com", "こんにちは"):
        assert escape_text(text) == text
        assert escape_param_value(text.replace(":", "")) == text.replace(":", "")


def test_escape_text_twice_doubles_backslashes():
    once = escape_text("a\\b;c")
    assert once == "a\\\\b\\;c"
    assert escape_text(once) == "a\\\\\\\\b\\\\\\;c"


def test_escape_param_value():
    assert escape_param_value("simple-token_123") == "simple-token_123"
    assert escape_param_value("a;b") == '"a;b"'
    assert escape_param_value("a:b") == '"a:b"'
    assert escape_param_value("a,b") == '"a,b"'
    assert escape_param_value("Line1\r\nLine2") == "Line1 Line2"
    assert escape_param_value("Line1\rLine2\nLine3") == "Line1 Line2 Line3"
    assert escape_param_value('a"b') == "\"a'b\""


def test_fold_short_lines_unchanged():
    for line in ("", "a", "a" * 75):
        assert fold_line(line) == line


def test_fold_line():
    assert fold_line("A" * 76) == "A" * 75 + "\r\n A"
    assert fold_line("B" * 150) == "B" * 75 + "\r\n " + "B" * 74 + "\r\n B"
    assert fold_line("C" * 149) == "C" * 75 + "\r\n " + "C" * 74


def test_fold_line_is_reversible():
    alphabet = "abcdefghij KLMNOP;,\\é漢"
    for length in range(0, 400, 7):
        line = "".join(alphabet[i % len(alphabet)] for i in range(length))
        folded = fold_line(line)
        assert folded.replace(CRLF + " ", "") == line
        for segment in folded.split(CRLF):
            assert len(segment) <= 75


def test_fold_one_line():
    buf = StringIO()
    fold_one_line(buf, "NOTE:" + "x" * 80)
    assert buf.getvalue() == "NOTE:" + "x" * 70 + "\r\n " + "x" * 10


def test_format_date():
    tc = {dt.date(1990, 5, 15): "1990-05-15", dt.date(2007, 12, 1): "2007-12-01", dt.date(812, 1, 2): "0812-01-02"}
    for _date, out in tc.items():
        assert format_date(_date) == out


def test_format_date_keeps_calendar_fields():
    late_evening = dt.datetime(2020, 1, 1, 1, 0, tzinfo=tzoffset(None, 14 * 3600))
    assert format_date(late_evening) == "2020-01-01"


def test_format_date_time():
    tc = {
        dt.datetime(1995, 10, 31, 22, 27, 10, tzinfo=tzutc()): "1995-10-31T22:27:10Z",
        dt.datetime(2024, 1, 15, 12, 0, tzinfo=tzoffset(None, 2 * 3600)): "2024-01-15T10:00:00Z",
        pytz.timezone("America/New_York").localize(dt.datetime(2024, 1, 15, 21, 30)): "2024-01-16T02:30:00Z",
        dt.datetime(2000, 1, 1, 9, 5, 3): "2000-01-01T09:05:03Z",
        dt.date(2010, 6, 30): "2010-06-30T00:00:00Z",
    }
    for inp, out in tc.items():
        assert format_date_time(inp) == out


def test_number_to_string():
    assert number_to_string(37.386013) == "37.386013"
    assert number_to_string(-122.082932) == "-122.082932"
    assert number_to_string(37.0) == "37"
    assert number_to_string(-0.5) == "-0.5"
    assert number_to_string(12) == "12"


def test_number_to_string_extremes():
    assert number_to_string(1e21) == "1e+21"
    assert number_to_string(-2.5e22) == "-2.5e+22"
    assert number_to_string(1e20) == "100000000000000000000"
    assert number_to_string(1e-7) == "1e-7"
    assert number_to_string(1.5e-7) == "1.5e-7"
    assert number_to_string(1e-5) == "0.00001"
    assert number_to_string(-1.5e-6) == "-0.0000015"
    assert number_to_string(0.0001) == "0.0001"
    assert number_to_string(-0.0) == "0"
    assert number_to_string(float("inf")) == "Infinity"
    assert number_to_string(float("nan")) == "NaN"


def test_parameter_dict():
    params = ParameterDict()
    params["charset"] = "UTF-8"
    params.update({"type": "twitter", "Charset": "ISO-8859-1"})
    assert list(params.items()) == [("CHARSET", "ISO-8859-1"), ("TYPE", "twitter")]
    assert "charset" in params
    assert params["Type"] == "twitter"
    assert params.get("missing") is None

    del params["charset"]
    assert list(params) == ["TYPE"]
