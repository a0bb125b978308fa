import io

import pytest

from ceoclash.scanning import (
    count_char_until,
    count_lines,
    load_file_as_str,
    read_char,
    read_line_trimmed,
    scan_separated_list,
    scan_until,
    scan_until_any,
    seek_category,
    seek_lines,
    seek_string,
    seek_string_before,
    skip_spaces,
)


def test_read_char_skips_carriage_returns():
    s = io.StringIO("\r\na")
    assert read_char(s) == "\n"
    assert read_char(s) == "a"
    assert read_char(s) == ""


def test_count_lines_rewinds():
    s = io.StringIO("a\nb\nc")
    s.read(2)
    assert count_lines(s) == 3
    assert s.tell() == 0


def test_seek_lines():
    s = io.StringIO("one\ntwo\nthree")
    assert seek_lines(s, 2) is True
    assert s.read() == "three"
    assert seek_lines(io.StringIO("one\ntwo"), 5) is False


def test_seek_string():
    s = io.StringIO("hello world")
    assert seek_string(s, "wor") is True
    assert s.read() == "ld"
    assert seek_string(io.StringIO("hello"), "xyz") is False


def test_seek_string_empty_target():
    with pytest.raises(ValueError):
        seek_string(io.StringIO("abc"), "")


def test_seek_string_before_terminator_restores_position():
    s = io.StringIO("abc;def")
    assert seek_string_before(s, "def", ";") is False
    assert s.tell() == 0


def test_seek_string_before_finds_target():
    s = io.StringIO("abc;def")
    assert seek_string_before(s, "b", ";") is True
    assert s.read() == "c;def"


def test_seek_string_before_missing_restores():
    s = io.StringIO("abcdef")
    s.read(1)
    assert seek_string_before(s, "zz", ";") is False
    assert s.read() == "bcdef"


def test_seek_category():
    s = io.StringIO("  x1y")
    assert seek_category(s, str.isdigit) is True
    assert s.read() == "1y"
    assert seek_category(io.StringIO("abc"), str.isdigit) is False


def test_skip_spaces_only_spaces():
    s = io.StringIO("   abc")
    skip_spaces(s)
    assert s.read() == "abc"
    t = io.StringIO("\tabc")
    skip_spaces(t)
    assert t.read() == "\tabc"


def test_scan_until_consumes_terminator():
    s = io.StringIO("key=>value")
    assert scan_until(s, "=>") == "key"
    assert s.read() == "value"


def test_scan_until_partial_terminator_kept():
    s = io.StringIO("a=b=>c")
    assert scan_until(s, "=>") == "a=b"
    assert s.read() == "c"


def test_scan_until_size_limit_and_eof():
    s = io.StringIO("abcdef")
    assert scan_until(s, ";", 4) == "abc"
    assert s.read() == "def"
    assert scan_until(io.StringIO("abc"), ";") == "abc"


def test_scan_until_any():
    s = io.StringIO("abc,def")
    assert scan_until_any(s, ",;") == "abc"
    assert s.read() == "def"
    assert scan_until_any(io.StringIO("abcdef"), ";", 3) == "ab"


def test_count_char_until():
    s = io.StringIO("a,b,c;d,e")
    assert count_char_until(s, ",", ";") == 2
    assert s.read() == "d,e"


def test_scan_separated_list():
    s = io.StringIO("a, b,  c\nnext")
    assert scan_separated_list(s, ",") == ["a", "b", "c"]
    assert s.read() == "next"


def test_scan_separated_list_keeps_first_leading_space():
    s = io.StringIO(" a;b")
    assert scan_separated_list(s, ";") == [" a", "b"]


def test_read_line_trimmed():
    s = io.StringIO("\n\n  hello world\nnext")
    assert read_line_trimmed(s) == "hello world"
    assert s.read() == "next"


def test_read_line_trimmed_size():
    assert read_line_trimmed(io.StringIO("  abcdef"), 4) == "abc"


def test_load_file_as_str(tmp_path):
    path = tmp_path / "data.txt"
    path.write_bytes(b"a\r\nb\r\n")
    assert load_file_as_str(path) == "a\nb\n"


def test_load_file_missing(tmp_path):
    with pytest.raises(OSError):
        load_file_as_str(tmp_path / "missing.txt")