"""Character-level scanning over seekable text streams."""

from __future__ import annotations

from typing import Callable, List, Optional, TextIO

_C_SPACE = " \t\n\v\f\r"


def read_char(stream: TextIO) -> str:
    """Next character, skipping carriage returns; empty string at end of stream."""
    while True:
        c = stream.read(1)
        if c != "\r":
            return c


def count_lines(stream: TextIO) -> int:
    """Number of lines (newlines plus one); the stream is rewound before and after."""
    stream.seek(0)
    lines = 1 + stream.read().count("\n")
    stream.seek(0)
    return lines


def seek_lines(stream: TextIO, n: int) -> bool:
    """Move past ``n`` newlines; False if the stream ends first."""
    c = stream.read(1)
    while c:
        if c == "\n":
            n -= 1
            if n <= 0:
                return True
        c = stream.read(1)
    return False


def seek_string(stream: TextIO, target: str) -> bool:
    """Move just past the next occurrence of ``target``; False if none is found."""
    if not target:
        raise ValueError("empty target")
    i = 0
    c = read_char(stream)
    while c:
        if c == target[i]:
            i += 1
            if i == len(target):
                return True
        else:
            i = 0
        c = read_char(stream)
    return False


def seek_string_before(stream: TextIO, target: str, terminator: str) -> bool:
    """Move past ``target`` if it occurs before ``terminator``.

    When the terminator comes first, or neither is found, the stream is put
    back where it was and False is returned.
    """
    if not target or not terminator:
        raise ValueError("empty target or terminator")
    original = stream.tell()
    s = t = 0
    c = read_char(stream)
    while c:
        if c == terminator[t]:
            t += 1
            if t == len(terminator):
                stream.seek(original)
                return False
        else:
            t = 0
        if c == target[s]:
            s += 1
            if s == len(target):
                return True
        else:
            s = 0
        c = read_char(stream)
    stream.seek(original)
    return False


def seek_category(stream: TextIO, predicate: Callable[[str], bool]) -> bool:
    """Advance to the next character satisfying ``predicate``, leaving it unread."""
    while True:
        pos = stream.tell()
        c = stream.read(1)
        if not c:
            return False
        if predicate(c):
            stream.seek(pos)
            return True


def skip_spaces(stream: TextIO) -> None:
    """Skip plain spaces, leaving the next other character unread."""
    while True:
        pos = stream.tell()
        c = stream.read(1)
        if c != " ":
            stream.seek(pos)
            return


def _matches_rest(stream: TextIO, rest: str) -> bool:
    return all(stream.read(1) == expected for expected in rest)


def _full(out: List[str], size: Optional[int]) -> bool:
    return size is not None and len(out) >= size - 1


def scan_until(stream: TextIO, terminator: str, size: Optional[int] = None) -> str:
    """Read up to ``terminator`` (consumed, not returned), end of stream, or ``size - 1`` characters."""
    if not terminator:
        raise ValueError("empty terminator")
    out: List[str] = []
    c = stream.read(1)
    while c:
        if c == terminator[0]:
            pos = stream.tell()
            if _matches_rest(stream, terminator[1:]):
                break
            stream.seek(pos)
        out.append(c)
        if _full(out, size):
            break
        c = stream.read(1)
    return "".join(out)


def scan_until_any(stream: TextIO, terminators: str, size: Optional[int] = None) -> str:
    """Read up to any character of ``terminators`` (consumed), end of stream, or ``size - 1`` characters."""
    out: List[str] = []
    c = stream.read(1)
    while c:
        if c in terminators:
            break
        out.append(c)
        if _full(out, size):
            break
        c = stream.read(1)
    return "".join(out)


def count_char_until(stream: TextIO, char: str, terminator: str) -> int:
    """Count ``char`` up to ``terminator`` (consumed) or the end of the stream."""
    if not terminator:
        raise ValueError("empty terminator")
    count = 0
    c = stream.read(1)
    while c:
        if c == terminator[0]:
            pos = stream.tell()
            if _matches_rest(stream, terminator[1:]):
                break
            stream.seek(pos)
        if c == char:
            count += 1
        c = stream.read(1)
    return count


def scan_separated_list(stream: TextIO, separator: str = ",") -> List[str]:
    """Split the rest of the current line on ``separator``.

    The line ending is consumed. Every item but the first loses its leading
    whitespace.
    """
    chars: List[str] = []
    c = stream.read(1)
    while c and c not in "\n\r":
        chars.append(c)
        c = stream.read(1)
    first, *rest = "".join(chars).split(separator)
    return [first] + [item.lstrip(_C_SPACE) for item in rest]


def read_line_trimmed(stream: TextIO, size: Optional[int] = None) -> str:
    """Skip leading whitespace (blank lines included) and read the rest of the line.

    The line ending is consumed; at most ``size - 1`` characters are returned.
    """
    out: List[str] = []
    skipping = True
    c = stream.read(1)
    while c:
        if skipping:
            if c in _C_SPACE:
                c = stream.read(1)
                continue
            skipping = False
        if c in "\n\r":
            break
        out.append(c)
        if _full(out, size):
            break
        c = stream.read(1)
    return "".join(out)


def load_file_as_str(filename) -> str:
    """Whole file as UTF-8 text with every carriage return removed."""
    with open(filename, "rb") as handle:
        raw = handle.read()
    return raw.replace(b"\r", b"").decode("utf-8", errors="replace")