"""String, byte and UTF-8 helpers, plus an editable byte-string buffer.

Byte positions are used throughout, as the text is kept UTF-8 encoded.
"""

from __future__ import annotations

import enum
from typing import Callable, List, Tuple, Union

from .mathutil import constrain

TextLike = Union[str, bytes, bytearray]

_C_SPACE = " \t\n\v\f\r"

_SHIFTED = (
    " !\"#$%&\"()*+<_>?)!@#$%^&*(::<+>?@ABCDEFGHIJKLMNOPQRSTUVWXYZ{|}^_`"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ{|}~"
)

_ESCAPES = {
    "'": "\\'",
    '"': '\\"',
    "?": "\\?",
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


class Endianness(enum.IntEnum):
    """Byte order used when packing UTF-8 sequences into integers."""

    LITTLE = 1234
    BIG = 4321


class Key(enum.Enum):
    """Editing keys understood by :meth:`StringBuilder.handle_key`."""

    LEFT = enum.auto()
    RIGHT = enum.auto()
    BACKSPACE = enum.auto()
    DELETE = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    RETURN = enum.auto()


def _to_bytes(text: TextLike) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


def split(string: str, separator: str) -> List[str]:
    """Split on ``separator``; a trailing separator adds no empty piece."""
    if not separator:
        raise ValueError("empty separator")
    parts = string.split(separator)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def count_char(string: str, char: str) -> int:
    return string.count(char)


def common_prefix_length(a: str, b: str) -> int:
    """Index of the first differing character, or the shorter length."""
    for i, (ca, cb) in enumerate(zip(a, b)):
        if ca != cb:
            return i
    return min(len(a), len(b))


def trim(string: str) -> str:
    """Strip C whitespace from both ends; an all-blank string is kept as it is."""
    stripped = string.strip(_C_SPACE)
    return stripped if stripped else string


def strip_line_ending(string: str) -> str:
    """Drop a trailing CR+char pair, or else a trailing newline."""
    if len(string) >= 2 and string[-2] == "\r":
        return string[:-2]
    if string.endswith("\n"):
        return string[:-1]
    return string


def up_one_folder(path: str) -> str:
    """Cut the path at its last slash or backslash."""
    cut = max(path.rfind("/"), path.rfind("\\"))
    return path if cut < 0 else path[:cut]


def shifted_key(char: str) -> str:
    """Character typed with shift held on a US keyboard."""
    code = ord(char)
    if not 32 <= code < 32 + len(_SHIFTED):
        raise ValueError(f"no shifted form for {char!r}")
    return _SHIFTED[code - 32]


def i_check(char: str) -> bool:
    return "0" <= char <= "9" or "a" <= char <= "f" or char in "x-+"


def d_check(char: str) -> bool:
    return "0" <= char <= "9" or char in "-+"


def x_check(char: str) -> bool:
    return (
        "0" <= char <= "9"
        or "a" <= char <= "f"
        or "A" <= char <= "F"
        or char in "xX-+"
    )


def f_check(char: str) -> bool:
    return "0" <= char <= "9" or char in "eE.-+"


def contains_any(string: str, predicate: Callable[[str], bool]) -> bool:
    return any(predicate(c) for c in string)


def contains_only(string: str, predicate: Callable[[str], bool]) -> bool:
    return all(predicate(c) for c in string)


def bytes_in_codepoint(lead: int) -> int:
    """Length of the UTF-8 sequence announced by a lead byte."""
    return 1 + (lead >= 0xC0) + (lead >= 0xE0) + (lead >= 0xF0)


def retro_bytes_in_codepoint(data: bytes, index: int) -> int:
    """Length of the sequence containing ``data[index]``, found by walking back to its lead byte."""
    while 0x80 <= data[index] < 0xC0:
        index -= 1
        if index < 0:
            raise ValueError("no lead byte before index")
    return bytes_in_codepoint(data[index])


def binary_code_point(nbytes: int, key: int) -> int:
    """Code point of a UTF-8 sequence packed big-endian into ``key``."""
    if nbytes == 2:
        return ((key & 0x1F00) >> 2) | (key & 0x3F)
    if nbytes == 3:
        return ((key & 0xF0000) >> 4) | ((key & 0x3F00) >> 2) | (key & 0x3F)
    if nbytes == 4:
        return (
            ((key & 0x7000000) >> 6)
            | ((key & 0x3F0000) >> 4)
            | ((key & 0x3F00) >> 2)
            | (key & 0x3F)
        )
    return key


def utf8_strlen(data: TextLike) -> int:
    """Number of code points up to the first NUL."""
    raw = _to_bytes(data).split(b"\0", 1)[0]
    return sum(1 for b in raw if b & 0xC0 != 0x80)


def utf8_to_uint32(data: TextLike, endianness: Endianness) -> Tuple[int, int]:
    """Pack the first UTF-8 sequence of ``data`` into an integer.

    Returns the packed value and the number of bytes it took.
    """
    raw = _to_bytes(data)
    if not raw:
        raise ValueError("empty input")
    nbytes = bytes_in_codepoint(raw[0])
    if nbytes == 1:
        return raw[0], 1
    if len(raw) < nbytes:
        raise ValueError("truncated UTF-8 sequence")
    order = "big" if endianness == Endianness.BIG else "little"
    return int.from_bytes(raw[:nbytes], order), nbytes


def uint32_to_utf8(num: int, endianness: Endianness) -> bytes:
    """Unpack a value made by :func:`utf8_to_uint32` back into its bytes."""
    little = (num & 0xFFFFFFFF).to_bytes(4, "little")
    if endianness == Endianness.BIG:
        size = next((i + 1 for i in (3, 2, 1) if little[i] > 0), 1)
        return little[:size][::-1]
    if endianness == Endianness.LITTLE:
        return little[: bytes_in_codepoint(little[0])]
    return b""


def decode_utf16_units(data: TextLike) -> List[int]:
    """Decode one-, two- and three-byte UTF-8 sequences; longer ones are dropped."""
    raw = _to_bytes(data).split(b"\0", 1)[0]
    out: List[int] = []
    i = 0
    while i < len(raw):
        b = raw[i]
        if b & 0x80 == 0:
            out.append(b)
        elif b & 0xE0 == 0xC0:
            if i + 1 >= len(raw):
                raise ValueError("truncated UTF-8 sequence")
            out.append(((b & 0x1F) << 6) | (raw[i + 1] & 0x3F))
            i += 1
        elif b & 0xF0 == 0xE0:
            if i + 2 >= len(raw):
                raise ValueError("truncated UTF-8 sequence")
            out.append(
                (((b & 0x0F) << 12) | ((raw[i + 1] & 0x3F) << 6) | (raw[i + 2] & 0x3F))
                & 0xFFFF
            )
            i += 2
        i += 1
    return out


def char4_to_int(data: bytes) -> int:
    """Four bytes read as a big-endian integer."""
    if len(data) != 4:
        raise ValueError("need exactly four bytes")
    return int.from_bytes(data, "big")


def int_to_char4(n: int) -> bytes:
    return (n & 0xFFFFFFFF).to_bytes(4, "big")


def escape_visible(string: str) -> str:
    """The string with C escape sequences spelled out."""
    return "".join(_ESCAPES.get(c, c) for c in string)


def hard_repr(data: str, n: int) -> str:
    """The first ``n`` characters quoted, with escapes and NULs spelled out."""
    if n > len(data):
        raise ValueError("n exceeds the data length")
    body = "".join("\\0" if c == "\0" else _ESCAPES.get(c, c) for c in data[:n])
    return f'"{body}"'


class StringBuilder:
    """A growable UTF-8 byte string edited at byte positions.

    Positions below zero count from the end; positions past the end append.
    """

    def __init__(self, text: TextLike = ""):
        self._buf = bytearray(_to_bytes(text))

    def __str__(self) -> str:
        return self._buf.decode("utf-8", errors="replace")

    def __len__(self) -> int:
        return len(self._buf)

    @property
    def data(self) -> bytes:
        return bytes(self._buf)

    def set(self, text: TextLike) -> None:
        self._buf = bytearray(_to_bytes(text))

    def clear(self) -> None:
        self._buf.clear()

    def append_char(self, char: str) -> None:
        if len(char) != 1:
            raise ValueError("expected a single character")
        self._buf += _to_bytes(char)

    def append_utf8(self, code: int, endianness: Endianness) -> None:
        self._buf += uint32_to_utf8(code, endianness)

    def append(self, text: TextLike) -> None:
        self._buf += _to_bytes(text)

    def _insert_at(self, raw: bytes, pos: int) -> None:
        if pos < 0:
            pos += len(self._buf)
        if pos < 0 or pos >= len(self._buf):
            self._buf += raw
        else:
            self._buf[pos:pos] = raw

    def insert_char(self, char: str, pos: int) -> None:
        if len(char) != 1:
            raise ValueError("expected a single character")
        self._insert_at(_to_bytes(char), pos)

    def insert_utf8(self, code: int, endianness: Endianness, pos: int) -> None:
        raw = uint32_to_utf8(code, endianness)
        if raw:
            self._insert_at(raw, pos)

    def insert(self, text: TextLike, pos: int) -> None:
        self._insert_at(_to_bytes(text), pos)

    def delete(self, pos: int) -> None:
        """Remove one byte; out-of-range positions are ignored."""
        if pos < 0:
            pos += len(self._buf)
        if 0 <= pos < len(self._buf):
            del self._buf[pos]

    def delete_range(self, start: int, stop: int) -> None:
        """Remove bytes ``[start, stop)`` after clamping both ends."""
        size = len(self._buf)
        start = constrain(start, 0, size - 1)
        stop = constrain(stop, 1, size)
        if stop - start <= 1:
            self.delete(start)
            return
        del self._buf[start:stop]

    def handle_key(self, cursor: int, key: Key) -> int:
        """Apply an editing key at ``cursor`` and return the new cursor."""
        size = len(self._buf)
        if cursor < 0 or cursor > size:
            cursor = size
        if key is Key.LEFT:
            cursor = constrain(cursor - 1, 0, size)
        elif key is Key.RIGHT:
            cursor = constrain(cursor + 1, 0, size)
        elif key is Key.BACKSPACE and cursor > 0:
            self.delete(cursor - 1)
            cursor -= 1
        elif key is Key.DELETE and cursor < size:
            self.delete(cursor)
        elif key is Key.HOME:
            cursor = 0
        elif key is Key.END:
            cursor = size
        elif key is Key.RETURN:
            self.insert_char("\n", cursor)
            cursor += 1
        return cursor

    def handle_text(self, cursor: int, text: TextLike) -> int:
        """Insert typed text at ``cursor`` and return the cursor moved past it."""
        raw = _to_bytes(text)
        self.insert(raw, cursor)
        return cursor + len(raw)