"""Reader for Java-style ``.properties`` text."""

from __future__ import annotations

import re
from typing import BinaryIO, Iterator

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_SEPARATORS = "=:"
_WHITESPACE = " \t\f"
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def load_properties(stream: BinaryIO, *, encoding: str = "utf-8") -> dict[str, str]:
    """Read a binary ``stream`` of properties text into a dictionary."""

    return parse_properties(stream.read().decode(encoding))


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties ``text`` into a dictionary; later keys win."""

    result: dict[str, str] = {}
    for logical in _logical_lines(text):
        key, value = _split_entry(logical)
        result[_unescape(key)] = _unescape(value)
    return result


def _logical_lines(text: str) -> Iterator[str]:
    """Join continuation lines and drop blanks and comments."""

    pending: list[str] = []
    for raw in _LINE_BREAK.split(text):
        line = raw.lstrip(_WHITESPACE)
        if not pending and (not line or line[0] in "#!"):
            continue
        if _ends_with_continuation(line):
            pending.append(line[:-1])
            continue
        pending.append(line)
        yield "".join(pending)
        pending = []
    if pending:
        yield "".join(pending)


def _ends_with_continuation(line: str) -> bool:
    backslashes = len(line) - len(line.rstrip("\\"))
    return backslashes % 2 == 1


def _split_entry(line: str) -> tuple[str, str]:
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1

    key = line[:index]
    rest = line[index:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def _unescape(value: str) -> str:
    if "\\" not in value:
        return value

    chars: list[str] = []
    index = 0
    length = len(value)
    while index < length:
        char = value[index]
        if char != "\\" or index + 1 >= length:
            chars.append(char)
            index += 1
            continue
        marker = value[index + 1]
        if marker == "u":
            digits = value[index + 2 : index + 6]
            if len(digits) != 4:
                raise ValueError(f"Malformed \\uXXXX escape in {value!r}")
            chars.append(chr(int(digits, 16)))
            index += 6
            continue
        chars.append(_ESCAPES.get(marker, marker))
        index += 2
    return "".join(chars)


__all__ = ["load_properties", "parse_properties"]
