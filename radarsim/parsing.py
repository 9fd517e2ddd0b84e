"""Reading radar scenario files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from radarsim.entities import (
    PLANE_FIELDS,
    TOWER_FIELDS,
    Plane,
    Tower,
    make_plane,
    make_tower,
)

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

PLANE_MARKER = "A"
TOWER_MARKER = "T"


@dataclass
class Scenario:
    """The planes and towers described by a scenario file."""

    planes: list[Plane] = field(default_factory=list)
    towers: list[Tower] = field(default_factory=list)


def parse_int(text: str) -> int:
    """Read a leading integer, allowing any run of ``+`` and ``-`` signs.

    Any other non-digit before the number, or a value outside the signed
    32-bit range, yields 0.
    """
    negative = False
    rest = text
    while rest and not ("0" <= rest[0] <= "9"):
        if rest[0] == "-":
            negative = not negative
        elif rest[0] != "+":
            return 0
        rest = rest[1:]
    if not rest:
        return 0
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    value = int("".join(digits))
    if negative:
        value = -value
    if value < _INT_MIN or value > _INT_MAX:
        return 0
    return value


def _is_separator(char: str) -> bool:
    code = ord(char)
    return code < 48 or 57 < code < 65 or 90 < code < 97 or code > 123


def split_words(text: str) -> list[str]:
    """Split text into words of letters, digits and ``{``.

    The final word runs to the end of the text, keeping a trailing
    separator if there is one.
    """
    text = text.split("\0", 1)[0]
    words: list[str] = []
    start = 0
    last = len(text) - 1
    previous_is_separator = True
    for index, char in enumerate(text):
        separator = _is_separator(char)
        if separator and previous_is_separator:
            start += 1
        elif (separator and index > start) or index == last:
            end = index + 1 if index == last else index
            words.append(text[start:end])
            start = index + 1
        previous_is_separator = separator
    return words


def _fields(words: list[str], position: int, count: int, kind: str) -> list[int]:
    values = words[position:position + count]
    if len(values) < count:
        raise ValueError(
            f"{kind} at word {position - 1} needs {count} values, "
            f"got {len(values)}"
        )
    return [parse_int(word) for word in values]


def parse_scenario(text: str) -> Scenario:
    """Build a scenario from text holding ``A`` plane and ``T`` tower records."""
    words = split_words(text.split("\0", 1)[0] + "\n")
    scenario = Scenario()
    for position, word in enumerate(words, start=1):
        if word == TOWER_MARKER:
            scenario.towers.append(
                make_tower(_fields(words, position, TOWER_FIELDS, "tower"))
            )
        if word == PLANE_MARKER:
            scenario.planes.append(
                make_plane(_fields(words, position, PLANE_FIELDS, "plane"))
            )
    return scenario


def load_scenario(path: str | os.PathLike[str]) -> Scenario:
    """Read and parse a scenario file; raises OSError if it cannot be read."""
    with open(path, "rb") as handle:
        data = handle.read()
    return parse_scenario(data.decode("latin-1"))