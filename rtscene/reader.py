"""Cursor over one line of a scene description, with the shared field readers."""

from __future__ import annotations

import re
from dataclasses import dataclass

from rtscene.model import SceneObject
from rtscene.vec3 import Vec3

MISSING = "missing or malformed value"
BAD_ORIENTATION = "orientation must be a non-zero vector with components in [-1, 1]"
BAD_COLOR = "color components must be in [0, 255]"
BAD_DIAMETER = "size must be strictly positive"
BAD_LIGHT_RATIO = "light brightness must be in [0, 1]"
TOO_LONG = "unexpected data at end of line"
UNKNOWN_ID = "unknown element identifier"

_WHITESPACE = " \t\n\v\f\r"
_NUMBER_START = "0123456789.+-"
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)")
_INT = re.compile(r"\d+")


class ParseError(ValueError):
    """Raised when a scene description is malformed."""


@dataclass
class LineReader:
    """Position within a single line of scene text."""

    text: str
    pos: int = 0

    def peek(self) -> str:
        """Current character, or an empty string at the end of the line."""
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def at_end(self) -> bool:
        """Whether every character has been consumed."""
        return self.pos >= len(self.text)

    def skip_space(self) -> None:
        """Advance past any whitespace."""
        while not self.at_end() and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def at_number(self) -> bool:
        """Whether the current character can start a number."""
        ch = self.peek()
        return ch != "" and ch in _NUMBER_START

    def separator_ok(self) -> bool:
        """Whether a one-character separator is followed by the start of a number."""
        if self.pos + 1 >= len(self.text):
            return False
        return self.text[self.pos + 1] in _NUMBER_START

    def read_float(self) -> float:
        """Read a decimal number at the cursor."""
        match = _FLOAT.match(self.text, self.pos)
        if match is None:
            raise ParseError(MISSING)
        self.pos = match.end()
        return float(match.group())

    def read_int(self) -> int:
        """Read an unsigned integer at the cursor."""
        match = _INT.match(self.text, self.pos)
        if match is None:
            raise ParseError(MISSING)
        self.pos = match.end()
        return int(match.group())

    def read_vec3(self) -> Vec3:
        """Read three numbers joined by single separator characters."""
        if not self.at_number():
            raise ParseError(MISSING)
        components = [self.read_float()]
        for _ in range(2):
            if not self.separator_ok():
                raise ParseError(MISSING)
            self.pos += 1
            components.append(self.read_float())
        return Vec3(*components)


def in_range(vec: Vec3, high: float, low: float) -> bool:
    """Whether every component lies within [low, high]."""
    return all(low <= c <= high for c in vec)


def direction_is_valid(direction: Vec3) -> bool:
    """Whether the vector can be normalised."""
    return direction.squared_length() != 0


def read_motion(reader: LineReader, obj: SceneObject) -> None:
    """Read a waypoint route: a count, that many points, then a speed.

    The object's current position becomes the first waypoint.
    """
    if not reader.peek().isdigit():
        raise ParseError(MISSING)
    count = reader.read_int()
    waypoints = [obj.origin()]
    for _ in range(count):
        reader.skip_space()
        if not reader.at_number():
            raise ParseError(MISSING)
        waypoints.append(reader.read_vec3())
    if count > 0:
        reader.skip_space()
        if not reader.at_number():
            raise ParseError(MISSING)
        obj.speed = abs(reader.read_float())
    obj.waypoints = waypoints