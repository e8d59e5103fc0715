"""
Integer grid coordinates for the cave simulation.

Rows grow downwards: ``y == 0`` is the cave ceiling where the sand source
sits, larger ``y`` values are deeper into the cave.
"""

import re
from dataclasses import dataclass
from typing import Tuple


_COORDINATE = re.compile(r"[0-9]+")


class ParsePointError(ValueError):
    """Raised when a coordinate token is not of the form ``"<x>,<y>"``."""


@dataclass(frozen=True)
class Point:
    """Immutable 2D integer coordinate (column ``x``, row ``y``)."""
    x: int
    y: int

    @classmethod
    def parse(cls, text: str) -> "Point":
        """
        Parse a point written as ``"x,y"``.

        Both components must be non-negative decimal integers with no
        surrounding whitespace or sign.

        Raises:
            ParsePointError: if the text is not exactly two comma-separated
                non-negative integers.
        """
        tokens = text.split(",")
        if len(tokens) != 2:
            raise ParsePointError(f"Expected 'x,y', got {text!r}")

        for token in tokens:
            if not _COORDINATE.fullmatch(token):
                raise ParsePointError(f"Invalid coordinate {token!r} in {text!r}")

        return cls(int(tokens[0]), int(tokens[1]))

    def offset(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def fall_candidates(self) -> Tuple["Point", "Point", "Point"]:
        """Cells a grain may fall into, in priority order: down, down-left, down-right."""
        return (
            self.offset(0, 1),
            self.offset(-1, 1),
            self.offset(1, 1),
        )

    def __str__(self) -> str:
        return f"{self.x},{self.y}"
