"""
Sparse cave grid and the falling-sand placement rule.

The cave is stored as a two-level mapping ``column -> row -> material``.
Only rock and sand are materialized; every other cell reads as air, except
for the rows at and below ``lowest_platform + FLOOR_OFFSET`` which read as
rock when the cave has a floor.
"""

from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from .geometry import Point
from .materials import MaterialType, MaterialDatabase


# Every grain enters the cave here
SAND_SOURCE = Point(500, 0)

# Synthetic floor sits this many rows below the deepest rock
FLOOR_OFFSET = 2

PATH_SEPARATOR = " -> "


class ParseCaveError(ValueError):
    """Raised when a rock path description is structurally invalid."""


class Cave:
    """Cave cross-section: rock formations, resting sand and a sand source."""

    def __init__(self, source: Point = SAND_SOURCE, floor: bool = True):
        """
        Create an empty cave.

        Args:
            source: Coordinate every grain starts falling from
            floor: Whether a synthetic rock floor sits below the deepest rock.
                Without it, grains that fall past the deepest rock are lost.
        """
        self.source = source
        self.floor = floor
        self.structure: Dict[int, Dict[int, MaterialType]] = {}
        self.lowest_platform = 0
        self.material_db = MaterialDatabase()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def parse(cls, text: str, *, source: Point = SAND_SOURCE, floor: bool = True) -> "Cave":
        """
        Build a cave from rock path lines such as ``"498,4 -> 498,6 -> 496,6"``.

        Each consecutive pair of points on a line is an axis-aligned rock
        segment, inclusive of both endpoints.

        Raises:
            ParseCaveError: for lines with fewer than two points, diagonal
                segments, input without any rock, or a source buried in rock.
            ParsePointError: for malformed coordinate tokens.
        """
        cave = cls(source=source, floor=floor)

        for line_no, line in enumerate(text.splitlines(), start=1):
            path = cls._parse_path(line, line_no)
            for first, second in zip(path, path[1:]):
                for point in cls._segment(first, second, line_no):
                    cave.set(point, MaterialType.ROCK)

        if not cave.structure:
            raise ParseCaveError("Cave description contains no rock")

        cave.compute_lowest_platform()

        if cave.get(cave.source) == MaterialType.ROCK:
            raise ParseCaveError(f"Sand source {cave.source} is inside rock")

        return cave

    @staticmethod
    def _parse_path(line: str, line_no: int) -> List[Point]:
        if not line.strip():
            raise ParseCaveError(f"Line {line_no}: empty rock path")

        path = [Point.parse(token) for token in line.split(PATH_SEPARATOR)]
        if len(path) < 2:
            raise ParseCaveError(f"Line {line_no}: rock path needs at least two points")
        return path

    @staticmethod
    def _segment(first: Point, second: Point, line_no: int) -> Iterator[Point]:
        """Yield every cell on the axis-aligned segment between two points."""
        if first.x == second.x:
            y_lo, y_hi = sorted((first.y, second.y))
            return (Point(first.x, y) for y in range(y_lo, y_hi + 1))
        if first.y == second.y:
            x_lo, x_hi = sorted((first.x, second.x))
            return (Point(x, first.y) for x in range(x_lo, x_hi + 1))
        raise ParseCaveError(f"Line {line_no}: diagonal segment {first} -> {second}")

    def compute_lowest_platform(self) -> int:
        """Fix the floor depth to the deepest rock row; resting sand never moves it."""
        self.lowest_platform = max(
            y
            for column in self.structure.values()
            for y, material in column.items()
            if material == MaterialType.ROCK
        )
        return self.lowest_platform

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def get(self, point: Point) -> MaterialType:
        """Return the material at ``point``; unrecorded cells read as air or floor."""
        column = self.structure.get(point.x)
        if column is not None and point.y in column:
            return column[point.y]
        if self.floor and point.y >= self.lowest_platform + FLOOR_OFFSET:
            return MaterialType.ROCK
        return MaterialType.AIR

    def set(self, point: Point, material: MaterialType) -> None:
        """Record ``material`` at ``point``, creating the column on demand."""
        column = self.structure.get(point.x)
        if column is not None and column.get(point.y) == MaterialType.SAND and material != MaterialType.SAND:
            raise ValueError(f"Resting sand at {point} cannot be replaced by {material.name}")

        if material == MaterialType.AIR:
            if column is not None:
                column.pop(point.y, None)
                if not column:
                    del self.structure[point.x]
            return

        self.structure.setdefault(point.x, {})[point.y] = material

    def bottom(self, col: int) -> int:
        """Deepest recorded row in column ``col`` (0 for an empty column)."""
        column = self.structure.get(col)
        if not column:
            return 0
        return max(column)

    def count(self, material: MaterialType) -> int:
        return sum(
            1
            for column in self.structure.values()
            for value in column.values()
            if value == material
        )

    # ------------------------------------------------------------------
    # Sand
    # ------------------------------------------------------------------
    def drop_sand(self, start: Point) -> Optional[Point]:
        """
        Follow a single grain from ``start`` until it comes to rest.

        The grain moves to the first air cell among down, down-left and
        down-right. Returns the resting position, or None when the cave has
        no floor and the grain falls past the deepest rock.
        """
        point = start
        while True:
            if not self.floor and point.y > self.lowest_platform:
                return None

            for candidate in point.fall_candidates():
                if self.get(candidate) == MaterialType.AIR:
                    point = candidate
                    break
            else:
                return point

    def add_sand(self) -> Optional[Point]:
        """
        Drop one grain from the source and record where it rests.

        Returns None without placing anything when the source is already
        covered by sand, or when the grain is lost below the rock.
        """
        if self.get(self.source) == MaterialType.SAND:
            return None

        end = self.drop_sand(self.source)
        if end is not None:
            self.set(end, MaterialType.SAND)
        return end

    # ------------------------------------------------------------------
    # Debug rendering
    # ------------------------------------------------------------------
    def bounds(self) -> Tuple[int, int, int, int]:
        """Return ``(x_min, x_max, y_min, y_max)`` covering every recorded cell."""
        if not self.structure:
            raise ValueError("Cannot compute bounds of an empty cave")
        x_min = min(self.structure)
        x_max = max(self.structure)
        y_max = max(self.bottom(col) for col in self.structure)
        return x_min, x_max, 0, y_max

    def to_array(self) -> np.ndarray:
        """Dense ``(rows, columns)`` snapshot of material codes over :meth:`bounds`."""
        x_min, x_max, y_min, y_max = self.bounds()
        grid = np.full((y_max - y_min + 1, x_max - x_min + 1), MaterialType.AIR, dtype=np.int8)

        if self.floor:
            floor_row = self.lowest_platform + FLOOR_OFFSET - y_min
            if floor_row < grid.shape[0]:
                grid[max(floor_row, 0):, :] = MaterialType.ROCK

        for x, column in self.structure.items():
            for y, material in column.items():
                grid[y - y_min, x - x_min] = material

        return grid

    def render(self) -> str:
        """Render the grid with ``#`` for rock, ``o`` for sand and ``.`` for air."""
        glyphs = self.material_db.glyph_table()[self.to_array()]
        return "".join("".join(row) + "\n" for row in glyphs)

    def __str__(self) -> str:
        return self.render()
