"""
Simulation driver for the falling-sand cave.

This module owns the drop loop: it parses a rock description into a
:class:`~sandcave.cave.Cave`, pours grains from the source one at a time
until no more can come to rest, and reports how many settled.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .cave import Cave, SAND_SOURCE
from .geometry import Point
from .materials import MaterialType


class SandSimulation:
    """Pours sand into a cave one grain per step."""

    def __init__(
        self,
        text: str,
        *,
        source: Point = SAND_SOURCE,
        floor: bool = True,
        log_level: str | int = "WARNING",
    ) -> None:
        """
        Initialize the simulation from a rock path description.

        Args:
            text: Newline-separated rock paths (``"x,y -> x,y -> ..."``)
            source: Coordinate every grain starts falling from
            floor: Place a synthetic floor two rows below the deepest rock
            log_level: Logger level name or number
        """
        # ---------- logger -------------------------------------------------
        self.logger = logging.getLogger(f"SandCave_{id(self)}")
        level = log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.INFO)
        self.logger.setLevel(level)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            self.logger.addHandler(handler)

        # ---------- cave ---------------------------------------------------
        self.cave = Cave.parse(text, source=source, floor=floor)
        self.logger.debug(
            "Parsed cave: %d rock cells, lowest platform at row %d, floor %s",
            self.cave.count(MaterialType.ROCK),
            self.cave.lowest_platform,
            "enabled" if floor else "disabled",
        )

        # ---------- bookkeeping --------------------------------------------
        self.step_count = 0
        self.finished = False
        self.last_grain: Optional[Point] = None

    def step_forward(self) -> Optional[Point]:
        """Drop a single grain; returns where it came to rest, or None once finished."""
        if self.finished:
            return None

        grain = self.cave.add_sand()
        self.step_count += 1

        if grain is None:
            self.finished = True
            self.logger.info(
                "Sand stabilized after %d steps with %d resting grains",
                self.step_count,
                self.resting_count(),
            )
        else:
            self.last_grain = grain
        return grain

    def run(self, max_steps: Optional[int] = None) -> int:
        """
        Pour grains until the cave stops accepting sand.

        Args:
            max_steps: Optional cap on the number of steps taken by this call

        Returns:
            Number of resting grains so far
        """
        steps = 0
        while not self.finished:
            if max_steps is not None and steps >= max_steps:
                break
            self.step_forward()
            steps += 1
        return self.resting_count()

    def resting_count(self) -> int:
        return self.cave.count(MaterialType.SAND)

    def render(self) -> str:
        return self.cave.render()

    def get_info(self) -> Dict[str, Any]:
        """Summary of the current simulation state."""
        return {
            'step_count': self.step_count,
            'finished': self.finished,
            'resting_sand': self.resting_count(),
            'rock_cells': self.cave.count(MaterialType.ROCK),
            'lowest_platform': self.cave.lowest_platform,
            'floor': self.cave.floor,
            'source': self.cave.source,
            'last_grain': self.last_grain,
        }


def resting_sand(text: str, *, source: Point = SAND_SOURCE, floor: bool = True,
                 log_level: str | int = "WARNING") -> int:
    """
    Count the grains of sand that come to rest in the described cave.

    The final grid is written to the simulation logger at DEBUG level.

    Raises:
        ParseCaveError, ParsePointError: if ``text`` is not a valid cave.
    """
    sim = SandSimulation(text, source=source, floor=floor, log_level=log_level)
    count = sim.run()
    if sim.logger.isEnabledFor(logging.DEBUG):
        sim.logger.debug("%s", sim.render().rstrip("\n"))
    return count
