"""
Material types that can occupy a cave cell.

Only three materials exist: solid rock from the scan, sand that has come to
rest, and air. Air is never stored in the grid; it is what an unrecorded
cell reads as.
"""

from enum import IntEnum, auto
from dataclasses import dataclass
from typing import Dict

import numpy as np


class MaterialType(IntEnum):
    """Material types for the cave grid (values double as array codes)."""
    AIR = 0
    ROCK = auto()
    SAND = auto()


@dataclass
class MaterialProperties:
    """Display properties of a material type."""
    glyph: str  # single character used by the debug rendering
    description: str = ""


class MaterialDatabase:
    """Database of material display properties."""

    def __init__(self):
        self.properties = self._init_properties()

    def _init_properties(self) -> Dict[MaterialType, MaterialProperties]:
        props = {}

        props[MaterialType.AIR] = MaterialProperties(
            glyph=".",
            description="Open space a grain can fall through",
        )

        props[MaterialType.ROCK] = MaterialProperties(
            glyph="#",
            description="Scanned rock formation or the synthetic floor",
        )

        props[MaterialType.SAND] = MaterialProperties(
            glyph="o",
            description="Sand grain at rest",
        )

        return props

    def get_properties(self, material: MaterialType) -> MaterialProperties:
        return self.properties[material]

    def glyph(self, material: MaterialType) -> str:
        return self.properties[material].glyph

    def glyph_table(self) -> np.ndarray:
        """
        Return glyphs as an array indexed by material code.

        Indexing the table with an integer material array converts a whole
        grid snapshot to characters in one step.
        """
        return np.array([self.glyph(material) for material in MaterialType])
