"""
Falling-sand cave simulation.

Sand pours from a single source into a cave cross-section scanned as rock
paths and piles up until no more grains can come to rest.
"""

from .geometry import Point, ParsePointError
from .materials import MaterialType, MaterialDatabase
from .cave import Cave, ParseCaveError, SAND_SOURCE, FLOOR_OFFSET
from .simulation import SandSimulation, resting_sand

__version__ = "1.0.0"

__all__ = [
    'Cave',
    'FLOOR_OFFSET',
    'MaterialDatabase',
    'MaterialType',
    'ParseCaveError',
    'ParsePointError',
    'Point',
    'SAND_SOURCE',
    'SandSimulation',
    'resting_sand',
]
