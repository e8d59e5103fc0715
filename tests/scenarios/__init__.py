"""Cave scenarios for the sand simulation.

Each scenario describes a rock layout together with the settled state it
should reach. Scenarios can be:
1. Run via pytest using test_scenarios.py
2. Imported and run headless with ScenarioRunner
"""

from .base import CaveScenario, ScenarioRunner

from .caves import (
    SampleCaveScenario,
    ShelfUnderSourceScenario,
    OpenCaveScenario,
    BowlScenario,
    ALL_SCENARIOS,
)
