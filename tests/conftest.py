"""
Pytest configuration and shared fixtures for the toy robot test suite.
"""

import pytest

from toyrobot.core.bus import EventBus, reset_event_bus
from toyrobot.core.config import reset_settings
from toyrobot.core.types import Direction, Simulation
from toyrobot.table.parser import parse_command
from toyrobot.table.stepper import create_initial_simulation, step


@pytest.fixture(autouse=True)
def _reset_singletons(monkeypatch):
    """Fresh settings and event bus for every test, under a login-like environment."""
    monkeypatch.setenv("SHELL", "/bin/bash")
    reset_settings()
    reset_event_bus()
    yield
    reset_settings()
    reset_event_bus()


@pytest.fixture
def bus():
    return EventBus()


def run_lines(*lines: str, sim: Simulation | None = None) -> Simulation:
    """Step raw lines through the parser and stepper, returning the final simulation."""
    sim = sim or create_initial_simulation()
    for line in lines:
        cmd = parse_command(line)
        assert cmd is not None, line
        sim = step(sim, cmd).sim
    return sim


@pytest.fixture
def placed_sim() -> Simulation:
    """Robot at 2,2 facing NORTH."""
    sim = run_lines("PLACE 2,2,NORTH")
    assert sim.current.facing == Direction.NORTH
    return sim
