"""Pytest configuration and fixtures for all tests."""

import pytest

from radalt.simulation.context import InitContext, UpdateContext
from radalt.systems.electrical.base import BusPowerState, ElectricalBusType
from radalt.systems.radio_altimeter.antenna import METRES_PER_FOOT
from radalt.systems.radio_altimeter.installations import a380_channel_configurations

# A380 CG height over ground with the aircraft on its wheels, in metres.
ON_GROUND_CG_HEIGHT_M = 8.617 * METRES_PER_FOOT


@pytest.fixture
def init_context() -> InitContext:
    """Create a fresh init context."""
    return InitContext()


@pytest.fixture
def a380_configurations():
    """A380 radio altimeter 1 and 2 installations."""
    return a380_channel_configurations()


@pytest.fixture
def all_buses_powered() -> BusPowerState:
    """Both AC buses energized."""
    return BusPowerState.all_powered(
        [ElectricalBusType.alternating_current(1), ElectricalBusType.alternating_current(2)]
    )


@pytest.fixture
def on_ground_context() -> UpdateContext:
    """Level aircraft standing on its wheels."""
    return UpdateContext(delta_s=0.05, plane_height_over_ground_m=ON_GROUND_CG_HEIGHT_M)


def height_context(
    height_ft: float, pitch_deg: float = 0.0, bank_deg: float = 0.0
) -> UpdateContext:
    """Build a tick context for a CG height given in feet."""
    return UpdateContext(
        delta_s=0.05,
        plane_height_over_ground_m=height_ft * METRES_PER_FOOT,
        pitch_deg=pitch_deg,
        bank_deg=bank_deg,
    )


@pytest.fixture
def at_height():
    """Factory for tick contexts at a CG height in feet."""
    return height_context
