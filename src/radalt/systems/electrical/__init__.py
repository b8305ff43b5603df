"""Electrical systems package.

Provides bus identifiers and the per-tick view of which buses are energized.
"""

from radalt.systems.electrical.base import (
    BusKind,
    BusPowerState,
    ElectricalBuses,
    ElectricalBusType,
)

__all__ = [
    "BusKind",
    "BusPowerState",
    "ElectricalBuses",
    "ElectricalBusType",
]
