"""Electrical bus identification and power availability.

The simulation does not model electrical networks. Consumers only need to
know which bus feeds them and whether that bus is energized this tick.

Typical usage:
    bus = ElectricalBusType.parse("AC_1")
    buses = BusPowerState.all_powered([bus])
    buses.is_powered(bus)  # True
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class BusKind(Enum):
    """Families of electrical buses found on transport aircraft."""

    ALTERNATING_CURRENT = "AC"
    ALTERNATING_CURRENT_ESSENTIAL = "AC_ESS"
    DIRECT_CURRENT = "DC"
    DIRECT_CURRENT_ESSENTIAL = "DC_ESS"
    DIRECT_CURRENT_HOT = "DC_HOT"


@dataclass(frozen=True)
class ElectricalBusType:
    """Identifier of one electrical bus.

    Attributes:
        kind: Bus family.
        number: Bus number within its family (1-based).
    """

    kind: BusKind
    number: int = 1

    @classmethod
    def alternating_current(cls, number: int) -> "ElectricalBusType":
        return cls(BusKind.ALTERNATING_CURRENT, number)

    @classmethod
    def parse(cls, name: str) -> "ElectricalBusType":
        """Parse a bus name such as ``"AC_1"`` or ``"DC_ESS_2"``.

        Args:
            name: Bus name, case-insensitive, kind followed by ``_<number>``.

        Returns:
            The bus identifier.

        Raises:
            ValueError: If the name does not describe a known bus.
        """
        prefix, _, number = name.strip().upper().rpartition("_")
        if not prefix or not number.isdigit():
            raise ValueError(f"Invalid electrical bus name: {name!r}")

        try:
            kind = BusKind(prefix)
        except ValueError as e:
            raise ValueError(f"Unknown electrical bus kind in {name!r}") from e

        return cls(kind, int(number))

    def __str__(self) -> str:
        return f"{self.kind.value}_{self.number}"


class ElectricalBuses(ABC):
    """Read-only view of bus power availability for one tick."""

    @abstractmethod
    def is_powered(self, bus: ElectricalBusType) -> bool:
        """Return True if the bus is energized."""


class BusPowerState(ElectricalBuses):
    """Mutable set of energized buses, owned by the simulation driver.

    Examples:
        >>> state = BusPowerState()
        >>> state.set_powered(ElectricalBusType.alternating_current(1), True)
        >>> state.is_powered(ElectricalBusType.parse("AC_1"))
        True
    """

    def __init__(self) -> None:
        self._powered: set[ElectricalBusType] = set()

    @classmethod
    def all_powered(cls, buses: Iterable[ElectricalBusType]) -> "BusPowerState":
        state = cls()
        for bus in buses:
            state.set_powered(bus, True)
        return state

    def set_powered(self, bus: ElectricalBusType, powered: bool) -> None:
        if powered:
            self._powered.add(bus)
        else:
            self._powered.discard(bus)

    def update_from_mapping(self, buses: dict[str, bool]) -> None:
        """Apply a ``{"AC_1": True, ...}`` mapping.

        Raises:
            ValueError: If a bus name cannot be parsed or a power state is
                not a boolean.
        """
        for name, powered in buses.items():
            bus = ElectricalBusType.parse(name)
            if not isinstance(powered, bool):
                raise ValueError(f"Power state of {name} must be a boolean, got {powered!r}")
            self.set_powered(bus, powered)

    def is_powered(self, bus: ElectricalBusType) -> bool:
        return bus in self._powered

    def powered_buses(self) -> list[ElectricalBusType]:
        return sorted(self._powered, key=str)
