"""Contexts passed to simulation elements.

``InitContext`` is used once, while the element tree is constructed.
``UpdateContext`` is built by the simulation driver for every tick and handed
to each element's ``update``. It is frozen: elements read it, they never
modify it.

Typical usage:
    init = InitContext()
    altimeters = RedundantRadioAltimeters(init)

    context = UpdateContext(delta_s=0.05, simulation_time_s=0.0,
                            plane_height_over_ground_m=300.0)
    altimeters.update(context)
"""

from dataclasses import dataclass, replace
from typing import Any

from radalt.core.registry import ElementRegistry


@dataclass(frozen=True)
class UpdateContext:
    """Per-tick simulation state.

    Attributes:
        delta_s: Duration of this tick in seconds.
        simulation_time_s: Simulation time at the end of this tick.
        plane_height_over_ground_m: Height of the centre-of-gravity reference
            above the terrain directly below it.
        pitch_deg: Pitch attitude, nose up positive.
        bank_deg: Bank attitude, right wing down positive.
    """

    delta_s: float
    simulation_time_s: float = 0.0
    plane_height_over_ground_m: float = 0.0
    pitch_deg: float = 0.0
    bank_deg: float = 0.0

    def advanced(self, delta_s: float) -> "UpdateContext":
        """Return the context for the next tick, with time moved forward."""
        return replace(self, delta_s=delta_s, simulation_time_s=self.simulation_time_s + delta_s)

    def with_aircraft_state(
        self,
        plane_height_over_ground_m: float | None = None,
        pitch_deg: float | None = None,
        bank_deg: float | None = None,
    ) -> "UpdateContext":
        """Return a copy with the given aircraft state fields replaced."""
        changes: dict[str, float] = {}
        if plane_height_over_ground_m is not None:
            changes["plane_height_over_ground_m"] = plane_height_over_ground_m
        if pitch_deg is not None:
            changes["pitch_deg"] = pitch_deg
        if bank_deg is not None:
            changes["bank_deg"] = bank_deg
        return replace(self, **changes)


class InitContext:
    """Construction-time context.

    Elements register themselves here so they can be looked up by
    identifier, and so identifier clashes surface while the aircraft is
    being built rather than as silently overwritten state.

    Examples:
        >>> context = InitContext()
        >>> context.register("radio_altimeter_1", engine)
        >>> context.registered_identifiers()
        ['radio_altimeter_1']
    """

    def __init__(self, registry: ElementRegistry | None = None) -> None:
        self._registry = registry if registry is not None else ElementRegistry()

    def register(self, identifier: str, element: Any) -> None:
        """Register an element.

        Raises:
            RegistryError: If the identifier is already taken.
        """
        self._registry.register(identifier, element)

    def lookup(self, identifier: str) -> Any:
        return self._registry.get(identifier)

    def is_registered(self, identifier: str) -> bool:
        return self._registry.is_registered(identifier)

    def registered_identifiers(self) -> list[str]:
        return self._registry.list_elements()
