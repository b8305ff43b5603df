"""Tick driver for a tree of simulation elements.

One tick is:
    1. power pass: every element receives the bus power state,
    2. update: the root element advances exactly once,
    3. state pass: every element writes its variables.

Typical usage:
    init = InitContext()
    altimeters = RedundantRadioAltimeters(init)
    simulation = Simulation(altimeters, BusPowerState.all_powered(buses))

    variables = simulation.tick(context)
"""

from typing import Any, Protocol

from radalt.core.logging_system import get_logger
from radalt.simulation.context import UpdateContext
from radalt.simulation.element import PowerDistributor, StateCollector
from radalt.systems.electrical.base import BusPowerState

logger = get_logger(__name__)


class UpdatableElement(Protocol):
    """Root element driven by the simulation."""

    def update(self, context: UpdateContext) -> None: ...

    def accept(self, visitor: Any) -> None: ...


class Simulation:
    """Drives a root element one tick at a time.

    Attributes:
        buses: Bus power state applied on the next tick. The host flips
            buses on and off here between ticks.
        tick_count: Number of completed ticks.
        variables: Variables collected by the last state pass.
    """

    def __init__(self, root: UpdatableElement, buses: BusPowerState | None = None) -> None:
        self.root = root
        self.buses = buses if buses is not None else BusPowerState()
        self.tick_count = 0
        self.variables: dict[str, Any] = {}

    def tick(self, context: UpdateContext) -> dict[str, Any]:
        """Run one tick.

        Args:
            context: Tick context for this step.

        Returns:
            The variables written by all elements during the state pass.
        """
        self.root.accept(PowerDistributor(self.buses))
        self.root.update(context)

        collector = StateCollector()
        self.root.accept(collector)

        self.tick_count += 1
        self.variables = collector.variables
        logger.debug("Tick %d at t=%.3fs complete", self.tick_count, context.simulation_time_s)
        return self.variables

    def snapshot(self) -> dict[str, Any]:
        """Collect element state without advancing the simulation."""
        collector = StateCollector()
        self.root.accept(collector)
        return collector.variables

