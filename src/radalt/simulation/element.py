"""Simulation elements and the visitors that walk them.

Every component with simulation-visible state is a ``SimulationElement``.
A composite element overrides ``accept`` to pass the visitor to its children
first and only then visit itself, so any visitor sees a fully traversed
subtree before the parent that owns it.

Visitors shipped here:
    - PowerDistributor: hands the tick's bus state to every element.
    - StateCollector: gathers the variables each element writes.
    - VisitRecorder: records the traversal order.

Typical usage:
    collector = StateCollector()
    altimeters.accept(collector)
    collector.variables["RA_1_RADIO_ALTITUDE"]
"""

from abc import ABC, abstractmethod
from typing import Any

from radalt.systems.electrical.base import ElectricalBuses


class SimulationElement(ABC):
    """Base class for anything that takes part in the visitation pass.

    All hooks are no-ops by default; elements override the ones they need.
    """

    def accept(self, visitor: "SimulationElementVisitor") -> None:
        """Pass the visitor to children, then to this element.

        Leaf elements keep the default, which visits only themselves.
        """
        visitor.visit(self)

    def receive_power(self, buses: ElectricalBuses) -> None:  # noqa: B027
        """Read the bus power state for this tick."""

    def write(self, writer: dict[str, Any]) -> None:  # noqa: B027
        """Contribute simulation variables to ``writer``."""


class SimulationElementVisitor(ABC):
    """Operation applied to every element of a tree."""

    @abstractmethod
    def visit(self, element: SimulationElement) -> None:
        """Visit a single element."""


class PowerDistributor(SimulationElementVisitor):
    """Visitor giving every element the current bus power state."""

    def __init__(self, buses: ElectricalBuses) -> None:
        self._buses = buses

    def visit(self, element: SimulationElement) -> None:
        element.receive_power(self._buses)


class StateCollector(SimulationElementVisitor):
    """Visitor collecting the variables written by each element.

    Attributes:
        variables: Name to value mapping, in write order.
    """

    def __init__(self) -> None:
        self.variables: dict[str, Any] = {}

    def visit(self, element: SimulationElement) -> None:
        element.write(self.variables)


class VisitRecorder(SimulationElementVisitor):
    """Visitor recording the elements it is handed, in order."""

    def __init__(self) -> None:
        self.visited: list[SimulationElement] = []

    def visit(self, element: SimulationElement) -> None:
        self.visited.append(element)
