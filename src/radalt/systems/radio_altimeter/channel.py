"""One radio altimeter channel.

A channel is a physical radio altimeter unit together with the antenna
pair it is wired to. Geometry, delay class and power assignment are fixed
at construction; the only thing that changes afterwards is the unit's own
runtime state.
"""

from radalt.core.logging_system import get_logger
from radalt.simulation.context import InitContext, UpdateContext
from radalt.simulation.element import SimulationElement, SimulationElementVisitor
from radalt.systems.electrical.base import ElectricalBusType
from radalt.systems.radio_altimeter.ala52b import InstallationDelay, RadioAltimeterEngine
from radalt.systems.radio_altimeter.antenna import AntennaInstallation, TransceiverPair

logger = get_logger(__name__)


class AltimeterChannel(SimulationElement):
    """Radio altimeter unit and its transceiver pair.

    The channel performs no validation and never gates the unit's update on
    power: an unpowered bus is something the unit reports, not something
    the channel refuses.

    Examples:
        >>> channel = AltimeterChannel(
        ...     context, 1, InstallationDelay.FIFTY_SEVEN_FEET,
        ...     ElectricalBusType.alternating_current(1), transmitter, receiver)
        >>> channel.update(update_context)
    """

    def __init__(
        self,
        context: InitContext,
        number: int,
        installation_delay: InstallationDelay,
        powered_by: ElectricalBusType,
        transmitter: AntennaInstallation,
        receiver: AntennaInstallation,
    ) -> None:
        self._radio_altimeter = RadioAltimeterEngine(
            context, number, installation_delay, powered_by
        )
        self._transceivers = TransceiverPair(
            context, f"radio_altimeter_{number}_transceivers", transmitter, receiver
        )

        logger.info(
            "Radio altimeter %d installed: bus=%s delay=%s tx=%s rx=%s",
            number,
            powered_by,
            installation_delay.name,
            transmitter,
            receiver,
        )

    @property
    def number(self) -> int:
        return self._radio_altimeter.number

    @property
    def installation_delay(self) -> InstallationDelay:
        return self._radio_altimeter.installation_delay

    @property
    def powered_by(self) -> ElectricalBusType:
        return self._radio_altimeter.powered_by

    @property
    def transceivers(self) -> TransceiverPair:
        return self._transceivers

    @property
    def radio_altimeter(self) -> RadioAltimeterEngine:
        return self._radio_altimeter

    def update(self, context: UpdateContext) -> None:
        self._radio_altimeter.update(context, self._transceivers)

    def accept(self, visitor: SimulationElementVisitor) -> None:
        self._transceivers.accept(visitor)
        self._radio_altimeter.accept(visitor)

        visitor.visit(self)
