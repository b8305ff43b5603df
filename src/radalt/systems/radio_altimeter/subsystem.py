"""Dual radio altimeter installation.

Two channels, each with its own bus and antenna pair, held as two named
fields. The pair is fixed: there is no adding or removing channels.

Typical usage:
    altimeters = RedundantRadioAltimeters(InitContext())
    altimeters.update(context)
"""

from radalt.core.logging_system import get_logger
from radalt.simulation.context import InitContext, UpdateContext
from radalt.simulation.element import SimulationElement, SimulationElementVisitor
from radalt.systems.radio_altimeter.channel import AltimeterChannel
from radalt.systems.radio_altimeter.installations import (
    ChannelConfiguration,
    a380_channel_configurations,
)

logger = get_logger(__name__)


class RedundantRadioAltimeters(SimulationElement):
    """Radio altimeters 1 and 2.

    The configurations are trusted as given. Installations read from
    files are validated by ``load_channel_configurations`` before they
    reach this class.

    Attributes:
        radio_altimeter_1: Channel 1.
        radio_altimeter_2: Channel 2.
    """

    def __init__(
        self,
        context: InitContext,
        configurations: tuple[ChannelConfiguration, ChannelConfiguration] | None = None,
    ) -> None:
        """Build channel 1, then channel 2.

        Args:
            context: Init context the channels register their elements with.
            configurations: Channel 1 and channel 2 configurations.
                Defaults to the A380 installation.
        """
        first, second = configurations or a380_channel_configurations()

        self.radio_altimeter_1 = self._build_channel(context, first)
        self.radio_altimeter_2 = self._build_channel(context, second)

        logger.info(
            "Radio altimeters ready: RA1 on %s, RA2 on %s",
            self.radio_altimeter_1.powered_by,
            self.radio_altimeter_2.powered_by,
        )

    @staticmethod
    def _build_channel(
        context: InitContext, configuration: ChannelConfiguration
    ) -> AltimeterChannel:
        return AltimeterChannel(
            context,
            configuration.number,
            configuration.installation_delay,
            configuration.powered_by,
            configuration.transmitter,
            configuration.receiver,
        )

    @property
    def channels(self) -> tuple[AltimeterChannel, AltimeterChannel]:
        return self.radio_altimeter_1, self.radio_altimeter_2

    def update(self, context: UpdateContext) -> None:
        self.radio_altimeter_1.update(context)
        self.radio_altimeter_2.update(context)

    def accept(self, visitor: SimulationElementVisitor) -> None:
        self.radio_altimeter_1.accept(visitor)
        self.radio_altimeter_2.accept(visitor)

        visitor.visit(self)
