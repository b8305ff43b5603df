"""ALA-52B radio altimeter signal processing.

The radio altimeter measures the time a signal takes to travel from the
transmit antenna down to the terrain and back up to the receive antenna.
Converted to a length, that measurement contains the reflected path plus
the electric length of both antenna installations. The unit removes a
fixed aircraft installation delay (AID) chosen for the aircraft family and
halves the remainder to obtain the height above terrain.

Output validity is reported as data, never as an exception:
    - no power on the feeding bus: FAILURE_WARNING
    - reading above the tracking range: NO_COMPUTED_DATA
    - otherwise: NORMAL_OPERATION

Typical usage:
    engine = RadioAltimeterEngine(context, 1, InstallationDelay.FIFTY_SEVEN_FEET,
                                  ElectricalBusType.alternating_current(1))
    engine.receive_power(buses)
    engine.update(update_context, transceivers)
    engine.radio_altitude_ft
"""

from enum import Enum
from typing import Any

from radalt.core.logging_system import get_logger
from radalt.simulation.context import InitContext, UpdateContext
from radalt.simulation.element import SimulationElement
from radalt.systems.electrical.base import ElectricalBuses, ElectricalBusType
from radalt.systems.radio_altimeter.antenna import (
    FEET_PER_METRE,
    METRES_PER_FOOT,
    TransceiverPair,
)

logger = get_logger(__name__)


class InstallationDelay(Enum):
    """Aircraft installation delay classes, in feet of path length.

    The delay is a hardware-family constant. It is the same for every
    aircraft of a type regardless of where the antennas are mounted.
    """

    TWENTY_FEET = 20
    FORTY_FEET = 40
    FIFTY_SEVEN_FEET = 57
    EIGHTY_FEET = 80

    @property
    def length_ft(self) -> float:
        return float(self.value)

    @property
    def length_m(self) -> float:
        return self.value * METRES_PER_FOOT

    @classmethod
    def parse(cls, name: str) -> "InstallationDelay":
        """Parse ``"fifty_seven_feet"`` style names (case-insensitive).

        Raises:
            ValueError: If the name is not a known delay class.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError as e:
            raise ValueError(f"Unknown installation delay: {name!r}") from e


class SignStatus(Enum):
    """Sign/status matrix of the radio altitude output word."""

    FAILURE_WARNING = "failure_warning"
    NO_COMPUTED_DATA = "no_computed_data"
    NORMAL_OPERATION = "normal_operation"


class RadioAltimeterEngine(SimulationElement):
    """One ALA-52B radio altimeter unit.

    The unit is updated every tick whether or not its bus is powered;
    power availability only changes what it reports.

    Attributes:
        number: Radio altimeter number (1 or 2).
        installation_delay: AID class of this unit.
        powered_by: Bus feeding this unit.
    """

    MAX_RADIO_ALTITUDE_FT = 8192.0
    MIN_RADIO_ALTITUDE_FT = -20.0

    def __init__(
        self,
        context: InitContext,
        number: int,
        installation_delay: InstallationDelay,
        powered_by: ElectricalBusType,
    ) -> None:
        self.number = number
        self.installation_delay = installation_delay
        self.powered_by = powered_by

        self._is_powered = False
        self._radio_altitude_ft = 0.0
        self._ssm = SignStatus.FAILURE_WARNING
        self._update_count = 0

        context.register(self.identifier, self)

    @property
    def identifier(self) -> str:
        return f"radio_altimeter_{self.number}"

    @property
    def radio_altitude_ft(self) -> float:
        return self._radio_altitude_ft

    @property
    def ssm(self) -> SignStatus:
        return self._ssm

    @property
    def is_powered(self) -> bool:
        return self._is_powered

    @property
    def update_count(self) -> int:
        return self._update_count

    def receive_power(self, buses: ElectricalBuses) -> None:
        self._is_powered = buses.is_powered(self.powered_by)

    def update(self, context: UpdateContext, transceivers: TransceiverPair) -> None:
        """Advance the unit by one tick.

        Args:
            context: Tick context.
            transceivers: Antenna pair this unit is wired to.
        """
        self._update_count += 1

        if not self._is_powered:
            self._radio_altitude_ft = 0.0
            self._set_ssm(SignStatus.FAILURE_WARNING)
            return

        measured_m = transceivers.electric_path_length_m(context)
        altitude_ft = (measured_m - self.installation_delay.length_m) / 2.0 * FEET_PER_METRE

        if altitude_ft > self.MAX_RADIO_ALTITUDE_FT:
            self._radio_altitude_ft = self.MAX_RADIO_ALTITUDE_FT
            self._set_ssm(SignStatus.NO_COMPUTED_DATA)
        else:
            self._radio_altitude_ft = max(self.MIN_RADIO_ALTITUDE_FT, altitude_ft)
            self._set_ssm(SignStatus.NORMAL_OPERATION)

        logger.debug(
            "RA %d: path=%.3fm altitude=%.1fft ssm=%s",
            self.number,
            measured_m,
            self._radio_altitude_ft,
            self._ssm.name,
        )

    def _set_ssm(self, ssm: SignStatus) -> None:
        if ssm != self._ssm:
            logger.info("RA %d output %s -> %s", self.number, self._ssm.name, ssm.name)
            self._ssm = ssm

    def write(self, writer: dict[str, Any]) -> None:
        writer[f"RA_{self.number}_RADIO_ALTITUDE"] = self._radio_altitude_ft
        writer[f"RA_{self.number}_SSM"] = self._ssm.name
