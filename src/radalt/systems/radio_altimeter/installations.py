"""Radio altimeter installation data.

An installation assigns each of the two channels its bus, its antenna
geometry and its delay class. The A380 installation is built in; other
installations are read from YAML:

    radio_altimeters:
      installation_delay: fifty_seven_feet
      channels:
        - number: 1
          powered_by: AC_1
          transmitter: {vertical_offset_m: 0.83, longitudinal_offset_m: 9.89, ...}
          receiver: {vertical_offset_m: 0.83, longitudinal_offset_m: 9.19, ...}
        - number: 2
          ...

Loaded files are checked for the independence the redundancy depends on:
two channels numbered 1 and 2, fed from different buses, with different
antenna geometry.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from radalt.core.config import ConfigError, ConfigLoader
from radalt.core.logging_system import get_logger
from radalt.systems.electrical.base import ElectricalBusType
from radalt.systems.radio_altimeter.ala52b import InstallationDelay
from radalt.systems.radio_altimeter.antenna import METRES_PER_FOOT, AntennaInstallation

logger = get_logger(__name__)

# CG height over ground minus antenna height over ground, aircraft on its wheels.
A380_ANTENNA_VERTICAL_OFFSET_M = 8.617 * METRES_PER_FOOT - 1.8


@dataclass(frozen=True)
class ChannelConfiguration:
    """Construction inputs of one altimeter channel.

    Attributes:
        number: Channel number (1 or 2).
        powered_by: Bus feeding the channel.
        transmitter: Transmit antenna installation.
        receiver: Receive antenna installation.
        installation_delay: AID class of the unit.
    """

    number: int
    powered_by: ElectricalBusType
    transmitter: AntennaInstallation
    receiver: AntennaInstallation
    installation_delay: InstallationDelay = InstallationDelay.FIFTY_SEVEN_FEET

    @property
    def geometry(self) -> tuple[AntennaInstallation, AntennaInstallation]:
        return self.transmitter, self.receiver


def a380_channel_configurations() -> tuple[ChannelConfiguration, ChannelConfiguration]:
    """A380 radio altimeter 1 and 2 installations."""
    return (
        ChannelConfiguration(
            number=1,
            powered_by=ElectricalBusType.alternating_current(1),
            transmitter=AntennaInstallation(
                vertical_offset_m=A380_ANTENNA_VERTICAL_OFFSET_M,
                longitudinal_offset_m=9.89,
                electric_length_m=22.4 * METRES_PER_FOOT,
            ),
            receiver=AntennaInstallation(
                vertical_offset_m=A380_ANTENNA_VERTICAL_OFFSET_M,
                longitudinal_offset_m=9.19,
                electric_length_m=22.4 * METRES_PER_FOOT,
            ),
        ),
        ChannelConfiguration(
            number=2,
            powered_by=ElectricalBusType.alternating_current(2),
            transmitter=AntennaInstallation(
                vertical_offset_m=A380_ANTENNA_VERTICAL_OFFSET_M,
                longitudinal_offset_m=11.27,
                electric_length_m=21.4 * METRES_PER_FOOT,
            ),
            receiver=AntennaInstallation(
                vertical_offset_m=A380_ANTENNA_VERTICAL_OFFSET_M,
                longitudinal_offset_m=11.96,
                electric_length_m=21.4 * METRES_PER_FOOT,
            ),
        ),
    )


def load_channel_configurations(
    source: str | Path | ConfigLoader,
) -> tuple[ChannelConfiguration, ChannelConfiguration]:
    """Read and validate a radio altimeter installation.

    Args:
        source: YAML file path, or an already loaded configuration.

    Returns:
        Channel 1 and channel 2 configurations, in that order.

    Raises:
        ConfigError: If the file is malformed or the channels are not
            independent.
    """
    config = source if isinstance(source, ConfigLoader) else ConfigLoader.load(source)
    section = config.get_section("radio_altimeters")

    delay_name = str(section.get("installation_delay", "fifty_seven_feet"))
    try:
        default_delay = InstallationDelay.parse(delay_name)
    except ValueError as e:
        raise ConfigError(str(e)) from e

    channels = section.get("channels")
    if not isinstance(channels, list) or len(channels) != 2:
        raise ConfigError("radio_altimeters.channels must list exactly two channels")

    parsed = sorted(
        (_parse_channel(channel, default_delay) for channel in channels),
        key=lambda c: c.number,
    )
    first, second = parsed

    validate_independence(first, second)
    return first, second


def _parse_channel(channel: Any, default_delay: InstallationDelay) -> ChannelConfiguration:
    if not isinstance(channel, dict):
        raise ConfigError(f"Radio altimeter channel must be a mapping, got {channel!r}")

    try:
        delay = channel.get("installation_delay")
        return ChannelConfiguration(
            number=int(channel["number"]),
            powered_by=ElectricalBusType.parse(str(channel["powered_by"])),
            transmitter=AntennaInstallation.from_config(channel["transmitter"]),
            receiver=AntennaInstallation.from_config(channel["receiver"]),
            installation_delay=InstallationDelay.parse(str(delay)) if delay else default_delay,
        )
    except KeyError as e:
        raise ConfigError(f"Radio altimeter channel is missing {e.args[0]}") from e
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid radio altimeter channel: {e}") from e


def validate_independence(first: ChannelConfiguration, second: ChannelConfiguration) -> None:
    """Check that two channel configurations form an independent pair.

    Raises:
        ConfigError: If the channels are not numbered 1 and 2, share a bus,
            or share antenna geometry.
    """
    if (first.number, second.number) != (1, 2):
        message = (
            f"Radio altimeters must be numbered 1 and 2, got {first.number} and {second.number}"
        )
        logger.error(message)
        raise ConfigError(message)

    if first.powered_by == second.powered_by:
        message = f"Radio altimeters 1 and 2 are both powered by {first.powered_by}"
        logger.error(message)
        raise ConfigError(message)

    shared = _antenna_positions(first) & _antenna_positions(second)
    if shared:
        vertical, longitudinal = shared.pop()
        message = (
            "Radio altimeters 1 and 2 share an antenna position "
            f"(vertical {vertical} m, longitudinal {longitudinal} m)"
        )
        logger.error(message)
        raise ConfigError(message)


def _antenna_positions(configuration: ChannelConfiguration) -> set[tuple[float, float]]:
    return {
        (antenna.vertical_offset_m, antenna.longitudinal_offset_m)
        for antenna in configuration.geometry
    }
