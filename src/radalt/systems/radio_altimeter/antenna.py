"""Antenna installation geometry.

An antenna installation describes where a radio altimeter antenna sits on
the airframe relative to the simulation's centre-of-gravity reference, and
the electric length of its antenna and cable run. The electric length is
what the signal "sees": it is longer than any physical distance and is
added to the measured path, which is why every installation carries its
own value.

Typical usage:
    transmitter = AntennaInstallation(0.83, 9.89, 6.83)
    pair = TransceiverPair(context, "radio_altimeter_1_transceivers", transmitter, receiver)
"""

import math
from dataclasses import dataclass

from radalt.physics.vectors import Vector3
from radalt.simulation.context import InitContext, UpdateContext
from radalt.simulation.element import SimulationElement

FEET_PER_METRE = 3.28084
METRES_PER_FOOT = 0.3048


@dataclass(frozen=True)
class AntennaInstallation:
    """Where and how one antenna is mounted.

    Values are calibration data supplied by the aircraft model. They are
    accepted as given and never checked for physical plausibility.

    Attributes:
        vertical_offset_m: Distance from the CG reference down to the
            antenna (CG height over ground minus antenna height over ground).
        longitudinal_offset_m: Distance aft of the CG reference.
        electric_length_m: Effective length of antenna and cable, including
            material variation.
    """

    vertical_offset_m: float
    longitudinal_offset_m: float
    electric_length_m: float

    @classmethod
    def from_config(cls, config: dict[str, float]) -> "AntennaInstallation":
        """Build an installation from a mapping.

        Each of ``vertical_offset``, ``longitudinal_offset`` and
        ``electric_length`` is given either in metres (``<name>_m``) or in
        feet (``<name>_ft``).

        Raises:
            KeyError: If a value is missing in both units.
        """
        return cls(
            vertical_offset_m=_length_m(config, "vertical_offset"),
            longitudinal_offset_m=_length_m(config, "longitudinal_offset"),
            electric_length_m=_length_m(config, "electric_length"),
        )

    @property
    def electric_length_ft(self) -> float:
        return self.electric_length_m * FEET_PER_METRE

    def body_position(self) -> Vector3:
        """Antenna position in the body frame, relative to the CG reference."""
        return Vector3(0.0, -self.vertical_offset_m, -self.longitudinal_offset_m)

    def earth_offset(self, context: UpdateContext) -> Vector3:
        """Antenna position relative to the CG reference, rotated by attitude."""
        return self.body_position().rotated(context.pitch_deg, context.bank_deg)

    def height_over_ground_m(self, context: UpdateContext) -> float:
        """Height of the antenna above the terrain, never below zero."""
        return max(0.0, context.plane_height_over_ground_m + self.earth_offset(context).y)


def _length_m(config: dict[str, float], name: str) -> float:
    if f"{name}_m" in config:
        return float(config[f"{name}_m"])
    if f"{name}_ft" in config:
        return float(config[f"{name}_ft"]) * METRES_PER_FOOT
    raise KeyError(f"{name}_m or {name}_ft")


class TransceiverPair(SimulationElement):
    """Transmit and receive antenna installations used by one altimeter.

    Pure configuration: the radio altimeter reads it every tick and nothing
    mutates it after construction.
    """

    def __init__(
        self,
        context: InitContext,
        identifier: str,
        transmitter: AntennaInstallation,
        receiver: AntennaInstallation,
    ) -> None:
        self._identifier = identifier
        self._transmitter = transmitter
        self._receiver = receiver
        context.register(identifier, self)

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def transmitter(self) -> AntennaInstallation:
        return self._transmitter

    @property
    def receiver(self) -> AntennaInstallation:
        return self._receiver

    def reflected_path_length_m(self, context: UpdateContext) -> float:
        """Geometric length of the transmitter to ground to receiver path.

        The ground is treated as a flat mirror: the path length equals the
        distance from the transmitter to the receiver's image below terrain.
        """
        transmitter_offset = self._transmitter.earth_offset(context)
        receiver_offset = self._receiver.earth_offset(context)

        separation = (transmitter_offset - receiver_offset).horizontal_magnitude()
        heights = self._transmitter.height_over_ground_m(context)
        heights += self._receiver.height_over_ground_m(context)

        return math.hypot(separation, heights)

    def electric_path_length_m(self, context: UpdateContext) -> float:
        """Reflected path plus the electric length of both antennas."""
        return (
            self.reflected_path_length_m(context)
            + self._transmitter.electric_length_m
            + self._receiver.electric_length_m
        )

    def configuration(self) -> tuple[AntennaInstallation, AntennaInstallation]:
        """Transmitter and receiver installations, for value comparison."""
        return self._transmitter, self._receiver

    def __repr__(self) -> str:
        return (
            f"TransceiverPair({self._identifier!r}, transmitter={self._transmitter}, "
            f"receiver={self._receiver})"
        )
