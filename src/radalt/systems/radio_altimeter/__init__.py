"""Radio altimeter systems package.

Provides antenna installation geometry, the ALA-52B radio altimeter unit,
the per-channel wiring and the dual-channel installation.
"""

from radalt.systems.radio_altimeter.ala52b import (
    InstallationDelay,
    RadioAltimeterEngine,
    SignStatus,
)
from radalt.systems.radio_altimeter.antenna import AntennaInstallation, TransceiverPair
from radalt.systems.radio_altimeter.channel import AltimeterChannel
from radalt.systems.radio_altimeter.installations import (
    ChannelConfiguration,
    a380_channel_configurations,
    load_channel_configurations,
    validate_independence,
)
from radalt.systems.radio_altimeter.subsystem import RedundantRadioAltimeters

__all__ = [
    "AltimeterChannel",
    "AntennaInstallation",
    "ChannelConfiguration",
    "InstallationDelay",
    "RadioAltimeterEngine",
    "RedundantRadioAltimeters",
    "SignStatus",
    "TransceiverPair",
    "a380_channel_configurations",
    "load_channel_configurations",
    "validate_independence",
]
