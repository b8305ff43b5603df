"""Radio altimeter plugin.

Wraps the dual radio altimeter installation for a host simulator. Bus power
arrives on ELECTRICAL_STATE, aircraft height and attitude (radians) on
POSITION_UPDATED. Each frame the plugin runs one simulation tick and
publishes both channels' outputs on RADIO_ALTIMETER_STATE.

Plugin configuration keys:
    installation_file: YAML installation to load instead of the A380 one.
    radio_altimeters: Inline installation section (same shape as the file).
    powered_buses: Bus names energized before the first ELECTRICAL_STATE.

Typical usage:
    plugin = RadioAltimeterPlugin()
    plugin.initialize(PluginContext(message_queue=queue, config={}))
    plugin.update(0.05)
"""

import math
from typing import Any

from radalt.core.config import ConfigError, ConfigLoader
from radalt.core.logging_system import get_logger
from radalt.core.messaging import Message, MessagePriority, MessageQueue, MessageTopic
from radalt.core.plugin import IPlugin, PluginContext, PluginMetadata, PluginType
from radalt.simulation.context import InitContext, UpdateContext
from radalt.simulation.simulation import Simulation
from radalt.systems.electrical.base import BusPowerState
from radalt.systems.radio_altimeter.installations import (
    ChannelConfiguration,
    load_channel_configurations,
)
from radalt.systems.radio_altimeter.subsystem import RedundantRadioAltimeters

logger = get_logger(__name__)


class RadioAltimeterPlugin(IPlugin):
    """Dual radio altimeter avionics plugin."""

    def __init__(self) -> None:
        """Initialize radio altimeter plugin."""
        self._context: PluginContext | None = None
        self._message_queue: MessageQueue | None = None

        self.init_context: InitContext | None = None
        self.altimeters: RedundantRadioAltimeters | None = None
        self.simulation: Simulation | None = None

        self._update_context = UpdateContext(delta_s=0.0)

    def get_metadata(self) -> PluginMetadata:
        """Get plugin metadata."""
        return PluginMetadata(
            name="radio_altimeter",
            version="1.0.0",
            author="RadAlt",
            plugin_type=PluginType.AVIONICS,
            description="Dual ALA-52B radio altimeters",
            dependencies=["electrical"],
            provides=["radio_altimeter"],
        )

    def initialize(self, context: PluginContext) -> None:
        """Build the radio altimeters and subscribe to their inputs.

        Raises:
            ConfigError: If the configured installation is invalid.
        """
        self._context = context
        self._message_queue = context.message_queue

        self.init_context = InitContext()
        self.altimeters = RedundantRadioAltimeters(
            self.init_context, self._channel_configurations(context.config)
        )

        buses = BusPowerState()
        powered_buses = context.config.get("powered_buses", [])
        try:
            buses.update_from_mapping({name: True for name in powered_buses})
        except ValueError as e:
            raise ConfigError(f"Invalid powered_buses entry: {e}") from e
        self.simulation = Simulation(self.altimeters, buses)

        if self._message_queue:
            self._message_queue.subscribe(MessageTopic.ELECTRICAL_STATE, self.handle_message)
            self._message_queue.subscribe(MessageTopic.POSITION_UPDATED, self.handle_message)

        logger.info("Radio altimeter plugin initialized")

    @staticmethod
    def _channel_configurations(
        config: dict[str, Any],
    ) -> tuple[ChannelConfiguration, ChannelConfiguration] | None:
        if "installation_file" in config:
            return load_channel_configurations(config["installation_file"])
        if "radio_altimeters" in config:
            return load_channel_configurations(
                ConfigLoader({"radio_altimeters": config["radio_altimeters"]})
            )
        return None

    def update(self, dt: float) -> None:
        """Run one tick and publish the radio altitudes.

        Args:
            dt: Time delta in seconds
        """
        if not self.simulation:
            return

        self._update_context = self._update_context.advanced(dt)
        variables = self.simulation.tick(self._update_context)

        if self._message_queue:
            self._message_queue.publish(
                Message(
                    sender="radio_altimeter",
                    recipients=["*"],
                    topic=MessageTopic.RADIO_ALTIMETER_STATE,
                    data=dict(variables),
                    priority=MessagePriority.HIGH,
                )
            )

    def shutdown(self) -> None:
        """Shutdown plugin."""
        if self._message_queue:
            self._message_queue.unsubscribe(MessageTopic.ELECTRICAL_STATE, self.handle_message)
            self._message_queue.unsubscribe(MessageTopic.POSITION_UPDATED, self.handle_message)

        logger.info("Radio altimeter plugin shut down")

    def handle_message(self, message: Message) -> None:
        """Handle incoming messages.

        Args:
            message: Message to handle
        """
        if message.topic == MessageTopic.ELECTRICAL_STATE:
            self._handle_electrical_state(message)
        elif message.topic == MessageTopic.POSITION_UPDATED:
            self._handle_position_update(message)

    def _handle_electrical_state(self, message: Message) -> None:
        """Apply a ``{"buses": {"AC_1": True, ...}}`` update."""
        buses = message.data.get("buses") if message.data else None
        if not isinstance(buses, dict) or not self.simulation:
            return

        for name, powered in buses.items():
            try:
                self.simulation.buses.update_from_mapping({name: powered})
            except ValueError as e:
                logger.warning("Ignoring bus from %s: %s", message.sender, e)

    def _handle_position_update(self, message: Message) -> None:
        """Take height over ground and attitude from physics.

        ``rotation.pitch`` and ``rotation.roll`` are Euler angles in radians.
        Fields missing from the message keep their last value.
        """
        data = message.data
        if not data:
            return

        height = data.get("height_over_ground_m")
        pitch = roll = None
        rotation = data.get("rotation")
        if isinstance(rotation, dict):
            pitch = rotation.get("pitch")
            roll = rotation.get("roll")
        elif rotation is not None:
            logger.warning("Ignoring rotation from %s: %r", message.sender, rotation)

        self._update_context = self._update_context.with_aircraft_state(
            plane_height_over_ground_m=float(height) if height is not None else None,
            pitch_deg=math.degrees(pitch) if pitch is not None else None,
            bank_deg=math.degrees(roll) if roll is not None else None,
        )

    @property
    def update_context(self) -> UpdateContext:
        return self._update_context
