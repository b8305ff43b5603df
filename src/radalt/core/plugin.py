"""Plugin interface for simulation systems.

Aircraft systems and avionics are wrapped as plugins so a host simulator can
drive them through one lifecycle: initialize, update once per frame,
handle messages, shutdown.

Typical usage example:
    from radalt.core.plugin import IPlugin, PluginMetadata, PluginType

    class MyAvionicsPlugin(IPlugin):
        def get_metadata(self) -> PluginMetadata:
            return PluginMetadata(
                name="my_avionics",
                version="1.0.0",
                author="RadAlt",
                plugin_type=PluginType.AVIONICS,
                provides=["my_service"],
            )
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PluginType(Enum):
    """Types of plugins in the system."""

    AVIONICS = "avionics"


@dataclass
class PluginMetadata:
    """Metadata describing a plugin.

    Attributes:
        name: Unique plugin identifier (e.g., "radio_altimeter").
        version: Semantic version string.
        author: Plugin author name or organization.
        plugin_type: Category of plugin.
        dependencies: Names of services this plugin requires.
        provides: Services this plugin provides.
        description: Optional human-readable description.
    """

    name: str
    version: str
    author: str
    plugin_type: PluginType
    dependencies: list[str] = field(default_factory=list)
    provides: list[str] = field(default_factory=list)
    description: str | None = None

    def __post_init__(self) -> None:
        """Validate metadata after initialization."""
        if not self.name:
            raise ValueError("Plugin name cannot be empty")
        if not self.version:
            raise ValueError("Plugin version cannot be empty")
        if not self.author:
            raise ValueError("Plugin author cannot be empty")


@dataclass
class PluginContext:
    """Context provided to plugins during initialization.

    Attributes:
        message_queue: Message queue for plugin communication.
        config: Plugin-specific configuration dictionary.
    """

    message_queue: Any  # MessageQueue
    config: dict[str, Any]


class IPlugin(ABC):
    """Base interface for all plugins."""

    @abstractmethod
    def get_metadata(self) -> PluginMetadata:
        """Return plugin metadata.

        Must be fast and must not perform initialization.
        """

    @abstractmethod
    def initialize(self, context: PluginContext) -> None:
        """Initialize the plugin.

        Called once when the plugin is loaded. Build owned systems and
        subscribe to message topics here.

        Args:
            context: Context providing access to core systems.
        """

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance plugin state by one frame.

        Args:
            dt: Delta time in seconds since last update.
        """

    @abstractmethod
    def shutdown(self) -> None:
        """Release resources and unsubscribe from topics."""

    @abstractmethod
    def handle_message(self, message: Any) -> None:
        """Handle a message delivered by the message queue."""
