"""Message queue for communication between plugins.

Plugins publish state to topics and subscribe to the topics they consume,
so the radio altimeter plugin never holds a reference to the electrical
or physics plugins that feed it.

Typical usage example:
    from radalt.core.messaging import Message, MessagePriority, MessageQueue, MessageTopic

    queue = MessageQueue()
    queue.subscribe(MessageTopic.RADIO_ALTIMETER_STATE, handler)
    queue.publish(Message(
        sender="radio_altimeter",
        recipients=["*"],
        topic=MessageTopic.RADIO_ALTIMETER_STATE,
        data={"RA_1_RADIO_ALTITUDE": 2500.0},
    ))
    queue.process()
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from queue import PriorityQueue
from typing import Any


class MessagePriority(Enum):
    """Priority levels for messages.

    Messages are processed in order from CRITICAL to LOW.
    """

    CRITICAL = 0
    HIGH = 1
    NORMAL = 2
    LOW = 3


@dataclass(order=True)
class Message:
    """Inter-plugin message.

    Ordering uses priority first, then creation time, so messages of equal
    priority are delivered in the order they were published.

    Attributes:
        priority: Message priority (stored as int for comparison).
        timestamp: Monotonic creation time.
        sender: Name of the plugin sending the message.
        recipients: List of recipient plugin names, or ["*"] for broadcast.
        topic: Message topic (see MessageTopic).
        data: Message payload.
    """

    priority: int = field(compare=True)
    timestamp: float = field(default_factory=time.monotonic, compare=True)
    sender: str = field(default="", compare=False)
    recipients: list[str] = field(default_factory=list, compare=False)
    topic: str = field(default="", compare=False)
    data: dict[str, Any] = field(default_factory=dict, compare=False)

    def __init__(
        self,
        sender: str,
        recipients: list[str],
        topic: str,
        data: dict[str, Any],
        priority: MessagePriority = MessagePriority.NORMAL,
    ) -> None:
        self.priority = priority.value
        self.timestamp = time.monotonic()
        self.sender = sender
        self.recipients = recipients
        self.topic = topic
        self.data = data


class MessageTopic:
    """Well-known topic names."""

    # Inputs consumed by the radio altimeters
    ELECTRICAL_STATE = "system.electrical.state"
    POSITION_UPDATED = "flight.position_updated"

    # Outputs
    RADIO_ALTIMETER_STATE = "avionics.radio_altimeter.state"


class MessageQueue:
    """Priority message queue for plugin communication.

    Messages are buffered by publish() and delivered in priority order when
    process() is called, once per simulation frame.

    Examples:
        >>> queue = MessageQueue()
        >>> queue.subscribe("system.electrical.state", on_power)
        >>> queue.publish(Message("electrical", ["*"], "system.electrical.state", {}))
        >>> queue.process()
        1
    """

    def __init__(self) -> None:
        """Initialize an empty message queue."""
        self._queue: PriorityQueue[Message] = PriorityQueue()
        self._subscriptions: dict[str, list[Callable[[Message], None]]] = {}

    def subscribe(self, topic: str, handler: Callable[[Message], None]) -> None:
        """Subscribe a handler to a topic.

        Args:
            topic: Topic string to subscribe to.
            handler: Callable that accepts a Message as its only parameter.
        """
        self._subscriptions.setdefault(topic, []).append(handler)

    def unsubscribe(self, topic: str, handler: Callable[[Message], None]) -> None:
        """Unsubscribe a handler from a topic.

        Unsubscribing a handler that is not subscribed is a no-op.
        """
        if topic in self._subscriptions:
            self._subscriptions[topic] = [h for h in self._subscriptions[topic] if h != handler]

            if not self._subscriptions[topic]:
                del self._subscriptions[topic]

    def publish(self, message: Message) -> None:
        """Queue a message for delivery on the next process() call."""
        self._queue.put(message)

    def process(self, max_messages: int = 100) -> int:
        """Deliver queued messages.

        Args:
            max_messages: Maximum number of messages to deliver in this call.
                Bounds the work done if handlers publish more messages.

        Returns:
            Number of messages processed.
        """
        processed = 0

        while not self._queue.empty() and processed < max_messages:
            message = self._queue.get()
            self._dispatch(message)
            processed += 1

        return processed

    def _dispatch(self, message: Message) -> None:
        for handler in list(self._subscriptions.get(message.topic, [])):
            handler(message)

    def get_subscriber_count(self, topic: str) -> int:
        return len(self._subscriptions.get(topic, []))
