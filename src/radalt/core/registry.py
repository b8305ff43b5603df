"""Registry of named simulation elements.

Every element that exposes state to the visitation pass registers itself
under a unique identifier while the simulation is being built. A second
registration under the same identifier is a wiring mistake (for example two
radio altimeters both numbered 1) and is rejected.

Typical usage example:
    from radalt.core.registry import ElementRegistry

    registry = ElementRegistry()
    registry.register("radio_altimeter_1", engine)
    engine = registry.get("radio_altimeter_1")
"""

from typing import Any

from radalt.core.logging_system import get_logger

logger = get_logger(__name__)


class RegistryError(Exception):
    """Raised when registry operations fail."""


class ElementRegistry:
    """Registry of simulation elements keyed by identifier.

    Registration order is preserved, so listing the registry reproduces
    the order in which the simulation was constructed.

    Examples:
        >>> registry = ElementRegistry()
        >>> registry.register("radio_altimeter_1_transceivers", pair)
        >>> registry.is_registered("radio_altimeter_1_transceivers")
        True
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._elements: dict[str, Any] = {}

    def register(self, identifier: str, element: Any) -> None:
        """Register an element under an identifier.

        Args:
            identifier: Unique identifier (e.g., "radio_altimeter_2").
            element: Element instance.

        Raises:
            RegistryError: If the identifier is empty or already registered.
        """
        if not identifier:
            raise RegistryError("Element identifier cannot be empty")

        if identifier in self._elements:
            raise RegistryError(f"Element already registered: {identifier}")

        self._elements[identifier] = element
        logger.debug("Registered element: %s -> %s", identifier, type(element).__name__)

    def get(self, identifier: str) -> Any:
        """Get a registered element.

        Raises:
            RegistryError: If the identifier is not registered.
        """
        if identifier not in self._elements:
            raise RegistryError(f"Element not registered: {identifier}")

        return self._elements[identifier]

    def is_registered(self, identifier: str) -> bool:
        return identifier in self._elements

    def list_elements(self) -> list[str]:
        """Get registered identifiers in registration order."""
        return list(self._elements.keys())
