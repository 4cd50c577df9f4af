"""ISubscription interface for event subscriptions."""

from abc import ABC, abstractmethod


class ISubscription(ABC):
    """Handle of an event subscription (wallet or pool events).

    Example:
        >>> sub = backend.subscribe(sink)
        >>> sub.unsubscribe()
        >>> assert sub.active is False
    """

    @abstractmethod
    def unsubscribe(self) -> None:
        """Stop delivery; idempotent."""

    @property
    @abstractmethod
    def active(self) -> bool:
        """Whether events are still delivered."""
