"""Fake subscription handed out by the backend double."""

from ..domain.interfaces import ISubscription


class FakeSubscription(ISubscription):
    """Subscription that delivers nothing and only tracks unsubscribe.

    Example:
        >>> sub = FakeSubscription()
        >>> sub.unsubscribe()
        >>> assert sub.active is False
    """

    def __init__(self):
        self._active = True

    def unsubscribe(self) -> None:
        self._active = False

    @property
    def active(self) -> bool:
        return self._active
