"""Test doubles used by the backend double's own tests.

The backend fakes handed out by presets live in ``backend_double.doubles``.
This package holds the test-only pieces:

- Spy: records what it receives for later assertions
- Consumer: a small piece of API code written against IBackend, used to
  show that the stub isolates the code under test from a real backend

Example:
    >>> from tests.doubles import EventSpy
    >>> spy = EventSpy(stop_after=2)
    >>> backend.for_each_event(epoch, spy)
    >>> assert len(spy.received) == 2
"""

from .event_spy import EventSpy
from .staking_api import StakingAPI

__all__ = ["EventSpy", "StakingAPI"]
