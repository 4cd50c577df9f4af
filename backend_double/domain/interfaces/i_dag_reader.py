"""IDagReader interface for consensus and DAG queries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Callable, Dict, List, Optional

from ..helpers.operation_markers import fallible, streams
from ..value_objects.dag import EpochStats, Event, EventHeaderData
from ..value_objects.primitives import (
    BlockIndex,
    BlockNumber,
    Epoch,
    EventHash,
    EventIndex,
    StakerID,
    Timestamp,
)


class IDagReader(ABC):
    """Interface for DAG and epoch queries.

    Events are addressed by short identifiers ("epoch:lamport:hash prefix")
    as accepted by the RPC layer.

    Example:
        >>> event = backend.get_event("1:3:a2395846")
        >>> heads = backend.get_heads(LATEST_BLOCK)
    """

    @abstractmethod
    @fallible
    def get_event(self, short_event_id: str) -> Optional[Event]:
        """Event addressed by ``short_event_id``."""

    @abstractmethod
    @fallible
    def get_event_header(self, short_event_id: str) -> Optional[EventHeaderData]:
        """Header of the event addressed by ``short_event_id``."""

    @abstractmethod
    @fallible
    def get_consensus_time(self, short_event_id: str) -> Timestamp:
        """Consensus time assigned to the event."""

    @abstractmethod
    @fallible
    def get_heads(self, epoch: BlockNumber) -> List[EventHash]:
        """Heads of the DAG in ``epoch``."""

    @abstractmethod
    def current_epoch(self) -> Epoch:
        """Epoch currently being sealed."""

    @abstractmethod
    @fallible
    def get_epoch_stats(self, requested_epoch: BlockNumber) -> Optional[EpochStats]:
        """Statistics of ``requested_epoch``."""

    @abstractmethod
    @fallible
    @streams(Event)
    def for_each_event(self, epoch: BlockNumber, on_event: Callable[[Event], bool]) -> None:
        """Call ``on_event`` for every event of ``epoch``.

        Iteration stops early when ``on_event`` returns False.
        """

    @abstractmethod
    @fallible
    def ttf_report(
        self, until_block: BlockNumber, max_blocks: BlockIndex, mode: str
    ) -> Dict[EventHash, timedelta]:
        """Time-to-finality per event.

        Args:
            until_block: Last block to include
            max_blocks: Number of blocks to look back
            mode: "arrival_time" or "claimed_time"
        """

    @abstractmethod
    @fallible
    def validator_time_drifts(
        self, epoch: BlockNumber, max_events: EventIndex
    ) -> Dict[StakerID, Dict[EventHash, timedelta]]:
        """Clock drift of each validator per event."""
