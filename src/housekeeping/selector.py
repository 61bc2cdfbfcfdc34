"""Candidate selection: which queue's head room gets cleaned next.

Rules are checked in order, first match wins:

1. A head that is already cleaned is selected so the caller can discard it.
2. A head that is free at ``current_time`` is selected (no crew idle time).
3. Otherwise the head with the smallest cleaning end, ties going to the
   arrival queue, then the cleaning-end queue, then the unreserved queue.
4. With every queue exhausted, NONE.

Within rules 1 and 2 the queues are probed in the same fixed precedence.
"""

from __future__ import annotations

from housekeeping.queues import QueueSource, RoomQueues
from housekeeping.types import RoomRecord

# Probe order for every rule. Also the tie-break order for the fallback.
PRECEDENCE = (
    QueueSource.BY_ARRIVAL,
    QueueSource.BY_CLEANING_END,
    QueueSource.UNRESERVED,
)


def queue_heads(queues: RoomQueues) -> list[tuple[QueueSource, RoomRecord]]:
    """Non-empty queue heads in precedence order."""
    heads = []
    for source in PRECEDENCE:
        room = queues.head(source)
        if room is not None:
            heads.append((source, room))
    return heads


def select_source(queues: RoomQueues, current_time: int) -> QueueSource:
    """Pick the queue to dequeue from at current_time."""
    if queues.is_exhausted:
        return QueueSource.NONE
    heads = queue_heads(queues)

    for source, room in heads:
        if room.cleaning_completed:
            return source

    for source, room in heads:
        if room.is_free_at(current_time):
            return source

    # sorted() is stable, so equal cleaning ends keep precedence order
    heads = sorted(heads, key=lambda head: head[1].cleaning_end)
    return heads[0][0]
