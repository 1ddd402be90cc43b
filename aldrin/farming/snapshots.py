"""Chronological view over a farming snapshot ring.

The program writes snapshots into a fixed array of SNAPSHOT_QUEUE_CAPACITY
slots at ``next_index % capacity`` and advances the cursor, overwriting the
oldest entry once the ring is full. The slot under the cursor is therefore
the oldest surviving snapshot, and walking forward from it with wraparound
yields snapshots in time order. Slots never written are uninitialized and
skipped.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator

from aldrin.constants import SNAPSHOT_QUEUE_CAPACITY
from aldrin.farming.layout import Snapshot, SnapshotQueue


class SnapshotRing:
    """Read-only ring view of a decoded SnapshotQueue."""

    def __init__(self, queue: SnapshotQueue) -> None:
        if not queue.snapshots:
            raise ValueError("Snapshot queue has no slots")
        self._slots = queue.snapshots
        self.capacity = len(queue.snapshots)
        self.tip = queue.next_index % self.capacity

    def __iter__(self) -> Iterator[Snapshot]:
        """Initialized snapshots, oldest first."""
        for step in range(self.capacity):
            snapshot = self._slots[(self.tip + step) % self.capacity]
            if snapshot.is_initialized:
                yield snapshot

    def __len__(self) -> int:
        return sum(1 for snapshot in self._slots if snapshot.is_initialized)

    def between(self, start: int, end: int) -> Iterator[Snapshot]:
        """Snapshots with ``start <= time <= end``, oldest first."""
        for snapshot in self:
            if start <= snapshot.time <= end:
                yield snapshot

    def latest(self) -> Snapshot | None:
        """Most recently written snapshot, if any."""
        newest = self._slots[(self.tip - 1) % self.capacity]
        return newest if newest.is_initialized else None


def empty_snapshot() -> Snapshot:
    return Snapshot(is_initialized=False, tokens_frozen=0, farming_tokens=0, time=0)


def empty_queue(capacity: int = SNAPSHOT_QUEUE_CAPACITY) -> SnapshotQueue:
    """A queue with every slot uninitialized and the cursor at zero."""
    return SnapshotQueue(next_index=0, snapshots=(empty_snapshot(),) * capacity)


def push_snapshot(queue: SnapshotQueue, snapshot: Snapshot) -> SnapshotQueue:
    """Copy of ``queue`` with ``snapshot`` written at the cursor.

    Mirrors the program's write: the slot at ``next_index % capacity`` is
    replaced and the cursor advances by one, wrapping to stay in
    [0, capacity).
    """
    capacity = len(queue.snapshots)
    slot = queue.next_index % capacity
    slots = list(queue.snapshots)
    slots[slot] = snapshot
    return dataclasses.replace(queue, next_index=(slot + 1) % capacity, snapshots=tuple(slots))
