"""Fixed-size ring buffer holding the bytes passed between two operations."""

from __future__ import annotations

__all__ = ["RingError", "Ring"]


class RingError(Exception):
    """Raised when a ring buffer has not enough room or data for a request."""


class Ring:
    """Byte ring buffer with a write head, a read tail and a look-ahead peek position.

    Reads, writes and peeks are contiguous: a request never wraps around the end
    of the storage, so the room reported by the ``*room`` methods is the size of
    the largest contiguous block available.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"ring size must be positive, got {size}")
        self.data = bytearray(size)
        self.size = size
        self.head = 0
        self.tail = 0
        self.peek_pos = 0
        self.full = False

    def __repr__(self) -> str:
        return (
            f"Ring(size={self.size}, full={self.full}, head={self.head}, "
            f"tail={self.tail}, peek={self.peek_pos})"
        )

    def __len__(self) -> int:
        return self.total_used()

    def is_full(self) -> bool:
        """Whether no byte can be written anymore."""
        return self.full

    def is_empty(self) -> bool:
        """Whether there is no byte to read."""
        return self.head == self.tail and not self.full

    def headroom(self) -> int:
        """Number of contiguous bytes that can be written at the head."""
        if self.head < self.tail:
            return self.tail - self.head
        if self.tail < self.head:
            return self.size - self.head
        if self.is_empty():
            return self.size - self.head
        return 0

    def tailroom(self) -> int:
        """Number of contiguous bytes that can be read at the tail."""
        if self.head < self.tail:
            return self.size - self.tail
        if self.tail < self.head:
            return self.head - self.tail
        if self.full:
            return self.size - self.tail
        return 0

    def peekroom(self) -> int:
        """Number of contiguous bytes that can be peeked past the peek position."""
        head, tail, peek = self.head, self.tail, self.peek_pos
        if head < tail <= peek:
            return self.size - peek
        if peek < head < tail:
            return head - peek
        if tail <= peek < head:
            return head - peek
        if self.full and tail <= peek:
            return self.size - peek
        if self.full and peek <= head:
            return head - peek
        return 0

    def total_used(self) -> int:
        """Number of bytes stored, across the wrap-around."""
        if self.head < self.tail:
            return self.head + self.size - self.tail
        if self.tail < self.head:
            return self.head - self.tail
        return self.size if self.full else 0

    def write(self, data: bytes | bytearray | memoryview) -> None:
        """Append data at the head; raise RingError if there is not enough room."""
        size = len(data)
        if size == 0:
            return
        room = self.headroom()
        if room < size:
            raise RingError(f"Not enough room ({room}) to write {size} bytes")
        self.data[self.head:self.head + size] = data
        self.head = (self.head + size) % self.size
        self.peek_pos = self.tail
        self.full = self.head == self.tail

    def read(self, size: int) -> bytes:
        """Remove and return size bytes from the tail."""
        room = self.tailroom()
        if room < size:
            raise RingError(f"Not enough data ({room}) to read {size} bytes")
        out = bytes(self.data[self.tail:self.tail + size])
        self.tail = (self.tail + size) % self.size
        self.peek_pos = self.tail
        self.full = False
        return out

    def peek(self, size: int) -> bytes:
        """Return the next size bytes after the peek position without consuming them."""
        room = self.peekroom()
        if room < size:
            raise RingError(f"Not enough data ({room}) to peek {size} bytes")
        out = bytes(self.data[self.peek_pos:self.peek_pos + size])
        self.peek_pos = (self.peek_pos + size) % self.size
        return out