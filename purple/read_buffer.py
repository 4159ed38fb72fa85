"""Fixed capacity buffer holding bytes read from the transport."""

from __future__ import annotations


class ReadBuffer:
    """Bytes received but not yet consumed, bounded by ``capacity``."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity cannot be negative")
        self._capacity = capacity
        self._data = bytearray()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def data(self) -> bytes:
        """The readable bytes."""
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def writable_capacity(self) -> int:
        """Room left for new bytes."""
        return self._capacity - len(self._data)

    def feed(self, data: bytes) -> int:
        """Store as much of ``data`` as fits and return how many bytes were taken.

        Raises BufferError when the buffer is already full.
        """
        room = self.writable_capacity()
        if room == 0:
            raise BufferError("Cannot grow the read buffer!")
        taken = bytes(data[:room])
        self._data += taken
        return len(taken)

    def consume(self, n: int) -> None:
        """Discard the first ``n`` readable bytes."""
        if n >= len(self._data):
            self._data.clear()
        else:
            del self._data[:n]

    def reset(self) -> None:
        """Discard everything."""
        self._data.clear()