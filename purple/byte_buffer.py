"""A growable byte buffer with an upper size limit."""

from __future__ import annotations

from collections.abc import Iterator


class ByteBuffer:
    """Bytes collected from the stream, never more than ``max_size``."""

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError("max_size cannot be negative")
        self.max_size = max_size
        self._data = bytearray()

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        item = self._data[index]
        return bytes(item) if isinstance(index, slice) else item

    def __iter__(self) -> Iterator[int]:
        return iter(bytes(self._data))

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __repr__(self) -> str:
        return f"ByteBuffer(max_size={self.max_size}, data={bytes(self._data)!r})"

    @property
    def free(self) -> int:
        """How many more bytes fit."""
        return self.max_size - len(self._data)

    def at(self, index: int) -> int:
        """Byte at ``index``, raising IndexError outside ``0..len-1``."""
        if not 0 <= index < len(self._data):
            raise IndexError("Index out of range")
        return self._data[index]

    def append(self, data: bytes) -> None:
        """Add ``data`` at the end, raising BufferError if it does not fit."""
        if len(data) > self.free:
            raise BufferError("Buffer would exceed its maximum size")
        self._data += data

    def clear(self) -> None:
        """Drop all contents."""
        self._data.clear()