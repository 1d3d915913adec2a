"""os.urandom and in-memory byte sources."""

from __future__ import annotations

import os

from passgen.sources.base import RandomSource


class SystemSource(RandomSource):
    """The platform CSPRNG through ``os.urandom``.

    Works where there is no ``/dev/urandom`` (Windows uses
    BCryptGenRandom underneath).
    """

    name = "system"
    description = "Platform CSPRNG via os.urandom"

    def is_available(self) -> bool:
        return True

    def open(self) -> None:
        pass

    def close(self) -> None:
        pass

    def _read(self, n_bytes: int) -> bytes:
        return os.urandom(n_bytes)


class BytesSource(RandomSource):
    """A fixed, scripted byte stream.

    Hands out *data* front to back and then reports end of stream.
    Handy for replaying a captured stream and for tests.
    """

    name = "bytes"
    description = "Scripted in-memory byte stream"

    def __init__(self, data: bytes = b"") -> None:
        super().__init__()
        self._data = bytes(data)
        self._pos = 0

    def is_available(self) -> bool:
        return True

    def open(self) -> None:
        pass

    def close(self) -> None:
        pass

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def _read(self, n_bytes: int) -> bytes:
        chunk = self._data[self._pos:self._pos + n_bytes]
        self._pos += len(chunk)
        return chunk
