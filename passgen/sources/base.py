"""Abstract base class for all random byte sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

from passgen.errors import EntropySourceExhausted


class RandomSource(ABC):
    """Base class for a random byte source.

    Every source declares metadata and implements ``is_available``,
    ``open``, ``close`` and ``_read``. Sources are context managers::

        with DeviceSource() as src:
            chunk = src.read(8)

    ``read`` either returns exactly the requested number of bytes or
    raises :class:`EntropySourceExhausted`.
    """

    name: str = "unnamed"
    description: str = ""

    def __init__(self) -> None:
        self.bytes_read = 0

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if the source can operate on this machine."""
        ...

    @abstractmethod
    def open(self) -> None:
        """Acquire the underlying handle.

        Raises :class:`EntropySourceUnavailable` on failure.
        """
        ...

    @abstractmethod
    def close(self) -> None:
        ...

    @abstractmethod
    def _read(self, n_bytes: int) -> bytes:
        """Read up to *n_bytes*. May return fewer at end of stream."""
        ...

    def read(self, n_bytes: int) -> bytes:
        """Return exactly *n_bytes* of random data."""
        data = self._read(n_bytes)
        self.bytes_read += len(data)
        if len(data) < n_bytes:
            raise EntropySourceExhausted(n_bytes, len(data))
        return data

    def __enter__(self) -> RandomSource:
        self.open()
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
