"""Random bytes read from a device node or file."""

from __future__ import annotations

import os
from typing import BinaryIO

from passgen.errors import EntropySourceUnavailable
from passgen.sources.base import RandomSource


class DeviceSource(RandomSource):
    """Kernel CSPRNG (or any readable file) as a byte stream.

    ``/dev/urandom`` never blocks and never runs dry, so a short read from
    it means something is badly wrong. Pointing the source at a regular
    file replays that file's bytes and fails once they run out.
    """

    name = "urandom"
    description = "Kernel CSPRNG via /dev/urandom"

    def __init__(self, path: str = "/dev/urandom") -> None:
        super().__init__()
        self.path = path
        self._fh: BinaryIO | None = None

    def is_available(self) -> bool:
        return os.access(self.path, os.R_OK)

    def open(self) -> None:
        try:
            self._fh = open(self.path, "rb")
        except OSError as e:
            raise EntropySourceUnavailable(f"cannot open {self.path}: {e.strerror}") from e

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def _read(self, n_bytes: int) -> bytes:
        if self._fh is None:
            raise EntropySourceUnavailable(f"{self.path} is not open")
        try:
            return self._fh.read(n_bytes)
        except OSError as e:
            raise EntropySourceUnavailable(f"cannot read {self.path}: {e.strerror}") from e
