"""Platform detection: discover and resolve random sources."""

from __future__ import annotations

import platform as _platform

from passgen.sources import ALL_SOURCES
from passgen.sources.base import RandomSource
from passgen.sources.device import DeviceSource


def detect_available_sources() -> list[RandomSource]:
    """Instantiate and return all sources available on this machine."""
    available: list[RandomSource] = []
    for cls in ALL_SOURCES:
        src = cls()
        if src.is_available():
            available.append(src)
    return available


def open_source(spec: str) -> RandomSource:
    """Resolve *spec* to an (unopened) source.

    *spec* is either a registry name (``urandom``, ``system``) or a path,
    which is read as a device or file.
    """
    for cls in ALL_SOURCES:
        if cls.name == spec:
            return cls()
    return DeviceSource(spec)


def platform_info() -> dict:
    """Return basic platform metadata."""
    return {
        "system": _platform.system(),
        "machine": _platform.machine(),
        "python": _platform.python_version(),
    }
