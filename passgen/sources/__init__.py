"""Random byte source implementations."""

from passgen.sources.base import RandomSource
from passgen.sources.device import DeviceSource
from passgen.sources.system import BytesSource, SystemSource

# Named sources selectable from the command line. BytesSource needs data
# and is only constructed programmatically.
ALL_SOURCES: list[type[RandomSource]] = [
    DeviceSource,
    SystemSource,
]

__all__ = ["RandomSource", "DeviceSource", "SystemSource", "BytesSource", "ALL_SOURCES"]
