"""Failure taxonomy for secret generation.

Every error here is fatal to the run that raised it. Nothing retries.
"""

from __future__ import annotations


class PassgenError(RuntimeError):
    """Base class for all generation failures."""


class EntropySourceUnavailable(PassgenError):
    """The random byte source could not be opened."""


class EntropySourceExhausted(PassgenError):
    """The random byte source returned fewer bytes than requested."""

    def __init__(self, requested: int, received: int) -> None:
        super().__init__(
            f"random source exhausted: wanted {requested} bytes, got {received}"
        )
        self.requested = requested
        self.received = received


class DictionaryUnreadable(PassgenError):
    """The word list could not be opened or decoded."""


class InsufficientDomain(PassgenError):
    """Too few usable words remain to fill the domain."""

    def __init__(self, available: int, required: int) -> None:
        super().__init__(f"Dict size: {available} (need {required})")
        self.available = available
        self.required = required


class InvalidParameter(PassgenError):
    """The invocation parameter is not a usable number."""


class DomainIndexError(PassgenError, IndexError):
    """A symbol fell outside the domain it was mapped into."""
