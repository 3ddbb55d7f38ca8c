"""Gesture store error taxonomy."""
from __future__ import annotations


class GestureStoreError(Exception):
    """Base class for every gesture store failure."""

    code = "E_GESTURE_STORE"

    def __init__(self, message: str, offset: int | None = None):
        super().__init__(message)
        self.offset = offset


class ResourceUnavailableError(GestureStoreError):
    """The store file could not be located or read."""

    code = "E_RESOURCE_UNAVAILABLE"


class OutOfBoundsError(GestureStoreError):
    """A read would consume more bytes than remain in the buffer."""

    code = "E_OUT_OF_BOUNDS"


class TruncatedInputError(OutOfBoundsError):
    """The store ended before the record hierarchy was complete."""

    code = "E_TRUNCATED"


class TextDecodeError(GestureStoreError):
    code = "E_TEXT_DECODE"
