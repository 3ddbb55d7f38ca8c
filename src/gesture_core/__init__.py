"""Gesture store core - format constants, byte cursor, errors and data model."""
from .cursor import ByteCursor
from .errors import (
    GestureStoreError,
    OutOfBoundsError,
    ResourceUnavailableError,
    TextDecodeError,
    TruncatedInputError,
)
from .models import Gesture, Point, Stroke

__all__ = [
    "ByteCursor",
    "GestureStoreError",
    "OutOfBoundsError",
    "ResourceUnavailableError",
    "TextDecodeError",
    "TruncatedInputError",
    "Gesture",
    "Point",
    "Stroke",
]
