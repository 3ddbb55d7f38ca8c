"""Gesture Store Import - decode, normalize and export Android gesture stores."""
from .decoder import GestureStoreDecoder, decode_gestures, load_gestures, read_store_bytes
from .normalize import normalize_stroke
from .resources import default_store_path

__all__ = [
    "GestureStoreDecoder",
    "decode_gestures",
    "load_gestures",
    "read_store_bytes",
    "normalize_stroke",
    "default_store_path",
]
