"""Gesture Store Inspect - integrity report for gesture store files."""
from .logic import inspect_store

__all__ = ["inspect_store"]
