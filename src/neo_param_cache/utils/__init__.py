"""Utility helpers for neo-param-cache."""

from .datetime import utc_now, to_utc

__all__ = ["utc_now", "to_utc"]
