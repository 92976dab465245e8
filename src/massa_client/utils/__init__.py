"""Utility helpers for the Massa SDK."""

from .amounts import MAS_DECIMALS, from_mas, to_mas

__all__ = ["MAS_DECIMALS", "from_mas", "to_mas"]
