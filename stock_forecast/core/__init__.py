"""Core configuration for the stock forecast engine."""

from .config import CONFIG, DISPLAY_DECIMALS, OUTBOUND_MOVEMENT_TYPES

__all__ = ["CONFIG", "DISPLAY_DECIMALS", "OUTBOUND_MOVEMENT_TYPES"]
