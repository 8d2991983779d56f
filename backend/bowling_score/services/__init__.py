"""Internal helpers (pure, no I/O)."""

from .validation import (
    PINS,
    validate_frame_total,
    validate_pins,
    validate_roll_sequence,
)

__all__ = [
    "PINS",
    "validate_frame_total",
    "validate_pins",
    "validate_roll_sequence",
]
