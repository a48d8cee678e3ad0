"""Errors raised by the layout engine."""

from typing import Optional


class ConfigOutOfRange(ValueError):
    """A wizard configuration value lies outside its documented range."""

    def __init__(self, field_name: str, value, lo, hi, reason: Optional[str] = None):
        self.field_name = field_name
        self.value = value
        self.lo = lo
        self.hi = hi
        detail = reason or f"is outside [{lo}, {hi}]"
        super().__init__(f"{field_name}={value!r} {detail}")
