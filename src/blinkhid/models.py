"""Value types shared by the codec and the device facade."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Colour:
    """One LED colour. Channels are truncated to 8 bits on the wire."""
    red: int = 0
    green: int = 0
    blue: int = 0

    def to_hex(self) -> str:
        return f"#{self.red & 0xFF:02x}{self.green & 0xFF:02x}{self.blue & 0xFF:02x}"


class Mode(IntEnum):
    """Device operating mode (BlinkStick Pro and later)."""
    UNKNOWN = -1
    NORMAL = 0
    INVERSE = 1
    WS2812 = 2
    MULTI_LED_MIRROR = 3

    @classmethod
    def from_byte(cls, value: int) -> Mode:
        """Map a reply byte to a mode; anything unrecognised is UNKNOWN."""
        if value == (cls.UNKNOWN & 0xFF):
            return cls.UNKNOWN
        try:
            return cls(value)
        except ValueError:
            log.debug("Unrecognised mode byte 0x%02X", value)
            return cls.UNKNOWN


class DeviceType(Enum):
    UNKNOWN = "unknown"
    BASIC = "basic"
    PRO = "pro"
    SQUARE = "square"
    STRIP = "strip"
    NANO = "nano"
    FLEX = "flex"


class LedCountCache:
    """Last known LED count: either unknown or a cached value.

    Not synchronised. One instance belongs to one device facade.
    """

    def __init__(self) -> None:
        self._value: Optional[int] = None

    @property
    def is_known(self) -> bool:
        return self._value is not None

    @property
    def value(self) -> Optional[int]:
        return self._value

    def store(self, count: int) -> None:
        self._value = count

    def __repr__(self) -> str:
        if self._value is None:
            return "LedCountCache(Unknown)"
        return f"LedCountCache(Cached({self._value}))"
