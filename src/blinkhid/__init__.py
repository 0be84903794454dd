"""
blinkhid - BlinkStick LED control over HID feature reports

Features:
- Single-LED and multi-LED colour writes (legacy and indexed reports)
- Colour read-back, device mode and LED count get/set
- Variant detection (Basic, Pro, Square, Strip, Nano, Flex)

Usage:
    # As a library
    from blinkhid import open_blinkstick
    stick = open_blinkstick()
    stick.set_colour(0, 0, 255, 0, 0)

    # Command line
    blinkhid list             # List connected devices
    blinkhid colour ff0000    # First LED red
    blinkhid off              # All LEDs off
"""

from blinkhid.__version__ import __version__
from blinkhid.device import BlinkStick, open_blinkstick
from blinkhid.hid_transport import (
    BlinkStickInfo,
    HidApiTransport,
    HidTransport,
    find_blinksticks,
)
from blinkhid.models import Colour, DeviceType, Mode
from blinkhid.report_id import select_report_id

__all__ = [
    # Version
    "__version__",
    # Device
    "BlinkStick",
    "open_blinkstick",
    # Transport
    "HidTransport",
    "HidApiTransport",
    "BlinkStickInfo",
    "find_blinksticks",
    # Types
    "Colour",
    "DeviceType",
    "Mode",
    "select_report_id",
]
