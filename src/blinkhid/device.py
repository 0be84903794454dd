#!/usr/bin/env python3
"""
BlinkStick device facade.

``BlinkStick`` turns colour/mode/count operations into feature reports
and sends them through a borrowed ``HidTransport``.  Failures never
raise: mutators return ``False``, accessors return ``Mode.UNKNOWN``,
``Colour(0, 0, 0)`` or ``0``, and the cause is logged.

Usage::

    from blinkhid import open_blinkstick

    stick = open_blinkstick()
    stick.set_colour(0, 0, 255, 0, 0)
    stick.set_all_colours(0, 0, 0, 64)
    stick.off()
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .constants import BYTES_PER_LED
from .hid_transport import HidApiTransport, HidTransport, find_blinksticks
from .models import Colour, DeviceType, LedCountCache, Mode
from .report_codec import (
    build_colours_message,
    build_control_message,
    build_count_message,
    build_mode_message,
    colour_fits,
    colour_request,
    decode_colour,
    decode_count,
    decode_mode,
)
from .report_id import select_report_id

log = logging.getLogger(__name__)


class BlinkStick:
    """One BlinkStick controller behind an open HID transport.

    The transport is borrowed: ``BlinkStick`` never opens or closes it.
    Passing ``None`` gives an unbound device on which every operation
    fails without touching the codec.

    Not thread-safe.  The LED-count cache is plain instance state, so
    callers sharing one instance across threads must hold a lock around
    each call.
    """

    def __init__(self, transport: Optional[HidTransport],
                 device_type: DeviceType = DeviceType.UNKNOWN):
        self._transport = transport
        self._device_type = device_type
        self._led_count = LedCountCache()

    @property
    def transport(self) -> Optional[HidTransport]:
        return self._transport

    @property
    def device_type(self) -> DeviceType:
        return self._device_type

    @property
    def is_valid(self) -> bool:
        """Whether a transport handle is bound."""
        return self._transport is not None

    @property
    def led_count_cache(self) -> LedCountCache:
        return self._led_count

    def _bound(self) -> bool:
        if self._transport is None:
            log.warning("input hid handle is null")
            return False
        return True

    # -- Mode ----------------------------------------------------------

    def set_mode(self, mode: Mode) -> bool:
        if not self._bound():
            return False
        if self._transport.send_feature_report(build_mode_message(mode)) == -1:
            log.warning("error writing mode to device")
            return False
        return True

    def get_mode(self) -> Mode:
        """Query the device mode.

        The query is issued as a *send* feature report and byte 1 of the
        sent buffer is decoded afterwards.  Devices only report a mode
        through this path if the transport writes the reply back into
        the buffer.
        """
        if not self._bound():
            return Mode.UNKNOWN
        data = bytearray(build_mode_message(Mode.UNKNOWN))
        if self._transport.send_feature_report(data) == -1:
            log.warning("error reading mode from device")
            return Mode.UNKNOWN
        return decode_mode(data)

    # -- Colour --------------------------------------------------------

    def set_colour(self, channel: int, index: int,
                   red: int, green: int, blue: int) -> bool:
        if not self._bound():
            return False
        msg = build_control_message(index, channel, Colour(red, green, blue))
        if self._transport.send_feature_report(msg) == -1:
            log.warning("error writing colour to device")
            return False
        return True

    def set_all_colours(self, channel: int, red: int, green: int, blue: int) -> bool:
        """Set every LED on *channel* to one colour."""
        total_leds = self.get_led_count()
        colours = [Colour(red, green, blue) for _ in range(total_leds)]
        return self.set_colours(channel, colours)

    def set_colours(self, channel: int, colours: Sequence[Colour]) -> bool:
        """Write a colour array to *channel*, LED 0 first.

        The report size follows the device's LED count, not
        ``len(colours)``; extra colours are dropped and missing ones are
        sent as off.
        """
        if not self._bound():
            return False

        report_id, max_leds = select_report_id(self.get_led_count() * BYTES_PER_LED)
        msg = build_colours_message(channel, report_id, max_leds, colours)
        if self._transport.send_feature_report(msg) == -1:
            log.warning("error writing colour to device")
            return False
        return True

    def get_colour(self, index: int) -> Colour:
        """Read back the colour of LED *index*.  Failures read as off."""
        if not self._bound():
            return Colour(0, 0, 0)
        data = colour_request(index)
        if not colour_fits(index, data):
            log.warning("led index %d is out of range for colour read", index)
            return Colour(0, 0, 0)
        if self._transport.get_feature_report(data) == -1:
            log.warning("unable to read colour from blinkstick")
            return Colour(0, 0, 0)
        return decode_colour(index, data)

    def off(self, channel: Optional[int] = None, index: Optional[int] = None) -> bool:
        """Turn one LED off, or every LED on channel 0 when called bare."""
        if channel is None and index is None:
            return self.set_all_colours(0, 0, 0, 0)
        return self.set_colour(channel or 0, index or 0, 0, 0, 0)

    # -- LED count -----------------------------------------------------

    def get_led_count(self) -> int:
        """LED count, read from the device once and then cached.

        A failed read is logged and whatever byte 1 of the query buffer
        holds is cached anyway; there is no retry.
        """
        if not self._bound():
            return 0
        if self._led_count.is_known:
            return self._led_count.value

        data = bytearray(build_count_message(0))
        if self._transport.get_feature_report(data) == -1:
            log.warning("error reading led count from device")

        self._led_count.store(decode_count(data))
        return self._led_count.value

    def set_led_count(self, count: int) -> bool:
        if not self._bound():
            return False
        if self._transport.send_feature_report(build_count_message(count)) == -1:
            log.warning("error writing led count to device")
            return False
        self._led_count.store(count & 0xFF)
        return True

    def __repr__(self) -> str:
        return (f"BlinkStick(type={self._device_type.value}, "
                f"bound={self.is_valid}, led_count={self._led_count!r})")


def open_blinkstick(serial: Optional[str] = None) -> BlinkStick:
    """Open the first BlinkStick (or the one with *serial*).

    Raises:
        RuntimeError: No matching device is connected.
        ImportError: HIDAPI is not installed.
    """
    devices = find_blinksticks()
    if serial:
        devices = [d for d in devices if d.serial == serial]
    if not devices:
        target = f"serial {serial}" if serial else "any serial"
        raise RuntimeError(f"No BlinkStick found ({target})")

    info = devices[0]
    transport = HidApiTransport(serial=info.serial or None, path=info.path or None)
    transport.open()
    log.info("Opened BlinkStick %s (%s)", info.serial, info.device_type.value)
    return BlinkStick(transport, info.device_type)
