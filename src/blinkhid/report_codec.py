#!/usr/bin/env python3
"""
Feature-report codec for BlinkStick LED controllers.

Pure functions: operation parameters → report bytes, and reply buffers →
typed values.  No I/O happens here; see ``hid_transport`` for that.

Two colour layouts coexist on the wire:

  Legacy (single LED, channel 0 / index 0)::

      [0x01, R, G, B]

  Indexed (any other channel or index)::

      [0x05, channel, index, R, G, B]

Multi-LED arrays use report ids 6..10 and carry LEDs in GRB order::

      [report_id, channel, G0, R0, B0, G1, R1, B1, ...]

Mode and LED-count messages are two bytes, ``[tag, value]``.  The same
layout is used to set a value and to query it; byte 1 of the buffer
after the transport call holds the device's answer.
"""

from __future__ import annotations

from typing import Sequence

from .constants import (
    BYTES_PER_LED,
    COLOURS_HEADER_SIZE,
    LEGACY_COLOUR_READ_SIZE,
    REPORT_INDEXED_COLOUR,
    REPORT_LED_COUNT,
    REPORT_LEGACY_COLOUR,
    REPORT_MODE,
)
from .models import Colour, Mode
from .report_id import select_report_id


def _byte(value: int) -> int:
    """Low 8 bits of *value* (300 → 44, -1 → 255)."""
    return value & 0xFF


# =========================================================================
# Encoders
# =========================================================================

def build_control_message(index: int, channel: int, colour: Colour) -> bytes:
    """Build a single-LED set message.

    Index 0 on channel 0 is the only LED of the original BlinkStick and
    uses the 4-byte legacy report.  Everything else needs the 6-byte
    indexed report.  Channel and index are not range checked.
    """
    rgb = [_byte(colour.red), _byte(colour.green), _byte(colour.blue)]
    if index == 0 and channel == 0:
        return bytes([REPORT_LEGACY_COLOUR] + rgb)
    return bytes([REPORT_INDEXED_COLOUR, _byte(channel), _byte(index)] + rgb)


def build_mode_message(mode: int) -> bytes:
    """Build ``[0x04, mode]``.  Send with ``Mode.UNKNOWN`` to query."""
    return bytes([REPORT_MODE, _byte(mode)])


def build_count_message(count: int) -> bytes:
    """Build ``[0x81, count]``.  Send with 0 to query."""
    return bytes([REPORT_LED_COUNT, _byte(count)])


def build_colours_message(
    channel: int,
    report_id: int,
    max_leds: int,
    colours: Sequence[Colour],
) -> bytes:
    """Build a multi-LED colour array report.

    The buffer always holds *max_leds* slots.  Colours beyond capacity
    are dropped; unused slots stay zero (off).  Each LED is written as
    G, R, B.
    """
    msg = bytearray(max_leds * BYTES_PER_LED + COLOURS_HEADER_SIZE)
    msg[0] = _byte(report_id)
    msg[1] = _byte(channel)

    offset = COLOURS_HEADER_SIZE
    for colour in colours[:max_leds]:
        msg[offset] = _byte(colour.green)
        msg[offset + 1] = _byte(colour.red)
        msg[offset + 2] = _byte(colour.blue)
        offset += BYTES_PER_LED
    return bytes(msg)


def colour_request(index: int) -> bytearray:
    """Return the zeroed, report-id-tagged buffer used to read LED *index*."""
    if index == 0:
        data = bytearray(LEGACY_COLOUR_READ_SIZE)
        data[0] = REPORT_LEGACY_COLOUR
        return data

    report_id, max_leds = select_report_id((index + 1) * BYTES_PER_LED)
    data = bytearray(max_leds * BYTES_PER_LED + COLOURS_HEADER_SIZE)
    data[0] = report_id
    return data


# =========================================================================
# Decoders
# =========================================================================

def decode_mode(buffer: Sequence[int]) -> Mode:
    """Mode byte from a mode message buffer after the transport call."""
    return Mode.from_byte(buffer[1])


def decode_count(buffer: Sequence[int]) -> int:
    """LED count from a count message buffer after the transport call."""
    return buffer[1]


def decode_colour(index: int, buffer: Sequence[int]) -> Colour:
    """Colour of LED *index* from a buffer filled by ``colour_request``.

    Index 0 reads the legacy report (R, G, B at bytes 1..3).  Higher
    indices read the array report, which stores G, R, B.
    """
    if index == 0:
        return Colour(buffer[1], buffer[2], buffer[3])
    base = index * BYTES_PER_LED
    return Colour(
        red=buffer[base + 3],
        green=buffer[base + 2],
        blue=buffer[base + 4],
    )


def colour_fits(index: int, buffer: Sequence[int]) -> bool:
    """Whether LED *index* lies inside a ``colour_request`` buffer.

    The largest array report holds 64 LEDs, so indices 64 and up have no
    slot to read.
    """
    if index < 0:
        return False
    if index == 0:
        return len(buffer) > 3
    return index * BYTES_PER_LED + 4 < len(buffer)
