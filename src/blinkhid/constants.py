"""Shared constants for blinkhid.

USB identifiers and feature-report layouts for the BlinkStick family.
"""

# =========================================================================
# USB identifiers
# =========================================================================

BLINKSTICK_VID = 0x20A0
BLINKSTICK_PID = 0x41E5

# Release numbers (bcdDevice) for generation-3 hardware
RELEASE_SQUARE = 0x0200
RELEASE_STRIP = 0x0201
RELEASE_NANO = 0x0202
RELEASE_FLEX = 0x0203

# =========================================================================
# Feature report tags
# =========================================================================

REPORT_LEGACY_COLOUR = 0x01   # single-LED set, also index-0 colour read
REPORT_MODE = 0x04
REPORT_INDEXED_COLOUR = 0x05  # [0x05, channel, index, R, G, B]
REPORT_LED_COUNT = 0x81

# =========================================================================
# Message sizes
# =========================================================================

LEGACY_COLOUR_MSG_SIZE = 4
INDEXED_COLOUR_MSG_SIZE = 6
MODE_MSG_SIZE = 2
COUNT_MSG_SIZE = 2
LEGACY_COLOUR_READ_SIZE = 33

# [report_id, channel] before the GRB payload
COLOURS_HEADER_SIZE = 2

BYTES_PER_LED = 3
