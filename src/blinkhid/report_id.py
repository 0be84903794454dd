"""Report-ID selection for multi-LED colour arrays.

The firmware exposes one feature report per payload size.  A request for
N channel bytes (LEDs * 3) uses the smallest report that holds it.
Requests larger than every tier use the last one.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportTier:
    """One row of the report table.

    Attributes:
        max_bytes: Largest channel-byte count this tier accepts.
        report_id: Feature report id sent as byte 0.
        max_leds: LED slots carried by the report payload.
    """
    max_bytes: int
    report_id: int
    max_leds: int


# Tiers 9 and 10 both carry 64 LEDs; they are distinct wire formats.
REPORT_TIERS: tuple[ReportTier, ...] = (
    ReportTier(8 * 3, 6, 8),
    ReportTier(16 * 3, 7, 16),
    ReportTier(32 * 3, 8, 32),
    ReportTier(64 * 3, 9, 64),
    ReportTier(128 * 3, 10, 64),
)


def select_report_id(total_channel_bytes: int) -> tuple[int, int]:
    """Return ``(report_id, max_leds)`` for a payload of *total_channel_bytes*.

    >>> select_report_id(24)
    (6, 8)
    >>> select_report_id(10000)
    (10, 64)
    """
    for tier in REPORT_TIERS:
        if total_channel_bytes <= tier.max_bytes:
            return tier.report_id, tier.max_leds
    last = REPORT_TIERS[-1]
    return last.report_id, last.max_leds
