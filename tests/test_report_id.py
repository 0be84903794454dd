"""Tests for report_id.py — colour-array report selection."""

import pytest

from blinkhid.report_id import REPORT_TIERS, ReportTier, select_report_id


class TestReportTiers:
    """The static tier table."""

    def test_five_tiers(self):
        assert len(REPORT_TIERS) == 5

    def test_thresholds_ascending(self):
        limits = [t.max_bytes for t in REPORT_TIERS]
        assert limits == sorted(limits)

    def test_report_ids_6_through_10(self):
        assert [t.report_id for t in REPORT_TIERS] == [6, 7, 8, 9, 10]

    def test_last_two_tiers_share_capacity(self):
        """Report 9 and 10 both carry 64 LEDs but stay separate."""
        assert REPORT_TIERS[3].max_leds == REPORT_TIERS[4].max_leds == 64
        assert REPORT_TIERS[3].report_id != REPORT_TIERS[4].report_id

    def test_tier_is_frozen(self):
        tier = ReportTier(24, 6, 8)
        with pytest.raises(AttributeError):
            tier.report_id = 7


class TestSelectReportId:
    """Boundary table for select_report_id()."""

    @pytest.mark.parametrize("count, expected", [
        (0, (6, 8)),
        (24, (6, 8)),
        (25, (7, 16)),
        (48, (7, 16)),
        (49, (8, 32)),
        (96, (8, 32)),
        (97, (9, 64)),
        (192, (9, 64)),
        (193, (10, 64)),
        (384, (10, 64)),
        (385, (10, 64)),
        (10000, (10, 64)),
    ])
    def test_boundaries(self, count, expected):
        assert select_report_id(count) == expected

    def test_single_led(self):
        assert select_report_id(3) == (6, 8)
