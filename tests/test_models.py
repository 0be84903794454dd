"""Tests for models.py — Colour, Mode, DeviceType, LedCountCache."""

import unittest
from dataclasses import FrozenInstanceError

from blinkhid.models import Colour, DeviceType, LedCountCache, Mode


class TestColour(unittest.TestCase):

    def test_defaults_off(self):
        colour = Colour()
        self.assertEqual((colour.red, colour.green, colour.blue), (0, 0, 0))

    def test_equality(self):
        self.assertEqual(Colour(1, 2, 3), Colour(red=1, green=2, blue=3))

    def test_to_hex(self):
        self.assertEqual(Colour(255, 16, 0).to_hex(), "#ff1000")

    def test_to_hex_truncates(self):
        self.assertEqual(Colour(300, 0, 0).to_hex(), "#2c0000")

    def test_frozen(self):
        colour = Colour(1, 2, 3)
        with self.assertRaises(FrozenInstanceError):
            colour.red = 9

    def test_hashable(self):
        self.assertEqual(len({Colour(1, 2, 3), Colour(1, 2, 3)}), 1)


class TestMode(unittest.TestCase):

    def test_values(self):
        self.assertEqual(Mode.NORMAL, 0)
        self.assertEqual(Mode.INVERSE, 1)
        self.assertEqual(Mode.WS2812, 2)
        self.assertEqual(Mode.MULTI_LED_MIRROR, 3)
        self.assertEqual(Mode.UNKNOWN, -1)

    def test_from_byte_known(self):
        self.assertIs(Mode.from_byte(2), Mode.WS2812)

    def test_from_byte_ff_is_unknown(self):
        self.assertIs(Mode.from_byte(0xFF), Mode.UNKNOWN)

    def test_from_byte_unrecognised(self):
        self.assertIs(Mode.from_byte(17), Mode.UNKNOWN)


class TestDeviceType(unittest.TestCase):

    def test_values_are_lowercase_names(self):
        for member in DeviceType:
            self.assertEqual(member.value, member.name.lower())


class TestLedCountCache(unittest.TestCase):

    def test_starts_unknown(self):
        cache = LedCountCache()
        self.assertFalse(cache.is_known)
        self.assertIsNone(cache.value)

    def test_store(self):
        cache = LedCountCache()
        cache.store(8)
        self.assertTrue(cache.is_known)
        self.assertEqual(cache.value, 8)

    def test_zero_is_a_cached_value(self):
        cache = LedCountCache()
        cache.store(0)
        self.assertTrue(cache.is_known)

    def test_repr(self):
        cache = LedCountCache()
        self.assertEqual(repr(cache), "LedCountCache(Unknown)")
        cache.store(5)
        self.assertEqual(repr(cache), "LedCountCache(Cached(5))")


if __name__ == '__main__':
    unittest.main()
