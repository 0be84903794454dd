"""Tests for conf.py — JSON config persistence."""

import json
import os
import tempfile
import unittest
from unittest.mock import patch

from blinkhid import conf


class _TempConfigMixin:
    """Point conf at a throwaway config directory."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.config_dir = os.path.join(self._tmp.name, 'blinkhid')
        self.config_path = os.path.join(self.config_dir, 'config.json')
        self._patches = [
            patch('blinkhid.conf.CONFIG_DIR', self.config_dir),
            patch('blinkhid.conf.CONFIG_PATH', self.config_path),
        ]
        for p in self._patches:
            p.start()

    def tearDown(self):
        for p in self._patches:
            p.stop()
        self._tmp.cleanup()


class TestLoadSave(_TempConfigMixin, unittest.TestCase):

    def test_missing_file_is_empty(self):
        self.assertEqual(conf.load_config(), {})

    def test_corrupt_file_is_empty(self):
        os.makedirs(self.config_dir)
        with open(self.config_path, 'w') as f:
            f.write('{not json')
        self.assertEqual(conf.load_config(), {})

    def test_non_dict_is_empty(self):
        os.makedirs(self.config_dir)
        with open(self.config_path, 'w') as f:
            json.dump([1, 2], f)
        self.assertEqual(conf.load_config(), {})

    def test_save_creates_directory(self):
        conf.save_config({'a': 1})
        self.assertTrue(os.path.isfile(self.config_path))
        self.assertEqual(conf.load_config(), {'a': 1})


class TestSelectedSerial(_TempConfigMixin, unittest.TestCase):

    def test_unset(self):
        self.assertIsNone(conf.get_selected_serial())

    def test_roundtrip(self):
        conf.save_selected_serial('BS000001-3.0')
        self.assertEqual(conf.get_selected_serial(), 'BS000001-3.0')

    def test_preserves_other_keys(self):
        conf.save_default_channel(2)
        conf.save_selected_serial('BS000001-3.0')
        self.assertEqual(conf.get_default_channel(), 2)


class TestDefaultChannel(_TempConfigMixin, unittest.TestCase):

    def test_default_zero(self):
        self.assertEqual(conf.get_default_channel(), 0)

    def test_roundtrip(self):
        conf.save_default_channel(1)
        self.assertEqual(conf.get_default_channel(), 1)

    def test_garbage_value(self):
        conf.save_config({'default_channel': 'two'})
        self.assertEqual(conf.get_default_channel(), 0)


if __name__ == '__main__':
    unittest.main()
