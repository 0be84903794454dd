"""Replace the hid module for every test in this directory."""
from unittest.mock import MagicMock

import pytest

from blinkhid import hid_transport


class FakeHIDException(Exception):
    """Stand-in for hid.HIDException."""


@pytest.fixture(autouse=True)
def fake_hid(monkeypatch):
    """Patch hid_transport so no libhidapi is needed."""
    fake = MagicMock()
    fake.HIDException = FakeHIDException
    monkeypatch.setattr(hid_transport, 'hidapi', fake, raising=False)
    monkeypatch.setattr(hid_transport, 'HIDAPI_AVAILABLE', True)
    return fake
