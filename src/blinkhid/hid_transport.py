#!/usr/bin/env python3
"""
HID transport layer for BlinkStick devices.

The ``HidTransport`` ABC abstracts feature-report I/O so that:
  • Tests can inject a mock transport (no real hardware needed).
  • ``HidApiTransport`` provides real I/O via HIDAPI.

Both report calls follow the HIDAPI convention of returning -1 on error
instead of raising, so the device facade never sees library exceptions.

Linux dependency:
  • hidapi: ``pip install hid`` (needs libhidapi — ``apt install libhidapi-hidraw0``)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from .constants import (
    BLINKSTICK_PID,
    BLINKSTICK_VID,
    RELEASE_FLEX,
    RELEASE_NANO,
    RELEASE_SQUARE,
    RELEASE_STRIP,
)
from .models import DeviceType

# Optional USB backend — graceful import
try:
    import hid as hidapi
    HIDAPI_AVAILABLE = True
except ImportError:
    HIDAPI_AVAILABLE = False

log = logging.getLogger(__name__)

_HIDAPI_INSTALL_HINT = (
    "hid is not installed. Install with: pip install hid\n"
    "Also need libhidapi: apt install libhidapi-hidraw0 (Debian/Ubuntu) "
    "or dnf install hidapi (Fedora)"
)


# =========================================================================
# Abstract HID transport
# =========================================================================

class HidTransport(ABC):
    """Abstract feature-report transport — mockable for testing."""

    @abstractmethod
    def open(self) -> None:
        """Open the HID device."""

    @abstractmethod
    def close(self) -> None:
        """Close the HID device."""

    @abstractmethod
    def send_feature_report(self, data: bytes) -> int:
        """Send a feature report (byte 0 = report id).

        Returns bytes written, or -1 on error.
        """

    @abstractmethod
    def get_feature_report(self, buffer: bytearray) -> int:
        """Read a feature report into *buffer* in place.

        ``buffer[0]`` holds the requested report id on entry and the
        length of *buffer* is the report size.  Returns bytes read, or
        -1 on error.
        """

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """Whether the device is currently open."""

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, *exc):
        self.close()


# =========================================================================
# Real transport: HIDAPI
# =========================================================================

class HidApiTransport(HidTransport):
    """Feature-report transport using HIDAPI (``hid`` package).

    HIDAPI uses the OS HID driver, which does not need root access once
    a udev rule grants the user access to the hidraw node.

    Requires: ``pip install hid`` + libhidapi
    """

    def __init__(self, vid: int = BLINKSTICK_VID, pid: int = BLINKSTICK_PID,
                 serial: Optional[str] = None, path: Optional[bytes] = None):
        if not HIDAPI_AVAILABLE:
            raise ImportError(_HIDAPI_INSTALL_HINT)
        self._vid = vid
        self._pid = pid
        self._serial = serial
        self._path = path
        self._device = None
        self._is_open = False

    def open(self) -> None:
        """Open HID device by path, or by VID/PID (and serial)."""
        if self._path is not None:
            self._device = hidapi.Device(path=self._path)
        else:
            kwargs = {'vid': self._vid, 'pid': self._pid}
            if self._serial:
                kwargs['serial'] = self._serial
            self._device = hidapi.Device(**kwargs)
        self._is_open = True
        log.debug("Opened HID device %04x:%04x serial=%s",
                  self._vid, self._pid, self._serial)

    def close(self) -> None:
        """Close HID device."""
        if self._device is not None:
            try:
                self._device.close()
            except hidapi.HIDException as e:
                log.debug("Error closing HID device: %s", e)
            self._device = None
        self._is_open = False

    def send_feature_report(self, data: bytes) -> int:
        if not self._is_open or self._device is None:
            log.debug("send_feature_report on closed transport")
            return -1
        try:
            return self._device.send_feature_report(bytes(data))
        except (hidapi.HIDException, OSError, ValueError) as e:
            log.debug("send_feature_report failed: %s", e)
            return -1

    def get_feature_report(self, buffer: bytearray) -> int:
        if not self._is_open or self._device is None:
            log.debug("get_feature_report on closed transport")
            return -1
        try:
            data = self._device.get_feature_report(buffer[0], len(buffer))
        except (hidapi.HIDException, OSError, ValueError) as e:
            log.debug("get_feature_report failed: %s", e)
            return -1
        n = min(len(data), len(buffer))
        buffer[:n] = data[:n]
        return n

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def serial(self) -> Optional[str]:
        if self._device is not None:
            try:
                return self._device.serial
            except hidapi.HIDException:
                pass
        return self._serial


# =========================================================================
# Device identification
# =========================================================================

@dataclass
class BlinkStickInfo:
    """One entry from HID enumeration."""
    path: bytes
    serial: str = ""
    release_number: int = 0
    manufacturer: str = ""
    product: str = ""
    device_type: DeviceType = DeviceType.UNKNOWN


_RELEASE_TO_TYPE = {
    RELEASE_SQUARE: DeviceType.SQUARE,
    RELEASE_STRIP: DeviceType.STRIP,
    RELEASE_NANO: DeviceType.NANO,
    RELEASE_FLEX: DeviceType.FLEX,
}


def device_type_for(serial: Optional[str], release_number: int) -> DeviceType:
    """Identify the variant from serial (``BS000000-3.1``) and bcdDevice.

    The major version digit sits three characters from the end of the
    serial.  Generation 3 variants share a serial scheme and differ only
    by release number.
    """
    if not serial or len(serial) < 3:
        return DeviceType.UNKNOWN
    major = serial[-3]
    if major == '1':
        return DeviceType.BASIC
    if major == '2':
        return DeviceType.PRO
    if major == '3':
        return _RELEASE_TO_TYPE.get(release_number, DeviceType.UNKNOWN)
    return DeviceType.UNKNOWN


def find_blinksticks(vid: int = BLINKSTICK_VID,
                     pid: int = BLINKSTICK_PID) -> List[BlinkStickInfo]:
    """List connected BlinkStick devices via HIDAPI enumeration.

    Returns an empty list when HIDAPI is unavailable.
    """
    if not HIDAPI_AVAILABLE:
        log.warning("hid is not installed; cannot enumerate devices")
        return []

    devices = []
    for info in hidapi.enumerate(vid, pid):
        serial = info.get('serial_number', '') or ""
        release = info.get('release_number', 0) or 0
        devices.append(BlinkStickInfo(
            path=info.get('path', b''),
            serial=serial,
            release_number=release,
            manufacturer=info.get('manufacturer_string', '') or "",
            product=info.get('product_string', '') or "",
            device_type=device_type_for(serial, release),
        ))
    log.debug("Found %d BlinkStick device(s)", len(devices))
    return devices
