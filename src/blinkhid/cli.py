#!/usr/bin/env python3
"""
blinkhid - Command Line Interface

Entry point for the blinkhid package.
"""

import argparse
import logging
import sys

from blinkhid.__version__ import __version__


def _setup_logging(verbose=0):
    """Configure logging from the -v count."""
    if verbose >= 2:
        logging.basicConfig(level=logging.DEBUG, format='[%(levelname)s] %(name)s: %(message)s')
    elif verbose == 1:
        logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')
    else:
        logging.basicConfig(level=logging.WARNING)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="blinkhid",
        description="Control BlinkStick LED devices over HID",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    blinkhid list                     List connected devices
    blinkhid select BS012345-3.0      Use this device by default
    blinkhid channel 1                Use channel 1 when -c is omitted
    blinkhid colour ff0000            First LED red
    blinkhid colour 00ff00 -i 3       Fourth LED green
    blinkhid fill 0000ff              Every LED blue
    blinkhid off                      Every LED off
    blinkhid mode ws2812              Switch a Pro to WS2812 mode
    blinkhid count 32                 Tell the device it drives 32 LEDs
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v, -vv)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("list", help="List connected BlinkStick devices")

    select_parser = subparsers.add_parser("select", help="Select default device")
    select_parser.add_argument("serial", help="Serial from 'blinkhid list'")

    channel_parser = subparsers.add_parser("channel", help="Show or set default channel")
    channel_parser.add_argument("value", nargs="?", type=int, help="Channel number (0-255)")

    colour_parser = subparsers.add_parser("colour", aliases=["color"], help="Set one LED")
    colour_parser.add_argument("hex", help="Hex colour code (e.g., ff0000 for red)")
    colour_parser.add_argument("--channel", "-c", type=int, help="Channel (default from config)")
    colour_parser.add_argument("--index", "-i", type=int, default=0, help="LED index")
    colour_parser.add_argument("--serial", "-s", help="Device serial")

    fill_parser = subparsers.add_parser("fill", help="Set every LED on a channel")
    fill_parser.add_argument("hex", help="Hex colour code")
    fill_parser.add_argument("--channel", "-c", type=int, help="Channel (default from config)")
    fill_parser.add_argument("--serial", "-s", help="Device serial")

    off_parser = subparsers.add_parser("off", help="Turn LEDs off")
    off_parser.add_argument("--channel", "-c", type=int, help="Channel of a single LED")
    off_parser.add_argument("--index", "-i", type=int, help="Index of a single LED")
    off_parser.add_argument("--serial", "-s", help="Device serial")

    get_parser = subparsers.add_parser("get-colour", aliases=["get-color"],
                                       help="Read back one LED colour")
    get_parser.add_argument("--index", "-i", type=int, default=0, help="LED index")
    get_parser.add_argument("--serial", "-s", help="Device serial")

    mode_parser = subparsers.add_parser("mode", help="Show or set device mode")
    mode_parser.add_argument("value", nargs="?", help="normal, inverse, ws2812, multi_led_mirror or 0-3")
    mode_parser.add_argument("--serial", "-s", help="Device serial")

    count_parser = subparsers.add_parser("count", help="Show or set LED count")
    count_parser.add_argument("value", nargs="?", type=int, help="New LED count (1-255)")
    count_parser.add_argument("--serial", "-s", help="Device serial")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "list":
        return list_devices()
    elif args.command == "select":
        return select_device(args.serial)
    elif args.command == "channel":
        return channel_command(args.value)
    elif args.command in ("colour", "color"):
        return send_colour(args.hex, channel=args.channel, index=args.index, serial=args.serial)
    elif args.command == "fill":
        return fill_colour(args.hex, channel=args.channel, serial=args.serial)
    elif args.command == "off":
        return turn_off(channel=args.channel, index=args.index, serial=args.serial)
    elif args.command in ("get-colour", "get-color"):
        return show_colour(index=args.index, serial=args.serial)
    elif args.command == "mode":
        return mode_command(args.value, serial=args.serial)
    elif args.command == "count":
        return count_command(args.value, serial=args.serial)

    return 0


# =========================================================================
# Argument helpers
# =========================================================================

def parse_hex(hex_color):
    """Parse 'ff0000' or '#ff0000' into (r, g, b). Returns None if invalid."""
    hex_color = hex_color.lstrip('#')
    if len(hex_color) != 6:
        return None
    try:
        return (
            int(hex_color[0:2], 16),
            int(hex_color[2:4], 16),
            int(hex_color[4:6], 16),
        )
    except ValueError:
        return None


def parse_mode(value):
    """Parse a mode name or number. Returns None if invalid."""
    from blinkhid.models import Mode

    if value.isdigit():
        try:
            mode = Mode(int(value))
        except ValueError:
            return None
    else:
        mode = Mode.__members__.get(value.upper().replace('-', '_'))
    if mode is None or mode is Mode.UNKNOWN:
        return None
    return mode


def _resolve_channel(channel):
    if channel is not None:
        return channel
    from blinkhid.conf import get_default_channel
    return get_default_channel()


def _open_device(serial=None):
    """Open the requested (or selected) device."""
    from blinkhid.conf import get_selected_serial
    from blinkhid.device import open_blinkstick

    if serial is None:
        serial = get_selected_serial()
    return open_blinkstick(serial)


def _close_device(stick):
    if stick is not None and stick.transport is not None:
        stick.transport.close()


# =========================================================================
# Commands
# =========================================================================

def list_devices():
    """List connected devices, marking the selected one."""
    try:
        from blinkhid.conf import get_selected_serial
        from blinkhid.hid_transport import find_blinksticks

        devices = find_blinksticks()
        if not devices:
            print("No BlinkStick device detected.")
            return 1

        selected = get_selected_serial()
        for i, dev in enumerate(devices, 1):
            marker = "*" if selected and dev.serial == selected else " "
            print(f"{marker} [{i}] {dev.serial or 'unknown serial'} — "
                  f"{dev.product or 'BlinkStick'} ({dev.device_type.value})")
        return 0
    except Exception as e:
        print(f"Error listing devices: {e}")
        return 1


def select_device(serial):
    """Persist the default device serial."""
    try:
        from blinkhid.conf import save_selected_serial

        save_selected_serial(serial)
        print(f"Selected {serial}")
        return 0
    except Exception as e:
        print(f"Error saving selection: {e}")
        return 1


def channel_command(value=None):
    """Show the default channel, or persist *value* as the new default."""
    if value is not None and not 0 <= value < 256:
        print("Error: channel must be between 0 and 255")
        return 1

    try:
        from blinkhid.conf import get_default_channel, save_default_channel

        if value is None:
            print(get_default_channel())
            return 0
        save_default_channel(value)
        print(f"Default channel set to {value}")
        return 0
    except Exception as e:
        print(f"Error with default channel: {e}")
        return 1


def send_colour(hex_color, channel=None, index=0, serial=None):
    """Set one LED."""
    rgb = parse_hex(hex_color)
    if rgb is None:
        print("Error: Invalid hex color. Use format: ff0000")
        return 1

    stick = None
    try:
        channel = _resolve_channel(channel)
        stick = _open_device(serial)
        if not stick.set_colour(channel, index, *rgb):
            print("Error: device rejected colour")
            return 1
        print(f"Set LED {channel}:{index} to #{hex_color.lstrip('#')}")
        return 0
    except Exception as e:
        print(f"Error sending colour: {e}")
        return 1
    finally:
        _close_device(stick)


def fill_colour(hex_color, channel=None, serial=None):
    """Set every LED on a channel to one colour."""
    rgb = parse_hex(hex_color)
    if rgb is None:
        print("Error: Invalid hex color. Use format: ff0000")
        return 1

    stick = None
    try:
        channel = _resolve_channel(channel)
        stick = _open_device(serial)
        if not stick.set_all_colours(channel, *rgb):
            print("Error: device rejected colours")
            return 1
        print(f"Set {stick.get_led_count()} LEDs on channel {channel} "
              f"to #{hex_color.lstrip('#')}")
        return 0
    except Exception as e:
        print(f"Error sending colours: {e}")
        return 1
    finally:
        _close_device(stick)


def turn_off(channel=None, index=None, serial=None):
    """Turn one LED off, or all of them."""
    stick = None
    try:
        stick = _open_device(serial)
        if channel is None and index is None:
            ok = stick.off()
        else:
            ok = stick.off(channel or 0, index or 0)
        if not ok:
            print("Error: device rejected off")
            return 1
        return 0
    except Exception as e:
        print(f"Error turning off: {e}")
        return 1
    finally:
        _close_device(stick)


def show_colour(index=0, serial=None):
    """Print the colour of one LED."""
    stick = None
    try:
        stick = _open_device(serial)
        print(stick.get_colour(index).to_hex())
        return 0
    except Exception as e:
        print(f"Error reading colour: {e}")
        return 1
    finally:
        _close_device(stick)


def mode_command(value=None, serial=None):
    """Show the device mode, or set it when *value* is given."""
    mode = None
    if value is not None:
        mode = parse_mode(value)
        if mode is None:
            print(f"Error: Unknown mode '{value}'")
            return 1

    stick = None
    try:
        stick = _open_device(serial)
        if mode is None:
            print(stick.get_mode().name.lower())
            return 0
        if not stick.set_mode(mode):
            print("Error: device rejected mode")
            return 1
        print(f"Mode set to {mode.name.lower()}")
        return 0
    except Exception as e:
        print(f"Error with mode: {e}")
        return 1
    finally:
        _close_device(stick)


def count_command(value=None, serial=None):
    """Show the LED count, or set it when *value* is given."""
    if value is not None and not 0 < value < 256:
        print("Error: LED count must be between 1 and 255")
        return 1

    stick = None
    try:
        stick = _open_device(serial)
        if value is None:
            print(stick.get_led_count())
            return 0
        if not stick.set_led_count(value):
            print("Error: device rejected LED count")
            return 1
        print(f"LED count set to {value}")
        return 0
    except Exception as e:
        print(f"Error with LED count: {e}")
        return 1
    finally:
        _close_device(stick)


if __name__ == "__main__":
    sys.exit(main())
