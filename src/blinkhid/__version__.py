"""blinkhid version information."""

__version__ = "0.3.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.1.0 - Report codec and report-id selection, single-LED and array writes
# 0.2.0 - Colour read-back, mode and LED-count queries, LED-count cache
# 0.3.0 - Variant detection from serial/release number, CLI, config file
