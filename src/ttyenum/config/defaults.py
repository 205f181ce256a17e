"""Sensible defaults and paths for ttyenum configuration."""

from pathlib import Path

# Default config file location
DEFAULT_CONFIG_DIR = Path.home() / ".config" / "ttyenum"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.yaml"

# sysfs class directory listing every tty by name
DEFAULT_TTY_CLASS_ROOT = "/sys/class/tty"

# Candidate device nodes, in reporting order
DEFAULT_PATTERNS = (
    "/dev/ttyS*",      # 8250/16550 serial lines
    "/dev/ttyUSB*",    # usb-serial adapters
    "/dev/ttyACM*",    # CDC ACM modems
    "/dev/ttyAMA*",    # ARM AMBA PL011 UARTs
    "/dev/rfcomm*",    # Bluetooth RFCOMM
)

# Persistent alias directories maintained by udev
DEFAULT_LINK_DIRS = (
    "/dev/serial/by-id",
    "/dev/serial/by-path",
)
