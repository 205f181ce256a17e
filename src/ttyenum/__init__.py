"""Enumerate serial ports from the Linux sysfs device tree."""

__version__ = "0.1.0"

from ttyenum.ports import (  # noqa: E402
    AmbaPort,
    PnpPort,
    PortInfo,
    PortType,
    UnknownPort,
    UsbIdentity,
    UsbPort,
    classify_port,
    iter_ports,
    list_ports,
)

__all__ = [
    "__version__",
    "AmbaPort",
    "PnpPort",
    "PortInfo",
    "PortType",
    "UnknownPort",
    "UsbIdentity",
    "UsbPort",
    "classify_port",
    "iter_ports",
    "list_ports",
]
