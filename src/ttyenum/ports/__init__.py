from ttyenum.ports.classifier import classify_port
from ttyenum.ports.enumerator import iter_ports, list_ports
from ttyenum.ports.models import (
    AmbaPort,
    PnpPort,
    PortInfo,
    PortType,
    UnknownPort,
    UsbIdentity,
    UsbPort,
)
from ttyenum.ports.usb import build_usb_identity

__all__ = [
    "AmbaPort",
    "PnpPort",
    "PortInfo",
    "PortType",
    "UnknownPort",
    "UsbIdentity",
    "UsbPort",
    "build_usb_identity",
    "classify_port",
    "iter_ports",
    "list_ports",
]
