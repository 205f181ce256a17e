"""Port identity records produced by enumeration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union, assert_never


@dataclass(frozen=True)
class UsbIdentity:
    vendor_id: int = 0      # 0 when idVendor is missing or not hex
    product_id: int = 0
    serial_number: str | None = None
    location: str | None = None   # bus topology address, e.g. "1-1.2"
    manufacturer: str | None = None
    product: str | None = None
    interface: str | None = None

    def description(self, basename: str) -> str:
        """Human label: product, else manufacturer, else *basename*, plus location.

        A value read from an empty attribute file ("") is still present and wins.
        """
        label = next(
            (v for v in (self.product, self.manufacturer) if v is not None),
            basename,
        )
        if self.location is not None:
            return f"{label} {self.location}"
        return label

    def hardware_id(self) -> str:
        hwid = f"USB VID:PID={self.vendor_id:04X}:{self.product_id:04X}"
        if self.serial_number is not None:
            hwid += f" SER={self.serial_number}"
        return hwid


# --- Port type variants ---

@dataclass(frozen=True)
class UsbPort:
    usb: UsbIdentity
    kind: ClassVar[str] = "usb"


@dataclass(frozen=True)
class PnpPort:
    kind: ClassVar[str] = "pnp"


@dataclass(frozen=True)
class AmbaPort:
    kind: ClassVar[str] = "amba"


@dataclass(frozen=True)
class UnknownPort:
    kind: ClassVar[str] = "unknown"


PortType = Union[UsbPort, PnpPort, AmbaPort, UnknownPort]


@dataclass(frozen=True)
class PortInfo:
    device_path: str    # as supplied, e.g. "/dev/ttyUSB0"
    name: str           # basename, e.g. "ttyUSB0"
    description: str
    hardware_id: str
    port_type: PortType

    @property
    def usb(self) -> UsbIdentity | None:
        if isinstance(self.port_type, UsbPort):
            return self.port_type.usb
        return None

    @property
    def vid(self) -> int | None:
        return self.usb.vendor_id if self.usb else None

    @property
    def pid(self) -> int | None:
        return self.usb.product_id if self.usb else None

    @property
    def serial_number(self) -> str | None:
        return self.usb.serial_number if self.usb else None

    @property
    def manufacturer(self) -> str | None:
        return self.usb.manufacturer if self.usb else None

    @property
    def product(self) -> str | None:
        return self.usb.product if self.usb else None

    @property
    def location(self) -> str | None:
        return self.usb.location if self.usb else None

    @property
    def interface(self) -> str | None:
        return self.usb.interface if self.usb else None

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation."""
        data: dict[str, Any] = {
            "device": self.device_path,
            "name": self.name,
            "description": self.description,
            "hwid": self.hardware_id,
            "type": self.port_type.kind,
        }
        match self.port_type:
            case UsbPort(usb=usb):
                data["usb"] = {
                    "vid": usb.vendor_id,
                    "pid": usb.product_id,
                    "serial_number": usb.serial_number,
                    "location": usb.location,
                    "manufacturer": usb.manufacturer,
                    "product": usb.product,
                    "interface": usb.interface,
                }
            case PnpPort() | AmbaPort() | UnknownPort():
                pass
            case _:
                assert_never(self.port_type)
        return data
