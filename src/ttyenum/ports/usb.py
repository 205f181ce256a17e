"""Build a UsbIdentity from a USB device directory in sysfs."""

from __future__ import annotations

from pathlib import Path

from ttyenum.ports.models import UsbIdentity
from ttyenum.sysfs.attributes import read_hex16, read_text
from ttyenum.sysfs.source import AttributeSource, default_source


def build_usb_identity(
    usb_device_dir: Path | None,
    source: AttributeSource | None = None,
) -> UsbIdentity:
    """Read vendor/product identity from *usb_device_dir*.

    The directory must be the USB device node (e.g. ``.../usb1/1-1``), not
    one of its interfaces (``.../1-1:1.0``); the id files live only on the
    device. A None directory gives the all-default identity.
    """
    source = source or default_source()
    location = None
    if usb_device_dir is not None and usb_device_dir.name:
        location = usb_device_dir.name
    return UsbIdentity(
        vendor_id=read_hex16(source, usb_device_dir, "idVendor"),
        product_id=read_hex16(source, usb_device_dir, "idProduct"),
        serial_number=read_text(source, usb_device_dir, "serial"),
        location=location,
        manufacturer=read_text(source, usb_device_dir, "manufacturer"),
        product=read_text(source, usb_device_dir, "product"),
        interface=read_text(source, usb_device_dir, "interface"),
    )
