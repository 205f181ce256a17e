"""Classify a tty device node by walking its sysfs topology."""

from __future__ import annotations

import logging
from pathlib import Path, PurePath

from ttyenum.config.defaults import DEFAULT_TTY_CLASS_ROOT
from ttyenum.ports.models import AmbaPort, PnpPort, PortInfo, PortType, UnknownPort, UsbPort
from ttyenum.ports.usb import build_usb_identity
from ttyenum.sysfs.attributes import read_text
from ttyenum.sysfs.source import AttributeSource, default_source

logger = logging.getLogger("ttyenum.classifier")

# Subsystems backed by a USB device, and how many levels above the tty's
# "device" directory the USB device node sits.
USB_DEVICE_DEPTH = {
    "usb": 1,          # device dir is the interface, e.g. 1-1:1.0 (cdc_acm)
    "usb-serial": 2,   # device dir is ttyUSB0 under the interface
}


def device_basename(device_node: str | PurePath) -> str | None:
    """Final path component of *device_node*, or None if there is none."""
    name = PurePath(device_node).name
    if not name or name == "..":
        return None
    return name


def _ancestor(path: Path, levels: int) -> Path | None:
    for _ in range(levels):
        parent = path.parent
        if parent == path:
            return None
        path = parent
    return path


def classify_port(
    device_node: str | PurePath,
    source: AttributeSource | None = None,
    tty_class_root: str | Path = DEFAULT_TTY_CLASS_ROOT,
) -> PortInfo | None:
    """Build a PortInfo for *device_node* (e.g. ``/dev/ttyUSB0``).

    Returns None when the node has no basename or sits on the platform bus.
    Every other sysfs lookup failure narrows the result towards UnknownPort
    rather than failing.
    """
    basename = device_basename(device_node)
    if basename is None:
        logger.debug("No basename for %r, skipping", str(device_node))
        return None

    source = source or default_source()

    device_dir = source.resolve_symlink(Path(tty_class_root) / basename / "device")
    subsystem: str | None = None
    if device_dir is not None:
        subsystem_path = source.resolve_symlink(device_dir / "subsystem")
        if subsystem_path is not None:
            subsystem = subsystem_path.name or None

    if subsystem == "platform":
        logger.debug("%s is a platform device, skipping", basename)
        return None

    usb_device_dir: Path | None = None
    depth = USB_DEVICE_DEPTH.get(subsystem or "")
    if device_dir is not None and depth is not None:
        usb_device_dir = _ancestor(device_dir, depth)

    port_type: PortType
    if subsystem in USB_DEVICE_DEPTH:
        usb = build_usb_identity(usb_device_dir, source)
        port_type = UsbPort(usb)
        description = usb.description(basename)
        hardware_id = usb.hardware_id()
    elif subsystem == "pnp":
        port_type = PnpPort()
        description = basename
        hardware_id = read_text(source, device_dir, "id") or ""
    elif subsystem == "amba":
        # subsystem was read through device_dir, so it must exist here
        assert device_dir is not None
        port_type = AmbaPort()
        description = basename
        hardware_id = device_dir.name
    else:
        logger.debug("%s has unknown subsystem %r", basename, subsystem)
        port_type = UnknownPort()
        description = ""
        hardware_id = ""

    return PortInfo(
        device_path=str(device_node),
        name=basename,
        description=description,
        hardware_id=hardware_id,
        port_type=port_type,
    )
