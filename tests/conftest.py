"""Pytest configuration and shared fixtures.

Two fake device trees are provided: ``fake_sysfs`` is an in-memory
AttributeSource, ``sysfs_tree`` builds real symlinks under tmp_path so the
FilesystemSource and glob paths are exercised too.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

PCI_USB_BUS = "/sys/devices/pci0000:00/0000:00:14.0/usb1"

FTDI_ATTRS = {
    "idVendor": "0403",
    "idProduct": "6001",
    "manufacturer": "FTDI",
    "product": "FT232R USB UART",
}


class FakeSysfs:
    """In-memory AttributeSource: explicit symlinks and file contents."""

    def __init__(self, tty_class_root: str = "/sys/class/tty"):
        self.tty_class_root = tty_class_root
        self.links: dict[str, str] = {}
        self.files: dict[str, str] = {}

    # AttributeSource

    def resolve_symlink(self, path: Path) -> Path | None:
        target = self.links.get(str(path))
        return Path(target) if target is not None else None

    def read_file(self, path: Path) -> str | None:
        content = self.files.get(str(path))
        if content is None:
            return None
        lines = content.splitlines(keepends=True)
        return lines[0] if lines else ""

    # Builders

    def _attach(self, tty: str, device_dir: str, subsystem: str) -> str:
        self.links[f"{self.tty_class_root}/{tty}/device"] = device_dir
        self.links[f"{device_dir}/subsystem"] = f"/sys/bus/{subsystem}"
        return device_dir

    def write_attrs(self, directory: str, attrs: dict[str, str]) -> None:
        for name, value in attrs.items():
            self.files[f"{directory}/{name}"] = value + "\n"

    def add_usb_serial(self, tty: str = "ttyUSB0", usb_dev: str = f"{PCI_USB_BUS}/1-1",
                       **attrs: str) -> str:
        self.write_attrs(usb_dev, attrs)
        return self._attach(tty, f"{usb_dev}/{Path(usb_dev).name}:1.0/{tty}", "usb-serial")

    def add_usb_acm(self, tty: str = "ttyACM0", usb_dev: str = f"{PCI_USB_BUS}/1-2",
                    **attrs: str) -> str:
        self.write_attrs(usb_dev, attrs)
        return self._attach(tty, f"{usb_dev}/{Path(usb_dev).name}:1.0", "usb")

    def add_pnp(self, tty: str = "ttyS0", pnp_id: str | None = "PNP0501") -> str:
        device_dir = self._attach(tty, "/sys/devices/pnp0/00:05", "pnp")
        if pnp_id is not None:
            self.files[f"{device_dir}/id"] = pnp_id + "\n"
        return device_dir

    def add_amba(self, tty: str = "ttyAMA0", node: str = "fe201000.serial") -> str:
        return self._attach(tty, f"/sys/devices/platform/soc/{node}", "amba")

    def add_platform(self, tty: str = "ttyS1") -> str:
        return self._attach(tty, "/sys/devices/platform/serial8250", "platform")


class SysfsTree:
    """A sysfs/dev layout on disk, rooted at a temporary directory."""

    def __init__(self, root: Path):
        self.root = root
        self.tty_class_root = root / "sys" / "class" / "tty"
        self.dev = root / "dev"
        self.tty_class_root.mkdir(parents=True)
        self.dev.mkdir()

    def patterns(self) -> list[str]:
        return [
            str(self.dev / name)
            for name in ("ttyS*", "ttyUSB*", "ttyACM*", "ttyAMA*", "rfcomm*")
        ]

    def node(self, tty: str) -> Path:
        path = self.dev / tty
        path.touch()
        return path

    def _attach(self, tty: str, device_dir: Path, subsystem: str | None) -> Path:
        device_dir.mkdir(parents=True, exist_ok=True)
        if subsystem is not None and not (device_dir / "subsystem").is_symlink():
            bus = self.root / "sys" / "bus" / subsystem
            bus.mkdir(parents=True, exist_ok=True)
            os.symlink(bus, device_dir / "subsystem")
        class_dir = self.tty_class_root / tty
        class_dir.mkdir()
        os.symlink(device_dir, class_dir / "device")
        self.node(tty)
        return device_dir

    def write_attrs(self, directory: Path, attrs: dict[str, str]) -> None:
        directory.mkdir(parents=True, exist_ok=True)
        for name, value in attrs.items():
            (directory / name).write_text(value + "\n", encoding="utf-8")

    def usb_dev(self, name: str) -> Path:
        return self.root / PCI_USB_BUS.lstrip("/") / name

    def add_usb_serial(self, tty: str = "ttyUSB0", usb_dev: str = "1-1", **attrs: str) -> Path:
        dev_dir = self.usb_dev(usb_dev)
        self.write_attrs(dev_dir, attrs)
        return self._attach(tty, dev_dir / f"{usb_dev}:1.0" / tty, "usb-serial")

    def add_usb_acm(self, tty: str = "ttyACM0", usb_dev: str = "1-2", **attrs: str) -> Path:
        dev_dir = self.usb_dev(usb_dev)
        self.write_attrs(dev_dir, attrs)
        return self._attach(tty, dev_dir / f"{usb_dev}:1.0", "usb")

    def add_pnp(self, tty: str = "ttyS0", pnp_id: str = "PNP0501") -> Path:
        device_dir = self._attach(tty, self.root / "sys/devices/pnp0/00:05", "pnp")
        (device_dir / "id").write_text(pnp_id + "\n", encoding="utf-8")
        return device_dir

    def add_platform(self, tty: str = "ttyS1") -> Path:
        return self._attach(tty, self.root / "sys/devices/platform/serial8250", "platform")

    def add_orphan(self, tty: str = "rfcomm0") -> Path:
        """A device node with no sysfs device link at all."""
        (self.tty_class_root / tty).mkdir()
        return self.node(tty)

    def link(self, link_dir: str, name: str, tty: str) -> Path:
        directory = self.dev / "serial" / link_dir
        directory.mkdir(parents=True, exist_ok=True)
        link = directory / name
        os.symlink(self.dev / tty, link)
        return link


@pytest.fixture
def fake_sysfs() -> FakeSysfs:
    return FakeSysfs()


@pytest.fixture
def sysfs_tree(tmp_path) -> SysfsTree:
    return SysfsTree(tmp_path)
