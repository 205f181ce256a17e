"""Click CLI for ttyenum."""

from __future__ import annotations

import json
import os
from pathlib import Path

import click

from ttyenum import __version__
from ttyenum.config.schema import TtyEnumConfig


@click.group()
@click.option(
    "--config", "-c",
    default=None,
    envvar="TTYENUM_CONFIG",
    help="Config file path (default: ~/.config/ttyenum/config.yaml)",
    type=click.Path(),
)
@click.option("--verbose", "-v", is_flag=True, help="Log sysfs lookups to stderr")
@click.version_option(__version__, prog_name="ttyenum")
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """ttyenum -- list serial ports from the sysfs device tree."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = os.path.expanduser(config) if config else None
    ctx.obj["verbose"] = verbose


def _load(ctx: click.Context) -> TtyEnumConfig:
    from ttyenum.config.loader import ConfigError, load_config
    from ttyenum.utils.logging import setup_logging

    try:
        config = load_config(ctx.obj["config_path"])
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    setup_logging(config.logging, verbose=ctx.obj["verbose"])
    return config


# ---------- list ----------

@cli.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
@click.option(
    "--links/--no-links",
    default=None,
    help="Also report /dev/serial/by-id and by-path aliases",
)
@click.pass_context
def list_cmd(ctx: click.Context, as_json: bool, links: bool | None) -> None:
    """List serial ports."""
    from ttyenum.ports.enumerator import list_ports

    config = _load(ctx)
    include_links = config.discovery.include_links if links is None else links

    ports = list_ports(
        config.discovery.patterns,
        tty_class_root=config.sysfs.tty_class_root,
        include_links=include_links,
        link_dirs=config.discovery.link_dirs,
    )

    if as_json:
        click.echo(json.dumps([p.to_dict() for p in ports], indent=2))
        return

    if not ports:
        click.echo("No serial ports found.")
        return

    width = max(len(p.device_path) for p in ports)
    for port in ports:
        desc = port.description or "n/a"
        hwid = port.hardware_id or "n/a"
        click.echo(f"{port.device_path:<{width}}  {desc}  {hwid}")


# ---------- info ----------

@cli.command()
@click.argument("device")
@click.pass_context
def info(ctx: click.Context, device: str) -> None:
    """Show everything known about a single DEVICE, e.g. /dev/ttyUSB0."""
    from ttyenum.ports.classifier import classify_port
    from ttyenum.sysfs.source import default_source

    config = _load(ctx)
    source = default_source()
    target = device
    if os.path.islink(device):
        resolved = source.resolve_symlink(Path(device))
        if resolved is not None:
            target = str(resolved)

    port = classify_port(target, source, config.sysfs.tty_class_root)
    if port is None:
        click.echo(f"{device}: not a reportable serial port", err=True)
        raise SystemExit(1)

    click.echo(f"device:      {device}")
    click.echo(f"name:        {port.name}")
    click.echo(f"type:        {port.port_type.kind}")
    click.echo(f"description: {port.description}")
    click.echo(f"hwid:        {port.hardware_id}")
    if port.usb is not None:
        usb = port.usb
        click.echo(f"vid:pid:     {usb.vendor_id:04x}:{usb.product_id:04x}")
        for label, value in (
            ("serial", usb.serial_number),
            ("location", usb.location),
            ("manufacturer", usb.manufacturer),
            ("product", usb.product),
            ("interface", usb.interface),
        ):
            if value is not None:
                click.echo(f"{label + ':':<13}{value}")


# ---------- validate ----------

@cli.command()
@click.pass_context
def validate(ctx: click.Context) -> None:
    """Validate configuration file."""
    from ttyenum.config.defaults import DEFAULT_CONFIG_PATH
    from ttyenum.config.loader import validate_config

    config_path = ctx.obj["config_path"] or str(DEFAULT_CONFIG_PATH)
    click.echo(f"Validating: {config_path}")
    click.echo()

    issues = validate_config(config_path)

    if not issues:
        click.echo(click.style("Configuration is valid.", fg="green"))
        return

    for issue in issues:
        color = "yellow" if issue.severity == "warning" else "red"
        click.echo(click.style(f"  [{issue.severity}] {issue.message}", fg=color))
    click.echo()
    # Warnings (like a sysfs root missing on this machine) don't cause exit(1)
    if any(issue.severity == "error" for issue in issues):
        raise SystemExit(1)


# ---------- show-config ----------

@cli.command("show-config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Show the effective configuration as YAML."""
    import yaml

    config = _load(ctx)
    click.echo(yaml.safe_dump(config.model_dump(), sort_keys=False), nl=False)
