from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from backlight_control.brightness import SYSFS_BACKLIGHT, Brightness

BUSES = ("session", "system")


class ConfigError(ValueError):
    pass


def _require(cfg: dict[str, Any], key: str) -> Any:
    if key not in cfg:
        raise ConfigError(f"Missing required config key: {key}")
    return cfg[key]


def read(path: str | Path) -> dict[str, Any]:
    """Parse and normalize a config file without validating it."""

    p = Path(path)
    data = yaml.safe_load(p.read_text(encoding="utf-8"))
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Top-level config must be a mapping")
    normalize(data)
    return data


def load(path: str | Path) -> dict[str, Any]:
    data = read(path)
    validate(data)
    return data


def normalize(cfg: dict[str, Any]) -> None:
    """Fill in defaults and strip stray whitespace, in place."""

    if isinstance(cfg.get("device"), str):
        cfg["device"] = cfg["device"].strip()

    root = cfg.get("sysfs_root")
    cfg["sysfs_root"] = str(root).strip() if root else str(SYSFS_BACKLIGHT)

    cfg.setdefault("strict", False)

    dbus = cfg.setdefault("dbus", {})
    if isinstance(dbus, dict):
        dbus["bus"] = str(dbus.get("bus") or "session").strip().lower()


def validate(cfg: dict[str, Any]) -> None:
    device = _require(cfg, "device")
    if not isinstance(device, str) or not device:
        raise ConfigError("device must be a non-empty string")
    if "/" in device:
        raise ConfigError(f"device must be a name, not a path: {device}")

    if not isinstance(cfg.get("strict", False), bool):
        raise ConfigError("strict must be true or false")

    dbus = cfg.get("dbus", {})
    if not isinstance(dbus, dict):
        raise ConfigError("dbus must be a mapping")
    if dbus.get("bus", "session") not in BUSES:
        raise ConfigError(f"dbus.bus must be one of {', '.join(BUSES)}: {dbus.get('bus')}")


def controller_from_config(cfg: dict[str, Any]) -> Brightness:
    return Brightness(
        str(cfg["device"]),
        sysfs_root=Path(cfg.get("sysfs_root") or SYSFS_BACKLIGHT),
        strict=bool(cfg.get("strict", False)),
    )
