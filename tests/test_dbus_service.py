from __future__ import annotations

from pathlib import Path

import pytest
from dbus_next.errors import DBusError

from backlight_control.brightness import Brightness
from backlight_control.dbus_service import (
    IO_ERROR,
    VALUE_ERROR,
    BacklightInterface,
    _call,
)


def test_call_passes_values_through(tmp_path: Path) -> None:
    dev = tmp_path / "backlight-lcd"
    dev.mkdir()
    (dev / "max_brightness").write_text("100\n", encoding="utf-8")
    (dev / "brightness").write_text("0\n", encoding="utf-8")
    br = Brightness("backlight-lcd", sysfs_root=tmp_path)

    assert _call(br.set_percent, 30) is True
    assert _call(br.get_brightness) == 30


def test_io_errors_become_dbus_errors(tmp_path: Path) -> None:
    br = Brightness("missing", sysfs_root=tmp_path)
    with pytest.raises(DBusError) as exc:
        _call(br.get_max_brightness)
    assert exc.value.type == IO_ERROR


def test_strict_parse_errors_become_dbus_errors(tmp_path: Path) -> None:
    dev = tmp_path / "backlight-lcd"
    dev.mkdir()
    (dev / "brightness").write_text("garbage", encoding="utf-8")
    br = Brightness("backlight-lcd", sysfs_root=tmp_path, strict=True)
    with pytest.raises(DBusError) as exc:
        _call(br.get_brightness)
    assert exc.value.type == VALUE_ERROR


def test_interface_name() -> None:
    iface = BacklightInterface(Brightness("backlight-lcd"))
    assert iface.name == "io.github.backlight_control"
