from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any

from backlight_control import __version__
from backlight_control.brightness import BacklightError, Brightness
from backlight_control.config import ConfigError, controller_from_config, normalize, read, validate
from backlight_control.paths import default_config_path

logger = logging.getLogger(__name__)


def _percent(text: str) -> int:
    value = int(text)
    if value < 1 or value > 100:
        raise argparse.ArgumentTypeError("Invalid value set. Should be between 1 and 100")
    return value


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="backlight-control")
    ap.add_argument("--version", action="version", version=__version__)
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    ap.add_argument("-c", "--config", help="YAML config file")
    ap.add_argument("-d", "--device", help="Backlight device name, e.g. intel_backlight")

    sub = ap.add_subparsers(dest="cmd", required=True)

    sub.add_parser("get", help="Show maximum, current and percent brightness")
    sub.add_parser("max", help="Show the maximum brightness")
    sub.add_parser("current", help="Show the current brightness")
    sub.add_parser("percent", help="Show the current brightness as a percentage")

    s = sub.add_parser("set", help="Set the backlight to a specific value")
    s.add_argument("brightness", type=int)

    sp = sub.add_parser("set-percent", help="Set the backlight to a percentage brightness value")
    sp.add_argument("brightness", type=_percent)

    pw = sub.add_parser("power", help="Switch the backlight on or off")
    pw.add_argument("state", choices=["on", "off"])

    sub.add_parser("serve", help="Expose the backlight on D-Bus")

    return ap


def _load_config(args: argparse.Namespace) -> dict[str, Any]:
    path = args.config
    if path is None:
        candidate = default_config_path()
        if candidate.exists():
            path = candidate

    cfg = read(path) if path is not None else {}
    if args.device:
        cfg["device"] = args.device
    elif path is None:
        raise ConfigError(f"No device given; pass -d/--device or create {default_config_path()}")

    normalize(cfg)
    validate(cfg)
    return cfg


async def _serve(br: Brightness, bus: str) -> None:
    from backlight_control.dbus_service import BacklightInterface, serve

    message_bus = await serve(BacklightInterface(br), bus=bus)
    await message_bus.wait_for_disconnect()


def run(args: argparse.Namespace) -> int:
    cfg = _load_config(args)
    br = controller_from_config(cfg)
    logger.debug("Using %s", br.device_path)

    if args.cmd == "get":
        print(f"Maximum brightness: {br.get_max_brightness()}")
        print(f"Current brightness: {br.get_brightness()}")
        print(f"Current brightness: {br.get_percent()}%")
    elif args.cmd == "max":
        print(br.get_max_brightness())
    elif args.cmd == "current":
        print(br.get_brightness())
    elif args.cmd == "percent":
        print(br.get_percent())
    elif args.cmd == "set":
        br.set_brightness(args.brightness)
    elif args.cmd == "set-percent":
        br.set_percent(args.brightness)
    elif args.cmd == "power":
        br.set_power(args.state == "on")
    elif args.cmd == "serve":
        asyncio.run(_serve(br, cfg["dbus"]["bus"]))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run(args)
    except (OSError, ConfigError, BacklightError) as e:
        print(f"backlight-control: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
