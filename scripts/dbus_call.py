#!/usr/bin/env python3
"""Small helper for poking the backlight D-Bus API by hand."""

import argparse
import asyncio

from dbus_next import BusType
from dbus_next.aio import MessageBus

BUS = "io.github.backlight_control"
OBJ = "/io/github/backlight_control"


async def call(method: str, arg: str | None, system: bool) -> None:
    bus = await MessageBus(bus_type=BusType.SYSTEM if system else BusType.SESSION).connect()
    introspection = await bus.introspect(BUS, OBJ)
    obj = bus.get_proxy_object(BUS, OBJ, introspection)
    iface = obj.get_interface(BUS)

    if method == "get":
        print(await iface.call_get_max_brightness())
        print(await iface.call_get_brightness())
        print(await iface.call_get_percent())
    elif method == "set":
        assert arg
        await iface.call_set_brightness(int(arg))
    elif method == "set-percent":
        assert arg
        await iface.call_set_percent(int(arg))
    elif method == "on":
        await iface.call_set_power(True)
    elif method == "off":
        await iface.call_set_power(False)


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("cmd", choices=["get", "set", "set-percent", "on", "off"])
    ap.add_argument("arg", nargs="?")
    ap.add_argument("--system", action="store_true", help="Use the system bus")
    args = ap.parse_args()
    asyncio.run(call(args.cmd, args.arg, args.system))


if __name__ == "__main__":
    main()
