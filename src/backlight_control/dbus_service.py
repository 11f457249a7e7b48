from __future__ import annotations

import logging

from dbus_next import BusType
from dbus_next.aio import MessageBus
from dbus_next.errors import DBusError
from dbus_next.service import ServiceInterface, method

from backlight_control.brightness import BacklightError, Brightness

# dbus-next uses signature strings ("i", "b") in annotations.
# Ruff tries to treat these as Python types.

logger = logging.getLogger(__name__)

BUS_NAME = "io.github.backlight_control"
OBJ_PATH = "/io/github/backlight_control"
IO_ERROR = f"{BUS_NAME}.Error.IO"
VALUE_ERROR = f"{BUS_NAME}.Error.Value"


def _call(fn, *args):
    try:
        return fn(*args)
    except OSError as e:
        logger.error("Backlight I/O failed: %s", e)
        raise DBusError(IO_ERROR, str(e)) from e
    except BacklightError as e:
        raise DBusError(VALUE_ERROR, str(e)) from e


class BacklightInterface(ServiceInterface):
    def __init__(self, br: Brightness):
        super().__init__(BUS_NAME)
        self._br = br

    @method()
    def GetMaxBrightness(self) -> "i":  # noqa: N802
        return _call(self._br.get_max_brightness)

    @method()
    def GetBrightness(self) -> "i":  # noqa: N802
        return _call(self._br.get_brightness)

    @method()
    def GetPercent(self) -> "i":  # noqa: N802
        return _call(self._br.get_percent)

    @method()
    def SetBrightness(self, value: "i") -> "b":  # noqa: N802
        return bool(_call(self._br.set_brightness, value))

    @method()
    def SetPercent(self, value: "i") -> "b":  # noqa: N802
        return bool(_call(self._br.set_percent, value))

    @method()
    def SetPower(self, on: "b") -> "b":  # noqa: N802
        return bool(_call(self._br.set_power, on))


async def serve(iface: BacklightInterface, bus: str = "session") -> MessageBus:
    bus_type = BusType.SYSTEM if bus == "system" else BusType.SESSION
    message_bus = await MessageBus(bus_type=bus_type).connect()
    message_bus.export(OBJ_PATH, iface)
    await message_bus.request_name(BUS_NAME)
    logger.info("Serving %s on the %s bus", BUS_NAME, bus)
    return message_bus
