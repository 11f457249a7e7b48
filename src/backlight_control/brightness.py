from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

SYSFS_BACKLIGHT = Path("/sys/class/backlight")

# Returned in place of a value when a sysfs file does not hold an integer.
UNPARSABLE = -1

# Values are 32-bit signed decimal integers in ASCII.
_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class BacklightError(ValueError):
    pass


class UnparsableValueError(BacklightError):
    def __init__(self, path: Path, content: str):
        super().__init__(f"{path}: not an integer: {content!r}")
        self.path = path
        self.content = content


@dataclass
class Brightness:
    """Read and write the backlight of one device under /sys/class/backlight.

    Nothing is touched on construction; a bad device name surfaces as an
    OSError on first use. The maximum brightness is read once and cached as
    soon as the kernel reports a positive value.
    """

    device_name: str
    sysfs_root: Path = SYSFS_BACKLIGHT
    strict: bool = False
    cached_max_brightness: int | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self._device_path = Path(self.sysfs_root) / self.device_name

    @property
    def device_path(self) -> Path:
        return self._device_path

    @property
    def _brightness(self) -> Path:
        return self._device_path / "brightness"

    @property
    def _max_brightness(self) -> Path:
        return self._device_path / "max_brightness"

    @property
    def _bl_power(self) -> Path:
        return self._device_path / "bl_power"

    def _read_int(self, path: Path) -> int:
        # Undecodable bytes count as unparsable content, not as an I/O failure.
        content = path.read_bytes().decode("utf-8", errors="replace").strip()
        if _INT_RE.fullmatch(content):
            value = int(content)
            if _INT_MIN <= value <= _INT_MAX:
                return value

        if self.strict:
            raise UnparsableValueError(path, content)
        logger.warning("Unparsable content in %s: %r", path, content)
        return UNPARSABLE

    def get_max_brightness(self) -> int:
        if self.cached_max_brightness is not None and self.cached_max_brightness > 0:
            return self.cached_max_brightness

        value = self._read_int(self._max_brightness)
        if value > 0:
            logger.debug("Caching max_brightness=%d for %s", value, self.device_name)
            self.cached_max_brightness = value
        return value

    def get_brightness(self) -> int:
        # Never cached: other processes and the firmware change it.
        return self._read_int(self._brightness)

    def get_percent(self) -> int:
        """Return the current brightness as a percentage of the maximum.

        The result is truncated toward zero. A maximum of zero or below (an
        unparsable max_brightness) gives UNPARSABLE rather than a division error.
        """

        value = self.get_brightness()
        max_value = self.get_max_brightness()
        if max_value <= 0:
            return UNPARSABLE
        return int(100.0 * value / max_value)

    def set_brightness(self, value: int) -> bool:
        max_value = self.get_max_brightness()
        clamped = max(0, min(int(value), max_value))
        if clamped != value:
            logger.debug("Clamped brightness %d to %d (max %d)", value, clamped, max_value)
        self._brightness.write_text(str(clamped), encoding="utf-8")
        return True

    def set_percent(self, value: int) -> bool:
        """Set brightness as a percentage of the maximum, rounding half up.

        Percentages outside 0..100 are not rejected; they saturate in
        set_brightness.
        """

        max_value = self.get_max_brightness()
        return self.set_brightness(int(value / 100 * max_value + 0.5))

    def get_power(self) -> bool:
        # Kernel backlight uses bl_power = 0 for on, non-zero for off.
        return self._read_int(self._bl_power) == 0

    def set_power(self, on: bool) -> bool:
        self._bl_power.write_text("0" if on else "1", encoding="utf-8")
        return True
