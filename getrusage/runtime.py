from __future__ import annotations

import platform
from enum import Enum


class RssUnit(str, Enum):
    """Native unit of ``ru_maxrss`` on the running platform."""

    KILOBYTES = "kilobytes"
    BYTES = "bytes"

    @property
    def divisor(self) -> int:
        """Divide a native value by this to get megabytes."""
        if self is RssUnit.BYTES:
            return 1024 * 1024
        return 1024


_BYTE_REPORTING_SYSTEMS = {"Darwin"}


def detect_rss_unit(system: str | None = None) -> RssUnit:
    """Linux and the BSDs report kilobytes; macOS reports bytes."""
    name = platform.system() if system is None else system
    if name in _BYTE_REPORTING_SYSTEMS:
        return RssUnit.BYTES
    return RssUnit.KILOBYTES
