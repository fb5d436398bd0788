from __future__ import annotations

import socket
import time

from getrusage.errors import SystemCallError


def monotonic_s() -> float:
    """Return monotonic clock in seconds."""
    return time.monotonic()


def lookup_hostname() -> str:
    """Resolve the local host name used in every message prefix."""
    try:
        return socket.gethostname()
    except OSError as exc:
        raise SystemCallError("gethostname", exc) from exc
