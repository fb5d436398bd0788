from __future__ import annotations

from enum import Enum


class Metric(str, Enum):
    """Reportable metrics, declared in output order."""

    CONTEXT_SWITCHES = "cs"
    IO = "io"
    PAGE_FAULTS = "pf"
    RSS = "rss"
    TIME = "t"


class Outcome(str, Enum):
    EXITED = "exited"
    SIGNALED = "signaled"
    STOPPED = "stopped"
    CONTINUED = "continued"
    UNKNOWN = "unknown"
