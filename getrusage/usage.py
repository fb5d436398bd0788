from __future__ import annotations

import resource
from collections.abc import Iterator

from getrusage.errors import SystemCallError
from getrusage.models.enums import Metric
from getrusage.runtime import RssUnit
from getrusage.types import MetricSelection, ResourceSnapshot, TimingWindow

_LABELS = {
    Metric.CONTEXT_SWITCHES: "Context switches (voluntary, involuntary):   ",
    Metric.IO: "File system block I/O ops (input, output):   ",
    Metric.PAGE_FAULTS: "Page faults (hard (I/O req), soft (no I/O)): ",
    Metric.RSS: "Maximum resident set size (in Mbytes):       ",
    Metric.TIME: "Time (real/user/sys in seconds):             ",
}


def collect_children_usage() -> ResourceSnapshot:
    """Snapshot accounting for terminated children, not this process."""
    try:
        usage = resource.getrusage(resource.RUSAGE_CHILDREN)
    except OSError as exc:
        raise SystemCallError("getrusage", exc) from exc
    return ResourceSnapshot.from_rusage(usage)


def rss_megabytes(native: float, unit: RssUnit) -> float:
    return float(native) / unit.divisor


def _value(
    metric: Metric,
    snapshot: ResourceSnapshot,
    window: TimingWindow | None,
    rss_unit: RssUnit,
) -> str:
    if metric is Metric.CONTEXT_SWITCHES:
        return f"{snapshot.voluntary_switches}, {snapshot.involuntary_switches}"
    if metric is Metric.IO:
        return f"{snapshot.block_input}, {snapshot.block_output}"
    if metric is Metric.PAGE_FAULTS:
        return f"{snapshot.major_faults}, {snapshot.minor_faults}"
    if metric is Metric.RSS:
        return f"{rss_megabytes(snapshot.max_rss, rss_unit):.6g}"
    if window is None:
        raise ValueError("time metric requires a timing window")
    return f"{window.real:.6f}/{snapshot.user_time:.6f}/{snapshot.system_time:.6f}"


def render_metrics(
    selection: MetricSelection,
    snapshot: ResourceSnapshot,
    window: TimingWindow | None,
    rss_unit: RssUnit,
) -> Iterator[str]:
    """Yield one line per selected metric, always in ``Metric`` order."""
    for metric in selection.selected():
        yield _LABELS[metric] + _value(metric, snapshot, window, rss_unit)
