from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from getrusage.launcher import launch, wait_for_child
from getrusage.models.entities import MessageContext
from getrusage.runtime import RssUnit
from getrusage.status import decode_status, format_status_line
from getrusage.types import (
    CommandSpec,
    ExecutionResult,
    MetricSelection,
    ResourceSnapshot,
    TimingWindow,
)
from getrusage.usage import collect_children_usage, render_metrics


class MeasurementReport(BaseModel):
    """Everything reported for a single measured command."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    result: ExecutionResult
    snapshot: ResourceSnapshot
    window: TimingWindow | None = None
    lines: list[str]


def run_command(
    command: CommandSpec,
    selection: MetricSelection,
    context: MessageContext,
    rss_unit: RssUnit,
) -> MeasurementReport:
    """Execute command, report its outcome and the selected usage metrics."""
    window = TimingWindow.begin() if selection.time else None

    child_pid = launch(command, context)
    wait_pid, status = wait_for_child(context)

    if window is not None:
        window = window.finish()

    result = decode_status(child_pid if wait_pid is None else wait_pid, status)
    status_line = format_status_line(context, command, result)
    context.report(status_line)

    snapshot = collect_children_usage()
    lines = [status_line]
    for line in render_metrics(selection, snapshot, window, rss_unit):
        context.report(line)
        lines.append(line)

    return MeasurementReport(result=result, snapshot=snapshot, window=window, lines=lines)
