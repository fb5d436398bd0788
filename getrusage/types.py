from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from getrusage.models.enums import Metric, Outcome
from getrusage.utils import monotonic_s


class MetricSelection(BaseModel):
    """Metrics requested on the command line."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    context_switches: bool = False
    io: bool = False
    page_faults: bool = False
    rss: bool = False
    time: bool = False

    @classmethod
    def from_flags(
        cls,
        all_metrics: bool = False,
        context_switches: bool = False,
        io: bool = False,
        page_faults: bool = False,
        rss: bool = False,
        time: bool = False,
    ) -> MetricSelection:
        """Build a selection; ``all_metrics`` turns every metric on."""
        if not any((all_metrics, context_switches, io, page_faults, rss, time)):
            raise ValueError("at least one metric must be selected")
        return cls(
            context_switches=all_metrics or context_switches,
            io=all_metrics or io,
            page_faults=all_metrics or page_faults,
            rss=all_metrics or rss,
            time=all_metrics or time,
        )

    def includes(self, metric: Metric) -> bool:
        return {
            Metric.CONTEXT_SWITCHES: self.context_switches,
            Metric.IO: self.io,
            Metric.PAGE_FAULTS: self.page_faults,
            Metric.RSS: self.rss,
            Metric.TIME: self.time,
        }[metric]

    def selected(self) -> Iterator[Metric]:
        """Yield the selected metrics in output order."""
        return (metric for metric in Metric if self.includes(metric))


class CommandSpec(BaseModel):
    """Executable and arguments handed to the child process."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    argv: tuple[str, ...]

    @field_validator("argv", mode="before")
    @classmethod
    def _require_tokens(cls, value: Any) -> tuple[str, ...]:
        if isinstance(value, str) or not isinstance(value, Sequence):
            raise ValueError("argv must be a sequence of strings")
        if not value:
            raise ValueError("command is required")
        return tuple(str(token) for token in value)

    @property
    def name(self) -> str:
        return self.argv[0]


class ExecutionResult(BaseModel):
    """Decoded outcome of the child, tagged by ``outcome``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    outcome: Outcome
    pid: int
    code: int | None = None
    signal: int | None = None
    signal_name: str | None = None

    @property
    def description(self) -> str:
        if self.outcome is Outcome.EXITED:
            return f"exited with status {self.code}."
        if self.outcome is Outcome.SIGNALED:
            return f"terminated by signal {self.signal} ({self.signal_name})."
        if self.outcome is Outcome.STOPPED:
            return f"stopped by signal {self.signal} ({self.signal_name})."
        if self.outcome is Outcome.CONTINUED:
            return "continued."
        return "unknown status."


class ResourceSnapshot(BaseModel):
    """Accounting totals for all terminated children of this process."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    voluntary_switches: int
    involuntary_switches: int
    block_input: int
    block_output: int
    major_faults: int
    minor_faults: int
    max_rss: int
    user_time: float
    system_time: float

    @classmethod
    def from_rusage(cls, usage: Any) -> ResourceSnapshot:
        return cls(
            voluntary_switches=usage.ru_nvcsw,
            involuntary_switches=usage.ru_nivcsw,
            block_input=usage.ru_inblock,
            block_output=usage.ru_oublock,
            major_faults=usage.ru_majflt,
            minor_faults=usage.ru_minflt,
            max_rss=usage.ru_maxrss,
            user_time=usage.ru_utime,
            system_time=usage.ru_stime,
        )


class TimingWindow(BaseModel):
    """Wall-clock window bracketing fork to wait."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    start: float
    stop: float | None = None

    @classmethod
    def begin(cls) -> TimingWindow:
        return cls(start=monotonic_s())

    def finish(self) -> TimingWindow:
        return self.model_copy(update={"stop": monotonic_s()})

    @property
    def real(self) -> float:
        if self.stop is None:
            raise ValueError("timing window was never finished")
        return max(0.0, self.stop - self.start)
