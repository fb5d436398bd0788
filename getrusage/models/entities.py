from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field
from rich.console import Console

from getrusage.utils import lookup_hostname


def diagnostic_console() -> Console:
    """Console bound to stderr that writes every message verbatim on one line."""
    return Console(stderr=True, markup=False, emoji=False, highlight=False, soft_wrap=True)


class MessageContext(BaseModel):
    """Identity of the invoking program, shared by every report it emits."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    program: str
    pid: int
    hostname: str
    console: Console = Field(default_factory=diagnostic_console, exclude=True, repr=False)

    @classmethod
    def for_current_process(cls, program: str, console: Console | None = None) -> MessageContext:
        hostname = lookup_hostname()
        if console is None:
            return cls(program=program, pid=os.getpid(), hostname=hostname)
        return cls(program=program, pid=os.getpid(), hostname=hostname, console=console)

    @property
    def prefix(self) -> str:
        return f"{self.program} (PID {self.pid} on host {self.hostname}): "

    def status_prefix(self, command_name: str, child_pid: int) -> str:
        return f"{self.program}: {command_name} (PID {child_pid} on host {self.hostname}): "

    def report(self, line: str) -> None:
        self.console.print(line)

    def info(self, message: str) -> None:
        self.console.print(self.prefix + message)

    def error(self, message: str) -> None:
        self.console.print(self.prefix + message)
