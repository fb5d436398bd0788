"""Decode wait statuses into execution results.

The canonical mapping is ``_DECODERS``: its entries are tried in order and the
first predicate that accepts the status wins. ``os.wait`` only reports
terminated children, so the stopped and continued entries (and the unknown
fallback) are not reached by the launcher; they are kept for waits that pass
``WUNTRACED``/``WCONTINUED``.
"""

from __future__ import annotations

import os
import signal
from collections.abc import Callable

from getrusage.models.entities import MessageContext
from getrusage.models.enums import Outcome
from getrusage.types import CommandSpec, ExecutionResult


def signal_description(signum: int) -> str:
    """Return the platform's text for ``signum``."""
    try:
        text = signal.strsignal(signum)
    except ValueError:
        text = None
    return text or f"Unknown signal {signum}"


def _exited(pid: int, status: int) -> ExecutionResult:
    return ExecutionResult(outcome=Outcome.EXITED, pid=pid, code=os.WEXITSTATUS(status))


def _signaled(pid: int, status: int) -> ExecutionResult:
    signum = os.WTERMSIG(status)
    return ExecutionResult(
        outcome=Outcome.SIGNALED, pid=pid, signal=signum, signal_name=signal_description(signum)
    )


def _stopped(pid: int, status: int) -> ExecutionResult:
    signum = os.WSTOPSIG(status)
    return ExecutionResult(
        outcome=Outcome.STOPPED, pid=pid, signal=signum, signal_name=signal_description(signum)
    )


def _continued(pid: int, status: int) -> ExecutionResult:
    return ExecutionResult(outcome=Outcome.CONTINUED, pid=pid)


_DECODERS: tuple[tuple[Callable[[int], bool], Callable[[int, int], ExecutionResult]], ...] = (
    (os.WIFEXITED, _exited),
    (os.WIFSIGNALED, _signaled),
    (os.WIFSTOPPED, _stopped),
    (os.WIFCONTINUED, _continued),
)


def decode_status(pid: int, status: int | None) -> ExecutionResult:
    """Map a raw wait status to exactly one outcome."""
    if status is not None:
        for matches, build in _DECODERS:
            if matches(status):
                return build(pid, status)
    return ExecutionResult(outcome=Outcome.UNKNOWN, pid=pid)


def format_status_line(context: MessageContext, command: CommandSpec, result: ExecutionResult) -> str:
    return context.status_prefix(command.name, result.pid) + result.description
