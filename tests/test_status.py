from __future__ import annotations

import signal
import sys

import pytest

from getrusage.models.entities import MessageContext
from getrusage.models.enums import Outcome
from getrusage.status import decode_status, format_status_line, signal_description
from getrusage.types import CommandSpec

linux_only = pytest.mark.skipif(sys.platform != "linux", reason="Linux wait-status encoding")


@pytest.mark.parametrize("code", [0, 1, 42, 255])
def test_decode_exit_status(code: int) -> None:
    result = decode_status(100, code << 8)
    assert result.outcome is Outcome.EXITED
    assert result.code == code
    assert result.description == f"exited with status {code}."


def test_decode_signal_termination() -> None:
    result = decode_status(100, int(signal.SIGKILL))
    assert result.outcome is Outcome.SIGNALED
    assert result.signal == signal.SIGKILL
    assert result.description == (
        f"terminated by signal {int(signal.SIGKILL)} ({signal_description(signal.SIGKILL)})."
    )


def test_decode_stopped_child() -> None:
    result = decode_status(100, (int(signal.SIGTSTP) << 8) | 0x7F)
    assert result.outcome is Outcome.STOPPED
    assert result.signal == signal.SIGTSTP
    assert result.description.startswith(f"stopped by signal {int(signal.SIGTSTP)} (")


@linux_only
def test_decode_continued_child() -> None:
    result = decode_status(100, 0xFFFF)
    assert result.outcome is Outcome.CONTINUED
    assert result.description == "continued."


@linux_only
def test_unmatched_status_is_unknown() -> None:
    result = decode_status(100, 0xFF)
    assert result.outcome is Outcome.UNKNOWN
    assert result.description == "unknown status."


def test_missing_status_is_unknown() -> None:
    result = decode_status(7, None)
    assert result.outcome is Outcome.UNKNOWN
    assert result.pid == 7


def test_signal_description_falls_back_for_unknown_numbers() -> None:
    assert signal_description(1000) == "Unknown signal 1000"


def test_status_line_names_program_command_pid_and_host(context: MessageContext) -> None:
    result = decode_status(321, 3 << 8)
    line = format_status_line(context, CommandSpec(argv=["make", "all"]), result)
    assert line == "getrusage: make (PID 321 on host testhost): exited with status 3."
