from __future__ import annotations

import os

from getrusage.errors import ChildLaunchError, SystemCallError
from getrusage.models.entities import MessageContext
from getrusage.types import CommandSpec

EXIT_LAUNCH_FAILURE = 1


def _exec_child(command: CommandSpec, context: MessageContext) -> None:
    try:
        os.execvp(command.name, list(command.argv))
    except (OSError, ValueError) as exc:
        error = ChildLaunchError(f"execvp ({command.name})", exc)
        context.error(str(error))
    finally:
        # Never fall back into the parent's code path.
        os._exit(EXIT_LAUNCH_FAILURE)


def launch(command: CommandSpec, context: MessageContext) -> int:
    """Fork once and exec ``command`` in the child; return the child's pid."""
    try:
        child_pid = os.fork()
    except OSError as exc:
        raise SystemCallError("fork", exc) from exc

    if child_pid == 0:
        _exec_child(command, context)
    return child_pid


def wait_for_child(context: MessageContext) -> tuple[int | None, int | None]:
    """Block until any child terminates.

    Returns ``(pid, status)``. When there is no child left to wait for, that is
    reported as information and ``(None, None)`` is returned.
    """
    try:
        return os.wait()
    except ChildProcessError as exc:
        context.info(str(SystemCallError("wait", exc)))
        return None, None
    except OSError as exc:
        raise SystemCallError("wait", exc) from exc
