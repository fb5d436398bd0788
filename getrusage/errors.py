from __future__ import annotations

import typer


class UsageError(typer.BadParameter):
    """Malformed or insufficient command-line arguments."""

    def format_message(self) -> str:
        return self.message


class SystemCallError(Exception):
    """A system call failed; always fatal for the caller."""

    def __init__(self, call: str, error: OSError | ValueError) -> None:
        self.call = call
        self.error = error
        super().__init__(f"{call}: {getattr(error, 'strerror', None) or error}.")


class ChildLaunchError(SystemCallError):
    """Image replacement failed inside the child process."""
