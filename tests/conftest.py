from __future__ import annotations

import io

import pytest
from rich.console import Console

from getrusage.models.entities import MessageContext


@pytest.fixture
def diagnostics() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def context(diagnostics: io.StringIO) -> MessageContext:
    console = Console(file=diagnostics, markup=False, emoji=False, highlight=False, soft_wrap=True)
    return MessageContext(program="getrusage", pid=4242, hostname="testhost", console=console)
