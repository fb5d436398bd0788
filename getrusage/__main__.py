from __future__ import annotations

from getrusage.cli import app

app(prog_name="getrusage")
