from __future__ import annotations

import os
from collections.abc import Sequence
from typing import Annotated

import typer
from rich.console import Console
from typer.core import TyperCommand

from getrusage.errors import SystemCallError, UsageError
from getrusage.models.entities import MessageContext, diagnostic_console
from getrusage.runner import run_command
from getrusage.runtime import RssUnit, detect_rss_unit
from getrusage.types import CommandSpec, MetricSelection

HELP = """Run COMMAND and report its resource usage on stderr.

\b
   -a: all of the following options:
  -cs: context switches
  -io: io
  -pf: page faults
 -rss: resident set size
   -t: real, user, and system times
At least one of the above options must be specified.
"""

METRIC_FLAGS = frozenset({"-a", "-cs", "-io", "-pf", "-rss", "-t"})

app = typer.Typer(add_completion=False)
console: Console = diagnostic_console()


def check_option_tokens(args: Sequence[str], ctx: typer.Context | None = None) -> None:
    """Reject every `-` token before the command that is not a metric flag."""
    tokens = iter(args)
    for token in tokens:
        if not token.startswith("-"):
            return
        if token == "--rss-unit":
            next(tokens, None)
        elif token not in METRIC_FLAGS and token != "--help" and not token.startswith("--rss-unit="):
            raise UsageError(f"No such option: {token}", ctx)


class MetricCommand(TyperCommand):
    """Command that checks option tokens verbatim before click parses them."""

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        check_option_tokens(args, ctx)
        return super().parse_args(ctx, args)


@app.command(
    cls=MetricCommand,
    help=HELP,
    context_settings={"allow_interspersed_args": False},
)
def main(
    ctx: typer.Context,
    all_metrics: Annotated[bool, typer.Option("-a", help="All of the following options")] = False,
    context_switches: Annotated[bool, typer.Option("-cs", help="Context switches")] = False,
    io: Annotated[bool, typer.Option("-io", help="File system block I/O")] = False,
    page_faults: Annotated[bool, typer.Option("-pf", help="Page faults")] = False,
    rss: Annotated[bool, typer.Option("-rss", help="Maximum resident set size")] = False,
    times: Annotated[bool, typer.Option("-t", help="Real, user, and system times")] = False,
    rss_unit: Annotated[
        RssUnit | None,
        typer.Option("--rss-unit", envvar="GETRUSAGE_RSS_UNIT", hidden=True),
    ] = None,
    command: Annotated[
        list[str] | None,
        typer.Argument(help="Command to execute, followed by its own arguments"),
    ] = None,
) -> None:
    program = ctx.find_root().info_name or "getrusage"

    try:
        selection = MetricSelection.from_flags(
            all_metrics=all_metrics,
            context_switches=context_switches,
            io=io,
            page_faults=page_faults,
            rss=rss,
            time=times,
        )
    except ValueError:
        raise UsageError("At least one of -a, -cs, -io, -pf, -rss, -t must be specified.", ctx) from None
    if not command:
        raise UsageError("command is required", ctx)

    try:
        context = MessageContext.for_current_process(program, console=console)
    except SystemCallError as exc:
        console.print(f"{program} (PID {os.getpid()}): {exc}")
        raise typer.Exit(code=1)

    try:
        run_command(
            command=CommandSpec(argv=command),
            selection=selection,
            context=context,
            rss_unit=rss_unit if rss_unit is not None else detect_rss_unit(),
        )
    except SystemCallError as exc:
        context.error(str(exc))
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
