from __future__ import annotations

import logging

import typer

from lexispell.cli import check as check_cmd
from lexispell.cli import index as index_cmd
from lexispell.utils.config import parse_log_level

app = typer.Typer(help="Length-bucketed spell checker CLI.")

app.add_typer(check_cmd.app, name="check")
app.add_typer(index_cmd.app, name="index")


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(None, help="Logging level (DEBUG, INFO, WARNING, ...)."),
):
    try:
        level = parse_log_level(log_level or "WARNING")
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    ctx.obj = {"log_level": log_level}
