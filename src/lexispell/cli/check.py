from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

from lexispell.checker import SpellChecker


app = typer.Typer(help="Query a spell checker built from a YAML config.")


def _checker(ctx: typer.Context, config: Path) -> SpellChecker:
    from lexispell.utils.config import CheckerConfig, build_checker

    try:
        cfg = CheckerConfig.load(config)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--config") from e
    # --log-level on the command line wins over the config file
    if not (ctx.obj or {}).get("log_level"):
        logging.getLogger().setLevel(cfg.log_level)
    try:
        return build_checker(cfg)
    except (FileNotFoundError, ValueError) as e:
        raise typer.BadParameter(str(e), param_hint="--config") from e


@app.command("exists")
def exists_cmd(
    ctx: typer.Context,
    word: str = typer.Argument(...),
    config: Path = typer.Option(..., exists=True, dir_okay=False),
):
    """Print true if WORD is in the lexicon, false otherwise."""
    typer.echo("true" if _checker(ctx, config).exists(word) else "false")


@app.command("suggest")
def suggest_cmd(
    ctx: typer.Context,
    word: str = typer.Argument(...),
    config: Path = typer.Option(..., exists=True, dir_okay=False),
    as_json: bool = typer.Option(False, "--json", help="Print the suggestions as a JSON list."),
):
    """Print spelling suggestions for WORD, most likely first."""
    suggestions = _checker(ctx, config).suggest(word)
    if as_json:
        typer.echo(json.dumps(suggestions))
        return
    for s in suggestions:
        typer.echo(s)


@app.command("analyze")
def analyze_cmd(
    ctx: typer.Context,
    sentence: str = typer.Argument(...),
    config: Path = typer.Option(..., exists=True, dir_okay=False),
):
    """Print a JSON object mapping each misspelled token to its suggestions."""
    typer.echo(json.dumps(_checker(ctx, config).analyze(sentence), indent=2))
