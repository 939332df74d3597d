from __future__ import annotations

from pathlib import Path

import typer

from lexispell.io.sources import read_words
from lexispell.lexicon.compiler import compile_index, write_index


app = typer.Typer(help="Offline lexicon index tools.")


@app.command("compile")
def compile_cmd(
    input_path: Path = typer.Option(..., "--input", exists=True, dir_okay=False, help="Word list, one per line."),
    output_path: Path = typer.Option(..., "--output", dir_okay=False),
):
    """Compile a raw word list into a length-bucketed sorted index."""
    index = compile_index(read_words(input_path))
    write_index(index, output_path)
    total = sum(len(words) for words in index.values())
    typer.echo(f"Compiled {total} words into {len(index)} buckets at {output_path}")
