"""CLI command: codeguardian samples [LANGUAGE] — show built-in examples."""

from __future__ import annotations

import click
from rich.console import Console
from rich.syntax import Syntax

from codeguardian.source.samples import SAMPLES

console = Console(stderr=True)


@click.command()
@click.argument("language", required=False, type=click.Choice(sorted(SAMPLES)))
def samples(language: str | None) -> None:
    """List sample programs, or print the one for LANGUAGE."""
    if language is None:
        for key, sample in sorted(SAMPLES.items()):
            console.print(f"  [cyan]{key}[/cyan]  {sample.filename}")
        console.print("\nScan one with: codeguardian scan --sample <language>")
        return

    sample = SAMPLES[language]
    console.print(
        Syntax(sample.code, sample.language, line_numbers=True, theme="monokai")
    )
