# ike/cli/cli.py
"""
ike CLI - main application.

Commands:
    ike similar     Phrases similar to a phrase or to a set of phrases
    ike config      Show the effective configuration

NOTE: Commands import their implementation lazily so startup stays fast.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from ike.logging.logger import configure_logging

app = typer.Typer(
    name="ike",
    help="Build extraction queries by example.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
) -> None:
    # Commands switch to the configured level once their config is loaded.
    ctx.obj = {"verbose": verbose}
    configure_logging("DEBUG" if verbose else "WARNING")


@app.command("similar")
def similar(
    ctx: typer.Context,
    phrases: List[str] = typer.Argument(..., help="One or more phrases."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file."),
    limit: int = typer.Option(20, "--limit", "-n", min=1, help="Phrases to show."),
    centroid: bool = typer.Option(
        False, "--centroid", help="Search around the centroid even for a single phrase."
    ),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON."),
) -> None:
    """Rank phrases similar to PHRASES (several phrases search around their centroid)."""
    from ike.cli.commands import similar as mod

    mod.command(
        phrases=phrases,
        config=config,
        limit=limit,
        centroid=centroid,
        as_json=as_json,
        verbose=ctx.obj["verbose"],
    )


@app.command("config")
def config(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file."),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON."),
) -> None:
    """Show package defaults merged with the given config file."""
    from ike.cli.commands import config as mod

    mod.command(config=config, as_json=as_json, verbose=ctx.obj["verbose"])


if __name__ == "__main__":
    app()
