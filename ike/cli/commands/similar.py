# ike/cli/commands/similar.py
"""
Similar-phrase command.

Usage:
    ike similar "dark red" -c ike.yaml
    ike similar red blue green -c ike.yaml --limit 50
    ike similar red -c ike.yaml --centroid --json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer

from ike.config.loader import load_config
from ike.core.config import ConfigError
from ike.logging.logger import configure_logging, get_logger
from ike.logging.tags import CLI
from ike.similarity.factory import build_combinator

logger = get_logger(__name__)


def command(
    phrases: List[str],
    config: Optional[Path],
    limit: int,
    centroid: bool,
    as_json: bool,
    verbose: bool = False,
) -> None:
    try:
        settings = load_config(config)
        configure_logging("DEBUG" if verbose else settings.logging.level)
        combinator = build_combinator(settings.similarity)
    except ConfigError as e:
        typer.echo(f"✗ {e}", err=True)
        raise typer.Exit(code=1)

    if len(phrases) > 1 or centroid:
        logger.info(f"{CLI} Searching around the centroid of {len(phrases)} phrases")
        results = combinator.similar_to_phrases(phrases)
    else:
        results = combinator.similar_to_phrase(phrases[0])

    results = results[:limit]

    if as_json:
        typer.echo(
            json.dumps([{"phrase": r.phrase, "similarity": r.similarity} for r in results], indent=2)
        )
        return

    if not results:
        typer.echo("No similar phrases found.")
        return

    for r in results:
        typer.echo(f"{r.similarity:.4f}\t{r.phrase}")
