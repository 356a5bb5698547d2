# ike/cli/commands/config.py
"""
Configuration command.

Usage:
    ike config                 # Package defaults
    ike config -c ike.yaml     # Defaults merged with ike.yaml
    ike config --json          # Output as JSON
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
import yaml

from ike.config.loader import load_config
from ike.core.config import ConfigError
from ike.logging.logger import configure_logging


def command(config: Optional[Path], as_json: bool, verbose: bool = False) -> None:
    try:
        settings = load_config(config)
    except ConfigError as e:
        typer.echo(f"✗ {e}", err=True)
        raise typer.Exit(code=1)

    configure_logging("DEBUG" if verbose else settings.logging.level)

    data = settings.model_dump(mode="json")
    if as_json:
        typer.echo(json.dumps(data, indent=2))
    else:
        typer.echo(yaml.safe_dump(data, sort_keys=False).rstrip())
