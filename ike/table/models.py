# ike/table/models.py
"""
Labelled example tables.

A table holds positive and negative example rows for one slot. Each row has
one value per column and each value is a sequence of words.

Example YAML (one column):
    name: colors
    cols: [color]
    positive:
      - ["dark red"]
      - ["blue"]
    negative:
      - ["car"]
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ike.core.exceptions import TableError
from ike.query.ast import QWord


class TableValue(BaseModel):
    """One cell: an ordered sequence of word tokens."""

    words: tuple[str, ...] = Field(..., description="Cell words in order")

    model_config = ConfigDict(frozen=True)

    @field_validator("words", mode="before")
    @classmethod
    def _split_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            return tuple(value.split())
        return value

    @property
    def qwords(self) -> tuple[QWord, ...]:
        return tuple(QWord(w) for w in self.words)


class TableRow(BaseModel):
    """One example row, one value per column."""

    values: tuple[TableValue, ...]

    model_config = ConfigDict(frozen=True)


class Table(BaseModel):
    """Positive and negative example rows for a named slot."""

    name: str
    cols: tuple[str, ...]
    positive: tuple[TableRow, ...] = ()
    negative: tuple[TableRow, ...] = ()

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _row_widths(self) -> "Table":
        for row in self.positive + self.negative:
            if len(row.values) != len(self.cols):
                raise ValueError(
                    f"Row has {len(row.values)} values but table '{self.name}' "
                    f"has {len(self.cols)} columns"
                )
        return self

    @property
    def rows(self) -> tuple[TableRow, ...]:
        """Positive rows followed by negative rows."""
        return self.positive + self.negative

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Table":
        """
        Build a table from plain data.

        Rows may be lists of cell strings or, for one-column tables, bare
        strings. Cell strings are split on whitespace.
        """

        def rows(raw: list[Any]) -> list[dict[str, Any]]:
            out = []
            for row in raw or []:
                cells = [row] if isinstance(row, str) else list(row)
                out.append({"values": [{"words": cell} for cell in cells]})
            return out

        return cls.model_validate(
            {
                "name": data.get("name"),
                "cols": data.get("cols"),
                "positive": rows(data.get("positive", [])),
                "negative": rows(data.get("negative", [])),
            }
        )


def load_table(path: Union[str, Path]) -> Table:
    """
    Load a table from a .json, .yaml or .yml file.

    Raises:
        TableError: If the file is missing or does not describe a valid table
    """
    p = Path(path)
    if not p.exists():
        raise TableError(f"Table file not found: {p}")

    with p.open("r", encoding="utf-8") as f:
        if p.suffix == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise TableError(f"Table file root must be a mapping: {p}")

    try:
        return Table.from_dict(data)
    except ValidationError as e:
        raise TableError(f"Invalid table file {p}: {e}") from e
