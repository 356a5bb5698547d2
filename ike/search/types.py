# ike/search/types.py
"""
Types at the search backend boundary.

The corpus index, tokenizer and query execution live outside this package.
Adapters implement SearchBackend; everything else only sees Hit and Token.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Protocol, Tuple, runtime_checkable

from ike.query.ast import QExpr

# Half-open token span [start, end) within a hit.
Span = Tuple[int, int]


@dataclass(frozen=True)
class Token:
    """A single corpus token."""

    word: str
    pos: str
    doc_id: str = ""


@dataclass(frozen=True)
class Hit:
    """
    One corpus match.

    Attributes:
        tokens: Matched tokens in order
        captures: Capture-group name -> span within tokens. Unnamed groups
            are keyed by their 1-based position as a string.
    """

    tokens: Tuple[Token, ...]
    captures: Mapping[str, Span] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "tokens", tuple(self.tokens))

    def capture_tokens(self, group: str) -> Tuple[Token, ...] | None:
        span = self.captures.get(group)
        if span is None:
            return None
        start, end = span
        return self.tokens[start:end]


@runtime_checkable
class SearchBackend(Protocol):
    """
    Corpus search engine.

    compile() is expected to accept every QExpr this package produces.
    Errors raised by find() reach the caller unchanged.
    """

    def compile(self, qexpr: QExpr) -> Any: ...

    def find(self, compiled: Any) -> Iterable[Hit]: ...
