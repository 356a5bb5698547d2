# ike/queryop/leaves.py
"""Which literal leaves may be suggested for a token."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, FrozenSet, List

from ike.query.ast import QExpr, QLeaf, QPos, QWildcard, QWord
from ike.search.types import Token

if TYPE_CHECKING:
    from ike.config.schema import OperatorConfig


@dataclass(frozen=True)
class QLeafGenerator:
    """
    Suggests word and/or part-of-speech leaves for observed tokens.

    Attributes:
        pos: Suggest QPos leaves
        word: Suggest QWord leaves
        avoid: Leaves that must never be suggested
    """

    pos: bool
    word: bool
    avoid: FrozenSet[QLeaf] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "avoid", frozenset(self.avoid))

    @classmethod
    def from_config(cls, config: "OperatorConfig") -> "QLeafGenerator":
        return cls(pos=config.pos, word=config.word)

    @property
    def enabled(self) -> bool:
        return self.pos or self.word

    def generate(self, token: Token) -> List[QLeaf]:
        leaves: List[QLeaf] = []
        if self.word:
            leaves.append(QWord(token.word))
        if self.pos:
            leaves.append(QPos(token.pos))
        return [leaf for leaf in leaves if leaf not in self.avoid]


def leaf_matches(leaf: QExpr, token: Token) -> bool:
    """Whether a single-token leaf accepts `token`. Words compare case-insensitively."""
    if isinstance(leaf, QWord):
        return leaf.value.lower() == token.word.lower()
    if isinstance(leaf, QPos):
        return leaf.value == token.pos
    if isinstance(leaf, QWildcard):
        return True
    raise TypeError(f"Not a leaf: {leaf!r}")
