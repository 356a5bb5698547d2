# ike/query/language.py
"""
Structural utilities over query expressions.

All functions are pure: they never mutate their input and return new
trees where a change is requested.

    capture_groups(expr)      capture groups in document order
    query_length(expr)        fixed token count or VARIABLE_LENGTH
    token_paths(expr)         paths of the query's token slots
    node_at(expr, path)       subtree at a path
    substitute(expr, path, r) new tree with the subtree at path replaced
    query_string(expr)        readable rendering for logs and the CLI

A path is a tuple of child indices from the root. QAnd children are
numbered 0 and 1; single-child wrappers (captures, repetitions) use 0.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from ike.core.exceptions import QueryError

from .ast import (
    UNBOUNDED,
    VARIABLE_LENGTH,
    QAnd,
    QCapture,
    QDisj,
    QExpr,
    QNamed,
    QPos,
    QRepetition,
    QSeq,
    QUnnamed,
    QWildcard,
    QWord,
)

Path = Tuple[int, ...]


def _unknown(expr: object) -> TypeError:
    return TypeError(f"Not a query expression: {expr!r}")


# =============================================================================
# Capture groups
# =============================================================================


def iter_capture_groups(expr: QExpr) -> Iterator[QCapture]:
    """Yield capture groups lazily, outer groups before the groups they contain."""
    if isinstance(expr, (QWord, QPos, QWildcard)):
        return
    elif isinstance(expr, (QSeq, QDisj)):
        for child in expr.qexprs:
            yield from iter_capture_groups(child)
    elif isinstance(expr, QAnd):
        yield from iter_capture_groups(expr.qexpr1)
        yield from iter_capture_groups(expr.qexpr2)
    elif isinstance(expr, QRepetition):
        yield from iter_capture_groups(expr.qexpr)
    elif isinstance(expr, (QUnnamed, QNamed)):
        yield expr
        yield from iter_capture_groups(expr.qexpr)
    else:
        raise _unknown(expr)


def capture_groups(expr: QExpr) -> List[QCapture]:
    """Capture groups of `expr` in document order."""
    return list(iter_capture_groups(expr))


# =============================================================================
# Length
# =============================================================================


def _common_length(lengths: List[int]) -> int:
    if not lengths or VARIABLE_LENGTH in lengths:
        return VARIABLE_LENGTH
    first = lengths[0]
    return first if all(length == first for length in lengths) else VARIABLE_LENGTH


def query_length(expr: QExpr) -> int:
    """
    Number of tokens every match of `expr` spans, or VARIABLE_LENGTH.

    Leaves span one token. A sequence spans the sum of its children. A
    disjunction or conjunction has a fixed length only when all of its
    children agree on it.
    """
    if isinstance(expr, (QWord, QPos, QWildcard)):
        return 1
    elif isinstance(expr, QSeq):
        total = 0
        for child in expr.qexprs:
            length = query_length(child)
            if length == VARIABLE_LENGTH:
                return VARIABLE_LENGTH
            total += length
        return total
    elif isinstance(expr, QDisj):
        return _common_length([query_length(child) for child in expr.qexprs])
    elif isinstance(expr, QAnd):
        return _common_length([query_length(expr.qexpr1), query_length(expr.qexpr2)])
    elif isinstance(expr, QRepetition):
        child = query_length(expr.qexpr)
        if child == VARIABLE_LENGTH or expr.min != expr.max:
            return VARIABLE_LENGTH
        return child * expr.min
    elif isinstance(expr, (QUnnamed, QNamed)):
        return query_length(expr.qexpr)
    else:
        raise _unknown(expr)


# =============================================================================
# Paths and substitution
# =============================================================================


def _children(expr: QExpr) -> Tuple[QExpr, ...]:
    if isinstance(expr, (QWord, QPos, QWildcard)):
        return ()
    elif isinstance(expr, (QSeq, QDisj)):
        return expr.qexprs
    elif isinstance(expr, QAnd):
        return (expr.qexpr1, expr.qexpr2)
    elif isinstance(expr, (QRepetition, QUnnamed, QNamed)):
        return (expr.qexpr,)
    else:
        raise _unknown(expr)


def _with_child(expr: QExpr, index: int, child: QExpr) -> QExpr:
    if isinstance(expr, QSeq):
        return QSeq(expr.qexprs[:index] + (child,) + expr.qexprs[index + 1 :])
    elif isinstance(expr, QDisj):
        return QDisj(expr.qexprs[:index] + (child,) + expr.qexprs[index + 1 :])
    elif isinstance(expr, QAnd):
        return QAnd(child, expr.qexpr2) if index == 0 else QAnd(expr.qexpr1, child)
    elif isinstance(expr, QRepetition):
        return QRepetition(child, expr.min, expr.max)
    elif isinstance(expr, QUnnamed):
        return QUnnamed(child)
    elif isinstance(expr, QNamed):
        return QNamed(child, expr.name)
    else:
        raise _unknown(expr)


def node_at(expr: QExpr, path: Path) -> QExpr:
    """Subtree of `expr` at `path`."""
    node = expr
    for depth, index in enumerate(path):
        children = _children(node)
        if not 0 <= index < len(children):
            raise QueryError(f"No subtree at path {path} (failed at depth {depth})")
        node = children[index]
    return node


def substitute(expr: QExpr, path: Path, replacement: QExpr) -> QExpr:
    """Return a copy of `expr` with the subtree at `path` replaced by `replacement`."""
    if not path:
        return replacement
    index, rest = path[0], path[1:]
    children = _children(expr)
    if not 0 <= index < len(children):
        raise QueryError(f"No subtree at path {path} in {query_string(expr)}")
    return _with_child(expr, index, substitute(children[index], rest, replacement))


def token_paths(expr: QExpr) -> List[Path]:
    """
    Paths of the token-level positions (slots) of a query, in order.

    Sequences and capture groups are transparent; any other node is one
    slot. Slot n (1-based) of a query is token_paths(query)[n - 1].

        >>> token_paths(QSeq([QWord("the"), QUnnamed(QSeq([QWildcard(), QPos("NN")]))]))
        [(0,), (1, 0, 0), (1, 0, 1)]
    """
    paths: List[Path] = []

    def visit(node: QExpr, path: Path) -> None:
        if isinstance(node, QSeq):
            for i, child in enumerate(node.qexprs):
                visit(child, path + (i,))
        elif isinstance(node, (QUnnamed, QNamed)):
            visit(node.qexpr, path + (0,))
        elif isinstance(node, (QWord, QPos, QWildcard, QDisj, QAnd, QRepetition)):
            paths.append(path)
        else:
            raise _unknown(node)

    visit(expr, ())
    return paths


# =============================================================================
# Rendering
# =============================================================================


def query_string(expr: QExpr) -> str:
    """Render `expr` in a compact regex-like syntax."""
    if isinstance(expr, QWord):
        return expr.value
    elif isinstance(expr, QPos):
        return expr.value
    elif isinstance(expr, QWildcard):
        return "."
    elif isinstance(expr, QSeq):
        return " ".join(query_string(child) for child in expr.qexprs)
    elif isinstance(expr, QDisj):
        return "(?:" + "|".join(query_string(child) for child in expr.qexprs) + ")"
    elif isinstance(expr, QAnd):
        return f"(?:{query_string(expr.qexpr1)})&(?:{query_string(expr.qexpr2)})"
    elif isinstance(expr, QRepetition):
        upper = "" if expr.max == UNBOUNDED else str(expr.max)
        inner = query_string(expr.qexpr)
        if isinstance(expr.qexpr, QSeq) and len(expr.qexpr.qexprs) > 1:
            inner = f"(?:{inner})"
        return f"{inner}[{expr.min},{upper}]"
    elif isinstance(expr, QUnnamed):
        return f"({query_string(expr.qexpr)})"
    elif isinstance(expr, QNamed):
        return f"(?<{expr.name}>{query_string(expr.qexpr)})"
    else:
        raise _unknown(expr)
