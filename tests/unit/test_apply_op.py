# tests/unit/test_apply_op.py
"""Tests for ike.queryop.apply_op."""

from __future__ import annotations

import pytest

from ike.core.exceptions import QueryError
from ike.query import UNBOUNDED, QDisj, QPos, QRepetition, QSeq, QUnnamed, QWildcard, QWord
from ike.queryop import AddToken, RemoveToken, SetRepeatedToken, SetToken, apply_op

# ---------------------------------------------------------------------------
# Test Fixtures
# ---------------------------------------------------------------------------


def the_capture():
    return QSeq([QWord("the"), QUnnamed(QSeq([QWildcard(), QWildcard()]))])


def repeated(min_, max_):
    return QSeq([QWord("the"), QRepetition(QWildcard(), min_, max_)])


# ---------------------------------------------------------------------------
# Tests for single-token operators
# ---------------------------------------------------------------------------


class TestTokenOps:
    """Tests for SetToken, AddToken and RemoveToken."""

    def test_set_token_inside_capture(self):
        result = apply_op(the_capture(), SetToken(2, QPos("JJ")))
        assert result == QSeq([QWord("the"), QUnnamed(QSeq([QPos("JJ"), QWildcard()]))])

    def test_input_query_unchanged(self):
        query = the_capture()
        apply_op(query, SetToken(1, QWord("a")))
        assert query == the_capture()

    def test_add_token_widens_leaf(self):
        result = apply_op(the_capture(), AddToken(1, QWord("a")))
        assert result.qexprs[0] == QDisj([QWord("the"), QWord("a")])

    def test_add_token_extends_disjunction(self):
        query = QSeq([QDisj([QWord("the"), QWord("a")]), QWildcard()])
        result = apply_op(query, AddToken(1, QWord("an")))
        assert result == QSeq([QDisj([QWord("the"), QWord("a"), QWord("an")]), QWildcard()])

    def test_add_existing_alternative_is_noop(self):
        query = QSeq([QDisj([QWord("the"), QWord("a")]), QWildcard()])
        assert apply_op(query, AddToken(1, QWord("a"))) == query

    def test_remove_token(self):
        result = apply_op(the_capture(), RemoveToken(1))
        assert result == QSeq([QUnnamed(QSeq([QWildcard(), QWildcard()]))])

    def test_remove_outside_sequence(self):
        with pytest.raises(QueryError, match="cannot be removed"):
            apply_op(QWord("the"), RemoveToken(1))

    def test_missing_slot(self):
        with pytest.raises(QueryError, match="no slot 5"):
            apply_op(the_capture(), SetToken(5, QWord("a")))

    def test_not_an_operator(self):
        with pytest.raises(TypeError):
            apply_op(the_capture(), "SetToken")


# ---------------------------------------------------------------------------
# Tests for SetRepeatedToken
# ---------------------------------------------------------------------------


class TestSetRepeatedToken:
    """Unrolling a repetition around the fixed occurrence."""

    def test_middle_occurrence(self):
        result = apply_op(repeated(1, 3), SetRepeatedToken(2, 2, QWord("b")))

        unrolled = QSeq([QWildcard(), QWord("b"), QRepetition(QWildcard(), 0, 1)])
        assert result == QSeq([QWord("the"), unrolled])

    def test_last_allowed_occurrence(self):
        result = apply_op(repeated(1, 3), SetRepeatedToken(2, 3, QPos("NN")))
        assert result == QSeq([QWord("the"), QSeq([QWildcard(), QWildcard(), QPos("NN")])])

    def test_unbounded_repetition(self):
        result = apply_op(repeated(2, UNBOUNDED), SetRepeatedToken(2, 1, QWord("b")))

        unrolled = QSeq([QWord("b"), QRepetition(QWildcard(), 1, UNBOUNDED)])
        assert result == QSeq([QWord("the"), unrolled])

    def test_occurrence_beyond_max(self):
        with pytest.raises(QueryError, match="outside repetition bounds"):
            apply_op(repeated(1, 3), SetRepeatedToken(2, 4, QWord("b")))

    def test_slot_is_not_a_repetition(self):
        with pytest.raises(QueryError, match="not a repetition"):
            apply_op(repeated(1, 3), SetRepeatedToken(1, 1, QWord("b")))
