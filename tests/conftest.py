"""Pytest fixtures for knuth_bendix tests."""

import pytest

from knuth_bendix.operators import Signature
from knuth_bendix.word import op, var


@pytest.fixture
def monoid():
    """Identity and multiplication, both of weight 1."""
    return Signature({'1': (0, 1), '*': (2, 1)})


@pytest.fixture
def group():
    """Group signature ordered e < * < i, with weight 0 for * and i."""
    return Signature({'e': (0, 1), '*': (2, 0), 'i': (1, 0)})


@pytest.fixture
def additive():
    """Zero, addition and a weight 0 negation."""
    return Signature({'0': (0, 1), '+': (2, 1), '-': (1, 0)})


@pytest.fixture
def monoid_axioms(monoid):
    x, y, z = var('x'), var('y'), var('z')
    one = op(monoid['1'])

    def mul(a, b):
        return op(monoid['*'], (a, b))

    return [
        (mul(mul(x, y), z), mul(x, mul(y, z))),
        (mul(x, one), x),
        (mul(one, x), x),
    ]


@pytest.fixture
def group_axioms(group):
    x, y, z = var('x'), var('y'), var('z')
    e = op(group['e'])

    def mul(a, b):
        return op(group['*'], (a, b))

    return [
        (mul(e, x), x),
        (mul(op(group['i'], (x,)), x), e),
        (mul(mul(x, y), z), mul(x, mul(y, z))),
    ]
