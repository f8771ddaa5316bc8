"""Tests for knuth_bendix.rules module."""

import pytest

from knuth_bendix.kb_types import NotOrientable
from knuth_bendix.operators import Signature
from knuth_bendix.rules import Axiom, Rule, RuleSet, orient
from knuth_bendix.word import op, var

MONOID = Signature({'1': (0, 1), '*': (2, 1)})
ONE = op(MONOID['1'])


def mul(a, b):
    return op(MONOID['*'], (a, b))


x, y, z = var('x'), var('y'), var('z')


@pytest.fixture
def identity_rules():
    return RuleSet([Rule(mul(x, ONE), x), Rule(mul(ONE, x), x)])


class TestRule:
    def test_oriented(self):
        rule = Rule.oriented(mul(x, ONE), x)
        assert rule.lhs == mul(x, ONE)

    def test_oriented_rejects_wrong_direction(self):
        with pytest.raises(NotOrientable):
            Rule.oriented(x, mul(x, ONE))
        with pytest.raises(NotOrientable):
            Rule.oriented(x, y)

    def test_rewrite_leftmost_outermost(self):
        rule = Rule(mul(x, ONE), x)
        word = mul(mul(y, ONE), ONE)
        assert rule.rewrite(word) == mul(y, ONE)

    def test_rewrite_below_root(self):
        rule = Rule(mul(x, ONE), x)
        assert rule.rewrite(mul(z, mul(y, ONE))) == mul(z, y)
        assert rule.rewrite(mul(y, z)) is None
        assert rule.reduces(mul(ONE, mul(y, ONE)))

    def test_rewrite_at_skips_other_head(self):
        rule = Rule(mul(x, ONE), x)
        word = mul(ONE, mul(y, ONE))
        assert rule.rewrite_at(word, 1) is None
        assert rule.rewrite_at(word, 2) == mul(ONE, y)
        assert Rule(x, ONE).rewrite_at(word, 1) == mul(ONE, mul(y, ONE))

    def test_str(self):
        assert str(Rule(mul(x, ONE), x)) == '*(x, 1) -> x'
        assert str(Axiom(mul(x, ONE), x)) == '*(x, 1) = x'


class TestOrient:
    def test_either_direction(self):
        assert orient(Axiom(mul(x, ONE), x)) == Rule(mul(x, ONE), x)
        assert orient(Axiom(x, mul(ONE, x))) == Rule(mul(ONE, x), x)

    def test_equal_or_incomparable(self):
        assert orient(Axiom(x, x)) is None
        assert orient(Axiom(x, y)) is None
        assert orient(Axiom(mul(x, y), mul(y, x))) is None


class TestRuleSet:
    def test_normalize(self, identity_rules):
        word = mul(mul(ONE, x), mul(y, ONE))
        assert identity_rules.normalize(word) == mul(x, y)
        assert identity_rules.normalize(mul(ONE, ONE)) == ONE
        assert identity_rules.is_normal(mul(x, y))

    def test_rewrite_once_reports_rule(self, identity_rules):
        word, rule = identity_rules.rewrite_once(mul(ONE, x))
        assert word == x
        assert rule == Rule(mul(ONE, x), x)

    def test_reducible_by(self, identity_rules):
        rules = RuleSet(identity_rules)
        rules.add(Rule(mul(mul(x, y), z), mul(x, mul(y, z))))
        collapse = Rule(mul(ONE, ONE), ONE)
        assert rules.reducible_by(collapse) == []
        unit = Rule(mul(x, y), x)
        assert len(rules.reducible_by(unit)) == 3

    def test_insertion_order_and_removal(self, identity_rules):
        first, second = list(identity_rules)
        identity_rules.remove(first)
        assert list(identity_rules) == [second]
        assert first not in identity_rules
        assert len(identity_rules) == 1
