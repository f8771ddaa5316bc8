"""Knuth-Bendix ordering over words.

The ordering is partial: most pairs of unrelated terms are
`Relation.INCOMPARABLE`, which is a normal result rather than an error.
"""
from knuth_bendix.kb_types import Relation, Variable
from knuth_bendix.operators import DEFAULT_MIN_WEIGHT
from knuth_bendix.word import Word


def family_min_weight(a: Word, b: Word) -> int:
  for w in (a, b):
    min_weight = w.min_weight()
    if min_weight is not None:
      return min_weight
  return DEFAULT_MIN_WEIGHT


def compare(a: Word, b: Word) -> Relation:
  min_weight = family_min_weight(a, b)
  wa = a.weight(min_weight)
  wb = b.weight(min_weight)
  na = a.variable_counts()
  nb = b.variable_counts()
  variables = set(na) | set(nb)

  # Every variable must occur at least as often in the heavier word.
  if wa > wb:
    if all(na[v] >= nb[v] for v in variables):
      return Relation.GREATER
    return Relation.INCOMPARABLE
  if wa < wb:
    if all(na[v] <= nb[v] for v in variables):
      return Relation.LESS
    return Relation.INCOMPARABLE
  if any(na[v] != nb[v] for v in variables):
    return Relation.INCOMPARABLE
  return _compare_equal_weight(a, b)


def _compare_equal_weight(a: Word, b: Word) -> Relation:
  f, g = a.head, b.head
  f_var, g_var = isinstance(f, Variable), isinstance(g, Variable)
  if f_var and g_var:
    return Relation.EQUAL if f == g else Relation.INCOMPARABLE
  # Same weight and variables as a bare variable: a tower of weight 0 unary
  # operators over that variable.
  if f_var:
    return Relation.LESS
  if g_var:
    return Relation.GREATER
  if f.order_index() > g.order_index():
    return Relation.GREATER
  if f.order_index() < g.order_index():
    return Relation.LESS
  for x, y in zip(a.subwords(), b.subwords()):
    relation = compare(x, y)
    if relation is not Relation.EQUAL:
      return relation
  return Relation.EQUAL
