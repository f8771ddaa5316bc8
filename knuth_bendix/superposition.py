from __future__ import annotations

from typing import Iterator, NamedTuple, Optional

from knuth_bendix.kb_types import Variable
from knuth_bendix.rules import Rule
from knuth_bendix.unification import Substitution, unify
from knuth_bendix.word import Word


class Overlap(NamedTuple):
  in_left: bool  # the overlap sits inside t (True) or inside u (False)
  position: int  # start index of the overlapped subterm in its host
  unifier: Substitution


class CriticalPair(NamedTuple):
  term: Word
  left: Word  # term rewritten by the rule from t
  right: Word  # term rewritten by the rule from u


def _unify_either(a: Word, b: Word) -> Optional[Substitution]:
  s = unify(a, b)
  if s is None:
    s = unify(b, a)
  return s


def _inner_positions(word: Word) -> Iterator[int]:
  for i in word.positions():
    if i > 0 and not isinstance(word.syms[i], Variable):
      yield i


def overlaps(t: Word, u: Word) -> Iterator[Overlap]:
  """Every overlap of t and u: at the root, inside t, then inside u."""
  if t.is_var() or u.is_var():
    return
  s = _unify_either(t, u)
  if s is not None:
    yield Overlap(True, 0, s)
  for i in _inner_positions(t):
    s = _unify_either(t.subword_at(i), u)
    if s is not None:
      yield Overlap(True, i, s)
  for i in _inner_positions(u):
    s = _unify_either(u.subword_at(i), t)
    if s is not None:
      yield Overlap(False, i, s)


def critical_term(t: Word, u: Word) -> Optional[Word]:
  for overlap in overlaps(t, u):
    host = t if overlap.in_left else u
    return overlap.unifier.apply(host)
  return None


def critical_pairs(r1: Rule, r2: Rule) -> Iterator[CriticalPair]:
  """Critical pairs of two rules whose variables are already disjoint."""
  for in_left, position, s in overlaps(r1.lhs, r2.lhs):
    if in_left:
      term = s.apply(r1.lhs)
      left = s.apply(r1.rhs)
      right = term.replace_at(
          s.apply_position(r1.lhs, position), s.apply(r2.rhs))
    else:
      term = s.apply(r2.lhs)
      left = term.replace_at(
          s.apply_position(r2.lhs, position), s.apply(r1.rhs))
      right = s.apply(r2.rhs)
    yield CriticalPair(term, left, right)
