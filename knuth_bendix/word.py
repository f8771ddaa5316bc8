from __future__ import annotations

import itertools as it
from collections import Counter
from typing import Iterable, Iterator, Mapping, Optional, Sequence, Set, Union

import numpy as np

import knuth_bendix.util as u
from knuth_bendix.kb_types import ArityMismatch, MalformedWord, Relation, Variable
from knuth_bendix.operators import DEFAULT_MIN_WEIGHT, Operator

Symbol = Union[Variable, Operator]


def arity(sym: Symbol) -> int:
  return 0 if isinstance(sym, Variable) else sym.arity()


def as_variable(v: Union[str, Variable]) -> Variable:
  return v if isinstance(v, Variable) else Variable(v)


class Word:
  """A term stored as its symbols in prefix order.

  An operator is immediately followed by the encodings of its arguments, so
  the arities alone determine the tree. Every index of `syms` starts exactly
  one subterm; `span_end` finds where it stops.
  """

  __slots__ = ('syms',)

  def __init__(self, syms: Iterable[Symbol]):
    self.syms = tuple(syms)
    if not self.is_well_formed():
      raise MalformedWord(
          'symbols do not encode exactly one term: '
          + ' '.join(map(str, self.syms)))

  @classmethod
  def _raw(cls, syms: Sequence[Symbol]) -> Word:
    """Wraps symbols already known to encode one term."""
    word = cls.__new__(cls)
    word.syms = tuple(syms)
    return word

  @classmethod
  def from_symbols(cls, syms: Iterable[Symbol]) -> Word:
    return cls(syms)

  @property
  def head(self) -> Symbol:
    return self.syms[0]

  def is_var(self) -> bool:
    return isinstance(self.syms[0], Variable)

  def is_well_formed(self) -> bool:
    if not self.syms:
      return False
    balance = 1 + np.cumsum([arity(s) - 1 for s in self.syms])
    return bool(balance[-1] == 0 and np.all(balance[:-1] > 0))

  def span_end(self, start: int) -> int:
    """Index one past the last symbol of the subterm starting at `start`."""
    need = 1
    i = start
    while need > 0:
      need += arity(self.syms[i]) - 1
      i += 1
    return i

  def subwords(self) -> Iterator[Word]:
    i = 1
    for _ in range(arity(self.syms[0])):
      end = self.span_end(i)
      yield Word._raw(self.syms[i:end])
      i = end

  def positions(self) -> range:
    return range(len(self.syms))

  def subword_at(self, start: int) -> Word:
    return Word._raw(self.syms[start:self.span_end(start)])

  def replace_at(self, start: int, replacement: Word) -> Word:
    end = self.span_end(start)
    return Word._raw(self.syms[:start] + replacement.syms + self.syms[end:])

  def min_weight(self) -> Optional[int]:
    for s in self.syms:
      if not isinstance(s, Variable):
        return s.min_weight()
    return None

  def weight(self, min_weight: Optional[int] = None) -> int:
    if min_weight is None:
      min_weight = self.min_weight()
    if min_weight is None:
      min_weight = DEFAULT_MIN_WEIGHT
    return sum(
        min_weight if isinstance(s, Variable) else s.weight()
        for s in self.syms)

  def variable_occurrence_count(self, variable: Union[str, Variable]) -> int:
    variable = as_variable(variable)
    return sum(1 for s in self.syms if s == variable)

  def variable_counts(self) -> Counter:
    return Counter(s for s in self.syms if isinstance(s, Variable))

  def variable_set(self) -> Set[Variable]:
    return {s for s in self.syms if isinstance(s, Variable)}

  def rename(self, mapping: Mapping[Variable, Variable]) -> Word:
    return Word._raw(
        mapping.get(s, s) if isinstance(s, Variable) else s for s in self.syms)

  def _relation(self, other: Word) -> Relation:
    from knuth_bendix.ordering import compare
    return compare(self, other)

  def __eq__(self, other):
    if not isinstance(other, Word):
      return NotImplemented
    # ordering-Equal words are exactly the syntactically identical ones
    return self.syms == other.syms

  def __hash__(self):
    return hash(self.syms)

  def __gt__(self, other: Word) -> bool:
    return self._relation(other) is Relation.GREATER

  def __lt__(self, other: Word) -> bool:
    return self._relation(other) is Relation.LESS

  def __ge__(self, other: Word) -> bool:
    return self._relation(other) in (Relation.GREATER, Relation.EQUAL)

  def __le__(self, other: Word) -> bool:
    return self._relation(other) in (Relation.LESS, Relation.EQUAL)

  def __len__(self):
    return len(self.syms)

  def __str__(self):
    return u.word2str(self)

  def __repr__(self):
    return f'Word({self.__str__()!r})'


def var(identifier: Union[str, Variable]) -> Word:
  return Word._raw((as_variable(identifier),))


def op(operator: Operator, args: Iterable[Word] = ()) -> Word:
  args = tuple(args)
  if len(args) != operator.arity():
    raise ArityMismatch(operator, operator.arity(), len(args))
  return Word._raw(
      tuple(it.chain((operator,), *(a.syms for a in args))))
