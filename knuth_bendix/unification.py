from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from knuth_bendix.kb_types import Variable
from knuth_bendix.word import Word, as_variable


class Substitution:

  def __init__(self, subst: Optional[Mapping[Variable, Word]] = None):
    self.subst: Dict[Variable, Word] = dict(subst or {})

  def get(self, v: Union[str, Variable]) -> Optional[Word]:
    return self.subst.get(as_variable(v))

  def add(self, v: Variable, w: Word):
    """Binds v, applying the new binding to every existing one."""
    single = Substitution({v: w})
    self.subst = {k: single.apply(b) for k, b in self.subst.items()}
    self.subst[v] = w

  def apply(self, word: Word) -> Word:
    if not self.subst:
      return word
    syms = []
    for s in word.syms:
      if isinstance(s, Variable) and s in self.subst:
        syms.extend(self.subst[s].syms)
      else:
        syms.append(s)
    return Word._raw(syms)

  def apply_position(self, word: Word, position: int) -> int:
    """Index in apply(word) of the subterm starting at position in word."""
    return sum(
        len(self.subst[s].syms) if s in self.subst else 1
        for s in word.syms[:position])

  def __contains__(self, v):
    return as_variable(v) in self.subst

  def __len__(self):
    return len(self.subst)

  def __eq__(self, other):
    if not isinstance(other, Substitution):
      return NotImplemented
    return self.subst == other.subst

  def __str__(self):
    return '{' + ', '.join(
        f'{v} -> {w}' for v, w in sorted(self.subst.items())) + '}'

  def __repr__(self):
    return f'Substitution({self.__str__()})'


def unify(a: Word, b: Word) -> Optional[Substitution]:
  """Most general unifier of a and b, or None.

  Bindings are applied eagerly so the result is idempotent: a variable bound
  twice to different words shows up as an operator clash. Binding a variable
  to a word that contains it fails.
  """
  subst = Substitution()
  pending: List[Tuple[Word, Word]] = [(a, b)]
  while pending:
    x, y = pending.pop()
    x, y = subst.apply(x), subst.apply(y)
    if x.syms == y.syms:
      continue
    if x.is_var() or y.is_var():
      v, w = (x.head, y) if x.is_var() else (y.head, x)
      if v in w.variable_set():
        return None
      subst.add(v, w)
    elif x.head != y.head or x.head.arity() != y.head.arity():
      return None
    else:
      pending.extend(reversed(list(zip(x.subwords(), y.subwords()))))
  return subst


def match(pattern: Word, target: Word) -> Optional[Substitution]:
  """Substitution s with s(pattern) == target, binding pattern variables only."""
  bindings: Dict[Variable, Word] = {}
  j = 0
  n = len(target.syms)
  for s in pattern.syms:
    if j >= n:
      return None
    if isinstance(s, Variable):
      end = target.span_end(j)
      bound = Word._raw(target.syms[j:end])
      if bindings.setdefault(s, bound).syms != bound.syms:
        return None
      j = end
    elif target.syms[j] != s:
      return None
    else:
      j += 1
  if j != n:
    return None
  return Substitution(bindings)


def rename_apart(avoid: Iterable[Word], *words: Word) -> Tuple[Word, ...]:
  """Renames the variables of `words` away from those occurring in `avoid`."""
  taken = set()
  for w in avoid:
    taken |= w.variable_set()
  own = set()
  for w in words:
    own |= w.variable_set()
  renaming = {}
  for v in sorted(own):
    if v in taken:
      name = v.name
      while Variable(name) in taken or Variable(name) in own:
        name += "'"
      renaming[v] = Variable(name)
      taken.add(renaming[v])
  return tuple(w.rename(renaming) for w in words)
