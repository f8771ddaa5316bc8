from __future__ import annotations

from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

from ordered_set import OrderedSet

import knuth_bendix.util as u
from knuth_bendix.kb_types import NotOrientable, Relation, Variable
from knuth_bendix.ordering import compare
from knuth_bendix.unification import match
from knuth_bendix.word import Word


class Axiom(NamedTuple):
  left: Word
  right: Word

  def __str__(self):
    return u.axiom2str(self)


class Rule(NamedTuple):
  lhs: Word
  rhs: Word

  @classmethod
  def oriented(cls, lhs: Word, rhs: Word) -> Rule:
    if compare(lhs, rhs) is not Relation.GREATER:
      raise NotOrientable(f'{lhs} is not greater than {rhs}')
    return cls(lhs, rhs)

  def rewrite_at(self, word: Word, position: int) -> Optional[Word]:
    head = self.lhs.head
    if not isinstance(head, Variable) and word.syms[position] != head:
      return None
    m = match(self.lhs, word.subword_at(position))
    if m is None:
      return None
    return word.replace_at(position, m.apply(self.rhs))

  def rewrite(self, word: Word) -> Optional[Word]:
    """One step at the leftmost-outermost redex, or None."""
    for position in word.positions():
      rewritten = self.rewrite_at(word, position)
      if rewritten is not None:
        return rewritten
    return None

  def reduces(self, word: Word) -> bool:
    return self.rewrite(word) is not None

  def __str__(self):
    return u.rule2str(self)


def orient(axiom: Axiom) -> Optional[Rule]:
  """The rule for axiom, or None when its sides are equal or incomparable."""
  relation = compare(axiom.left, axiom.right)
  if relation is Relation.GREATER:
    return Rule(axiom.left, axiom.right)
  if relation is Relation.LESS:
    return Rule(axiom.right, axiom.left)
  return None


class RuleSet:
  """Rules in insertion order; normalization tries them in that order."""

  def __init__(self, rules: Iterable[Rule] = ()):
    self.rules: OrderedSet[Rule] = OrderedSet(rules)

  def add(self, rule: Rule):
    self.rules.add(rule)

  def remove(self, rule: Rule):
    self.rules.discard(rule)

  def rewrite_once(self, word: Word) -> Optional[Tuple[Word, Rule]]:
    for position in word.positions():
      for rule in self.rules:
        rewritten = rule.rewrite_at(word, position)
        if rewritten is not None:
          return rewritten, rule
    return None

  def normalize(self, word: Word) -> Word:
    # Terminates since every rule decreases the word in a well-founded order.
    while True:
      step = self.rewrite_once(word)
      if step is None:
        return word
      word = step[0]

  def is_normal(self, word: Word) -> bool:
    return self.rewrite_once(word) is None

  def reducible_by(self, rule: Rule) -> List[Rule]:
    return [
        r for r in self.rules
        if r != rule and (rule.reduces(r.lhs) or rule.reduces(r.rhs))]

  def __iter__(self) -> Iterator[Rule]:
    return iter(self.rules)

  def __len__(self):
    return len(self.rules)

  def __contains__(self, rule: Rule):
    return rule in self.rules

  def __str__(self):
    return '\n'.join(map(u.rule2str, self.rules))
