from __future__ import annotations

import dataclasses as dcl
import enum
from collections import deque
from typing import Deque, Iterable, List, NamedTuple, Optional, Tuple, Union

from tqdm import tqdm

import knuth_bendix.util as u
from knuth_bendix.kb_types import Relation
from knuth_bendix.ordering import compare
from knuth_bendix.rules import Axiom, Rule, RuleSet
from knuth_bendix.superposition import critical_pairs
from knuth_bendix.unification import rename_apart
from knuth_bendix.word import Word


class CompletionState(enum.Enum):
  PROCESSING = 'processing'
  STUCK = 'stuck'
  CONVERGED = 'converged'
  GAVE_UP = 'gave up'


@dcl.dataclass
class CompletionConfig:
  max_iterations: int = 1000  # axioms popped from the worklist
  max_rules: Optional[int] = None
  verbose: bool = False


class Complete(NamedTuple):
  rules: List[Rule]


class Stuck(NamedTuple):
  axiom: Axiom  # normalized sides, incomparable
  rules: List[Rule]


class GaveUp(NamedTuple):
  rules: List[Rule]
  pending: List[Axiom]
  iterations: int


Outcome = Union[Complete, Stuck, GaveUp]


class Completion:
  """Knuth-Bendix completion as a step-wise state machine.

  The rule set may be supplied by the caller and is mutated in place, so a
  run can be inspected or resumed between steps.
  """

  def __init__(
      self,
      axioms: Iterable[Tuple[Word, Word]],
      config: Optional[CompletionConfig] = None,
      rules: Optional[RuleSet] = None):
    self.config = config or CompletionConfig()
    self.rules = rules if rules is not None else RuleSet()
    self.pending: Deque[Axiom] = deque(Axiom(*a) for a in axioms)
    self.iterations = 0
    self.stuck_axiom: Optional[Axiom] = None
    self.state = (
        CompletionState.PROCESSING if self.pending
        else CompletionState.CONVERGED)

  def _over_budget(self) -> bool:
    max_rules = self.config.max_rules
    return (self.iterations >= self.config.max_iterations or
            (max_rules is not None and len(self.rules) > max_rules))

  def step(self) -> CompletionState:
    if self.state is not CompletionState.PROCESSING:
      return self.state
    if self._over_budget():
      self.state = CompletionState.GAVE_UP
      return self.state

    self.iterations += 1
    axiom = self.pending.popleft()
    left = self.rules.normalize(axiom.left)
    right = self.rules.normalize(axiom.right)
    relation = compare(left, right)
    if relation is Relation.INCOMPARABLE:
      self.stuck_axiom = Axiom(left, right)
      self.state = CompletionState.STUCK
      return self.state
    if relation is Relation.GREATER:
      self._add_rule(Rule(left, right))
    elif relation is Relation.LESS:
      self._add_rule(Rule(right, left))

    if not self.pending:
      self.state = CompletionState.CONVERGED
    return self.state

  def _add_rule(self, rule: Rule):
    for old in self.rules.reducible_by(rule):
      self.rules.remove(old)
      self.pending.append(Axiom(old.lhs, old.rhs))
    self.rules.add(rule)
    rhs = self.rules.normalize(rule.rhs)
    if rhs.syms != rule.rhs.syms:
      self.rules.remove(rule)
      rule = Rule(rule.lhs, rhs)
      self.rules.add(rule)
    for other in list(self.rules):
      self._superpose(rule, other)

  def _superpose(self, rule: Rule, other: Rule):
    other = Rule(*rename_apart((rule.lhs, rule.rhs), other.lhs, other.rhs))
    for pair in critical_pairs(rule, other):
      left = self.rules.normalize(pair.left)
      right = self.rules.normalize(pair.right)
      if left.syms == right.syms:
        continue
      renaming = u.canonical_renaming(left, right)
      self.pending.append(Axiom(left.rename(renaming), right.rename(renaming)))

  def outcome(self) -> Optional[Outcome]:
    rules = list(self.rules)
    if self.state is CompletionState.CONVERGED:
      return Complete(rules)
    if self.state is CompletionState.STUCK:
      return Stuck(self.stuck_axiom, rules)
    if self.state is CompletionState.GAVE_UP:
      return GaveUp(rules, list(self.pending), self.iterations)
    return None

  def run(self) -> Outcome:
    verbose = self.config.verbose
    if verbose:
      print(f'Completing {len(self.pending)} axiom(s)...')
    with tqdm(total=self.config.max_iterations, disable=not verbose) as pbar:
      while self.state is CompletionState.PROCESSING:
        before = self.iterations
        self.step()
        pbar.update(self.iterations - before)
    if verbose:
      if self.state is CompletionState.STUCK:
        print(f'Cannot orient {self.stuck_axiom}')
      else:
        print(f'Completion {self.state.value} after {self.iterations} '
              f'iteration(s) with {len(self.rules)} rule(s)')
    return self.outcome()


def complete(
    axioms: Iterable[Tuple[Word, Word]],
    iteration_bound: Optional[int] = None,
    config: Optional[CompletionConfig] = None,
    rules: Optional[RuleSet] = None) -> Outcome:
  config = config or CompletionConfig()
  if iteration_bound is not None:
    config = dcl.replace(config, max_iterations=iteration_bound)
  return Completion(axioms, config, rules).run()
