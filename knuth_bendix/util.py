from typing import Dict, Hashable, Tuple

from knuth_bendix.kb_types import Variable


def word2str(word) -> str:
  if word.is_var():
    return str(word.head)
  args = [word2str(w) for w in word.subwords()]
  if not args:
    return str(word.head)
  return '{0}({1})'.format(word.head, ', '.join(args))


def rule2str(rule) -> str:
  return '{0} -> {1}'.format(word2str(rule.lhs), word2str(rule.rhs))


def axiom2str(axiom) -> str:
  return '{0} = {1}'.format(word2str(axiom.left), word2str(axiom.right))


def canonical_renaming(*words) -> Dict[Variable, Variable]:
  """Numbers variables x1, x2, ... in order of first occurrence."""
  renaming = {}
  for word in words:
    for s in word.syms:
      if isinstance(s, Variable) and s not in renaming:
        renaming[s] = Variable(f'x{len(renaming) + 1}')
  return renaming


def variant_key(*words) -> Tuple[Hashable, ...]:
  """Key equal for two tuples of words iff they are equal up to renaming."""
  seen = {}
  key = []
  for word in words:
    part = []
    for s in word.syms:
      if isinstance(s, Variable):
        part.append(seen.setdefault(s, len(seen)))
      else:
        part.append((s.order_index(), s.arity()))
    key.append(tuple(part))
  return tuple(key)
