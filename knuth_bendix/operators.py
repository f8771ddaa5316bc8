from __future__ import annotations

import abc
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from knuth_bendix.kb_types import InadmissibleSignature

DEFAULT_MIN_WEIGHT = 1


class Operator(abc.ABC):
  """Function symbol of an algebra.

  Every operator of one family must report the same `min_weight`, the weight
  given to each variable occurrence when words of that family are weighed.
  """

  @abc.abstractmethod
  def arity(self) -> int:
    ...

  @abc.abstractmethod
  def weight(self) -> int:
    ...

  @abc.abstractmethod
  def order_index(self) -> int:
    ...

  def min_weight(self) -> int:
    return DEFAULT_MIN_WEIGHT


class TableOperator(Operator):

  def __init__(
      self, name: str, arity: int, weight: int, index: int,
      min_weight: int = DEFAULT_MIN_WEIGHT):
    self.name = name
    self._arity = arity
    self._weight = weight
    self._index = index
    self._min_weight = min_weight

  def arity(self) -> int:
    return self._arity

  def weight(self) -> int:
    return self._weight

  def order_index(self) -> int:
    return self._index

  def min_weight(self) -> int:
    return self._min_weight

  def __eq__(self, other):
    if not isinstance(other, TableOperator):
      return NotImplemented
    return self.name == other.name and self._index == other._index

  def __hash__(self):
    return hash(self.name) ^ hash(self._index)

  def __str__(self):
    return self.name

  def __repr__(self):
    return f'{self.name}/{self._arity}'


OperatorSpec = Union[Tuple[int, int], Tuple[int, int, int]]


class Signature:
  """Operator family declared as a table.

  Entries map a name to `(arity, weight)` or `(arity, weight, order_index)`.
  Without an explicit index the position in the table is used, so operators
  declared later are greater.
  """

  def __init__(
      self,
      table: Mapping[str, OperatorSpec],
      min_weight: int = DEFAULT_MIN_WEIGHT):
    self.min_weight = min_weight
    self._ops: Dict[str, TableOperator] = {}
    for position, (name, spec) in enumerate(table.items()):
      arity, weight, *index = spec
      self._ops[name] = TableOperator(
          name, arity, weight, index[0] if index else position, min_weight)
    check_admissible(self._ops.values(), min_weight)

  def __getitem__(self, name: str) -> TableOperator:
    return self._ops[name]

  def __contains__(self, name: str) -> bool:
    return name in self._ops

  def __iter__(self):
    return iter(self._ops.values())

  def __len__(self):
    return len(self._ops)

  def constants(self) -> List[TableOperator]:
    return [o for o in self._ops.values() if o.arity() == 0]

  def greatest(self) -> Optional[TableOperator]:
    return max(self._ops.values(), key=lambda o: o.order_index(), default=None)


def check_admissible(operators: Iterable[Operator], min_weight: int):
  """Raises InadmissibleSignature if KBO would not be well-founded."""
  operators = list(operators)
  if min_weight <= 0:
    raise InadmissibleSignature(f'min_weight must be positive, got {min_weight}')
  indices = [o.order_index() for o in operators]
  if len(set(indices)) != len(indices):
    raise InadmissibleSignature('order indices must be distinct')
  for o in operators:
    if o.weight() < 0:
      raise InadmissibleSignature(f'{o} has negative weight')
    if o.arity() == 0 and o.weight() < min_weight:
      raise InadmissibleSignature(
          f'constant {o} weighs {o.weight()}, less than min_weight {min_weight}')
    if o.arity() == 1 and o.weight() == 0 and o.order_index() != max(indices):
      raise InadmissibleSignature(
          f'unary operator {o} of weight 0 must be the greatest operator')
