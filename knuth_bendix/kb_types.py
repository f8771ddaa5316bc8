import enum
from typing import NamedTuple


class Variable(NamedTuple):
  name: str

  def __str__(self):
    return self.name


class Relation(enum.Enum):
  GREATER = '>'
  LESS = '<'
  EQUAL = '='
  INCOMPARABLE = '?'

  def flip(self) -> 'Relation':
    if self is Relation.GREATER:
      return Relation.LESS
    if self is Relation.LESS:
      return Relation.GREATER
    return self


class KnuthBendixError(Exception):
  pass


class ArityMismatch(KnuthBendixError, ValueError):

  def __init__(self, operator, expected: int, got: int):
    super().__init__(
        f'operator {operator} takes {expected} argument(s), got {got}')
    self.operator = operator
    self.expected = expected
    self.got = got


class MalformedWord(KnuthBendixError, ValueError):
  pass


class InadmissibleSignature(KnuthBendixError, ValueError):
  pass


class NotOrientable(KnuthBendixError):
  pass
