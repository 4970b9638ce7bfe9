from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
from prism.errors import InvalidArgument
from prism.helpers import ceildiv

def _or(x:Optional[int], default:int) -> int: return default if x is None else x

@dataclass(frozen=True, slots=True)
class Slice:
  """Selection along one dimension. Each field is either None (unset) or an int.

  Unset fields take their default from where the slice is used: start 0, stop the
  dimension's extent, step 1. Negative values are taken as raw positions and are
  never wrapped around the end of the dimension.
  """
  start:Optional[int] = None
  stop:Optional[int] = None
  step:Optional[int] = None

  def __post_init__(self):
    for name in ("start", "stop", "step"):
      value = getattr(self, name)
      assert value is None or (isinstance(value, int) and not isinstance(value, bool)), f"Slice {name} has to be an int or None, got {value!r}"

  @staticmethod
  def full() -> Slice: return Slice()
  @staticmethod
  def from_slice(s:slice) -> Slice: return Slice(s.start, s.stop, s.step)

  def apply(self, other:Slice) -> Slice:
    """Combine this slice with `other`, which is expressed in this slice's index space.

    `view.index([a.apply(b)])` selects the same elements as `view.index([a]).index([b])`.
    """
    step = None if self.step is None and other.step is None else _or(self.step, 1) * _or(other.step, 1)
    start = None if self.start is None and other.start is None else _or(self.start, 0) + _or(self.step, 1) * _or(other.start, 0)
    # an unset inner stop keeps the outer bound
    stop = self.stop if other.stop is None else _or(self.start, 0) + _or(self.step, 1) * other.stop
    return Slice(start, stop, step)

  def resolve(self, dim:int) -> tuple[int, int, int]:
    start, stop, step = _or(self.start, 0), _or(self.stop, dim), _or(self.step, 1)
    if step == 0: raise InvalidArgument(f"Slice step cannot be zero: {self}", context={"slice": self, "dim": dim})
    return start, stop, step

  def length(self, dim:int) -> int:
    start, stop, step = self.resolve(dim)
    return max(0, ceildiv(stop - start, step))

  def __repr__(self):
    fmt = lambda x: "" if x is None else str(x)
    return f"Slice({fmt(self.start)}:{fmt(self.stop)}:{fmt(self.step)})"
