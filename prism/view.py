from __future__ import annotations
import array, functools, itertools, operator
from dataclasses import dataclass
from prism.dtype import DType, dtypes
from prism.errors import InvalidArgument, OutOfBounds
from prism.helpers import DEBUG, prod, tupled, listed, all_instance
from prism.slice import Slice

@functools.lru_cache(maxsize=None)
def strides_for_shape(shape:tuple[int, ...]) -> tuple[int, ...]:
  if not shape: return ()
  return tuple(itertools.accumulate(reversed(shape[1:]), operator.mul, initial=1))[::-1]

@dataclass(frozen=True, eq=False)
class BufferRecord:
  """Backing store shared by every View derived from one arange() call.

  `elements` is a read-only memoryview, so no View can write through it. The
  record lives as long as any View still references it.
  """
  elements:memoryview
  shape:tuple[int, ...]
  dtype:DType = dtypes.default
  def __len__(self): return len(self.elements)

class View:
  """A shape, strides and offset over a shared BufferRecord.

  Views are created only by `arange` and `View.index`. Element (i0, ..., in) lives at
  buffer position `offset + sum(ik * strides[k])`.
  """
  __slots__ = ("_buffer", "_offset", "_shape", "_strides")

  def __init__(self, *args, **kwargs):
    raise TypeError(f"{self.__class__.__name__} cannot be created directly, use arange() or View.index()")

  @classmethod
  def _create(cls, buffer:BufferRecord, offset:int, shape:tuple[int, ...], strides:tuple[int, ...]) -> View:
    assert len(shape) == len(strides), f"Shape and strides need the same length\nShape: {shape}\nStrides: {strides}"
    assert all(s >= 0 for s in shape), f"Shape cannot have negative extents: {shape}"
    view:View = cls.__new__(cls)
    for name, value in (("_buffer", buffer), ("_offset", offset), ("_shape", tuple(shape)), ("_strides", tuple(strides))):
      object.__setattr__(view, name, value)
    return view

  def __setattr__(self, name, value): raise AttributeError(f"{self.__class__.__name__} is immutable")
  def __delattr__(self, name): raise AttributeError(f"{self.__class__.__name__} is immutable")

  @property
  def buffer(self) -> BufferRecord: return self._buffer
  @property
  def offset(self) -> int: return self._offset
  @property
  def shape(self) -> tuple[int, ...]: return self._shape
  @property
  def strides(self) -> tuple[int, ...]: return self._strides
  @property
  def dtype(self) -> DType: return self._buffer.dtype
  @property
  def ndim(self) -> int: return len(self._shape)
  @property
  def numel(self) -> int: return prod(self._shape)

  def index(self, slices:Slice|list[Slice]) -> View:
    """Select along every dimension with one Slice per dimension.

    The result shares this view's buffer. For dimension k with resolved start, stop
    and step, the new extent is ceil((stop - start) / step) clamped at zero, the new
    stride is strides[k] * step and the offset moves by start * strides[k].
    """
    slices = listed(slices)
    if len(slices) != self.ndim:
      raise InvalidArgument(f"Expected {self.ndim} slices for shape {self.shape}, got {len(slices)}", context={"shape": self.shape, "slices": tuple(slices)})
    if not all_instance(slices, Slice):
      raise InvalidArgument(f"Expected a Slice per dimension but got {slices}", context={"shape": self.shape})
    if not slices: return self

    resolved = [s.resolve(dim) for s, dim in zip(slices, self.shape)]
    shape = tuple(s.length(dim) for s, dim in zip(slices, self.shape))
    strides = tuple(stride * step for stride, (_, _, step) in zip(self.strides, resolved))
    offset = self.offset + sum(start * stride for stride, (start, _, _) in zip(self.strides, resolved))
    ret = View._create(self.buffer, offset, shape, strides)
    if DEBUG >= 2: print(f"INDEX {self} {slices} -> {ret}")
    return ret

  def element_at(self, multi_index:int|tuple[int, ...]) -> float:
    multi_index = tupled(multi_index)
    if len(multi_index) != self.ndim:
      raise InvalidArgument(f"Expected {self.ndim} indices for shape {self.shape}, got {multi_index}", context={"shape": self.shape})
    for dim, (i, extent) in enumerate(zip(multi_index, self.shape)):
      if not 0 <= i < extent:
        raise OutOfBounds(f"Index {i} is out of bounds for dimension {dim} with extent {extent}", context={"index": multi_index, "shape": self.shape})
    position = self.offset + sum(i * stride for i, stride in zip(multi_index, self.strides))
    if not 0 <= position < len(self.buffer):
      raise OutOfBounds(f"Index {multi_index} maps to buffer position {position}, outside a buffer of {len(self.buffer)} elements",
                        context={"index": multi_index, "position": position, "buffer_size": len(self.buffer)})
    return self.buffer.elements[position]

  def __getitem__(self, key):
    key = tupled(key)
    if all_instance(key, int): return self.element_at(key)
    if all_instance(key, (slice, Slice)):
      return self.index([Slice.from_slice(k) if isinstance(k, slice) else k for k in key])
    raise InvalidArgument(f"View keys have to be all ints or all slices, got {key}", context={"shape": self.shape})

  def tolist(self) -> list|float:
    def _build(prefix:tuple[int, ...]):
      if len(prefix) == self.ndim: return self.element_at(prefix)
      return [_build(prefix + (i,)) for i in range(self.shape[len(prefix)])]
    return _build(())

  def get_print_string(self) -> str:
    def _format(x) -> str: return f"[{', '.join(map(_format, x))}]" if isinstance(x, list) else f"{x:g}"
    return _format(self.tolist())
  def print(self): print(self.get_print_string())

  def __repr__(self): return f"View(shape={self.shape}, strides={self.strides}, offset={self.offset})"

def arange(end:int, shape:tuple[int, ...]|None=None) -> View:
  """Create a buffer holding 0, 1, ..., end-1 as float32 and return a view of all of it.

  Without `shape` the view is 1-D. With `shape` (whose product has to be `end`) the
  buffer is laid out as a contiguous row-major view of that shape.
  """
  if end < 0: raise InvalidArgument(f"arange length cannot be negative: {end}", context={"end": end})
  shape = (end,) if shape is None else tupled(shape)
  if any(s < 0 for s in shape) or prod(shape) != end:
    raise InvalidArgument(f"Shape {shape} does not hold {end} elements", context={"end": end, "shape": shape})
  dtype = dtypes.default
  buffer = BufferRecord(memoryview(array.array(dtype.fmt, range(end))).toreadonly(), shape, dtype)
  if DEBUG: print(f"BUFFER {end} x {dtype.name} shape={shape}")
  return View._create(buffer, 0, shape, strides_for_shape(shape))
