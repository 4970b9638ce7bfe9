"""
Exceptions raised by prism.

Every error derives from PrismError so callers can catch the whole family with
one except clause. The concrete classes also derive from the matching builtin
(ValueError, IndexError) so code that only knows the builtins keeps working.
"""
from __future__ import annotations
from typing import Any, Optional

class PrismError(Exception):
  """Base exception for all prism errors.

  Attributes:
    message: Human-readable error description.
    context: Values that describe the failing call, for debugging.
  """
  def __init__(self, message:str, *, context:Optional[dict[str, Any]]=None):
    super().__init__(message)
    self.message = message
    self.context = context or {}
  def __repr__(self):
    ctx_str = f", context={self.context}" if self.context else ""
    return f"{self.__class__.__name__}({self.message!r}{ctx_str})"

class InvalidArgument(PrismError, ValueError):
  """Raised when a call is made with arguments that can never be valid:
  a slice list that does not match the view's dimensions, a zero step,
  a negative length, or a multi-index of the wrong length."""

class OutOfBounds(PrismError, IndexError):
  """Raised when an element access falls outside a dimension's extent or
  outside the shared buffer."""
