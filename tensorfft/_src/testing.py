# -*- coding: utf-8 -*-

from typing import NamedTuple, Optional, Any

from tensorfft._src.backend.base import FFTBackend

__all__ = [
  'Call',
  'RecordingBackend',
]


class Call(NamedTuple):
  op: str
  input: Any
  n: Optional[int]
  dim: int
  norm: Optional[str]


class RecordingBackend(FFTBackend):
  """A backend which records every call and returns a canned result.

  Parameters
  ----------
  result: Any
    Returned by every primitive. Default is a new ``object()`` per call.
  error: Exception, optional
    If given, raised by every primitive after the call is recorded.
  """

  name = 'recording'

  def __init__(self, result=None, error: Optional[Exception] = None):
    self.result = result
    self.error = error
    self.calls = []

  def _record(self, op, x, n, dim, norm):
    self.calls.append(Call(op, x, n, dim, norm))
    if self.error is not None:
      raise self.error
    return object() if self.result is None else self.result

  @property
  def last_call(self) -> Call:
    return self.calls[-1]

  def fft(self, x, n=None, dim=-1, norm=None):
    return self._record('fft', x, n, dim, norm)

  def ifft(self, x, n=None, dim=-1, norm=None):
    return self._record('ifft', x, n, dim, norm)

  def rfft(self, x, n=None, dim=-1, norm=None):
    return self._record('rfft', x, n, dim, norm)

  def irfft(self, x, n=None, dim=-1, norm=None):
    return self._record('irfft', x, n, dim, norm)

  def hfft(self, x, n=None, dim=-1, norm=None):
    return self._record('hfft', x, n, dim, norm)

  def ihfft(self, x, n=None, dim=-1, norm=None):
    return self._record('ihfft', x, n, dim, norm)
