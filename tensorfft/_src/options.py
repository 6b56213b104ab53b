# -*- coding: utf-8 -*-

from typing import NamedTuple, Optional

__all__ = [
  'DEFAULT_DIM',
  'NORM_MODES',
  'FFTOptions',
]

# The last axis.
DEFAULT_DIM = -1

# Normalization modes understood by the built-in backends. ``None`` means
# the backend default, which is ``'backward'`` for all of them.
NORM_MODES = ('backward', 'ortho', 'forward')


class FFTOptions(NamedTuple):
  """Optional parameters shared by all one-dimensional transforms.

  Attributes
  ----------
  n: int, optional
    The signal length along ``dim``. ``None`` lets the backend infer
    it from the input.
  dim: int
    The axis to transform. Negative values count from the last axis.
  norm: str, optional
    The normalization mode, one of ``'backward'``, ``'ortho'`` and
    ``'forward'``. ``None`` applies the backend default.

  The bundle never validates its fields. Invalid values are reported
  by the backend when the transform is computed.
  """
  n: Optional[int] = None
  dim: int = DEFAULT_DIM
  norm: Optional[str] = None

  @classmethod
  def of(cls, n: Optional[int] = None, dim: int = DEFAULT_DIM, norm: Optional[str] = None) -> 'FFTOptions':
    return cls(n=n, dim=dim, norm=norm)

  def replace(self, **changes) -> 'FFTOptions':
    return self._replace(**changes)

  def as_kwargs(self) -> dict:
    return {'n': self.n, 'dim': self.dim, 'norm': self.norm}
