# -*- coding: utf-8 -*-

import abc

__all__ = [
  'OPS',
  'FFTBackend',
]

# The primitive operations every backend provides.
OPS = ('fft', 'ifft', 'rfft', 'irfft', 'hfft', 'ihfft')


class FFTBackend(abc.ABC):
  """Abstract base class for a tensor computation engine.

  A backend owns the arrays and the numerics. Each primitive receives
  the input array and the already-defaulted ``n``, ``dim`` and ``norm``,
  and returns a newly allocated array. Invalid arguments are reported
  by raising whatever the underlying library raises.
  """

  name = None

  @abc.abstractmethod
  def fft(self, x, n=None, dim=-1, norm=None):
    """One dimensional discrete Fourier transform."""
    pass

  @abc.abstractmethod
  def ifft(self, x, n=None, dim=-1, norm=None):
    """One dimensional inverse discrete Fourier transform."""
    pass

  @abc.abstractmethod
  def rfft(self, x, n=None, dim=-1, norm=None):
    """Transform of real input with onesided Hermitian output."""
    pass

  @abc.abstractmethod
  def irfft(self, x, n=None, dim=-1, norm=None):
    """Inverse of :py:meth:`rfft`."""
    pass

  @abc.abstractmethod
  def hfft(self, x, n=None, dim=-1, norm=None):
    """Transform of a onesided Hermitian signal with real output."""
    pass

  @abc.abstractmethod
  def ihfft(self, x, n=None, dim=-1, norm=None):
    """Inverse of :py:meth:`hfft`."""
    pass

  def __repr__(self):
    return f'{self.__class__.__name__}(name={self.name!r})'
