# -*- coding: utf-8 -*-

"""
FFT backend on top of ``torch.fft``. PyTorch is optional; it must be
installed before this backend is instantiated.
"""

from tensorfft._src.dependency_check import import_torch
from .base import FFTBackend

__all__ = [
  'TorchBackend',
]


class TorchBackend(FFTBackend):
  name = 'torch'

  def __init__(self):
    self._fft = import_torch().fft

  def fft(self, x, n=None, dim=-1, norm=None):
    return self._fft.fft(x, n=n, dim=dim, norm=norm)

  def ifft(self, x, n=None, dim=-1, norm=None):
    return self._fft.ifft(x, n=n, dim=dim, norm=norm)

  def rfft(self, x, n=None, dim=-1, norm=None):
    return self._fft.rfft(x, n=n, dim=dim, norm=norm)

  def irfft(self, x, n=None, dim=-1, norm=None):
    return self._fft.irfft(x, n=n, dim=dim, norm=norm)

  def hfft(self, x, n=None, dim=-1, norm=None):
    return self._fft.hfft(x, n=n, dim=dim, norm=norm)

  def ihfft(self, x, n=None, dim=-1, norm=None):
    return self._fft.ihfft(x, n=n, dim=dim, norm=norm)
