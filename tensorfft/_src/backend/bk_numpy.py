# -*- coding: utf-8 -*-

"""
FFT backend on top of ``numpy.fft``.
"""

import numpy as np

from .base import FFTBackend

__all__ = [
  'NumpyBackend',
]


class NumpyBackend(FFTBackend):
  name = 'numpy'

  def fft(self, x, n=None, dim=-1, norm=None):
    return np.fft.fft(x, n=n, axis=dim, norm=norm)

  def ifft(self, x, n=None, dim=-1, norm=None):
    return np.fft.ifft(x, n=n, axis=dim, norm=norm)

  def rfft(self, x, n=None, dim=-1, norm=None):
    return np.fft.rfft(x, n=n, axis=dim, norm=norm)

  def irfft(self, x, n=None, dim=-1, norm=None):
    return np.fft.irfft(x, n=n, axis=dim, norm=norm)

  def hfft(self, x, n=None, dim=-1, norm=None):
    return np.fft.hfft(x, n=n, axis=dim, norm=norm)

  def ihfft(self, x, n=None, dim=-1, norm=None):
    return np.fft.ihfft(x, n=n, axis=dim, norm=norm)
