# -*- coding: utf-8 -*-

"""
FFT backend on top of ``jax.numpy.fft``.

The results are ``jax.Array``. Their precision follows the
``jax_enable_x64`` flag.
"""

import jax.numpy.fft as jfft

from .base import FFTBackend

__all__ = [
  'JaxBackend',
]


class JaxBackend(FFTBackend):
  name = 'jax'

  def fft(self, x, n=None, dim=-1, norm=None):
    return jfft.fft(x, n=n, axis=dim, norm=norm)

  def ifft(self, x, n=None, dim=-1, norm=None):
    return jfft.ifft(x, n=n, axis=dim, norm=norm)

  def rfft(self, x, n=None, dim=-1, norm=None):
    return jfft.rfft(x, n=n, axis=dim, norm=norm)

  def irfft(self, x, n=None, dim=-1, norm=None):
    return jfft.irfft(x, n=n, axis=dim, norm=norm)

  def hfft(self, x, n=None, dim=-1, norm=None):
    return jfft.hfft(x, n=n, axis=dim, norm=norm)

  def ihfft(self, x, n=None, dim=-1, norm=None):
    return jfft.ihfft(x, n=n, axis=dim, norm=norm)
