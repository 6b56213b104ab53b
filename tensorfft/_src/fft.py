# -*- coding: utf-8 -*-

"""
One dimensional discrete Fourier transforms.

Every transform is forwarded to the primitive of the same name on an
:py:class:`~.FFTBackend`. Nothing is computed or checked here: the
backend allocates the result, and any error it raises reaches the
caller unchanged.
"""

import functools
from typing import Optional, Union

from tensorfft._src.backend import FFTBackend, OPS, get_backend
from tensorfft._src.options import FFTOptions, DEFAULT_DIM

__all__ = [
  'dispatch',
  'FFT',
  'fft',
  'ifft',
  'rfft',
  'irfft',
  'hfft',
  'ihfft',
]


def dispatch(op: str, input, options: FFTOptions, backend: Optional[FFTBackend] = None):
  """Forward ``op`` to the backend with the packaged options.

  Parameters
  ----------
  op: str
    One of ``'fft'``, ``'ifft'``, ``'rfft'``, ``'irfft'``, ``'hfft'``, ``'ihfft'``.
  input: ArrayLike
    The tensor handle, passed by reference.
  options: FFTOptions
    The ``n``, ``dim`` and ``norm`` given to the backend.
  backend: FFTBackend, optional
    The engine. Default is the current registered backend.
  """
  if op not in OPS:
    raise ValueError(f'Unknown FFT operation "{op}". Should be one of {OPS}.')
  if backend is None:
    backend = get_backend()
  return getattr(backend, op)(input, **options.as_kwargs())


def _compatible_with_numpy_syntax(fun):
  @functools.wraps(fun)
  def new_fun(*args, **kwargs):
    # compatible with NumPy/JAX syntax
    if 'axis' in kwargs:
      if 'dim' in kwargs:
        raise TypeError(f'{fun.__name__}() got both "dim" and its alias "axis".')
      kwargs['dim'] = kwargs.pop('axis')
    return fun(*args, **kwargs)

  new_fun.__doc__ = (
    f'{fun.__doc__ or ""}\n'
    f'  Note that this function is also compatible with NumPy/JAX syntax\n'
    f'  when receiving the ``axis`` argument in place of ``dim``.\n'
  )
  return new_fun


@_compatible_with_numpy_syntax
def fft(input, n: Optional[int] = None, dim: int = DEFAULT_DIM, norm: Optional[str] = None):
  """Computes the one dimensional discrete Fourier transform of ``input``.

  Parameters
  ----------
  input: ArrayLike
    The input, real or complex.
  n: int, optional
    Signal length. If given, the input is zero-padded or trimmed to
    this length along ``dim`` before computing the transform.
  dim: int
    The dimension along which to take the transform. Default is the last one.
  norm: str, optional
    Normalization mode: ``'backward'`` (no normalization), ``'ortho'``
    (normalize by ``1/sqrt(n)``) or ``'forward'`` (normalize by ``1/n``).

  Returns
  -------
  out: ArrayLike
    The complex transform.

  Examples
  --------

  >>> import numpy as np
  >>> import tensorfft as tf
  >>> t = np.random.randn(128) + 1j * np.random.randn(128)
  >>> tf.fft.fft(t).shape
  (128,)
  """
  return dispatch('fft', input, FFTOptions(n, dim, norm))


@_compatible_with_numpy_syntax
def ifft(input, n: Optional[int] = None, dim: int = DEFAULT_DIM, norm: Optional[str] = None):
  """Computes the one dimensional inverse discrete Fourier transform of ``input``.

  The parameters are the same as :py:func:`fft`. With the default
  normalization, ``ifft(fft(x))`` recovers ``x``.
  """
  return dispatch('ifft', input, FFTOptions(n, dim, norm))


@_compatible_with_numpy_syntax
def rfft(input, n: Optional[int] = None, dim: int = DEFAULT_DIM, norm: Optional[str] = None):
  """Computes the one dimensional Fourier transform of real-valued ``input``.

  The output contains only the ``n // 2 + 1`` non-negative frequency
  terms, since the negative ones are their complex conjugates.

  Examples
  --------

  >>> t = np.random.randn(128)
  >>> T = tf.fft.rfft(t)
  >>> np.iscomplexobj(T), T.shape
  (True, (65,))
  """
  return dispatch('rfft', input, FFTOptions(n, dim, norm))


@_compatible_with_numpy_syntax
def irfft(input, n: Optional[int] = None, dim: int = DEFAULT_DIM, norm: Optional[str] = None):
  """Computes the inverse of :py:func:`rfft`.

  ``input`` is a onesided Hermitian signal in the Fourier domain. The
  output is real-valued, of length ``n`` along ``dim``. When ``n`` is
  not given, the output length is ``2 * (m - 1)`` where ``m`` is the
  input length, so an odd-length signal needs ``n`` to round-trip.

  Examples
  --------

  >>> T = np.random.randn(65) + 1j * np.random.randn(65)
  >>> t = tf.fft.irfft(T, n=128)
  >>> np.isrealobj(t), t.shape
  (True, (128,))
  """
  return dispatch('irfft', input, FFTOptions(n, dim, norm))


@_compatible_with_numpy_syntax
def hfft(input, n: Optional[int] = None, dim: int = DEFAULT_DIM, norm: Optional[str] = None):
  """Computes the Fourier transform of a onesided Hermitian signal.

  ``input`` is the first half of a Hermitian symmetric time domain
  signal, whose transform is real-valued. The output length follows
  the same rule as :py:func:`irfft`.
  """
  return dispatch('hfft', input, FFTOptions(n, dim, norm))


@_compatible_with_numpy_syntax
def ihfft(input, n: Optional[int] = None, dim: int = DEFAULT_DIM, norm: Optional[str] = None):
  """Computes the inverse of :py:func:`hfft`.

  ``input`` is a real-valued Fourier domain signal. The output is the
  onesided representation, of length ``n // 2 + 1``, of the Hermitian
  symmetric time domain signal.
  """
  return dispatch('ihfft', input, FFTOptions(n, dim, norm))


class _Default(object):
  def __repr__(self):
    return "<default>"


# placeholder for an argument left to the FFT instance options
_default = _Default()


class FFT(object):
  """The transforms bound to a backend and to default options.

  Parameters
  ----------
  backend: str, FFTBackend, optional
    The engine, or a registered backend name. Default is the current
    backend at call time.
  options: FFTOptions, optional
    Defaults for ``n``, ``dim`` and ``norm``. Arguments given to a
    method override them, including an explicit ``None`` for ``n`` or
    ``norm``, which lets the backend apply its own default. Methods
    also accept ``axis`` in place of ``dim``.

  Examples
  --------

  >>> import tensorfft as tf
  >>> ortho = tf.FFT('numpy', tf.FFTOptions(norm='ortho'))
  >>> X = ortho.fft(x)
  >>> ortho.ifft(X, dim=0)
  """

  def __init__(self,
               backend: Optional[Union[str, FFTBackend]] = None,
               options: Optional[FFTOptions] = None):
    if not (backend is None or isinstance(backend, (str, FFTBackend))):
      raise TypeError(f'"backend" must be a str or an instance of {FFTBackend.__name__}, '
                      f'while we got {type(backend)}')
    self._backend = backend
    self.options = FFTOptions() if options is None else options

  @property
  def backend(self) -> FFTBackend:
    if isinstance(self._backend, FFTBackend):
      return self._backend
    return get_backend(self._backend)

  def __repr__(self):
    return f'{self.__class__.__name__}(backend={self._backend!r}, options={self.options!r})'

  def _call(self, op, input, n, dim, norm):
    options = self.options
    if n is not _default:
      options = options.replace(n=n)
    if dim is not _default:
      options = options.replace(dim=dim)
    if norm is not _default:
      options = options.replace(norm=norm)
    return dispatch(op, input, options, self.backend)

  @_compatible_with_numpy_syntax
  def fft(self, input, n=_default, dim=_default, norm=_default):
    return self._call('fft', input, n, dim, norm)

  @_compatible_with_numpy_syntax
  def ifft(self, input, n=_default, dim=_default, norm=_default):
    return self._call('ifft', input, n, dim, norm)

  @_compatible_with_numpy_syntax
  def rfft(self, input, n=_default, dim=_default, norm=_default):
    return self._call('rfft', input, n, dim, norm)

  @_compatible_with_numpy_syntax
  def irfft(self, input, n=_default, dim=_default, norm=_default):
    return self._call('irfft', input, n, dim, norm)

  @_compatible_with_numpy_syntax
  def hfft(self, input, n=_default, dim=_default, norm=_default):
    return self._call('hfft', input, n, dim, norm)

  @_compatible_with_numpy_syntax
  def ihfft(self, input, n=_default, dim=_default, norm=_default):
    return self._call('ihfft', input, n, dim, norm)
