# -*- coding: utf-8 -*-

import functools
import inspect
from typing import Any, Callable, TypeVar, cast

from tensorfft._src import backend as bk

__all__ = [
  'environment',
]

F = TypeVar('F', bound=Callable)


class environment(object):
  r"""Context-manager that sets the FFT backend temporarily.

  The backend only changes for the current thread or asyncio task.
  Transforms called from other threads keep using their own backend,
  and the process-wide one set by :py:func:`~.switch_to`.

  For instance::

    >>> import tensorfft as tf
    >>>
    >>> with tf.environment(backend='jax'):
    >>>   X = tf.fft.rfft(x)

  It can also decorate a function, so that every call of the function
  runs with the given backend::

    >>> @tf.environment(backend='torch')
    >>> def spectrum(x):
    >>>   return tf.fft.rfft(x).abs()

  A decorated generator function runs with the backend only while
  it is producing a value. Between two values, the caller's backend
  is in effect.
  """

  def __init__(self, backend: str = None) -> None:
    if backend is not None:
      assert isinstance(backend, str), f'"backend" must be a str, while we got {type(backend)}.'
    self.backend = backend
    self._tokens = []

  def __enter__(self) -> 'environment':
    if self.backend is not None:
      self._tokens.append(bk.set_scoped_backend(self.backend))
    return self

  def __exit__(self, exc_type: Any, exc_value: Any, traceback: Any) -> None:
    if self.backend is not None:
      bk.reset_scoped_backend(self._tokens.pop())

  def __call__(self, func: F) -> F:
    if inspect.isgeneratorfunction(func):
      return self._wrap_generator(func)

    @functools.wraps(func)
    def decorate_context(*args, **kwargs):
      with self.__class__(self.backend):
        return func(*args, **kwargs)

    return cast(F, decorate_context)

  def _wrap_generator(self, func):
    @functools.wraps(func)
    def generator_context(*args, **kwargs):
      env = self.__class__(self.backend)
      gen = func(*args, **kwargs)
      send, value = gen.send, None
      while True:
        with env:
          try:
            response = send(value)
          except StopIteration as e:
            return e.value
        try:
          value = yield response
        except GeneratorExit:
          with env:
            gen.close()
          raise
        except BaseException as e:
          send, value = gen.throw, e
        else:
          send = gen.send

    return generator_context

  def __repr__(self):
    return f'{self.__class__.__name__}(backend={self.backend!r})'
