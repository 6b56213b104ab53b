# -*- coding: utf-8 -*-

import contextvars
import logging
import os
from typing import Union, Type, List, Optional

from tensorfft._src.errors import UnknownBackendError
from .base import FFTBackend, OPS
from .bk_jax import JaxBackend
from .bk_numpy import NumpyBackend
from .bk_pytorch import TorchBackend

__all__ = [
  'OPS',
  'FFTBackend',
  'NumpyBackend',
  'JaxBackend',
  'TorchBackend',

  'register_backend',
  'switch_to',
  'get_backend',
  'get_backend_name',
  'available_backends',
  'set_scoped_backend',
  'reset_scoped_backend',
]

logger = logging.getLogger('tensorfft.backend')

DEFAULT_BACKEND = 'numpy'

# backend name => FFTBackend subclass or instance
BUFFER = {
  'numpy': NumpyBackend,
  'jax': JaxBackend,
  'torch': TorchBackend,
}

# backend name => instantiated FFTBackend
_instances = {}


def _backend_from_env():
  name = os.environ.get('TENSORFFT_BACKEND', DEFAULT_BACKEND)
  if name not in BUFFER:
    logger.warning('TENSORFFT_BACKEND="%s" is an unknown FFT backend, use "%s" instead. '
                   'Registered backends are %s.', name, DEFAULT_BACKEND, list(BUFFER.keys()))
    name = DEFAULT_BACKEND
  return name


# process-wide backend, changed by ``switch_to``
_backend = _backend_from_env()

# backend of the current thread or task, set by ``environment``
_scoped_backend = contextvars.ContextVar('tensorfft_scoped_backend', default=None)


def register_backend(name: str, backend: Union[FFTBackend, Type[FFTBackend]]):
  """Register a new FFT backend.

  Parameters
  ----------
  name: str
    The backend name used by :py:func:`switch_to` and :py:func:`get_backend`.
  backend: FFTBackend, type
    An instance of :py:class:`~.FFTBackend`, or a subclass of it which
    is instantiated without arguments on first use.
  """
  if isinstance(backend, FFTBackend):
    pass
  elif isinstance(backend, type) and issubclass(backend, FFTBackend):
    pass
  else:
    raise TypeError(f'"backend" must be an instance or a subclass of {FFTBackend.__name__}, '
                    f'while we got {backend}')
  BUFFER[name] = backend
  _instances.pop(name, None)
  logger.debug('Registered FFT backend "%s": %s', name, backend)


def available_backends() -> List[str]:
  return list(BUFFER.keys())


def switch_to(name: str):
  """Set the process-wide backend used by the transform functions.

  A backend set by :py:class:`~.environment` in the current thread or
  task takes precedence over this one.

  Parameters
  ----------
  name: str
    A registered backend name, for example ``'numpy'``, ``'jax'``
    or ``'torch'``.
  """
  global _backend
  if name not in BUFFER:
    raise UnknownBackendError(name, BUFFER.keys())
  if name != _backend:
    logger.debug('Switch FFT backend from "%s" to "%s"', _backend, name)
  _backend = name


def set_scoped_backend(name: str) -> contextvars.Token:
  """Set the backend of the current context only.

  Returns the token to give back to :py:func:`reset_scoped_backend`.
  """
  if name not in BUFFER:
    raise UnknownBackendError(name, BUFFER.keys())
  logger.debug('Enter FFT backend "%s"', name)
  return _scoped_backend.set(name)


def reset_scoped_backend(token: contextvars.Token):
  _scoped_backend.reset(token)


def get_backend_name() -> str:
  name = _scoped_backend.get()
  return _backend if name is None else name


def get_backend(name: Optional[str] = None) -> FFTBackend:
  """Get the backend instance.

  Parameters
  ----------
  name: str, optional
    The backend name. Default is the current backend.

  Returns
  -------
  backend: FFTBackend
    The backend instance.
  """
  if name is None:
    name = get_backend_name()
  if name in _instances:
    return _instances[name]
  if name not in BUFFER:
    raise UnknownBackendError(name, BUFFER.keys())
  backend = BUFFER[name]
  if isinstance(backend, type):
    logger.debug('Create FFT backend "%s"', name)
    backend = backend()
  _instances[name] = backend
  return backend
