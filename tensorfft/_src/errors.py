# -*- coding: utf-8 -*-


__all__ = [
  'TensorFFTError',
  'PackageMissingError',
  'UnknownBackendError',
]


class TensorFFTError(Exception):
  """General tensorfft error."""
  pass


class PackageMissingError(TensorFFTError):
  """The package missing error.
  """

  @classmethod
  def by_backend(cls, backend, package=None):
    package = backend if package is None else package
    return cls(f'"{package}" must be installed when the user wants to use the '
               f'"{backend}" FFT backend. \n'
               f'Please install {package} through "pip install {package}".')


class UnknownBackendError(TensorFFTError, ValueError):
  def __init__(self, name, available=()):
    super(UnknownBackendError, self).__init__(
      f'"{name}" is an unknown FFT backend. Registered backends are '
      f'{list(available)}. A new backend can be added by '
      f'"tensorfft.backend.register_backend(name, backend)".'
    )
    self.name = name
