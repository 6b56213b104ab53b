import importlib.util

from .errors import PackageMissingError

__all__ = [
  'import_torch',
]

torch = None


def import_torch(error_if_not_found=True):
  """Internal API to import torch.

  If torch is not found, it will raise a PackageMissingError if error_if_not_found is True,
  otherwise it will return None.
  """
  global torch
  if torch is None:
    if importlib.util.find_spec('torch') is not None:
      import torch as torch  # noqa
    elif error_if_not_found:
      raise PackageMissingError.by_backend('torch')
  return torch
