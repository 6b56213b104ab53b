# -*- coding: utf-8 -*-

import io
import os
import re

from setuptools import find_packages, setup

# version
here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'tensorfft', '__init__.py'), 'r') as f:
  init_py = f.read()
version = re.search('__version__ = "(.*)"', init_py).groups()[0]

# obtain long description from README
with io.open(os.path.join(here, 'README.md'), 'r', encoding='utf-8') as f:
  README = f.read()

# installation packages
packages = find_packages(exclude=['docs', 'tests', '*.tests'])

# setup
setup(
  name='tensorfft',
  version=version,
  description='tensorfft: One Dimensional Fourier Transforms over Pluggable Tensor Backends',
  long_description=README,
  long_description_content_type="text/markdown",
  author='tensorfft Team',
  packages=packages,
  python_requires='>=3.10',
  install_requires=['numpy>=1.15', 'jax'],
  extras_require={
    'torch': ['torch'],
    'test': ['pytest', 'absl-py'],
  },
  keywords=('fourier transform, '
            'fft, '
            'tensor, '
            'jax, '
            'numpy'),
  classifiers=[
    'Natural Language :: English',
    'Operating System :: OS Independent',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: 3.10',
    'Programming Language :: Python :: 3.11',
    'Programming Language :: Python :: 3.12',
    'Programming Language :: Python :: 3.13',
    'Intended Audience :: Science/Research',
    'License :: OSI Approved :: Apache Software License',
    'Topic :: Scientific/Engineering :: Mathematics',
    'Topic :: Software Development :: Libraries',
  ],
  license='Apache-2.0',
)
