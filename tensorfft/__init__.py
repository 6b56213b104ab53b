# -*- coding: utf-8 -*-
# Copyright 2025 BrainX Ecosystem Limited. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================
"""
One dimensional discrete Fourier transforms with pluggable backends.

>>> import numpy as np
>>> import tensorfft as tf
>>> X = tf.fft.rfft(np.random.randn(128))
>>> with tf.environment(backend='jax'):
>>>   x = tf.fft.irfft(X, n=128)
"""

__version__ = "0.1.0"
__version_info__ = tuple(map(int, __version__.split(".")))

from tensorfft import errors
from tensorfft import fft
from tensorfft import backend
from tensorfft.backend import (
    environment as environment,
    register_backend as register_backend,
    switch_to as switch_to,
    get_backend as get_backend,
    get_backend_name as get_backend_name,
)
from tensorfft.fft import (
    FFT as FFT,
    FFTOptions as FFTOptions,
)
