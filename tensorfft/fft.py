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
from tensorfft._src.fft import (
    dispatch as dispatch,
    FFT as FFT,
    fft as fft,
    ifft as ifft,
    rfft as rfft,
    irfft as irfft,
    hfft as hfft,
    ihfft as ihfft,
)
from tensorfft._src.options import (
    DEFAULT_DIM as DEFAULT_DIM,
    NORM_MODES as NORM_MODES,
    FFTOptions as FFTOptions,
)

__all__ = [
    "fft", "ifft", "rfft", "irfft", "hfft", "ihfft",
    "dispatch", "FFT", "FFTOptions", "DEFAULT_DIM", "NORM_MODES",
]
