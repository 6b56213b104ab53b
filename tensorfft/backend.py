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
from tensorfft._src.backend import (
    OPS as OPS,
    FFTBackend as FFTBackend,
    NumpyBackend as NumpyBackend,
    JaxBackend as JaxBackend,
    TorchBackend as TorchBackend,
    register_backend as register_backend,
    switch_to as switch_to,
    get_backend as get_backend,
    get_backend_name as get_backend_name,
    available_backends as available_backends,
)
from tensorfft._src.environment import (
    environment as environment,
)
from tensorfft._src.testing import (
    Call as Call,
    RecordingBackend as RecordingBackend,
)
