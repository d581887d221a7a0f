# Copyright 2024 inuex35
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

"""Numerical constants and defaults for rotation kinematics"""

import numpy as np

# Precision
DEFAULT_DTYPE = np.float64                      # precision used when inputs carry none
SUPPORTED_DTYPES = (np.float32, np.float64)     # single and double precision

# Tolerances
SKEW_SYMMETRY_TOL = 1e-9          # max |S + S^T| accepted as skew symmetric (double)
ROTVEC_SINGULAR_NORM = 1e-6       # rotation vector magnitude treated as singular (rad)
EULER_SINGULAR_COS_PITCH = 1e-6   # |cos(pitch)| treated as gimbal lock
