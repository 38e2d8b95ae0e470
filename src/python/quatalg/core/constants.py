"""
===============================================================================
QUATALG - Numeric Constants and Default Tolerances
===============================================================================
Central place for the tunables used by the quaternion value type. All values
are IEEE-754 double precision.

None of these tolerances is applied implicitly by equality: ``==`` on a
Quaternion is exact. They are defaults for the explicit approximate helpers
(``isclose``, ``is_unit``) and for the SLERP fallback.
===============================================================================
"""

import numpy as np


# =============================================================================
# MACHINE CONSTANTS
# =============================================================================
EPSILON = float(np.finfo(np.float64).eps)   # 2.220446049250313e-16

# =============================================================================
# COMPARISON TOLERANCES
# =============================================================================
DEFAULT_RTOL = 1e-9
DEFAULT_ATOL = 1e-12
UNIT_TOLERANCE = 1e-8

# =============================================================================
# INTERPOLATION
# =============================================================================
# Above this |cos(Omega)| SLERP degenerates to normalized linear interpolation.
SLERP_LINEAR_THRESHOLD = 0.9995

# =============================================================================
# IEEE-754 PROPAGATION
# =============================================================================
# Passed to np.errstate around every operation that may divide by zero,
# take log(0) or overflow: inf/NaN propagate without warnings.
IEEE_SILENT = {'divide': 'ignore', 'invalid': 'ignore', 'over': 'ignore'}
