"""
quatalg - quaternion algebra with exponential, logarithm and power maps.

    >>> from quatalg import Quaternion
    >>> Quaternion(0.0, 1.0, 0.0, 0.0).ln()
    Quaternion(s=0.0, x=1.5707963267948966, y=0.0, z=0.0)

The library logs through the standard ``logging`` module under the
``quatalg`` logger and installs no handlers of its own.
"""

import logging

from quatalg.core.constants import EPSILON
from quatalg.core.operations import (
    add,
    conj,
    div,
    dot,
    exp,
    geodesic_distance,
    inv,
    ln,
    mul,
    neg,
    norm,
    normsq,
    pow,
    slerp,
    sub,
)
from quatalg.core.quaternion import Quaternion

__version__ = '0.1.0'

__all__ = [
    'EPSILON',
    'Quaternion',
    'add',
    'conj',
    'div',
    'dot',
    'exp',
    'geodesic_distance',
    'inv',
    'ln',
    'mul',
    'neg',
    'norm',
    'normsq',
    'pow',
    'slerp',
    'sub',
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
