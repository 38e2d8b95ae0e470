"""
Float rendering used by the quaternion display forms.

Positional output is the shortest string that round-trips, without a
trailing ``.0`` (``1.0 -> "1"``). Scientific output is the shortest mantissa
with an unpadded exponent (``1234.5 -> "1.2345e3"``). Non-finite values
render as ``inf``, ``-inf`` and ``NaN`` in both forms.
"""

import numpy as np

NAN_TEXT = 'NaN'


def format_positional(value: float) -> str:
    """Shortest round-trip positional rendering of a float."""
    if np.isnan(value):
        return NAN_TEXT
    return np.format_float_positional(value, unique=True, trim='-')


def format_scientific(value: float) -> str:
    """Shortest round-trip scientific rendering with a bare exponent."""
    if np.isnan(value):
        return NAN_TEXT
    text = np.format_float_scientific(value, unique=True, trim='-')
    mantissa, sep, exponent = text.partition('e')
    if not sep:
        # inf carries no exponent
        return text
    return f"{mantissa.rstrip('.')}e{int(exponent)}"


def format_component(value: float, spec: str = '') -> str:
    """
    Render a single component according to a format spec.

    Parameters
    ----------
    value : float
        Component value.
    spec : str
        ``''`` for positional, ``'e'`` for shortest scientific, anything
        else is handed to Python's float formatting.
    """
    if spec == '':
        return format_positional(value)
    if spec == 'e':
        return format_scientific(value)
    return format(float(value), spec)


def format_terms(components, spec: str = '') -> str:
    """Render ``[s, x, y, z]`` as ``"s + xi + yj + zk"``."""
    s, x, y, z = (format_component(c, spec) for c in components)
    return f"{s} + {x}i + {y}j + {z}k"
