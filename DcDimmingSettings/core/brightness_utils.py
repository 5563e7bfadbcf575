"""Linear backlight <-> gamma space conversion (Qt-independent).

Implements the platform's hybrid log-gamma curve used by brightness sliders:
linear values in ``[min, max]`` map onto a fixed perceptual scale
``[GAMMA_SPACE_MIN, GAMMA_SPACE_MAX]``. Both directions accept a scalar or a
numpy array; scalars come back as ``int``.
"""

import numpy as np

GAMMA_SPACE_MIN = 0
GAMMA_SPACE_MAX = 65535

# Hybrid Log Gamma constants
R = 0.5
A = 0.17883277
B = 0.28466892
C = 0.55991073


def round_half_up(x):
    """Round like ``Math.round``: halves go up, not to even."""
    return np.floor(np.asarray(x, dtype=np.float64) + 0.5).astype(np.int64)


def _result(values, scalar):
    if scalar:
        return int(values)
    return values


def _norm(start, stop, value):
    return (value - start) / (stop - start)


def _lerp(start, stop, amount):
    return start + (stop - start) * amount


def convert_gamma_to_linear(val, min_val, max_val):
    """Convert a gamma-space value into a linear backlight value.

    Args:
        val: Gamma value(s) in [GAMMA_SPACE_MIN, GAMMA_SPACE_MAX]
        min_val: Minimum backlight value
        max_val: Maximum backlight value

    Returns:
        Linear backlight value(s) in [min_val, max_val]
    """
    scalar = np.isscalar(val)
    normalized = _norm(GAMMA_SPACE_MIN, GAMMA_SPACE_MAX, np.asarray(val, dtype=np.float64))
    low = np.square(normalized / R)
    high = np.exp((normalized - C) / A) + B
    ret = np.where(normalized <= R, low, high)
    # HLG is normalized to [0, 12]
    return _result(round_half_up(_lerp(min_val, max_val, ret / 12.0)), scalar)


def convert_linear_to_gamma(val, min_val, max_val):
    """Convert a linear backlight value into gamma space.

    Args:
        val: Linear value(s) in [min_val, max_val]
        min_val: Minimum backlight value
        max_val: Maximum backlight value

    Returns:
        Gamma value(s) in [GAMMA_SPACE_MIN, GAMMA_SPACE_MAX]
    """
    scalar = np.isscalar(val)
    normalized = _norm(min_val, max_val, np.asarray(val, dtype=np.float64)) * 12.0
    with np.errstate(invalid="ignore", divide="ignore"):
        low = np.sqrt(np.maximum(normalized, 0.0)) * R
        high = A * np.log(normalized - B) + C
    ret = np.where(normalized <= 1.0, low, high)
    return _result(round_half_up(_lerp(GAMMA_SPACE_MIN, GAMMA_SPACE_MAX, ret)), scalar)
