"""
Physical model for the photometric mass of a meteoroid.

Implements:
1. Luminous efficiency tau as a piecewise power law of velocity
2. Luminous intensity from absolute magnitude
3. Mean time step of a sampled light curve

References:
    Ceplecha & McCrosky 1976, Fireball end heights (JGR), p. 6529
    Ceplecha 1966, Dynamic and photometric mass of meteors (BAC 17, 347)
"""

import numpy as np
from typing import Optional, Sequence

# Scale applied to velocities in km/s inside the mass integral.
VELOCITY_CONVERSION_FACTOR = 10000.0

# log tau = a + b * log v, one row per velocity band:
# (upper bound in km/s, a, b). Bands are tested in order with <=.
VELOCITY_REGIMES = (
    (9.3, -12.75, 0.0),
    (12.5, -15.60, 2.92),
    (17.0, -13.24, 0.77),
    (27.0, -12.50, 0.17),
    (72.0, -13.69, 1.0),
)

# Returned when no band matches so the mass integral never divides by zero.
TAU_OUT_OF_RANGE = 1.0

DEFAULT_TIME_STEP = 1.0


# ============================================================
# Luminous efficiency
# ============================================================

def velocity_regime(velocity: float) -> Optional[int]:
    """Index into VELOCITY_REGIMES for a velocity in km/s, or None if out of range."""
    for i, (upper, _, _) in enumerate(VELOCITY_REGIMES):
        if velocity <= upper:
            return i
    return None


def tau(velocity: float) -> float:
    """Luminous efficiency parameter for a meteor moving at `velocity` km/s.

    tau = 10^a * v^b, with (a, b) chosen from VELOCITY_REGIMES. Velocities
    above the last band give TAU_OUT_OF_RANGE.
    """
    regime = velocity_regime(velocity)
    if regime is None:
        return TAU_OUT_OF_RANGE

    _, log_coeff, exponent = VELOCITY_REGIMES[regime]
    return 10.0 ** log_coeff * velocity ** exponent


def tau_array(velocities: np.ndarray) -> np.ndarray:
    """Vectorised tau over an array of velocities (km/s)."""
    v = np.asarray(velocities, dtype=np.float64)

    conditions = []
    choices = []
    lower = -np.inf
    for upper, log_coeff, exponent in VELOCITY_REGIMES:
        conditions.append((v > lower) & (v <= upper))
        # Negative velocities only reach the flat first band.
        choices.append(10.0 ** log_coeff * np.power(np.abs(v), exponent))
        lower = upper

    return np.select(conditions, choices, default=TAU_OUT_OF_RANGE)


# ============================================================
# Photometry
# ============================================================

def luminous_intensity(magnitude):
    """Luminous intensity from magnitude, inverting M = -2.5 log10(I).

    Accepts a float or a numpy array. Overflow gives inf.
    """
    with np.errstate(over='ignore'):
        return np.power(10.0, np.divide(magnitude, -2.5))


# ============================================================
# Sampling
# ============================================================

def mean_time_step(samples: Sequence) -> float:
    """Mean time step of a light curve.

    (last time - first time) / number of samples, taking first and last by
    position in the sequence. An empty sequence gives DEFAULT_TIME_STEP.
    """
    if not samples:
        return DEFAULT_TIME_STEP
    return (samples[-1].time - samples[0].time) / float(len(samples))
