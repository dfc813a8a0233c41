"""
Photometric mass of a meteoroid as the integral (2) of Ceplecha (1966):

    m = sum (2 / tau) * (I / v^3) * dt

evaluated over the samples of its light curve, with v in the model's
velocity units (km/s * VELOCITY_CONVERSION_FACTOR).
"""

import numpy as np
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .physics import (
    VELOCITY_CONVERSION_FACTOR,
    luminous_intensity,
    mean_time_step,
    tau,
    tau_array,
)
from .parsers import Sample, to_arrays


@dataclass(frozen=True)
class MassStep:
    """Diagnostic record for one sample of the mass integral."""
    index: int
    tau: float
    intensity: float
    velocity_cms: float
    contribution: float
    cumulative_mass: float


def print_step(step: MassStep):
    """Print a MassStep immediately with flushed output."""
    print(f"tau = {step.tau:e}, I = {step.intensity:e}, "
          f"v = {step.velocity_cms:e}, phot_mass = {step.cumulative_mass:e}",
          flush=True)


def calculate_photometric_mass(samples: Sequence[Sample],
                               sink: Optional[Callable[[MassStep], None]] = print_step
                               ) -> float:
    """Photometric mass (grams) of a meteoroid from its light curve.

    Args:
        samples: Light curve samples in observation order
        sink: Called with a MassStep after each sample; None to disable

    Returns:
        Cumulative photometric mass, 0.0 for an empty light curve. A zero
        velocity gives inf (nan when dt is also zero) instead of raising.
    """
    dt = mean_time_step(samples)
    phot_mass = 0.0

    with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
        for i, sample in enumerate(samples):
            t = tau(sample.velocity)
            intensity = luminous_intensity(sample.magnitude)
            v = np.float64(sample.velocity) * VELOCITY_CONVERSION_FACTOR

            contribution = (2 / t) * ((intensity / v ** 3.0) * dt)
            phot_mass += contribution

            if sink is not None:
                sink(MassStep(index=i, tau=t, intensity=float(intensity),
                              velocity_cms=float(v),
                              contribution=float(contribution),
                              cumulative_mass=float(phot_mass)))

    return float(phot_mass)


def mass_profile(samples: Sequence[Sample]) -> np.ndarray:
    """Cumulative photometric mass after each sample, vectorised.

    The last element matches calculate_photometric_mass(samples) up to
    floating-point rounding.
    """
    if not samples:
        return np.zeros(0)

    lc = to_arrays(samples)
    dt = mean_time_step(samples)
    v = lc.velocities * VELOCITY_CONVERSION_FACTOR

    with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
        contributions = (2 / tau_array(lc.velocities)) * (
            (luminous_intensity(lc.magnitudes) / v ** 3.0) * dt)
        return np.cumsum(contributions)
