"""
photmass - Photometric mass of meteoroids from their light curves

Reads a light curve (time, magnitude, velocity) from a CSV file and
integrates Ceplecha's photometric mass formula over it.
"""

from .parsers import Sample, read_csv_file
from .physics import luminous_intensity, mean_time_step, tau
from .mass import MassStep, calculate_photometric_mass

__version__ = "1.0.0"
