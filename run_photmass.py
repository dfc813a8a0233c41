#!/usr/bin/env python3
"""
Main Entry Point: Photometric Mass Calculator

Computes the photometric mass of a meteoroid from a CSV light curve.

Usage:
    python run_photmass.py -i light_curve.csv [--quiet] [--show-measures]
"""

import sys

from photmass.cli import main


if __name__ == '__main__':
    sys.exit(main())
