"""
Command line entry point: photometric mass from a light curve CSV file.

Usage:
    photmass -i light_curve.csv [--quiet] [--show-measures]
"""

import argparse
import sys

from .parsers import read_csv_file
from .mass import calculate_photometric_mass, print_step


def show_measures(samples):
    """Print the samples read from the input file."""
    for s in samples:
        print(f"Measure-> Time: {s.time:f} Magnitude: {s.magnitude:f} "
              f"Speed: {s.velocity:f}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='photmass',
        description='Photometric mass of a meteoroid from its light curve')
    parser.add_argument('-i', '--input', required=True, metavar='FILE',
                        help='CSV file with time,magnitude,velocity rows')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Do not print per-sample diagnostics')
    parser.add_argument('--show-measures', action='store_true',
                        help='Print the measures read before computing')
    args = parser.parse_args(argv)

    print(f"Starting {parser.prog} ...")
    print(f"Opening file {args.input}")

    try:
        samples = read_csv_file(args.input)
    except OSError as e:
        print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    if args.show_measures:
        show_measures(samples)

    sink = None if args.quiet else print_step
    phot_mass = calculate_photometric_mass(samples, sink=sink)

    print(f"The photometric mass calculated is: {phot_mass:f} grams")
    print(f"Finishing {parser.prog} ...")
    return 0


if __name__ == '__main__':
    sys.exit(main())
