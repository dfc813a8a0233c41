"""
Light curve ingestion from CSV files.

Each data line holds `time,magnitude,velocity` (seconds, magnitude, km/s).
Header lines and any line with an alphabetic character are skipped, and
rows that do not have exactly three numeric fields are discarded.
"""

import csv
import numpy as np
from dataclasses import dataclass
from typing import List, Optional, Sequence

# Longest line accepted, newline included.
MAX_LINE_LENGTH = 250
FIELD_SEPARATOR = ','
NUMBER_OF_FIELDS = 3


@dataclass(frozen=True)
class Sample:
    """One light curve observation."""
    time: float  # s
    magnitude: float
    velocity: float  # km/s


@dataclass
class LightCurveArrays:
    """Column view of a sample sequence."""
    times: np.ndarray
    magnitudes: np.ndarray
    velocities: np.ndarray

    def __len__(self):
        return len(self.times)


def valid_characters(line: str) -> bool:
    """False for headers and any line holding a non-numeric character."""
    return not any(c.isalpha() for c in line)


def parse_csv_line(line: str) -> Optional[Sample]:
    """Parse one CSV line into a Sample, or None if it is malformed.

    Quotes are not special, and fields must be plain ASCII decimals
    (no `_` digit grouping).
    """
    reader = csv.reader([line.rstrip('\r\n')], delimiter=FIELD_SEPARATOR,
                        quoting=csv.QUOTE_NONE)
    fields = next(reader, [])
    if len(fields) != NUMBER_OF_FIELDS:
        return None
    if any('_' in f or not f.isascii() for f in fields):
        return None

    try:
        time, magnitude, velocity = (float(f) for f in fields)
    except ValueError:
        return None

    return Sample(time=time, magnitude=magnitude, velocity=velocity)


def parse_csv_text(content: str) -> List[Sample]:
    """Parse CSV content into samples, keeping file order."""
    samples = []
    for line in content.splitlines():
        if not line.strip():
            continue
        # splitlines() drops the newline, count it back.
        if len(line) + 1 >= MAX_LINE_LENGTH:
            continue
        if not valid_characters(line):
            continue

        sample = parse_csv_line(line)
        if sample is not None:
            samples.append(sample)

    return samples


def read_csv_file(path: str) -> List[Sample]:
    """Read a light curve CSV file.

    Args:
        path: Path to a `time,magnitude,velocity` CSV file

    Returns:
        List of Sample in file order

    Raises:
        OSError: if the file cannot be opened
    """
    with open(path, 'r', errors='replace') as f:
        content = f.read()
    return parse_csv_text(content)


def to_arrays(samples: Sequence[Sample]) -> LightCurveArrays:
    """Convert samples to float64 column arrays."""
    return LightCurveArrays(
        times=np.array([s.time for s in samples], dtype=np.float64),
        magnitudes=np.array([s.magnitude for s in samples], dtype=np.float64),
        velocities=np.array([s.velocity for s in samples], dtype=np.float64),
    )
