"""Tests for photmass.parsers module."""

import numpy as np
import pytest

from photmass.parsers import (
    MAX_LINE_LENGTH,
    Sample,
    parse_csv_line,
    parse_csv_text,
    read_csv_file,
    to_arrays,
    valid_characters,
)


class TestValidCharacters:
    def test_numeric_line(self):
        assert valid_characters("0.1,-2.5,30.0\n")

    def test_header_rejected(self):
        assert not valid_characters("time,magnitude,velocity\n")

    def test_exponent_rejected(self):
        """Exponent notation contains a letter and is treated as non-data."""
        assert not valid_characters("1e-3,0.0,30.0\n")


class TestParseCsvLine:
    def test_three_fields(self):
        assert parse_csv_line("0.5,-1.25,42.0\n") == Sample(0.5, -1.25, 42.0)

    def test_without_newline(self):
        assert parse_csv_line("0.5,-1.25,42.0") == Sample(0.5, -1.25, 42.0)

    def test_crlf(self):
        assert parse_csv_line("1,2,3\r\n") == Sample(1.0, 2.0, 3.0)

    @pytest.mark.parametrize("line", ["1,2\n", "1,2,3,4\n", "\n", "1,,3\n", "1,2,-\n",
                                      "1_0,2,3\n", "1,\u0663,3\n", "\"1\",2,3\n"])
    def test_malformed(self, line):
        assert parse_csv_line(line) is None


class TestParseCsvText:
    def test_filters_and_keeps_order(self):
        content = (
            "time,magnitude,velocity\n"
            "0.2,1.0,28.0\n"
            "\n"
            "bad line\n"
            "0.0,0.0,30.0\n"
            "1,2\n"
            "0.1,0.5,29.0"
        )
        samples = parse_csv_text(content)
        assert [s.time for s in samples] == [0.2, 0.0, 0.1]
        assert samples[2] == Sample(0.1, 0.5, 29.0)

    def test_line_length_boundary(self):
        """With its newline a row may be at most MAX_LINE_LENGTH - 1 characters."""
        prefix = "1.0,2.0,"
        fits = prefix + "0" * (MAX_LINE_LENGTH - 3 - len(prefix)) + "3"
        too_long = prefix + "0" * (MAX_LINE_LENGTH - 2 - len(prefix)) + "3"
        assert len(fits) + 1 == MAX_LINE_LENGTH - 1
        assert len(too_long) + 1 == MAX_LINE_LENGTH
        assert parse_csv_text(fits + "\n") == [Sample(1.0, 2.0, 3.0)]
        assert parse_csv_text(too_long + "\n") == []
        assert parse_csv_text(too_long) == []

    def test_long_line_discarded(self):
        long_line = "1.0,2.0," + "3" * MAX_LINE_LENGTH
        assert parse_csv_text(long_line + "\n0,0,30\n") == [Sample(0.0, 0.0, 30.0)]

    def test_empty(self):
        assert parse_csv_text("") == []


class TestReadCsvFile:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "lc.csv"
        path.write_text("time,magnitude,velocity\n0.0,0.0,30.0\n0.1,0.5,29.0\n")
        samples = read_csv_file(str(path))
        assert samples == [Sample(0.0, 0.0, 30.0), Sample(0.1, 0.5, 29.0)]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_csv_file(str(tmp_path / "missing.csv"))


class TestToArrays:
    def test_columns(self):
        samples = [Sample(0.0, 1.0, 2.0), Sample(3.0, 4.0, 5.0)]
        lc = to_arrays(samples)
        assert len(lc) == 2
        np.testing.assert_array_equal(lc.times, [0.0, 3.0])
        np.testing.assert_array_equal(lc.magnitudes, [1.0, 4.0])
        np.testing.assert_array_equal(lc.velocities, [2.0, 5.0])
        assert lc.velocities.dtype == np.float64

    def test_empty(self):
        assert len(to_arrays([])) == 0
