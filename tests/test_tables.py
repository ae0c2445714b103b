# tests/test_tables.py
#
# Length and checksum guards for the periodic-series coefficient tables.
# checksum(field) = sum((i + 1) * value_i), so a transposed pair of
# coefficients changes it even when the plain sum does not.

import pytest

from calastro.engines import tables as tb
from calastro.engines.angles import sin_degrees


@pytest.mark.parametrize(
    "table, rows",
    [
        (tb.SOLAR_LONGITUDE, 49),
        (tb.NEW_MOON_TERMS, 24),
        (tb.NEW_MOON_ADDITIONAL, 13),
        (tb.LUNAR_LONGITUDE, 59),
        (tb.LUNAR_LATITUDE, 60),
        (tb.LUNAR_DISTANCE, 60),
    ],
)
def test_table_lengths(table, rows):
    assert len(table) == rows
    assert all(len(col) == rows for col in table.columns)


@pytest.mark.parametrize(
    "table, field, expected",
    [
        (tb.SOLAR_LONGITUDE, "coefficient", 1713578),
        (tb.NEW_MOON_TERMS, "e_factor", 76),
        (tb.NEW_MOON_TERMS, "solar_coeff", 137),
        (tb.NEW_MOON_TERMS, "lunar_coeff", 447),
        (tb.NEW_MOON_TERMS, "moon_coeff", 16),
        (tb.LUNAR_LONGITUDE, "v", 11179311),
        (tb.LUNAR_LONGITUDE, "w", 3125),
        (tb.LUNAR_LONGITUDE, "x", 321),
        (tb.LUNAR_LONGITUDE, "y", 21),
        (tb.LUNAR_LONGITUDE, "z", -178),
        (tb.LUNAR_LATITUDE, "v", 8505427),
        (tb.LUNAR_LATITUDE, "w", 3258),
        (tb.LUNAR_LATITUDE, "x", 12),
        (tb.LUNAR_LATITUDE, "y", -1),
        (tb.LUNAR_LATITUDE, "z", -298),
        (tb.LUNAR_DISTANCE, "v", -40734001),
        (tb.LUNAR_DISTANCE, "w", 3245),
        (tb.LUNAR_DISTANCE, "x", 321),
        (tb.LUNAR_DISTANCE, "y", -39),
        (tb.LUNAR_DISTANCE, "z", -298),
    ],
)
def test_integer_column_checksums(table, field, expected):
    assert table.checksum(field) == expected


@pytest.mark.parametrize(
    "table, field, expected",
    [
        (tb.SOLAR_LONGITUDE, "addend", 207002.53059),
        (tb.SOLAR_LONGITUDE, "multiplier", 38283734.931),
        (tb.NEW_MOON_TERMS, "sine_coeff", 0.04267),
        (tb.NEW_MOON_ADDITIONAL, "add_const", 19195.92),
        (tb.NEW_MOON_ADDITIONAL, "add_coeff", 1424.441484),
        (tb.NEW_MOON_ADDITIONAL, "add_factor", 0.004653),
    ],
)
def test_real_column_checksums(table, field, expected):
    assert table.checksum(field) == pytest.approx(expected, rel=1e-9)


def test_leading_terms():
    assert tb.SOLAR_LONGITUDE.rows[0] == (403406, 270.54861, 0.9287892)
    assert tb.LUNAR_LONGITUDE.rows[0] == (6288774, 0, 0, 1, 0)
    assert tb.LUNAR_LATITUDE.rows[0] == (5128122, 0, 0, 0, 1)
    assert tb.LUNAR_DISTANCE.rows[0] == (-20905355, 0, 0, 1, 0)


def test_unknown_column():
    with pytest.raises(KeyError):
        tb.LUNAR_LONGITUDE.column("q")


def test_vectorised_sum_matches_sigma():
    args = (113.2, 47.9, 301.4, 12.5)
    expected = tb.LUNAR_LONGITUDE.evaluate(
        lambda v, w, x, y, z: v * sin_degrees(w * args[0] + x * args[1] + y * args[2] + z * args[3])
    )
    assert tb.LUNAR_LONGITUDE.sine_sum(args) == pytest.approx(expected, rel=1e-9, abs=1e-6)
