# tests/test_cli.py

import pytest

from calastro.cli import _fmt_moment, _parse_ymd, main
from calastro.core.time import fixed_from_gregorian


def test_parse_ymd():
    assert _parse_ymd("2000-01-01") == fixed_from_gregorian(2000, 1, 1)
    assert _parse_ymd("-586-07-24") == -214193


def test_fmt_moment():
    assert _fmt_moment(None) == "none"
    assert _fmt_moment(fixed_from_gregorian(2000, 1, 1) + 0.5) == "2000-01-01 12:00:00"


def test_solar_command(capsys):
    assert main(["solar", "--date", "2000-01-01", "--hour", "12"]) == 0
    out = capsys.readouterr().out
    assert "Solar longitude" in out
    assert "Solar longitude      : 280.3" in out


def test_lunar_command(capsys):
    assert main(["lunar", "--date", "2000-01-01"]) == 0
    out = capsys.readouterr().out
    assert "New moon after   : 2000-01-06" in out


def test_sun_command(capsys):
    assert main(["sun", "--date", "2021-06-21", "--location", "greenwich"]) == 0
    out = capsys.readouterr().out
    assert "Sunrise  : 2021-06-21 03:4" in out
    # no astronomical night at Greenwich in midsummer
    assert "Dusk     : none" in out


def test_moon_command_with_coordinates(capsys):
    args = ["moon", "--date", "2023-01-10", "--lat", "31.78", "--lon", "35.24", "--zone", "2"]
    assert main(args) == 0
    out = capsys.readouterr().out
    assert "Moonrise" in out and "Moonset" in out


def test_unknown_location():
    with pytest.raises(SystemExit):
        main(["sun", "--date", "2021-06-21", "--location", "atlantis"])


def test_missing_coordinates():
    with pytest.raises(SystemExit):
        main(["moon", "--date", "2021-06-21", "--lat", "10"])


def test_phasis_command(capsys):
    assert main(["phasis", "--date", "2023-03-30", "--location", "cairo"]) == 0
    out = capsys.readouterr().out
    assert "Phasis on or before: 2023-03-23" in out


def test_diag_lunations(capsys):
    assert main(["diag", "lunations", "--count", "3"]) == 0
    out = capsys.readouterr().out
    assert "mean length" in out
