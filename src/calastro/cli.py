from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys
from typing import Optional

from calastro.core.time import fixed_from_gregorian, gregorian_from_fixed
from calastro.core.types import Location


def _parse_ymd(s: str) -> int:
    """YYYY-MM-DD (year may be negative) -> fixed date."""
    sign = -1 if s.startswith("-") else 1
    y, m, d = map(int, s.lstrip("-").split("-"))
    return fixed_from_gregorian(sign * y, m, d)


def _fmt_moment(tee: Optional[float]) -> str:
    if tee is None:
        return "none"
    fixed = int(tee // 1)
    y, m, d = gregorian_from_fixed(fixed)
    secs = round((tee - fixed) * 86400.0)
    if secs >= 86400:
        return _fmt_moment(fixed + 1)
    hh, rem = divmod(secs, 3600)
    mm, ss = divmod(rem, 60)
    return f"{y:04d}-{m:02d}-{d:02d} {hh:02d}:{mm:02d}:{ss:02d}"


def _fmt_date(fixed: int) -> str:
    y, m, d = gregorian_from_fixed(fixed)
    return f"{y:04d}-{m:02d}-{d:02d}"


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _add_location_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--location", default=None, help="named location (e.g. mecca, greenwich, jerusalem)")
    p.add_argument("--lat", type=float, default=None, help="latitude in degrees (north positive)")
    p.add_argument("--lon", type=float, default=None, help="longitude in degrees (east positive)")
    p.add_argument("--elev", type=float, default=0.0, help="elevation in meters")
    p.add_argument("--zone", type=float, default=0.0, help="standard-time offset from UT in hours")


def _location_from_args(args: argparse.Namespace) -> Location:
    from calastro.reference.locations import get_location

    if args.location is not None:
        try:
            return get_location(args.location)
        except KeyError as e:
            raise SystemExit(str(e.args[0]))
    if args.lat is None or args.lon is None:
        raise SystemExit("give --location NAME or both --lat and --lon")
    return Location(args.lat, args.lon, args.elev, args.zone / 24.0)


def cmd_solar(argv: list[str]) -> int:
    from calastro.reference import solar
    from calastro.reference import time_scales as ts

    p = argparse.ArgumentParser(prog="calastro solar", description="Solar longitude, nutation, aberration and equation of time.")
    p.add_argument("--date", required=True, help="YYYY-MM-DD (UT)")
    p.add_argument("--hour", type=float, default=0.0, help="hour of day, UT")
    args = p.parse_args(argv)

    tee = _parse_ymd(args.date) + args.hour / 24.0

    print(f"Moment (UT)          : {_fmt_moment(tee)}  (R.D. {tee:.6f}, JD {ts.jd_from_moment(tee):.6f})")
    print(f"Ephemeris correction : {ts.ephemeris_correction(tee) * 86400.0:.2f} s")
    print(f"Julian centuries     : {ts.julian_centuries(tee):.10f}")
    print(f"Solar longitude      : {solar.solar_longitude(tee):.6f} deg")
    print(f"  nutation           : {solar.nutation(tee):.6f} deg")
    print(f"  aberration         : {solar.aberration(tee):.6f} deg")
    print(f"Equation of time     : {ts.equation_of_time(tee) * 1440.0:.3f} min")
    return 0


def cmd_lunar(argv: list[str]) -> int:
    from calastro.reference import lunar

    p = argparse.ArgumentParser(prog="calastro lunar", description="Lunar position, phase and surrounding new moons.")
    p.add_argument("--date", required=True, help="YYYY-MM-DD (UT)")
    p.add_argument("--hour", type=float, default=0.0, help="hour of day, UT")
    args = p.parse_args(argv)

    tee = _parse_ymd(args.date) + args.hour / 24.0

    print(f"Moment (UT)      : {_fmt_moment(tee)}")
    print(f"Lunar longitude  : {lunar.lunar_longitude(tee):.6f} deg")
    print(f"Lunar latitude   : {lunar.lunar_latitude(tee):.6f} deg")
    print(f"Lunar distance   : {lunar.lunar_distance(tee) / 1000.0:.1f} km")
    print(f"Lunar phase      : {lunar.lunar_phase(tee):.4f} deg")
    print(f"New moon before  : {_fmt_moment(lunar.new_moon_before(tee))} UT")
    print(f"New moon after   : {_fmt_moment(lunar.new_moon_at_or_after(tee))} UT")
    return 0


def cmd_sun(argv: list[str]) -> int:
    from calastro.reference import riseset
    from calastro.reference import time_scales as ts

    p = argparse.ArgumentParser(prog="calastro sun", description="Dawn, sunrise, midday, sunset and dusk (standard time).")
    p.add_argument("--date", required=True, help="YYYY-MM-DD")
    p.add_argument("--twilight", type=float, default=18.0, help="depression angle for dawn/dusk in degrees")
    _add_location_args(p)
    args = p.parse_args(argv)

    fixed = _parse_ymd(args.date)
    loc = _location_from_args(args)

    print(f"Location : lat {loc.latitude:.4f}, lon {loc.longitude:.4f}, elev {loc.elevation:g} m, zone {loc.zone * 24:+g} h")
    print(f"Dawn     : {_fmt_moment(riseset.dawn(fixed, loc, args.twilight))}")
    print(f"Sunrise  : {_fmt_moment(riseset.sunrise(fixed, loc))}")
    print(f"Midday   : {_fmt_moment(ts.standard_from_universal(ts.midday(fixed, loc), loc))}")
    print(f"Sunset   : {_fmt_moment(riseset.sunset(fixed, loc))}")
    print(f"Dusk     : {_fmt_moment(riseset.dusk(fixed, loc, args.twilight))}")
    return 0


def cmd_moon(argv: list[str]) -> int:
    from calastro.reference import riseset

    p = argparse.ArgumentParser(prog="calastro moon", description="Moonrise and moonset (standard time).")
    p.add_argument("--date", required=True, help="YYYY-MM-DD")
    _add_location_args(p)
    args = p.parse_args(argv)

    fixed = _parse_ymd(args.date)
    loc = _location_from_args(args)

    print(f"Moonrise : {_fmt_moment(riseset.moonrise(fixed, loc))}")
    print(f"Moonset  : {_fmt_moment(riseset.moonset(fixed, loc))}")
    return 0


def cmd_phasis(argv: list[str]) -> int:
    from calastro.reference import visibility as vis

    p = argparse.ArgumentParser(prog="calastro phasis", description="First visibility of the lunar crescent around a date.")
    p.add_argument("--date", required=True, help="YYYY-MM-DD")
    p.add_argument("--criterion", choices=sorted(vis.CRITERIA), default="shaukat")
    _add_location_args(p)
    args = p.parse_args(argv)

    fixed = _parse_ymd(args.date)
    loc = _location_from_args(args)
    crit = vis.get_criterion(args.criterion)

    before = vis.phasis_on_or_before(fixed, loc, criterion=crit)
    after = vis.phasis_on_or_after(fixed, loc, criterion=crit)
    print(f"Criterion          : {args.criterion}")
    print(f"Phasis on or before: {_fmt_date(before)}")
    print(f"Phasis on or after : {_fmt_date(after)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="calastro", description="Calendrical astronomy toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("solar", help="Solar longitude, nutation, aberration, equation of time.")
    sub.add_parser("lunar", help="Lunar longitude/latitude/distance, phase and new moons.")
    sub.add_parser("sun", help="Dawn, sunrise, midday, sunset and dusk at a location.")
    sub.add_parser("moon", help="Moonrise and moonset at a location.")
    sub.add_parser("phasis", help="Crescent first visibility around a date.")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["deltat", "lunations"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "diag":
        tool_map = {
            "deltat": "calastro.diagnostics.deltat_boundaries",
            "lunations": "calastro.diagnostics.lunations",
        }
        return _run_module_main(tool_map[args.tool], rest)

    commands = {
        "solar": cmd_solar,
        "lunar": cmd_lunar,
        "sun": cmd_sun,
        "moon": cmd_moon,
        "phasis": cmd_phasis,
    }
    return commands[args.cmd](rest)


if __name__ == "__main__":
    raise SystemExit(main())
