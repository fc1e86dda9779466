from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys
from fractions import Fraction
from typing import Any, List

logger = logging.getLogger("calfix.cli")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _setup_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)


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


def _names(selected: List[str]) -> List[str]:
    import calfix

    return selected or calfix.list_calendars()


def _print_row(name: str, value: Any) -> None:
    import calfix

    fields = " ".join(f"{k}={v}" for k, v in calfix.fields(value).items())
    print(f"{name:<22} {fields}")


def cmd_today(argv: list[str]) -> int:
    import calfix

    p = argparse.ArgumentParser(prog="calfix today", description="Current moment in every calendar")
    p.add_argument("--calendar", action="append", default=[], help="calendar name (repeatable)")
    args = p.parse_args(argv)

    for name in _names(args.calendar):
        _print_row(name, calfix.today(name))
    return 0


def cmd_convert(argv: list[str]) -> int:
    import calfix

    p = argparse.ArgumentParser(prog="calfix convert", description="Timeline point -> calendar dates")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--fixed", help="Rata Die day count (may be fractional, e.g. 738000.5 or 1/3)")
    src.add_argument("--unix", type=int, help="Unix time in seconds")
    p.add_argument("--calendar", action="append", default=[], help="calendar name (repeatable)")
    args = p.parse_args(argv)

    if args.fixed is not None:
        fixed = calfix.Fixed.new(Fraction(args.fixed))
    else:
        fixed = calfix.UnixMoment(args.unix).to_fixed()
    logger.debug("converting %r", fixed)

    for name in _names(args.calendar):
        _print_row(name, calfix.from_fixed(name, fixed))
    return 0


def cmd_bounds(argv: list[str]) -> int:
    import calfix

    p = argparse.ArgumentParser(prog="calfix bounds", description="Effective min/max of each calendar")
    p.add_argument("--calendar", action="append", default=[], help="calendar name (repeatable)")
    args = p.parse_args(argv)

    for name in _names(args.calendar):
        lo, hi = calfix.effective_bounds(name)
        _print_row(f"{name} (min)", lo)
        _print_row(f"{name} (max)", hi)
    return 0


def cmd_list(argv: list[str]) -> int:
    import calfix

    p = argparse.ArgumentParser(prog="calfix list", description="Registered calendars")
    p.parse_args(argv)

    for name in calfix.list_calendars():
        info = calfix.calendar_info(name)
        print(f"{name:<22} {info['class']:<26} {info['description']}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="calfix", description="Calendar conversion toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", help="DEBUG, INFO, WARNING, ...")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("today", help="Current moment in every calendar")
    sub.add_parser("convert", help="Timeline point -> calendar dates")
    sub.add_parser("bounds", help="Effective min/max of each calendar")
    sub.add_parser("list", help="Registered calendars")

    p_diag = sub.add_parser("diag", help="Diagnostics tools (needs calfix[diagnostics])")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "new-year-drift"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.log_level)
    logger.debug("command %s, args %s", args.cmd, rest)

    if args.cmd == "today":
        return cmd_today(rest)

    if args.cmd == "convert":
        return cmd_convert(rest)

    if args.cmd == "bounds":
        return cmd_bounds(rest)

    if args.cmd == "list":
        return cmd_list(rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "calfix.diagnostics.round_trip",
            "new-year-drift": "calfix.diagnostics.new_year_drift",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
