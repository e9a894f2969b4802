from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

_JALALI_RE = re.compile(r"^-?\d+/\d+/\d+$")


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


def _build_parser() -> argparse.ArgumentParser:
    from caljal.engines.specs import DEFAULT_RULE

    p = argparse.ArgumentParser(prog="caljal", description="Jalali / Gregorian calendar toolkit CLI.")
    p.add_argument("--rule", default=DEFAULT_RULE, help="Leap-year rule (see `caljal rules`)")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_g = sub.add_parser("to-gregorian", help="Jalali YYYY/MM/DD -> Gregorian YYYY-MM-DD")
    p_g.add_argument("date")

    p_j = sub.add_parser("to-jalali", help="Gregorian YYYY-MM-DD -> Jalali YYYY/MM/DD")
    p_j.add_argument("date")

    p_diff = sub.add_parser("diff", help="Signed day count between two Jalali dates")
    p_diff.add_argument("start")
    p_diff.add_argument("end")
    p_diff.add_argument("--adjust", type=int, default=0, help="Added to the magnitude before the sign")

    p_ad = sub.add_parser("add-days", help="Add a signed number of days to a Jalali date")
    p_ad.add_argument("date")
    p_ad.add_argument("days", type=int)

    p_am = sub.add_parser("add-months", help="Add a positive number of months to a Jalali date")
    p_am.add_argument("date")
    p_am.add_argument("months", type=int)

    sub.add_parser("now", help="Today's (UTC) date as Jalali text")

    p_leap = sub.add_parser("is-leap", help="Is the Jalali year of DATE a leap year?")
    p_leap.add_argument("date")

    p_ps = sub.add_parser("period-state", help="Start/Middle/End/Unknown for an anchor day")
    p_ps.add_argument("date")
    p_ps.add_argument("anchor", type=int)
    p_ps.add_argument("--explain", action="store_true", help="Show which rule of the decision table matched")

    sub.add_parser("rules", help="List registered leap-year rules")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip", "leap-table", "nowruz-scatter"], help="Which diagnostic to run")
    return p


def main(argv: list[str] | None = None) -> int:
    import caljal
    from caljal.core.errors import CaljalError
    from caljal.logging_setup import setup_logging

    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `caljal 1403/01/01` converts to Gregorian
    if argv and _JALALI_RE.match(argv[0]):
        argv = ["to-gregorian"] + argv

    args, rest = _build_parser().parse_known_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING)
    rule = args.rule

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "caljal.diagnostics.round_trip",
            "leap-table": "caljal.diagnostics.leap_table",
            "nowruz-scatter": "caljal.diagnostics.nowruz_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if rest:
        print(f"error: unrecognized arguments: {' '.join(rest)}", file=sys.stderr)
        return 2

    try:
        if args.cmd == "to-gregorian":
            print(caljal.jalali_to_gregorian(args.date, rule=rule))
        elif args.cmd == "to-jalali":
            print(caljal.gregorian_to_jalali(args.date, rule=rule))
        elif args.cmd == "diff":
            print(caljal.diff_days_with_adjustment(args.start, args.end, args.adjust, rule=rule))
        elif args.cmd == "add-days":
            print(caljal.add_days(args.date, args.days, rule=rule))
        elif args.cmd == "add-months":
            print(caljal.add_months(args.date, args.months, rule=rule))
        elif args.cmd == "now":
            print(caljal.now(rule=rule))
        elif args.cmd == "is-leap":
            print("true" if caljal.is_leap_year(args.date, rule=rule) else "false")
        elif args.cmd == "period-state":
            if args.explain:
                for k, v in caljal.explain_period_state(args.date, args.anchor, rule=rule).items():
                    print(f"{k:>10}: {v}")
            else:
                print(caljal.period_state(args.date, args.anchor, rule=rule))
        elif args.cmd == "rules":
            for name in caljal.list_rules():
                info = caljal.rule_info(name)
                print(f"{name:<16} {info.get('description', '')}")
        else:
            raise RuntimeError("unreachable")
    except (CaljalError, KeyError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
