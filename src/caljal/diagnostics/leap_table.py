from __future__ import annotations

import argparse
from typing import Dict, List

import caljal
from caljal.core.parse import format_date
from caljal.engines import arithmetic


def leap_rows(start: int, end: int, rules: List[str]) -> List[Dict[str, object]]:
    """One row per Jalali year: leap flag and Nowruz (Gregorian) for each rule."""
    cals = {r: caljal.get_calendar(r) for r in rules}
    rows = []
    for year in range(start, end + 1):
        row: Dict[str, object] = {"year": year}
        for r, cal in cals.items():
            row[r] = cal.is_leap(year)
            row[f"{r}:nowruz"] = format_date(arithmetic.to_gregorian(cal, cal.date(year, 1, 1)))
        rows.append(row)
    return rows


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Leap years and Nowruz dates per leap rule.")
    p.add_argument("--start", type=int, default=1390, help="First Jalali year.")
    p.add_argument("--end", type=int, default=1420, help="Last Jalali year.")
    p.add_argument("--rules", type=str, default=",".join(caljal.list_rules()))
    p.add_argument("--diff-only", action="store_true", help="Only print years where the rules disagree.")
    args = p.parse_args(argv)

    rules = [x.strip() for x in args.rules.split(",") if x.strip()]
    header = f"{'year':>6} " + " ".join(f"{r:>24}" for r in rules)
    print(header)
    print("-" * len(header))

    for row in leap_rows(args.start, args.end, rules):
        flags = {row[r] for r in rules}
        nowruz = {row[f"{r}:nowruz"] for r in rules}
        if args.diff_only and len(flags) == 1 and len(nowruz) == 1:
            continue
        cells = " ".join(f"{('L ' if row[r] else '  ') + str(row[f'{r}:nowruz']):>24}" for r in rules)
        print(f"{row['year']:>6} {cells}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
