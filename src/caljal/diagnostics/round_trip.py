from __future__ import annotations

import argparse
import random
from typing import List

import caljal
from caljal.core.parse import format_date
from caljal.core.time import JDN_MIN, JDN_MAX
from caljal.engines import arithmetic, gregorian


def parse_rules(s: str) -> List[str]:
    # "arithmetic-33,birashk-2820" -> ["arithmetic-33", ...]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(rule: str, N: int, lo: int, hi: int, seed: int, *, max_failures: int) -> int:
    """Random JDNs -> gregorian -> jalali -> gregorian, comparing text at every hop."""
    random.seed(seed)
    cal = caljal.get_calendar(rule)
    failures = 0

    for _ in range(N):
        jdn = random.randint(lo, hi)
        g0 = gregorian.from_jdn(jdn)
        j = arithmetic.to_jalali(cal, g0)
        g1 = caljal.jalali_to_gregorian(format_date(j), rule=rule)
        j1 = caljal.gregorian_to_jalali(g1, rule=rule)

        if g1 != format_date(g0) or j1 != format_date(j):
            failures += 1
            print("\nFAIL")
            print("rule:", rule)
            print("jdn:", jdn)
            print("gregorian:", format_date(g0), "->", g1)
            print("jalali:", format_date(j), "->", j1)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> jalali -> gregorian.")
    p.add_argument("--rules", type=str, default=",".join(caljal.list_rules()),
                   help="Comma-separated leap rule list.")
    p.add_argument("--N", type=int, default=20000, help="Trials per rule.")
    p.add_argument("--start", type=str, default="0001-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="9999-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per rule.")
    args = p.parse_args(argv)

    lo = max(JDN_MIN, gregorian.to_jdn(caljal.parse_gregorian(args.start)))
    hi = min(JDN_MAX, gregorian.to_jdn(caljal.parse_gregorian(args.end)))
    if hi < lo:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for rule in parse_rules(args.rules):
        print(f"Testing {rule} ...")
        total_fail += roundtrip_test(rule, N=args.N, lo=lo, hi=hi, seed=args.seed,
                                     max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
