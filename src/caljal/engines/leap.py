"""
caljal.engines.leap
-------------------
Cyclic arithmetic leap-year rules for the Persian calendar.

A rule is fully described by a cycle length C, the set of residues
(year mod C) that are leap years, and the JDN of 0001/01/01. Leap counts are
read off a per-cycle prefix table, so they are exact for every integer year,
including year 0 and negative (proleptic) years.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Dict, FrozenSet, Tuple


@dataclass(frozen=True)
class CycleLeapParams:
    name: str
    cycle: int
    leap_residues: FrozenSet[int]
    epoch_jdn: int
    meta: Dict[str, Any]

    def __post_init__(self) -> None:
        if self.cycle <= 0:
            raise ValueError("cycle must be positive")
        bad = [r for r in self.leap_residues if not (0 <= r < self.cycle)]
        if bad:
            raise ValueError(f"leap residues {sorted(bad)} outside 0..{self.cycle - 1}")

    @property
    def leaps_per_cycle(self) -> int:
        return len(self.leap_residues)

    @property
    def mean_year(self) -> Fraction:
        return Fraction(365 * self.cycle + self.leaps_per_cycle, self.cycle)


class CycleLeapRule:
    """
    Fully implements LeapRule.

    prefix[r] is the number of leap years among 1..r for 0 <= r < C, so the
    signed count of leap years in 1..n is (n // C) * L + prefix[n % C] with
    Python floor division; for n < 0 this is minus the count in n+1..0.
    """
    def __init__(self, params: CycleLeapParams):
        self.p = params
        counts = [0]
        for r in range(1, params.cycle):
            counts.append(counts[-1] + (1 if r in params.leap_residues else 0))
        self._prefix: Tuple[int, ...] = tuple(counts)

    @property
    def epoch_jdn(self) -> int:
        return self.p.epoch_jdn

    @property
    def mean_year(self) -> Fraction:
        return self.p.mean_year

    def is_leap(self, year: int) -> bool:
        return (year % self.p.cycle) in self.p.leap_residues

    def leap_count(self, n: int) -> int:
        """Signed number of leap years in 1..n."""
        q, r = divmod(n, self.p.cycle)
        return q * self.p.leaps_per_cycle + self._prefix[r]

    def leap_years_before(self, year: int) -> int:
        return self.leap_count(year - 1)

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.p.name,
            "cycle": self.p.cycle,
            "leaps_per_cycle": self.p.leaps_per_cycle,
            "epoch_jdn": self.p.epoch_jdn,
            "mean_year": str(self.p.mean_year),
            **self.p.meta,
        }

    def __repr__(self) -> str:
        return f"CycleLeapRule({self.p.name!r}, cycle={self.p.cycle}, leaps={self.p.leaps_per_cycle})"


def residues_where(cycle: int, predicate) -> FrozenSet[int]:
    """Collect the residues r in 0..cycle-1 for which predicate(r) holds."""
    return frozenset(r for r in range(cycle) if predicate(r))

