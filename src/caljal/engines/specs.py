"""
caljal.engines.specs
--------------------
Pure data: the leap-rule specifications shipped with caljal.
"""

from __future__ import annotations

from typing import Dict

from .leap import CycleLeapParams, residues_where

# ============================================================
# 33-year arithmetic cycle
# ============================================================
# Leap iff (25*y + 11) mod 33 < 8, i.e. y mod 33 in {1,5,9,13,17,22,26,30}.
# Tracks the astronomical (Tehran noon equinox) calendar for several centuries around the present.
# The epoch is pinned so that 1403/01/01 falls on 2024-03-20 (JDN 2460390);
# extended back to year 1 the cycle drifts one day from 19 March 622 Julian.

ARITHMETIC_33 = CycleLeapParams(
    name="arithmetic-33",
    cycle=33,
    leap_residues=residues_where(33, lambda y: (25 * y + 11) % 33 < 8),
    epoch_jdn=1948320,
    meta={"description": "33-year arithmetic cycle (8 leap years per cycle)"},
)

# ============================================================
# Birashk 2820-year cycle
# ============================================================
# Leap iff ((((y - 474) mod 2820) + 474 + 38) * 682) mod 2816 < 682.
# Applied uniformly to every integer year (year 0 included), with
# 0001/01/01 = 19 March 622 Julian = JDN 1948321.

BIRASHK_2820 = CycleLeapParams(
    name="birashk-2820",
    cycle=2820,
    leap_residues=residues_where(2820, lambda y: ((((y - 474) % 2820) + 474 + 38) * 682) % 2816 < 682),
    epoch_jdn=1948321,
    meta={"description": "Birashk 2820-year cycle (683 leap years per cycle)"},
)

DEFAULT_RULE = "arithmetic-33"

ALL_SPECS: Dict[str, CycleLeapParams] = {
    ARITHMETIC_33.name: ARITHMETIC_33,
    BIRASHK_2820.name: BIRASHK_2820,
}
