"""
caljal.engines.factory
----------------------
Transforms pure data specifications into live rule and calendar objects.
"""

from __future__ import annotations
from caljal.core.engine import LeapRule
from caljal.engines.calendar import JalaliCalendar
from caljal.engines.leap import CycleLeapParams, CycleLeapRule


def make_rule(spec: CycleLeapParams) -> LeapRule:
    if isinstance(spec, CycleLeapParams):
        return CycleLeapRule(spec)
    raise TypeError(f"Unknown leap rule spec type: {type(spec)}")

def make_calendar(spec: CycleLeapParams) -> JalaliCalendar:
    """The universal entry point."""
    return JalaliCalendar(make_rule(spec))
