from __future__ import annotations
import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Dict, List, Protocol

log = logging.getLogger(__name__)


class LeapRule(Protocol):
    """Decides the length of month 12 of a Persian year."""

    @property
    def epoch_jdn(self) -> int:
        """JDN of 0001/01/01 under this rule."""
        ...

    @property
    def mean_year(self) -> Fraction:
        """Average year length in days."""
        ...

    def is_leap(self, year: int) -> bool: ...

    def leap_years_before(self, year: int) -> int:
        """Signed count of leap years in [1, year - 1]; negative for year < 1."""
        ...

    def info(self) -> Dict[str, Any]: ...

@dataclass
class RuleRegistry:
    _rules: Dict[str, LeapRule]

    def get(self, name: str) -> LeapRule:
        if name not in self._rules:
            raise KeyError(f"Unknown leap rule '{name}'. Available: {sorted(self._rules)}")
        return self._rules[name]

    def list(self) -> List[str]:
        return sorted(self._rules.keys())

    def register(self, name: str, rule: LeapRule, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._rules):
            raise KeyError(f"Leap rule '{name}' already exists. Use overwrite=True to replace.")
        self._rules[name] = rule
        log.debug("registered leap rule %s: %s", name, rule.info())
