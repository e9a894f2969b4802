from __future__ import annotations
from caljal.core.engine import RuleRegistry
from caljal.engines.specs import ALL_SPECS
from caljal.engines.factory import make_rule

def build_registry() -> RuleRegistry:
    rules = {}
    for name, spec in ALL_SPECS.items():
        rules[name] = make_rule(spec)
    return RuleRegistry(rules)
