"""
Rule Engine — Orchestrates all registered rules.

Runs every registered rule against attributed compilation units.
Rules are pure functions of the typed tree: no I/O, no shared state.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from keysafe.core.rules import array_as_key_of_set_or_map
from keysafe.core.tree_walker import walk_unit
from keysafe.core.type_resolution import DEFAULT_RESOLVER, TypeResolver
from keysafe.models.rule_models import RuleInfo, RuleResult, RuleViolation, Severity
from keysafe.models.tree_models import CompilationUnit

logger = logging.getLogger("keysafe.engine")

# Type for a rule check function
RuleCheckFn = Callable[[CompilationUnit, TypeResolver | None], list[RuleViolation]]

# Registry of all rules
RULE_REGISTRY: dict[str, RuleCheckFn] = {
    array_as_key_of_set_or_map.RULE_ID: array_as_key_of_set_or_map.check,
}

RULE_INFO: dict[str, RuleInfo] = {
    array_as_key_of_set_or_map.RULE_ID: array_as_key_of_set_or_map.RULE,
}


class RuleEngine:
    """
    Deterministic rule engine.

    Runs all registered rules against CompilationUnit objects. Units are
    independent of each other, so the same engine may serve concurrent scans.
    """

    def __init__(
        self,
        rules: dict[str, RuleCheckFn] | None = None,
        resolver: TypeResolver | None = None,
    ) -> None:
        self.rules = rules or RULE_REGISTRY
        self.resolver = resolver or DEFAULT_RESOLVER

    def run(self, units: dict[str, CompilationUnit]) -> RuleResult:
        """
        Run all rules against all units.

        Args:
            units: Dict mapping file_path -> CompilationUnit.

        Returns:
            RuleResult with all violations found.
        """
        start = time.monotonic()
        all_violations: list[RuleViolation] = []
        rules_executed: list[str] = []

        for rule_id, check_fn in self.rules.items():
            rules_executed.append(rule_id)
            for file_path, unit in units.items():
                try:
                    violations = check_fn(unit, self.resolver)
                    all_violations.extend(violations)
                except Exception as e:
                    # Rule failures should not abort the scan
                    logger.exception(f"Rule '{rule_id}' failed on {file_path}")
                    all_violations.append(
                        RuleViolation(
                            rule_id=rule_id,
                            severity=Severity.SUGGESTION,
                            file=file_path,
                            line=1,
                            title=f"Rule '{rule_id}' internal error",
                            description=f"Rule execution failed: {e}",
                            evidence=[f"Exception: {type(e).__name__}: {e}"],
                        )
                    )

        expressions_visited = sum(
            sum(1 for _ in walk_unit(unit)) for unit in units.values()
        )
        elapsed = (time.monotonic() - start) * 1000

        logger.info(
            f"Scanned {len(units)} unit(s), {expressions_visited} expression(s): "
            f"{len(all_violations)} violation(s) in {elapsed:.2f}ms"
        )

        return RuleResult(
            violations=all_violations,
            rules_executed=rules_executed,
            total_units_scanned=len(units),
            expressions_visited=expressions_visited,
            scan_duration_ms=round(elapsed, 2),
        )

    def run_single_rule(
        self,
        rule_id: str,
        unit: CompilationUnit,
    ) -> list[RuleViolation]:
        """Run a single rule against a single unit."""
        if rule_id not in self.rules:
            raise ValueError(f"Unknown rule: {rule_id}")
        return self.rules[rule_id](unit, self.resolver)

    def describe_rules(self) -> list[RuleInfo]:
        """Metadata for every registered rule that has any."""
        return [RULE_INFO[rule_id] for rule_id in self.rules if rule_id in RULE_INFO]
