"""
Tests for Rule Engine — registry, aggregation and failure containment.
"""

import pytest

from keysafe.core.rule_engine import RULE_REGISTRY, RuleEngine
from keysafe.models.rule_models import Severity


def test_array_key_violations_detected(array_key_unit):
    engine = RuleEngine()
    result = engine.run({array_key_unit.file_path: array_key_unit})
    violations = [v for v in result.violations if v.rule_id == "array_as_key_of_set_or_map"]
    assert len(violations) == 4
    assert all(v.severity.value == "warning" for v in violations)


def test_clean_unit_no_violations(clean_unit):
    engine = RuleEngine()
    result = engine.run({clean_unit.file_path: clean_unit})
    assert result.violations == []


def test_all_rules_executed(array_key_unit):
    engine = RuleEngine()
    result = engine.run({array_key_unit.file_path: array_key_unit})
    assert result.rules_executed == list(RULE_REGISTRY)
    assert "array_as_key_of_set_or_map" in result.rules_executed


def test_counts_and_duration(array_key_unit, clean_unit):
    engine = RuleEngine()
    result = engine.run({
        array_key_unit.file_path: array_key_unit,
        clean_unit.file_path: clean_unit,
    })
    assert result.total_units_scanned == 2
    assert result.expressions_visited == 8
    assert result.scan_duration_ms >= 0


def test_empty_run():
    result = RuleEngine().run({})
    assert result.violations == []
    assert result.total_units_scanned == 0


def test_run_single_rule(array_key_unit):
    engine = RuleEngine()
    violations = engine.run_single_rule("array_as_key_of_set_or_map", array_key_unit)
    assert len(violations) == 4


def test_run_single_rule_unknown(clean_unit):
    with pytest.raises(ValueError, match="Unknown rule"):
        RuleEngine().run_single_rule("no_such_rule", clean_unit)


def test_failing_rule_is_contained(array_key_unit):
    def broken(unit, resolver=None):
        raise RuntimeError("boom")

    engine = RuleEngine(rules={"broken": broken, **RULE_REGISTRY})
    result = engine.run({array_key_unit.file_path: array_key_unit})
    internal = [v for v in result.violations if v.rule_id == "broken"]
    assert len(internal) == 1
    assert internal[0].severity == Severity.SUGGESTION
    assert "boom" in internal[0].description
    # the remaining rules still ran
    assert len([v for v in result.violations if v.rule_id == "array_as_key_of_set_or_map"]) == 4


def test_describe_rules():
    rules = RuleEngine().describe_rules()
    assert [r.rule_id for r in rules] == ["array_as_key_of_set_or_map"]
    assert rules[0].severity == Severity.WARNING
