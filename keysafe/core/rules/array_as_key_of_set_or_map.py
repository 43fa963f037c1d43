"""
Array As Key Of Set Or Map Rule — Detects `Set<T[]>` and `Map<T[], V>` construction.

Arrays inherit identity-based equals() and hashCode(), so two arrays with
the same contents are different keys. A hash set of arrays never
deduplicates by content and a hash map keyed by arrays can only be
queried with the exact array instance that was stored.
"""

from __future__ import annotations

from keysafe.core.matchers import any_of, constructor, static_method
from keysafe.core.tree_walker import walk_unit
from keysafe.core.type_resolution import DEFAULT_RESOLVER, TypeResolver
from keysafe.models.rule_models import RuleInfo, RuleViolation, Severity
from keysafe.models.tree_models import CompilationUnit, Expression
from keysafe.models.type_models import TypeDescriptor


RULE_ID = "array_as_key_of_set_or_map"

SUMMARY = (
    "Arrays do not override equals() or hashCode, so comparisons will be done on"
    " reference equality only. If neither deduplication nor lookup are needed, "
    "consider using a List instead. Otherwise, use IdentityHashMap/Set, "
    "a Map from a library that handles object arrays, or an Iterable/List of pairs."
)

RULE = RuleInfo(
    rule_id=RULE_ID,
    summary=SUMMARY,
    severity=Severity.WARNING,
    tags=["correctness", "collections"],
)

CONSTRUCTS_HASHSET_OR_HASHMAP = any_of(
    static_method(on_class="com.google.common.collect.Sets", named="newHashSet"),
    static_method(on_class="com.google.common.collect.Maps", named="newHashMap"),
    constructor(for_class="java.util.HashMap"),
    constructor(for_class="java.util.HashSet"),
)


def constructs_hash_set_or_map(expr: Expression) -> bool:
    return CONSTRUCTS_HASHSET_OR_HASHMAP.matches(expr)


def result_type_arguments(
    expr: Expression, resolver: TypeResolver = DEFAULT_RESOLVER
) -> list[TypeDescriptor]:
    """
    Generic arguments of the expression's resolved result type.

    Reads the result type rather than the written arguments, so diamond
    and factory inference are covered. Raw constructions yield [].
    """
    return resolver.type_arguments(resolver.result_type(expr))


def is_array_key(
    type_arguments: list[TypeDescriptor], resolver: TypeResolver = DEFAULT_RESOLVER
) -> bool:
    # Set<E> and Map<K, V> both declare the hashed type first. Only
    # position 0 is hashed; an array-typed map value is harmless.
    if not type_arguments:
        return False
    return resolver.is_array(type_arguments[0])


def describe_match(
    expr: Expression,
    file_path: str,
    key_type: TypeDescriptor,
    resolver: TypeResolver = DEFAULT_RESOLVER,
) -> RuleViolation:
    site = CONSTRUCTS_HASHSET_OR_HASHMAP.lookup(expr)
    resolved = resolver.result_type(expr)
    result_type = resolved.display_name() if resolved else "?"
    evidence = [
        f"Construction site: {site}",
        f"Resolved type: {result_type}",
        f"Key type: {key_type.display_name()} (array)",
    ]
    if expr.source:
        evidence.append(f"Expression: {expr.source}")

    return RuleViolation(
        rule_id=RULE_ID,
        severity=RULE.severity,
        file=file_path,
        line=expr.position.line,
        column=expr.position.column,
        end_line=expr.position.end_line,
        title="Array used as key of a hash-based Set or Map",
        description=SUMMARY,
        evidence=evidence,
        metadata={"key_type": key_type.display_name(), "result_type": result_type},
    )


def match_expression(
    expr: Expression,
    file_path: str,
    resolver: TypeResolver = DEFAULT_RESOLVER,
) -> RuleViolation | None:
    """Evaluate one expression: recognize, extract, classify, describe."""
    if not constructs_hash_set_or_map(expr):
        return None
    type_arguments = result_type_arguments(expr, resolver)
    if not is_array_key(type_arguments, resolver):
        return None
    return describe_match(expr, file_path, type_arguments[0], resolver)


def check(
    unit: CompilationUnit, resolver: TypeResolver | None = None
) -> list[RuleViolation]:
    """Detect hash sets and maps keyed by arrays."""
    resolver = resolver or DEFAULT_RESOLVER
    violations: list[RuleViolation] = []

    for expr in walk_unit(unit):
        violation = match_expression(expr, unit.file_path, resolver)
        if violation is not None:
            violations.append(violation)

    return violations
