"""
Name-Based Matchers — Recognize calls and instantiations by exact name.

A matcher names one construction site: a static method on a declaring
type, or a constructor of a concrete class. Matchers are combined into
an immutable MatcherTable once, at rule import time, and then answer
membership by exact lookup. Subtypes and look-alike types never match.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from keysafe.models.tree_models import Expression, MethodInvocation, NewClass

CONSTRUCTOR = "<init>"


class SiteKind(str, Enum):
    STATIC_METHOD = "static_method"
    CONSTRUCTOR = "constructor"


SiteKey = tuple[SiteKind, str, str]


@dataclass(frozen=True)
class MemberMatcher:
    """One (declaring type, member) pair."""

    site_kind: SiteKind
    owner: str
    member: str

    @property
    def key(self) -> SiteKey:
        return (self.site_kind, self.owner, self.member)

    def matches(self, expr: Expression) -> bool:
        return site_identity(expr) == self.key

    def __str__(self) -> str:
        if self.site_kind == SiteKind.CONSTRUCTOR:
            return f"new {self.owner}()"
        return f"{self.owner}.{self.member}()"


def static_method(on_class: str, named: str) -> MemberMatcher:
    return MemberMatcher(SiteKind.STATIC_METHOD, on_class, named)


def constructor(for_class: str) -> MemberMatcher:
    return MemberMatcher(SiteKind.CONSTRUCTOR, for_class, CONSTRUCTOR)


def site_identity(expr: Expression) -> SiteKey | None:
    """
    Identity of the construction site an expression represents.

    Returns None for expressions that cannot be a recognized site:
    instance method calls, anonymous subclass instantiations and
    anything that is neither a call nor an instantiation.
    """
    if isinstance(expr, MethodInvocation):
        if not expr.method.is_static:
            return None
        return (SiteKind.STATIC_METHOD, expr.method.owner, expr.method.name)
    if isinstance(expr, NewClass):
        if expr.has_body:
            return None
        return (SiteKind.CONSTRUCTOR, expr.constructed_class, CONSTRUCTOR)
    return None


class MatcherTable:
    """Immutable lookup table of recognized sites."""

    __slots__ = ("_table",)

    def __init__(self, matchers: tuple[MemberMatcher, ...]) -> None:
        self._table: dict[SiteKey, MemberMatcher] = {m.key: m for m in matchers}

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self):
        return iter(self._table.values())

    def __contains__(self, key: object) -> bool:
        return key in self._table

    def lookup(self, expr: Expression) -> MemberMatcher | None:
        """Return the matcher that recognizes expr, if any."""
        key = site_identity(expr)
        if key is None:
            return None
        return self._table.get(key)

    def matches(self, expr: Expression) -> bool:
        return self.lookup(expr) is not None


def any_of(*matchers: MemberMatcher) -> MatcherTable:
    return MatcherTable(tuple(matchers))
