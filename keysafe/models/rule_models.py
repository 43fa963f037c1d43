"""
Rule Engine Data Models — Violations, results, and rule metadata.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    SUGGESTION = "suggestion"


class RuleInfo(BaseModel):
    """Registration metadata for a rule."""

    rule_id: str = Field(..., description="Stable short name, e.g. 'array_as_key_of_set_or_map'")
    summary: str = Field(..., description="Fixed human-readable message")
    severity: Severity
    tags: list[str] = Field(default_factory=list)


class RuleViolation(BaseModel):
    """A single finding reported by a rule."""

    rule_id: str = Field(..., description="Unique rule identifier")
    severity: Severity
    file: str = Field(..., description="File path where violation was found")
    line: int = Field(..., description="Line number of violation")
    column: int = Field(default=1, description="Column of violation")
    end_line: int | None = Field(default=None, description="End line of violation range")
    title: str = Field(..., description="Short human-readable violation title")
    description: str = Field(..., description="Fixed explanation of the hazard")
    evidence: list[str] = Field(
        default_factory=list,
        description="Deterministic evidence (matched site, resolved types)",
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict, description="Rule-specific extra data"
    )


class RuleResult(BaseModel):
    """Result of running all rules on a set of compilation units."""

    violations: list[RuleViolation] = Field(default_factory=list)
    rules_executed: list[str] = Field(default_factory=list)
    total_units_scanned: int = 0
    expressions_visited: int = 0
    scan_duration_ms: float = 0.0
