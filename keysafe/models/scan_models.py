"""
Scan Request/Response Models — API contract schemas.

These are the public-facing Pydantic models used by FastAPI endpoints.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from keysafe.models.rule_models import RuleViolation
from keysafe.models.tree_models import CompilationUnit


class ScanRequest(BaseModel):
    """Request body for /scan."""

    units: list[CompilationUnit] = Field(default_factory=list)


class AuditEntry(BaseModel):
    """Audit metadata for a scan."""

    scan_id: str
    timestamp: str = Field(default="", description="UTC time the entry was written")
    units_scanned: int
    expressions_visited: int = 0
    findings: int
    duration_ms: float = 0.0


class ScanReport(BaseModel):
    """Full scan report."""

    findings: list[RuleViolation] = Field(default_factory=list)
    rules_executed: list[str] = Field(default_factory=list)
    units_scanned: int = 0
    expressions_visited: int = 0
    summary: str = ""
    audit: AuditEntry | None = None


class ScanResponse(BaseModel):
    """Top-level response for the scan endpoint."""

    message: Literal["scan_complete", "error"] = "scan_complete"
    scan_id: str = ""
    report: ScanReport | None = None
    error: str | None = None
