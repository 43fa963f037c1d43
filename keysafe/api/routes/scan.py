"""
Scan Route — POST /scan

Accepts attributed compilation units, runs every registered rule and
returns the findings. The units must already carry resolved callees and
result types; nothing is parsed here.
"""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException

from keysafe.api.dependencies import get_audit_logger, get_rule_engine
from keysafe.audit.logger import AuditLogger
from keysafe.config import settings
from keysafe.core.rule_engine import RuleEngine
from keysafe.core.tree_walker import walk_unit
from keysafe.models.scan_models import AuditEntry, ScanReport, ScanRequest, ScanResponse

logger = logging.getLogger("keysafe.scan")

router = APIRouter()


@router.post("/scan", response_model=ScanResponse)
async def scan_units(
    request: ScanRequest,
    engine: RuleEngine = Depends(get_rule_engine),
    audit: AuditLogger = Depends(get_audit_logger),
):
    """Run all rules over the submitted compilation units."""
    units = request.units

    if not units:
        return ScanResponse(message="error", error="No compilation units provided")

    # Input size guards
    if len(units) > settings.max_units_per_scan:
        raise HTTPException(
            status_code=400,
            detail=f"Scan exceeds maximum of {settings.max_units_per_scan} compilation units",
        )
    seen_paths: set[str] = set()
    for unit in units:
        if unit.file_path in seen_paths:
            raise HTTPException(
                status_code=400,
                detail=f"Duplicate compilation unit path '{unit.file_path}'",
            )
        seen_paths.add(unit.file_path)
        if sum(1 for _ in walk_unit(unit)) > settings.max_expressions_per_unit:
            raise HTTPException(
                status_code=400,
                detail=(
                    f"'{unit.file_path}' exceeds maximum of "
                    f"{settings.max_expressions_per_unit} expressions"
                ),
            )

    scan_id = uuid.uuid4().hex[:12]
    try:
        result = engine.run({unit.file_path: unit for unit in units})
    except Exception:
        logger.exception(f"Unexpected scan error ({scan_id})")
        return ScanResponse(message="error", scan_id=scan_id, error="Scan failed safely.")

    if result.violations:
        files = len({v.file for v in result.violations})
        summary = f"Found {len(result.violations)} finding(s) in {files} file(s)."
    else:
        summary = "Scan complete. No findings."

    entry = audit.log(
        AuditEntry(
            scan_id=scan_id,
            units_scanned=result.total_units_scanned,
            expressions_visited=result.expressions_visited,
            findings=len(result.violations),
            duration_ms=result.scan_duration_ms,
        )
    )

    return ScanResponse(
        scan_id=scan_id,
        report=ScanReport(
            findings=result.violations,
            rules_executed=result.rules_executed,
            units_scanned=result.total_units_scanned,
            expressions_visited=result.expressions_visited,
            summary=summary,
            audit=entry,
        ),
    )
