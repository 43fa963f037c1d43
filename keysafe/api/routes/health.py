"""
Health Check Route — GET /health
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from keysafe.api.dependencies import get_rule_engine
from keysafe.core.rule_engine import RuleEngine

router = APIRouter()

VERSION = "1.0.0"


@router.get("/health")
async def health(engine: RuleEngine = Depends(get_rule_engine)):
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": VERSION,
        "rules": len(engine.rules),
    }
