"""
Rules Route — GET /rules
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from keysafe.api.dependencies import get_rule_engine
from keysafe.core.rule_engine import RuleEngine
from keysafe.models.rule_models import RuleInfo

router = APIRouter()


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules(engine: RuleEngine = Depends(get_rule_engine)):
    """Metadata of every registered rule."""
    return engine.describe_rules()
