"""Integrity Route — exposes the dangling-reference report.

Invariants:
    - Read-only: reports orphaned references, never repairs them
    - ok is true exactly when the report is empty
"""

import logging

from fastapi import APIRouter, Depends

from pizzeria.api.dependencies import get_store
from pizzeria.core.entity_store import EntityStore
from pizzeria.core.integrity import find_dangling_references
from pizzeria.schemas.integrity import DanglingReferenceResponse, IntegrityReport

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/integrity", tags=["integrity"])


@router.get("", response_model=IntegrityReport)
async def integrity_report(store: EntityStore = Depends(get_store)):
    """List references that no longer resolve."""
    dangling = find_dangling_references(store)
    if dangling:
        logger.warning(f"Integrity report found {len(dangling)} dangling reference(s)")
    return IntegrityReport(
        ok=not dangling,
        dangling=[
            DanglingReferenceResponse.model_validate(d) for d in dangling
        ],
    )
