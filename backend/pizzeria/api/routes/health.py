"""Health Probe — liveness endpoint with collection sizes.

Invariants:
    - GET /api/health always returns 200 if the process is up
    - Reads the store, never mutates it
"""

from fastapi import APIRouter, Depends, status

from pizzeria.api.dependencies import get_store
from pizzeria.core.domain_types import EntityKind
from pizzeria.core.entity_store import EntityStore

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(store: EntityStore = Depends(get_store)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "pizzeria-api",
        "version": "1.0.0",
        "counts": {
            kind.value: len(store.collection(kind)) for kind in EntityKind
        },
    }
