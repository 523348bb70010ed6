"""Request Dependencies — hand the app's store instance to route handlers.

Invariants:
    - Exactly one EntityStore per application, created by create_app()
    - Routes never construct or cache a store themselves
"""

from fastapi import Request

from pizzeria.core.entity_store import EntityStore


def get_store(request: Request) -> EntityStore:
    return request.app.state.store
