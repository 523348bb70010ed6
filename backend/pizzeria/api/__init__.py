"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (204 deletes excepted)

Design Decisions:
    - Thin routes delegate to the entity store: validation in schemas,
      rules in the store, status translation in routes and error handlers
"""
