"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (presence, format, ranges)
    - Referential rules are NOT checked here: they belong to the entity store
    - Wire format is camelCase; Python attributes stay snake_case

Design Decisions:
    - Separate from core entities: schemas are API contracts, entities are store records
    - One module per resource, shared base classes in common.py
"""
