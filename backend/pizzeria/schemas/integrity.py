"""Integrity Schemas — dangling-reference report payload."""

from pizzeria.core.domain_types import EntityKind
from pizzeria.schemas.common import CamelResponse


class DanglingReferenceResponse(CamelResponse):
    source: EntityKind
    source_id: str
    field: str
    target: EntityKind
    missing: str


class IntegrityReport(CamelResponse):
    ok: bool
    dangling: list[DanglingReferenceResponse]
