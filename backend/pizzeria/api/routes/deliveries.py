"""Delivery Routes — courier assignment.

Invariants:
    - POST stamps status "assigned" and date = now (store clock)
    - Unknown orderId on POST → 400 (ReferentialIntegrityError)
    - DELETE is never guarded
"""

import logging

from fastapi import APIRouter, Depends, status

from pizzeria.api.dependencies import get_store
from pizzeria.core.domain_types import DeliveryStatus, EntityKind
from pizzeria.core.entity_store import EntityStore
from pizzeria.core.errors import ResourceNotFoundError
from pizzeria.schemas.delivery import (
    DeliveryCreate, DeliveryResponse, DeliveryUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/deliveries", tags=["deliveries"])


@router.get("", response_model=list[DeliveryResponse])
async def list_deliveries(store: EntityStore = Depends(get_store)):
    return store.deliveries.list_all()


@router.get("/{delivery_id}", response_model=DeliveryResponse)
async def get_delivery(delivery_id: str, store: EntityStore = Depends(get_store)):
    delivery = store.deliveries.get_by_id(delivery_id)
    if delivery is None:
        raise ResourceNotFoundError(EntityKind.DELIVERY, delivery_id)
    return delivery


@router.post(
    "", response_model=DeliveryResponse, status_code=status.HTTP_201_CREATED,
)
async def create_delivery(
    body: DeliveryCreate, store: EntityStore = Depends(get_store),
):
    delivery = store.deliveries.create(
        **body.model_dump(),
        status=DeliveryStatus.ASSIGNED.value,
        date=store.clock(),
    )
    logger.info(
        f"Delivery assigned to {delivery.delivery_person} for order {delivery.order_id}",
        extra={"entity": "delivery", "entity_id": delivery.id},
    )
    return delivery


@router.put("/{delivery_id}", response_model=DeliveryResponse)
async def update_delivery(
    delivery_id: str, body: DeliveryUpdate,
    store: EntityStore = Depends(get_store),
):
    delivery = store.deliveries.update(delivery_id, **body.changes())
    if delivery is None:
        raise ResourceNotFoundError(EntityKind.DELIVERY, delivery_id)
    return delivery


@router.delete("/{delivery_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_delivery(delivery_id: str, store: EntityStore = Depends(get_store)):
    if not store.deliveries.delete(delivery_id):
        raise ResourceNotFoundError(EntityKind.DELIVERY, delivery_id)
    logger.info(
        "Delivery deleted", extra={"entity": "delivery", "entity_id": delivery_id},
    )
