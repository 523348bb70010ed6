"""Order Routes — order placement and tracking.

Invariants:
    - POST stamps status "pending"; the store stamps createdAt
    - Unknown customerId or pizza id on POST → 400 (ReferentialIntegrityError)
    - PUT does not re-check references: a dangling customerId is accepted
    - DELETE of an order with a delivery → 400
"""

import logging

from fastapi import APIRouter, Depends, status

from pizzeria.api.dependencies import get_store
from pizzeria.core.domain_types import EntityKind, OrderStatus
from pizzeria.core.entity_store import EntityStore
from pizzeria.core.errors import ResourceNotFoundError
from pizzeria.schemas.order import OrderCreate, OrderResponse, OrderUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("", response_model=list[OrderResponse])
async def list_orders(store: EntityStore = Depends(get_store)):
    return store.orders.list_all()


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, store: EntityStore = Depends(get_store)):
    order = store.orders.get_by_id(order_id)
    if order is None:
        raise ResourceNotFoundError(EntityKind.ORDER, order_id)
    return order


@router.post(
    "", response_model=OrderResponse, status_code=status.HTTP_201_CREATED,
)
async def create_order(body: OrderCreate, store: EntityStore = Depends(get_store)):
    order = store.orders.create(
        **body.model_dump(), status=OrderStatus.PENDING.value,
    )
    logger.info(
        f"Order placed for customer {order.customer_id} "
        f"({len(order.pizzas)} pizza(s))",
        extra={"entity": "order", "entity_id": order.id},
    )
    return order


@router.put("/{order_id}", response_model=OrderResponse)
async def update_order(
    order_id: str, body: OrderUpdate, store: EntityStore = Depends(get_store),
):
    order = store.orders.update(order_id, **body.changes())
    if order is None:
        raise ResourceNotFoundError(EntityKind.ORDER, order_id)
    return order


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(order_id: str, store: EntityStore = Depends(get_store)):
    if not store.orders.delete(order_id):
        raise ResourceNotFoundError(EntityKind.ORDER, order_id)
    logger.info("Order deleted", extra={"entity": "order", "entity_id": order_id})
