"""Customer Routes — contact CRUD.

Invariants:
    - Phone format checked by CustomerCreate/CustomerUpdate before the store is called
    - DELETE of a customer with any order → 400
"""

import logging

from fastapi import APIRouter, Depends, status

from pizzeria.api.dependencies import get_store
from pizzeria.core.domain_types import EntityKind
from pizzeria.core.entity_store import EntityStore
from pizzeria.core.errors import ResourceNotFoundError
from pizzeria.schemas.customer import (
    CustomerCreate, CustomerResponse, CustomerUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.get("", response_model=list[CustomerResponse])
async def list_customers(store: EntityStore = Depends(get_store)):
    return store.customers.list_all()


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: str, store: EntityStore = Depends(get_store)):
    customer = store.customers.get_by_id(customer_id)
    if customer is None:
        raise ResourceNotFoundError(EntityKind.CUSTOMER, customer_id)
    return customer


@router.post(
    "", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED,
)
async def create_customer(
    body: CustomerCreate, store: EntityStore = Depends(get_store),
):
    customer = store.customers.create(**body.model_dump())
    logger.info(
        "Customer created", extra={"entity": "customer", "entity_id": customer.id},
    )
    return customer


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_id: str, body: CustomerUpdate,
    store: EntityStore = Depends(get_store),
):
    customer = store.customers.update(customer_id, **body.changes())
    if customer is None:
        raise ResourceNotFoundError(EntityKind.CUSTOMER, customer_id)
    return customer


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(customer_id: str, store: EntityStore = Depends(get_store)):
    if not store.customers.delete(customer_id):
        raise ResourceNotFoundError(EntityKind.CUSTOMER, customer_id)
    logger.info(
        "Customer deleted", extra={"entity": "customer", "entity_id": customer_id},
    )
