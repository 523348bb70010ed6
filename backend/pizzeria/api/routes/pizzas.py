"""Pizza Routes — menu CRUD.

Invariants:
    - Unknown id → 404 (store returns None/False, translated here)
    - DELETE of a pizza used by any order → 400 (DependencyInUseError from the store)
    - PUT is a shallow merge: omitted fields keep their stored values
"""

import logging

from fastapi import APIRouter, Depends, status

from pizzeria.api.dependencies import get_store
from pizzeria.core.domain_types import EntityKind
from pizzeria.core.entity_store import EntityStore
from pizzeria.core.errors import ResourceNotFoundError
from pizzeria.schemas.pizza import PizzaCreate, PizzaResponse, PizzaUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/pizzas", tags=["pizzas"])


@router.get("", response_model=list[PizzaResponse])
async def list_pizzas(store: EntityStore = Depends(get_store)):
    return store.pizzas.list_all()


@router.get("/{pizza_id}", response_model=PizzaResponse)
async def get_pizza(pizza_id: str, store: EntityStore = Depends(get_store)):
    pizza = store.pizzas.get_by_id(pizza_id)
    if pizza is None:
        raise ResourceNotFoundError(EntityKind.PIZZA, pizza_id)
    return pizza


@router.post(
    "", response_model=PizzaResponse, status_code=status.HTTP_201_CREATED,
)
async def create_pizza(body: PizzaCreate, store: EntityStore = Depends(get_store)):
    pizza = store.pizzas.create(**body.model_dump())
    logger.info("Pizza created", extra={"entity": "pizza", "entity_id": pizza.id})
    return pizza


@router.put("/{pizza_id}", response_model=PizzaResponse)
async def update_pizza(
    pizza_id: str, body: PizzaUpdate, store: EntityStore = Depends(get_store),
):
    pizza = store.pizzas.update(pizza_id, **body.changes())
    if pizza is None:
        raise ResourceNotFoundError(EntityKind.PIZZA, pizza_id)
    return pizza


@router.delete("/{pizza_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pizza(pizza_id: str, store: EntityStore = Depends(get_store)):
    if not store.pizzas.delete(pizza_id):
        raise ResourceNotFoundError(EntityKind.PIZZA, pizza_id)
    logger.info("Pizza deleted", extra={"entity": "pizza", "entity_id": pizza_id})
