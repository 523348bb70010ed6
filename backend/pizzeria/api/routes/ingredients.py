"""Ingredient Routes — catalog CRUD.

Invariants:
    - DELETE has no dependency guard: pizzas naming the ingredient keep the name
      (GET /api/integrity lists such orphans)
"""

import logging

from fastapi import APIRouter, Depends, status

from pizzeria.api.dependencies import get_store
from pizzeria.core.domain_types import EntityKind
from pizzeria.core.entity_store import EntityStore
from pizzeria.core.errors import ResourceNotFoundError
from pizzeria.schemas.ingredient import (
    IngredientCreate, IngredientResponse, IngredientUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/ingredients", tags=["ingredients"])


@router.get("", response_model=list[IngredientResponse])
async def list_ingredients(store: EntityStore = Depends(get_store)):
    return store.ingredients.list_all()


@router.get("/{ingredient_id}", response_model=IngredientResponse)
async def get_ingredient(ingredient_id: str, store: EntityStore = Depends(get_store)):
    ingredient = store.ingredients.get_by_id(ingredient_id)
    if ingredient is None:
        raise ResourceNotFoundError(EntityKind.INGREDIENT, ingredient_id)
    return ingredient


@router.post(
    "", response_model=IngredientResponse, status_code=status.HTTP_201_CREATED,
)
async def create_ingredient(
    body: IngredientCreate, store: EntityStore = Depends(get_store),
):
    ingredient = store.ingredients.create(**body.model_dump())
    logger.info(
        "Ingredient created",
        extra={"entity": "ingredient", "entity_id": ingredient.id},
    )
    return ingredient


@router.put("/{ingredient_id}", response_model=IngredientResponse)
async def update_ingredient(
    ingredient_id: str, body: IngredientUpdate,
    store: EntityStore = Depends(get_store),
):
    ingredient = store.ingredients.update(ingredient_id, **body.changes())
    if ingredient is None:
        raise ResourceNotFoundError(EntityKind.INGREDIENT, ingredient_id)
    return ingredient


@router.delete("/{ingredient_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ingredient(
    ingredient_id: str, store: EntityStore = Depends(get_store),
):
    ingredient = store.ingredients.get_by_id(ingredient_id)
    if ingredient is None:
        raise ResourceNotFoundError(EntityKind.INGREDIENT, ingredient_id)
    store.ingredients.delete(ingredient_id)
    users = store.pizzas_using_ingredient(ingredient.name)
    if users:
        logger.warning(
            f"Ingredient '{ingredient.name}' deleted while used by "
            f"{len(users)} pizza(s)",
            extra={"entity": "ingredient", "entity_id": ingredient_id},
        )
    else:
        logger.info(
            "Ingredient deleted",
            extra={"entity": "ingredient", "entity_id": ingredient_id},
        )
