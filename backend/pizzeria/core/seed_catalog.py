"""Seed Catalog — the fixed starter menu loaded into a fresh store.

Invariants:
    - Seeded entities keep their fixed ids ("1", "2", ...), bypassing the id generator
    - Pizza ingredients reference Ingredient NAMES, matching the ingredient catalog
    - All-or-nothing: if any seed id is already taken, raise before inserting anything
"""

from pizzeria.core.entities import Ingredient, Pizza
from pizzeria.core.entity_store import EntityStore


SEED_INGREDIENTS: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("1", "доматен сос", ()),
    ("2", "моцарела", ("мляко",)),
    ("3", "босилек", ()),
    ("4", "пеперони", ()),
)

SEED_PIZZAS: tuple[tuple[str, str, tuple[str, ...], float], ...] = (
    ("1", "Маргарита", ("доматен сос", "моцарела", "босилек"), 12.5),
    ("2", "Пеперони", ("доматен сос", "моцарела", "пеперони"), 15.0),
)


def seed_catalog(store: EntityStore) -> EntityStore:
    """Insert the starter pizzas and ingredients. Returns the same store."""
    taken = [
        f"ingredient {ingredient_id}" for ingredient_id, _, _ in SEED_INGREDIENTS
        if ingredient_id in store.ingredients
    ] + [
        f"pizza {pizza_id}" for pizza_id, _, _, _ in SEED_PIZZAS
        if pizza_id in store.pizzas
    ]
    if taken:
        raise ValueError(f"Cannot seed catalog, ids already taken: {', '.join(taken)}")

    for ingredient_id, name, allergens in SEED_INGREDIENTS:
        store.ingredients.insert(Ingredient(
            id=ingredient_id, name=name,
            allergens=list(allergens), availability=True,
        ))
    for pizza_id, name, ingredients, price in SEED_PIZZAS:
        store.pizzas.insert(Pizza(
            id=pizza_id, name=name,
            ingredients=list(ingredients), price=price,
        ))
    return store
