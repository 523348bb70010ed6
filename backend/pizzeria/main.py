"""Pizzeria API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PizzeriaError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Exactly one EntityStore per app, created here and kept on app.state
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - create_app() factory over a module singleton store: tests pass a fresh
      store per app, production builds one from settings
    - Store built at factory time, not in lifespan: ASGI test transports do not
      run lifespan, and the store must exist for the first request
    - async route handlers never await while using the store, so every store
      call runs on the event loop thread one at a time
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pizzeria.api.error_handlers import register_error_handlers
from pizzeria.api.routes import (
    customers, deliveries, health, ingredients, integrity, orders, pizzas,
)
from pizzeria.config import Settings, get_settings
from pizzeria.core.entity_store import EntityStore
from pizzeria.core.id_generators import build_id_generator
from pizzeria.core.seed_catalog import seed_catalog
from pizzeria.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    handler = setup_logging(settings.log_level, settings.log_format)
    store: EntityStore = app.state.store
    logger.info(
        f"Pizzeria API started ({len(store.pizzas)} pizzas, "
        f"{len(store.ingredients)} ingredients, ids: {settings.id_strategy.value})",
    )
    yield
    logger.info("Pizzeria API shutting down")
    logging.root.removeHandler(handler)


def build_store(settings: Settings) -> EntityStore:
    """Fresh store using the configured id strategy, seeded when enabled."""
    store = EntityStore(id_generator=build_id_generator(settings.id_strategy))
    if settings.seed_catalog:
        seed_catalog(store)
    return store


def create_app(
    settings: Settings | None = None, store: EntityStore | None = None,
) -> FastAPI:
    """Assemble the application around one store instance."""
    settings = settings or get_settings()

    app = FastAPI(title="Pizzeria API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store if store is not None else build_store(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(pizzas.router)
    app.include_router(ingredients.router)
    app.include_router(customers.router)
    app.include_router(orders.router)
    app.include_router(deliveries.router)
    app.include_router(integrity.router)

    register_error_handlers(app)
    return app


app = create_app()
