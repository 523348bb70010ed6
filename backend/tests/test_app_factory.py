"""App factory — settings-driven store construction and lifespan logging setup."""

import logging

from pizzeria.config import Settings
from pizzeria.core.domain_types import IdStrategy
from pizzeria.core.id_generators import TimestampIdGenerator, UuidIdGenerator
from pizzeria.main import build_store, create_app


def test_build_store_seeds_by_default():
    store = build_store(Settings())
    assert len(store.pizzas) == 2
    assert len(store.ingredients) == 4


def test_build_store_without_seed():
    store = build_store(Settings(seed_catalog=False))
    assert len(store.pizzas) == 0


def test_build_store_uses_configured_id_strategy():
    assert isinstance(
        build_store(Settings(id_strategy=IdStrategy.UUID)).id_generator, UuidIdGenerator,
    )
    assert isinstance(
        build_store(Settings(id_strategy="timestamp")).id_generator, TimestampIdGenerator,
    )


def test_each_app_gets_its_own_store():
    first, second = create_app(Settings()), create_app(Settings())
    assert first.state.store is not second.state.store


def test_create_app_keeps_given_store(store):
    assert create_app(Settings(), store=store).state.store is store


async def test_lifespan_installs_and_removes_log_handler(store):
    app = create_app(Settings(log_format="text"), store=store)
    before = list(logging.root.handlers)
    previous_level = logging.root.level
    async with app.router.lifespan_context(app):
        assert len(logging.root.handlers) == len(before) + 1
    assert logging.root.handlers == before
    logging.root.setLevel(previous_level)


def test_settings_defaults():
    settings = Settings()
    assert settings.port == 3001
    assert settings.id_strategy is IdStrategy.COUNTER
    assert settings.seed_catalog is True
