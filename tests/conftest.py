from datetime import datetime
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from fitcart.main import app
from fitcart.models.exercise import BodyPart, Exercise
from fitcart.repositories.cart import CartStore
from fitcart.repositories.errors import SettingsRepoError
from fitcart.repositories.profile import InMemorySettingsStore
from fitcart.routes import cart as cart_routes
from fitcart.routes import profile as profile_routes
from fitcart.utils import dates
from tests.test_data import FIXED_NOW


@pytest.fixture
def fixed_now(monkeypatch) -> datetime:
    monkeypatch.setattr(dates, "now", lambda: FIXED_NOW)
    monkeypatch.setattr(dates, "local_now", lambda: FIXED_NOW)
    return FIXED_NOW


# --------------- Stores ---------------


@pytest.fixture
def cart_store() -> CartStore:
    return CartStore()


@pytest.fixture
def settings_store() -> InMemorySettingsStore:
    return InMemorySettingsStore()


# --------------- Item Factories ---------------


@pytest.fixture
def exercise_factory() -> Callable[..., Exercise]:
    def _make(**overrides: Any) -> Exercise:
        defaults: dict[str, Any] = {
            "name": "深蹲",
            "body_part": BodyPart.LEGS,
        }
        return Exercise(**{**defaults, **overrides})

    return _make


@pytest.fixture
def filled_cart(cart_store, exercise_factory):
    """
    Cart holding three items A, B, C (in that order).
    Returns (store, [A, B, C]).
    """
    items = [
        cart_store.add(exercise_factory(name=name)) for name in ("硬舉", "深蹲", "肩推")
    ]
    return cart_store, items


# --------------- Test Clients ---------------


@pytest.fixture(scope="session")
def app_instance():
    return app


@pytest.fixture
def client(app_instance, cart_store, settings_store):
    """
    Client wired to a fresh cart and an empty in-memory settings store.
    """
    app_instance.dependency_overrides[cart_routes.get_cart_store] = lambda: cart_store
    app_instance.dependency_overrides[profile_routes.get_settings_store] = (
        lambda: settings_store
    )

    try:
        yield TestClient(app_instance, raise_server_exceptions=False)
    finally:
        app_instance.dependency_overrides.clear()


# --------------- Failing storage ---------------


class FailingSettingsStore:
    def get(self, key: str) -> str:
        raise SettingsRepoError("boom")

    def set(self, key: str, value: str) -> None:
        raise SettingsRepoError("boom")


@pytest.fixture
def failing_settings_client(client, app_instance):
    """
    Same client, but every settings read/write fails.
    """
    app_instance.dependency_overrides[profile_routes.get_settings_store] = (
        FailingSettingsStore
    )
    return client
