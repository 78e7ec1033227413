"""Shared test fixtures."""

import json
from dataclasses import dataclass, field

import pytest

from fridge_chef.config import Settings
from fridge_chef.containers import AppContainer
from fridge_chef.services.kitchen import GenerativeClient, KitchenService

ITEMS_REPLY = json.dumps(
    [
        {"name": "Tomato", "icon": "🍅", "quantity": "2"},
        {"name": "Egg", "icon": "🥚"},
    ]
)

DISHES_REPLY = json.dumps(
    [
        {
            "name": "Tomato egg stir-fry",
            "description": "Quick and healthy side dish",
            "ingredients": ["Tomato", "Egg"],
            "steps": ["Slice the tomatoes", "Beat the eggs", "Stir-fry together"],
            "time": "10 min",
            "difficulty": "easy",
            "imageKeyword": "tomato egg stir fry",
        },
        {
            "name": "Steamed egg",
            "description": "Soft and fluffy",
            "ingredients": ["Egg"],
            "steps": ["Beat the eggs", "Steam"],
            "time": "15 min",
            "difficulty": "easy",
        },
    ]
)


def gemini_envelope(text: str) -> dict[str, object]:
    """Wrap reply text the way Gemini does."""
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


@dataclass
class FakeGenerativeClient(GenerativeClient):
    """Fake model client returning queued replies and recording payloads."""

    replies: list[str | Exception] = field(default_factory=list)
    payloads: list[dict[str, object]] = field(default_factory=list)

    async def generate(self, payload: dict[str, object]) -> str:
        self.payloads.append(payload)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="gemini-key")


@pytest.fixture
def generative_client() -> FakeGenerativeClient:
    return FakeGenerativeClient()


@pytest.fixture
def container(
    settings: Settings, generative_client: FakeGenerativeClient
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        gemini_client=generative_client,
        kitchen_service=KitchenService(client=generative_client),
        close_resources=close_resources,
    )
