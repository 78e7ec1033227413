"""Dependency container for the fridge chef service."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from fridge_chef.adapters.gemini_client import HttpxGeminiClient
from fridge_chef.config import Settings
from fridge_chef.services.kitchen import GenerativeClient, KitchenService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    gemini_client: GenerativeClient
    kitchen_service: KitchenService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    gemini_client = HttpxGeminiClient.create(
        api_key=resolved_settings.gemini_api_key,
        base_url=resolved_settings.gemini_base_url,
        model=resolved_settings.gemini_model,
    )
    kitchen_service = KitchenService(client=gemini_client)

    async def close_resources() -> None:
        await gemini_client.close()

    return AppContainer(
        settings=resolved_settings,
        gemini_client=gemini_client,
        kitchen_service=kitchen_service,
        close_resources=close_resources,
    )
