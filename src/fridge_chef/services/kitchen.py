"""Fridge photo analysis and dish suggestion service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from fridge_chef.domain.dishes import SuggestedDish
from fridge_chef.domain.items import DetectedItem
from fridge_chef.domain.kitchen import FridgeAnalysis
from fridge_chef.domain.pipeline import PipelineStage
from fridge_chef.services.decoding import decode_dishes, decode_items
from fridge_chef.services.prompts import (
    build_detection_request,
    build_recommendation_request,
)
from fridge_chef.services.sanitizer import sanitize_reply

_logger = logging.getLogger(__name__)


class GenerativeClient(Protocol):
    """Interface for a multimodal model endpoint."""

    async def generate(self, payload: dict[str, object]) -> str:
        """Send a request payload and return the model's reply text."""


@dataclass(frozen=True)
class KitchenService:
    """Runs the prompt, transport, sanitize and decode stages for each call.

    Every stage raises its own ``FridgeChefError`` subclass and nothing is
    retried, so a failure ends the call.
    """

    client: GenerativeClient

    async def detect_items(self, image_bytes: bytes) -> list[DetectedItem]:
        """Identify food items in a fridge photo."""
        payload = build_detection_request(image_bytes)
        text = await self._send(payload, operation="detect_items")
        items = decode_items(text)
        _logger.debug(
            "detect_items: stage=%s count=%s", PipelineStage.DECODED, len(items)
        )
        return items

    async def suggest_dishes(self, item_names: list[str]) -> list[SuggestedDish]:
        """Suggest dishes that can be cooked from the named items."""
        payload = build_recommendation_request(item_names)
        text = await self._send(payload, operation="suggest_dishes")
        dishes = decode_dishes(text)
        _logger.debug(
            "suggest_dishes: stage=%s count=%s", PipelineStage.DECODED, len(dishes)
        )
        return dishes

    async def analyze_fridge(self, image_bytes: bytes) -> FridgeAnalysis:
        """Detect items, then ask for dishes when anything was found."""
        items = await self.detect_items(image_bytes)
        if not items:
            _logger.info("No items detected, skipping dish suggestions")
            return FridgeAnalysis(items=items)
        dishes = await self.suggest_dishes([item.name for item in items])
        _logger.info("Fridge analyzed: items=%s dishes=%s", len(items), len(dishes))
        return FridgeAnalysis(items=items, dishes=dishes)

    async def _send(self, payload: dict[str, object], operation: str) -> str:
        _logger.debug("%s: stage=%s", operation, PipelineStage.PROMPT_BUILT)
        _logger.debug("%s: stage=%s", operation, PipelineStage.SENT)
        raw = await self.client.generate(payload)
        _logger.debug("%s: stage=%s", operation, PipelineStage.ENVELOPE_RECEIVED)
        text = sanitize_reply(raw)
        _logger.debug("%s: stage=%s", operation, PipelineStage.SANITIZED)
        return text
