"""Decoding of sanitized model replies into domain results."""

from typing import TypeVar
from uuid import uuid4

from pydantic import TypeAdapter, ValidationError

from fridge_chef.domain.dishes import SuggestedDish, SuggestedDishPayload
from fridge_chef.domain.items import DetectedItem, DetectedItemPayload
from fridge_chef.domain.pipeline import SchemaError

_ITEMS_ADAPTER = TypeAdapter(list[DetectedItemPayload])
_DISHES_ADAPTER = TypeAdapter(list[SuggestedDishPayload])

_T = TypeVar("_T")


def decode_items(text: str) -> list[DetectedItem]:
    """Decode a JSON array of item objects.

    Any invalid element fails the whole call.
    """
    payloads = _validate(_ITEMS_ADAPTER, text, shape="items")
    return assign_item_ids(payloads)


def decode_dishes(text: str) -> list[SuggestedDish]:
    """Decode a JSON array of dish objects, keeping whatever count is present."""
    payloads = _validate(_DISHES_ADAPTER, text, shape="dishes")
    return assign_dish_ids(payloads)


def assign_item_ids(payloads: list[DetectedItemPayload]) -> list[DetectedItem]:
    """Give each decoded item a fresh local identifier."""
    return [
        DetectedItem(
            id=uuid4(),
            name=payload.name,
            icon=payload.icon,
            quantity=payload.quantity,
        )
        for payload in payloads
    ]


def assign_dish_ids(payloads: list[SuggestedDishPayload]) -> list[SuggestedDish]:
    """Give each decoded dish a fresh local identifier."""
    return [
        SuggestedDish(
            id=uuid4(),
            name=payload.name,
            description=payload.description,
            estimated_time=payload.time,
            difficulty=payload.difficulty,
            ingredients=tuple(payload.ingredients),
            steps=tuple(payload.steps),
            image_hint=payload.image_keyword,
        )
        for payload in payloads
    ]


def _validate(
    adapter: TypeAdapter[list[_T]], text: str, shape: str
) -> list[_T]:
    try:
        return adapter.validate_json(text)
    except ValidationError as exc:
        errors = [
            {
                "loc": list(error["loc"]),
                "type": error["type"],
                "msg": error["msg"],
            }
            for error in exc.errors()
        ]
        raise SchemaError(
            f"Model reply does not match the {shape} schema",
            raw_text=text,
            errors=errors,
        ) from exc
