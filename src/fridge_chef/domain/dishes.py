"""Models for dish suggestions."""

from dataclasses import dataclass, field
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SuggestedDishPayload(BaseModel):
    """Dish object as returned by the model."""

    model_config = ConfigDict(strict=True, extra="ignore")

    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    ingredients: list[str]
    steps: list[str]
    time: str
    difficulty: str
    image_keyword: str | None = Field(default=None, alias="imageKeyword")


@dataclass(frozen=True)
class SuggestedDish:
    """Dish that can be cooked from the detected items.

    ``image_hint`` is a search phrase for an illustrative photo; ``None`` means
    a generic placeholder should be shown.
    """

    id: UUID
    name: str
    description: str
    estimated_time: str
    difficulty: str
    ingredients: tuple[str, ...] = field(default_factory=tuple)
    steps: tuple[str, ...] = field(default_factory=tuple)
    image_hint: str | None = None
