"""Pydantic models for the HTTP API."""

from uuid import UUID

from pydantic import BaseModel, Field

from fridge_chef.domain.dishes import SuggestedDish
from fridge_chef.domain.items import DetectedItem


class DetectedItemOut(BaseModel):
    """Detected item in API responses."""

    id: UUID
    name: str
    icon: str
    quantity: str | None = None

    @classmethod
    def from_domain(cls, item: DetectedItem) -> "DetectedItemOut":
        return cls(id=item.id, name=item.name, icon=item.icon, quantity=item.quantity)


class SuggestedDishOut(BaseModel):
    """Suggested dish in API responses."""

    id: UUID
    name: str
    description: str
    ingredients: list[str]
    steps: list[str]
    estimated_time: str
    difficulty: str
    image_hint: str | None = None

    @classmethod
    def from_domain(cls, dish: SuggestedDish) -> "SuggestedDishOut":
        return cls(
            id=dish.id,
            name=dish.name,
            description=dish.description,
            ingredients=list(dish.ingredients),
            steps=list(dish.steps),
            estimated_time=dish.estimated_time,
            difficulty=dish.difficulty,
            image_hint=dish.image_hint,
        )


class SuggestDishesRequest(BaseModel):
    """Request body for dish suggestions."""

    items: list[str] = Field(default_factory=list)


class DetectItemsResponse(BaseModel):
    items: list[DetectedItemOut]


class SuggestDishesResponse(BaseModel):
    dishes: list[SuggestedDishOut]


class FridgeAnalysisResponse(BaseModel):
    items: list[DetectedItemOut]
    dishes: list[SuggestedDishOut]


class PipelineErrorResponse(BaseModel):
    """Error body returned when a model call fails."""

    error: str
    stage: str
    message: str
    status_code: int | None = None
    body: str | None = None
