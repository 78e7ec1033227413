"""Models for food items detected in a fridge photo."""

from dataclasses import dataclass
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class DetectedItemPayload(BaseModel):
    """Item object as returned by the model."""

    model_config = ConfigDict(strict=True, extra="ignore")

    name: str = Field(min_length=1)
    icon: str
    quantity: str | None = None


@dataclass(frozen=True)
class DetectedItem:
    """Food item visible in the photo."""

    id: UUID
    name: str
    icon: str
    quantity: str | None = None
