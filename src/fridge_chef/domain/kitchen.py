"""Combined fridge analysis result."""

from dataclasses import dataclass, field

from fridge_chef.domain.dishes import SuggestedDish
from fridge_chef.domain.items import DetectedItem


@dataclass(frozen=True)
class FridgeAnalysis:
    """Items found in a photo and the dishes suggested for them."""

    items: list[DetectedItem]
    dishes: list[SuggestedDish] = field(default_factory=list)
