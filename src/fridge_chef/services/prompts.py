"""Request payloads for the Gemini generateContent endpoint."""

import base64

DISH_SUGGESTION_COUNT = 3

DETECTION_PROMPT = (
    "This is a photo of the inside of a refrigerator. "
    "Identify the food items visible in the photo and answer in JSON.\n"
    "The answer must be a JSON array of objects with exactly the keys "
    '"name", "icon" and "quantity", for example:\n'
    "[\n"
    '    {"name": "Tomato", "icon": "🍅", "quantity": "2"},\n'
    '    {"name": "Egg", "icon": "🥚", "quantity": "6 pack"}\n'
    "]\n"
    '"icon" is a single emoji for the item and "quantity" is a short amount '
    "if one can be seen.\n"
    "Do not say anything else. Return only the JSON array."
)

_RECOMMENDATION_TEMPLATE = (
    "Suggest {count} tasty dishes that can be made with these ingredients: "
    "{ingredients}.\n"
    "\n"
    "Describe each dish as a JSON object in an array:\n"
    "[\n"
    "  {{\n"
    '    "name": "Dish name",\n'
    '    "description": "Short description",\n'
    '    "ingredients": ["Ingredients needed"],\n'
    '    "steps": ["Step 1", "Step 2"],\n'
    '    "time": "Estimated cooking time",\n'
    '    "difficulty": "Difficulty (easy/medium/hard)",\n'
    '    "imageKeyword": "High quality food photography keyword in English '
    "for this dish (e.g., 'delicious tomato pasta food')\"\n"
    "  }}\n"
    "]\n"
    "\n"
    "The answer must contain only the JSON array. "
    "Give plain JSON text without any markdown formatting or code fences."
)


def build_detection_request(image_bytes: bytes) -> dict[str, object]:
    """Build a request asking the model to list items in a fridge photo."""
    return _request(
        {"text": DETECTION_PROMPT},
        {
            "inline_data": {
                "mime_type": detect_mime_type(image_bytes),
                "data": base64.b64encode(image_bytes).decode("utf-8"),
            }
        },
    )


def build_recommendation_request(item_names: list[str]) -> dict[str, object]:
    """Build a request asking the model for dishes cookable from the items.

    An empty list is accepted and produces a prompt with an empty ingredient
    clause.
    """
    prompt = _RECOMMENDATION_TEMPLATE.format(
        count=DISH_SUGGESTION_COUNT,
        ingredients=", ".join(item_names),
    )
    return _request({"text": prompt})


def detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"


def _request(*parts: dict[str, object]) -> dict[str, object]:
    return {"contents": [{"parts": list(parts)}]}
