"""Tests for request payload building."""

import base64

from fridge_chef.services.prompts import (
    DISH_SUGGESTION_COUNT,
    build_detection_request,
    build_recommendation_request,
    detect_mime_type,
)


def _parts(payload: dict[str, object]) -> list[dict[str, object]]:
    contents = payload["contents"]
    assert isinstance(contents, list)
    assert len(contents) == 1
    return contents[0]["parts"]


def test_detection_request_has_text_and_inline_image() -> None:
    image = b"\xff\xd8\xff\xe0jpeg-data"

    parts = _parts(build_detection_request(image))

    assert len(parts) == 2
    prompt = parts[0]["text"]
    for key in ('"name"', '"icon"', '"quantity"'):
        assert key in prompt
    assert "only the JSON array" in prompt
    inline = parts[1]["inline_data"]
    assert inline["mime_type"] == "image/jpeg"
    assert base64.b64decode(inline["data"]) == image


def test_detection_request_tags_png_media_type() -> None:
    parts = _parts(build_detection_request(b"\x89PNG\r\n\x1a\nrest"))

    assert parts[1]["inline_data"]["mime_type"] == "image/png"


def test_recommendation_request_joins_item_names() -> None:
    parts = _parts(build_recommendation_request(["tomato", "egg"]))

    assert len(parts) == 1
    prompt = parts[0]["text"]
    assert "tomato, egg." in prompt
    assert f"Suggest {DISH_SUGGESTION_COUNT} " in prompt
    for key in (
        "name",
        "description",
        "ingredients",
        "steps",
        "time",
        "difficulty",
        "imageKeyword",
    ):
        assert f'"{key}"' in prompt
    assert "without any markdown" in prompt


def test_recommendation_request_is_pure() -> None:
    first = build_recommendation_request(["tomato", "egg"])
    second = build_recommendation_request(["tomato", "egg"])

    assert first == second
    assert first is not second


def test_recommendation_request_allows_zero_items() -> None:
    parts = _parts(build_recommendation_request([]))

    assert "with these ingredients: ." in parts[0]["text"]


def test_detect_mime_type_webp_and_default() -> None:
    webp = b"RIFF\x00\x00\x00\x00WEBPVP8 "

    assert detect_mime_type(webp) == "image/webp"
    assert detect_mime_type(b"unknown") == "image/jpeg"
