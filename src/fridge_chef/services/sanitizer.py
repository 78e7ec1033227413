"""Cleanup of markdown artifacts around model JSON replies."""

import re

from fridge_chef.domain.pipeline import SanitizationError

_LEADING_FENCE = re.compile(r"^```[\w+-]*[ \t]*\n?")
_TRAILING_FENCE = re.compile(r"\n?[ \t]*```$")


def sanitize_reply(text: str) -> str:
    """Strip surrounding whitespace and one pair of code fences.

    Text between the fences is returned untouched, so clean JSON passes through
    unchanged.
    """
    cleaned = text.strip()
    cleaned = _LEADING_FENCE.sub("", cleaned, count=1)
    cleaned = _TRAILING_FENCE.sub("", cleaned, count=1)
    cleaned = cleaned.strip()
    if not cleaned:
        raise SanitizationError("Model reply is empty", raw_text=text)
    return cleaned
