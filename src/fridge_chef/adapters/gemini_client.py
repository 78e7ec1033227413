"""Google Gemini generateContent client."""

import logging
from dataclasses import dataclass

import httpx

from fridge_chef.domain.pipeline import EnvelopeError, TransportError
from fridge_chef.services.kitchen import GenerativeClient

_logger = logging.getLogger(__name__)

_REPLY_PATH: tuple[str | int, ...] = ("candidates", 0, "content", "parts", 0, "text")


@dataclass(frozen=True)
class HttpxGeminiClient(GenerativeClient):
    """Gemini client implemented with httpx.

    No retries and no timeout are applied; callers wrap calls as needed.
    """

    api_key: str
    base_url: str
    model: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str, model: str) -> "HttpxGeminiClient":
        """Create a Gemini client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            model=model,
            http_client=httpx.AsyncClient(),
        )

    @property
    def endpoint(self) -> str:
        """Full generateContent URL for the configured model."""
        return f"{self.base_url.rstrip('/')}/{self.model}:generateContent"

    async def generate(self, payload: dict[str, object]) -> str:
        """Send a request payload and return the reply text."""
        try:
            response = await self.http_client.post(
                self.endpoint,
                params={"key": self.api_key},
                headers={"Content-Type": "application/json"},
                json=payload,
                timeout=None,
            )
        except httpx.HTTPError as exc:
            raise TransportError(f"Gemini request failed: {exc}") from exc

        if response.status_code != 200:
            _logger.warning(
                "Gemini API error: status=%s body=%s",
                response.status_code,
                response.text,
            )
            raise TransportError(
                f"Gemini returned status {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            envelope = response.json()
        except ValueError as exc:
            _logger.warning("Gemini envelope is not JSON: body=%s", response.text)
            raise EnvelopeError(
                "Gemini response body is not JSON", body=response.text
            ) from exc

        try:
            return extract_reply_text(envelope)
        except EnvelopeError as exc:
            _logger.warning(
                "Gemini envelope malformed: %s body=%s", exc, response.text
            )
            exc.body = response.text
            raise

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def extract_reply_text(envelope: object) -> str:
    """Return ``candidates[0].content.parts[0].text`` from a Gemini envelope."""
    node = envelope
    walked = "$"
    for step in _REPLY_PATH:
        node = _descend(node, step, walked)
        walked = f"{walked}[{step}]" if isinstance(step, int) else f"{walked}.{step}"
    if not isinstance(node, str):
        raise EnvelopeError(f"Expected text at {walked}, got {type(node).__name__}")
    return node


def _descend(node: object, step: str | int, walked: str) -> object:
    if isinstance(step, int):
        if not isinstance(node, list):
            raise EnvelopeError(f"Expected a list at {walked}")
        if len(node) <= step:
            raise EnvelopeError(f"Empty list at {walked}")
        return node[step]
    if not isinstance(node, dict):
        raise EnvelopeError(f"Expected an object at {walked}")
    if step not in node:
        raise EnvelopeError(f"Missing key {step!r} at {walked}")
    return node[step]
