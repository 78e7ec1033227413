"""Pipeline stages and the errors raised from them."""

from enum import StrEnum


class PipelineStage(StrEnum):
    """Stages a single model call passes through."""

    IDLE = "idle"
    PROMPT_BUILT = "prompt_built"
    SENT = "sent"
    ENVELOPE_RECEIVED = "envelope_received"
    SANITIZED = "sanitized"
    DECODED = "decoded"


class FridgeChefError(RuntimeError):
    """Base class for pipeline failures."""

    kind = "pipeline_error"
    stage = PipelineStage.IDLE


class TransportError(FridgeChefError):
    """Network failure or non-200 response from the model endpoint."""

    kind = "transport_error"
    stage = PipelineStage.SENT

    def __init__(
        self, message: str, status_code: int | None = None, body: str | None = None
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class EnvelopeError(FridgeChefError):
    """HTTP 200 response whose body is not the expected provider envelope."""

    kind = "envelope_error"
    stage = PipelineStage.ENVELOPE_RECEIVED

    def __init__(self, message: str, body: str | None = None) -> None:
        super().__init__(message)
        self.body = body


class SanitizationError(FridgeChefError):
    """Reply text that is empty once markdown artifacts are stripped."""

    kind = "sanitization_error"
    stage = PipelineStage.SANITIZED

    def __init__(self, message: str, raw_text: str) -> None:
        super().__init__(message)
        self.raw_text = raw_text


class SchemaError(FridgeChefError):
    """Reply JSON that does not match the requested result shape."""

    kind = "schema_error"
    stage = PipelineStage.DECODED

    def __init__(
        self,
        message: str,
        raw_text: str,
        errors: list[dict[str, object]] | None = None,
    ) -> None:
        super().__init__(message)
        self.raw_text = raw_text
        self.errors = errors or []
