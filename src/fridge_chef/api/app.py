"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from fridge_chef.api.schemas import (
    DetectedItemOut,
    DetectItemsResponse,
    FridgeAnalysisResponse,
    PipelineErrorResponse,
    SuggestDishesRequest,
    SuggestDishesResponse,
    SuggestedDishOut,
)
from fridge_chef.app_logging import configure_logging
from fridge_chef.containers import AppContainer
from fridge_chef.domain.pipeline import FridgeChefError, TransportError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(FridgeChefError)
    async def pipeline_error_handler(
        request: Request, exc: FridgeChefError
    ) -> JSONResponse:
        logger.warning(
            "Pipeline failed: path=%s error=%s stage=%s",
            request.url.path,
            exc.kind,
            exc.stage,
        )
        return JSONResponse(
            status_code=502,
            content=_error_body(exc).model_dump(),
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/items/detect")
    async def detect_items(request: Request) -> DetectItemsResponse:
        """Detect food items in the image sent as the request body."""
        image_bytes = await _read_image(request)
        state_container: AppContainer = request.app.state.container
        items = await state_container.kitchen_service.detect_items(image_bytes)
        return DetectItemsResponse(
            items=[DetectedItemOut.from_domain(item) for item in items]
        )

    @app.post("/dishes/suggest")
    async def suggest_dishes(
        body: SuggestDishesRequest, request: Request
    ) -> SuggestDishesResponse:
        """Suggest dishes for a list of item names."""
        state_container: AppContainer = request.app.state.container
        dishes = await state_container.kitchen_service.suggest_dishes(body.items)
        return SuggestDishesResponse(
            dishes=[SuggestedDishOut.from_domain(dish) for dish in dishes]
        )

    @app.post("/fridge/analyze")
    async def analyze_fridge(request: Request) -> FridgeAnalysisResponse:
        """Detect items in the image and suggest dishes for them."""
        image_bytes = await _read_image(request)
        state_container: AppContainer = request.app.state.container
        analysis = await state_container.kitchen_service.analyze_fridge(image_bytes)
        return FridgeAnalysisResponse(
            items=[DetectedItemOut.from_domain(item) for item in analysis.items],
            dishes=[SuggestedDishOut.from_domain(dish) for dish in analysis.dishes],
        )

    return app


async def _read_image(request: Request) -> bytes:
    image_bytes = await request.body()
    if not image_bytes:
        raise HTTPException(status_code=400, detail="Image body is empty")
    return image_bytes


def _error_body(exc: FridgeChefError) -> PipelineErrorResponse:
    status_code = exc.status_code if isinstance(exc, TransportError) else None
    body = getattr(exc, "body", None)
    return PipelineErrorResponse(
        error=exc.kind,
        stage=str(exc.stage),
        message=str(exc),
        status_code=status_code,
        body=body,
    )
