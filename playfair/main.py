import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from playfair.api.v1.router import api_router
from playfair.core.config import get_settings
from playfair.core.exceptions import PlayfairError
from playfair.core.logging import configure_logging
from playfair.models.schemas import ErrorResponse

logger = logging.getLogger(__name__)


async def playfair_error_handler(request: Request, exc: PlayfairError) -> JSONResponse:
    """Render a cipher failure as a 400 response."""
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    body = ErrorResponse(
        error=type(exc).__name__,
        message=exc.message,
        details=exc.details,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(),
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled failure and render it as a 500 response."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    body = ErrorResponse(
        error="InternalServerError",
        message=f"Request failed: {exc}",
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(),
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Playfair Cipher API. "
            "Encrypt and decrypt text with the classical Playfair digram "
            "cipher and inspect the key square derived from a keyword."
        ),
        version="0.1.0",
        debug=settings.debug,
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PlayfairError, playfair_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "playfair.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
