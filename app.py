from __future__ import annotations

import logging

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from errors import RestaurantServiceError
from persistence.repositories import AsyncDiskRestaurantRepository, AsyncRestaurantRepository
from settings import Settings, get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RestaurantServiceError)
    async def restaurant_error_handler(request: Request, exc: RestaurantServiceError):
        if exc.http_status >= 500:
            logger.error("%s %s failed: %r", request.method, request.url.path, exc)
            # Storage details stay in the log.
            return JSONResponse(status_code=exc.http_status, content={"error": "Internal Server Error"})
        logger.warning("%s %s rejected (%d): %s %s", request.method, request.url.path, exc.http_status, exc.message, exc.details)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal Server Error"},
        )


def create_app(
    repository: AsyncRestaurantRepository | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    load_dotenv("local.env")
    load_dotenv()

    from endpoints.restaurant_endpoints import router as restaurant_router

    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Restaurant Registry")
    app.state.settings = settings
    if repository is None:
        repository = AsyncDiskRestaurantRepository.from_settings(settings)
    app.state.restaurant_repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    if settings.debug_log_requests:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            response = await call_next(request)
            logger.info("REQUEST %s %s -> %d", request.method, request.url.path, response.status_code)
            return response

    register_error_handlers(app)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(restaurant_router)

    return app


def main() -> None:
    load_dotenv("local.env")
    load_dotenv()
    settings = get_settings()
    server_app = create_app(settings=settings)
    logger.info("Server is running on http://%s:%d", settings.host, settings.port)
    uvicorn.run(
        server_app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


app = create_app()


if __name__ == "__main__":
    main()
