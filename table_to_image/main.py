# table_to_image/main.py
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config import Settings, get_settings
from .mcp_routes import router as mcp_router
from .routes import error_response, router as api_router

logger = logging.getLogger(__name__)


def _not_found_message(path: str) -> str:
    if path.startswith("/mcp"):
        return "MCP endpoint not found"
    return "Available endpoints: /health, /convert, /mcp/*"


def _validation_message(exc: RequestValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI app. Explicit settings replace the environment-backed
    ones for every route; without them, get_settings() is used.
    """
    app = FastAPI(title="Table to Image", version=__version__)

    if settings is None:
        settings = get_settings()
    else:
        app.dependency_overrides[get_settings] = lambda: settings

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if settings.enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization"],
            max_age=86400,
        )

    app.include_router(api_router)
    app.include_router(mcp_router)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            return error_response(404, "Not Found", _not_found_message(request.url.path))
        return error_response(exc.status_code, "HTTP Error", str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return error_response(422, "Validation Error", _validation_message(exc))

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(500, "Internal Server Error", str(exc))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("table_to_image.main:app", host="0.0.0.0", port=8000)
