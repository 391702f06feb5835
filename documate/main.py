"""FastAPI application entrypoint with RAG engine lifecycle management."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from documate.config import Settings
from documate.exceptions import ProviderError, ValidationError
from documate.logging_config import setup_logging
from documate.rag import RAGEngine
from documate.routes import debug_router, health_router, questions_router
from documate.routes.deps import CORS_HEADERS

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse({"error": exc.message}, status_code=exc.status_code, headers=CORS_HEADERS)


async def provider_error_handler(request: Request, exc: ProviderError):
    logger.error(f"Provider failure | provider={exc.provider} | path={request.url.path} | error={exc.message}")
    return JSONResponse({"error": exc.message}, status_code=500, headers=CORS_HEADERS)


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code != 405:
        return await http_exception_handler(request, exc)
    return JSONResponse({"error": "Method not allowed"}, status_code=405, headers=CORS_HEADERS)


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error | path={request.url.path}")
    return JSONResponse({"error": str(exc)}, status_code=500, headers=CORS_HEADERS)


def create_app(engine: Optional[RAGEngine] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = engine is None
        if owned:
            app.state.rag = await RAGEngine.from_settings(Settings.from_env())
        yield
        if owned:
            await app.state.rag.close()

    app = FastAPI(title="DocuMate RAG", lifespan=lifespan)
    if engine is not None:
        app.state.rag = engine

    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ProviderError, provider_error_handler)
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    app.include_router(health_router)
    app.include_router(questions_router)
    app.include_router(debug_router)

    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse(url="/docs")

    return app


setup_logging()
app = create_app()
