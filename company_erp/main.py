from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from company_erp.api.router import router as api_router
from company_erp.config import Settings, get_settings
from company_erp.core.error_handlers import register_exception_handlers
from company_erp.core.logging import get_logger, setup_logging
from company_erp.core.middleware import register_middlewares
from company_erp.core.security import JWTManager, PasswordHasher
from company_erp.db import build_engine, build_session_factory, init_db

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Builds the engine, session factory and security helpers from Settings
      and keeps them on ``app.state`` for the dependencies.
    - Registers CORS, core middleware, and exception handlers.
    - Includes the API router under ``API_PREFIX``.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if not settings.is_production():
            # Production schemas are managed outside the app.
            init_db(engine)
        logger.info("application_started", environment=settings.ENVIRONMENT)
        yield
        engine.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=settings.APP_VERSION,
        description="Employee authentication, leave management and subscription billing",
        docs_url=settings.DOCS_URL,
        redoc_url=None,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.jwt_manager = JWTManager(
        secret_key=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expires_delta=settings.jwt_expires_delta,
    )
    app.state.password_hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)

    origins = settings.cors_origins or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers refuse credentials with a wildcard origin.
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middlewares(app)
    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app


def run() -> None:
    """Serve the application with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "company_erp.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
