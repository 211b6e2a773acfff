"""CyberGuard - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings, get_settings
from app.core.exceptions import CyberGuardError
from app.core.logging_config import configure_logging
from app.core.rate_limit import SlidingWindowLimiter
from app.db.base import Base
from app.db.session import build_engine, build_sessionmaker
from app.routers import auth, password, progress

logger = logging.getLogger(__name__)


# same defaults as helmet
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "Cross-Origin-Opener-Policy": "same-origin",
    "X-DNS-Prefetch-Control": "off",
}


def _server_error() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Server error", "error": "InternalError"},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app around one Settings instance; engine and limiter live on app.state."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(settings.database_url, echo=settings.debug)
        app.state.engine = engine
        app.state.sessionmaker = build_sessionmaker(engine)

        # create tables (async); Alembic owns migrations in production
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        yield

        await engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        description="Cybersecurity flashcards and quizzes: accounts and progress tracking",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.login_limiter = SlidingWindowLimiter(
        settings.login_rate_limit_attempts,
        settings.login_rate_limit_window_seconds,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    @app.exception_handler(CyberGuardError)
    async def cyberguard_error_handler(request: Request, exc: CyberGuardError):
        logger.warning(
            "Application error on %s %s: %s: %s",
            request.method,
            request.url.path,
            exc.code,
            exc.message,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message, "error": exc.code},
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
        return _server_error()

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        return _server_error()

    app.include_router(auth.router)
    app.include_router(password.router)
    app.include_router(progress.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
