# Third-party imports
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
import uvicorn

# Local application imports
from voteschallenge.core.db import async_engine
from voteschallenge.core.monitoring.logging import get_logger
from voteschallenge.core.monitoring.sentry import scrub_event
from voteschallenge.models import Base
from voteschallenge.settings import settings

# Set up the main application logger
logger = get_logger("voteschallenge")


if settings.ENVIRONMENT == "production" and settings.SENTRY_DSN:
    logger.info(f"Initializing Sentry in {settings.ENVIRONMENT} environment")
    # core.monitoring.sentry may already have started the client with the logging
    # integration; reinitialize it with FastAPI support added
    client = sentry_sdk.get_client()
    integrations = list(client.options.get("integrations", [])) if client.is_active() else []

    if not any(isinstance(integration, FastApiIntegration) for integration in integrations):
        integrations.append(FastApiIntegration())
        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            integrations=integrations,
            environment=settings.ENVIRONMENT,
            send_default_pii=False,
            before_send=scrub_event,
            traces_sample_rate=1.0,
        )


async def create_tables() -> None:
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured.")


# ---- FASTAPI APP CREATION ----
def custom_generate_unique_id(route: APIRoute) -> str:
    # Handle routes without tags
    if route.tags and len(route.tags) > 0:
        return f"{route.tags[0]}-{route.name}"
    else:
        return route.name or "unnamed_route"


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    # Standard library imports
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        # Startup
        logger.info("Starting up FastAPI application")

        if settings.AUTO_CREATE_TABLES:
            await create_tables()

        yield

        # Shutdown
        await async_engine.dispose()
        logger.info("Shutting down FastAPI application")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Assembly voting: rulings, voting sessions, associates and votes",
        openapi_url=f"{settings.API_V1_STR}/openapi.json" if settings.ENVIRONMENT != "production" else None,
        docs_url=f"{settings.API_V1_STR}/docs" if settings.ENVIRONMENT != "production" else None,
        redoc_url=f"{settings.API_V1_STR}/redoc" if settings.ENVIRONMENT != "production" else None,
        generate_unique_id_function=custom_generate_unique_id,
        lifespan=lifespan,
    )

    if settings.all_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.all_cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Local application imports
    from voteschallenge.api.internal.utils.exceptions import register_exception_handlers

    register_exception_handlers(app)

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "version": "1.0.0"}

    # Local application imports
    from voteschallenge.api import internal_router

    app.include_router(internal_router, prefix=settings.API_V1_STR)

    return app


# Create the app instance
app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG_MODE)
