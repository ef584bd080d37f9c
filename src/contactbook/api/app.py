"""
Main FastAPI application for the Contact Book backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings as default_settings
from ..database import create_gateway
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or default_settings

    configure_logging(debug=settings.debug, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the storage gateway for the lifetime of the application."""
        logger.info("Starting Contact Book API...")
        gateway = create_gateway(settings.database_url, echo=settings.sql_echo)
        try:
            await gateway.create_schema()
        except Exception as e:
            logger.error("Failed to prepare database", error=str(e))
            await gateway.close()
            raise

        app.state.gateway = gateway
        logger.info("Database initialized")

        try:
            yield
        finally:
            logger.info("Shutting down Contact Book API...")
            await gateway.close()

    app = FastAPI(
        title="Contact Book API",
        description="GraphQL contact store backed by SQLite",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        gateway = getattr(app.state, "gateway", None)
        database_ok = await gateway.ping() if gateway is not None else False
        return {
            "status": "healthy" if database_ok else "degraded",
            "version": __version__,
            "database": database_ok,
        }

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(graphiql=settings.graphiql), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app
