"""
Main FastAPI application for the Hackernews backend
"""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings
from ..database import close_mongo_client, create_mongo_client, get_links_collection
from ..links import LinkRepository
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug, log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    config: Settings = app.state.settings

    # Startup
    logger.info("Starting Hackernews API...")
    client = app.state.mongo_client
    owns_client = client is None
    if owns_client:
        client = create_mongo_client(config)
        app.state.mongo_client = client

    try:
        app.state.link_repository = LinkRepository(get_links_collection(client, config))
        logger.info(
            "Link repository initialized",
            database=config.mongodb_database,
            collection=config.mongodb_collection,
        )

        from ..validation import ValidationError, validate_startup_configuration

        try:
            validation_results = await validate_startup_configuration(client, config)
            if not validation_results["overall_valid"]:
                logger.error(
                    "Application configuration validation failed - requests will fail until "
                    "the database is reachable",
                    database_errors=validation_results["database"]["errors"],
                )
        except ValidationError:
            raise
        except Exception as e:
            logger.error(
                "Unexpected error during startup validation",
                error=str(e),
                note="Application will continue but may have configuration issues",
            )

        yield

        # Shutdown
        logger.info("Shutting down Hackernews API...")
    finally:
        if owns_client:
            await close_mongo_client(client)
            app.state.mongo_client = None


def create_app(config: Settings | None = None, mongo_client: Any = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Settings to use instead of the environment-derived defaults
        mongo_client: An existing async MongoDB client. When given, the app
            uses it as-is and does not close it on shutdown.
    """
    config = config or settings

    app = FastAPI(
        title="Hackernews API",
        description="GraphQL API for sharing links",
        version=__version__,
        lifespan=lifespan,
        debug=config.debug,
    )
    app.state.settings = config
    app.state.mongo_client = mongo_client

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    @app.get("/version")
    async def version():  # pyright: ignore [reportUnusedFunction]
        """Service name and version."""
        return {"name": "hackernews", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(graphiql=config.debug), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        # Fail fast - server should not start with a broken schema
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hackernews.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
