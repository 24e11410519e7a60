"""
Main FastAPI application for Quill backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..database import close_database, init_database
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Quill API...")
    init_database()
    logger.info("Database initialized")

    from ..validation import (
        ValidationError,
        get_startup_recommendations,
        is_production,
        validate_startup_configuration,
    )

    try:
        validation_results = await validate_startup_configuration()

        if not validation_results["overall_valid"]:
            logger.error(
                "Application configuration validation failed - some features may not work properly",
                database_errors=validation_results["database"].get("errors", []),
                auth_errors=validation_results["auth"].get("errors", []),
            )

            if is_production():
                raise ValidationError("Critical configuration validation failed in production")

        recommendations = get_startup_recommendations(validation_results)
        if recommendations:
            logger.info("Configuration recommendations", recommendations=recommendations)

    except ValidationError:
        # Re-raise validation errors to fail startup
        raise
    except Exception as e:
        logger.error(
            "Unexpected error during startup validation",
            error=str(e),
            note="Application will continue but may have configuration issues",
        )

    yield

    # Shutdown
    logger.info("Shutting down Quill API...")
    await close_database()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Quill API",
        description="GraphQL API for a small blog: accounts, statuses and posts",
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
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router()
        app.include_router(graphql_router, prefix="")
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
        "quill.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
