import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inventory_tracker.api.api import api_router
from inventory_tracker.core.config import Settings, settings
from inventory_tracker.core.exceptions import ProductNotFoundError, StorageError
from inventory_tracker.database.base import Base
from inventory_tracker.database.session import build_engine, build_session_factory, get_db

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler()
    ]
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create tables on startup
    Base.metadata.create_all(bind=app.state.engine)
    logger.info("Database tables ready")
    yield
    app.state.engine.dispose()


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application with middleware, routes and error handlers.

    The database engine is built from ``config``, so each app talks to the
    store named by its own ``DATABASE_URL``.
    """
    config = config or settings
    engine = build_engine(config.DATABASE_URL, echo=config.SQL_ECHO)

    app = FastAPI(
        title=config.PROJECT_NAME,
        description="Inventory Tracker: product stock levels, suppliers and inventory value",
        version=config.VERSION,
        debug=config.DEBUG,
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # Set up CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(ProductNotFoundError)
    async def product_not_found_handler(request: Request, exc: ProductNotFoundError):
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.exception(f"Storage failure while handling {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Storage failure"},
        )

    # Include API router
    app.include_router(api_router, prefix=config.API_PREFIX)

    @app.get("/")
    async def root():
        """Root endpoint that returns a welcome message and API status."""
        return {
            "message": f"Welcome to {config.PROJECT_NAME} API",
            "status": "running",
            "version": config.VERSION,
            "docs_url": "/docs"
        }

    @app.get("/health")
    def health_check(db: Session = Depends(get_db)):
        """Health check endpoint for monitoring and load balancers."""
        try:
            db.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.error(f"Health check failed: {exc}")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unhealthy", "api": "running", "database": "unavailable"},
            )
        return {
            "status": "healthy",
            "api": "running",
            "database": "connected"
        }

    return app


# Create FastAPI app
app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "inventory_tracker.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
