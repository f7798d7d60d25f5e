"""orders-api: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map OrdersApiError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized, tables ensured, and engine disposed via the lifespan

Design Decisions:
    - Lifespan over @app.on_event
    - run() wraps uvicorn so the service starts with `orders-api` on the configured port
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from orders_api.api.error_handlers import register_error_handlers
from orders_api.api.routes import orders, users
from orders_api.config import get_settings
from orders_api.infrastructure.database import init_db
from orders_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    if settings.auto_create_tables:
        await manager.create_all()
    logger.info("orders-api started")
    yield
    await manager.close()
    logger.info("orders-api shut down")


app = FastAPI(title="orders-api", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users.router)
app.include_router(orders.router)

register_error_handlers(app)


def run() -> None:
    """Serve the API with uvicorn on the configured host/port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
