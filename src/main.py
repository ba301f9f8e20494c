"""
Production FastAPI Application

Serves user authentication, event management, seat reservation and the
payment-proof review flow from one process.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Ticketing Service] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Ticketing Service] Dependency injection wired')

    # Create tables that do not exist yet
    await create_db_and_tables()
    Logger.base.info('🗄️  [Ticketing Service] Database schema ready')

    Logger.base.info('✅ [Ticketing Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Ticketing Service] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Ticketing Service] Database engine disposed')

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Ticketing Service] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(
    lifespan=lifespan,
    description='Event ticketing: seat reservation, payment proof review and event management',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
