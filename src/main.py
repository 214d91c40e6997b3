"""
Production FastAPI Application

Everything lives in process memory; startup only wires dependency injection.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
import uvicorn

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Ticketing Service] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Ticketing Service] Dependency injection wired')

    hold_minutes = container.config_service().RESERVATION_HOLD_MINUTES
    Logger.base.info(f'⏳ [Ticketing Service] Reservations held for {hold_minutes} minutes')
    Logger.base.info('✅ [Ticketing Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Ticketing Service] Shutting down...')

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Ticketing Service] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')


if __name__ == '__main__':
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
