"""Application lifespan management"""
from contextlib import asynccontextmanager

from tank_monitor.config.logger import logger


@asynccontextmanager
async def lifespan(app):
    """
    Manage application lifespan (startup and shutdown).
    Stores live in memory for the life of the process and are not persisted.
    """
    # Startup
    logger.info("Starting application...")
    stats = app.state.services.store.stats()
    logger.info(f"Retaining up to {stats.capacity} readings in memory")
    logger.info("Application started successfully")

    yield  # Application is running

    # Shutdown
    stats = app.state.services.store.stats()
    logger.info(f"Shutting down application ({stats.size} readings discarded)...")
    logger.info("Application shut down successfully")
