"""
Application lifespan management.

Handles startup and shutdown events.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
import logging

from .dependencies import container

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Warms up the MongoDB connection at startup and closes it at shutdown.
    """
    # Startup
    logger.info("Starting Storefront API...")
    await container.initialize()
    logger.info("Storefront API started successfully")

    yield

    # Shutdown
    logger.info("Shutting down Storefront API...")
    await container.shutdown()
    logger.info("Storefront API shutdown complete")
