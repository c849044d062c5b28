# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Stacklet, Inc.
#

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .settings import SETTINGS
from .utils.logging import get_logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Server lifespan context manager."""
    logger = get_logger()

    # startup logging
    logger.info(f"Server settings: {SETTINGS.model_dump()}")

    yield
