"""FastAPI application serving the genetics engine.

Provides:
- DNA API: decode, encode, generate, rarity scoring, trait catalog
- Breeding API: eligibility, breeding, cost, stud fee, cooldowns
- Health check
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from shobergen import __version__
from shobergen.api.breeding import router as breeding_router
from shobergen.api.dna import router as dna_router
from shobergen.config import get_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager: log the effective settings on startup."""
    settings = get_settings()
    logger.info(
        "Shobergen API %s starting (seeded=%s)",
        __version__,
        settings.random_seed is not None,
    )
    yield
    logger.info("Shobergen API stopped")


app = FastAPI(
    title="Shobergen",
    description="Genome codec and breeding engine for shober pets",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(dna_router)
app.include_router(breeding_router)


@app.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
