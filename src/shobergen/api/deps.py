"""Shared dependencies for the API routers."""

from __future__ import annotations

import logging
import random
import threading

from shobergen.config import get_settings

logger = logging.getLogger(__name__)

_rng: random.Random | None = None
_rng_lock = threading.Lock()


def get_rng() -> random.Random | None:
    """Random source for request handlers.

    Returns one process-wide ``random.Random`` seeded from SHOBER_RANDOM_SEED,
    or None (the engine's default) when no seed is configured.
    """
    global _rng
    if _rng is not None:
        return _rng
    seed = get_settings().random_seed
    if seed is None:
        return None
    with _rng_lock:
        if _rng is None:
            logger.info("Using seeded random source (seed=%d)", seed)
            _rng = random.Random(seed)
    return _rng


def set_rng(rng: random.Random | None) -> None:
    """Replace the shared random source (used by tests)."""
    global _rng
    with _rng_lock:
        _rng = rng
