"""Runtime configuration for edgewise.

Two settings are read from the environment at import time and can be
changed at runtime:

- ``EDGEWISE_DEBUG``: enables extra consistency checks (e.g. symmetry of
  generated undirected graphs).
- ``EDGEWISE_SEED``: default seed for random graph generation. Unset or
  empty means fresh OS entropy on every call. Invalid values are logged
  and ignored.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

from .logging import get_logger

_DEBUG_ENV_VAR = "EDGEWISE_DEBUG"
_SEED_ENV_VAR = "EDGEWISE_SEED"

logger = get_logger(__name__)


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return None
    try:
        seed = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", _SEED_ENV_VAR, raw)
        return None
    if seed < 0:
        logger.warning("Ignoring %s=%r: must be non-negative", _SEED_ENV_VAR, raw)
        return None
    return seed


_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in (
    "1",
    "true",
    "yes",
    "on",
)
_default_seed: Optional[int] = _parse_seed(os.getenv(_SEED_ENV_VAR))


def is_debug_enabled() -> bool:
    """
    Return whether edgewise debug mode is currently enabled.

    Debug mode can be toggled via set_debug_enabled(...) or the
    EDGEWISE_DEBUG environment variable.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Globally enable or disable edgewise debug mode."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Context manager to temporarily enable or disable debug mode.

    Example
    -------
    >>> with debug_context(True):
    ...     # debug mode enabled inside block
    ...     pass
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev


def default_seed() -> Optional[int]:
    """Return the seed used when random_graph is called without rng or seed."""
    return _default_seed


def set_default_seed(seed: Optional[int]) -> None:
    """
    Set the default seed for random graph generation.

    Parameters
    ----------
    seed:
        Non-negative integer, or None for fresh OS entropy.
    """
    global _default_seed
    if seed is not None and seed < 0:
        raise ValueError(f"seed must be non-negative, got {seed}")
    _default_seed = seed


@contextmanager
def seed_context(seed: Optional[int]) -> Iterator[None]:
    """Context manager to temporarily override the default seed."""
    global _default_seed
    prev = _default_seed
    set_default_seed(seed)
    try:
        yield
    finally:
        _default_seed = prev
