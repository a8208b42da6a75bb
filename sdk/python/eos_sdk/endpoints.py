"""
Endpoint pool
"""

import logging
import random
from typing import Iterable, Optional

from .constants import BLACKLIST_API_ENDPOINTS, DEFAULT_API_ENDPOINTS
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class EndpointPool:
    """
    Immutable set of candidate RPC endpoints.

    Selection is uniform random. Overrides return a new pool instead of
    mutating this one, so a pool can be shared between threads.

    Example:
        >>> pool = EndpointPool.default()
        >>> url = pool.select()
        >>> local = pool.with_override("http://127.0.0.1:8888")
    """

    def __init__(self, endpoints: Iterable[str], rng: Optional[random.Random] = None):
        cleaned = tuple(url.strip().rstrip('/') for url in endpoints if url and url.strip())
        if not cleaned:
            raise ConfigurationError("Endpoint pool must contain at least one endpoint")
        self._endpoints = cleaned
        self._rng = rng or random.Random()

    @classmethod
    def default(cls, rng: Optional[random.Random] = None) -> "EndpointPool":
        return cls(DEFAULT_API_ENDPOINTS, rng=rng)

    @classmethod
    def known_bad(cls, rng: Optional[random.Random] = None) -> "EndpointPool":
        """Pool made of blacklisted endpoints, for diagnostics only."""
        return cls(BLACKLIST_API_ENDPOINTS, rng=rng)

    @property
    def endpoints(self):
        return self._endpoints

    def select(self) -> str:
        return self._rng.choice(self._endpoints)

    def with_override(self, url: Optional[str]) -> "EndpointPool":
        """
        Force all traffic to one endpoint.

        Args:
            url: Endpoint URL; empty or None leaves the pool unchanged

        Returns:
            Single-endpoint pool, or this pool if url is empty
        """
        if not url:
            return self
        logger.info(f"Endpoint pool overridden with {url}")
        return EndpointPool([url], rng=self._rng)

    def __len__(self):
        return len(self._endpoints)

    def __contains__(self, url):
        return url.rstrip('/') in self._endpoints

    def __repr__(self):
        return f"EndpointPool({len(self._endpoints)} endpoints)"
