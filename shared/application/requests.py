"""
Last-Request-Wins Gate

Store fetches are asynchronous and a newer request for the same resource
may be issued before an older one returns. The gate hands out a token per
request and only the newest token for a key may publish its result, so two
responses never race into the same view state.

One gate is shared by every worker thread of the process; token
bookkeeping happens under a lock.
"""

import itertools
import logging
import threading
from typing import Awaitable, Callable, Dict, Hashable, TypeVar

from shared.domain.exceptions import StaleResponseError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class LatestRequestGate:
    """
    Tracks the newest in-flight request per resource key.

    Usage:
        gate = LatestRequestGate()
        rooms = await gate.run('listings:room', lambda: store.afetch_all())
    """

    def __init__(self):
        self._tokens = itertools.count(1)
        self._latest: Dict[Hashable, int] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        """Number of keys with a request in flight"""
        return len(self._latest)

    def begin(self, key: Hashable) -> int:
        """Register a new request for ``key`` and return its token"""
        with self._lock:
            token = next(self._tokens)
            self._latest[key] = token
        return token

    def is_current(self, key: Hashable, token: int) -> bool:
        return self._latest.get(key) == token

    def accept(self, key: Hashable, token: int, result: T) -> T:
        """
        Return ``result`` if ``token`` is still the newest for ``key``.

        Raises:
            StaleResponseError: a newer request was issued meanwhile
        """
        with self._lock:
            if self._latest.get(key) != token:
                logger.info("Discarding stale response %s for %s", token, key)
                raise StaleResponseError(key, token)
            # Settled keys are forgotten; any older token still in flight is stale.
            del self._latest[key]
        return result

    def discard(self, key: Hashable, token: int) -> None:
        """Forget ``token`` if it is still the newest for ``key``"""
        with self._lock:
            if self._latest.get(key) == token:
                del self._latest[key]

    async def run(self, key: Hashable, fetch: Callable[[], Awaitable[T]]) -> T:
        """Await ``fetch`` under a fresh token and accept its result"""
        token = self.begin(key)
        try:
            return self.accept(key, token, await fetch())
        finally:
            self.discard(key, token)
