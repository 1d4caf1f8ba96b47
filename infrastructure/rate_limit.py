"""
Limitation de débit par adresse IP (fenêtre glissante)
"""

import time
import logging
import threading
from collections import deque
from typing import Callable, Deque, Dict

from fastapi import Request

logger = logging.getLogger(__name__)

DEFAULT_IDENTITY = "127.0.0.1"


class SlidingWindowRateLimiter:
    """
    Admet une requête seulement si l'identité a fait moins de
    `max_requests` requêtes dans les `window_seconds` dernières secondes.

    L'historique par identité est protégé par un unique verrou ; `sweep`
    oublie les identités restées inactives.
    """

    def __init__(
        self,
        enabled: bool,
        max_requests: int,
        window_seconds: float = 1.0,
        clock: Callable[[], float] = time.monotonic
    ):
        self.enabled = bool(enabled)
        self.max_requests = max(1, int(max_requests))
        self.window_seconds = float(window_seconds)
        self._clock = clock
        self._lock = threading.Lock()
        self._events: Dict[str, Deque[float]] = {}

    def admit(self, identity: str) -> bool:
        """Enregistre la requête et retourne False si la limite est atteinte"""
        if not self.enabled:
            return True
        now = self._clock()
        cutoff = now - self.window_seconds
        with self._lock:
            samples = self._events.setdefault(identity or DEFAULT_IDENTITY, deque())
            while samples and samples[0] <= cutoff:
                samples.popleft()
            if len(samples) >= self.max_requests:
                return False
            samples.append(now)
            return True

    def sweep(self, idle_seconds: float = 60.0) -> int:
        """Supprime les identités sans requête depuis `idle_seconds` ; retourne leur nombre"""
        cutoff = self._clock() - idle_seconds
        with self._lock:
            stale = [key for key, samples in self._events.items() if not samples or samples[-1] <= cutoff]
            for key in stale:
                del self._events[key]
        if stale:
            logger.debug(f"Rate limiter evicted {len(stale)} idle client(s)")
        return len(stale)

    def tracked_identities(self) -> int:
        with self._lock:
            return len(self._events)


def client_identity(request: Request) -> str:
    """Première adresse de X-Forwarded-For, sinon l'adresse du pair"""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    if request.client and request.client.host:
        return request.client.host
    return DEFAULT_IDENTITY
