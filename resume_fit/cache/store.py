"""Analysis result cache: Redis when configured, in-process map otherwise.

Cache failures never reach the caller. Remote errors are logged and treated
as a miss (get) or a no-op (set/delete).
"""

import hashlib
import logging
import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from resume_fit.core.config import CacheConfig
from resume_fit.core.schemas import AnalysisResult, JobDescription, ParsedResume

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 3600


def fingerprint(
    resume: ParsedResume,
    job: JobDescription,
    prefix: str = "analysis:",
    chars: int = 500,
) -> str:
    """Cache key for a (resume, job) pair.

    Only the first ``chars`` characters of each text are hashed, so edits past
    that point map to the same key.
    """
    content = f"{resume.raw_text[:chars]}-{job.raw_text[:chars]}"
    return prefix + hashlib.md5(content.encode("utf-8")).hexdigest()


class CacheStore(ABC):
    """Base class for analysis result caches."""

    @abstractmethod
    def get(self, key: str) -> AnalysisResult | None:
        """Return the cached result, or None on miss/expiry/error."""

    @abstractmethod
    def set(self, key: str, value: AnalysisResult, ttl_seconds: int = DEFAULT_TTL_SECONDS) -> None:
        """Store a result for ttl_seconds."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a cached result if present."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the backend is configured and usable."""


class MemoryCache(CacheStore):
    """Thread-safe in-process cache with per-entry expiry.

    Expired entries are dropped when read and swept on every write, so the
    map only holds live entries plus those that expired since the last set.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[AnalysisResult, float]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> AnalysisResult | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None
            return value

    def set(self, key: str, value: AnalysisResult, ttl_seconds: int = DEFAULT_TTL_SECONDS) -> None:
        with self._lock:
            now = self._clock()
            self._evict_expired(now)
            self._entries[key] = (value, now + ttl_seconds)

    def _evict_expired(self, now: float) -> None:
        # Caller holds the lock.
        expired = [k for k, (_, expires_at) in self._entries.items() if now >= expires_at]
        for k in expired:
            del self._entries[k]

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def is_available(self) -> bool:
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class RedisCache(CacheStore):
    """Redis-backed cache storing results as camelCase JSON."""

    def __init__(self, client: Any | None) -> None:
        self._client = client

    @classmethod
    def from_url(cls, url: str, timeout_seconds: float = 5.0) -> "RedisCache":
        try:
            import redis
        except ImportError:
            msg = (
                "redis is required for the Redis cache. "
                "Install with: pip install 'resume-fit[redis]'"
            )
            raise ImportError(msg) from None

        client = redis.Redis.from_url(
            url,
            socket_timeout=timeout_seconds,
            socket_connect_timeout=timeout_seconds,
        )
        return cls(client)

    def get(self, key: str) -> AnalysisResult | None:
        if self._client is None:
            return None
        try:
            raw = self._client.get(key)
            if raw is None:
                return None
            return AnalysisResult.model_validate_json(raw)
        except Exception:
            logger.warning("Redis get failed for %s - treating as miss", key, exc_info=True)
            return None

    def set(self, key: str, value: AnalysisResult, ttl_seconds: int = DEFAULT_TTL_SECONDS) -> None:
        if self._client is None:
            return
        try:
            self._client.set(key, value.model_dump_json(by_alias=True), ex=ttl_seconds)
        except Exception:
            logger.warning("Redis set failed for %s", key, exc_info=True)

    def delete(self, key: str) -> None:
        if self._client is None:
            return
        try:
            self._client.delete(key)
        except Exception:
            logger.warning("Redis delete failed for %s", key, exc_info=True)

    def is_available(self) -> bool:
        return self._client is not None


def build_cache(config: CacheConfig) -> CacheStore:
    """Redis when a URL is configured and the client library loads, memory otherwise."""
    if config.redis_url:
        try:
            cache = RedisCache.from_url(config.redis_url)
        except Exception:
            logger.warning("Redis cache unavailable - using in-memory cache", exc_info=True)
        else:
            logger.info("Using Redis analysis cache")
            return cache
    else:
        logger.info("Redis not configured - using in-memory analysis cache")
    return MemoryCache()
