"""Fixed-window, in-memory, per-key rate limiting.

The limiter is process-local and best-effort: quotas are not shared between
workers and reset on restart.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Mapping
from dataclasses import replace
from threading import Lock

from txtx.config import RateLimitConfig, RateLimits
from txtx.types import RateLimitEntry, RateLimitResult

logger = logging.getLogger(__name__)

DEFAULT_CLEANUP_INTERVAL_SECONDS = 60


def epoch_ms() -> int:
    return int(time.time() * 1000)


class RateLimiter:
    """Counts requests per key inside fixed windows.

    Expired entries are replaced on access and swept out at most once per
    `cleanup_interval_seconds`, piggybacking on `check()` so no background
    task is needed.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], int] = epoch_ms,
        cleanup_interval_seconds: int = DEFAULT_CLEANUP_INTERVAL_SECONDS,
    ) -> None:
        self._clock = clock
        self._cleanup_interval_ms = cleanup_interval_seconds * 1000
        self._entries: dict[str, RateLimitEntry] = {}
        self._last_cleanup = clock()
        self._lock = Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def check(self, key: str, config: RateLimitConfig = RateLimits.standard) -> RateLimitResult:
        with self._lock:
            self._cleanup_locked(force=False)

            now = self._clock()
            window_ms = config.window_seconds * 1000
            entry = self._entries.get(key)

            if entry is None or entry.reset_time < now:
                self._entries[key] = RateLimitEntry(count=1, reset_time=now + window_ms)
                return RateLimitResult(
                    success=True,
                    remaining=config.limit - 1,
                    reset=math.ceil((now + window_ms) / 1000),
                )

            if entry.count >= config.limit:
                retry_after = math.ceil((entry.reset_time - now) / 1000)
                logger.info("Rate limit exceeded for %s, retry after %ss", key, retry_after)
                return RateLimitResult(
                    success=False,
                    remaining=0,
                    reset=math.ceil(entry.reset_time / 1000),
                    retry_after=retry_after,
                )

            entry.count += 1
            return RateLimitResult(
                success=True,
                remaining=config.limit - entry.count,
                reset=math.ceil(entry.reset_time / 1000),
            )

    def cleanup(self, *, force: bool = False) -> int:
        """Drop expired entries if the sweep interval has elapsed (or `force`).

        Returns the number of entries removed.
        """
        with self._lock:
            return self._cleanup_locked(force=force)

    def get_entry(self, key: str) -> RateLimitEntry | None:
        with self._lock:
            entry = self._entries.get(key)
            return replace(entry) if entry is not None else None

    def reset(self) -> None:
        with self._lock:
            self._entries.clear()
            self._last_cleanup = self._clock()

    def _cleanup_locked(self, *, force: bool) -> int:
        now = self._clock()
        if not force and now - self._last_cleanup < self._cleanup_interval_ms:
            return 0

        self._last_cleanup = now
        expired = [key for key, entry in self._entries.items() if entry.reset_time < now]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug("Swept %d expired rate limit entries", len(expired))
        return len(expired)


def rate_limit_key(headers: Mapping[str, str]) -> str:
    """Derive the limiter key from the first `X-Forwarded-For` address.

    Requests without the header share the `unknown` bucket.
    """
    forwarded = headers.get("x-forwarded-for") or ""
    ip = forwarded.split(",")[0].strip() or "unknown"
    return f"ratelimit:{ip}"
