from concurrent.futures import ThreadPoolExecutor

import pytest
from pydantic import ValidationError

from txtx.api.rate_limit import RateLimiter, rate_limit_key
from txtx.config import RateLimitConfig

T0 = 1_700_000_000_500


class FakeClock:
    def __init__(self, now: int = T0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += int(seconds * 1000)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def limiter(clock: FakeClock) -> RateLimiter:
    return RateLimiter(clock=clock)


def test_third_request_over_limit_is_rejected(limiter: RateLimiter) -> None:
    config = RateLimitConfig(limit=2, window_seconds=60)

    results = [limiter.check("client", config) for _ in range(3)]

    assert [result.success for result in results] == [True, True, False]
    assert results[2].remaining == 0
    assert results[2].retry_after == 60
    assert results[0].retry_after is None


def test_remaining_counts_down(limiter: RateLimiter) -> None:
    config = RateLimitConfig(limit=5, window_seconds=60)

    for _ in range(3):
        result = limiter.check("client", config)

    assert result.success
    assert result.remaining == 2


def test_reset_is_window_end_in_epoch_seconds(limiter: RateLimiter, clock: FakeClock) -> None:
    config = RateLimitConfig(limit=3, window_seconds=60)

    first = limiter.check("client", config)
    clock.advance(10)
    second = limiter.check("client", config)

    # (T0 + 60s) / 1000, rounded up
    assert first.reset == 1_700_000_061
    assert second.reset == first.reset


def test_rejection_does_not_consume_quota(limiter: RateLimiter, clock: FakeClock) -> None:
    config = RateLimitConfig(limit=1, window_seconds=60)
    limiter.check("client", config)

    clock.advance(20)
    rejected = limiter.check("client", config)

    assert not rejected.success
    assert rejected.retry_after == 40
    assert limiter.get_entry("client").count == 1


def test_window_expiry_starts_a_new_window(limiter: RateLimiter, clock: FakeClock) -> None:
    config = RateLimitConfig(limit=2, window_seconds=60)
    limiter.check("client", config)
    limiter.check("client", config)

    clock.advance(60)
    # reset_time == now is still inside the window
    assert not limiter.check("client", config).success

    clock.advance(0.001)
    result = limiter.check("client", config)

    assert result.success
    assert result.remaining == 1
    entry = limiter.get_entry("client")
    assert entry.count == 1
    assert entry.reset_time == clock.now + 60_000


def test_keys_are_independent(limiter: RateLimiter) -> None:
    config = RateLimitConfig(limit=1, window_seconds=60)

    assert limiter.check("a", config).success
    assert limiter.check("b", config).success
    assert not limiter.check("a", config).success


def test_cleanup_is_throttled_unless_forced(limiter: RateLimiter, clock: FakeClock) -> None:
    config = RateLimitConfig(limit=5, window_seconds=10)
    limiter.check("a", config)
    limiter.check("b", config)

    clock.advance(30)
    assert limiter.cleanup() == 0
    assert len(limiter) == 2

    assert limiter.cleanup(force=True) == 2
    assert len(limiter) == 0


def test_check_sweeps_expired_entries_after_interval(
    limiter: RateLimiter, clock: FakeClock
) -> None:
    short = RateLimitConfig(limit=5, window_seconds=10)
    long = RateLimitConfig(limit=5, window_seconds=600)
    limiter.check("a", short)
    limiter.check("b", long)

    clock.advance(61)
    limiter.check("c", short)

    assert limiter.get_entry("a") is None
    assert limiter.get_entry("b") is not None
    assert len(limiter) == 2


def test_reset_clears_all_entries(limiter: RateLimiter) -> None:
    config = RateLimitConfig(limit=1, window_seconds=60)
    limiter.check("client", config)

    limiter.reset()

    assert len(limiter) == 0
    assert limiter.check("client", config).success


def test_concurrent_checks_do_not_lose_counts(limiter: RateLimiter) -> None:
    config = RateLimitConfig(limit=1000, window_seconds=60)

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(lambda _: limiter.check("shared", config), range(200)))

    assert limiter.get_entry("shared").count == 200


def test_invalid_config_is_rejected() -> None:
    with pytest.raises(ValidationError):
        RateLimitConfig(limit=0, window_seconds=60)
    with pytest.raises(ValidationError):
        RateLimitConfig(limit=10, window_seconds=0)


@pytest.mark.parametrize(
    ("headers", "expected"),
    [
        ({"x-forwarded-for": "203.0.113.7, 10.0.0.1"}, "ratelimit:203.0.113.7"),
        ({"x-forwarded-for": " 198.51.100.2 "}, "ratelimit:198.51.100.2"),
        ({"x-forwarded-for": ""}, "ratelimit:unknown"),
        ({}, "ratelimit:unknown"),
    ],
)
def test_rate_limit_key(headers: dict[str, str], expected: str) -> None:
    assert rate_limit_key(headers) == expected
