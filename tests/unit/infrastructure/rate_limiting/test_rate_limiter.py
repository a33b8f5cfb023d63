"""
Unit tests for the in-memory rate limiter.
"""

from app.infrastructure.rate_limiting.limiter import (
    InMemoryRateLimiter,
    RateLimit,
    RateLimiter,
    RATE_LIMITS,
    limits_for_environment,
)


class FakeClock:
    def __init__(self, now=1_000_000.0):
        self.now = now

    def __call__(self):
        return self.now


class TestInMemoryRateLimiter:
    """Test cases for InMemoryRateLimiter."""

    def test_allows_up_to_limit(self):
        limiter = InMemoryRateLimiter(clock=FakeClock())
        limit = RateLimit(requests=3, window=60)

        statuses = [limiter.is_allowed("key", limit) for _ in range(4)]

        assert [s.exceeded for s in statuses] == [False, False, False, True]
        assert statuses[2].remaining == 0
        assert statuses[3].retry_after >= 1

    def test_keys_are_independent(self):
        limiter = InMemoryRateLimiter(clock=FakeClock())
        limit = RateLimit(requests=1, window=60)

        assert not limiter.is_allowed("a", limit).exceeded
        assert not limiter.is_allowed("b", limit).exceeded
        assert limiter.is_allowed("a", limit).exceeded

    def test_window_resets(self):
        clock = FakeClock(now=1_000_020.0)
        limiter = InMemoryRateLimiter(clock=clock)
        limit = RateLimit(requests=1, window=60)

        limiter.is_allowed("key", limit)
        assert limiter.is_allowed("key", limit).exceeded

        clock.now += 60
        assert not limiter.is_allowed("key", limit).exceeded

    def test_headers(self):
        limiter = InMemoryRateLimiter(clock=FakeClock())
        limit = RateLimit(requests=1, window=60)
        limiter.is_allowed("key", limit)

        headers = limiter.is_allowed("key", limit).to_headers()

        assert headers["X-RateLimit-Limit"] == "1"
        assert headers["X-RateLimit-Remaining"] == "0"
        assert "Retry-After" in headers

    def test_release_gives_back_one_request(self):
        limiter = InMemoryRateLimiter(clock=FakeClock())
        limit = RateLimit(requests=1, window=60)
        limiter.is_allowed("key", limit)

        limiter.release("key")

        assert not limiter.is_allowed("key", limit).exceeded
        assert limiter.is_allowed("key", limit).exceeded

    def test_release_unknown_key(self):
        limiter = InMemoryRateLimiter(clock=FakeClock())

        limiter.release("missing")

        assert not limiter.is_allowed("missing", RateLimit(requests=1, window=60)).exceeded

    def test_reset(self):
        limiter = InMemoryRateLimiter(clock=FakeClock())
        limit = RateLimit(requests=1, window=60)
        limiter.is_allowed("key", limit)

        limiter.reset()

        assert not limiter.is_allowed("key", limit).exceeded


class TestRateLimiter:
    """Test cases for RateLimiter."""

    def test_disabled_limiter_skips_check(self):
        assert RateLimiter(enabled=False).check_rate_limit(None, RATE_LIMITS["auth"]) is None

    def test_predefined_limits(self):
        assert RATE_LIMITS["auth"].requests == 5
        assert RATE_LIMITS["registration"].requests == 3
        assert RATE_LIMITS["registration"].window == 3600

    def test_uses_predefined_limits_by_default(self):
        assert RateLimiter().limits == RATE_LIMITS


class TestEnvironmentLimits:
    """Test cases for limits_for_environment."""

    def test_production_is_stricter(self):
        limits = limits_for_environment("production")

        assert limits["general"].requests == 80
        assert limits["crud"].requests == 150
        assert limits["general"].window == RATE_LIMITS["general"].window

    def test_unknown_environment_uses_development(self):
        limits = limits_for_environment("testing")

        assert limits["general"].requests == 200
        assert limits["crud"].requests == 500
        assert limits["auth"] == RATE_LIMITS["auth"]

    def test_predefined_limits_are_not_modified(self):
        limits_for_environment("staging")

        assert RATE_LIMITS["general"].requests == 100
