"""
In-process fixed window rate limiting.
"""

import time
import logging
from typing import Callable, Optional, Dict
from dataclasses import dataclass

from fastapi import Request

logger = logging.getLogger(__name__)


@dataclass
class RateLimit:
    """Rate limit configuration."""
    requests: int  # Number of requests allowed
    window: int    # Time window in seconds


@dataclass
class RateLimitStatus:
    """Current rate limit status."""
    limit: int
    remaining: int
    reset_time: int
    retry_after: Optional[int] = None

    @property
    def exceeded(self) -> bool:
        return self.retry_after is not None

    def to_headers(self) -> Dict[str, str]:
        """Convert to HTTP headers."""
        headers = {
            'X-RateLimit-Limit': str(self.limit),
            'X-RateLimit-Remaining': str(self.remaining),
            'X-RateLimit-Reset': str(self.reset_time)
        }
        if self.retry_after is not None:
            headers['Retry-After'] = str(self.retry_after)
        return headers


class InMemoryRateLimiter:
    """Fixed window counter kept in process memory."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self.clock = clock
        self.requests: Dict[str, int] = {}
        self.reset_times: Dict[str, int] = {}

    def is_allowed(self, key: str, rate_limit: RateLimit) -> RateLimitStatus:
        """Count one request against the key and report whether it may proceed."""
        current_time = int(self.clock())
        window_start = current_time - (current_time % rate_limit.window)

        # Clean up expired window
        if key in self.reset_times and self.reset_times[key] <= current_time:
            self.requests.pop(key, None)
            self.reset_times.pop(key, None)

        # Initialize or get current count
        if key not in self.requests:
            self.requests[key] = 0
            self.reset_times[key] = window_start + rate_limit.window

        current_count = self.requests[key]

        if current_count >= rate_limit.requests:
            return RateLimitStatus(
                limit=rate_limit.requests,
                remaining=0,
                reset_time=self.reset_times[key],
                retry_after=max(1, self.reset_times[key] - current_time)
            )

        # Increment counter
        self.requests[key] += 1

        return RateLimitStatus(
            limit=rate_limit.requests,
            remaining=rate_limit.requests - (current_count + 1),
            reset_time=self.reset_times[key]
        )

    def release(self, key: str) -> None:
        """Give back one request counted against the key in its current window."""
        if self.requests.get(key, 0) > 0:
            self.requests[key] -= 1

    def reset(self) -> None:
        self.requests.clear()
        self.reset_times.clear()


class RateLimiter:
    """Rate limiter front end used by the request dependencies."""

    def __init__(
        self,
        enabled: bool = True,
        backend: Optional[InMemoryRateLimiter] = None,
        limits: Optional[Dict[str, RateLimit]] = None
    ):
        self.enabled = enabled
        self.limiter = backend or InMemoryRateLimiter()
        self.limits = limits or dict(RATE_LIMITS)
        logger.info("Using in-memory rate limiter (enabled=%s)", enabled)

    def check_rate_limit(
        self,
        request: Request,
        rate_limit: RateLimit,
        key_func: Optional[Callable[[Request], str]] = None
    ) -> Optional[RateLimitStatus]:
        """Check if request is within rate limit; None when limiting is off."""
        if not self.enabled:
            return None

        return self.limiter.is_allowed(self.key_for(request, key_func), rate_limit)

    def release(
        self,
        request: Request,
        key_func: Optional[Callable[[Request], str]] = None
    ) -> None:
        """Stop counting a request that has already been checked."""
        if self.enabled:
            self.limiter.release(self.key_for(request, key_func))

    def key_for(
        self,
        request: Request,
        key_func: Optional[Callable[[Request], str]] = None
    ) -> str:
        return key_func(request) if key_func else self._default_key(request)

    def _default_key(self, request: Request) -> str:
        """Generate default key from request."""
        client_ip = request.client.host if request.client else 'unknown'
        return f"rate_limit:{client_ip}:{request.url.path}"


# Predefined rate limits
RATE_LIMITS = {
    'general': RateLimit(requests=100, window=15 * 60),     # 100 requests per 15 minutes
    'auth': RateLimit(requests=5, window=15 * 60),          # 5 failed logins per 15 minutes
    'registration': RateLimit(requests=3, window=60 * 60),  # 3 registrations per hour
    'crud': RateLimit(requests=200, window=15 * 60),        # 200 writes per 15 minutes
    'search': RateLimit(requests=50, window=10 * 60),       # 50 searches per 10 minutes
}

# Overrides of the general and crud budgets per environment
ENVIRONMENT_LIMITS = {
    'production': {'general': 80, 'crud': 150},
    'staging': {'general': 120, 'crud': 250},
    'development': {'general': 200, 'crud': 500},
}


def limits_for_environment(environment: str) -> Dict[str, RateLimit]:
    """Predefined limits adjusted for the given environment; unknown ones use development."""
    overrides = ENVIRONMENT_LIMITS.get(environment.lower(), ENVIRONMENT_LIMITS['development'])
    limits = dict(RATE_LIMITS)
    for name, requests in overrides.items():
        limits[name] = RateLimit(requests=requests, window=RATE_LIMITS[name].window)
    return limits


def get_rate_limiter(request: Request) -> RateLimiter:
    """Get the application's rate limiter."""
    return request.app.state.rate_limiter
