"""
Rate limiting package for FastAPI applications.
"""

from .limiter import (
    RateLimit, RateLimitStatus, InMemoryRateLimiter,
    RateLimiter, get_rate_limiter, limits_for_environment, RATE_LIMITS
)
from .decorators import (
    create_rate_limit_dependency,
    general_rate_limit, auth_rate_limit, registration_rate_limit,
    create_rate_limit, search_rate_limit,
    user_key, ip_key
)

__all__ = [
    # Core classes
    'RateLimit',
    'RateLimitStatus',
    'InMemoryRateLimiter',
    'RateLimiter',

    # Functions
    'get_rate_limiter',
    'limits_for_environment',

    # Predefined limits
    'RATE_LIMITS',

    # Dependencies
    'create_rate_limit_dependency',
    'general_rate_limit',
    'auth_rate_limit',
    'registration_rate_limit',
    'create_rate_limit',
    'search_rate_limit',

    # Key functions
    'user_key',
    'ip_key',
]
