"""
Rate limiting FastAPI dependencies.
"""

from typing import AsyncGenerator, Optional, Callable
from fastapi import Request, HTTPException, status

from app.infrastructure.auth.dependencies import CurrentUserId
from .limiter import RateLimit, RateLimitStatus, get_rate_limiter


def create_rate_limit_dependency(
    limit_name: str = 'general',
    rate_limit: Optional[RateLimit] = None,
    key_func: Optional[Callable[[Request], str]] = None,
    error_message: str = "Rate limit exceeded",
    per_user: bool = False,
    skip_successful: bool = False,
    when: Optional[Callable[[Request], bool]] = None
):
    """
    Create a FastAPI dependency for rate limiting.

    The limit is looked up by name on the application's limiter unless an
    explicit rate_limit is given.

    Args:
        per_user: Resolve the authenticated user first, so user-based key
            functions can see it on request.state
        skip_successful: Give the request back when the endpoint completes
            without raising, so only failed attempts are counted
        when: Only count requests for which this returns True

    Usage:
        login_limit = create_rate_limit_dependency('auth', skip_successful=True)

        @router.post("/login", dependencies=[Depends(login_limit)])
        async def login(...):
            ...
    """

    def check(request: Request) -> Optional[RateLimitStatus]:
        if when is not None and not when(request):
            return None

        limiter = get_rate_limiter(request)
        limit_config = rate_limit or limiter.limits[limit_name]
        status_result = limiter.check_rate_limit(request, limit_config, key_func)

        if status_result is not None and status_result.exceeded:
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=error_message,
                headers=status_result.to_headers()
            )

        return status_result

    if skip_successful:
        async def refunding_rate_limit_dependency(
            request: Request
        ) -> AsyncGenerator[Optional[RateLimitStatus], None]:
            status_result = check(request)
            yield status_result
            # Only reached when the endpoint did not raise
            if status_result is not None:
                get_rate_limiter(request).release(request, key_func)

        return refunding_rate_limit_dependency

    if per_user:
        async def user_rate_limit_dependency(
            request: Request, user_id: CurrentUserId
        ) -> Optional[RateLimitStatus]:
            return check(request)

        return user_rate_limit_dependency

    async def rate_limit_dependency(request: Request) -> Optional[RateLimitStatus]:
        return check(request)

    return rate_limit_dependency


# Key generation functions
def client_ip(request: Request) -> str:
    return request.client.host if request.client else 'unknown'


def ip_key(request: Request) -> str:
    """Generate rate limit key based on client IP and path."""
    return f"rate_limit:ip:{client_ip(request)}:{request.url.path}"


def user_key(request: Request) -> str:
    """Generate rate limit key based on authenticated user, falling back to IP."""
    user_id = getattr(request.state, 'user_id', None)
    if user_id:
        return f"rate_limit:user:{user_id}"
    return f"rate_limit:ip:{client_ip(request)}"


def has_search_term(request: Request) -> bool:
    return bool(request.query_params.get('search', '').strip())


# Predefined dependencies
general_rate_limit = create_rate_limit_dependency(
    'general',
    key_func=lambda request: f"rate_limit:ip:{client_ip(request)}:general",
    error_message="Too many requests from this IP, please try again in 15 minutes."
)

auth_rate_limit = create_rate_limit_dependency(
    'auth',
    key_func=ip_key,
    error_message="Too many authentication attempts, please try again in 15 minutes.",
    skip_successful=True
)

registration_rate_limit = create_rate_limit_dependency(
    'registration',
    key_func=ip_key,
    error_message="Too many registration attempts, please try again in 1 hour."
)

create_rate_limit = create_rate_limit_dependency(
    'crud',
    key_func=lambda request: f"{user_key(request)}:crud",
    error_message="Too many API requests, please try again in 15 minutes.",
    per_user=True
)

search_rate_limit = create_rate_limit_dependency(
    'search',
    key_func=lambda request: f"{user_key(request)}:search",
    error_message="Too many search requests, please try again in 10 minutes.",
    per_user=True,
    when=has_search_term
)
