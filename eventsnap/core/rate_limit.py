"""
Request throttling for the public auth endpoints.

Guest upload admission is a separate, per-event rule enforced by the upload
service; this limiter only protects login/registration from brute force.
"""
from fastapi import Request
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from eventsnap.core.config import settings
from eventsnap.core.logging import logger

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.RATE_LIMIT_ENABLED,
    storage_uri="memory://",
    strategy="fixed-window",
)

LOGIN_RATE_LIMIT = "5/minute"
REGISTER_RATE_LIMIT = "3/minute"
REFRESH_RATE_LIMIT = "10/minute"


def get_client_ip(request: Request) -> str:
    """Address a guest upload is attributed to."""
    return get_remote_address(request)


def setup_rate_limiting(app):
    """Attach the limiter and its 429 handler to the FastAPI app."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    logger.info(f"Rate limiting configured (enabled={limiter.enabled})")
