# Environment configuration for the QuickQuack web app
from datetime import timedelta
from urllib.parse import urlparse
import logging
import os
from .error_utils import ConfigurationError

logger = logging.getLogger(__name__)

DEVELOPMENT_APP_URL = 'http://localhost:5003'

# Session cookies live for a year so users stay signed in
SESSION_LIFETIME = timedelta(days=365)

# Dashboard routes that require a signed-in user. Matched as plain prefixes of the request path.
PROTECTED_ROUTES = ("/dashboard", "/event-types", "/availability", "/settings", "/bookings")


def is_production() -> bool:
    return os.environ.get('FLASK_ENV') == 'production'


def get_app_url() -> str:
    """
    Public base URL used to build absolute redirects, read from APP_URL.

    Falls back to the local development server when unset outside production.

    Raises ConfigurationError if APP_URL is malformed, or missing in production.
    """
    raw = os.environ.get('APP_URL', '').strip().rstrip('/')
    if not raw:
        if is_production():
            raise ConfigurationError("APP_URL must be set in production")
        return DEVELOPMENT_APP_URL
    parsed = urlparse(raw)
    if parsed.scheme not in {'http', 'https'} or not parsed.netloc:
        raise ConfigurationError(f"APP_URL must be an http(s) URL with a host, got {raw!r}")
    if is_production() and 'localhost' in parsed.netloc:
        logger.warning("APP_URL is set to localhost in production: %s", raw)
    return raw


def is_protected_route(path: str) -> bool:
    return path.startswith(PROTECTED_ROUTES)
