# Redirect validation used by the sign-in flow to prevent open redirects.
from typing import Iterable, Optional, Tuple

DEFAULT_REDIRECT_PATH = "/dashboard"

# Internal route roots a user may be sent back to after signing in.
# Extending this requires a code change, not runtime configuration.
ALLOWED_REDIRECT_PREFIXES = (
    "/dashboard",
    "/event-types",
    "/availability",
    "/settings",
    "/bookings",
    "/appearance",
    "/links",
    "/emails",
    "/payments",
)


class RedirectPolicy:
    """
    Vets an untrusted "where to go next" value against an allowlist of internal path prefixes.

    Any candidate that fails a check is replaced by the default path, so the caller can always
    redirect to whatever comes back. Never raises.

    Rejected, in order:
        1. Missing or empty candidate
        2. Candidate not starting with '/' (absolute URLs with a scheme, bare hosts)
        3. Protocol-relative candidate starting with '//'
        4. Any backslash, since some browsers normalize '\\' to '/'
        5. No allowlisted prefix matches (plain prefix match, '/dashboardXYZ' passes)
    """

    def __init__(self, allowed_prefixes: Iterable[str] = ALLOWED_REDIRECT_PREFIXES):
        # Copy into a tuple so the policy cannot be changed after construction
        self._allowed_prefixes = tuple(allowed_prefixes)

    @property
    def get_allowed_prefixes(self) -> Tuple[str, ...]:
        return self._allowed_prefixes

    def is_allowed(self, candidate: Optional[str]) -> bool:
        if not candidate or not isinstance(candidate, str):
            return False
        if not candidate.startswith("/"):
            return False
        # Browsers resolve //evil.com against the current scheme
        if candidate.startswith("//"):
            return False
        if "\\" in candidate:
            return False
        return candidate.startswith(self._allowed_prefixes)

    def validate(self, candidate: Optional[str], default_path: str = DEFAULT_REDIRECT_PATH) -> str:
        """
        Returns the candidate unchanged if it is safe, otherwise default_path.

        default_path is trusted and is not re-validated.
        """
        if self.is_allowed(candidate):
            return candidate
        return default_path

    def __repr__(self):
        return f"{type(self).__name__}({self._allowed_prefixes!r})"


# Process-wide policy built from the static allowlist
DEFAULT_POLICY = RedirectPolicy(ALLOWED_REDIRECT_PREFIXES)


def validate_redirect_url(redirect_to: Optional[str], default_path: str = DEFAULT_REDIRECT_PATH) -> str:
    return DEFAULT_POLICY.validate(redirect_to, default_path)
