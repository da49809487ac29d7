import hmac
import re

# Header names (lowercase) that must be redacted in logs
_SENSITIVE_HEADER_PATTERNS = [
    "authorization",
    "x-api-key",
    "x-token",
    "cookie",
    "set-cookie",
    "proxy-authorization",
]

# Query parameters carrying secrets
_SENSITIVE_QUERY_PARAMS = frozenset({"token"})

# Compiled regex for matching sensitive header names (case-insensitive)
_SENSITIVE_RE = re.compile(
    "|".join(re.escape(p) for p in _SENSITIVE_HEADER_PATTERNS),
    re.IGNORECASE,
)


_REDACT_PREFIX_LEN = 4


def _redact_value(value: str) -> str:
    """Keep first few chars of a secret for identification, mask the rest."""
    if len(value) <= _REDACT_PREFIX_LEN:
        return "[REDACTED]"
    return value[:_REDACT_PREFIX_LEN] + "...[REDACTED]"


def redact_headers(headers: dict) -> dict:
    """Return a copy of *headers* with sensitive values partially masked.

    Shows the first 4 characters of the value for identification, then
    replaces the rest with '[REDACTED]'.  Matching is case-insensitive
    against a known list of auth-related header names.
    The original dict is **never** mutated.
    """
    redacted = {}
    for key, value in headers.items():
        if _SENSITIVE_RE.fullmatch(key):
            redacted[key] = _redact_value(str(value))
        else:
            redacted[key] = value
    return redacted


def redact_query_params(params: dict) -> dict:
    """Return a copy of *params* with the ``token`` parameter masked."""
    return {
        key: _redact_value(str(value)) if key.lower() in _SENSITIVE_QUERY_PARAMS else value
        for key, value in params.items()
    }


class TokenGate:
    """Shared-secret check for the health endpoint.

    Built once from configuration. With no expected token the gate is
    open and every caller passes. Otherwise the supplied value must match
    exactly; a missing value never matches.
    """

    def __init__(self, expected_token: str | None = None):
        self._expected = expected_token or None

    @property
    def is_enabled(self) -> bool:
        return self._expected is not None

    def check(self, supplied: str | None) -> bool:
        if self._expected is None:
            return True
        if supplied is None:
            return False
        return hmac.compare_digest(supplied.encode("utf-8"), self._expected.encode("utf-8"))
