"""Errors raised by the service layer and mapped to HTTP responses by the API."""


class PersistenceError(RuntimeError):
    """A Supabase read or write failed."""


class RateLimitExceeded(RuntimeError):
    """The caller has used up its request allowance for the current window."""
