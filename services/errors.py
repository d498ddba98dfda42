"""Exceptions for external provider calls."""


class ProviderError(Exception):
    """Raised when a places or routing provider returns an unusable response."""
