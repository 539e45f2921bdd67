"""Exceptions raised by the bracket engine and its loaders."""


class BracketError(Exception):
    """Base exception for all bracket engine errors."""
    pass


class ConfigurationError(BracketError):
    """Raised when tournament data cannot form a 64-team bracket.

    This is fatal: a caller must not propagate picks or validate a
    submission against data that failed to build.
    """
    pass


class SiteConfigError(BracketError):
    """Raised when the site configuration cannot be fetched or parsed."""
    def __init__(self, source: str, reason: str = None):
        self.source = source
        self.reason = reason
        msg = f"Could not load site config from {source}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
