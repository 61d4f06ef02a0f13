"""
Error types for Figmation.

Transport failures from httpx and filesystem failures (``OSError``) are not
wrapped; they reach the caller unchanged.
"""


class FigmationError(Exception):
    """Base exception for all Figmation errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(FigmationError):
    """
    Raised when required settings are missing or unreadable.

    Examples:
    - No Figma access token configured
    - No Figma file id configured
    - Malformed figmation.toml
    """

    pass


class FigmaAuthError(FigmationError):
    """
    Raised when the Figma API rejects the access token.

    Examples:
    - Expired or revoked personal access token
    - Token without read access to the file
    """

    pass
