"""Exceptions raised by clearwrite."""

from typing import Optional


class ClearwriteError(Exception):
    """Base class for clearwrite errors."""


class MissingAPIKeyError(ClearwriteError, ValueError):
    """No API key could be resolved from the environment or the session store."""

    def __init__(self, env_var: str = "GEMINI_API_KEY"):
        super().__init__(
            f"Gemini API key not found. Please set {env_var} in your environment "
            "or save it to the session store."
        )
        self.env_var = env_var


class RewriteAPIError(ClearwriteError):
    """The rewrite request failed at the network or HTTP level."""

    def __init__(self, message: str, status: Optional[int] = None):
        if status is not None:
            message = f"Gemini API error: HTTP {status} - {message}"
        else:
            message = f"Gemini API error: {message}"
        super().__init__(message)
        self.status = status


class UnexpectedResponseError(ClearwriteError):
    """The API answered, but not with the expected candidate/content/parts shape."""
