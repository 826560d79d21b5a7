"""Exceptions raised by the Lever client."""

from typing import Optional

import httpx


class LeverError(Exception):
    """Base class for every error raised by lever_data."""


class ConfigurationError(LeverError):
    """Client configuration is missing or malformed."""


class ExpansionError(LeverError):
    """
    An expandable field matched neither an ID nor an embedded record.
    field is the dotted path of the failing field, e.g. 'applications[0].posting'.
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"cannot resolve '{field}': {reason}")

    def within(self, parent: str) -> "ExpansionError":
        """Same error, with the path of the enclosing field prepended."""
        return ExpansionError(f"{parent}.{self.field}", self.reason)


class LeverAPIError(LeverError):
    """Non-2xx response from the Lever API."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        response: Optional[httpx.Response] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.response = response
        super().__init__(f"LeverAPIError: {status_code:03d} {code}: {message}")
