"""Typed Python client for the Lever Data API."""

__version__ = "0.1.0"

from lever_data.client import LeverClient  # noqa: E402
from lever_data.config import ClientConfig  # noqa: E402
from lever_data.errors import (  # noqa: E402
    ConfigurationError,
    ExpansionError,
    LeverAPIError,
    LeverError,
)

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "ExpansionError",
    "LeverAPIError",
    "LeverClient",
    "LeverError",
    "__version__",
]
