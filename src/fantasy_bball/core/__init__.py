"""Core infrastructure: configuration and the shared HTTP client."""

from .config import Settings, get_settings
from .http import ExternalAPIError, InvalidContentsError, JsonFetcher, TransportError

__all__ = [
    "Settings",
    "get_settings",
    "ExternalAPIError",
    "InvalidContentsError",
    "JsonFetcher",
    "TransportError",
]
