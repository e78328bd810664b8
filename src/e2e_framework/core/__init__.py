"""Core clients."""

from .api_client import ApiClient, to_request_body

__all__ = ["ApiClient", "to_request_body"]
