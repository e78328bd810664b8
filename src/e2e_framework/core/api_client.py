"""API client for API-level tests and test-data setup.

Wraps Playwright's ``APIRequestContext`` so requests share the browser's
base URL and cookies. Built entities are sent as camelCase JSON.
"""

import logging
from typing import Any, Dict, Optional

from playwright.async_api import APIRequestContext, APIResponse
from pydantic import BaseModel

from ..config.env_config import get_base_url

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def to_request_body(data: Any) -> Any:
    """Serialize pydantic entities (or lists of them) to JSON-ready data."""
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(data, (list, tuple)):
        return [to_request_body(item) for item in data]
    return data


class ApiClient:
    """Minimal JSON API client.

    Example:
        client = ApiClient(request_context)
        response = await client.post("/api/users", TestDataFactory.create_user())
        await client.expect_success(response)
    """

    def __init__(self, request: APIRequestContext, base_url: Optional[str] = None):
        """Initialize the client.

        Args:
            request: Playwright API request context
            base_url: Base URL (environment base URL if omitted)
        """
        self.request = request
        self.base_url = (base_url or get_base_url()).rstrip("/")

    def url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    async def get(
        self, path: str, headers: Optional[Dict[str, str]] = None
    ) -> APIResponse:
        url = self.url(path)
        logger.debug(f"GET {url}")
        return await self.request.get(url, headers=headers)

    async def post(
        self,
        path: str,
        data: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> APIResponse:
        url = self.url(path)
        logger.debug(f"POST {url}")
        return await self.request.post(
            url, data=to_request_body(data), headers={**JSON_HEADERS, **(headers or {})}
        )

    async def put(
        self,
        path: str,
        data: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> APIResponse:
        url = self.url(path)
        logger.debug(f"PUT {url}")
        return await self.request.put(
            url, data=to_request_body(data), headers={**JSON_HEADERS, **(headers or {})}
        )

    async def delete(
        self, path: str, headers: Optional[Dict[str, str]] = None
    ) -> APIResponse:
        url = self.url(path)
        logger.debug(f"DELETE {url}")
        return await self.request.delete(url, headers=headers)

    async def expect_success(self, response: APIResponse) -> None:
        """Assert a 2xx status, including the response body in the message.

        Raises:
            AssertionError: If the response status is not 2xx
        """
        if not response.ok:
            body = await response.text()
            logger.error(f"{response.url} returned {response.status}: {body}")
            raise AssertionError(
                f"Expected success status, got {response.status} from {response.url}: {body}"
            )
