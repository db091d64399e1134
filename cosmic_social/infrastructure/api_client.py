# cosmic_social/infrastructure/api_client.py
import json
import logging
from typing import Any

import httpx
from pydantic import BaseModel


class ApiResponse:
    def __init__(self, success, data=None, status_code=None, error=None):
        self.success = success
        self.data = data
        self.status_code = status_code
        self.error = error


class ApiError(Exception):
    def __init__(self, status_code: int | None, detail: str | None = None):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Social API request failed ({status_code}): {detail}")


class ApiClient:
    """Thin async wrapper around the social API.

    The base URL and transport are injected, so each client is self-contained
    and tests can swap in ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: logging.Logger | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.logger = logger or logging.getLogger("ApiClient")
        self.client = httpx.AsyncClient(
            base_url=self.base_url, timeout=timeout, transport=transport
        )

    async def close(self) -> None:
        await self.client.aclose()
        self.logger.info("Closed social API client")

    def _handle_response(self, response: httpx.Response) -> ApiResponse:
        if 200 <= response.status_code < 300:
            try:
                data = response.json() if response.content else {}
            except json.JSONDecodeError:
                data = {}
            return ApiResponse(True, data=data, status_code=response.status_code)
        return ApiResponse(False, status_code=response.status_code, error=response.text)

    async def request(self, method: str, endpoint: str, **kwargs: Any) -> ApiResponse:
        try:
            response = await self.client.request(method, endpoint, **kwargs)
        except httpx.HTTPError as e:
            self.logger.error(f"{method} {endpoint} failed: {e!s}")
            raise
        api_response = self._handle_response(response)
        if not api_response.success:
            self.logger.warning(
                f"{method} {endpoint} returned {api_response.status_code}: {api_response.error}"
            )
        return api_response

    async def request_data(self, method: str, endpoint: str, **kwargs: Any) -> Any:
        api_response = await self.request(method, endpoint, **kwargs)
        if not api_response.success:
            raise ApiError(api_response.status_code, api_response.error)
        return api_response.data


def to_payload(model: BaseModel) -> dict[str, Any]:
    """Serialize an entity the way the social API expects it (camelCase JSON)."""
    return model.model_dump(by_alias=True, mode="json", exclude_none=True)
