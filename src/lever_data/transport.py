"""HTTP transport: builds Lever requests on an httpx client and decodes responses."""

import logging
from typing import Any

import httpx

from lever_data.config import ClientConfig
from lever_data.endpoints.base import BaseRequest
from lever_data.endpoints.multipart import empty_form
from lever_data.errors import LeverAPIError

logger = logging.getLogger(__name__)


class Transport:
    """
    Sends BaseRequest objects to the Lever API.
    Non-2xx responses raise LeverAPIError; network failures propagate as httpx.RequestError.
    """

    DEFAULT_HEADERS = {
        "Accept": "application/json",
    }

    def __init__(self, client: httpx.Client, config: ClientConfig):
        self._client = client
        self._config = config
        self._auth = httpx.BasicAuth(config.api_key, "") if config.api_key else None

    @property
    def base_url(self) -> str:
        return self._config.base_url.rstrip("/")

    def url_for(self, request: BaseRequest) -> str:
        return f"{self.base_url}/{request.path}"

    def _headers(self) -> dict[str, str]:
        headers = dict(self.DEFAULT_HEADERS)
        headers["User-Agent"] = self._config.user_agent
        headers.update(self._config.headers)
        return headers

    def send(self, request: BaseRequest) -> httpx.Response:
        """Send request and return the response without checking its status."""
        url = self.url_for(request)
        kwargs: dict[str, Any] = {
            "params": request.query_params(),
            "headers": self._headers(),
        }
        if self._auth is not None:
            kwargs["auth"] = self._auth

        body = request.body()
        if body is not None:
            if body.json is not None:
                kwargs["json"] = body.json
            elif body.parts:
                kwargs["files"] = body.parts
            elif body.parts is not None:
                content, content_type = empty_form()
                kwargs["content"] = content
                kwargs["headers"]["Content-Type"] = content_type

        resp = self._client.request(request.method, url, **kwargs)
        logger.debug("%s %s -> %d", request.method, resp.request.url, resp.status_code)
        return resp

    def raise_for_status(self, resp: httpx.Response) -> None:
        """Raise LeverAPIError when resp is not a 2xx response."""
        if resp.is_success:
            return
        logger.warning(
            "Lever API error: %s %s returned %d",
            resp.request.method,
            resp.request.url,
            resp.status_code,
        )
        code = resp.reason_phrase
        message = f"Unexpected HTTP response status code: {resp.status_code}"
        try:
            payload = resp.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and ("code" in payload or "message" in payload):
            code = str(payload.get("code") or code)
            message = str(payload.get("message") or "")
        raise LeverAPIError(resp.status_code, code, message, response=resp)

    def execute(self, request: BaseRequest) -> tuple[dict[str, Any], httpx.Response]:
        """Send request and return (decoded JSON body, response). An empty body decodes to {}."""
        resp = self.send(request)
        self.raise_for_status(resp)
        if not resp.content.strip():
            return {}, resp
        try:
            payload = resp.json()
        except ValueError as e:
            raise LeverAPIError(
                resp.status_code,
                "invalid_response",
                f"Response body is not JSON: {e}",
                response=resp,
            ) from e
        if not isinstance(payload, dict):
            raise LeverAPIError(
                resp.status_code,
                "invalid_response",
                f"Expected a JSON object, got {type(payload).__name__}",
                response=resp,
            )
        return payload, resp
