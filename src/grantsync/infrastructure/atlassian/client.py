"""Atlassian Cloud REST client over httpx."""

import logging
from typing import Any

import httpx

from grantsync.domain.exceptions import GatewayError

logger = logging.getLogger(__name__)


class AtlassianAPIError(GatewayError):
    """HTTP or transport failure talking to Atlassian Cloud."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    @property
    def not_found(self) -> bool:
        return self.status_code == 404


class AtlassianClient:
    """Thin JSON client with basic auth. Raises AtlassianAPIError on any failure."""

    def __init__(
        self,
        base_url: str,
        username: str = "",
        token: str = "",
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._http = httpx.Client(
            base_url=base_url.rstrip("/"),
            auth=(username, token) if username else None,
            timeout=timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self._json(self._request("GET", path, params=params))

    def post(self, path: str, payload: dict[str, Any]) -> Any:
        return self._json(self._request("POST", path, json=payload))

    def delete(self, path: str, params: dict[str, Any] | None = None) -> None:
        self._request("DELETE", path, params=params)

    def close(self) -> None:
        self._http.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug("%s %s", method, path)
        try:
            resp = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise AtlassianAPIError(f"{method} {path} failed: {e}") from e
        if resp.is_error:
            raise AtlassianAPIError(
                f"{method} {path} returned {resp.status_code}: {resp.text[:200]}",
                status_code=resp.status_code,
            )
        return resp

    @staticmethod
    def _json(resp: httpx.Response) -> Any:
        if not resp.content:
            return None
        return resp.json()
