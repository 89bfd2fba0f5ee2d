from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx
import pydantic

from .exceptions import (
    AuthenticationError,
    CivicMatchError,
    ConnectionError,
    DirectoryError,
    NotFoundError,
    ServerError,
    ValidationError,
)
from .models import Authority

logger = logging.getLogger(__name__)


class DirectoryClient:
    """Fetches authority directory snapshots from a remote configuration service."""

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:3000",
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self._timeout = timeout
        self._client = client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "DirectoryClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __call__(self) -> List[Authority]:
        return self.list_authorities()

    def list_authorities(
        self, category: Optional[str] = None, state: Optional[str] = None
    ) -> List[Authority]:
        params: Dict[str, str] = {}
        if category:
            params["category"] = category
        if state:
            params["state"] = state
        response = self._request("GET", "/authorities", params=params or None)
        data = response.json()
        if not isinstance(data, list):
            raise DirectoryError("expected a JSON list of authorities")
        try:
            authorities = [Authority.model_validate(item) for item in data]
        except pydantic.ValidationError as exc:
            raise DirectoryError(str(exc)) from exc
        logger.info("Fetched %d authorities from %s", len(authorities), self.base_url)
        return authorities

    def get_authority(self, authority_id: str) -> Authority:
        response = self._request("GET", f"/authorities/{authority_id}")
        try:
            return Authority.model_validate(response.json())
        except pydantic.ValidationError as exc:
            raise DirectoryError(str(exc)) from exc

    def _headers(self) -> Dict[str, str]:
        headers = {}
        if self.api_key:
            headers["x-api-key"] = self.api_key
        return headers

    def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        url = f"{self.base_url}{path}"
        try:
            response = self._client.request(
                method,
                url,
                headers=self._headers(),
                json=json,
                params=params,
            )
        except httpx.RequestError as exc:
            logger.warning("Directory request %s %s failed: %s", method, url, exc)
            raise ConnectionError(str(exc)) from exc

        if 200 <= response.status_code < 300:
            return response

        message = response.text or response.reason_phrase
        logger.warning(
            "Directory request %s %s returned %d", method, url, response.status_code
        )
        self._raise_for_status(response.status_code, message)
        return response

    @staticmethod
    def _raise_for_status(status_code: int, message: str) -> None:
        if status_code == 400:
            raise ValidationError(message)
        if status_code == 401:
            raise AuthenticationError(message)
        if status_code == 404:
            raise NotFoundError(message)
        if status_code >= 500:
            raise ServerError(message)
        raise CivicMatchError(message)
