"""Generic list-and-create client for a single REST collection."""

import logging
from typing import Any

import httpx

from src.client.api import ApiError, _error_message

logger = logging.getLogger(__name__)


class ResourceClient:
    """Keeps a local copy of a collection at ``base_url`` in sync with the server.

    ``all`` reloads the collection; ``create`` posts a new item and appends
    the server's copy to the local list.
    """

    def __init__(self, http: httpx.Client, base_url: str) -> None:
        self.http = http
        self.base_url = base_url
        self.resources: list[dict[str, Any]] = []

    def _check(self, response: httpx.Response) -> httpx.Response:
        if response.is_error:
            message = _error_message(response)
            logger.warning(f"{self.base_url} failed with {response.status_code}: {message}")
            raise ApiError(response.status_code, message)
        return response

    def all(self) -> list[dict[str, Any]]:
        self.resources = self._check(self.http.get(self.base_url)).json()
        return self.resources

    def create(self, new_object: dict[str, Any]) -> dict[str, Any]:
        created = self._check(self.http.post(self.base_url, json=new_object)).json()
        self.resources = [*self.resources, created]
        return created
