"""HTTP client for the bloglist REST API."""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-2xx response from the API, carrying the server's error text."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return response.reason_phrase


class BloglistClient:
    """Thin wrapper over the blog, user and login endpoints.

    The underlying ``httpx.Client`` is injected, so a FastAPI ``TestClient``
    works as well as a client pointed at a running server.
    """

    def __init__(self, http: httpx.Client) -> None:
        self.http = http
        self._token: str | None = None

    @classmethod
    def connect(cls, base_url: str, timeout: float = 10.0) -> "BloglistClient":
        return cls(httpx.Client(base_url=base_url, timeout=timeout))

    def set_token(self, token: str | None) -> None:
        self._token = token

    def _headers(self) -> dict[str, str]:
        if self._token is None:
            return {}
        return {"Authorization": f"Bearer {self._token}"}

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        response = self.http.request(method, path, headers=self._headers(), **kwargs)
        if response.is_error:
            message = _error_message(response)
            logger.warning(f"{method} {path} failed with {response.status_code}: {message}")
            raise ApiError(response.status_code, message)
        return response

    # Auth

    def login(self, username: str, password: str) -> dict[str, Any]:
        """Log in; returns ``{token, username, name}``."""
        return self._request("POST", "/api/login", json={"username": username, "password": password}).json()

    # Blogs

    def get_blogs(self) -> list[dict[str, Any]]:
        return self._request("GET", "/api/blogs").json()

    def create_blog(self, blog: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", "/api/blogs", json=blog).json()

    def update_blog(self, blog_id: str, blog: dict[str, Any]) -> dict[str, Any]:
        return self._request("PUT", f"/api/blogs/{blog_id}", json=blog).json()

    def delete_blog(self, blog_id: str) -> None:
        self._request("DELETE", f"/api/blogs/{blog_id}")

    # Users

    def get_users(self) -> list[dict[str, Any]]:
        return self._request("GET", "/api/users").json()

    def create_user(self, username: str, name: str | None, password: str) -> dict[str, Any]:
        return self._request(
            "POST", "/api/users", json={"username": username, "name": name, "password": password}
        ).json()

    def reset(self) -> None:
        """Wipe the server's data (testing router only)."""
        self._request("POST", "/api/testing/reset")
