"""Client-side blog cache kept in sync with the API after each mutation."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from src.client.api import ApiError, BloglistClient
from src.schemas.user import LoginResponse

logger = logging.getLogger(__name__)


@dataclass
class Notification:
    """Last message to show the user."""

    message: str
    kind: str = "success"  # 'success' or 'error'


def _by_likes(blogs: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return sorted(blogs, key=lambda blog: blog.get("likes", 0), reverse=True)


def _owner_id(blog: dict[str, Any]) -> str | None:
    owner = blog.get("user")
    if isinstance(owner, dict):
        return owner.get("id")
    return owner


class BlogStore:
    """Local cache of blogs, ordered by likes, plus the logged-in user.

    When ``session_file`` is given the logged-in user is saved there on
    login and restored on construction, so a new process stays logged in.
    """

    def __init__(self, client: BloglistClient, session_file: Path | None = None) -> None:
        self.client = client
        self.session_file = session_file
        self.blogs: list[dict[str, Any]] = []
        self.user: LoginResponse | None = None
        self.notification: Notification | None = None
        self._restore_session()

    def _restore_session(self) -> None:
        if self.session_file is None or not self.session_file.exists():
            return
        self.user = LoginResponse.model_validate_json(self.session_file.read_text())
        self.client.set_token(self.user.token)
        logger.info(f"Restored session for {self.user.username}")

    def _notify(self, message: str, kind: str = "success") -> None:
        self.notification = Notification(message, kind)

    def _find(self, blog_id: str) -> dict[str, Any]:
        for blog in self.blogs:
            if blog["id"] == blog_id:
                return blog
        raise KeyError(blog_id)

    # Session

    def login(self, username: str, password: str) -> LoginResponse:
        try:
            data = self.client.login(username, password)
        except ApiError:
            self._notify("Wrong credentials", "error")
            raise

        self.user = LoginResponse.model_validate(data)
        self.client.set_token(self.user.token)
        if self.session_file is not None:
            self.session_file.write_text(self.user.model_dump_json())
        self._notify(f"Welcome, {self.user.name}!")
        self.refresh()
        return self.user

    def logout(self) -> None:
        if self.session_file is not None:
            self.session_file.unlink(missing_ok=True)
        self.user = None
        self.blogs = []
        self.client.set_token(None)
        self._notify("Logged out successfully.")

    # Blogs

    def refresh(self) -> list[dict[str, Any]]:
        """Reload every blog from the server."""
        self.blogs = _by_likes(self.client.get_blogs())
        return self.blogs

    def add(self, title: str, author: str, url: str, likes: int | None = None) -> dict[str, Any]:
        payload: dict[str, Any] = {"title": title, "author": author, "url": url}
        if likes is not None:
            payload["likes"] = likes
        try:
            created = self.client.create_blog(payload)
        except ApiError as e:
            self._notify(f"Error creating blog: {e.message}", "error")
            raise

        self.blogs = _by_likes([*self.blogs, created])
        self._notify(f'A new blog "{created["title"]}" by {created["author"]} added!')
        return created

    def like(self, blog_id: str) -> dict[str, Any]:
        blog = self._find(blog_id)
        payload = {
            "title": blog["title"],
            "author": blog["author"],
            "url": blog["url"],
            "likes": blog["likes"] + 1,
            "user": _owner_id(blog),
        }
        try:
            updated = self.client.update_blog(blog_id, payload)
        except ApiError as e:
            self._notify(f"Error liking blog: {e.message}", "error")
            raise

        self.blogs = _by_likes([updated if b["id"] == blog_id else b for b in self.blogs])
        self._notify(f'You liked "{updated["title"]}"! Likes: {updated["likes"]}')
        return updated

    def remove(self, blog_id: str) -> None:
        blog = self._find(blog_id)
        try:
            self.client.delete_blog(blog_id)
        except ApiError as e:
            if e.status_code == 404:
                self.blogs = [b for b in self.blogs if b["id"] != blog_id]
                self._notify(f'Blog "{blog["title"]}" has already been removed from the server.', "error")
                return
            if e.status_code in (401, 403):
                self._notify("You are not authorized to delete this blog.", "error")
            else:
                self._notify(f"Error deleting blog: {e.message}", "error")
            raise

        self.blogs = [b for b in self.blogs if b["id"] != blog_id]
        self._notify(f'Blog "{blog["title"]}" successfully removed!')

    def can_remove(self, blog: dict[str, Any]) -> bool:
        """Only the blog's creator is offered removal."""
        owner = blog.get("user")
        if self.user is None or not isinstance(owner, dict):
            return False
        return owner.get("username") == self.user.username

    # Users

    def users(self) -> list[dict[str, Any]]:
        """Name and number of blogs created for every user."""
        return [
            {"id": user["id"], "name": user["name"], "blogs": len(user.get("blogs", []))}
            for user in self.client.get_users()
        ]
