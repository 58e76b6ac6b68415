"""Tests for the client data layer, driven through the FastAPI test client."""

import pytest

from src.client import ApiError, BloglistClient, BlogStore, ResourceClient


@pytest.fixture
def api(client):
    return BloglistClient(client)


@pytest.fixture
def store(api):
    return BlogStore(api)


class TestBloglistClient:
    """Tests for BloglistClient."""

    def test_create_user_and_login(self, api):
        created = api.create_user("clientuser", "Client User", "clientpass")
        assert created["username"] == "clientuser"

        data = api.login("clientuser", "clientpass")
        assert data["username"] == "clientuser"
        assert data["token"]

    def test_error_carries_server_message(self, api):
        with pytest.raises(ApiError) as exc_info:
            api.create_user("shortpw", "Short", "ab")
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "password must be at least 3 characters long"

    def test_create_blog_requires_token(self, api):
        with pytest.raises(ApiError) as exc_info:
            api.create_blog({"title": "t", "author": "a", "url": "http://example.com"})
        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "token invalid or missing"

    def test_token_is_sent_after_set_token(self, api, test_user):
        api.set_token(api.login("testuser", "secretpass")["token"])
        blog = api.create_blog({"title": "t", "author": "a", "url": "http://example.com"})
        assert blog["user"]["username"] == "testuser"

        api.delete_blog(blog["id"])
        assert api.get_blogs() == []

    def test_update_unknown_blog_raises_404(self, api):
        with pytest.raises(ApiError) as exc_info:
            api.update_blog("0f8fad5b-d9cb-469f-a165-70867728950e", {"likes": 1})
        assert exc_info.value.status_code == 404

    def test_reset(self, api, test_user, initial_blogs):
        api.reset()
        assert api.get_blogs() == []
        assert api.get_users() == []


class TestResourceClient:
    """Tests for ResourceClient."""

    def test_all_loads_collection(self, client, test_user, other_user):
        users = ResourceClient(client, "/api/users")
        assert {u["username"] for u in users.all()} == {"testuser", "otheruser"}
        assert len(users.resources) == 2

    def test_create_appends_server_copy(self, client, test_user):
        users = ResourceClient(client, "/api/users")
        users.all()

        created = users.create({"username": "resourceuser", "name": "R", "password": "secret"})
        assert created["id"]
        assert users.resources[-1] == created
        assert len(users.resources) == 2

    def test_failed_create_keeps_local_list(self, client, test_user):
        users = ResourceClient(client, "/api/users")
        users.all()

        with pytest.raises(ApiError) as exc_info:
            users.create({"username": "testuser", "name": "Dup", "password": "secret"})
        assert exc_info.value.status_code == 400
        assert len(users.resources) == 1


class TestBlogStore:
    """Tests for BlogStore."""

    def test_login_loads_blogs_sorted_by_likes(self, store, initial_blogs):
        user = store.login("testuser", "secretpass")
        assert user.username == "testuser"
        likes = [blog["likes"] for blog in store.blogs]
        assert likes == sorted(likes, reverse=True)
        assert store.notification.message == "Welcome, Test User!"

    def test_failed_login_notifies_and_raises(self, store, test_user):
        with pytest.raises(ApiError):
            store.login("testuser", "wrongpass")
        assert store.user is None
        assert store.notification.kind == "error"
        assert store.notification.message == "Wrong credentials"

    def test_add_inserts_into_cache(self, store, initial_blogs):
        store.login("testuser", "secretpass")
        created = store.add("Cached blog", "Cache Author", "http://example.com/cached", likes=100)

        assert store.blogs[0]["id"] == created["id"]
        assert len(store.blogs) == len(initial_blogs) + 1
        assert store.notification.message == 'A new blog "Cached blog" by Cache Author added!'

    def test_add_with_missing_fields_keeps_cache(self, store, initial_blogs):
        store.login("testuser", "secretpass")
        with pytest.raises(ApiError):
            store.add("", "Someone", "http://example.com")
        assert len(store.blogs) == len(initial_blogs)
        assert store.notification.kind == "error"

    def test_like_updates_and_resorts(self, store, initial_blogs):
        store.login("testuser", "secretpass")
        last = store.blogs[-1]
        for _ in range(20):
            store.like(last["id"])

        liked = next(b for b in store.blogs if b["id"] == last["id"])
        assert liked["likes"] == last["likes"] + 20
        assert liked["user"]["username"] == "testuser"
        assert store.blogs[0]["id"] == last["id"]
        assert store.notification.message.startswith(f'You liked "{last["title"]}"!')

    def test_remove_by_owner(self, store, initial_blogs):
        store.login("testuser", "secretpass")
        target = store.blogs[0]
        assert store.can_remove(target)

        store.remove(target["id"])
        assert target["id"] not in [b["id"] for b in store.blogs]
        assert len(store.refresh()) == len(initial_blogs) - 1

    def test_remove_by_other_user_is_refused(self, store, other_user, initial_blogs):
        store.login("otheruser", "otherpass")
        target = store.blogs[0]
        assert not store.can_remove(target)

        with pytest.raises(ApiError) as exc_info:
            store.remove(target["id"])
        assert exc_info.value.status_code == 403
        assert target["id"] in [b["id"] for b in store.blogs]
        assert store.notification.message == "You are not authorized to delete this blog."

    def test_users_summary(self, store, other_user, initial_blogs):
        summary = {u["name"]: u["blogs"] for u in store.users()}
        assert summary == {"Test User": len(initial_blogs), "Other User": 0}

    def test_logout_clears_state(self, store, initial_blogs):
        store.login("testuser", "secretpass")
        store.logout()
        assert store.user is None
        assert store.blogs == []
        with pytest.raises(ApiError):
            store.add("t", "a", "http://example.com")

    def test_session_file_restores_login(self, api, tmp_path, initial_blogs):
        session_file = tmp_path / "session.json"
        BlogStore(api, session_file=session_file).login("testuser", "secretpass")
        assert session_file.exists()

        api.set_token(None)
        restored = BlogStore(api, session_file=session_file)
        assert restored.user.username == "testuser"
        created = restored.add("Restored", "Session", "http://example.com/restored")
        assert created["user"]["username"] == "testuser"

        restored.logout()
        assert not session_file.exists()
