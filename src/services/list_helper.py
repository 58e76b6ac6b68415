"""Aggregations over lists of blogs.

Every function accepts blog-like records: mappings such as decoded JSON
payloads, or objects exposing ``title``, ``author`` and ``likes``
attributes (models and response schemas).
"""

from collections import Counter, defaultdict
from collections.abc import Iterable, Mapping
from typing import Any


def _field(blog: Any, name: str) -> Any:
    if isinstance(blog, Mapping):
        return blog.get(name)
    return getattr(blog, name, None)


def _likes(blog: Any) -> int:
    return _field(blog, "likes") or 0


def total_likes(blogs: Iterable[Any]) -> int:
    """Sum of likes across all blogs; 0 for an empty list."""
    return sum(_likes(blog) for blog in blogs)


def favorite_blog(blogs: Iterable[Any]) -> dict[str, Any] | None:
    """The blog with the most likes as ``{title, author, likes}``.

    The first blog in list order wins a tie. Returns None for an empty list.
    """
    favorite = None
    for blog in blogs:
        if favorite is None or _likes(blog) > _likes(favorite):
            favorite = blog
    if favorite is None:
        return None
    return {
        "title": _field(favorite, "title"),
        "author": _field(favorite, "author"),
        "likes": _likes(favorite),
    }


def most_blogs(blogs: Iterable[Any]) -> dict[str, Any] | None:
    """The author with the most blogs as ``{author, blogs}``.

    Ties go to whichever author is counted first. Returns None for an empty list.
    """
    counts = Counter(_field(blog, "author") for blog in blogs)
    if not counts:
        return None
    author, count = counts.most_common(1)[0]
    return {"author": author, "blogs": count}


def most_likes(blogs: Iterable[Any]) -> dict[str, Any] | None:
    """The author whose blogs have the most likes in total as ``{author, likes}``.

    Ties go to whichever author is counted first. Returns None for an empty list.
    """
    likes_by_author: defaultdict[Any, int] = defaultdict(int)
    for blog in blogs:
        likes_by_author[_field(blog, "author")] += _likes(blog)
    if not likes_by_author:
        return None
    author = max(likes_by_author, key=likes_by_author.__getitem__)
    return {"author": author, "likes": likes_by_author[author]}
