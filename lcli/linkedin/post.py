"""Post endpoints."""

from __future__ import annotations

from typing import Any, Mapping

from lcli.linkedin.base import (
    Doer,
    _error_context,
    _from_millis,
    _int_of,
    _list,
    _object,
    _path_escape,
    _query_escape,
    _str_of,
    check_error,
    decode_json,
)
from lcli.model import CreatePostRequest, Paging, Post, PostList


def _to_post(raw: Mapping[str, Any]) -> Post:
    content = raw.get("content")
    has_media = content is not None and _object(content).get("media") is not None
    return Post(
        id=_str_of(raw, "id"),
        author=_str_of(raw, "author"),
        text=_str_of(raw, "commentary"),
        visibility=_str_of(raw, "visibility"),
        lifecycle_state=_str_of(raw, "lifecycleState"),
        media_category="IMAGE" if has_media else "NONE",
        created_at=_from_millis(_int_of(raw, "createdAt")),
    )


class PostService:
    """Access to LinkedIn post endpoints."""

    def __init__(self, doer: Doer) -> None:
        self._doer = doer

    def create(self, req: CreatePostRequest) -> Post:
        """Publish a new post."""
        author = req.author_urn or "me"
        body: dict[str, Any] = {
            "author": author,
            "commentary": req.text,
            "visibility": req.visibility,
            "distribution": {"feedDistribution": "MAIN_FEED"},
            "lifecycleState": "PUBLISHED",
        }
        if req.media_urn:
            media: dict[str, Any] = {"id": req.media_urn}
            if req.media_title:
                media["title"] = req.media_title
            body["content"] = {"media": media}

        with _error_context("create post"):
            resp = self._doer.do("POST", "/posts", body)
            check_error(resp)
            # A 201 reply carries the new ID in a header and may have no body.
            post_id = resp.header("X-Restli-Id")
            if post_id:
                return Post(
                    id=post_id,
                    author=author,
                    text=req.text,
                    visibility=req.visibility,
                    lifecycle_state="PUBLISHED",
                )
            return _to_post(_object(decode_json(resp)))

    def get(self, urn: str) -> Post:
        """A single post by its URN."""
        with _error_context(f"get post {urn}"):
            resp = self._doer.do("GET", f"/posts/{_path_escape(urn)}", None)
            check_error(resp)
            return _to_post(_object(decode_json(resp)))

    def delete(self, urn: str) -> None:
        """Remove a post by its URN."""
        with _error_context(f"delete post {urn}"):
            check_error(self._doer.do("DELETE", f"/posts/{_path_escape(urn)}", None))

    def list_by_author(self, author_urn: str, start: int, count: int) -> PostList:
        """Posts by an author, one page at a time."""
        path = f"/posts?author={_query_escape(author_urn)}&q=author&start={int(start)}&count={int(count)}"
        with _error_context(f"list posts by {author_urn}"):
            resp = self._doer.do("GET", path, None)
            check_error(resp)
            raw = _object(decode_json(resp))
            return PostList(
                elements=[_to_post(_object(item)) for item in _list(raw.get("elements"))],
                paging=Paging.from_dict(raw.get("paging")),
            )