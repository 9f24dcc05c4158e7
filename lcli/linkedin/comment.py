"""Comment endpoints."""

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
    _str_of,
    check_error,
    decode_json,
)
from lcli.model import Comment, CommentList, CreateCommentRequest, Paging


def _to_comment(raw: Mapping[str, Any]) -> Comment:
    return Comment(
        id=_str_of(raw, "$URN"),
        author=_str_of(raw, "actor"),
        text=_str_of(_object(raw.get("message")), "text"),
        created_at=_from_millis(_int_of(raw, "created")),
        parent_comment=_str_of(raw, "parentComment"),
    )


class CommentService:
    """Access to LinkedIn comment endpoints."""

    def __init__(self, doer: Doer) -> None:
        self._doer = doer

    def create(self, req: CreateCommentRequest) -> Comment:
        """Add a new comment to a post."""
        path = f"/socialActions/{_path_escape(req.post_urn)}/comments"
        body = {"actor": "me", "message": {"text": req.text}}
        with _error_context(f"create comment on {req.post_urn}"):
            resp = self._doer.do("POST", path, body)
            check_error(resp)
            return _to_comment(_object(decode_json(resp)))

    def list(self, post_urn: str, start: int, count: int) -> CommentList:
        """Comments on a post, one page at a time."""
        path = f"/socialActions/{_path_escape(post_urn)}/comments?start={start}&count={count}"
        with _error_context(f"list comments on {post_urn}"):
            resp = self._doer.do("GET", path, None)
            check_error(resp)
            raw = _object(decode_json(resp))
            return CommentList(
                elements=[_to_comment(_object(item)) for item in _list(raw.get("elements"))],
                paging=Paging.from_dict(raw.get("paging")),
            )

    def delete(self, comment_urn: str) -> None:
        """Remove a comment by its URN."""
        escaped = _path_escape(comment_urn)
        path = f"/socialActions/{escaped}/comments/{escaped}"
        with _error_context(f"delete comment {comment_urn}"):
            check_error(self._doer.do("DELETE", path, None))