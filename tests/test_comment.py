import json

import pytest

from lcli.linkedin.base import Response
from lcli.linkedin.comment import CommentService
from lcli.model import CreateCommentRequest, ForbiddenError, NotFoundError, ServerError


class MockDoer:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def do(self, method, path, body=None):
        self.calls.append((method, path, body))
        if not self.responses:
            raise RuntimeError(f"no more mock responses (call {len(self.calls) - 1})")
        status, payload = self.responses.pop(0)
        return Response(status, json.dumps(payload).encode())


def test_comment_create_success():
    doer = MockDoer((200, {
        "$URN": "urn:li:comment:456",
        "actor": "me",
        "created": 1700000000000,
        "message": {"text": "Nice!"},
    }))
    comment = CommentService(doer).create(CreateCommentRequest(post_urn="urn:li:share:123", text="Nice!"))
    assert comment.id == "urn:li:comment:456"
    assert comment.text == "Nice!"
    assert comment.author == "me"
    assert comment.created_at.timestamp() * 1000 == 1700000000000
    method, path, body = doer.calls[0]
    assert method == "POST"
    assert path == "/socialActions/urn:li:share:123/comments"
    assert body == {"actor": "me", "message": {"text": "Nice!"}}


def test_comment_create_error():
    doer = MockDoer((403, {"status": 403, "message": "forbidden"}))
    with pytest.raises(ForbiddenError):
        CommentService(doer).create(CreateCommentRequest(post_urn="urn", text="hi"))


def test_comment_list_success():
    doer = MockDoer((200, {
        "elements": [
            {"$URN": "c1", "actor": "a1", "message": {"text": "Hello"}},
            {"$URN": "c2", "actor": "a2", "message": {"text": "World"}},
        ],
        "paging": {"count": 10, "start": 0, "total": 2},
    }))
    result = CommentService(doer).list("urn:li:share:123", 0, 10)
    assert len(result.elements) == 2
    assert [c.text for c in result.elements] == ["Hello", "World"]
    assert result.elements[0].created_at is None
    assert result.paging.total == 2
    assert doer.calls[0][1].endswith("?start=0&count=10")


def test_comment_list_error():
    doer = MockDoer((500, {"status": 500, "message": "error"}))
    with pytest.raises(ServerError):
        CommentService(doer).list("urn", 0, 10)


def test_comment_delete_success():
    doer = MockDoer((204, None))
    CommentService(doer).delete("urn:li:comment:456")
    method, path, _ = doer.calls[0]
    assert method == "DELETE"
    assert path == "/socialActions/urn:li:comment:456/comments/urn:li:comment:456"


def test_comment_delete_error():
    doer = MockDoer((404, {"status": 404, "message": "not found"}))
    with pytest.raises(NotFoundError):
        CommentService(doer).delete("urn")