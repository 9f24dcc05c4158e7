import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from lcli.linkedin.base import Response
from lcli.linkedin.profile import ProfileService
from lcli.model import LinkedInError, NotFoundError


class MockDoer:
    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []

    def do(self, method, path, body=None):
        self.calls.append((method, path, body))
        if not self.responses:
            raise RuntimeError(f"no more mock responses (call {len(self.calls) - 1})")
        status, payload = self.responses.pop(0)
        return Response(status_code=status, body=json.dumps(payload).encode())


def _serve(status, payload, seen):
    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):
            seen.append(self.headers.get("Authorization"))
            data = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
            self.send_response(status)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(data)))
            self.end_headers()
            self.wfile.write(data)

        def log_message(self, *args):
            pass

    server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    return server, f"http://127.0.0.1:{server.server_address[1]}/userinfo"


@pytest.fixture
def userinfo_server():
    servers = []

    def start(status, payload, seen):
        server, url = _serve(status, payload, seen)
        servers.append(server)
        return url

    yield start
    for server in servers:
        server.shutdown()
        server.server_close()


def test_me_success(userinfo_server):
    seen = []
    url = userinfo_server(
        200,
        {
            "sub": "abc123",
            "given_name": "John",
            "family_name": "Doe",
            "name": "John Doe",
            "picture": "https://example.com/photo.jpg",
            "email": "john@example.com",
            "email_verified": True,
        },
        seen,
    )
    svc = ProfileService(MockDoer(), "token", url)
    profile = svc.me()
    assert seen == ["Bearer token"]
    assert profile.id == "abc123"
    assert profile.first_name == "John"
    assert profile.last_name == "Doe"
    assert profile.email == "john@example.com"
    assert profile.headline == "John Doe"
    assert profile.profile_picture == "https://example.com/photo.jpg"


def test_me_non_200(userinfo_server):
    url = userinfo_server(403, b'{"error": "forbidden"}', [])
    svc = ProfileService(MockDoer(), "token", url)
    with pytest.raises(LinkedInError) as info:
        svc.me()
    assert "403" in str(info.value)
    assert "forbidden" in str(info.value)


def test_me_bad_json(userinfo_server):
    url = userinfo_server(200, b"not json", [])
    svc = ProfileService(MockDoer(), "token", url)
    with pytest.raises(ValueError, match="get my profile: decode"):
        svc.me()


def test_get_by_id_success():
    doer = MockDoer([
        (200, {
            "id": "person123",
            "localizedFirstName": "Alice",
            "localizedLastName": "Jones",
            "localizedHeadline": "Designer",
            "vanityName": "alicejones",
        }),
    ])
    svc = ProfileService(doer, "")
    profile = svc.get_by_id("person123")
    assert profile.id == "person123"
    assert profile.first_name == "Alice"
    assert profile.last_name == "Jones"
    assert profile.headline == "Designer"
    assert profile.vanity == "alicejones"
    assert doer.calls[0][:2] == ("GET", "/people/(id:person123)")


def test_get_by_id_error():
    doer = MockDoer([(404, {"status": 404, "message": "not found"})])
    svc = ProfileService(doer, "")
    with pytest.raises(NotFoundError):
        svc.get_by_id("nonexistent")