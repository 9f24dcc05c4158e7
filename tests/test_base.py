import json

import pytest

from lcli.linkedin.base import Response, check_error, decode_json
from lcli.model import APIError, NotFoundError, ServerError, UnauthorizedError


def test_check_error_accepts_success():
    for status in (200, 201, 204, 299):
        assert check_error(Response(status, b"")) is None


def test_check_error_structured_body():
    body = json.dumps({"status": 404, "message": "gone", "serviceErrorCode": "E1", "traceId": "t1"}).encode()
    with pytest.raises(NotFoundError) as info:
        check_error(Response(404, body))
    err = info.value
    assert isinstance(err, APIError)
    assert err.message == "gone"
    assert err.code == "E1"
    assert err.trace_id == "t1"


def test_check_error_plain_text_body_becomes_message():
    with pytest.raises(ServerError) as info:
        check_error(Response(503, b"upstream broke"))
    assert info.value.message == "upstream broke"
    assert info.value.status_code == 503


def test_check_error_body_status_overrides_response_status():
    body = json.dumps({"status": 401, "message": "expired"}).encode()
    with pytest.raises(UnauthorizedError) as info:
        check_error(Response(400, body))
    assert info.value.status_code == 401


def test_check_error_mistyped_fields_fall_back_to_raw_text():
    raw = json.dumps({"status": 500, "serviceErrorCode": 65600}).encode()
    with pytest.raises(APIError) as info:
        check_error(Response(500, raw))
    assert info.value.message == raw.decode()


def test_decode_json_round_trip():
    payload = {"a": [1, 2], "b": {"c": "d"}}
    assert decode_json(Response(200, json.dumps(payload).encode())) == payload


def test_decode_json_rejects_invalid_body():
    with pytest.raises(ValueError, match="decode json"):
        decode_json(Response(200, b"{broken"))


def test_response_header_is_case_insensitive():
    resp = Response(201, b"", {"X-Restli-Id": "urn:li:share:1"})
    assert resp.header("x-restli-id") == "urn:li:share:1"
    assert resp.header("missing") == ""