import pytest

from lcli.model import (
    APIError,
    ForbiddenError,
    LinkedInError,
    NotFoundError,
    Paging,
    ProfileResponse,
    RateLimitedError,
    ReactionType,
    ServerError,
    UnauthorizedError,
    api_error,
)

SENTINELS = [UnauthorizedError, ForbiddenError, NotFoundError, RateLimitedError, ServerError]


@pytest.mark.parametrize(
    "err, want",
    [
        (APIError(403, code="ACCESS_DENIED", message="no access"), "linkedin api 403 (ACCESS_DENIED): no access"),
        (APIError(500, message="internal error"), "linkedin api 500: internal error"),
        (APIError(400), "linkedin api 400: "),
    ],
)
def test_api_error_str(err, want):
    assert str(err) == want


@pytest.mark.parametrize(
    "status, sentinel",
    [
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (429, RateLimitedError),
        (500, ServerError),
        (502, ServerError),
    ],
)
def test_api_error_sentinels(status, sentinel):
    err = APIError(status, "test")
    assert isinstance(err, sentinel)
    assert isinstance(err, APIError)
    assert err.sentinel is sentinel
    with pytest.raises(sentinel):
        raise err


def test_api_error_unknown_status_matches_no_sentinel():
    err = APIError(418, "teapot")
    assert not any(isinstance(err, s) for s in SENTINELS)
    assert err.sentinel is None
    assert isinstance(err, LinkedInError)


def test_api_error_factory_keeps_fields():
    err = api_error(404, "missing", "NOT_FOUND", "trace-1")
    assert isinstance(err, NotFoundError)
    assert (err.status_code, err.message, err.code, err.trace_id) == (404, "missing", "NOT_FOUND", "trace-1")
    assert str(err) == "linkedin api 404 (NOT_FOUND): missing"


def test_paging_from_dict():
    assert Paging.from_dict({"count": 10, "start": 0, "total": 2}) == Paging(count=10, start=0, total=2)
    assert Paging.from_dict({}) == Paging()
    assert Paging.from_dict(None) is None


def test_profile_response_with_picture():
    raw = ProfileResponse.from_dict(
        {
            "id": "person123",
            "localizedFirstName": "Alice",
            "localizedLastName": "Jones",
            "localizedHeadline": "Designer",
            "vanityName": "alicejones",
            "profilePicture": {
                "displayImage": "urn:li:digitalmediaAsset:1",
                "displayImage~": {
                    "elements": [
                        {"identifiers": [{"identifier": "https://example.com/a.jpg"}]},
                        {"identifiers": [{"identifier": "https://example.com/b.jpg"}]},
                    ]
                },
            },
        }
    )
    profile = raw.to_profile()
    assert profile.id == "person123"
    assert profile.first_name == "Alice"
    assert profile.last_name == "Jones"
    assert profile.headline == "Designer"
    assert profile.vanity == "alicejones"
    assert profile.profile_picture == "https://example.com/a.jpg"
    assert profile.email == ""


def test_profile_response_without_resolved_picture():
    raw = ProfileResponse.from_dict({"id": "p1", "profilePicture": {"displayImage": "urn:x"}})
    assert raw.to_profile().profile_picture == ""
    assert raw.display_image == "urn:x"


def test_reaction_type_values():
    assert ReactionType("LIKE") is ReactionType.LIKE
    assert ReactionType.CELEBRATE == "CELEBRATE"
    with pytest.raises(ValueError):
        ReactionType("DISLIKE")