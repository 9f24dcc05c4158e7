"""Domain types for the LinkedIn REST API."""

from __future__ import annotations

import enum
from dataclasses import MISSING, dataclass, field
from datetime import datetime
from typing import Any, Mapping


def _field(name: str, default: Any = MISSING, *, factory: Any = MISSING, omitempty: bool = False) -> Any:
    """Declare a dataclass field with its serialised name."""
    return field(
        default=default,
        default_factory=factory,
        metadata={"json": name, "omitempty": omitempty},
    )


def _int(data: Mapping[str, Any], key: str) -> int:
    return int(data.get(key) or 0)


def _str(data: Mapping[str, Any], key: str) -> str:
    return str(data.get(key) or "")


# --- errors -----------------------------------------------------------------


class LinkedInError(Exception):
    """Base class for every error raised while talking to LinkedIn."""


class UnauthorizedError(LinkedInError):
    """A 401 response: the token is invalid or expired."""


class ForbiddenError(LinkedInError):
    """A 403 response: the token lacks the needed permissions."""


class NotFoundError(LinkedInError):
    """A 404 response, or a lookup that matched nothing."""


class RateLimitedError(LinkedInError):
    """A 429 response: too many requests."""


class ServerError(LinkedInError):
    """A 5xx response from LinkedIn."""


_SENTINELS: dict[int, type[LinkedInError]] = {
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    429: RateLimitedError,
}


def _sentinel_for(status_code: int) -> type[LinkedInError] | None:
    sentinel = _SENTINELS.get(status_code)
    if sentinel is None and status_code >= 500:
        return ServerError
    return sentinel


class APIError(LinkedInError):
    """A structured error returned by the LinkedIn API.

    Constructing an APIError yields an instance that is also an instance of
    the error class matching its status code (NotFoundError for 404, ...).
    """

    def __new__(cls, status_code: int, message: str = "", code: str = "", trace_id: str = ""):
        if cls is APIError:
            sentinel = _sentinel_for(status_code)
            if sentinel is not None:
                cls = _API_ERROR_CLASSES[sentinel]
        return super().__new__(cls, status_code, message, code, trace_id)

    def __init__(self, status_code: int, message: str = "", code: str = "", trace_id: str = "") -> None:
        super().__init__(status_code, message, code, trace_id)
        self.status_code = status_code
        self.message = message
        self.code = code
        self.trace_id = trace_id

    @property
    def sentinel(self) -> type[LinkedInError] | None:
        """The error class that classifies this status code, if any."""
        return _sentinel_for(self.status_code)

    def __str__(self) -> str:
        if self.code:
            return f"linkedin api {self.status_code} ({self.code}): {self.message}"
        return f"linkedin api {self.status_code}: {self.message}"


class _UnauthorizedAPIError(APIError, UnauthorizedError):
    pass


class _ForbiddenAPIError(APIError, ForbiddenError):
    pass


class _NotFoundAPIError(APIError, NotFoundError):
    pass


class _RateLimitedAPIError(APIError, RateLimitedError):
    pass


class _ServerAPIError(APIError, ServerError):
    pass


_API_ERROR_CLASSES: dict[type[LinkedInError], type[APIError]] = {
    UnauthorizedError: _UnauthorizedAPIError,
    ForbiddenError: _ForbiddenAPIError,
    NotFoundError: _NotFoundAPIError,
    RateLimitedError: _RateLimitedAPIError,
    ServerError: _ServerAPIError,
}


def api_error(status_code: int, message: str = "", code: str = "", trace_id: str = "") -> APIError:
    """Build the APIError for a status code, classified by that code."""
    return APIError(status_code, message, code, trace_id)


# --- paging -----------------------------------------------------------------


@dataclass
class Paging:
    """Pagination metadata for list responses."""

    count: int = _field("count", 0)
    start: int = _field("start", 0)
    total: int = _field("total", 0)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Paging | None:
        """Build from a decoded JSON object; None stays None."""
        if data is None:
            return None
        return cls(count=_int(data, "count"), start=_int(data, "start"), total=_int(data, "total"))


# --- comments ---------------------------------------------------------------


@dataclass
class Comment:
    """A comment on a LinkedIn post."""

    id: str = _field("id", "")
    author: str = _field("author", "")
    text: str = _field("text", "")
    created_at: datetime | None = _field("createdAt", None)
    parent_comment: str = _field("parentComment", "", omitempty=True)


@dataclass
class CreateCommentRequest:
    """The fields needed to create a comment."""

    post_urn: str = _field("postUrn", "")
    text: str = _field("text", "")


@dataclass
class CommentList:
    """A paginated list of comments."""

    elements: list[Comment] = _field("elements", factory=list)
    paging: Paging | None = _field("paging", None, omitempty=True)


# --- media ------------------------------------------------------------------


@dataclass
class MediaUploadRequest:
    """Parameters for initialising a media upload."""

    owner: str = _field("owner", "")
    type: str = _field("type", "")


@dataclass
class MediaUpload:
    """Upload details returned after initialising an upload."""

    upload_url: str = _field("uploadUrl", "")
    media_urn: str = _field("mediaUrn", "")
    upload_token: str = _field("uploadToken", "")


@dataclass
class MediaStatus:
    """Processing status of an uploaded media asset."""

    urn: str = _field("urn", "")
    status: str = _field("status", "")


# --- organizations ----------------------------------------------------------


@dataclass
class Organization:
    """A LinkedIn company or organization page."""

    id: int = _field("id", 0)
    name: str = _field("name", "")
    vanity_name: str = _field("vanityName", "")
    description: str = _field("description", "")
    logo_url: str = _field("logoUrl", "")
    website: str = _field("website", "")
    follower_count: int = _field("followerCount", 0)


@dataclass
class OrgFollowerStats:
    """Follower statistics for an organization."""

    organic_count: int = _field("organicCount", 0)
    paid_count: int = _field("paidCount", 0)
    total_count: int = _field("totalCount", 0)
    by_function: dict[str, int] = _field("byFunction", factory=dict)
    by_seniority: dict[str, int] = _field("bySeniority", factory=dict)


@dataclass
class OrgPageStats:
    """Page view statistics for an organization."""

    views: int = _field("views", 0)
    unique_visitors: int = _field("uniqueVisitors", 0)
    clicks: int = _field("clicks", 0)
    period: str = _field("period", "")


# --- posts ------------------------------------------------------------------


@dataclass
class Post:
    """A LinkedIn post (share)."""

    id: str = _field("id", "")
    author: str = _field("author", "")
    text: str = _field("text", "")
    media_category: str = _field("mediaCategory", "")
    visibility: str = _field("visibility", "")
    created_at: datetime | None = _field("createdAt", None)
    lifecycle_state: str = _field("lifecycleState", "")


@dataclass
class CreatePostRequest:
    """The fields needed to create a post."""

    text: str = _field("text", "")
    visibility: str = _field("visibility", "")
    media_urn: str = _field("mediaUrn", "", omitempty=True)
    media_title: str = _field("mediaTitle", "", omitempty=True)
    author_urn: str = _field("authorUrn", "", omitempty=True)


@dataclass
class PostList:
    """A paginated list of posts."""

    elements: list[Post] = _field("elements", factory=list)
    paging: Paging | None = _field("paging", None, omitempty=True)


# --- profiles ---------------------------------------------------------------


@dataclass
class Profile:
    """A LinkedIn user profile with its essential fields."""

    id: str = _field("id", "")
    first_name: str = _field("firstName", "")
    last_name: str = _field("lastName", "")
    headline: str = _field("headline", "")
    vanity: str = _field("vanityName", "")
    profile_picture: str = _field("profilePicture", "")
    email: str = _field("email", "")


@dataclass
class ProfileResponse:
    """The raw profile payload, which uses localized field names."""

    id: str = ""
    localized_first_name: str = ""
    localized_last_name: str = ""
    localized_headline: str = ""
    vanity_name: str = ""
    display_image: str = ""
    picture_url: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProfileResponse:
        """Build from a decoded JSON object."""
        picture = data.get("profilePicture") or {}
        resolved = picture.get("displayImage~") or {}
        elements = resolved.get("elements") or []
        picture_url = ""
        if elements:
            identifiers = elements[0].get("identifiers") or []
            if identifiers:
                picture_url = _str(identifiers[0], "identifier")
        return cls(
            id=_str(data, "id"),
            localized_first_name=_str(data, "localizedFirstName"),
            localized_last_name=_str(data, "localizedLastName"),
            localized_headline=_str(data, "localizedHeadline"),
            vanity_name=_str(data, "vanityName"),
            display_image=_str(picture, "displayImage"),
            picture_url=picture_url,
        )

    def to_profile(self) -> Profile:
        """Convert into a clean Profile."""
        return Profile(
            id=self.id,
            first_name=self.localized_first_name,
            last_name=self.localized_last_name,
            headline=self.localized_headline,
            vanity=self.vanity_name,
            profile_picture=self.picture_url,
        )


# --- reactions --------------------------------------------------------------


class ReactionType(str, enum.Enum):
    """The kind of reaction on a LinkedIn post."""

    LIKE = "LIKE"
    CELEBRATE = "CELEBRATE"
    SUPPORT = "SUPPORT"
    LOVE = "LOVE"
    INSIGHTFUL = "INSIGHTFUL"
    FUNNY = "FUNNY"


@dataclass
class Reaction:
    """A single reaction on a LinkedIn entity."""

    actor: str = _field("actor", "")
    type: ReactionType | str = _field("type", "")
    created_at: datetime | None = _field("createdAt", None)


@dataclass
class ReactionSummary:
    """Aggregated reaction counts for a post."""

    post_urn: str = _field("postUrn", "")
    total_count: int = _field("totalCount", 0)
    by_type: dict[ReactionType, int] = _field("byType", factory=dict)


@dataclass
class ReactionList:
    """A paginated list of reactions."""

    elements: list[Reaction] = _field("elements", factory=list)
    paging: Paging | None = _field("paging", None, omitempty=True)