"""Analytics endpoints."""

from __future__ import annotations

from typing import Any

from lcli.linkedin.base import Doer, _error_context, _int_of, _list, _object, _query_escape, check_error, decode_json


class AnalyticsService:
    """Access to LinkedIn analytics endpoints."""

    def __init__(self, doer: Doer) -> None:
        self._doer = doer

    def post_analytics(self, post_urn: str) -> dict[str, Any]:
        """Engagement metrics for a single post, such as impressionCount or likeCount."""
        path = (
            "/organizationalEntityShareStatistics?q=organizationalEntity&shares[0]="
            + _query_escape(post_urn)
        )
        with _error_context(f"post analytics for {post_urn}"):
            resp = self._doer.do("GET", path, None)
            check_error(resp)
            elements = _list(_object(decode_json(resp)).get("elements"))
            if not elements:
                return {}
            return dict(_object(_object(elements[0]).get("totalShareStatistics")))

    def profile_views(self) -> int:
        """The number of profile views for the authenticated user."""
        with _error_context("profile views"):
            resp = self._doer.do("GET", "/networkSizes/me?edgeType=CompanyFollowedByMember", None)
            check_error(resp)
            return _int_of(_object(decode_json(resp)), "firstDegreeSize")