"""Profile endpoints."""

from __future__ import annotations

import json
import urllib.error
import urllib.request

from lcli.linkedin.base import Doer, _error_context, _object, _str_of, check_error, decode_json
from lcli.model import LinkedInError, Profile, ProfileResponse

USERINFO_URL = "https://api.linkedin.com/v2/userinfo"


class ProfileService:
    """Access to LinkedIn profile endpoints."""

    def __init__(self, doer: Doer, access_token: str, userinfo_url: str = USERINFO_URL) -> None:
        self._doer = doer
        self._access_token = access_token
        self._userinfo_url = userinfo_url

    def me(self) -> Profile:
        """The authenticated user's profile from the OpenID Connect userinfo endpoint."""
        request = urllib.request.Request(
            self._userinfo_url,
            headers={"Authorization": f"Bearer {self._access_token}"},
            method="GET",
        )
        try:
            with urllib.request.urlopen(request) as resp:
                status = resp.status
                data = resp.read()
        except urllib.error.HTTPError as exc:
            status = exc.code
            data = exc.read()
            exc.close()
        except urllib.error.URLError as exc:
            raise LinkedInError(f"get my profile: {exc.reason}") from exc

        if not 200 <= status < 300:
            text = data.decode("utf-8", errors="replace")
            raise LinkedInError(f"get my profile: linkedin api {status}: {text}")

        try:
            info = _object(json.loads(data))
            return Profile(
                id=_str_of(info, "sub"),
                first_name=_str_of(info, "given_name"),
                last_name=_str_of(info, "family_name"),
                headline=_str_of(info, "name"),
                profile_picture=_str_of(info, "picture"),
                email=_str_of(info, "email"),
            )
        except ValueError as exc:
            raise ValueError(f"get my profile: decode: {exc}") from exc

    def get_by_id(self, person_id: str) -> Profile:
        """The profile of the person with the given ID."""
        with _error_context(f"get profile {person_id}"):
            resp = self._doer.do("GET", f"/people/(id:{person_id})", None)
            check_error(resp)
            raw = _object(decode_json(resp))
            return ProfileResponse.from_dict(raw).to_profile()