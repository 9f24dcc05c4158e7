"""Media upload endpoints."""

from __future__ import annotations

import urllib.error
import urllib.request
from typing import BinaryIO

from lcli.linkedin.base import Doer, _error_context, _object, _str_of, check_error, decode_json
from lcli.model import LinkedInError, MediaStatus, MediaUpload

_INIT_PATHS = {
    "IMAGE": "/images?action=initializeUpload",
    "VIDEO": "/videos?action=initializeUpload",
    "DOCUMENT": "/documents?action=initializeUpload",
}


class MediaService:
    """Access to LinkedIn media upload endpoints."""

    def __init__(self, doer: Doer) -> None:
        self._doer = doer

    def init_upload(self, owner: str, media_type: str) -> MediaUpload:
        """Initialise an upload; media_type is IMAGE, VIDEO or DOCUMENT."""
        path = _INIT_PATHS.get(media_type)
        if path is None:
            raise ValueError(f'init upload: unsupported media type "{media_type}"')
        body = {"initializeUploadRequest": {"owner": owner}}
        with _error_context("init upload"):
            resp = self._doer.do("POST", path, body)
            check_error(resp)
            value = _object(_object(decode_json(resp)).get("value"))
            media_urn = (
                _str_of(value, "image") or _str_of(value, "video") or _str_of(value, "document")
            )
            return MediaUpload(
                upload_url=_str_of(value, "uploadUrl"),
                media_urn=media_urn,
                upload_token=_str_of(value, "uploadToken"),
            )

    def upload(self, upload_url: str, data: bytes | BinaryIO) -> None:
        """PUT binary data to the upload URL."""
        payload = data.read() if hasattr(data, "read") else bytes(data)
        request = urllib.request.Request(upload_url, data=payload, method="PUT")
        try:
            with urllib.request.urlopen(request) as resp:
                if not 200 <= resp.status < 300:
                    text = resp.read().decode("utf-8", errors="replace")
                    raise LinkedInError(f"upload media: status {resp.status}: {text}")
        except urllib.error.HTTPError as exc:
            text = exc.read().decode("utf-8", errors="replace")
            raise LinkedInError(f"upload media: status {exc.code}: {text}") from exc
        except urllib.error.URLError as exc:
            raise LinkedInError(f"upload media: {exc.reason}") from exc

    def get_status(self, media_urn: str) -> MediaStatus:
        """The processing status of an uploaded media asset."""
        with _error_context(f"get media status {media_urn}"):
            resp = self._doer.do("GET", f"/assets/{media_urn}", None)
            check_error(resp)
            raw = _object(decode_json(resp))
            return MediaStatus(urn=_str_of(raw, "id"), status=_str_of(raw, "status"))