"""Configuration and credential storage under ~/.config/lcli."""

from __future__ import annotations

import dataclasses
import json
import os
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

DIR_NAME = "lcli"
CONFIG_FILE_NAME = "config.json"
TOKENS_FILE_NAME = "tokens.json"
DEFAULT_REDIRECT_URI = "http://localhost:8484/callback"
DEFAULT_API_VERSION = "202601"
EXPIRY_BUFFER = timedelta(minutes=5)

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_TIME_RE = re.compile(r"^(?P<base>.+T\d{2}:\d{2}:\d{2})(?:\.(?P<frac>\d+))?(?P<tz>Z|z|[+-]\d{2}:\d{2})?$")


@dataclass
class Config:
    """LinkedIn application credentials and API settings."""

    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = DEFAULT_REDIRECT_URI
    api_version: str = DEFAULT_API_VERSION


@dataclass
class Token:
    """OAuth 2.0 credentials obtained from LinkedIn."""

    access_token: str = ""
    refresh_token: str = ""
    expires_at: datetime = _ZERO_TIME
    scopes: list[str] = field(default_factory=list)

    def valid(self) -> bool:
        """Whether the token is present and not within five minutes of expiry."""
        if not self.access_token:
            return False
        expires = _aware(self.expires_at)
        return datetime.now(timezone.utc) + EXPIRY_BUFFER < expires


def _aware(moment: datetime) -> datetime:
    return moment if moment.tzinfo is not None else moment.replace(tzinfo=timezone.utc)


def _format_time(moment: datetime) -> str:
    text = _aware(moment).isoformat()
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def _parse_time(value: Any) -> datetime:
    if not isinstance(value, str):
        raise ValueError(f"invalid time value: {value!r}")
    match = _TIME_RE.match(value)
    if match is None:
        raise ValueError(f"invalid time value: {value!r}")
    text = match["base"]
    if match["frac"]:
        text += "." + match["frac"][:6].ljust(6, "0")
    tz = match["tz"]
    if tz:
        text += "+00:00" if tz in ("Z", "z") else tz
    return _aware(datetime.fromisoformat(text))


def config_dir() -> Path:
    """Return ~/.config/lcli, creating it if needed."""
    try:
        home = Path.home()
    except RuntimeError:
        home = Path(".")
    directory = home / ".config" / DIR_NAME
    try:
        directory.mkdir(mode=0o700, parents=True, exist_ok=True)
    except OSError:
        pass
    return directory


def _write_private(path: Path, text: str) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        handle.write(text)


def _read_json(path: Path, what: str) -> tuple[bool, Any]:
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        return False, None
    try:
        return True, json.loads(raw)
    except ValueError as exc:
        raise ValueError(f"parse {what}: {exc}") from exc


def load() -> Config:
    """Read config.json; defaults are returned when the file does not exist."""
    cfg = Config()
    found, data = _read_json(config_dir() / CONFIG_FILE_NAME, "config")
    if not found or data is None:
        return cfg
    if not isinstance(data, dict):
        raise ValueError("parse config: expected a JSON object")
    for f in dataclasses.fields(Config):
        value = data.get(f.name)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ValueError(f"parse config: {f.name} must be a string")
        setattr(cfg, f.name, value)
    return cfg


def save(cfg: Config) -> None:
    """Write the configuration to config.json."""
    text = json.dumps(dataclasses.asdict(cfg), indent=2)
    _write_private(config_dir() / CONFIG_FILE_NAME, text)


def load_token() -> Token | None:
    """Read tokens.json; None when the file does not exist."""
    found, data = _read_json(config_dir() / TOKENS_FILE_NAME, "token")
    if not found:
        return None
    if data is None:
        return Token()
    if not isinstance(data, dict):
        raise ValueError("parse token: expected a JSON object")
    tok = Token()
    try:
        for name in ("access_token", "refresh_token"):
            value = data.get(name)
            if value is not None:
                if not isinstance(value, str):
                    raise ValueError(f"{name} must be a string")
                setattr(tok, name, value)
        if data.get("expires_at") is not None:
            tok.expires_at = _parse_time(data["expires_at"])
        scopes = data.get("scopes")
        if scopes is not None:
            if not isinstance(scopes, list) or not all(isinstance(s, str) for s in scopes):
                raise ValueError("scopes must be a list of strings")
            tok.scopes = list(scopes)
    except ValueError as exc:
        raise ValueError(f"parse token: {exc}") from exc
    return tok


def save_token(tok: Token) -> None:
    """Write the OAuth token to tokens.json."""
    payload = {
        "access_token": tok.access_token,
        "refresh_token": tok.refresh_token,
        "expires_at": _format_time(tok.expires_at),
        "scopes": list(tok.scopes),
    }
    _write_private(config_dir() / TOKENS_FILE_NAME, json.dumps(payload, indent=2))