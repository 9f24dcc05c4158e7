"""Reaction endpoints."""

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
from lcli.model import Paging, Reaction, ReactionList, ReactionType


def _reaction_type(text: str) -> ReactionType | str:
    try:
        return ReactionType(text)
    except ValueError:
        return text


def _to_reaction(raw: Mapping[str, Any]) -> Reaction:
    return Reaction(
        actor=_str_of(raw, "actor"),
        type=_reaction_type(_str_of(raw, "reactionType")),
        created_at=_from_millis(_int_of(raw, "created")),
    )


class ReactionService:
    """Access to LinkedIn reaction endpoints."""

    def __init__(self, doer: Doer) -> None:
        self._doer = doer

    def react(self, actor_urn: str, entity_urn: str, reaction: ReactionType | str) -> None:
        """Add a reaction to a LinkedIn entity."""
        kind = reaction.value if isinstance(reaction, ReactionType) else str(reaction)
        body = {"root": entity_urn, "reactionType": kind, "actor": actor_urn}
        with _error_context(f"react on {entity_urn}"):
            check_error(self._doer.do("POST", "/reactions", body))

    def unreact(self, actor_urn: str, entity_urn: str) -> None:
        """Remove the actor's reaction from a LinkedIn entity."""
        path = f"/reactions/(actor:{_path_escape(actor_urn)},entity:{_path_escape(entity_urn)})"
        with _error_context(f"unreact on {entity_urn}"):
            check_error(self._doer.do("DELETE", path, None))

    def list(self, entity_urn: str, start: int, count: int) -> ReactionList:
        """Reactions on an entity, one page at a time."""
        path = f"/reactions/(entity:{_path_escape(entity_urn)})?start={int(start)}&count={int(count)}"
        with _error_context(f"list reactions on {entity_urn}"):
            resp = self._doer.do("GET", path, None)
            check_error(resp)
            raw = _object(decode_json(resp))
            return ReactionList(
                elements=[_to_reaction(_object(item)) for item in _list(raw.get("elements"))],
                paging=Paging.from_dict(raw.get("paging")),
            )