# rounds.py
from __future__ import annotations

"""
rounds.py
=========

Does: Load the game's round catalog (data/rounds.json) and resolve sub-round
      targets by id.
Returns:
  - load_rounds() -> tuple[Round, ...]
  - get_target(sub_round_id) -> Target
  - iter_targets() -> Iterator[Target]
Used by: The play loop and the demo CLI.
"""

import logging
from typing import Any, Iterator, Literal, NamedTuple

from promptify_scoring.engine.general.utils.load_config import load_config

logger = logging.getLogger(__name__)

Kind = Literal["phrase", "art"]
KINDS: frozenset[str] = frozenset({"phrase", "art"})
ROUNDS_FILE = "rounds"

__all__ = [
    "Kind",
    "Round",
    "Target",
    "UnknownTargetError",
    "get_target",
    "iter_targets",
    "load_rounds",
]


class UnknownTargetError(KeyError):
    """Raise when a sub-round id is not in the catalog."""


class Target(NamedTuple):
    id: str
    round_id: int
    kind: Kind
    text: str


class Round(NamedTuple):
    id: int
    title: str
    description: str
    kind: Kind
    targets: tuple[Target, ...]


def _validate_rounds(data: dict[str, Any]) -> dict[str, Any]:
    """Check the catalog shape; raising here surfaces as ConfigParseError."""
    rounds = data.get("rounds")
    if not isinstance(rounds, list) or not rounds:
        raise ValueError("'rounds' must be a non-empty list")

    seen: set[str] = set()
    for r in rounds:
        if r.get("kind") not in KINDS:
            raise ValueError(f"round {r.get('id')!r}: unknown kind {r.get('kind')!r}")
        for sub in r.get("sub_rounds") or []:
            sid = sub.get("id")
            if not isinstance(sid, str) or not isinstance(sub.get("target"), str):
                raise ValueError(f"round {r.get('id')!r}: sub-round needs str 'id' and 'target'")
            if sid in seen:
                raise ValueError(f"duplicate sub-round id {sid!r}")
            seen.add(sid)
    return data


def load_rounds() -> tuple[Round, ...]:
    """Does: Parse the catalog into Round/Target tuples (cached by load_config)."""
    data = load_config(ROUNDS_FILE, mode="validated_dict", validator=_validate_rounds)
    out: list[Round] = []
    for r in data["rounds"]:
        kind = r["kind"]
        targets = tuple(
            Target(id=sub["id"], round_id=int(r["id"]), kind=kind, text=sub["target"])
            for sub in r.get("sub_rounds") or []
        )
        out.append(
            Round(
                id=int(r["id"]),
                title=str(r.get("title", "")),
                description=str(r.get("description", "")),
                kind=kind,
                targets=targets,
            )
        )
    logger.debug("Loaded %d rounds", len(out))
    return tuple(out)


def iter_targets() -> Iterator[Target]:
    for r in load_rounds():
        yield from r.targets


def get_target(sub_round_id: str) -> Target:
    """Does: Look up a target by sub-round id (case-insensitive).
    Raises: UnknownTargetError when absent.
    """
    wanted = (sub_round_id or "").strip().lower()
    for target in iter_targets():
        if target.id.lower() == wanted:
            return target
    raise UnknownTargetError(sub_round_id)
