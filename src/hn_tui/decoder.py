from __future__ import annotations

from typing import Any, Dict, List, Tuple

from .datamodels import Story
from .errors import DecodeError

REQUIRED_FIELDS = {
    "by": str,
    "id": int,
    "score": int,
    "time": int,
    "title": str,
}


def _is_type(value: Any, kind: type) -> bool:
    # bool is a subclass of int, but `true` is never a valid id or score.
    if kind is int and isinstance(value, bool):
        return False
    return isinstance(value, kind)


def _required(payload: Dict[str, Any], name: str) -> Any:
    if name not in payload or payload[name] is None:
        raise DecodeError(f"missing field '{name}'")
    value = payload[name]
    kind = REQUIRED_FIELDS[name]
    if not _is_type(value, kind):
        raise DecodeError(f"field '{name}' should be {kind.__name__}, got {type(value).__name__}")
    return value


def _descendants(payload: Dict[str, Any]) -> int:
    value = payload.get("descendants")
    return value if _is_type(value, int) else 0


def _kids(payload: Dict[str, Any]) -> Tuple[int, ...]:
    value = payload.get("kids")
    if not isinstance(value, list) or not all(_is_type(k, int) for k in value):
        return ()
    return tuple(value)


def _url(payload: Dict[str, Any]) -> str:
    value = payload.get("url")
    return value if isinstance(value, str) else ""


def decode_story(payload: Any) -> Story:
    """Build a Story from an item payload.

    `by`, `id`, `score`, `time` and `title` must be present with the right
    type. `descendants`, `kids` and `url` fall back to 0, () and "" when they
    are missing, null or malformed.
    """
    if not isinstance(payload, dict):
        raise DecodeError(f"expected an object, got {type(payload).__name__}")
    return Story(
        by=_required(payload, "by"),
        id=_required(payload, "id"),
        score=_required(payload, "score"),
        time=_required(payload, "time"),
        title=_required(payload, "title"),
        descendants=_descendants(payload),
        kids=_kids(payload),
        url=_url(payload),
    )


def decode_story_ids(payload: Any) -> List[int]:
    if not isinstance(payload, list):
        raise DecodeError(f"expected a list of ids, got {type(payload).__name__}")
    for item in payload:
        if not _is_type(item, int):
            raise DecodeError(f"story id should be int, got {item!r}")
    return list(payload)
