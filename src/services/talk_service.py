"""Read-only access to the talk registry."""
import json
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from src.data.talk_data import TALK_DATA
from src.models.talk import Talk
from src.utils.exceptions import TalkNotFoundError, ValidationError

logger = logging.getLogger(__name__)


def get_talks() -> Tuple[Talk, ...]:
    """
    Return every talk in display order.

    The same immutable tuple is returned on every call.

    Returns:
        Tuple[Talk, ...]: all talks, first entry renders first
    """
    return TALK_DATA


def get_talk_by_title(title: str) -> Optional[Talk]:
    """
    Find a talk by exact title.

    Args:
        title: Talk title

    Returns:
        Talk: first matching talk, or None if no talk has that title
    """
    for talk in get_talks():
        if talk.title == title:
            return talk

    return None


def require_talk(title: str) -> Talk:
    """
    Find a talk by exact title, failing if it doesn't exist.

    Raises:
        TalkNotFoundError: If no talk has that title
    """
    talk = get_talk_by_title(title)
    if talk is None:
        raise TalkNotFoundError(f"Talk not found: {title}")
    return talk


def get_linked_talks() -> List[Talk]:
    """Talks that have a link, in display order."""
    return [talk for talk in get_talks() if talk.has_link()]


def _talks_payload(talks: Iterable[Talk]) -> Dict[str, Any]:
    return {"talks": [talk.to_dict() for talk in talks]}


def talks_to_json(talks: Optional[Iterable[Talk]] = None) -> str:
    """
    Serialize talks to a JSON string.

    Args:
        talks: Talks to serialize (defaults to the registry)

    Returns:
        str: JSON document of the form {"talks": [...]}
    """
    if talks is None:
        talks = get_talks()
    return json.dumps(_talks_payload(talks), ensure_ascii=False, indent=2)


def talks_from_json(text: str) -> Tuple[Talk, ...]:
    """
    Parse talks from a JSON string produced by talks_to_json.

    Raises:
        json.JSONDecodeError: If text isn't valid JSON
        ValidationError: If the document doesn't describe valid talks
    """
    data = json.loads(text)
    if not isinstance(data, dict) or not isinstance(data.get("talks"), list):
        raise ValidationError("Talk payload must be an object with a 'talks' list")

    try:
        talks = tuple(Talk.from_dict(item) for item in data["talks"])
    except ValueError as e:
        raise ValidationError(f"Invalid talk in payload: {e}") from e

    logger.debug("Parsed %d talks from JSON", len(talks))
    return talks
