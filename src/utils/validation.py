"""Data validation utilities."""
import logging
from typing import Any, Dict, Iterable

logger = logging.getLogger(__name__)

ALLOWED_HREF_PREFIXES = ("http://", "https://", "/")
ALLOWED_IMG_SRC_PREFIXES = ("/",)
TALK_FIELDS = ("title", "description", "href", "imgSrc")


def validate_talk(talk_data: Dict[str, Any]) -> bool:
    """
    Validate talk data dictionary against all rules.

    Args:
        talk_data: Dictionary containing talk fields

    Returns:
        True if valid

    Raises:
        ValueError: If validation fails with detailed message
    """
    if not isinstance(talk_data, dict):
        raise ValueError("Talk data must be a dictionary")

    for field in ("title", "description"):
        if field not in talk_data:
            raise ValueError(f"Missing required field: {field}")

    unknown = [key for key in talk_data if key not in TALK_FIELDS]
    if unknown:
        raise ValueError(f"Unknown talk fields: {', '.join(sorted(unknown))}")

    title = talk_data["title"]
    if not isinstance(title, str) or not title.strip():
        raise ValueError("Title cannot be empty")

    description = talk_data["description"]
    if not isinstance(description, str) or not description.strip():
        raise ValueError("Description cannot be empty")

    # null optional fields count as absent
    if talk_data.get("href") is not None:
        validate_href(talk_data["href"])

    if talk_data.get("imgSrc") is not None:
        validate_img_src(talk_data["imgSrc"])

    return True


def validate_href(href: Any) -> bool:
    """
    Validate a talk link: absolute http(s) URL or site-relative path.

    Raises:
        ValueError: If link is empty or has an unsupported form
    """
    if not isinstance(href, str) or not href.strip():
        raise ValueError("Link cannot be empty")

    if not href.startswith(ALLOWED_HREF_PREFIXES):
        raise ValueError(f"Invalid link format: {href}")

    return True


def validate_img_src(img_src: Any) -> bool:
    """
    Validate a talk image path, which must be site-relative.

    Raises:
        ValueError: If image path is empty or not site-relative
    """
    if not isinstance(img_src, str) or not img_src.strip():
        raise ValueError("Image path cannot be empty")

    if not img_src.startswith(ALLOWED_IMG_SRC_PREFIXES):
        raise ValueError(f"Invalid image path format: {img_src}")

    return True


def validate_registry(talks: Iterable[Any]) -> bool:
    """
    Validate every talk in a registry.

    Duplicate titles and an empty registry are allowed but logged.

    Args:
        talks: Talk objects in display order

    Returns:
        True if all talks are valid

    Raises:
        ValueError: If any talk fails validation
    """
    seen = set()
    count = 0
    for index, talk in enumerate(talks):
        try:
            validate_talk(talk.to_dict())
        except ValueError as e:
            raise ValueError(f"Talk #{index} is invalid: {e}") from e

        if talk.title in seen:
            logger.warning("Duplicate talk title in registry: %s", talk.title)
        seen.add(talk.title)
        count += 1

    if count == 0:
        logger.warning("Talk registry is empty")

    return True
