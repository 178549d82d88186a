"""Talk data model."""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.utils.validation import validate_href, validate_img_src, validate_talk


@dataclass(frozen=True)
class Talk:
    """A talk or project entry shown on the site."""

    title: str
    description: str
    href: Optional[str] = None
    img_src: Optional[str] = None

    def __post_init__(self):
        """Validate talk data after initialization."""
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValueError("Talk title cannot be empty")

        if not isinstance(self.description, str) or not self.description.strip():
            raise ValueError("Talk description cannot be empty")

        # Optional fields are either absent or a valid non-empty path
        if self.href is not None:
            if not isinstance(self.href, str) or not self.href.strip():
                raise ValueError("Talk href cannot be empty when provided")
            validate_href(self.href)

        if self.img_src is not None:
            if not isinstance(self.img_src, str) or not self.img_src.strip():
                raise ValueError("Talk image path cannot be empty when provided")
            validate_img_src(self.img_src)

    def has_link(self) -> bool:
        """Check if talk links somewhere."""
        return self.href is not None

    def has_image(self) -> bool:
        """Check if talk has an image."""
        return self.img_src is not None

    def is_external(self) -> bool:
        """Check if talk links to another site rather than a site-relative path."""
        if self.href is None:
            return False
        return self.href.startswith(("http://", "https://"))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert talk to its transport dictionary.

        Returns:
            Dict with title and description, plus href and imgSrc when present
        """
        data: Dict[str, Any] = {
            "title": self.title,
            "description": self.description,
        }
        if self.href is not None:
            data["href"] = self.href
        if self.img_src is not None:
            data["imgSrc"] = self.img_src
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Talk":
        """
        Build a talk from its transport dictionary.

        Args:
            data: Dictionary with title, description and optional href/imgSrc;
                a null optional field counts as absent

        Returns:
            Talk instance

        Raises:
            ValueError: If the dictionary fails validation
        """
        validate_talk(data)
        return cls(
            title=data["title"],
            description=data["description"],
            href=data.get("href"),
            img_src=data.get("imgSrc"),
        )
