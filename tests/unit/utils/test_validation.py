"""Unit tests for talk validation utilities."""
import logging
from types import SimpleNamespace

import pytest

from src.models.talk import Talk
from src.utils.validation import (
    validate_href,
    validate_img_src,
    validate_registry,
    validate_talk,
)


@pytest.fixture
def valid_talk_data():
    """Valid talk dictionary."""
    return {
        "title": "Hello World Project",
        "description": "A simple program.",
        "href": "https://www.google.com",
        "imgSrc": "/static/images/google.png",
    }


class TestValidateTalk:
    """Test validate_talk function."""

    def test_valid_talk_passes(self, valid_talk_data):
        assert validate_talk(valid_talk_data) is True

    def test_optional_fields_may_be_absent(self):
        assert validate_talk({"title": "T", "description": "D"}) is True

    def test_not_a_dict_raises_error(self):
        with pytest.raises(ValueError, match="must be a dictionary"):
            validate_talk(["title", "description"])

    @pytest.mark.parametrize("field", ["title", "description"])
    def test_missing_required_field(self, valid_talk_data, field):
        del valid_talk_data[field]
        with pytest.raises(ValueError, match=f"Missing required field: {field}"):
            validate_talk(valid_talk_data)

    def test_empty_title_raises_error(self, valid_talk_data):
        valid_talk_data["title"] = "  "
        with pytest.raises(ValueError, match="Title cannot be empty"):
            validate_talk(valid_talk_data)

    def test_non_string_description_raises_error(self, valid_talk_data):
        valid_talk_data["description"] = 42
        with pytest.raises(ValueError, match="Description cannot be empty"):
            validate_talk(valid_talk_data)

    def test_null_optional_fields_count_as_absent(self):
        data = {"title": "T", "description": "D", "href": None, "imgSrc": None}
        assert validate_talk(data) is True

    def test_unknown_field_raises_error(self, valid_talk_data):
        valid_talk_data["img_src"] = "/x.png"
        with pytest.raises(ValueError, match="Unknown talk fields: img_src"):
            validate_talk(valid_talk_data)


class TestValidateHref:
    """Test validate_href function."""

    @pytest.mark.parametrize("href", [
        "https://www.google.com",
        "http://example.com",
        "/blog/the-time-machine",
    ])
    def test_valid_links(self, href):
        assert validate_href(href) is True

    def test_empty_link_raises_error(self):
        with pytest.raises(ValueError, match="Link cannot be empty"):
            validate_href("")

    def test_none_link_raises_error(self):
        """None is absence, not a link value."""
        with pytest.raises(ValueError, match="Link cannot be empty"):
            validate_href(None)

    def test_relative_without_slash_raises_error(self):
        with pytest.raises(ValueError, match="Invalid link format"):
            validate_href("blog/post")

    def test_other_scheme_raises_error(self):
        with pytest.raises(ValueError, match="Invalid link format"):
            validate_href("ftp://example.com/file")


class TestValidateImgSrc:
    """Test validate_img_src function."""

    def test_site_relative_path(self):
        assert validate_img_src("/static/images/google.png") is True

    def test_empty_path_raises_error(self):
        with pytest.raises(ValueError, match="Image path cannot be empty"):
            validate_img_src("")

    def test_external_url_raises_error(self):
        with pytest.raises(ValueError, match="Invalid image path format"):
            validate_img_src("https://example.com/a.png")


class TestValidateRegistry:
    """Test validate_registry function."""

    def test_valid_registry(self):
        talks = [
            Talk(title="A", description="first", href="/a"),
            Talk(title="B", description="second"),
        ]
        assert validate_registry(talks) is True

    def test_invalid_talk_reports_index(self):
        bad = SimpleNamespace(
            title="B",
            to_dict=lambda: {"title": "B", "description": "second", "href": "mailto:someone@example.com"},
        )
        talks = [Talk(title="A", description="first"), bad]
        with pytest.raises(ValueError, match="Talk #1 is invalid"):
            validate_registry(talks)

    def test_duplicate_titles_allowed_but_logged(self, caplog):
        talks = [
            Talk(title="Same", description="first"),
            Talk(title="Same", description="second"),
        ]
        with caplog.at_level(logging.WARNING, logger="src.utils.validation"):
            assert validate_registry(talks) is True
        assert "Duplicate talk title" in caplog.text

    def test_empty_registry_allowed_but_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="src.utils.validation"):
            assert validate_registry([]) is True
        assert "empty" in caplog.text
