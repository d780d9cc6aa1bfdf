"""Tests for title parsing."""
import pytest
from pydantic import ValidationError as PydanticValidationError

from prtitlecheck.models import ParsedTitle
from prtitlecheck.parser import ParserOptions, parse_title


def test_type_and_subject():
    parsed = parse_title("feat: Add feature")
    assert parsed.type == "feat"
    assert parsed.scope is None
    assert parsed.subject == " Add feature"
    assert parsed.breaking is False


def test_subject_without_space():
    parsed = parse_title("fix:Fix bug")
    assert parsed.type == "fix"
    assert parsed.subject == "Fix bug"


def test_breaking_marker():
    parsed = parse_title("feat!: Drop support")
    assert parsed.type == "feat"
    assert parsed.breaking is True
    assert parsed.subject == " Drop support"


def test_scope():
    parsed = parse_title("fix(core): Bar")
    assert parsed.type == "fix"
    assert parsed.scope == "core"
    assert parsed.subject == " Bar"


def test_multiple_scopes_are_kept_raw():
    parsed = parse_title("fix(core, e2e)!: Bar")
    assert parsed.scope == "core, e2e"
    assert parsed.breaking is True


def test_no_colon():
    assert parse_title("Fix bug") == ParsedTitle()


def test_empty_subject():
    assert parse_title("fix:").subject == ""
    assert parse_title("fix: ").subject == " "


def test_empty_title():
    assert parse_title("") == ParsedTitle()


def test_only_first_line_is_parsed():
    parsed = parse_title("fix: first line\nsecond: line")
    assert parsed.type == "fix"
    assert parsed.subject == " first line"


def test_parsed_title_is_immutable():
    parsed = parse_title("fix: Bar")
    with pytest.raises(PydanticValidationError):
        parsed.type = "feat"


def test_custom_header_pattern():
    options = ParserOptions(
        header_pattern=r"^\[(\w+)\] (.*)$",
        header_pattern_correspondence=["type", "subject"],
    )
    parsed = parse_title("[fix] Repair the thing", options)
    assert parsed.type == "fix"
    assert parsed.subject == "Repair the thing"
    assert parsed.scope is None


def test_invalid_header_pattern():
    with pytest.raises(PydanticValidationError):
        ParserOptions(header_pattern="(unclosed")


def test_correspondence_with_unknown_field():
    with pytest.raises(PydanticValidationError):
        ParserOptions(header_pattern_correspondence=["type", "ticket"])


def test_correspondence_longer_than_groups():
    with pytest.raises(PydanticValidationError):
        ParserOptions(
            header_pattern=r"^(\w+): .*$",
            header_pattern_correspondence=["type", "subject"],
        )
