"""Split a pull request title into its conventional commit parts."""
import re
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .models import ParsedTitle

# <type>(<scope>)[!]:<subject>
# The subject keeps the whitespace following the colon.
DEFAULT_HEADER_PATTERN = r"^(\w*)(?:\(([^)]*)\))?(!)?:(.*)$"
DEFAULT_HEADER_CORRESPONDENCE = ["type", "scope", "breaking", "subject"]

FIELD_NAMES = {"type", "scope", "breaking", "subject"}


class ParserOptions(BaseModel):
    """How a title header is matched and which group holds which field."""

    header_pattern: str = Field(
        default=DEFAULT_HEADER_PATTERN,
        description="Regular expression matched against the first line of the title",
    )
    header_pattern_correspondence: List[str] = Field(
        default_factory=lambda: list(DEFAULT_HEADER_CORRESPONDENCE),
        description="Field name for each capture group, in group order",
    )

    @field_validator("header_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"Invalid header pattern {value!r}: {e}") from e
        return value

    @field_validator("header_pattern_correspondence")
    @classmethod
    def _check_correspondence(cls, value: List[str]) -> List[str]:
        unknown = [name for name in value if name not in FIELD_NAMES]
        if unknown:
            raise ValueError(f"Unknown header fields: {', '.join(unknown)}")
        return value

    @model_validator(mode="after")
    def _check_group_count(self) -> "ParserOptions":
        groups = re.compile(self.header_pattern).groups
        if groups < len(self.header_pattern_correspondence):
            raise ValueError(
                f"Header pattern has {groups} groups but "
                f"{len(self.header_pattern_correspondence)} fields were mapped"
            )
        return self


def parse_title(title: str, options: Optional[ParserOptions] = None) -> ParsedTitle:
    """Parse a title; anything that doesn't look like a header yields empty fields."""
    options = options or ParserOptions()
    header = title.split("\n", 1)[0] if title else ""

    match = re.match(options.header_pattern, header)
    if not match:
        return ParsedTitle()

    fields = {}
    for index, name in enumerate(options.header_pattern_correspondence, 1):
        fields[name] = match.group(index)

    return ParsedTitle(
        type=fields.get("type") or None,
        scope=fields.get("scope") or None,
        subject=fields.get("subject"),
        breaking=bool(fields.get("breaking")),
    )
