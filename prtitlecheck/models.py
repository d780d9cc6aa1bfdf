"""Shared models for pr-title-check."""
import re
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ErrorType(str, Enum):
    TYPE_ERROR = "TYPE_ERROR"
    SCOPE_ERROR = "SCOPE_ERROR"
    SUBJECT_NOT_FOUND_ERROR = "SUBJECT_NOT_FOUND_ERROR"
    SUBJECT_ERROR = "SUBJECT_ERROR"


class ErrorHandlerAction(str, Enum):
    ERROR = "error"
    WARN = "warn"


# Conventional commit type registry: name -> description
DEFAULT_TYPES: Dict[str, str] = {
    "feat": "A new feature",
    "fix": "A bug fix",
    "docs": "Documentation only changes",
    "style": "Changes that do not affect the meaning of the code (white-space, formatting, missing semi-colons, etc)",
    "refactor": "A code change that neither fixes a bug nor adds a feature",
    "perf": "A code change that improves performance",
    "test": "Adding missing tests or correcting existing tests",
    "build": "Changes that affect the build system or external dependencies (example scopes: gulp, broccoli, npm)",
    "ci": "Changes to our CI configuration files and scripts (example scopes: Travis, Circle, BrowserStack, SauceLabs)",
    "chore": "Other changes that don't modify src or test files",
    "revert": "Reverts a previous commit",
}


class ParsedTitle(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Optional[str] = None
    scope: Optional[str] = None
    subject: Optional[str] = None
    breaking: bool = False


class ValidationOptions(BaseModel):
    """Options for a single validation call.

    Accepts both snake_case names and the camelCase names used by
    workflow configuration (``subjectPattern``, ``subjectPatternError``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    types: Optional[List[str]] = Field(
        default=None,
        description="Allowed types; empty or missing means the default vocabulary",
    )
    scopes: Optional[List[str]] = Field(
        default=None,
        description="Allowed scopes; missing means any scope is allowed",
    )
    subject_pattern: Optional[str] = Field(
        default=None,
        alias="subjectPattern",
        description="Regular expression the whole subject has to match",
    )
    subject_pattern_error: Optional[str] = Field(
        default=None,
        alias="subjectPatternError",
        description="Message template used when the subject doesn't match",
    )
    action: ErrorHandlerAction = Field(
        default=ErrorHandlerAction.ERROR,
        description="Whether failures should fail the check or only warn",
    )

    @field_validator("subject_pattern")
    @classmethod
    def _check_pattern(cls, value: Optional[str]) -> Optional[str]:
        if value:
            try:
                re.compile(value)
            except re.error as e:
                raise ValueError(f"Invalid subject pattern {value!r}: {e}") from e
        return value
