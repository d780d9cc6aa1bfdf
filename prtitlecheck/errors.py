"""Validation errors raised by the title validators."""
from typing import List, Optional

from pydantic import BaseModel

from .models import ErrorType


class ErrorContext(BaseModel):
    """Structured details about a failure, for programmatic consumers."""

    error_word: Optional[str] = None
    available_words: Optional[List[str]] = None
    subject: Optional[str] = None
    subject_pattern: Optional[str] = None


class ValidationError(Exception):
    """A pull request title failed one of the validation rules."""

    def __init__(
        self,
        message: str,
        kind: ErrorType,
        context: Optional[ErrorContext] = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.context = context or ErrorContext()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (
            self.message == other.message
            and self.kind == other.kind
            and self.context == other.context
        )

    __hash__ = Exception.__hash__

    def __repr__(self) -> str:
        return f"ValidationError(kind={self.kind.value}, message={self.message!r})"
