"""Pull request title validation rules.

Each handler checks one part of a parsed title and raises
:class:`~prtitlecheck.errors.ValidationError` when it fails. Unlike a
chain of responsibility, handlers don't know about each other: the
orchestrator runs all of them so every problem is reported at once.
"""
import re
from abc import ABC, abstractmethod
from typing import List, Optional

from .errors import ErrorContext, ValidationError
from .formatting import format_message
from .models import DEFAULT_TYPES, ErrorType, ParsedTitle, ValidationOptions
from .suggestion import suggest_word


class ValidationHandler(ABC):
    """Abstract base class for validation handlers."""

    @abstractmethod
    def validate(self, title: str, parsed: ParsedTitle) -> None:
        """Validate the parsed title, raising ValidationError on failure."""
        pass


class TypeValidationHandler(ValidationHandler):
    """Validates that the type is part of the allowed vocabulary."""

    def __init__(self, types: Optional[List[str]] = None):
        self.types = types

    @property
    def uses_default_types(self) -> bool:
        return not self.types

    @property
    def available_types(self) -> List[str]:
        return list(DEFAULT_TYPES) if self.uses_default_types else list(self.types)

    def validate(self, title: str, parsed: ParsedTitle) -> None:
        if parsed.type is not None and parsed.type in self.available_types:
            return

        pr_type = "null" if parsed.type is None else parsed.type
        raise ValidationError(
            f'Unknown release type "{pr_type}" found in pull request title "{title}". '
            f"{suggest_word(pr_type, self.types)}\n\n{self.format_available_types()}",
            ErrorType.TYPE_ERROR,
            ErrorContext(error_word=pr_type, available_words=self.types),
        )

    def format_available_types(self) -> str:
        bullets = []
        for pr_type in self.available_types:
            bullet = f" - {pr_type}"
            if self.uses_default_types:
                bullet += f": {DEFAULT_TYPES[pr_type]}"
            bullets.append(bullet)
        return "Available types:\n" + "\n".join(bullets)


class ScopeValidationHandler(ValidationHandler):
    """Validates scopes against an allow-list, if one is configured."""

    def __init__(self, scopes: Optional[List[str]] = None):
        self.scopes = scopes

    def validate(self, title: str, parsed: ParsedTitle) -> None:
        if self.scopes is None or parsed.scope is None:
            return

        given = [scope.strip() for scope in parsed.scope.split(",")]
        unknown = [scope for scope in given if scope not in self.scopes]
        if not unknown:
            return

        noun = "scopes" if len(unknown) > 1 else "scope"
        suggestion = suggest_word(unknown[0] if len(unknown) == 1 else unknown, self.scopes)
        raise ValidationError(
            f'Unknown {noun} "{",".join(unknown)}" found in pull request title "{title}". '
            f"{suggestion}Use one of the available scopes: {', '.join(self.scopes)}.",
            ErrorType.SCOPE_ERROR,
            ErrorContext(error_word=parsed.scope, available_words=self.scopes),
        )


class SubjectValidationHandler(ValidationHandler):
    """Validates that a subject exists and matches the configured pattern."""

    def __init__(
        self,
        subject_pattern: Optional[str] = None,
        subject_pattern_error: Optional[str] = None,
    ):
        self.subject_pattern = subject_pattern
        self.subject_pattern_error = subject_pattern_error

    def validate(self, title: str, parsed: ParsedTitle) -> None:
        subject = parsed.subject
        if subject is None or not subject.strip():
            raise ValidationError(
                f'No subject found in pull request title "{title}".',
                ErrorType.SUBJECT_NOT_FOUND_ERROR,
            )

        if not self.subject_pattern:
            return

        match = re.search(self.subject_pattern, subject)
        if not match:
            self._raise_pattern_error(
                title,
                subject,
                f'The subject "{subject}" found in pull request title "{title}" '
                f'doesn\'t match the configured pattern "{self.subject_pattern}".',
            )

        # A match that only covers part of the subject is not good enough
        if len(match.group(0)) != len(subject):
            self._raise_pattern_error(
                title,
                subject,
                f'The subject "{subject}" found in pull request title "{title}" '
                f'isn\'t an exact match for the configured pattern "{self.subject_pattern}". '
                "Please provide a subject that matches the whole pattern exactly.",
            )

    def _raise_pattern_error(self, title: str, subject: str, message: str) -> None:
        if self.subject_pattern_error:
            message = format_message(self.subject_pattern_error, {
                "subject": subject,
                "subjectPattern": self.subject_pattern,
                "title": title,
            })

        raise ValidationError(
            message,
            ErrorType.SUBJECT_ERROR,
            ErrorContext(subject=subject, subject_pattern=self.subject_pattern),
        )


def create_validation_handlers(options: Optional[ValidationOptions] = None) -> List[ValidationHandler]:
    """Create the type, scope and subject handlers for the given options."""
    options = options or ValidationOptions()
    return [
        TypeValidationHandler(options.types),
        ScopeValidationHandler(options.scopes),
        SubjectValidationHandler(options.subject_pattern, options.subject_pattern_error),
    ]


def validate_type(title: str, pr_type: Optional[str], types: Optional[List[str]] = None) -> None:
    TypeValidationHandler(types).validate(title, ParsedTitle(type=pr_type))


def validate_scope(title: str, scope: Optional[str] = None, scopes: Optional[List[str]] = None) -> None:
    ScopeValidationHandler(scopes).validate(title, ParsedTitle(scope=scope))


def validate_subject(
    title: str,
    subject: Optional[str] = None,
    options: Optional[ValidationOptions] = None,
) -> None:
    options = options or ValidationOptions()
    handler = SubjectValidationHandler(options.subject_pattern, options.subject_pattern_error)
    handler.validate(title, ParsedTitle(subject=subject))
