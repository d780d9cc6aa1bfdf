"""Conventional commit validation for pull request titles."""

__version__ = "0.1.0"

from .errors import ErrorContext, ValidationError
from .models import DEFAULT_TYPES, ErrorHandlerAction, ErrorType, ParsedTitle, ValidationOptions
from .parser import ParserOptions, parse_title
from .validator import PRTitleValidator, validate_pr_title

__all__ = [
    'DEFAULT_TYPES',
    'ErrorContext',
    'ErrorHandlerAction',
    'ErrorType',
    'ParsedTitle',
    'ParserOptions',
    'PRTitleValidator',
    'ValidationError',
    'ValidationOptions',
    'parse_title',
    'validate_pr_title',
]
