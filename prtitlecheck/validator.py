"""Pull request title validation entry points."""
from typing import List, Optional

from .errors import ValidationError
from .models import ValidationOptions
from .observers import ValidationObserver
from .parser import ParserOptions, parse_title
from .validation import create_validation_handlers


class PRTitleValidator:
    """Validates pull request titles against conventional commit rules."""

    def __init__(
        self,
        options: Optional[ValidationOptions] = None,
        parser_options: Optional[ParserOptions] = None,
    ):
        self.options = options or ValidationOptions()
        self.parser_options = parser_options or ParserOptions()
        self.handlers = create_validation_handlers(self.options)
        self.observers: List[ValidationObserver] = []

    def add_observer(self, observer: ValidationObserver) -> None:
        self.observers.append(observer)

    def remove_observer(self, observer: ValidationObserver) -> None:
        self.observers.remove(observer)

    def collect_errors(self, title: str) -> List[ValidationError]:
        """Run every handler and collect all errors instead of stopping at the first."""
        parsed = parse_title(title, self.parser_options)

        errors: List[ValidationError] = []
        for handler in self.handlers:
            try:
                handler.validate(title, parsed)
            except ValidationError as error:
                errors.append(error)
        return errors

    async def validate(self, title: str) -> List[ValidationError]:
        """Validate a title and notify observers of the result."""
        errors = self.collect_errors(title)
        for observer in self.observers:
            await observer.on_title_validated(title, errors)
        return errors


async def validate_pr_title(
    title: str,
    options: Optional[ValidationOptions] = None,
) -> List[ValidationError]:
    """Validate a pull request title; an empty list means it is valid."""
    return await PRTitleValidator(options).validate(title)
