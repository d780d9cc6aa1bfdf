"""Observer pattern for title validation results."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .errors import ValidationError
from .models import ErrorHandlerAction


class ValidationObserver(ABC):
    """Abstract base class for validation observers."""

    @abstractmethod
    async def on_title_validated(self, title: str, errors: List[ValidationError]) -> None:
        """Called once per validated title with every error found."""
        pass


class ConsoleLogObserver(ValidationObserver):
    """Observer that reports validation results to the console."""

    def __init__(
        self,
        console: Optional[Console] = None,
        action: ErrorHandlerAction = ErrorHandlerAction.ERROR,
    ):
        self.console = console or Console()
        self.action = action

    async def on_title_validated(self, title: str, errors: List[ValidationError]) -> None:
        if not errors:
            self.console.print(f"[green]Pull request title is valid: {escape(title)}[/green]", soft_wrap=True)
            return

        color = "yellow" if self.action == ErrorHandlerAction.WARN else "red"
        for error in errors:
            self.console.print(f"[{color}]{escape(error.message)}[/{color}]", soft_wrap=True)


class FileLogObserver(ValidationObserver):
    """Observer that logs validation results to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    async def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a") as f:
            f.write(f"{timestamp} - {message}\n")

    async def on_title_validated(self, title: str, errors: List[ValidationError]) -> None:
        status = "Valid" if not errors else f"Invalid ({len(errors)} errors)"
        await self._log(f"{status} pull request title: {title}")
        for error in errors:
            await self._log(f"{error.kind.value}: {error.message}")
