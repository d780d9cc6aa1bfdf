"""Configuration management for pr-title-check."""
from pathlib import Path
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, ValidationError
from rich.console import Console
import tomli
import tomli_w
import os
import re

from .models import ErrorHandlerAction, ValidationOptions
from .parser import DEFAULT_HEADER_CORRESPONDENCE, DEFAULT_HEADER_PATTERN, ParserOptions

DEFAULT_CONFIG_FILENAME = ".prtitlecheck.toml"
CONFIG_SECTION = "prtitlecheck"

# Warnings go to stderr so they never mix with validation results
console = Console(stderr=True)


class ConfigError(ValueError):
    """The config file exists but can't be used."""


class Config(BaseModel):
    """Configuration settings for pr-title-check.

    This class defines all configurable options that can be set either
    via the config file, environment variables or command line arguments.
    """

    types: Optional[List[str]] = Field(
        default=None,
        description="Allowed types (defaults to the conventional commit types)"
    )

    scopes: Optional[List[str]] = Field(
        default=None,
        description="Allowed scopes (any scope is allowed when unset)"
    )

    subject_pattern: Optional[str] = Field(
        default=None,
        description="Regular expression the subject has to match exactly"
    )

    subject_pattern_error: Optional[str] = Field(
        default=None,
        description="Custom message for subjects that don't match subject_pattern; supports {subject}, {title} and {subjectPattern}"
    )

    header_pattern: str = Field(
        default=DEFAULT_HEADER_PATTERN,
        description="Regular expression used to split a title into its parts"
    )

    header_pattern_correspondence: List[str] = Field(
        default_factory=lambda: list(DEFAULT_HEADER_CORRESPONDENCE),
        description="Field names for the capture groups of header_pattern"
    )

    action: ErrorHandlerAction = Field(
        default=ErrorHandlerAction.ERROR,
        description="Fail the check on invalid titles (error) or only report them (warn)"
    )

    always_log: bool = Field(
        default=False,
        description="Whether to always generate log files"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file (if not using automatic log file generation)"
    )

    @staticmethod
    def _sanitize_string(value: str) -> str:
        """Strip control characters and null bytes."""
        if not value:
            return value
        return re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', value)

    @staticmethod
    def _split_list(value: str) -> List[str]:
        return [item.strip() for item in value.split(',') if item.strip()]

    @staticmethod
    def _is_safe_path(path: str) -> bool:
        """Check if a path is safe (no path traversal)."""
        if not path:
            return False

        if '..' in path or path.startswith('/') or '\\' in path:
            return False

        if os.path.isabs(path):
            return False

        return True

    @classmethod
    def load(cls, repo_path: Path) -> 'Config':
        """Load configuration from the config file.

        Args:
            repo_path: Path to the repository root

        Returns:
            Config: Configuration object with values from file or defaults

        Raises:
            ConfigError: If the file can't be parsed or holds invalid values
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)
        except (OSError, tomli.TOMLDecodeError) as e:
            raise ConfigError(f"Error reading config file {config_path}: {e}") from e

        config_section = config_data.get(CONFIG_SECTION, {})
        for key in ['subject_pattern', 'subject_pattern_error', 'log_file']:
            if isinstance(config_section.get(key), str):
                config_section[key] = cls._sanitize_string(config_section[key])

        if config_section.get('log_file') and not cls._is_safe_path(config_section['log_file']):
            console.print(f"[yellow]Warning: Unsafe log file path '{config_section['log_file']}', using default[/yellow]")
            config_section['log_file'] = None

        # A single bad value must not silently drop the other rules
        try:
            config = cls(**config_section)
            config.to_options()
            config.to_parser_options()
        except ValidationError as e:
            raise ConfigError(f"Invalid config file {config_path}: {e}") from e
        return config

    def save(self, repo_path: Path) -> None:
        """Save configuration to the config file.

        Args:
            repo_path: Path to the repository root
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        try:
            # TOML has no null, drop unset values
            config_dict = {
                k: v for k, v in self.model_dump(mode='json').items() if v is not None
            }

            if config_dict.get('log_file') and not self._is_safe_path(config_dict['log_file']):
                console.print(f"[yellow]Warning: Unsafe log file path '{config_dict['log_file']}', not saving[/yellow]")
                del config_dict['log_file']

            with config_path.open('wb') as f:
                tomli_w.dump({CONFIG_SECTION: config_dict}, f)
        except Exception as e:
            console.print(f"[red]Error saving config file: {e}[/red]")

    def to_options(self) -> ValidationOptions:
        return ValidationOptions(
            types=self.types,
            scopes=self.scopes,
            subject_pattern=self.subject_pattern,
            subject_pattern_error=self.subject_pattern_error,
            action=self.action,
        )

    def to_parser_options(self) -> ParserOptions:
        return ParserOptions(
            header_pattern=self.header_pattern,
            header_pattern_correspondence=self.header_pattern_correspondence,
        )

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file.

        If always_log is True, generates a timestamped log file name.
        Otherwise, returns the configured log_file path if set.

        Returns:
            Optional[Path]: Path to the log file, or None if logging is disabled
        """
        if self.always_log:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            return Path(f"prtitlecheck-{timestamp}.log")
        elif self.log_file:
            if self._is_safe_path(self.log_file):
                return Path(self.log_file)
            else:
                console.print(f"[yellow]Warning: Unsafe log file path '{self.log_file}', using default[/yellow]")
                return None
        return None

    def __init__(self, **data):
        """Initialize config with environment variable support."""
        env_data = {}

        env_mapping = {
            'PR_TITLE_CHECK_TYPES': 'types',
            'PR_TITLE_CHECK_SCOPES': 'scopes',
            'PR_TITLE_CHECK_SUBJECT_PATTERN': 'subject_pattern',
            'PR_TITLE_CHECK_SUBJECT_PATTERN_ERROR': 'subject_pattern_error',
            'PR_TITLE_CHECK_ACTION': 'action',
            'PR_TITLE_CHECK_ALWAYS_LOG': 'always_log',
            'PR_TITLE_CHECK_LOG_FILE': 'log_file',
        }

        for env_var, field_name in env_mapping.items():
            if env_var in os.environ:
                value = self._sanitize_string(os.environ[env_var])

                if field_name in ['types', 'scopes']:
                    value = self._split_list(value)

                # Blank CI inputs mean "not configured", not an empty allow-list
                if not value or not str(value).strip():
                    continue

                if field_name == 'always_log':
                    value = value.lower() in ['true', '1', 'yes', 'on']

                if field_name == 'action':
                    value = value.lower()

                env_data[field_name] = value

        # Explicit values win over the environment
        merged_data = {**env_data, **data}

        super().__init__(**merged_data)
