#!/usr/bin/env python3
import asyncio
import os
from pathlib import Path
from typing import Optional, Tuple

import click
import pydantic
from rich.console import Console

from .config import DEFAULT_CONFIG_FILENAME, Config
from .git_source import read_commit_title
from .models import ErrorHandlerAction
from .observers import ConsoleLogObserver, FileLogObserver
from .validator import PRTitleValidator
from .version import display_version_info, get_version_summary

console = Console()


@click.command()
@click.argument("title", required=False)
@click.option(
    "-p",
    "--path",
    default=".",
    help="Path to the repository root (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "-t",
    "--type",
    "types",
    multiple=True,
    help="Allowed type; repeat for several (overrides config setting)",
)
@click.option(
    "-s",
    "--scope",
    "scopes",
    multiple=True,
    help="Allowed scope; repeat for several (overrides config setting)",
)
@click.option(
    "--subject-pattern",
    help="Regular expression the subject has to match exactly (overrides config setting)",
)
@click.option(
    "--subject-pattern-error",
    help="Message shown when the subject doesn't match; supports {subject}, {title} and {subjectPattern}",
)
@click.option(
    "--action",
    type=click.Choice([action.value for action in ErrorHandlerAction], case_sensitive=False),
    help="Fail on invalid titles (error) or only report them (warn)",
)
@click.option(
    "--commit",
    "commit_rev",
    help="Validate the summary line of this commit instead of TITLE",
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log validation results (overrides config setting)",
)
@click.option(
    "--config-list", is_flag=True, help="Display current configuration settings"
)
@click.option("--version", is_flag=True, help="Display version information and exit")
def main(
    title: Optional[str],
    path: Path,
    types: Tuple[str, ...],
    scopes: Tuple[str, ...],
    subject_pattern: Optional[str],
    subject_pattern_error: Optional[str],
    action: Optional[str],
    commit_rev: Optional[str],
    log_file: Optional[Path],
    config_list: bool,
    version: bool,
):
    """
    Check that a pull request title follows the conventional commit format.

    TITLE is validated as `type(scope): subject`. Every problem found is
    reported, not only the first one.

    Configuration can be set in .prtitlecheck.toml in the repository root.
    Command line options override configuration file settings.
    """
    if version:
        display_version_info()
        return

    repo_path = path.absolute()
    try:
        config = Config.load(repo_path)
    except ValueError as e:
        raise click.UsageError(str(e))

    if config_list:
        display_config(config, repo_path / DEFAULT_CONFIG_FILENAME)
        return

    # Command line options override config
    if types:
        config.types = list(types)
    if scopes:
        config.scopes = list(scopes)
    if subject_pattern is not None:
        config.subject_pattern = subject_pattern
    if subject_pattern_error is not None:
        config.subject_pattern_error = subject_pattern_error
    if action is not None:
        config.action = ErrorHandlerAction(action.lower())
    if log_file is not None:
        config.log_file = str(log_file)

    if commit_rev is not None:
        if title is not None:
            raise click.UsageError("Use either TITLE or --commit, not both")
        try:
            title = read_commit_title(repo_path, commit_rev)
        except ValueError as e:
            raise click.UsageError(str(e))

    if title is None:
        raise click.UsageError("Provide a TITLE or use --commit")

    try:
        validator = PRTitleValidator(config.to_options(), config.to_parser_options())
    except pydantic.ValidationError as e:
        raise click.BadParameter(str(e))

    validator.add_observer(ConsoleLogObserver(console, config.action))
    log_file_path = log_file or config.get_log_file()
    if log_file_path:
        validator.add_observer(FileLogObserver(str(log_file_path)))

    errors = asyncio.run(validator.validate(title))

    if errors and config.action == ErrorHandlerAction.ERROR:
        raise click.exceptions.Exit(1)


def display_config(config: Config, config_path: Path) -> None:
    source = "config" if config_path.exists() else "default"

    console.print(f"\n[bold]Current Configuration Settings[/bold] [dim]({get_version_summary()})[/dim]")
    if config_path.exists():
        console.print(
            f"[dim]Config file: {str(config_path).replace(os.sep, '/')}[/dim]"
        )
    else:
        console.print("[dim]Using default values (no config file found)[/dim]")

    console.print(f"\n{'Setting':<24} {'Value':<30} {'Source':<10}")
    console.print("-" * 64)

    settings = config.model_dump(mode="json")
    for name, value in settings.items():
        if isinstance(value, list):
            value = ", ".join(value)
        console.print(f"{name:<24} {str(value if value is not None else 'None'):<30} {source:<10}", markup=False)

    console.print(
        f"\nTo modify these settings, create or edit {DEFAULT_CONFIG_FILENAME} in your repository root"
    )


if __name__ == "__main__":
    main()
