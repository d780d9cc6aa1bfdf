"""Version reporting for pr-title-check."""

import importlib.metadata
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from . import __version__

DISTRIBUTION_NAME = "pr-title-check"

console = Console()


def get_installed_version() -> str:
    """Version recorded in the installed distribution metadata."""
    try:
        return importlib.metadata.version(DISTRIBUTION_NAME)
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_version_summary() -> str:
    """One-line version string, noting a stale install."""
    installed = get_installed_version()
    if installed == __version__:
        return f"{DISTRIBUTION_NAME} {__version__}"
    return f"{DISTRIBUTION_NAME} {__version__} (installed: {installed})"


def display_version_info() -> None:
    info = Text()
    info.append(f"{get_version_summary()}\n", style="bold blue")
    info.append(f"Package path: {Path(__file__).parent}\n", style="yellow")
    if get_installed_version() != __version__:
        info.append("Reinstall with: pip install -e .\n", style="red")

    console.print(Panel(info, title="Version Information", border_style="blue"))
