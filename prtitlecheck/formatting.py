"""Placeholder interpolation for user supplied message templates."""
import re
from typing import Any, Mapping

PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")


def format_message(template: str, variables: Mapping[str, Any]) -> str:
    """Replace every ``{name}`` in template with ``str(variables[name])``.

    Unknown placeholders are left untouched and substituted values are
    never interpolated again.
    """

    def replace(match: re.Match) -> str:
        name = match.group(1)
        if name not in variables:
            return match.group(0)
        return str(variables[name])

    return PLACEHOLDER_RE.sub(replace, template)
