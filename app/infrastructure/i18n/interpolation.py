"""Named placeholder interpolation for message templates.

Templates use ``%{name}`` placeholders, the syntax shared by validation
error templates and catalog entries.
"""

import re
from enum import Enum
from typing import Any, Mapping

PLACEHOLDER_PATTERN = re.compile(r"%\{(\w+)\}")


def render_value(value: Any) -> str:
    """Render a binding value in its canonical string form.

    Enum members render as their value, everything else through ``str``.
    """
    if isinstance(value, Enum):
        value = value.value
    return str(value)


def interpolate(template: str, bindings: Mapping[str, Any]) -> str:
    """Substitute ``%{name}`` placeholders with values from ``bindings``.

    A placeholder without a matching binding is left as literal text.

    Args:
        template: Message template (e.g., "should be at least %{count} character(s)").
        bindings: Mapping of placeholder name to primitive value.

    Returns:
        The interpolated string.

    Example:
        >>> interpolate("must be greater than %{number}", {"number": 0})
        'must be greater than 0'
    """
    if not bindings:
        return template

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name not in bindings:
            return match.group(0)
        return render_value(bindings[name])

    return PLACEHOLDER_PATTERN.sub(_replace, template)
