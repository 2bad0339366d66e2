"""Template substitution for translated strings.

Replaces ``{{name}}`` placeholders with values from a variable mapping.
Unknown placeholders are left verbatim so a missing variable never breaks
translation; substitution is a single pass, so substituted values that
themselves look like placeholders are not expanded again.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dictl10n.types import TemplateVariables

__all__ = [
    "PLACEHOLDER_PATTERN",
    "find_placeholders",
    "has_placeholders",
    "substitute",
]

# {{name}} with optional inner whitespace: {{ name }}
PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(r"\{\{\s*([^{}\s]+)\s*\}\}")


def substitute(template: str, variables: TemplateVariables) -> str:
    """Replace ``{{key}}`` placeholders with stringified variable values.

    Args:
        template: String possibly containing ``{{key}}`` placeholders
        variables: Mapping of placeholder name to value

    Returns:
        Template with every known placeholder replaced by ``str(value)``.
        Placeholders whose key is absent from ``variables`` are kept as-is.

    Example:
        >>> substitute("Hello {{name}}", {"name": "Ana"})
        'Hello Ana'
        >>> substitute("Hello {{name}}", {})
        'Hello {{name}}'
    """
    if "{{" not in template:
        return template

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key in variables:
            return str(variables[key])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def find_placeholders(template: str) -> tuple[str, ...]:
    """List placeholder names in order of first appearance.

    Example:
        >>> find_placeholders("{{a}} and {{ b }} and {{a}}")
        ('a', 'b')
    """
    return tuple(dict.fromkeys(PLACEHOLDER_PATTERN.findall(template)))


def has_placeholders(template: str) -> bool:
    """Check whether the template contains at least one placeholder."""
    return PLACEHOLDER_PATTERN.search(template) is not None
