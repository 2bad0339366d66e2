"""Type aliases for the translation dictionary domain.

Used by the engine, the accessor and the template helpers, and by user code
when annotating call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping, Sequence

__all__ = [
    "KeyPath",
    "LocaleCode",
    "TemplateValue",
    "TemplateVariables",
]

type LocaleCode = str
"""Locale code (e.g., 'en', 'en-US', 'zh-Hant-TW'). Treated as opaque."""

type KeyPath = str | Sequence[str]
"""Dotted key path ('user.profile.title') or pre-split segments."""

type TemplateValue = str | int | float | bool
"""Scalar value substituted into a {{placeholder}}."""

type TemplateVariables = Mapping[str, TemplateValue]
"""Variables for {{placeholder}} substitution."""
