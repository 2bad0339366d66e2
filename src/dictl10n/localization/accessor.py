"""Chained accessor over translation keys.

An explicit, immutable path builder: each attribute or index access returns
a new accessor with one more key segment, and calling an accessor performs
the lookup.

    l10n.accessor.user.profile.title(name="Ana")
    l10n.accessor["user"]["profile"]["title"]({"name": "Ana"})

Path existence is only checked on call, so building a chain over keys that
do not exist never fails; the call returns the invalid-key sentinel.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dictl10n.core.navigation import join_path
from dictl10n.enums import LookupSurface

if TYPE_CHECKING:
    from dictl10n.localization.engine import Localization
    from dictl10n.types import TemplateValue, TemplateVariables

__all__ = ["TranslationAccessor"]


@dataclass(frozen=True, slots=True, repr=False)
class TranslationAccessor:
    """Immutable translation key path bound to an engine.

    Attribute access works for key names that are valid identifiers and do
    not start with an underscore; any other key (``"2fa"``, ``"_meta"``,
    ``"with-dash"``) is reached with indexing.

    The class defines no public attributes or methods, so every plain
    name is free to be a dictionary key.
    """

    _localization: Localization
    _segments: tuple[str, ...] = ()

    def __getattr__(self, name: str) -> TranslationAccessor:
        if name.startswith("_"):
            raise AttributeError(name)
        return TranslationAccessor(self._localization, (*self._segments, name))

    def __getitem__(self, segment: str) -> TranslationAccessor:
        return TranslationAccessor(self._localization, (*self._segments, segment))

    def __call__(
        self,
        variables: TemplateVariables | None = None,
        /,
        **kwargs: TemplateValue,
    ) -> str:
        """Translate the accumulated key path.

        Args:
            variables: Template variables for {{placeholder}} substitution
            **kwargs: Additional template variables (override ``variables``)

        Returns:
            Translated string, or a sentinel naming the path
        """
        if kwargs:
            variables = {**(variables or {}), **kwargs}
        return self._localization._lookup(self._segments, variables, LookupSurface.ACCESSOR)

    def __repr__(self) -> str:
        return f"TranslationAccessor({join_path(self._segments)!r})"
