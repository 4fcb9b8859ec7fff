"""Locale identifier validation."""

from __future__ import annotations

import re

from lexicon.services.exceptions import InvalidLocale

# language[_Script][_REGION][@variant], with "-" accepted as separator.
_LOCALE_RE = re.compile(
    r"^[a-zA-Z]{2,3}"
    r"(?:[_-][a-zA-Z]{4})?"
    r"(?:[_-](?:[a-zA-Z]{2}|[0-9]{3}))?"
    r"(?:@[a-zA-Z0-9]+)?$"
)


def is_valid_locale(locale: object) -> bool:
    return isinstance(locale, str) and bool(_LOCALE_RE.match(locale))


def assert_valid_locale(locale: object) -> None:
    """Raise :class:`InvalidLocale` unless ``locale`` looks like ``en`` or ``fr_FR``."""

    if not is_valid_locale(locale):
        raise InvalidLocale(locale)


def language_of(locale: str) -> str:
    return re.split(r"[_@-]", locale, maxsplit=1)[0].lower()


__all__ = ["assert_valid_locale", "is_valid_locale", "language_of"]
