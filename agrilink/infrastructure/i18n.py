"""Locale negotiation and message bundle loading."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Final

LOCALE_COOKIE_NAME: Final[str] = "NEXT_LOCALE"
LOCALE_COOKIE_MAX_AGE: Final[int] = 365 * 24 * 60 * 60
_LOCALES_DIR: Final[Path] = Path(__file__).resolve().parent.parent / "locales"


class Locale(str, Enum):
    """Languages the marketplace is translated into."""

    EN = "en"
    HI = "hi"
    TA = "ta"


DEFAULT_LOCALE: Final[Locale] = Locale.EN

LOCALE_NAMES: Final[dict[Locale, str]] = {
    Locale.EN: "English",
    Locale.HI: "हिंदी",
    Locale.TA: "தமிழ்",
}

# Only these file names are ever opened; request data never reaches a path.
_BUNDLE_FILES: Final[dict[Locale, str]] = {
    Locale.EN: "en.json",
    Locale.HI: "hi.json",
    Locale.TA: "ta.json",
}


@dataclass(frozen=True)
class ResolvedLocale:
    """Locale chosen for a request together with its message bundle."""

    locale: Locale
    messages: dict[str, Any]


@dataclass(frozen=True)
class LocaleCookie:
    """Attributes used when persisting the preferred locale in the browser."""

    key: str
    value: str
    max_age: int = LOCALE_COOKIE_MAX_AGE
    path: str = "/"
    samesite: str = "lax"


def parse_locale(value: str | None) -> Locale:
    """Return the supported locale named by ``value`` or the default one."""

    if not value:
        return DEFAULT_LOCALE
    try:
        return Locale(value)
    except ValueError:
        return DEFAULT_LOCALE


@lru_cache(maxsize=len(_BUNDLE_FILES))
def load_messages(locale: Locale) -> dict[str, Any]:
    """Load the message bundle associated with ``locale``."""

    bundle_path = _LOCALES_DIR / _BUNDLE_FILES[locale]
    with bundle_path.open(encoding="utf-8") as handle:
        return json.load(handle)


def resolve_locale(cookie_value: str | None) -> ResolvedLocale:
    """Resolve the locale stored in the cookie and load its bundle.

    Unsupported or missing values silently degrade to ``en``.
    """

    locale = parse_locale(cookie_value)
    return ResolvedLocale(locale=locale, messages=load_messages(locale))


def build_locale_cookie(locale: Locale) -> LocaleCookie:
    return LocaleCookie(key=LOCALE_COOKIE_NAME, value=Locale(locale).value)


__all__ = [
    "DEFAULT_LOCALE",
    "LOCALE_COOKIE_MAX_AGE",
    "LOCALE_COOKIE_NAME",
    "LOCALE_NAMES",
    "Locale",
    "LocaleCookie",
    "ResolvedLocale",
    "build_locale_cookie",
    "load_messages",
    "parse_locale",
    "resolve_locale",
]
