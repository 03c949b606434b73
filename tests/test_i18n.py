"""Tests for locale negotiation."""

import pytest

from agrilink.infrastructure.i18n import (
    LOCALE_COOKIE_MAX_AGE,
    LOCALE_COOKIE_NAME,
    Locale,
    build_locale_cookie,
    load_messages,
    resolve_locale,
)


@pytest.mark.parametrize("value", [None, "", "fr", "EN", "../en", "hi.json"])
def test_unsupported_values_fall_back_to_english(value):
    resolved = resolve_locale(value)

    assert resolved.locale is Locale.EN
    assert resolved.messages["common"]["appName"] == "AgriLink"


def test_hindi_cookie_loads_hindi_bundle():
    resolved = resolve_locale("hi")

    assert resolved.locale is Locale.HI
    assert resolved.messages == load_messages(Locale.HI)
    assert resolved.messages["nav"]["messages"] == "संदेश"


def test_every_bundle_has_the_same_sections():
    english = load_messages(Locale.EN)

    for locale in Locale:
        bundle = load_messages(locale)
        assert bundle.keys() == english.keys()
        for section, entries in english.items():
            assert bundle[section].keys() == entries.keys()


def test_locale_cookie_attributes():
    cookie = build_locale_cookie(Locale.TA)

    assert cookie.key == LOCALE_COOKIE_NAME == "NEXT_LOCALE"
    assert cookie.value == "ta"
    assert cookie.max_age == LOCALE_COOKIE_MAX_AGE == 31_536_000
    assert cookie.path == "/"
    assert cookie.samesite == "lax"
