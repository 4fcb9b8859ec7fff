"""Tests for locale identifier validation."""

from __future__ import annotations

import pytest

from lexicon.services.exceptions import InvalidLocale
from lexicon.utils.locales import assert_valid_locale, is_valid_locale, language_of


@pytest.mark.parametrize("locale", ["en", "fr_FR", "pt-BR", "zh_Hans_CN", "es_419", "sr@latin", "fil"])
def test_valid_locales(locale):
    assert is_valid_locale(locale)
    assert_valid_locale(locale)


@pytest.mark.parametrize("locale", ["", "not-a-locale", "e", "fr_FR_", "en US", "../etc", None, 12])
def test_invalid_locales_raise(locale):
    assert not is_valid_locale(locale)
    with pytest.raises(InvalidLocale) as excinfo:
        assert_valid_locale(locale)
    assert excinfo.value.locale == locale


def test_invalid_locale_is_a_value_error():
    with pytest.raises(ValueError):
        assert_valid_locale("not-a-locale")


def test_language_of():
    assert language_of("fr_FR") == "fr"
    assert language_of("PT-br") == "pt"
    assert language_of("sr@latin") == "sr"
