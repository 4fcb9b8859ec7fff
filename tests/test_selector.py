"""Tests for plural form selection."""

from __future__ import annotations

import pytest

from lexicon.i18n.selector import IntervalChoiceSelector, plural_index


@pytest.fixture
def selector():
    return IntervalChoiceSelector()


@pytest.mark.parametrize(
    ("count", "expected"),
    [(0, "none"), (1, "one"), (2, "many"), (150, "many")],
)
def test_explicit_intervals(selector, count, expected):
    message = "{0} none|{1} one|]1,Inf] many"
    assert selector.choose(message, count, "en") == expected


def test_set_and_closed_intervals(selector):
    message = "{1,3,5} odd|[2,4] low even|[6,+Inf[ big"
    assert selector.choose(message, 3, "en") == "odd"
    assert selector.choose(message, 4, "en") == "low even"
    assert selector.choose(message, 6, "en") == "big"


def test_negative_infinity(selector):
    assert selector.choose("[-Inf,0[ debt|[0,Inf] credit", -4, "en") == "debt"


def test_standard_rules_by_language(selector):
    assert selector.choose("apple|apples", 1, "en") == "apple"
    assert selector.choose("apple|apples", 0, "en") == "apples"
    assert selector.choose("pomme|pommes", 0, "fr") == "pomme"
    assert selector.choose("pomme|pommes", 2, "fr_FR") == "pommes"


def test_labels_are_stripped(selector):
    assert selector.choose("one: apple|many: apples", 3, "en") == "apples"


def test_explicit_rules_take_precedence(selector):
    message = "{0} nothing|apple|apples"
    assert selector.choose(message, 0, "en") == "nothing"
    assert selector.choose(message, 1, "en") == "apple"


def test_single_form_is_always_returned(selector):
    assert selector.choose("Hello", 7, "ru") == "Hello"


def test_escaped_pipe(selector):
    assert selector.choose("a || b|many", 1, "en") == "a | b"


@pytest.mark.parametrize(
    ("locale", "count", "index"),
    [
        ("ru", 1, 0),
        ("ru", 3, 1),
        ("ru", 5, 2),
        ("ru", 21, 0),
        ("ru", 111, 2),
        ("pl", 22, 1),
        ("pl", 12, 2),
        ("ar", 0, 0),
        ("ar", 105, 3),
        ("ar", 11, 4),
        ("ja", 10, 0),
        ("pt_BR", 0, 0),
        ("pt", 0, 1),
        ("xx", 5, 0),
    ],
)
def test_plural_index(locale, count, index):
    assert plural_index(count, locale) == index
