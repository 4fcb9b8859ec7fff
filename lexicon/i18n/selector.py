"""Plural form selection for ``resolve_choice``.

A message holds its forms separated by ``|``. A form may start with an
explicit interval::

    {0} No apples|{1} One apple|]1,Inf] %count% apples

Forms without an interval (optionally labelled, ``one: apple``) are picked by
the plural rule of the locale's language.
"""

from __future__ import annotations

import math
import re
from typing import Callable, Protocol

from lexicon.utils.locales import language_of

_INTERVAL_RE = re.compile(
    r"""^(?P<interval>
        (?:\{\s*(?P<set>-?\d+(?:\.\d+)?(?:\s*,\s*-?\d+(?:\.\d+)?)*)\s*\})
        |
        (?P<left_delimiter>[\[\]])\s*
        (?P<left>-Inf|-?\d+(?:\.\d+)?)\s*,\s*
        (?P<right>\+?Inf|-?\d+(?:\.\d+)?)\s*
        (?P<right_delimiter>[\[\]])
    )\s*(?P<message>.*?)$""",
    re.VERBOSE | re.DOTALL,
)
_LABEL_RE = re.compile(r"^\w+:\s*(.*?)$", re.DOTALL)


class ChoiceSelector(Protocol):
    def choose(self, message: str, count: int, locale: str) -> str: ...


def _bound(value: str) -> float:
    if value.endswith("Inf"):
        return -math.inf if value.startswith("-") else math.inf
    return float(value)


def interval_matches(count: float, match: re.Match[str]) -> bool:
    if match.group("set") is not None:
        members = (float(item) for item in match.group("set").split(","))
        return any(count == member for member in members)

    left = _bound(match.group("left"))
    right = _bound(match.group("right"))
    left_ok = count >= left if match.group("left_delimiter") == "[" else count > left
    right_ok = count <= right if match.group("right_delimiter") == "]" else count < right
    return left_ok and right_ok


def _slavic(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if 2 <= n % 10 <= 4 and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def _arabic(n: int) -> int:
    if n in (0, 1, 2):
        return n
    if 3 <= n % 100 <= 10:
        return 3
    if 11 <= n % 100 <= 99:
        return 4
    return 5


_RULE_GROUPS: tuple[tuple[frozenset[str], Callable[[int], int]], ...] = (
    (
        frozenset("az bo dz id ja jv ka km kn ko ms th tr vi zh".split()),
        lambda n: 0,
    ),
    (
        frozenset(
            "af bn bg ca da de el en eo es et eu fa fi fo fur fy gl gu ha he hu is "
            "it ku lb ml mn mr nah nb ne nl nn no om or pa pap ps pt so sq sv sw "
            "ta te tk ur zu".split()
        ),
        lambda n: 0 if n == 1 else 1,
    ),
    (
        frozenset("am bh fil fr gun hi hy ln mg nso xbr ti wa".split()),
        lambda n: 0 if n in (0, 1) else 1,
    ),
    (frozenset("be bs hr ru sr uk".split()), _slavic),
    (frozenset("cs sk".split()), lambda n: 0 if n == 1 else (1 if 2 <= n <= 4 else 2)),
    (frozenset(["ga"]), lambda n: 0 if n == 1 else (1 if n == 2 else 2)),
    (
        frozenset(["lt"]),
        lambda n: 0
        if n % 10 == 1 and n % 100 != 11
        else (1 if n % 10 >= 2 and (n % 100 < 10 or n % 100 >= 20) else 2),
    ),
    (
        frozenset(["sl"]),
        lambda n: 0 if n % 100 == 1 else (1 if n % 100 == 2 else (2 if n % 100 in (3, 4) else 3)),
    ),
    (frozenset(["mk"]), lambda n: 0 if n % 10 == 1 else 1),
    (
        frozenset(["mt"]),
        lambda n: 0
        if n == 1
        else (1 if n == 0 or 1 < n % 100 < 11 else (2 if 10 < n % 100 < 20 else 3)),
    ),
    (
        frozenset(["lv"]),
        lambda n: 0 if n == 0 else (1 if n % 10 == 1 and n % 100 != 11 else 2),
    ),
    (
        frozenset(["pl"]),
        lambda n: 0
        if n == 1
        else (1 if 2 <= n % 10 <= 4 and (n % 100 < 12 or n % 100 > 14) else 2),
    ),
    (
        frozenset(["cy"]),
        lambda n: 0 if n == 1 else (1 if n == 2 else (2 if n in (8, 11) else 3)),
    ),
    (
        frozenset(["ro"]),
        lambda n: 0 if n == 1 else (1 if n == 0 or 0 < n % 100 < 20 else 2),
    ),
    (frozenset(["ar"]), _arabic),
)


def plural_index(count: int, locale: str) -> int:
    """Return the index of the plural form ``count`` needs in ``locale``."""

    if locale.replace("-", "_") == "pt_BR":
        return 0 if count in (0, 1) else 1
    language = language_of(locale)
    n = abs(count)
    for languages, rule in _RULE_GROUPS:
        if language in languages:
            return rule(n)
    return 0


def _split_forms(message: str) -> list[str]:
    # "||" is an escaped literal pipe.
    placeholder = "\x00"
    return [part.replace(placeholder, "|") for part in message.replace("||", placeholder).split("|")]


class IntervalChoiceSelector:
    def choose(self, message: str, count: int, locale: str) -> str:
        explicit: list[tuple[re.Match[str], str]] = []
        standard: list[str] = []
        for part in _split_forms(message):
            part = part.strip()
            interval = _INTERVAL_RE.match(part)
            if interval:
                explicit.append((interval, interval.group("message")))
                continue
            labelled = _LABEL_RE.match(part)
            standard.append(labelled.group(1) if labelled else part)

        for interval, text in explicit:
            if interval_matches(count, interval):
                return text

        if not standard:
            return message
        position = plural_index(count, locale)
        if position < len(standard):
            return standard[position]
        return standard[-1]


__all__ = [
    "ChoiceSelector",
    "IntervalChoiceSelector",
    "interval_matches",
    "plural_index",
]
