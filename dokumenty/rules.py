"""Border rules deciding whether a traveller may enter on a given day."""

from __future__ import annotations

from typing import Optional

from .models import Person

_EXPIRED_MONTHS = ("01", "02")
_FORBIDDEN_MONTH = "08"
_FORBIDDEN_COUNTRY = "Letonia"
_MIN_MONEY = 800
_MAX_MONEY = 2500


def difficulty(day: int) -> int:
    """Difficulty level for ``day``: days 1 to 3 map to themselves, others to 4."""
    return day if day in (1, 2, 3) else 4


def _month(date: str) -> str:
    """Month part of a DD/MM/YYYY date."""
    return date[3:5]


def is_eligible(person: Optional[Person], day: int) -> bool:
    """Whether ``person`` should be admitted under the rules in force on ``day``.

    Rules accumulate: everything required on an earlier day still applies.
    """
    if person is None:
        return False
    subject = person.subject
    card = person.id_card
    passport = person.passport
    level = difficulty(day)

    if subject.name != card.name or subject.name != passport.name:
        return False
    if card.country != passport.country:
        return False
    if subject.reason == "Turismo":
        return False

    if level >= 2:
        if _month(card.expiry) in _EXPIRED_MONTHS:
            return False
        if _month(passport.expiry) in _EXPIRED_MONTHS:
            return False
        if passport.document != card.document:
            return False

    if level >= 3:
        if passport.number.startswith("O"):
            return False
        if _month(card.expiry) == _FORBIDDEN_MONTH:
            return False

    if level >= 4:
        if _FORBIDDEN_COUNTRY in (card.country, passport.country):
            return False
        if subject.money < _MIN_MONEY or subject.money > _MAX_MONEY:
            return False
        if subject.reason == "Familia":
            return False

    return True