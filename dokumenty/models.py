"""Records describing travellers, their documents and saved games."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Subject:
    """A person asking to cross the border."""

    name: str
    gender: str
    reason: str
    money: int
    eligible: bool = False


@dataclass
class IdCard:
    """A national identity card."""

    name: str
    document: str
    birth: str
    country: str
    expiry: str
    gender: str


@dataclass
class Passport:
    """A passport carried by a traveller."""

    name: str
    country: str
    number: str
    document: str
    expiry: str


@dataclass
class Person:
    """A traveller together with the papers they present."""

    subject: Subject
    id_card: IdCard
    passport: Passport


@dataclass
class Processed:
    """The player's decision about one traveller."""

    person: Subject
    reason: str
    day: int
    decision: bool


@dataclass
class SaveGame:
    """Progress of one named game."""

    name: str
    day: int = 1
    aura: int = 0