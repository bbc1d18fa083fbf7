"""Reading and writing the CSV files that hold travellers and saved games."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Union

from .keyed import CaseInsensitiveMap
from .models import IdCard, Passport, SaveGame, Subject

PathLike = Union[str, "os.PathLike[str]"]

GAMES_FILE = "partida.csv"
SUBJECTS_FILE = "sujetos.csv"
PASSPORTS_FILE = "pasaportes.csv"
ID_CARDS_FILE = "DNI.csv"
MAX_FIELDS = 300

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_LINE_END = re.compile(r"[\r\n]")


@dataclass
class World:
    """Every saved game and every traveller record loaded from disk."""

    games: CaseInsensitiveMap[SaveGame]
    subjects: dict[str, Subject]
    passports: dict[str, Passport]
    id_cards: dict[str, IdCard]


def _to_int(text: str) -> int:
    """Leading integer of ``text``, or 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _to_money(text: str) -> int:
    """Leading decimal number of ``text`` truncated to an integer, or 0."""
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return 0
    try:
        return int(float(match.group(1)))
    except OverflowError:
        return 0


def parse_csv_line(line: str, separator: str = ",") -> list[str]:
    """Split one CSV line into fields.

    A field may be wrapped in double quotes, in which case it runs until a
    quote directly followed by the separator. Two separators in a row are
    consumed together, and a trailing separator adds no empty field.
    """
    line = line.split("\n", 1)[0]
    fields: list[str] = []
    length = len(line)
    pos = 0
    while pos < length and len(fields) < MAX_FIELDS - 1:
        if line[pos] == '"':
            pos += 1
            start = pos
            while pos < length and not (
                line[pos] == '"' and pos + 1 < length and line[pos + 1] == separator
            ):
                pos += 1
        else:
            start = pos
            while pos < length and line[pos] != separator:
                pos += 1
        end = pos
        if pos < length:
            pos += 1
            if pos < length and line[pos] == separator:
                pos += 1
        closing = pos - 2
        if start <= closing < end and line[closing] == '"':
            end = closing
        fields.append(line[start:end])
    return fields


def split_fields(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on any character of ``delimiter``.

    Empty pieces are dropped and spaces are trimmed from both ends of
    each remaining piece.
    """
    if delimiter:
        pieces = re.split("[" + re.escape(delimiter) + "]", text)
    else:
        pieces = [text]
    return [piece.strip(" ") for piece in pieces if piece]


def _rows(path: Path) -> Iterator[tuple[int, list[str]]]:
    """Yield line numbers and fields of every non-empty data row."""
    with path.open(encoding="utf-8") as handle:
        next(handle, None)
        for number, line in enumerate(handle, start=2):
            fields = parse_csv_line(line)
            if fields:
                yield number, fields


def _require(fields: list[str], count: int, path: Path, number: int) -> None:
    if len(fields) < count:
        raise ValueError(
            f"{path.name}:{number}: expected {count} fields, found {len(fields)}"
        )


def read_games(data_dir: PathLike) -> CaseInsensitiveMap[SaveGame]:
    """Load saved games keyed by name."""
    path = Path(data_dir) / GAMES_FILE
    games: CaseInsensitiveMap[SaveGame] = CaseInsensitiveMap()
    for number, fields in _rows(path):
        _require(fields, 3, path, number)
        game = SaveGame(fields[0], _to_int(fields[1]), _to_int(fields[2]))
        games.insert(game.name, game)
    return games


def read_subjects(data_dir: PathLike) -> dict[str, Subject]:
    """Load travellers keyed by their row index as a string."""
    path = Path(data_dir) / SUBJECTS_FILE
    subjects: dict[str, Subject] = {}
    for number, fields in _rows(path):
        _require(fields, 4, path, number)
        subjects[str(len(subjects))] = Subject(
            name=fields[0],
            gender=fields[1],
            reason=fields[2],
            money=_to_money(fields[3]),
        )
    return subjects


def read_passports(data_dir: PathLike) -> dict[str, Passport]:
    """Load passports keyed by their row index as a string."""
    path = Path(data_dir) / PASSPORTS_FILE
    passports: dict[str, Passport] = {}
    for number, fields in _rows(path):
        _require(fields, 5, path, number)
        passports[str(len(passports))] = Passport(
            name=fields[0],
            country=fields[1],
            number=fields[2],
            document=fields[3],
            expiry=fields[4],
        )
    return passports


def read_id_cards(data_dir: PathLike) -> dict[str, IdCard]:
    """Load identity cards keyed by their row index as a string."""
    path = Path(data_dir) / ID_CARDS_FILE
    cards: dict[str, IdCard] = {}
    for number, fields in _rows(path):
        _require(fields, 6, path, number)
        cards[str(len(cards))] = IdCard(
            name=fields[0],
            document=fields[1],
            birth=fields[2],
            country=fields[3],
            expiry=fields[4],
            gender=fields[5],
        )
    return cards


def load_world(data_dir: PathLike) -> World:
    """Load every data file from ``data_dir``."""
    return World(
        games=read_games(data_dir),
        subjects=read_subjects(data_dir),
        passports=read_passports(data_dir),
        id_cards=read_id_cards(data_dir),
    )


def _game_line(name: str, day: object, aura: object) -> str:
    return f"{name},{day},{aura},\n"


def append_game(data_dir: PathLike, game: SaveGame) -> None:
    """Add a line for ``game`` at the end of the games file."""
    path = Path(data_dir) / GAMES_FILE
    with path.open("a", encoding="utf-8") as handle:
        handle.write(_game_line(game.name, game.day, game.aura))


def delete_game(data_dir: PathLike, name: str) -> bool:
    """Remove the game called ``name``; return whether it was found.

    Other lines are kept exactly as they were; blank lines are dropped.
    """
    path = Path(data_dir) / GAMES_FILE
    temp = path.with_name("temp.csv")
    found = False
    with path.open(encoding="utf-8") as source, temp.open(
        "w", encoding="utf-8"
    ) as target:
        for line in source:
            fields = split_fields(_LINE_END.split(line, 1)[0], ",")
            if not fields:
                continue
            if fields[0] == name:
                found = True
                continue
            target.write(line)
    os.replace(temp, path)
    return found


def autosave(data_dir: PathLike, game: SaveGame) -> None:
    """Rewrite the games file with the current progress of ``game``."""
    path = Path(data_dir) / GAMES_FILE
    temp = path.with_name("partida_temp.csv")
    with path.open(encoding="utf-8") as source, temp.open(
        "w", encoding="utf-8"
    ) as target:
        header = next(source, None)
        if header is not None:
            columns = (parse_csv_line(header) + ["", "", ""])[:3]
            target.write(_game_line(*columns))
        for line in source:
            fields = parse_csv_line(line)
            if not fields:
                continue
            if fields[0] == game.name:
                target.write(_game_line(game.name, game.day, game.aura))
            else:
                target.write(_game_line(*(fields + ["", ""])[:3]))
    os.replace(temp, path)