import io
import random

import pytest

from dokumenty.game import (
    Ending,
    GameOver,
    build_queue,
    endings,
    play_day,
    score_decision,
    start_game,
    verdict_menu,
)
from dokumenty.keyed import CaseInsensitiveMap
from dokumenty.models import IdCard, Passport, Person, SaveGame, Subject
from dokumenty.storage import World, read_games


def _scripted(lines):
    feed = iter(lines)

    def read():
        try:
            return next(feed)
        except StopIteration:
            raise EOFError("script exhausted") from None

    return read


def _console(lines):
    out = io.StringIO()
    from dokumenty.screens import Console

    return Console(out=out, read_line=_scripted(lines), sleep=lambda _s: None), out


def _person(i, reason="Trabajo", money=1000):
    name = f"Name{i}"
    return Person(
        subject=Subject(name, "M", reason, money),
        id_card=IdCard(name, f"D{i}", "01/05/1970", "Rusia", "10/05/1990", "M"),
        passport=Passport(name, "Rusia", f"P{i}", f"D{i}", "10/05/1990"),
    )


def _world(count, games=None):
    people = [_person(i) for i in range(count)]
    return World(
        games=CaseInsensitiveMap(games or {}),
        subjects={str(i): p.subject for i, p in enumerate(people)},
        passports={str(i): p.passport for i, p in enumerate(people)},
        id_cards={str(i): p.id_card for i, p in enumerate(people)},
    )


def _data_dir(tmp_path, rows):
    (tmp_path / "partida.csv").write_text(
        "nombre,dia,aura,\n" + "".join(f"{n},{d},{a},\n" for n, d, a in rows),
        encoding="utf-8",
    )
    return tmp_path


def test_build_queue_takes_distinct_people_out_of_world():
    world = _world(10)
    queue = build_queue(world, random.Random(1), 7)
    assert len(queue) == 7
    names = [p.subject.name for p in queue]
    assert len(set(names)) == 7
    for person in queue:
        assert person.id_card.name == person.subject.name
        assert person.passport.name == person.subject.name
    assert len(world.subjects) == 3
    assert len(world.passports) == 3
    assert len(world.id_cards) == 3
    remaining = {s.name for s in world.subjects.values()}
    assert remaining.isdisjoint(names)


def test_build_queue_needs_enough_people():
    world = _world(5)
    with pytest.raises(ValueError):
        build_queue(world, random.Random(0), 7)
    assert len(world.subjects) == 5


def test_score_decision_rewards_and_punishes():
    person = _person(0)
    person.subject.eligible = True
    game = SaveGame("g")
    assert score_decision(person, game, True) is True
    assert game.aura == 200
    assert score_decision(person, game, False) is False
    assert game.aura == 0


@pytest.mark.parametrize(
    "game, expected",
    [
        (SaveGame("g", 5, -2000), [Ending.TRAITOR]),
        (SaveGame("g", 5, 6000), [Ending.HERO]),
        (SaveGame("g", 31, 0), [Ending.RETIREMENT]),
        (SaveGame("g", 31, -2000), [Ending.TRAITOR, Ending.RETIREMENT]),
        (SaveGame("g", 30, -1800), []),
    ],
)
def test_endings(game, expected):
    assert endings(game) == expected


def test_verdict_menu_inspects_then_approves(tmp_path):
    console, out = _console(["1", "", "3", ""])
    person = _person(3)
    person.subject.eligible = True
    game = SaveGame("g")
    assert verdict_menu(person, game, console, tmp_path) is True
    text = out.getvalue()
    assert "IDENTITY DOCUMENT" in text
    assert "A P R O B A D O" in text
    assert "Correcto, buen trabajo" in text
    assert game.aura == 200


def test_verdict_menu_rejects_wrongly(tmp_path):
    console, out = _console(["  4 ", ""])
    person = _person(2)
    person.subject.eligible = True
    game = SaveGame("g")
    assert verdict_menu(person, game, console, tmp_path) is False
    assert "R E C H A Z A D O" in out.getvalue()
    assert "Incorrecto" in out.getvalue()
    assert game.aura == -200


def test_verdict_menu_game_over_erases_save(tmp_path):
    data_dir = _data_dir(tmp_path, [("g", 3, -2000), ("other", 2, 0)])
    console, out = _console(["9", ""])
    game = SaveGame("g", 3, -2000)
    with pytest.raises(GameOver) as info:
        verdict_menu(_person(0), game, console, data_dir)
    assert info.value.endings == [Ending.TRAITOR]
    assert "Opción no válida" in out.getvalue()
    games = read_games(data_dir)
    assert "g" not in games
    assert "other" in games


def test_play_day_advances_and_saves(tmp_path):
    data_dir = _data_dir(tmp_path, [("g", 1, 0)])
    game = SaveGame("g", 1, 0)
    world = _world(12, {"g": game})
    console, out = _console(["3", ""] * 6)
    play_day(world, game, console, data_dir, random.Random(4))
    assert game.day == 2
    assert out.getvalue().count("Correcto, buen trabajo") == 6
    assert game.aura == 6 * 200
    saved = read_games(data_dir)["g"]
    assert (saved.day, saved.aura) == (game.day, game.aura)
    assert len(world.subjects) == 12 - 7


def test_start_game_returns_ending(tmp_path):
    data_dir = _data_dir(tmp_path, [("g", 31, 0)])
    game = SaveGame("g", 31, 0)
    world = _world(8, {"g": game})
    console, out = _console(["3", ""])
    result = start_game(world, "g", console, data_dir, random.Random(2))
    assert result == [Ending.RETIREMENT]
    assert "Partida 'g' iniciada exitosamente." in out.getvalue()
    assert "g" not in read_games(data_dir)


def test_start_game_unknown_name(tmp_path):
    data_dir = _data_dir(tmp_path, [])
    console, _ = _console([])
    with pytest.raises(KeyError):
        start_game(_world(8), "missing", console, data_dir, random.Random(0))