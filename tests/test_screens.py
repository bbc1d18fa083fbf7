import io
import re

import pytest

from dokumenty.models import IdCard, Passport, Person, Subject
from dokumenty.screens import (
    MENU_OPTIONS,
    Console,
    id_card_view,
    main_menu,
    passport_view,
    progress_frame,
    rules_view,
    stamp_view,
    subject_summary,
)

ANSI = re.compile(r"\033\[[0-9;]*[A-Za-z]")


def plain(text):
    return ANSI.sub("", text)


def make_person():
    return Person(
        subject=Subject("Ivan Petrov", "Masculino", "Trabajo", 900),
        id_card=IdCard("Ivan Petrov", "D-1", "03/05/1950", "Polonia", "10/09/1990", "Masculino"),
        passport=Passport("Ivan Petrov", "Polonia", "P-1", "D-1", "10/09/1990"),
    )


def make_console(lines=()):
    out = io.StringIO()
    feed = iter(lines)
    sleeps = []
    console = Console(out=out, read_line=lambda: next(feed), sleep=sleeps.append)
    return console, out, sleeps, feed


def test_progress_frame_start_and_end():
    first = progress_frame(0, 40, 30)
    assert first.startswith("Cargando... |=>")
    assert first.endswith("=|")
    assert first.count("-") == 29
    last = progress_frame(40, 40, 30)
    assert ">" not in last and "-" not in last


@pytest.mark.parametrize("step", range(41))
def test_progress_frame_has_constant_length(step):
    assert len(progress_frame(step, 40, 30)) == len(progress_frame(0, 40, 30))


def test_progress_frame_rejects_zero_steps():
    with pytest.raises(ValueError):
        progress_frame(0, 0, 30)


def test_main_menu_highlights_one_option():
    for selection, option in enumerate(MENU_OPTIONS):
        text = plain(main_menu(selection))
        assert f">> {option} <<" in text
        assert text.count(">>") == 1
        assert "=== Dokumenty Please ===" in text
        for other in MENU_OPTIONS:
            if other != option:
                assert f"   {other}\n" in text


def test_id_card_view_shows_fields():
    card = make_person().id_card
    text = plain(id_card_view(card))
    name_line = next(line for line in text.splitlines() if "NOMBRE:" in line)
    assert card.name in name_line
    for value in (card.country, card.gender, card.document, card.birth, card.expiry):
        assert value in text


def test_id_card_view_keeps_long_values_whole():
    card = IdCard("X" * 40, "1", "01/01/1950", "Polonia", "01/01/1990", "F")
    assert "X" * 40 in plain(id_card_view(card))


def test_passport_view_shows_fields():
    passport = make_person().passport
    text = plain(passport_view(passport))
    number_line = next(line for line in text.splitlines() if "N° PASAPORTE:" in line)
    assert passport.number in number_line
    assert passport.name in text and passport.country in text


def test_rules_view_accumulates():
    counts = [
        sum(1 for line in plain(rules_view(day)).splitlines() if line[:1].isdigit())
        for day in range(1, 6)
    ]
    assert counts == sorted(counts)
    assert counts[-1] == counts[-2]
    day1 = plain(rules_view(1))
    assert "Rechazar motivos de turismo." in day1
    assert "Rechazar motivos familiares." not in day1
    assert "Rechazar motivos familiares." in plain(rules_view(4))
    assert "Reglas de Inmigración - Día 3" in plain(rules_view(3))


def test_subject_summary_lists_traveller():
    person = make_person()
    text = plain(subject_summary(person, 2))
    assert "Nombre: Ivan Petrov" in text
    assert "País: Polonia" in text
    assert "Dinero: 900 rublos" in text
    assert "Motivo de viaje: Trabajo" in text
    assert plain(rules_view(2)) in text
    assert text.endswith("Ingrese su opción: ")


def test_stamp_view():
    approved = plain(stamp_view("Al", True))
    assert "~~     Al ~~" in approved
    assert "A P R O B A D O" in approved
    rejected = plain(stamp_view("Al", False))
    assert "R E C H A Z A D O" in rejected
    assert "A P R O B A D O" not in rejected


def test_console_clear_and_write():
    console, out, _, _ = make_console()
    console.clear()
    console.write("hola")
    assert out.getvalue() == "\033[2J\033[Hhola"


def test_console_read_and_pause():
    console, out, _, feed = make_console(["uno", "dos", "tres"])
    assert console.read_line() == "uno"
    assert console.pause() == "dos"
    assert "Presione una tecla para continuar..." in out.getvalue()
    assert next(feed) == "tres"


def test_console_type_out():
    console, out, sleeps, feed = make_console(["", "after"])
    console.type_out(["ab", "c"])
    assert "ab\nc\n" in plain(out.getvalue())
    assert sleeps.count(0.015) == 3
    assert sleeps.count(0.13) == 2
    assert sleeps[-1] == 0.45
    assert next(feed) == "after"


def test_console_progress_bar():
    console, out, sleeps, _ = make_console()
    console.progress_bar(1)
    assert len(sleeps) == 41
    assert all(value == pytest.approx(0.025) for value in sleeps)
    text = plain(out.getvalue())
    assert text.endswith(progress_frame(40, 40, 30) + "\n")
    assert text.count("\r") == 41