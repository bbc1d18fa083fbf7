# Dokumenty Please

A terminal game set at a Soviet border checkpoint in 1985. Travellers queue
at your booth, each one carrying an ID card and a passport. Inspect the
documents, compare them with the day's rules, and stamp each traveller
approved or rejected. The game's text is in Spanish.

## Installing

```
pip install .
```

## Playing

```
dokumenty [--data-dir DIR] [--seed N]
```

- `--data-dir` – directory holding the CSV data files (default: `data`).
- `--seed` – seed for the random draw of travellers, for repeatable games.

Input is read line by line. In the main menu, type `w` (or `k`, `up`,
`arriba`) to move up, `s` (or `j`, `down`, `abajo`) to move down, and press
Enter on an empty line to choose the highlighted option; typing the option's
number (1–4) chooses it directly. The options are:

1. **Empezar partida nueva** – start a new save under a name of your choosing
   (at most 50 characters; names are compared without regard to case, so an
   existing name is refused).
2. **Cargar partida** – continue a saved game, picked by its number from a
   list that shows each game's current day.
3. **Reglas** – read the basic guide.
4. **Salir del juego** – quit.

At each traveller the verdict screen shows the rules in force and the
traveller's details. Enter `1` to inspect the ID card, `2` to inspect the
passport, `3` to approve or `4` to reject.

The command exits with status 0 when you quit (or input ends) and 1 when a
game reaches an ending or a data file is missing or malformed.

## Data files

The data directory must contain four CSV files, each beginning with a header
line:

- `partida.csv` – saved games: name, current day, aura.
- `sujetos.csv` – travellers: name, gender, reason for travel, money.
- `pasaportes.csv` – passports: name, country, passport number, document
  number, expiry.
- `DNI.csv` – ID cards: name, document number, date of birth, country,
  expiry, gender.

Travellers, passports and ID cards are matched by their row position: the
first data row of each file makes up one traveller, and so on. Dates are
written `DD/MM/YYYY`. Only the first 1000 rows can be drawn, and each
traveller is drawn at most once per session.

## Rules

Rules build up day by day; a rule from an earlier day still applies later.

- **Day 1**: the traveller's name must match the ID card and the passport;
  ID card and passport countries must match; reject the reason `Turismo`.
- **Day 2**: reject an ID card or passport whose expiry month is January or
  February; the passport's document number must match the ID card's.
- **Day 3**: reject passports whose number starts with `O`; reject ID cards
  whose expiry month is August.
- **Day 4 onwards**: reject `Letonia` on either document; reject anyone
  carrying under 800 or over 2500 roubles; reject the reason `Familia`.

Each day seven travellers are drawn and six of them come to the booth. Every
correct decision raises your aura by 200 and every mistake lowers it by 200.
At −2000 or below you are dismissed, at 6000 or above you are decorated, and
on day 31 you retire. Reaching any ending removes the save from
`partida.csv`. Progress is saved when a game starts and at the end of each
day.

## Using the pieces

The rule checks work without the terminal interface:

```python
from dokumenty.models import Subject, IdCard, Passport, Person
from dokumenty.rules import is_eligible

person = Person(
    subject=Subject("Ivan Petrov", "Masculino", "Trabajo", 1200),
    id_card=IdCard("Ivan Petrov", "123", "01/03/1950", "Polonia", "10/05/1990", "Masculino"),
    passport=Passport("Ivan Petrov", "Polonia", "P123", "123", "10/06/1990"),
)
is_eligible(person, day=4)  # True
```

- `dokumenty.storage` – `load_world` reads the four CSV files into a `World`;
  `read_games`, `read_subjects`, `read_passports`, `read_id_cards`,
  `append_game`, `delete_game`, `autosave` and `parse_csv_line` work on the
  files directly.
- `dokumenty.keyed.CaseInsensitiveMap` – the map of saved games by name.
- `dokumenty.game` – `build_queue` draws travellers from a `World`,
  `score_decision` adjusts the aura, `endings` reports which endings a
  `SaveGame` has reached, and `start_game` plays a saved game to its end.
- `dokumenty.screens` – the text screens (`main_menu`, `id_card_view`,
  `passport_view`, `rules_view`, `subject_summary`, `stamp_view`) and a
  `Console` whose output stream, input and delays can be replaced.

## What it does not do

- There is no background music, and menus are driven by typed lines rather
  than arrow keys.
- Individual decisions are not recorded; a save keeps only its name, day and
  aura.