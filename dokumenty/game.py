"""The daily loop of the border post: queues, verdicts, scoring and endings."""

from __future__ import annotations

import enum
import random
from collections import deque
from typing import Optional

from .models import Person, SaveGame
from .rules import is_eligible
from .screens import (
    DARK_GREEN,
    DARK_YELLOW,
    GREY,
    RED,
    RESET,
    YELLOW,
    Console,
    id_card_view,
    passport_view,
    stamp_view,
    subject_summary,
)
from .storage import PathLike, World, autosave, delete_game

QUEUE_SIZE = 7
PEOPLE_PER_DAY = 6
ID_RANGE = 1000
AURA_STEP = 200
TRAITOR_AURA = -2000
HERO_AURA = 6000
LAST_DAY = 31


class Ending(enum.Enum):
    """The ways a game can finish."""

    TRAITOR = "traitor"
    HERO = "hero"
    RETIREMENT = "retirement"

    @property
    def lines(self) -> tuple[str, ...]:
        """The text shown when this ending is reached."""
        return _ENDING_TEXT[self]


_HEADER = "\033[91m=== COMITÉ DE SEGURIDAD DEL ESTADO DE LA UNIÓN SOVIÉTICA ===\033[0m"

_ENDING_TEXT = {
    Ending.TRAITOR: (
        _HEADER,
        "\033[97mInforme Final de Evaluación Disciplinaria\033[0m",
        "",
        "\033[93m>> Estado del aura: -2000 (peligro nacional)\033[0m",
        "",
        "\033[91m>>> Camarada:\033[0m",
        "\033[37mSus decisiones han puesto en riesgo la integridad de nuestra gloriosa nación.\033[0m",
        "\033[37mHa permitido el ingreso de enemigos del pueblo, saboteadores y traidores.\033[0m",
        "\033[37mEl Comité Central lo considera una amenaza para la seguridad estatal.\033[0m",
        "",
        "\033[91mHa sido destituido de su cargo y será juzgado por crímenes contra la patria.\033[0m",
        "",
        "\033[91m=== EL ESTADO NO OLVIDA ===\033[0m",
    ),
    Ending.HERO: (
        _HEADER,
        "\033[97mReconocimiento Oficial del Partido\033[0m",
        "",
        "\033[93m>> Estado del aura: +2000 (excelencia patriótica)\033[0m",
        "",
        "\033[91m>>> Camarada:\033[0m",
        "\033[37mSu incansable labor ha salvaguardado la frontera de la URSS.\033[0m",
        "\033[37mHa identificado y neutralizado amenazas con disciplina ejemplar.\033[0m",
        "\033[37mEl Partido lo reconoce como un verdadero defensor del pueblo.\033[0m",
        "",
        "\033[92mHa sido condecorado con la Medalla al Mérito Fronterizo.\033[0m",
        "\033[92mSe le ha asignado una vivienda digna y raciones dobles para su familia.\033[0m",
        "",
        "\033[91m=== ¡GLORIA AL CAMARADA INSPECTOR! ===\033[0m",
    ),
    Ending.RETIREMENT: (
        _HEADER,
        "\033[97mInforme de Cese de Funciones\033[0m",
        "",
        "\033[93m>> Tiempo de servicio: 11 días continuos\033[0m",
        "",
        "\033[91m>>> Camarada:\033[0m",
        "\033[37mSu período de asignación en el puesto fronterizo ha concluido.\033[0m",
        "\033[37mEl Comité agradece sus servicios, sean cuales hayan sido sus resultados.\033[0m",
        "\033[37mSerá relevado por otro inspector para continuar la vigilancia del puesto.\033[0m",
        "",
        "\033[92mPuede regresar a su hogar bajo supervisión del Partido.\033[0m",
        "",
        "\033[91m=== LA FRONTERA SIEMPRE VIGILA ===\033[0m",
    ),
}


class GameOver(Exception):
    """Raised when a game reaches one or more endings and has been erased."""

    def __init__(self, endings: list[Ending]) -> None:
        super().__init__(", ".join(ending.value for ending in endings))
        self.endings = list(endings)


def build_queue(
    world: World, rng: Optional[random.Random] = None, size: int = QUEUE_SIZE
) -> deque[Person]:
    """Draw ``size`` distinct travellers and take them out of ``world``.

    Only records whose index is below 1000 and which have a subject,
    a passport and an identity card can be drawn.
    """
    rng = rng if rng is not None else random.Random()
    available = sorted(
        (
            key
            for key in world.subjects
            if key in world.passports
            and key in world.id_cards
            and key.isdigit()
            and int(key) < ID_RANGE
        ),
        key=int,
    )
    if len(available) < size:
        raise ValueError(
            f"need {size} travellers, only {len(available)} are available"
        )
    queue: deque[Person] = deque()
    for key in rng.sample(available, size):
        queue.append(
            Person(
                subject=world.subjects.pop(key),
                id_card=world.id_cards.pop(key),
                passport=world.passports.pop(key),
            )
        )
    return queue


def score_decision(person: Person, game: SaveGame, approved: bool) -> bool:
    """Adjust the aura of ``game`` for a verdict; return whether it was right."""
    correct = approved == person.subject.eligible
    game.aura += AURA_STEP if correct else -AURA_STEP
    return correct


def endings(game: SaveGame) -> list[Ending]:
    """Every ending that ``game`` has reached, in the order they are shown."""
    reached = []
    if game.aura <= TRAITOR_AURA:
        reached.append(Ending.TRAITOR)
    if game.aura >= HERO_AURA:
        reached.append(Ending.HERO)
    if game.day == LAST_DAY:
        reached.append(Ending.RETIREMENT)
    return reached


def _read_choice(console: Console) -> str:
    while True:
        line = console.read_line().strip()
        if line:
            return line[0]


def _finish_if_over(game: SaveGame, console: Console, data_dir: PathLike) -> None:
    reached = endings(game)
    if not reached:
        return
    for ending in reached:
        console.type_out(ending.lines)
    if delete_game(data_dir, game.name):
        console.write(
            f'{RED}>> La partida "{game.name}" ha sido eliminada por temas '
            f"confidenciales .{RESET}\n"
        )
    else:
        console.write(
            f'{YELLOW}>> No se encontró la partida "{game.name}" en el registro.'
            f"{RESET}\n"
        )
    raise GameOver(reached)


def verdict_menu(
    person: Person, game: SaveGame, console: Console, data_dir: PathLike
) -> bool:
    """Let the player inspect ``person`` until approving or rejecting them.

    Returns True when the traveller was approved. Raises GameOver when an
    ending is reached; the game is then removed from the save file.
    """
    while True:
        console.clear()
        console.write(subject_summary(person, game.day))
        choice = _read_choice(console)
        decision: Optional[bool] = None
        if choice == "1":
            console.clear()
            console.write(id_card_view(person.id_card))
        elif choice == "2":
            console.clear()
            console.write(passport_view(person.passport))
        elif choice in ("3", "4"):
            decision = choice == "3"
            console.write(stamp_view(person.id_card.name, decision))
            if score_decision(person, game, decision):
                console.write(f"{DARK_GREEN}Correcto, buen trabajo\n\n")
            else:
                console.write(f"{RED}Incorrecto, tomaste una decisión equivocada\n\n")
            console.write(RESET)
        else:
            console.write("\n Opción no válida. Intente de nuevo.\n")
        _finish_if_over(game, console, data_dir)
        console.pause()
        if decision is not None:
            return decision


def play_day(
    world: World,
    game: SaveGame,
    console: Console,
    data_dir: PathLike,
    rng: Optional[random.Random] = None,
) -> None:
    """Run one working day, then advance the day and save progress."""
    console.write(
        f"{DARK_YELLOW}Día: {GREY}{game.day} {DARK_YELLOW}- Hora: {GREY}09:00\n{RESET}"
    )
    console.write(f"{GREY}Inicia el turno...\n\n{RESET}")
    queue = build_queue(world, rng, QUEUE_SIZE)
    for number in range(1, PEOPLE_PER_DAY + 1):
        console.write(f"Se aproxima la persona número: {number}\n\n")
        person = queue.popleft()
        person.subject.eligible = is_eligible(person, game.day)
        verdict_menu(person, game, console, data_dir)
    console.clear()
    game.day += 1
    autosave(data_dir, game)


def start_game(
    world: World,
    name: str,
    console: Console,
    data_dir: PathLike,
    rng: Optional[random.Random] = None,
) -> list[Ending]:
    """Play the saved game ``name`` day after day until it ends.

    Returns the endings reached. Raises KeyError for an unknown game.
    """
    game = world.games[name]
    rng = rng if rng is not None else random.Random()
    console.clear()
    console.write(f"\nPartida '{game.name}' iniciada exitosamente.\n\n")
    autosave(data_dir, game)
    try:
        while True:
            play_day(world, game, console, data_dir, rng)
    except GameOver as over:
        return over.endings