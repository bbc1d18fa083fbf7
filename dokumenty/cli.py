"""Command-line entry point: main menu, new games and saved games."""

from __future__ import annotations

import argparse
import random
import re
from typing import Optional, Sequence

from .game import Ending, start_game
from .models import SaveGame
from .screens import (
    GREEN,
    GREY,
    MENU_OPTIONS,
    RED,
    RESET,
    WHITE,
    YELLOW,
    Console,
    main_menu,
)
from .storage import PathLike, World, append_game, load_world

NAME_LIMIT = 50
DEFAULT_DATA_DIR = "data"

_UP_KEYS = frozenset({"w", "k", "arriba", "up"})
_DOWN_KEYS = frozenset({"s", "j", "abajo", "down"})
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _sgr(code: int) -> str:
    return f"\033[{code}m"


_C_ALERT = _sgr(91)
_C_HEAD = _sgr(97)
_C_NOTE = _sgr(93)
_C_GOOD = _sgr(92)
_C_BODY = _sgr(37)
_C_END = _sgr(0)


def _paint(colour: str, text: str) -> str:
    return f"{colour}{text}{_C_END}"


def _body(*parts: str) -> str:
    """A grey body line, with optional highlighted fragments inside it."""
    return _paint(_C_BODY, "".join(parts))


def _hl(colour: str, text: str) -> str:
    """Highlight a fragment inside a grey body line."""
    return f"{colour}{text}{_C_BODY}"


INTRO = (
    _paint(_C_ALERT, "=== COMITÉ DE SEGURIDAD DEL ESTADO DE LA UNIÓN SOVIÉTICA ==="),
    _paint(_C_HEAD, "Departamento de Control de Fronteras e Identificación Ciudadana"),
    "",
    _paint(_C_NOTE, ">> Fecha: 6 de Junio de 1985"),
    _paint(_C_NOTE, ">> Ubicación: Puesto Fronterizo de Krasnograd, URSS"),
    "",
    _paint(_C_HEAD, ">>> Camarada inspector:"),
    _body(
        "Usted ha sido asignado por el Comité Central para supervisar "
        "el cruce de nuestra sagrada frontera."
    ),
    _body("Verifique cuidadosamente pasaportes, permisos y documentos de identidad."),
    _paint(_C_ALERT, "¡Alerta! Los enemigos del pueblo intentan infiltrarse a diario."),
    "",
    _paint(_C_HEAD, "Cada autorización o rechazo influye en la seguridad del Estado."),
    _paint(_C_ALERT, "Errores serán considerados actos de traición."),
    _paint(_C_GOOD, "La obediencia al protocolo será recompensada por el Partido."),
    "",
    _paint(_C_ALERT, "=== ¡POR LA PATRIA Y EL PARTIDO! ==="),
    "",
    _paint(_C_ALERT, "Presiona una tecla para continuar..."),
)

GUIDE = (
    _paint(_C_ALERT, "=== REGLAS BÁSICAS DE DOKUMENTY PLEASE ==="),
    "",
    _paint(_C_HEAD, "1. Objetivo del Juego"),
    _body(
        "Eres un oficial en un puesto fronterizo de la Unión Soviética "
        "durante la Guerra Fría. Tu misión es:"
    ),
    _body(
        "- Revisar documentos (pasaportes, DNI, permisos) de civiles, "
        "soldados y refugiados."
    ),
    _body(
        "- Proteger la seguridad nacional detectando infiltrados "
        "o documentos falsos."
    ),
    _body(
        "- Equilibrar las órdenes del gobierno con dilemas morales "
        "que afectan la historia."
    ),
    "",
    _paint(_C_HEAD, "2. Cómo Jugar"),
    _body(
        "- Revisa los documentos de cada persona, comparando nombres, "
        "IDs, países y fechas."
    ),
    _body("- Asegúrate de que sean válidos (no vencidos, sin errores)."),
    _body(
        "- Decide: ",
        _hl(_C_GOOD, "Aceptar (1)"),
        " para permitir el ingreso o ",
        _hl(_C_ALERT, "Rechazar (0)"),
        " con un motivo.",
    ),
    _body(
        "- Cada día recibes reglas: qué documentos chequear, "
        "perfiles sospechosos o restricciones."
    ),
    "",
    _paint(_C_HEAD, "3. Progresión y Puntuación"),
    _body(
        "- Cada día atiendes a varias personas y avanzas al siguiente, "
        "con reglas más difíciles."
    ),
    _body(
        "- Tu ",
        _hl(_C_GOOD, "aura"),
        " refleja tu desempeño: sube con decisiones correctas, baja con errores.",
    ),
    _body(
        "- Si tu aura cae a ",
        _hl(_C_ALERT, "-2000 o menos"),
        ", pierdes y la partida se elimina.",
    ),
    _body("- Si tu aura alcanza ", _hl(_C_GOOD, "+2000 o más"), ", ganas la partida."),
    _body("- Tu progreso se guarda únicamente al finalizar el día."),
    _body("- Carga partidas anteriores desde el menú principal."),
    "",
    _paint(_C_HEAD, "4. Consecuencias"),
    _body(
        "- Aceptar a un espía o rechazar a un inocente tiene "
        "consecuencias en la historia."
    ),
    _body("- Tus elecciones desbloquean diferentes finales según tu aura."),
    "",
    _paint(_C_HEAD, "5. Interfaz y Controles"),
    _body(
        "- Usa ",
        _hl(_C_NOTE, "flechas"),
        " para navegar menús y ",
        _hl(_C_NOTE, "Enter"),
        " para seleccionar.",
    ),
    _body("- Ingresa el nombre de la partida (máximo 50 caracteres)."),
    _body(
        "- Decide con ",
        _hl(_C_GOOD, "1 (Aceptar)"),
        " o ",
        _hl(_C_ALERT, "0 (Rechazar)"),
        ".",
    ),
    "",
    _paint(_C_HEAD, "6. Eventos Especiales"),
    _body(
        "- Eventos aleatorios (cambios de reglas o situaciones históricas) "
        "afectan el juego."
    ),
    _body("- La dificultad crece con más personas y reglas complejas."),
    "",
    _paint(_C_ALERT, "=== ¡POR LA PATRIA, CAMARADA! ==="),
)


def read_name(console: Console) -> str:
    """Read a non-empty game name of at most 50 characters."""
    while True:
        name = console.read_line()[:NAME_LIMIT]
        if name:
            return name
        console.write("El nombre no puede estar vacío.\n")


def create_game(
    world: World,
    console: Console,
    data_dir: PathLike,
    rng: Optional[random.Random] = None,
) -> Optional[list[Ending]]:
    """Create a new saved game and play it.

    Returns None when the name is already taken, otherwise the endings
    reached once the game is over.
    """
    console.clear()
    console.write("Creando una nueva partida...\n")
    console.write("Ingrese el nombre de la partida: ")
    name = read_name(console)

    if name in world.games:
        console.write(
            "\nYa existe una partida con ese nombre, por favor intenta con otro.\n"
        )
        return None

    game = SaveGame(name)
    append_game(data_dir, game)
    world.games.insert(game.name, game)
    console.write(f"\nPartida '{game.name}' creada exitosamente.\n")

    console.type_out(INTRO)
    return start_game(world, name, console, data_dir, rng)


def _leading_int(text: str) -> Optional[int]:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def load_game(
    world: World,
    console: Console,
    data_dir: PathLike,
    rng: Optional[random.Random] = None,
) -> Optional[list[Ending]]:
    """Let the player pick a saved game and play it.

    Returns None when there is nothing to load or the choice is invalid,
    otherwise the endings reached once the game is over.
    """
    if not len(world.games):
        console.write(f"{RED}No se encontraron partidas guardadas.{RESET}\n")
        return None

    console.write(f"{WHITE}Partidas guardadas disponibles:\n\n{RESET}")
    names = list(world.games)
    for position, (name, game) in enumerate(world.games.items(), start=1):
        console.write(
            f"{RED}{position}.{RESET} {GREY}{name}{RESET} "
            f"(Día: {GREY}{game.day}{RESET})\n"
        )

    console.write(
        f"\n{YELLOW}Seleccione una partida por número (1-{len(names)}): {RESET}"
    )
    choice = _leading_int(console.read_line())
    if choice is None or not 1 <= choice <= len(names):
        console.write(f"{RED}Selección inválida.{RESET}\n")
        return None

    selected = names[choice - 1]
    console.write(f'{GREEN}\nIniciando partida "{selected}"...\n\n{RESET}')
    console.progress_bar(1)
    return start_game(world, selected, console, data_dir, rng)


def _choose_option(console: Console) -> int:
    """Show the main menu until an option is confirmed; return its index."""
    selection = 0
    last = len(MENU_OPTIONS) - 1
    while True:
        console.clear()
        console.write(main_menu(selection))
        console.write(
            f"\n{GREY}(w/s para moverse, Enter para elegir, "
            f"o el número de la opción){RESET}\n"
        )
        key = console.read_line().strip().lower()
        if not key:
            return selection
        if key in _UP_KEYS:
            selection = max(0, selection - 1)
        elif key in _DOWN_KEYS:
            selection = min(last, selection + 1)
        elif key.isdigit() and 1 <= int(key) <= len(MENU_OPTIONS):
            return int(key) - 1


def _show_guide(console: Console) -> None:
    console.clear()
    console.type_out(GUIDE)
    console.write("\nPresiona Enter para volver al menú principal...")
    console.read_line()


def _run(
    world: World, console: Console, data_dir: PathLike, rng: random.Random
) -> int:
    while True:
        selection = _choose_option(console)
        console.clear()
        ended: Optional[list[Ending]] = None
        if selection == 0:
            console.write("Has seleccionado: Jugar\n")
            ended = create_game(world, console, data_dir, rng)
        elif selection == 1:
            console.write("Has seleccionado: Cargar partida\n")
            ended = load_game(world, console, data_dir, rng)
        elif selection == 2:
            console.write("Has seleccionado: Reglas\n")
            _show_guide(console)
        else:
            console.write("Saliendo del juego...\n")
            return 0
        if ended:
            return 1
        console.pause()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game from the command line; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="dokumenty", description="Border inspection game."
    )
    parser.add_argument(
        "--data-dir",
        default=DEFAULT_DATA_DIR,
        help="directory holding the CSV data files",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for drawing travellers"
    )
    args = parser.parse_args(argv)

    console = Console()
    try:
        world = load_world(args.data_dir)
    except FileNotFoundError as exc:
        console.write(f"Error al abrir el archivo {exc.filename}\n")
        return 1
    except ValueError as exc:
        console.write(f"{RED}{exc}{RESET}\n")
        return 1

    rng = random.Random(args.seed)
    try:
        return _run(world, console, args.data_dir, rng)
    except EOFError:
        return 0
    except ValueError as exc:
        console.write(f"{RED}{exc}{RESET}\n")
        return 1