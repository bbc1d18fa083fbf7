"""Text screens and a small console wrapper for the border-control game."""

from __future__ import annotations

import sys
import time
from typing import Callable, Iterable, Optional, TextIO

from .models import IdCard, Passport, Person

RESET = "\033[0m"
RED = "\033[91m"
GREEN = "\033[92m"
DARK_GREEN = "\033[32m"
YELLOW = "\033[93m"
DARK_YELLOW = "\033[33m"
WHITE = "\033[97m"
GREY = "\033[37m"
TITLE = "\033[91;44m"
HIGHLIGHT = "\033[90;47m"
CLEAR = "\033[2J\033[H"

MENU_OPTIONS = (
    "Empezar partida nueva",
    "Cargar partida",
    "Reglas",
    "Salir del juego",
)

PROGRESS_STEPS = 40
PROGRESS_WIDTH = 30
CHAR_DELAY = 0.015
LINE_DELAY = 0.13
FINAL_DELAY = 0.45

_RULES = (
    (1, "1.", "Nombres deben coincidir en los documentos."),
    (1, "2.", "Países deben coindicir en los documentos."),
    (1, "3.", "Rechazar motivos de turismo."),
    (2, "4.", "DNI y pasaporte no deben estar vencidos. (ENERO Y FEBRERO VENCIDOS)"),
    (2, "5.", "Números de documentos deben coincidir."),
    (3, "6.", "Rechazar pasaportes con la letra 'O'."),
    (3, "7.", "Prohibir ingreso a nacidos en agosto."),
    (4, "8.", "Prohibir ingreso a nacionalidad 'Letonia'."),
    (4, "9.", "Rechazar a quienes tengan menos de 800 rublos."),
    (4, "10.", "Rechazar a quienes tengan más de 2500 rublos."),
    (4, "11.", "Rechazar motivos familiares."),
)


def _read_stdin() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError("end of input")
    return line.rstrip("\r\n")


class Console:
    """Terminal output and line input, with pluggable streams and delays."""

    def __init__(
        self,
        out: Optional[TextIO] = None,
        read_line: Optional[Callable[[], str]] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        self._out = out if out is not None else sys.stdout
        self._reader = read_line if read_line is not None else _read_stdin
        self._sleep = sleep if sleep is not None else time.sleep

    def clear(self) -> None:
        """Clear the screen and move the cursor home."""
        self.write(CLEAR)

    def write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def read_line(self) -> str:
        """Read one line of input without its line ending."""
        return self._reader()

    def pause(self) -> str:
        """Ask for a key press and wait for a line of input."""
        self.write("Presione una tecla para continuar...\n")
        return self.read_line()

    def type_out(self, lines: Iterable[str]) -> None:
        """Clear the screen, print ``lines`` one character at a time, then wait."""
        self.clear()
        self.write(GREEN)
        for line in lines:
            for char in line:
                self.write(char)
                self._sleep(CHAR_DELAY)
            self.write("\n")
            self._sleep(LINE_DELAY)
        self._sleep(FINAL_DELAY)
        self.write(RESET)
        self.read_line()

    def progress_bar(self, seconds: float) -> None:
        """Draw a loading bar that fills over roughly ``seconds`` seconds."""
        wait_ms = int(seconds * 1000 / PROGRESS_STEPS)
        for step in range(PROGRESS_STEPS + 1):
            colour = RED if step % 2 == 0 else YELLOW
            self.write(
                colour + "\r" + progress_frame(step, PROGRESS_STEPS, PROGRESS_WIDTH)
            )
            self._sleep(wait_ms / 1000)
        self.write(RESET + "\n")


def progress_frame(
    step: int, steps: int = PROGRESS_STEPS, width: int = PROGRESS_WIDTH
) -> str:
    """One frame of the loading bar after ``step`` of ``steps`` updates."""
    if steps <= 0:
        raise ValueError("steps must be positive")
    if width <= 0:
        raise ValueError("width must be positive")
    completed = step * width // steps
    head = ">" if completed < width else ""
    rest = "-" * max(0, width - completed - 1)
    return "Cargando... |=" + "=" * completed + head + rest + "=|"


def main_menu(selection: int) -> str:
    """The title and the four main options with ``selection`` highlighted."""
    parts = [TITLE + "=== Dokumenty Please ===\n\n" + RESET]
    for index, option in enumerate(MENU_OPTIONS):
        if index == selection:
            parts.append(f"{HIGHLIGHT}>> {option} <<{RESET}\n")
        else:
            parts.append(f"   {option}\n")
    return "".join(parts)


def id_card_view(card: IdCard) -> str:
    """Boxed drawing of an identity card showing its fields."""

    def field(art: str, label: str, value: str) -> str:
        return f"║{art}│       {label}{GREY}{value:<23}{YELLOW}║\n"

    lines = [
        YELLOW
        + "╔═════════════════════════════════════════════════════════════════════════════════════════════╗\n",
        "║              ☭ ДОКУМЕНТ ЛИЧНОСТИ СОЮЗА СОВЕТСКИХ СОЦИАЛИСТИЧЕСКИХ РЕСПУБЛИК ☭               ║\n",
        "║              ☭ IDENTITY DOCUMENT OF THE UNION OF SOVIET SOCIALIST REPUBLICS ☭               ║\n",
        "╠═════════════════════════════════════════════════════════════════════════════════════════════╣\n",
        "║                                               │                                             ║\n",
        field("                 #######                       ", "NOMBRE:        ", card.name),
        field("               ###########                     ", "PAÍS:          ", card.country),
        field("              #############                    ", "SEXO:          ", card.gender),
        field("             ###############                   ", "N° DOCUMENTO:  ", card.document),
        field("             ###############                   ", "NACIMIENTO:    ", card.birth),
        field("             ###############                   ", "VÁLIDO HASTA:  ", card.expiry),
        "║             ###############                   │                                             ║\n",
        "║              #############                    │       8888888b.  888b    888 8888888        ║\n",
        '║               ###########                     │       888  "Y88b 8888b   888   888          ║\n',
        "║                #########                      │       888    888 88888b  888   888          ║\n",
        "║                #########                      │       888    888 888Y88b 888   888          ║\n",
        "║             ################                  │       888    888 888 Y88b888   888          ║\n",
        "║          #####################                │       888    888 888  Y88888   888          ║\n",
        "║       ###########################             │       888  .d88P 888   Y8888   888          ║\n",
        '║      #############################            │       8888888P"  888    Y888 8888888        ║\n',
        "╠═════════════════════════════════════════════════════════════════════════════════════════════╣\n",
        "║                        ☭ ВЫДАН МИНИСТЕРСТВОМ ВНУТРЕННИХ ДЕЛ СССР ☭                          ║\n",
        "║                     ☭ AUTHORIZED BY THE SOVIET MINISTRY OF SECURITY ☭                       ║\n",
        "╚═════════════════════════════════════════════════════════════════════════════════════════════╝"
        + RESET
        + "\n",
    ]
    return "".join(lines)


def passport_view(passport: Passport) -> str:
    """Boxed drawing of a passport showing its fields."""

    def field(art: str, label: str, value: str) -> str:
        return f"║{art}│      {label}{GREY}{value:<29}{RED}║\n"

    lines = [
        RED
        + "╔══════════════════════════════════════════════════════════════════════════════════════════════════╗\n",
        "║                        ☭ ПАСПОРТ СОЮЗА СОВЕТСКИХ СОЦИАЛИСТИЧЕСКИХ РЕСПУБЛИК ☭                    ║\n",
        "║                        ☭ PASSPORT OF THE UNION OF SOVIET SOCIALIST REPUBLICS ☭                   ║\n",
        "╠══════════════════════════════════════════════════════════════════════════════════════════════════╣\n",
        "║███████████████████████████████████████████████│                                                  ║\n",
        field("█████████████████       ███████████████████████", "NOMBRE:        ", passport.name),
        field("███████████████           █████████████████████", "PAÍS:          ", passport.country),
        field("██████████████             ████████████████████", "N° DOCUMENTO:  ", passport.document),
        field("█████████████               ███████████████████", "N° PASAPORTE:  ", passport.number),
        field("█████████████               ███████████████████", "VÁLIDO HASTA:  ", passport.expiry),
        "║█████████████               ███████████████████│                                                  ║\n",
        "║█████████████               ███████████████████│                                                  ║\n",
        "║██████████████             ████████████████████│      ★ ★ ★ ★ ★ ★ ★ ★ ★ ★ ★ ★ ★ ★ ★ ★ ★           ║\n",
        "║███████████████           █████████████████████│      ★                               ★           ║\n",
        "║████████████████         ██████████████████████│      ★ Официальный паспорт СССР      ★           ║\n",
        "║████████████████         ██████████████████████│      ★ Official passport of the USSR ★           ║\n",
        "║█████████████                ██████████████████│      ★                               ★           ║\n",
        "║██████████                     ████████████████│      ★ ★ ★ ★ ★ ★ ★ ★ ★ ★ ★ ★ ★ ★ ★ ★ ★           ║\n",
        "║███████                           █████████████│                                                  ║\n",
        "║██████                             ████████████│                                                  ║\n",
        "╠══════════════════════════════════════════════════════════════════════════════════════════════════╣\n",
        "║                           ☭ ВЫДАН МИНИСТЕРСТВОМ ВНУТРЕННИХ ДЕЛ СССР ☭                            ║\n",
        "║                        ☭ AUTHORIZED BY THE SOVIET MINISTRY OF SECURITY ☭                         ║\n",
        "╚══════════════════════════════════════════════════════════════════════════════════════════════════╝"
        + RESET
        + "\n",
    ]
    return "".join(lines)


def rules_view(day: int) -> str:
    """The immigration rules in force on ``day``; they accumulate day by day."""
    parts = [f"{RED}Reglas de Inmigración - Día {day}{RESET}\n"]
    parts.extend(
        f"{WHITE}{label}{RESET} {GREY}{text}{RESET}\n"
        for first_day, label, text in _RULES
        if day >= first_day
    )
    parts.append("\n")
    return "".join(parts)


def subject_summary(person: Person, day: int) -> str:
    """The verdict screen for ``person``: day, rules, traveller data and choices."""
    subject = person.subject
    return "".join(
        [
            f"{YELLOW}\nDÍA {GREY}{day}\n{YELLOW}\n{RESET}",
            f"{YELLOW}FECHA: {GREY}AGOSTO\n{YELLOW}\n{RESET}",
            rules_view(day),
            f"{RED}=== MENÚ DEL VEREDICTO ===\n\n{RESET}",
            f"{WHITE}Información del sujeto\n{RESET}",
            f"{GREY}Nombre: {subject.name}\n",
            f"País: {person.id_card.country}\n{RESET}",
            f"Dinero: {subject.money} rublos\n",
            f"Motivo de viaje: {subject.reason}\n\n",
            f"{GREY}1. Inspeccionar DNI\n",
            f"2. Inspeccionar Pasaporte\n{RESET}",
            f"{GREEN}3. Aprobar\n",
            f"{RED}4. Rechazar\n{RESET}",
            f"{YELLOW}Ingrese su opción: {RESET}",
        ]
    )


def stamp_view(name: str, approved: bool) -> str:
    """The approval or rejection stamp shown for the traveller ``name``."""
    colour, label = (
        (DARK_GREEN, "A P R O B A D O") if approved else (RED, "R E C H A Z A D O")
    )
    return f"\n{colour}~~ {name:>6} ~~\n~~ {label:>6} ~~\n\n"