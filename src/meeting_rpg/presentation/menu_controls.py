import os
import sys
import time

from rich.console import Console
from rich.live import Live
from rich.panel import Panel

try:  # Windows-specific keyboard handling
    import msvcrt  # type: ignore
except ImportError:  # pragma: no cover - fallback for non-Windows
    msvcrt = None


_CONSOLE = Console()
_KEY_REPEAT_DEBOUNCE_SECONDS = 0.08


def _decorate_title(title: str) -> str:
    core = str(title or "").strip() or "Menu"
    return f"[bold cyan]{core}[/bold cyan]"


def clear_screen() -> None:
    """Clear the console in a basic cross-platform way."""

    os.system("cls" if os.name == "nt" else "clear")


def _read_key_windows():
    ch = msvcrt.getch()

    if ch in (b"\x00", b"\xe0"):
        ch2 = msvcrt.getch()
        if ch2 == b"H":
            return "UP"
        if ch2 == b"P":
            return "DOWN"
        return None

    if ch in (b"\r", b"\n"):
        return "ENTER"
    if ch == b"\x1b":
        return "ESC"

    try:
        return ch.decode("utf-8")
    except UnicodeDecodeError:
        return None


def read_key():
    """Read a key, defaulting to line input when msvcrt is unavailable."""

    if msvcrt is not None:
        return _read_key_windows()

    line = sys.stdin.readline()
    if line == "":
        return None
    return line.strip()


def normalize_menu_key(key):
    if key is None:
        return None

    if not isinstance(key, str):
        return key

    if key in {"UP", "DOWN", "ENTER", "ESC"}:
        return key

    lowered = key.lower().strip()
    mapping = {
        "w": "UP",
        "s": "DOWN",
        "": "ENTER",
        "enter": "ENTER",
        "q": "ESC",
        "esc": "ESC",
    }
    return mapping.get(lowered, lowered)


def _shortcut_index(key, option_count: int) -> int | None:
    if not isinstance(key, str) or not key.isdigit():
        return None
    position = int(key)
    if 1 <= position <= option_count:
        return position - 1
    return None


def arrow_menu(title: str, options: list[str], footer_hint: str | None = None) -> int:
    """Render a vertical menu driven by arrow keys, W/S, or a typed option number.

    Returns the selected option index, or -1 if the user presses ESC.
    """

    if not options:
        raise ValueError("arrow_menu requires at least one option")

    selected = 0
    last_nav_at = 0.0

    def _next_selection(current: int, key, now: float) -> int | None:
        nonlocal last_nav_at
        if key not in {"UP", "DOWN"}:
            return None
        if now - last_nav_at < _KEY_REPEAT_DEBOUNCE_SECONDS:
            return current
        last_nav_at = now
        step = -1 if key == "UP" else 1
        return (current + step) % len(options)

    def _build_panel(index: int):
        body_lines: list[str] = []
        for idx, option in enumerate(options):
            if idx == index:
                body_lines.append(f"[bold black on cyan] > {idx + 1}. {option} [/bold black on cyan]")
            else:
                body_lines.append(f"[white]   {idx + 1}. {option}[/white]")
        body_lines.append("")
        if footer_hint:
            body_lines.append(f"[cyan]{footer_hint}[/cyan]")
        body_lines.append("[dim]Arrows or W/S to move, ENTER to select, number to jump, ESC/Q to cancel.[/dim]")
        return Panel.fit(
            "\n".join(body_lines),
            title=_decorate_title(title),
            border_style="cyan",
            padding=(0, 1),
        )

    if _CONSOLE is not None:
        clear_screen()
        with Live(_build_panel(selected), console=_CONSOLE, refresh_per_second=30, transient=True) as live:
            while True:
                key = normalize_menu_key(read_key())
                if key is None:
                    return -1
                shortcut = _shortcut_index(key, len(options))
                if shortcut is not None:
                    return shortcut
                next_selected = _next_selection(selected, key, time.monotonic())
                if next_selected is not None:
                    if next_selected != selected:
                        selected = next_selected
                        live.update(_build_panel(selected), refresh=True)
                    continue
                if key == "ENTER":
                    return selected
                if key == "ESC":
                    return -1

    while True:
        clear_screen()
        print("=" * 40)
        print(f"{title:^40}")
        print("=" * 40)
        print("")

        for idx, option in enumerate(options):
            prefix = "> " if idx == selected else "  "
            print(f"{prefix}{idx + 1}. {option}")

        print("")
        if footer_hint:
            print(footer_hint)
        print("-" * 40)
        print("W/S to move, ENTER to select, number to jump, Q to cancel.")
        print("-" * 40)

        key = normalize_menu_key(read_key())
        if key is None:
            return -1
        shortcut = _shortcut_index(key, len(options))
        if shortcut is not None:
            return shortcut
        next_selected = _next_selection(selected, key, time.monotonic())
        if next_selected is not None:
            selected = next_selected
            continue
        if key == "ENTER":
            return selected
        if key == "ESC":
            return -1


def prompt_text(message: str) -> str:
    if _CONSOLE is not None:
        return str(_CONSOLE.input(f"[cyan]{message}[/cyan]"))
    return input(message)


def prompt_number(message: str) -> int | None:
    """Ask for a whole number; anything else yields ``None``."""

    raw = prompt_text(message).strip()
    try:
        return int(raw)
    except ValueError:
        return None
