from rich.console import Console
from rich.panel import Panel

from meeting_rpg.application.services.game_service import GameService
from meeting_rpg.presentation.game_loop import run_game_loop
from meeting_rpg.presentation.menu_controls import arrow_menu, clear_screen, prompt_text


_CONSOLE = Console()
_HELP_LINES = (
    "[bold]How to play[/bold]",
    "- Add team members, then send them into meeting tasks.",
    "- Each task rolls a d20 plus the required skill against its difficulty.",
    "- Everyone gets 3 activities a day; Advance Day refreshes them.",
    "- Skills above 1 start to slip after 7 days without any activity.",
    "- Team Task: each extra teammate adds +2 to every roll (max +8).",
    "- Reach the XP threshold for your rank, then Attempt Promotion.",
)


def _print_panel(body: str, title: str, border_style: str) -> None:
    if _CONSOLE is not None:
        _CONSOLE.print(Panel.fit(body, title=f"[bold]{title}[/bold]", border_style=border_style))
        return
    print(f"=== {title} ===")
    print(body)


def main_menu(game_service: GameService) -> None:
    options = ["Start Meeting", "Help", "Quit"]
    _print_panel(
        "Welcome to Meeting Masters RPG\nBuild your team and level up through meeting challenges!",
        "Meeting Masters",
        "cyan",
    )

    while True:
        choice_idx = arrow_menu("Meeting Masters RPG", options)

        if choice_idx == 0:
            run_game_loop(game_service)

        elif choice_idx == 1:
            clear_screen()
            _print_panel("\n".join(_HELP_LINES), "Help", "yellow")
            prompt_text("Press ENTER to return to the menu...")
            clear_screen()

        elif choice_idx == 2 or choice_idx == -1:
            clear_screen()
            _print_panel("Thanks for playing Meeting Masters RPG!", "Farewell", "magenta")
            break
