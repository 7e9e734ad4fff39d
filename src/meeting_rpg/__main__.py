from pathlib import Path
import logging
import os
import sys

from dotenv import load_dotenv

# Ensure the src directory is on sys.path when running as a script
_SRC_DIR = Path(__file__).resolve().parents[1]
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from meeting_rpg.bootstrap import create_game_service
from meeting_rpg.presentation.main_menu import main_menu


def _print_help_surface() -> None:
    print("\nHelp:")
    print("- Main menu: use UP/DOWN (or W/S), ENTER to select, ESC/Q to go back.")
    print("- Team selections accept numbers separated by commas or spaces, e.g. 1, 3 4.")
    print("- Set MEETING_RPG_LOG_LEVEL=DEBUG to log every dice roll.")


def _setup_logging() -> None:
    level_name = os.getenv("MEETING_RPG_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    log_file = os.getenv("MEETING_RPG_LOG_FILE", "").strip()
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        handlers=handlers,
    )


def main():
    load_dotenv()
    _setup_logging()
    try:
        game_service = create_game_service()
        main_menu(game_service)
    except KeyboardInterrupt:
        print("\nSession ended.")
    except Exception as exc:
        logging.getLogger(__name__).debug("Unhandled error in the menu loop", exc_info=True)
        print("An unexpected error occurred. The game closed safely.")
        print(f"Reason: {exc}")
        _print_help_surface()


if __name__ == "__main__":
    main()
