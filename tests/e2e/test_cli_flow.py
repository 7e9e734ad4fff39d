import io
import sys
from pathlib import Path
import unittest
from unittest import mock

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from meeting_rpg.application.services.event_bus import EventBus
from meeting_rpg.application.services.game_service import GameService
from meeting_rpg.infrastructure.inmemory.inmemory_roster_repo import InMemoryRosterRepository
from meeting_rpg.infrastructure.inmemory.inmemory_task_catalog_repo import InMemoryTaskCatalogRepository
from meeting_rpg.presentation import game_loop, main_menu, menu_controls


class _ScriptedDice:
    def __init__(self, rolls):
        self._rolls = list(rolls)

    def roll_d20(self) -> int:
        return self._rolls.pop(0)


def _build_service(rolls=()) -> GameService:
    return GameService(
        InMemoryRosterRepository(),
        InMemoryTaskCatalogRepository(),
        dice=_ScriptedDice(rolls),
        event_bus=EventBus(),
    )


class CliFlowTests(unittest.TestCase):
    def _plain_console(self):
        return [
            mock.patch.object(game_loop, "_CONSOLE", None),
            mock.patch.object(main_menu, "_CONSOLE", None),
            mock.patch.object(menu_controls, "_CONSOLE", None),
        ]

    def _run(self, target, service, keys, inputs) -> str:
        patches = self._plain_console() + [
            mock.patch.object(menu_controls, "read_key", side_effect=keys),
            mock.patch("builtins.input", side_effect=inputs),
        ]
        for patcher in patches:
            patcher.start()
        try:
            with mock.patch("sys.stdout", new_callable=io.StringIO) as output:
                target(service)
        finally:
            for patcher in reversed(patches):
                patcher.stop()
        return output.getvalue()

    def test_full_meeting_session_from_title_screen(self) -> None:
        service = _build_service(rolls=[20, 20, 20])
        keys = ["1", "1", "1", "3", "4", "10", "6", "9", "11", "3"]
        inputs = [
            "Ayla", "",
            "Bran", "",
            "1", "1", "",
            "1 2", "2", "",
            "",
            "",
            "",
        ]

        transcript = self._run(main_menu.main_menu, service, keys, inputs)

        self.assertIn("Welcome to Meeting Masters RPG", transcript)
        self.assertIn("Ayla joined the meeting group!", transcript)
        self.assertIn("Bran joined the meeting group!", transcript)
        self.assertIn("SUCCESS! Ayla gains 25 XP.", transcript)
        self.assertIn("Team bonus: +2 for 2 participants.", transcript)
        self.assertIn("Teamwork pays off: every participant gains 5 bonus XP.", transcript)
        self.assertIn("Day 2 begins. Activities refreshed for 2 team member(s).", transcript)
        self.assertIn("=== Bran ===", transcript)
        self.assertIn("Nothing noteworthy yet.", transcript)
        self.assertIn("Thanks for playing Meeting Masters RPG!", transcript)

        sheet = service.get_character_sheet_intent(1)
        self.assertEqual(50, sheet.experience)
        self.assertEqual(3, sheet.activities_left)

    def test_actions_on_empty_roster_warn_and_return_to_menu(self) -> None:
        service = _build_service()

        transcript = self._run(game_loop.run_game_loop, service, ["3", "q"], [""])

        self.assertIn("No team members available! Add some first.", transcript)
        self.assertIn("Meeting Masters - Day 1", transcript)

    def test_cancelled_add_leaves_roster_empty(self) -> None:
        service = _build_service()

        transcript = self._run(game_loop.run_game_loop, service, ["1", "11"], ["cancel", ""])

        self.assertEqual([], service.list_character_summaries())
        self.assertNotIn("joined the meeting group", transcript)

    def test_help_screen_returns_to_title(self) -> None:
        service = _build_service()

        transcript = self._run(main_menu.main_menu, service, ["2", "q"], [""])

        self.assertIn("How to play", transcript)
        self.assertIn("Thanks for playing Meeting Masters RPG!", transcript)

    def test_help_screen_waits_on_the_shared_prompt(self) -> None:
        service = _build_service()

        with mock.patch.object(main_menu, "prompt_text", return_value="") as prompt:
            self._run(main_menu.main_menu, service, ["2", "q"], [])

        prompt.assert_called_once_with("Press ENTER to return to the menu...")

    def test_view_actions_dispatch_by_menu_position(self) -> None:
        service = _build_service()

        transcript = self._run(game_loop.run_game_loop, service, ["8", "7", "11"], ["", ""])

        self.assertIn("Promotion Ladder", transcript)
        self.assertIn("Own the Sprint Demo", transcript)
        self.assertIn("Available Meeting Tasks", transcript)
        self.assertNotIn("Invalid choice!", transcript)

    def test_task_prompt_reads_the_catalog_once(self) -> None:
        service = _build_service()
        chosen: list[int | None] = []

        with mock.patch.object(
            service, "list_meeting_tasks_intent", wraps=service.list_meeting_tasks_intent
        ) as listing:
            transcript = self._run(lambda svc: chosen.append(game_loop._choose_task(svc)), service, [], ["2"])

        listing.assert_called_once_with()
        self.assertEqual([2], chosen)
        self.assertIn("Present Findings", transcript)


if __name__ == "__main__":
    unittest.main()
