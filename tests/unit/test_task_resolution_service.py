import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from meeting_rpg.application.services.task_resolution_service import TaskResolutionService
from meeting_rpg.domain.events import LevelUpEvent, SkillImprovedEvent
from meeting_rpg.domain.models.character import Character
from meeting_rpg.domain.models.task import MeetingTask


LEAD_DISCUSSION = MeetingTask("Lead Discussion", "Guide the team through a complex topic", "Leadership", 10, 25, 2)
FACILITATE = MeetingTask("Facilitate Workshop", "Run an interactive team building session", "Leadership", 15, 40, 3)


class _ScriptedDice:
    def __init__(self, rolls: list[int]) -> None:
        self._rolls = list(rolls)
        self.calls = 0

    def roll_d20(self) -> int:
        self.calls += 1
        return self._rolls.pop(0)


class TaskResolutionServiceTests(unittest.TestCase):
    def test_success_grants_full_xp_and_skill_points(self) -> None:
        service = TaskResolutionService(_ScriptedDice([20]))
        character = Character(name="Ayla")

        view = service.attempt(character, LEAD_DISCUSSION)

        self.assertTrue(view.rolls[0].success)
        self.assertEqual(25, character.experience)
        self.assertEqual(3, character.get_skill("Leadership"))
        self.assertEqual(2, character.activities_left)
        self.assertTrue(any(isinstance(event, SkillImprovedEvent) for event in view.rolls[0].events))

    def test_score_equal_to_difficulty_succeeds(self) -> None:
        service = TaskResolutionService(_ScriptedDice([9]))
        character = Character(name="Bran")

        view = service.attempt(character, LEAD_DISCUSSION)

        self.assertEqual(10, view.rolls[0].total)
        self.assertTrue(view.rolls[0].success)

    def test_failure_grants_third_xp_and_no_skill(self) -> None:
        service = TaskResolutionService(_ScriptedDice([8]))
        character = Character(name="Cato")

        view = service.attempt(character, LEAD_DISCUSSION)

        self.assertFalse(view.rolls[0].success)
        self.assertEqual(8, character.experience)
        self.assertEqual(1, character.get_skill("Leadership"))
        self.assertEqual(2, character.activities_left)

    def test_exhausted_character_is_rejected_before_rolling(self) -> None:
        dice = _ScriptedDice([20])
        service = TaskResolutionService(dice)
        character = Character(name="Dara", activities_left=0)

        with self.assertRaises(ValueError):
            service.attempt(character, LEAD_DISCUSSION)

        self.assertEqual(0, dice.calls)
        self.assertEqual(0, character.experience)

    def test_team_members_roll_independently_with_shared_bonus(self) -> None:
        dice = _ScriptedDice([12, 5, 1])
        service = TaskResolutionService(dice)
        team = [Character(name="Eli"), Character(name="Fen"), Character(name="Gus")]

        view = service.attempt_team(team, FACILITATE)

        self.assertEqual(3, dice.calls)
        self.assertEqual(4, view.team_bonus)
        self.assertEqual([17, 10, 6], [row.total for row in view.rolls])
        self.assertEqual([True, False, False], [row.success for row in view.rolls])
        self.assertEqual(10, view.team_xp_bonus)
        self.assertEqual(40 + 10, team[0].experience)
        self.assertEqual(13 + 10, team[1].experience)
        self.assertEqual(13 + 10, team[2].experience)
        self.assertEqual(4, team[0].get_skill("Leadership"))
        self.assertEqual(1, team[1].get_skill("Leadership"))
        self.assertTrue(all(member.activities_left == 2 for member in team))

    def test_team_without_any_success_gets_no_bonus_xp(self) -> None:
        service = TaskResolutionService(_ScriptedDice([1, 1]))
        team = [Character(name="Hana"), Character(name="Ira")]

        view = service.attempt_team(team, FACILITATE)

        self.assertEqual(0, view.team_xp_bonus)
        self.assertEqual([13, 13], [member.experience for member in team])

    def test_exhausted_teammates_are_skipped_and_do_not_count_toward_bonus(self) -> None:
        dice = _ScriptedDice([10, 10])
        service = TaskResolutionService(dice)
        tired = Character(name="Jun", activities_left=0)
        team = [Character(name="Kai"), tired, Character(name="Lin")]

        view = service.attempt_team(team, LEAD_DISCUSSION)

        self.assertEqual(["Kai", "Lin"], [row.character_name for row in view.rolls])
        self.assertEqual(1, len(view.skipped))
        self.assertIn("Jun", view.skipped[0])
        self.assertEqual(2, view.team_bonus)
        self.assertEqual(0, tired.experience)
        self.assertEqual(0, tired.activities_left)

    def test_team_bonus_caps_at_eight(self) -> None:
        team = [Character(name=f"Member {idx}") for idx in range(7)]
        service = TaskResolutionService(_ScriptedDice([20] + [1] * 6))

        view = service.attempt_team(team, FACILITATE)

        self.assertEqual(8, view.team_bonus)
        self.assertEqual(30, view.team_xp_bonus)

    def test_all_exhausted_team_produces_no_rolls(self) -> None:
        dice = _ScriptedDice([])
        service = TaskResolutionService(dice)
        team = [Character(name="Mo", activities_left=0)]

        view = service.attempt_team(team, LEAD_DISCUSSION)

        self.assertEqual([], view.rolls)
        self.assertEqual(0, dice.calls)

    def test_events_are_forwarded_to_publisher(self) -> None:
        emitted: list[object] = []
        service = TaskResolutionService(_ScriptedDice([20, 20, 20, 20]), event_publisher=emitted.append)
        character = Character(name="Nia")

        for _ in range(3):
            service.attempt(character, FACILITATE)

        self.assertEqual(120, character.experience)
        self.assertTrue(any(isinstance(event, LevelUpEvent) for event in emitted))


if __name__ == "__main__":
    unittest.main()
