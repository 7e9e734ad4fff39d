import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from meeting_rpg.application.services.balance_tables import (
    failure_xp,
    is_success,
    team_bonus,
    team_xp_bonus,
)


class BalanceTablesTests(unittest.TestCase):
    def test_team_bonus_grows_by_two_per_teammate_and_caps(self) -> None:
        self.assertEqual(0, team_bonus(1))
        self.assertEqual(2, team_bonus(2))
        self.assertEqual(4, team_bonus(3))
        self.assertEqual(8, team_bonus(5))
        self.assertEqual(8, team_bonus(6))
        self.assertEqual(8, team_bonus(10))

    def test_team_xp_bonus_is_five_per_teammate(self) -> None:
        self.assertEqual(0, team_xp_bonus(1))
        self.assertEqual(10, team_xp_bonus(3))
        self.assertEqual(45, team_xp_bonus(10))

    def test_failure_xp_is_floored_third(self) -> None:
        self.assertEqual(8, failure_xp(25))
        self.assertEqual(4, failure_xp(12))
        self.assertEqual(13, failure_xp(40))

    def test_success_is_inclusive_of_difficulty(self) -> None:
        self.assertTrue(is_success(roll=8, skill=1, bonus=1, difficulty=10))
        self.assertFalse(is_success(roll=7, skill=1, bonus=1, difficulty=10))


if __name__ == "__main__":
    unittest.main()
