import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from meeting_rpg.domain.models.job_level import JOB_LADDER, JobLevel, promotion_threshold
from meeting_rpg.domain.models.progression import (
    ExperiencePoints,
    Level,
    experience_for_level,
    level_for_experience,
)


class ProgressionCurveTests(unittest.TestCase):
    def test_level_is_one_plus_experience_over_hundred(self) -> None:
        for experience in (0, 1, 99, 100, 101, 199, 200, 999, 1000, 12345):
            self.assertEqual(1 + experience // 100, level_for_experience(experience).value)

    def test_level_is_monotonic_in_experience(self) -> None:
        levels = [level_for_experience(experience).value for experience in range(0, 1200, 7)]
        self.assertEqual(sorted(levels), levels)

    def test_experience_for_level_is_inverse_threshold(self) -> None:
        self.assertEqual(0, experience_for_level(1))
        self.assertEqual(100, experience_for_level(2))
        self.assertEqual(2, level_for_experience(experience_for_level(2)).value)

    def test_value_objects_reject_invalid_values(self) -> None:
        with self.assertRaises(ValueError):
            ExperiencePoints(-1)
        with self.assertRaises(ValueError):
            Level(0)


class JobLadderTests(unittest.TestCase):
    def test_ladder_order_and_terminal_rank(self) -> None:
        ranks = list(JobLevel)

        self.assertEqual(JobLevel.INTERN, ranks[0])
        self.assertEqual(JobLevel.FELLOW, ranks[-1])
        self.assertEqual(7, len(ranks))
        self.assertIsNone(JobLevel.FELLOW.next_level())
        self.assertEqual(JobLevel.SENIOR_ENGINEER, JobLevel.ENGINEER_2.next_level())

    def test_thresholds_cover_every_non_terminal_rank(self) -> None:
        expected = [200, 500, 1000, 2000, 4000, 8000]

        self.assertEqual(expected, [promotion_threshold(rank) for rank in list(JobLevel)[:-1]])
        self.assertIsNone(promotion_threshold(JobLevel.FELLOW))
        self.assertNotIn(JobLevel.FELLOW, JOB_LADDER)

    def test_normalize_accepts_compact_names(self) -> None:
        self.assertEqual(JobLevel.ENGINEER_1, JobLevel.normalize("Engineer1"))
        self.assertEqual(JobLevel.PRINCIPAL_ENGINEER, JobLevel.normalize("principal engineer"))
        self.assertEqual(JobLevel.INTERN, JobLevel.normalize("unknown"))


if __name__ == "__main__":
    unittest.main()
