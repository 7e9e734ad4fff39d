import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from meeting_rpg.application.services.selection import parse_index_selection


class SelectionParsingTests(unittest.TestCase):
    def test_commas_and_spaces_both_separate_tokens(self) -> None:
        self.assertEqual([0, 1, 3], parse_index_selection("1, 2 4", 5))
        self.assertEqual([0, 2], parse_index_selection("1,3", 5))

    def test_duplicates_are_removed_and_result_sorted(self) -> None:
        self.assertEqual([0, 2], parse_index_selection("3 1 3,,1", 3))

    def test_invalid_tokens_are_dropped_individually(self) -> None:
        self.assertEqual([1], parse_index_selection("two, 2, 9, 0, -1, 2x", 3))

    def test_empty_input_selects_nobody(self) -> None:
        self.assertEqual([], parse_index_selection("", 3))
        self.assertEqual([], parse_index_selection(None, 3))
        self.assertEqual([], parse_index_selection("1 2", 0))


if __name__ == "__main__":
    unittest.main()
