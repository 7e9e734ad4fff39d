from __future__ import annotations

import random

from meeting_rpg.application.services.balance_tables import DIE_SIDES


class DiceRoller:
    """Single d20 source shared by every attempt in a session."""

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    def roll_d20(self) -> int:
        return self._rng.randint(1, DIE_SIDES)
