from __future__ import annotations

from dataclasses import dataclass


EXPERIENCE_PER_LEVEL = 100


@dataclass(frozen=True)
class ExperiencePoints:
    value: int

    def __post_init__(self) -> None:
        if int(self.value) < 0:
            raise ValueError("Experience points cannot be negative")


@dataclass(frozen=True)
class Level:
    value: int

    def __post_init__(self) -> None:
        if int(self.value) < 1:
            raise ValueError("Level must be at least 1")


def level_for_experience(experience: int) -> Level:
    xp = ExperiencePoints(int(experience))
    return Level(1 + xp.value // EXPERIENCE_PER_LEVEL)


def experience_for_level(level: int) -> int:
    """Minimum experience at which ``level`` is reached."""
    safe_level = max(1, int(level))
    return (safe_level - 1) * EXPERIENCE_PER_LEVEL
