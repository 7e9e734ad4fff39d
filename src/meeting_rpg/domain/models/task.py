from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from meeting_rpg.domain.models.job_level import JobLevel


@dataclass(frozen=True)
class MeetingTask:
    name: str
    description: str
    required_skill: str
    difficulty: int
    xp_reward: int
    skill_reward: int


@dataclass(frozen=True)
class PromotionTask:
    name: str
    description: str
    from_level: JobLevel
    requirements: Mapping[str, int] = field(default_factory=dict)
    difficulty: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "requirements", MappingProxyType(dict(self.requirements)))

    def unmet_requirements(self, skills: Mapping[str, int]) -> dict[str, tuple[int, int]]:
        """Return ``{skill: (current, required)}`` for every requirement not yet met."""
        unmet: dict[str, tuple[int, int]] = {}
        for skill, minimum in self.requirements.items():
            current = int(skills.get(skill, 0) or 0)
            if current < int(minimum):
                unmet[skill] = (current, int(minimum))
        return unmet
