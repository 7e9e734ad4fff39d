from dataclasses import dataclass, field
from typing import Dict, List

from meeting_rpg.domain.events import (
    LevelUpEvent,
    PromotionEligibleEvent,
    SkillDecayedEvent,
    SkillImprovedEvent,
)
from meeting_rpg.domain.models.job_level import JobLevel, promotion_threshold
from meeting_rpg.domain.models.progression import level_for_experience


CORE_SKILLS: tuple[str, ...] = (
    "Leadership",
    "Communication",
    "Problem_Solving",
    "Teamwork",
    "Presentation",
)

ACTIVITIES_PER_DAY = 3
DECAY_IDLE_DAYS = 7
SKILL_FLOOR = 1


def default_skills() -> Dict[str, int]:
    return {skill: 1 for skill in CORE_SKILLS}


@dataclass
class Character:
    name: str
    skills: Dict[str, int] = field(default_factory=default_skills)
    experience: int = 0
    level: int = 1
    activities_left: int = ACTIVITIES_PER_DAY
    days_since_activity: int = 0
    job_level: JobLevel = JobLevel.INTERN
    eligible_for_promotion: bool = False

    def __post_init__(self) -> None:
        self.name = str(self.name or "").strip()
        self.experience = max(0, int(self.experience or 0))
        self.level = level_for_experience(self.experience).value
        self.activities_left = max(0, min(ACTIVITIES_PER_DAY, int(self.activities_left)))
        self.days_since_activity = max(0, int(self.days_since_activity or 0))
        self.job_level = JobLevel.normalize(self.job_level)

    def get_skill(self, skill: str) -> int:
        return int(self.skills.get(skill, 0))

    def gain_experience(self, amount: int) -> List[object]:
        """Add experience, recompute the level and latch promotion eligibility.

        Returns the domain events produced (level-up and/or eligibility).
        """
        events: List[object] = []
        previous_level = self.level
        self.experience += max(0, int(amount))
        self.level = level_for_experience(self.experience).value
        if self.level > previous_level:
            events.append(
                LevelUpEvent(
                    character_name=self.name,
                    from_level=previous_level,
                    to_level=self.level,
                    experience=self.experience,
                )
            )
        eligibility = self.check_promotion_eligibility()
        if eligibility is not None:
            events.append(eligibility)
        return events

    def check_promotion_eligibility(self) -> PromotionEligibleEvent | None:
        if self.eligible_for_promotion or self.job_level.is_terminal:
            return None
        threshold = promotion_threshold(self.job_level)
        if threshold is None or self.experience < threshold:
            return None
        self.eligible_for_promotion = True
        return PromotionEligibleEvent(
            character_name=self.name,
            job_level=self.job_level.label,
            experience=self.experience,
            threshold=threshold,
        )

    def improve_skill(self, skill: str, points: int) -> SkillImprovedEvent:
        self.skills[skill] = self.skills.get(skill, 0) + int(points)
        return SkillImprovedEvent(
            character_name=self.name,
            skill=skill,
            points=int(points),
            new_value=self.skills[skill],
        )

    def can_do_activity(self) -> bool:
        return self.activities_left > 0

    def use_activity(self) -> bool:
        if not self.can_do_activity():
            return False
        self.activities_left -= 1
        self.days_since_activity = 0
        return True

    def new_day(self) -> List[SkillDecayedEvent]:
        self.activities_left = ACTIVITIES_PER_DAY
        self.days_since_activity += 1
        if self.days_since_activity < DECAY_IDLE_DAYS:
            return []

        events: List[SkillDecayedEvent] = []
        for skill, value in self.skills.items():
            if value <= SKILL_FLOOR:
                continue
            self.skills[skill] = value - 1
            events.append(
                SkillDecayedEvent(
                    character_name=self.name,
                    skill=skill,
                    from_value=value,
                    to_value=value - 1,
                    days_idle=self.days_since_activity,
                )
            )
        return events

    def promote(self) -> JobLevel:
        next_level = self.job_level.next_level()
        if next_level is None:
            raise ValueError(f"{self.name} is already at the top of the ladder.")
        self.job_level = next_level
        self.eligible_for_promotion = False
        return next_level
