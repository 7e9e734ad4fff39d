from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass
class ActionResult:
    messages: List[str] = field(default_factory=list)
    accepted: bool = True


@dataclass
class CharacterSummaryView:
    position: int
    name: str
    level: int
    job_level: str
    activities_left: int
    eligible_for_promotion: bool


@dataclass
class CharacterSheetView:
    position: int
    name: str
    level: int
    experience: int
    next_level_xp: int
    xp_to_next_level: int
    job_level: str
    eligible_for_promotion: bool
    promotion_threshold: int | None
    activities_left: int
    days_since_activity: int
    skills: List[Tuple[str, int]] = field(default_factory=list)


@dataclass
class MeetingTaskView:
    position: int
    name: str
    description: str
    required_skill: str
    difficulty: int
    xp_reward: int
    skill_reward: int


@dataclass
class PromotionLadderRowView:
    job_level: str
    next_job_level: str
    experience_threshold: int
    task_name: str
    description: str
    requirements: Dict[str, int] = field(default_factory=dict)
    difficulty: int = 0


@dataclass
class DayView:
    current_day: int
    roster_size: int


@dataclass
class TaskRollView:
    character_name: str
    skill: str
    skill_value: int
    roll: int
    team_bonus: int
    total: int
    difficulty: int
    success: bool
    xp_gained: int
    events: List[object] = field(default_factory=list)


@dataclass
class TaskAttemptView:
    task_name: str
    team_bonus: int = 0
    team_xp_bonus: int = 0
    rolls: List[TaskRollView] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    bonus_events: List[object] = field(default_factory=list)

    @property
    def participant_count(self) -> int:
        return len(self.rolls)

    @property
    def any_success(self) -> bool:
        return any(row.success for row in self.rolls)


@dataclass
class PromotionOutcomeView:
    character_name: str
    task_name: str
    from_job_level: str
    to_job_level: str
    outcome: str
    xp_gained: int
    difficulty: int
    roll: int | None = None
    total: int | None = None
    unmet: Dict[str, Tuple[int, int]] = field(default_factory=dict)
    events: List[object] = field(default_factory=list)

    @property
    def promoted(self) -> bool:
        return self.outcome == "promoted"
