from dataclasses import dataclass


@dataclass
class LevelUpEvent:
    character_name: str
    from_level: int
    to_level: int
    experience: int


@dataclass
class SkillImprovedEvent:
    character_name: str
    skill: str
    points: int
    new_value: int


@dataclass
class SkillDecayedEvent:
    character_name: str
    skill: str
    from_value: int
    to_value: int
    days_idle: int


@dataclass
class PromotionEligibleEvent:
    character_name: str
    job_level: str
    experience: int
    threshold: int


@dataclass
class PromotedEvent:
    character_name: str
    from_job_level: str
    to_job_level: str


@dataclass
class DayAdvancedEvent:
    day_after: int
    roster_size: int
