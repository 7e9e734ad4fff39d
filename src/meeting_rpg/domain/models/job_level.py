from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class JobLevel(str, Enum):
    INTERN = "intern"
    ENGINEER_1 = "engineer_1"
    ENGINEER_2 = "engineer_2"
    SENIOR_ENGINEER = "senior_engineer"
    PRINCIPAL_ENGINEER = "principal_engineer"
    DISTINGUISHED_ENGINEER = "distinguished_engineer"
    FELLOW = "fellow"

    @property
    def label(self) -> str:
        return JOB_LEVEL_LABELS[self]

    @property
    def rank(self) -> int:
        return _ORDER.index(self)

    @property
    def is_terminal(self) -> bool:
        return self is JobLevel.FELLOW

    def next_level(self) -> Optional["JobLevel"]:
        if self.is_terminal:
            return None
        return _ORDER[self.rank + 1]

    @classmethod
    def normalize(cls, value: "JobLevel | str | None") -> "JobLevel":
        if isinstance(value, cls):
            return value
        raw = str(value or "").strip().lower().replace("-", "_").replace(" ", "_")
        aliases = {
            "engineer1": cls.ENGINEER_1.value,
            "engineer2": cls.ENGINEER_2.value,
            "seniorengineer": cls.SENIOR_ENGINEER.value,
            "principalengineer": cls.PRINCIPAL_ENGINEER.value,
            "distinguishedengineer": cls.DISTINGUISHED_ENGINEER.value,
        }
        resolved = aliases.get(raw, raw)
        for item in cls:
            if item.value == resolved:
                return item
        return cls.INTERN


_ORDER = tuple(JobLevel)

JOB_LEVEL_LABELS: Dict[JobLevel, str] = {
    JobLevel.INTERN: "Intern",
    JobLevel.ENGINEER_1: "Engineer I",
    JobLevel.ENGINEER_2: "Engineer II",
    JobLevel.SENIOR_ENGINEER: "Senior Engineer",
    JobLevel.PRINCIPAL_ENGINEER: "Principal Engineer",
    JobLevel.DISTINGUISHED_ENGINEER: "Distinguished Engineer",
    JobLevel.FELLOW: "Fellow",
}


@dataclass(frozen=True)
class RankRule:
    job_level: JobLevel
    experience_threshold: int


# One row per non-terminal rank; Fellow has no promotion rule.
JOB_LADDER: Dict[JobLevel, RankRule] = {
    JobLevel.INTERN: RankRule(JobLevel.INTERN, 200),
    JobLevel.ENGINEER_1: RankRule(JobLevel.ENGINEER_1, 500),
    JobLevel.ENGINEER_2: RankRule(JobLevel.ENGINEER_2, 1000),
    JobLevel.SENIOR_ENGINEER: RankRule(JobLevel.SENIOR_ENGINEER, 2000),
    JobLevel.PRINCIPAL_ENGINEER: RankRule(JobLevel.PRINCIPAL_ENGINEER, 4000),
    JobLevel.DISTINGUISHED_ENGINEER: RankRule(JobLevel.DISTINGUISHED_ENGINEER, 8000),
}


def promotion_threshold(job_level: JobLevel) -> Optional[int]:
    rule = JOB_LADDER.get(job_level)
    return rule.experience_threshold if rule is not None else None
