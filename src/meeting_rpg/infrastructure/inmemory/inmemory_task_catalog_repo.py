from typing import List, Optional, Sequence

from meeting_rpg.domain.models.job_level import JobLevel
from meeting_rpg.domain.models.task import MeetingTask, PromotionTask
from meeting_rpg.domain.repositories import TaskCatalogRepository


MEETING_TASKS: tuple[MeetingTask, ...] = (
    MeetingTask("Lead Discussion", "Guide the team through a complex topic", "Leadership", 10, 25, 2),
    MeetingTask("Present Findings", "Share research results with the group", "Presentation", 8, 20, 2),
    MeetingTask("Resolve Conflict", "Mediate between disagreeing team members", "Communication", 12, 30, 3),
    MeetingTask("Brainstorm Solutions", "Generate creative ideas for challenges", "Problem_Solving", 6, 15, 1),
    MeetingTask("Coordinate Tasks", "Organize team efforts and delegate work", "Teamwork", 9, 22, 2),
    MeetingTask("Facilitate Workshop", "Run an interactive team building session", "Leadership", 15, 40, 3),
    MeetingTask("Document Decisions", "Create clear meeting minutes and action items", "Communication", 5, 12, 1),
    MeetingTask("Mentor Junior Member", "Help a new team member learn the ropes", "Teamwork", 7, 18, 2),
)

PROMOTION_TASKS: tuple[PromotionTask, ...] = (
    PromotionTask(
        name="Own the Sprint Demo",
        description="Walk stakeholders through what the team shipped this sprint",
        from_level=JobLevel.INTERN,
        requirements={"Communication": 3, "Teamwork": 3},
        difficulty=15,
    ),
    PromotionTask(
        name="Drive a Design Review",
        description="Defend a design in front of senior reviewers",
        from_level=JobLevel.ENGINEER_1,
        requirements={"Problem_Solving": 5, "Communication": 4},
        difficulty=20,
    ),
    PromotionTask(
        name="Lead a Cross-Team Initiative",
        description="Align several teams behind one delivery plan",
        from_level=JobLevel.ENGINEER_2,
        requirements={"Leadership": 6, "Teamwork": 6},
        difficulty=25,
    ),
    PromotionTask(
        name="Set Technical Direction",
        description="Write and present the architecture strategy for the org",
        from_level=JobLevel.SENIOR_ENGINEER,
        requirements={"Leadership": 8, "Problem_Solving": 8, "Presentation": 6},
        difficulty=32,
    ),
    PromotionTask(
        name="Keynote the Engineering Summit",
        description="Open the company summit with a vision talk",
        from_level=JobLevel.PRINCIPAL_ENGINEER,
        requirements={"Leadership": 10, "Communication": 10, "Presentation": 10},
        difficulty=42,
    ),
    PromotionTask(
        name="Shape the Industry Roadmap",
        description="Represent the company in an industry standards body",
        from_level=JobLevel.DISTINGUISHED_ENGINEER,
        requirements={
            "Leadership": 12,
            "Communication": 12,
            "Problem_Solving": 12,
            "Teamwork": 12,
            "Presentation": 12,
        },
        difficulty=70,
    ),
)


class InMemoryTaskCatalogRepository(TaskCatalogRepository):
    def __init__(
        self,
        meeting_tasks: Optional[Sequence[MeetingTask]] = None,
        promotion_tasks: Optional[Sequence[PromotionTask]] = None,
    ) -> None:
        self._meeting_tasks = tuple(meeting_tasks if meeting_tasks is not None else MEETING_TASKS)
        self._promotion_tasks = tuple(promotion_tasks if promotion_tasks is not None else PROMOTION_TASKS)

    def list_meeting_tasks(self) -> List[MeetingTask]:
        return list(self._meeting_tasks)

    def list_promotion_tasks(self) -> List[PromotionTask]:
        return list(self._promotion_tasks)
