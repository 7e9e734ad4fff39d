from abc import ABC, abstractmethod
from typing import List, Optional

from meeting_rpg.domain.models.character import Character
from meeting_rpg.domain.models.job_level import JobLevel
from meeting_rpg.domain.models.task import MeetingTask, PromotionTask


class RosterRepository(ABC):
    """Ordered team roster; positions are 0-based insertion order."""

    @abstractmethod
    def list_all(self) -> List[Character]:
        raise NotImplementedError

    @abstractmethod
    def get_at(self, index: int) -> Optional[Character]:
        raise NotImplementedError

    @abstractmethod
    def add(self, character: Character) -> int:
        raise NotImplementedError

    @abstractmethod
    def remove_at(self, index: int) -> Optional[Character]:
        raise NotImplementedError

    def size(self) -> int:
        return len(self.list_all())


class TaskCatalogRepository(ABC):
    @abstractmethod
    def list_meeting_tasks(self) -> List[MeetingTask]:
        raise NotImplementedError

    @abstractmethod
    def list_promotion_tasks(self) -> List[PromotionTask]:
        raise NotImplementedError

    def get_meeting_task(self, index: int) -> Optional[MeetingTask]:
        tasks = self.list_meeting_tasks()
        if 0 <= int(index) < len(tasks):
            return tasks[int(index)]
        return None

    def get_promotion_task(self, job_level: JobLevel) -> Optional[PromotionTask]:
        for task in self.list_promotion_tasks():
            if task.from_level == job_level:
                return task
        return None
