import logging
from typing import Optional

from meeting_rpg.application.dtos import (
    ActionResult,
    CharacterSheetView,
    CharacterSummaryView,
    DayView,
    MeetingTaskView,
    PromotionLadderRowView,
)
from meeting_rpg.application.mappers.game_service_mapper import (
    event_messages,
    promotion_outcome_messages,
    task_attempt_messages,
    to_character_sheet_view,
    to_character_summary_view,
    to_meeting_task_view,
    to_promotion_ladder_row_view,
)
from meeting_rpg.application.services.dice import DiceRoller
from meeting_rpg.application.services.event_bus import EventBus
from meeting_rpg.application.services.milestone_journal import MilestoneJournal, register_milestone_handlers
from meeting_rpg.application.services.promotion_service import PromotionService
from meeting_rpg.application.services.selection import parse_index_selection
from meeting_rpg.application.services.task_resolution_service import TaskResolutionService
from meeting_rpg.domain.events import DayAdvancedEvent
from meeting_rpg.domain.models.character import Character
from meeting_rpg.domain.models.game_state import GameState
from meeting_rpg.domain.models.task import MeetingTask
from meeting_rpg.domain.repositories import RosterRepository, TaskCatalogRepository


logger = logging.getLogger(__name__)

_RESERVED_NAMES = frozenset({"", "cancel", "exit"})


def _to_position(value) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class GameService:
    def __init__(
        self,
        roster_repo: RosterRepository,
        task_catalog: TaskCatalogRepository,
        dice: DiceRoller | None = None,
        event_bus: EventBus | None = None,
        state: GameState | None = None,
    ) -> None:
        self.roster_repo = roster_repo
        self.task_catalog = task_catalog
        self.dice = dice or DiceRoller()
        self.event_bus = event_bus or EventBus()
        self.state = state or GameState()
        self.journal = MilestoneJournal(day_provider=lambda: self.state.current_day)
        register_milestone_handlers(self.event_bus, self.journal)
        self.task_service = TaskResolutionService(self.dice, event_publisher=self.event_bus.publish)
        self.promotion_service = PromotionService(
            self.task_catalog,
            self.dice,
            event_publisher=self.event_bus.publish,
        )

    # Commands

    def add_character_intent(self, name: str) -> ActionResult:
        cleaned = str(name or "").strip()
        if cleaned.lower() in _RESERVED_NAMES:
            logger.info("Rejected team member name %r", name)
            return ActionResult(messages=["No team member added."], accepted=False)
        character = Character(name=cleaned)
        position = self.roster_repo.add(character) + 1
        logger.debug("Added %s at position %d", cleaned, position)
        return ActionResult(messages=[f"{cleaned} joined the meeting group!"])

    def remove_character_intent(self, position: int) -> ActionResult:
        index = _to_position(position)
        if index == 0:
            return ActionResult(messages=["Removal cancelled."], accepted=False)
        removed = self.roster_repo.remove_at(index - 1) if index is not None and index > 0 else None
        if removed is None:
            logger.info("Rejected removal of position %s", position)
            return ActionResult(messages=["Invalid selection!"], accepted=False)
        return ActionResult(messages=[f"{removed.name} left the meeting group."])

    def attempt_task_intent(self, character_position: int, task_position: int) -> ActionResult:
        try:
            character = self._require_character(character_position)
            task = self._require_task(task_position)
            view = self.task_service.attempt(character, task)
        except ValueError as exc:
            return ActionResult(messages=[str(exc)], accepted=False)
        return ActionResult(messages=task_attempt_messages(view))

    def attempt_team_task_intent(self, selection: str, task_position: int) -> ActionResult:
        try:
            task = self._require_task(task_position)
        except ValueError as exc:
            return ActionResult(messages=[str(exc)], accepted=False)

        indices = parse_index_selection(selection, self.roster_repo.size())
        if not indices:
            logger.info("Team selection %r matched no team members", selection)
            return ActionResult(messages=["No valid team members selected."], accepted=False)

        members = [member for member in (self.roster_repo.get_at(index) for index in indices) if member is not None]
        view = self.task_service.attempt_team(members, task)
        return ActionResult(messages=task_attempt_messages(view), accepted=bool(view.rolls))

    def attempt_promotion_intent(self, character_position: int) -> ActionResult:
        try:
            character = self._require_character(character_position)
            view = self.promotion_service.attempt_promotion(character)
        except ValueError as exc:
            return ActionResult(messages=[str(exc)], accepted=False)
        return ActionResult(messages=promotion_outcome_messages(view))

    def advance_day_intent(self) -> ActionResult:
        day = self.state.advance()
        decay_events: list[object] = []
        for character in self.roster_repo.list_all():
            decay_events.extend(character.new_day())
        day_event = DayAdvancedEvent(day_after=day, roster_size=self.roster_repo.size())
        self.event_bus.publish_all([*decay_events, day_event])
        return ActionResult(messages=event_messages([day_event, *decay_events]))

    # Queries

    def list_characters(self) -> list[Character]:
        return self.roster_repo.list_all()

    def list_character_summaries(self) -> list[CharacterSummaryView]:
        return [
            to_character_summary_view(position, character)
            for position, character in enumerate(self.roster_repo.list_all(), start=1)
        ]

    def get_character_sheet_intent(self, character_position: int) -> Optional[CharacterSheetView]:
        try:
            character = self._require_character(character_position)
        except ValueError:
            return None
        return to_character_sheet_view(int(character_position), character)

    def list_character_sheets_intent(self) -> list[CharacterSheetView]:
        return [
            to_character_sheet_view(position, character)
            for position, character in enumerate(self.roster_repo.list_all(), start=1)
        ]

    def list_meeting_tasks_intent(self) -> list[MeetingTaskView]:
        return [
            to_meeting_task_view(position, task)
            for position, task in enumerate(self.task_catalog.list_meeting_tasks(), start=1)
        ]

    def list_promotion_ladder_intent(self) -> list[PromotionLadderRowView]:
        return [to_promotion_ladder_row_view(task) for task in self.task_catalog.list_promotion_tasks()]

    def list_milestones_intent(self) -> list[str]:
        return [f"Day {entry.day}: {entry.text}" for entry in self.journal.entries()]

    def get_day_view_intent(self) -> DayView:
        return DayView(current_day=self.state.current_day, roster_size=self.roster_repo.size())

    def _require_character(self, position: int) -> Character:
        index = _to_position(position)
        character: Optional[Character] = self.roster_repo.get_at(index - 1) if index is not None and index >= 1 else None
        if character is None:
            logger.info("Rejected character position %s", position)
            raise ValueError("Invalid selection!")
        return character

    def _require_task(self, position: int) -> MeetingTask:
        index = _to_position(position)
        task = self.task_catalog.get_meeting_task(index - 1) if index is not None and index >= 1 else None
        if task is None:
            logger.info("Rejected task position %s", position)
            raise ValueError("Invalid selection!")
        return task
