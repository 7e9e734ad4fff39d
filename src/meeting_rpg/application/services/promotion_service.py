from __future__ import annotations

import logging
from collections.abc import Callable

from meeting_rpg.application.dtos import PromotionOutcomeView
from meeting_rpg.application.services.balance_tables import (
    PROMOTION_FAILURE_XP,
    PROMOTION_SKILL_BONUS,
    PROMOTION_SUCCESS_XP,
    PROMOTION_UNQUALIFIED_XP,
)
from meeting_rpg.application.services.dice import DiceRoller
from meeting_rpg.domain.events import PromotedEvent
from meeting_rpg.domain.models.character import Character
from meeting_rpg.domain.repositories import TaskCatalogRepository


logger = logging.getLogger(__name__)


class PromotionService:
    def __init__(
        self,
        task_catalog: TaskCatalogRepository,
        dice: DiceRoller,
        event_publisher: Callable[[object], None] | None = None,
    ) -> None:
        self._task_catalog = task_catalog
        self._dice = dice
        self._event_publisher = event_publisher

    def attempt_promotion(self, character: Character) -> PromotionOutcomeView:
        if character.job_level.is_terminal:
            raise ValueError(f"{character.name} is already a {character.job_level.label}; there is no higher rank.")
        if not character.eligible_for_promotion:
            raise ValueError(f"{character.name} is not eligible for promotion yet.")
        task = self._task_catalog.get_promotion_task(character.job_level)
        if task is None:
            raise ValueError(f"No promotion task is defined for {character.job_level.label}.")
        if not character.use_activity():
            raise ValueError(f"{character.name} has no activities left today.")

        from_label = character.job_level.label
        unmet = task.unmet_requirements(character.skills)
        if unmet:
            logger.info("Promotion attempt by %s blocked by requirements: %s", character.name, sorted(unmet))
            events = self._publish(character.gain_experience(PROMOTION_UNQUALIFIED_XP))
            return PromotionOutcomeView(
                character_name=character.name,
                task_name=task.name,
                from_job_level=from_label,
                to_job_level=from_label,
                outcome="unqualified",
                xp_gained=PROMOTION_UNQUALIFIED_XP,
                difficulty=int(task.difficulty),
                unmet=unmet,
                events=events,
            )

        roll = self._dice.roll_d20()
        total = roll + sum(character.get_skill(skill) for skill in task.requirements)
        logger.debug("Promotion roll for %s: %d (total %d vs %d)", character.name, roll, total, task.difficulty)

        if total < int(task.difficulty):
            events = self._publish(character.gain_experience(PROMOTION_FAILURE_XP))
            return PromotionOutcomeView(
                character_name=character.name,
                task_name=task.name,
                from_job_level=from_label,
                to_job_level=from_label,
                outcome="failed",
                xp_gained=PROMOTION_FAILURE_XP,
                difficulty=int(task.difficulty),
                roll=roll,
                total=total,
                events=events,
            )

        new_level = character.promote()
        events: list[object] = [
            PromotedEvent(
                character_name=character.name,
                from_job_level=from_label,
                to_job_level=new_level.label,
            )
        ]
        events.extend(character.gain_experience(PROMOTION_SUCCESS_XP))
        for skill in list(character.skills):
            events.append(character.improve_skill(skill, PROMOTION_SKILL_BONUS))
        return PromotionOutcomeView(
            character_name=character.name,
            task_name=task.name,
            from_job_level=from_label,
            to_job_level=new_level.label,
            outcome="promoted",
            xp_gained=PROMOTION_SUCCESS_XP,
            difficulty=int(task.difficulty),
            roll=roll,
            total=total,
            events=self._publish(events),
        )

    def _publish(self, events: list[object]) -> list[object]:
        if callable(self._event_publisher):
            for event in events:
                self._event_publisher(event)
        return events
