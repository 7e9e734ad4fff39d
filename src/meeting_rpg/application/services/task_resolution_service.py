from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from meeting_rpg.application.dtos import TaskAttemptView, TaskRollView
from meeting_rpg.application.services.balance_tables import (
    failure_xp,
    is_success,
    team_bonus,
    team_xp_bonus,
)
from meeting_rpg.application.services.dice import DiceRoller
from meeting_rpg.domain.models.character import Character
from meeting_rpg.domain.models.task import MeetingTask


logger = logging.getLogger(__name__)


class TaskResolutionService:
    """Resolves meeting tasks for one character or a team.

    Each participant spends an activity and rolls their own d20; a team only
    shares the flat bonus and, if anyone succeeds, the teamwork XP.
    """

    def __init__(self, dice: DiceRoller, event_publisher: Callable[[object], None] | None = None) -> None:
        self._dice = dice
        self._event_publisher = event_publisher

    def attempt(self, character: Character, task: MeetingTask) -> TaskAttemptView:
        if not character.can_do_activity():
            raise ValueError(f"{character.name} has no activities left today.")
        return self.attempt_team([character], task)

    def attempt_team(self, characters: Sequence[Character], task: MeetingTask) -> TaskAttemptView:
        participants: list[Character] = []
        skipped: list[str] = []
        for character in characters:
            if character.can_do_activity():
                participants.append(character)
            else:
                skipped.append(f"{character.name} has no activities left today and sits this one out.")

        view = TaskAttemptView(task_name=task.name, skipped=skipped)
        if not participants:
            return view

        view.team_bonus = team_bonus(len(participants))
        for character in participants:
            view.rolls.append(self._resolve_participant(character, task, view.team_bonus))

        if view.any_success and len(participants) > 1:
            view.team_xp_bonus = team_xp_bonus(len(participants))
            for character in participants:
                view.bonus_events.extend(self._publish(character.gain_experience(view.team_xp_bonus)))

        logger.debug(
            "Resolved %s for %d participant(s): %d success(es), team bonus %d",
            task.name,
            len(participants),
            sum(1 for row in view.rolls if row.success),
            view.team_bonus,
        )
        return view

    def _resolve_participant(self, character: Character, task: MeetingTask, bonus: int) -> TaskRollView:
        character.use_activity()
        roll = self._dice.roll_d20()
        skill_value = character.get_skill(task.required_skill)
        success = is_success(roll, skill_value, bonus, task.difficulty)

        events: list[object] = []
        if success:
            xp_gained = int(task.xp_reward)
            events.extend(character.gain_experience(xp_gained))
            events.append(character.improve_skill(task.required_skill, task.skill_reward))
        else:
            xp_gained = failure_xp(task.xp_reward)
            events.extend(character.gain_experience(xp_gained))

        return TaskRollView(
            character_name=character.name,
            skill=task.required_skill,
            skill_value=skill_value,
            roll=roll,
            team_bonus=bonus,
            total=roll + skill_value + bonus,
            difficulty=int(task.difficulty),
            success=success,
            xp_gained=xp_gained,
            events=self._publish(events),
        )

    def _publish(self, events: list[object]) -> list[object]:
        if callable(self._event_publisher):
            for event in events:
                self._event_publisher(event)
        return events
