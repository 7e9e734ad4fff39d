from __future__ import annotations

from meeting_rpg.application.dtos import (
    CharacterSheetView,
    CharacterSummaryView,
    MeetingTaskView,
    PromotionLadderRowView,
    PromotionOutcomeView,
    TaskAttemptView,
    TaskRollView,
)
from meeting_rpg.domain.events import (
    DayAdvancedEvent,
    LevelUpEvent,
    PromotedEvent,
    PromotionEligibleEvent,
    SkillDecayedEvent,
    SkillImprovedEvent,
)
from meeting_rpg.domain.models.character import Character
from meeting_rpg.domain.models.job_level import JobLevel, promotion_threshold
from meeting_rpg.domain.models.progression import experience_for_level
from meeting_rpg.domain.models.task import MeetingTask, PromotionTask


def to_character_summary_view(position: int, character: Character) -> CharacterSummaryView:
    return CharacterSummaryView(
        position=int(position),
        name=character.name,
        level=int(character.level),
        job_level=character.job_level.label,
        activities_left=int(character.activities_left),
        eligible_for_promotion=bool(character.eligible_for_promotion),
    )


def to_character_sheet_view(position: int, character: Character) -> CharacterSheetView:
    next_level_xp = experience_for_level(character.level + 1)
    return CharacterSheetView(
        position=int(position),
        name=character.name,
        level=int(character.level),
        experience=int(character.experience),
        next_level_xp=next_level_xp,
        xp_to_next_level=max(0, next_level_xp - int(character.experience)),
        job_level=character.job_level.label,
        eligible_for_promotion=bool(character.eligible_for_promotion),
        promotion_threshold=promotion_threshold(character.job_level),
        activities_left=int(character.activities_left),
        days_since_activity=int(character.days_since_activity),
        skills=[(skill, int(value)) for skill, value in character.skills.items()],
    )


def to_meeting_task_view(position: int, task: MeetingTask) -> MeetingTaskView:
    return MeetingTaskView(
        position=int(position),
        name=task.name,
        description=task.description,
        required_skill=task.required_skill,
        difficulty=int(task.difficulty),
        xp_reward=int(task.xp_reward),
        skill_reward=int(task.skill_reward),
    )


def to_promotion_ladder_row_view(task: PromotionTask) -> PromotionLadderRowView:
    next_level = task.from_level.next_level() or JobLevel.FELLOW
    return PromotionLadderRowView(
        job_level=task.from_level.label,
        next_job_level=next_level.label,
        experience_threshold=int(promotion_threshold(task.from_level) or 0),
        task_name=task.name,
        description=task.description,
        requirements=dict(task.requirements),
        difficulty=int(task.difficulty),
    )


def event_message(event: object) -> str | None:
    if isinstance(event, LevelUpEvent):
        return f"{event.character_name} leveled up to level {event.to_level}!"
    if isinstance(event, SkillImprovedEvent):
        return f"{event.character_name}'s {event.skill} improved by {event.points} (now {event.new_value})"
    if isinstance(event, SkillDecayedEvent):
        return (
            f"{event.character_name}'s {event.skill} decayed from {event.from_value} to {event.to_value} "
            f"after {event.days_idle} idle days."
        )
    if isinstance(event, PromotionEligibleEvent):
        return f"{event.character_name} is now eligible for promotion from {event.job_level}!"
    if isinstance(event, PromotedEvent):
        return f"{event.character_name} was promoted from {event.from_job_level} to {event.to_job_level}!"
    if isinstance(event, DayAdvancedEvent):
        return f"Day {event.day_after} begins. Activities refreshed for {event.roster_size} team member(s)."
    return None


def event_messages(events: list[object]) -> list[str]:
    return [line for line in (event_message(event) for event in events) if line]


def roll_line(row: TaskRollView) -> str:
    bonus = f" + Team ({row.team_bonus})" if row.team_bonus else ""
    return (
        f"Roll: {row.roll} + {row.skill} ({row.skill_value}){bonus} = {row.total} "
        f"vs Difficulty {row.difficulty}"
    )


def task_attempt_messages(view: TaskAttemptView) -> list[str]:
    messages: list[str] = list(view.skipped)
    if not view.rolls:
        messages.append(f"Nobody was able to attempt {view.task_name}.")
        return messages

    names = ", ".join(row.character_name for row in view.rolls)
    messages.append(f"{names} {'attempts' if len(view.rolls) == 1 else 'attempt'}: {view.task_name}")
    if view.team_bonus:
        messages.append(f"Team bonus: +{view.team_bonus} for {view.participant_count} participants.")
    for row in view.rolls:
        messages.append(f"{row.character_name} - {roll_line(row)}")
        if row.success:
            messages.append(f"SUCCESS! {row.character_name} gains {row.xp_gained} XP.")
        else:
            messages.append(f"FAILED! {row.character_name} gains {row.xp_gained} XP for trying.")
        messages.extend(event_messages(row.events))
    if view.team_xp_bonus:
        messages.append(f"Teamwork pays off: every participant gains {view.team_xp_bonus} bonus XP.")
        messages.extend(event_messages(view.bonus_events))
    return messages


def promotion_outcome_messages(view: PromotionOutcomeView) -> list[str]:
    messages = [f"{view.character_name} attempts promotion task: {view.task_name}"]
    if view.outcome == "unqualified":
        for skill, (current, required) in sorted(view.unmet.items()):
            messages.append(f"Requirement not met: {skill} {current}/{required}")
        messages.append(
            f"Not ready yet. {view.character_name} gains {view.xp_gained} XP for the experience "
            f"and remains eligible."
        )
    else:
        messages.append(f"Roll: {view.roll} + required skills = {view.total} vs Difficulty {view.difficulty}")
        if view.promoted:
            messages.append(f"PROMOTED! {view.character_name} gains {view.xp_gained} XP and +1 to every skill.")
        else:
            messages.append(
                f"FAILED! {view.character_name} gains {view.xp_gained} XP and can try again later."
            )
    messages.extend(event_messages(view.events))
    return messages
