from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from meeting_rpg.application.services.event_bus import EventBus
from meeting_rpg.domain.events import (
    DayAdvancedEvent,
    LevelUpEvent,
    PromotedEvent,
    PromotionEligibleEvent,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MilestoneEntry:
    day: int
    text: str


class MilestoneJournal:
    """Keeps the session's notable moments: level-ups, eligibility, promotions."""

    MAX_ENTRIES = 200

    def __init__(self, day_provider: Callable[[], int]) -> None:
        self._day_provider = day_provider
        self._entries: list[MilestoneEntry] = []

    def record(self, text: str) -> None:
        entry = MilestoneEntry(day=int(self._day_provider()), text=str(text))
        self._entries.append(entry)
        if len(self._entries) > self.MAX_ENTRIES:
            del self._entries[: -self.MAX_ENTRIES]
        logger.info("Day %d milestone: %s", entry.day, entry.text)

    def entries(self) -> list[MilestoneEntry]:
        return list(self._entries)

    def on_level_up(self, event: LevelUpEvent) -> None:
        self.record(f"{event.character_name} reached level {event.to_level}.")

    def on_promotion_eligible(self, event: PromotionEligibleEvent) -> None:
        self.record(f"{event.character_name} became eligible for promotion ({event.job_level}).")

    def on_promoted(self, event: PromotedEvent) -> None:
        self.record(f"{event.character_name} was promoted to {event.to_job_level}.")

    def on_day_advanced(self, event: DayAdvancedEvent) -> None:
        logger.debug("Day advanced to %d with %d team member(s)", event.day_after, event.roster_size)


def register_milestone_handlers(event_bus: EventBus, journal: MilestoneJournal) -> None:
    event_bus.subscribe(LevelUpEvent, journal.on_level_up)
    event_bus.subscribe(PromotionEligibleEvent, journal.on_promotion_eligible)
    event_bus.subscribe(PromotedEvent, journal.on_promoted)
    event_bus.subscribe(DayAdvancedEvent, journal.on_day_advanced)
