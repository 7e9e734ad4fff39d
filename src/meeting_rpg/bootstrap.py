import logging
import os

from meeting_rpg.application.services.dice import DiceRoller
from meeting_rpg.application.services.event_bus import EventBus
from meeting_rpg.application.services.game_service import GameService
from meeting_rpg.infrastructure.inmemory.inmemory_roster_repo import InMemoryRosterRepository
from meeting_rpg.infrastructure.inmemory.inmemory_task_catalog_repo import InMemoryTaskCatalogRepository


logger = logging.getLogger(__name__)


def _resolve_seed() -> int | None:
    raw = os.getenv("MEETING_RPG_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer MEETING_RPG_SEED=%r; using OS entropy.", raw)
        return None


def create_game_service() -> GameService:
    seed = _resolve_seed()
    if seed is not None:
        logger.info("Dice seeded with %d", seed)
    return GameService(
        InMemoryRosterRepository(),
        InMemoryTaskCatalogRepository(),
        dice=DiceRoller(seed=seed),
        event_bus=EventBus(),
    )
