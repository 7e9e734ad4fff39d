from typing import List, Optional

from meeting_rpg.domain.models.character import Character
from meeting_rpg.domain.repositories import RosterRepository


class InMemoryRosterRepository(RosterRepository):
    def __init__(self, characters: Optional[List[Character]] = None) -> None:
        self._characters: List[Character] = list(characters or [])

    def list_all(self) -> List[Character]:
        return list(self._characters)

    def get_at(self, index: int) -> Optional[Character]:
        if 0 <= int(index) < len(self._characters):
            return self._characters[int(index)]
        return None

    def add(self, character: Character) -> int:
        self._characters.append(character)
        return len(self._characters) - 1

    def remove_at(self, index: int) -> Optional[Character]:
        if 0 <= int(index) < len(self._characters):
            return self._characters.pop(int(index))
        return None

    def size(self) -> int:
        return len(self._characters)
