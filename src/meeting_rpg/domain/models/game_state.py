from dataclasses import dataclass


@dataclass
class GameState:
    current_day: int = 1

    def __post_init__(self) -> None:
        self.current_day = max(1, int(self.current_day or 1))

    def advance(self) -> int:
        self.current_day += 1
        return self.current_day
