from __future__ import annotations

import re


_TOKEN_SPLIT = re.compile(r"[,\s]+")


def parse_index_selection(raw: str | None, roster_size: int) -> list[int]:
    """Parse ``"1, 3 2,,3"`` into sorted, unique, 0-based roster positions.

    Tokens that are not integers or fall outside ``1..roster_size`` are dropped.
    """
    selected: set[int] = set()
    for token in _TOKEN_SPLIT.split(str(raw or "").strip()):
        if not token:
            continue
        try:
            position = int(token)
        except ValueError:
            continue
        if 1 <= position <= int(roster_size):
            selected.add(position - 1)
    return sorted(selected)
