import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MEETING_RPG_SEED", "MEETING_RPG_LOG_LEVEL", "MEETING_RPG_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def quiet_clear_screen(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("os.system", lambda *_args, **_kwargs: 0)
