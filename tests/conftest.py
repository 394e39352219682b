import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

_ENV_KEYS = (
    "STELLACORE_SEED",
    "STELLACORE_GENERATED_SECTORS",
    "STELLACORE_HERO_NAME",
    "STELLACORE_ARCHETYPE",
    "STELLACORE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
