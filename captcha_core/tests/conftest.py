from __future__ import annotations

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from captcha_core.config import CaptchaSettings
from captcha_core.service import CaptchaService
from captcha_core.store import MemoryStore


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings() -> CaptchaSettings:
    return CaptchaSettings(
        default_length=6,
        collect_num=5,
        expiration=60,
        image_width=160,
        image_height=60,
    )


@pytest.fixture
def store(settings: CaptchaSettings, clock: FakeClock) -> MemoryStore:
    return MemoryStore(settings.collect_num, settings.expiration, clock=clock)


@pytest.fixture
def service(settings: CaptchaSettings, store: MemoryStore) -> CaptchaService:
    return CaptchaService(settings, store)
