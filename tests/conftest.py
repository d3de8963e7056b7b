"""
Shared pytest fixtures for the AURA backend tests.
"""
import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional

import httpx
import pytest

from aura.config import ProviderSettings, Settings
from aura.services.commands.handlers import register_default_handlers
from aura.services.commands.registry import CommandRegistry
from aura.services.commands.router import CommandRouter
from aura.services.llm.orchestrator import ProviderPreference, ResponseOrchestrator
from aura.services.llm.providers import ProviderClient
from aura.services.timer.timer_manager import SessionTimerRegistry

PROVIDER_NAMES = ["groq", "openai", "huggingface", "gemini"]


class ScriptedProvider(ProviderClient):
    """Provider client with a canned outcome; records every message it receives."""

    def __init__(self, name: str, api_key: str = "test-key", reply: str = "", fail: bool = False):
        super().__init__(name, api_key, timeout=1.0)
        self.reply = reply or f"reply from {name}"
        self.fail = fail
        self.calls: List[str] = []

    async def _request(self, message: str) -> Optional[str]:
        self.calls.append(message)
        if self.fail:
            raise httpx.ConnectError(f"{self.name} unreachable")
        return self.reply


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self):
        self.now = datetime(2025, 1, 6, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float):
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def timers(clock):
    return SessionTimerRegistry(clock=clock)


@pytest.fixture
def offline_providers():
    """Every provider configured without a credential."""
    return [ScriptedProvider(name, api_key="") for name in PROVIDER_NAMES]


@pytest.fixture
def offline_orchestrator(offline_providers):
    return ResponseOrchestrator(offline_providers, ProviderPreference(PROVIDER_NAMES))


@pytest.fixture
def command_router(timers, offline_orchestrator):
    registry = register_default_handlers(CommandRegistry(), timers, rng=random.Random(7))
    return CommandRouter(registry, offline_orchestrator)


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        providers=[ProviderSettings(name=name, model="test-model") for name in PROVIDER_NAMES],
        upload_dir=str(tmp_path / "uploads"),
        upload_cleanup_delay=0,
        max_upload_bytes=1024,
    )
