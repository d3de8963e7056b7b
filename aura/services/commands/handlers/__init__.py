"""Built-in command handlers - registered in precedence order."""
import random
from typing import Optional

from aura.services.timer.timer_manager import SessionTimerRegistry
from ..registry import CommandRegistry
from .modes import ModeSwitchHandler, ScanIntentHandler
from .timer import StartSessionHandler, TimerStatusHandler
from .wellbeing import CloneHandler, SafeModeHandler


def register_default_handlers(
    registry: CommandRegistry,
    timers: SessionTimerRegistry,
    rng: Optional[random.Random] = None,
) -> CommandRegistry:
    """Register all built-in handlers. Order is precedence: first match wins."""
    registry.register(StartSessionHandler(timers))
    registry.register(TimerStatusHandler(timers))
    registry.register(SafeModeHandler(rng))
    registry.register(CloneHandler())
    registry.register(ScanIntentHandler())
    registry.register(ModeSwitchHandler())
    return registry


__all__ = [
    "register_default_handlers",
    "StartSessionHandler",
    "TimerStatusHandler",
    "SafeModeHandler",
    "CloneHandler",
    "ScanIntentHandler",
    "ModeSwitchHandler",
]
