from .models.timer_state import SessionRestartPolicy, TimerSession, TimerStatus, TimerUpdate
from .timer_manager import SessionTimerRegistry

__all__ = ["SessionRestartPolicy", "SessionTimerRegistry", "TimerSession", "TimerStatus", "TimerUpdate"]
