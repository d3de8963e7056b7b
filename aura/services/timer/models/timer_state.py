"""Timer state models"""
from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel

WORK_SESSION_SECONDS = 40 * 60
CYCLES_BEFORE_CLONE = 2


class TimerStatus(str, Enum):
    """Outcome of a start/poll call"""
    TIMER_STARTED = "timer_started"
    ALREADY_ACTIVE = "session_already_active"
    NO_ACTIVE_TIMER = "no_active_timer"
    ACTIVE = "active"
    SESSION_COMPLETE = "session_complete"
    CLONE_ACTIVATED = "ai_clone_activated"


class SessionRestartPolicy(str, Enum):
    """What `start` does while a session is still running"""
    REJECT = "reject"    # keep the running session untouched
    RESTART = "restart"  # replace it with a fresh session


class TimerSession(BaseModel):
    """One work-session countdown for a user"""
    user_id: str
    started_at: datetime
    duration_seconds: int = WORK_SESSION_SECONDS
    cycle_count: int = 0
    active: bool = True

    @property
    def session_number(self) -> int:
        """1-indexed cycle shown to the user"""
        return self.cycle_count + 1


class TimerUpdate(BaseModel):
    """Snapshot returned by the registry"""
    status: TimerStatus
    session: Optional[TimerSession] = None
    remaining_seconds: Optional[int] = None
    progress_percent: Optional[int] = None
