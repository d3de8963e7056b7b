"""Timer Manager - per-user work-session countdowns"""
import logging
import threading
from collections import OrderedDict
from datetime import datetime
from typing import Callable, Optional

from aura.utils.datetime_helper import utc_now
from .models.timer_state import (
    CYCLES_BEFORE_CLONE,
    WORK_SESSION_SECONDS,
    SessionRestartPolicy,
    TimerSession,
    TimerStatus,
    TimerUpdate,
)

logger = logging.getLogger(__name__)

DEFAULT_USER_ID = "default"


def get_motivational_message(minutes_left: int) -> str:
    """Encouragement for the remaining whole minutes of a 40-minute session"""
    if minutes_left > 30:
        return "Great start! You're in the flow zone."
    if minutes_left > 20:
        return "Halfway there! Keep up the excellent focus."
    if minutes_left > 10:
        return "Final stretch! You're doing amazing."
    return "Almost done! Finish strong!"


class SessionTimerRegistry:
    """
    In-memory store of work sessions keyed by user id.

    All reads and writes go through one lock, so start/poll calls for the
    same user never interleave (no double-counted cycles). The store is
    bounded: adding a session beyond `max_sessions` evicts the least
    recently used one (start and poll both count as use), and a session is
    evicted as soon as it activates the clone.
    """

    def __init__(
        self,
        restart_policy: SessionRestartPolicy = SessionRestartPolicy.REJECT,
        max_sessions: int = 10000,
        duration_seconds: int = WORK_SESSION_SECONDS,
        clock: Callable[[], datetime] = utc_now,
    ):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.restart_policy = restart_policy
        self.max_sessions = max_sessions
        self.duration_seconds = duration_seconds
        self._clock = clock
        self._sessions: "OrderedDict[str, TimerSession]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def get(self, user_id: Optional[str] = None) -> Optional[TimerSession]:
        """Copy of the user's session, if one is stored"""
        with self._lock:
            session = self._sessions.get(user_id or DEFAULT_USER_ID)
            return session.model_copy() if session else None

    def start(self, user_id: Optional[str] = None) -> TimerUpdate:
        """
        Start a work session.

        Args:
            user_id: User identifier (defaults to "default")

        Returns:
            TIMER_STARTED with the new session, or ALREADY_ACTIVE with the
            running one when the restart policy is REJECT. A session whose
            window has already run out is completed instead, as poll would
            (SESSION_COMPLETE or CLONE_ACTIVATED).
        """
        user_id = user_id or DEFAULT_USER_ID
        with self._lock:
            now = self._clock()
            current = self._sessions.get(user_id)
            if current:
                self._sessions.move_to_end(user_id)

            if current and current.active and self._elapsed_seconds(current, now) >= current.duration_seconds:
                # Expired but never polled: credit the finished cycle first
                return self._complete_cycle(user_id, current, now)

            if current and current.active and self.restart_policy == SessionRestartPolicy.REJECT:
                remaining = self._remaining_seconds(current, now)
                logger.info(f"Start rejected: session already running for {user_id} ({remaining}s left)")
                return TimerUpdate(
                    status=TimerStatus.ALREADY_ACTIVE,
                    session=current.model_copy(),
                    remaining_seconds=remaining,
                    progress_percent=self._progress(current, remaining),
                )

            session = TimerSession(
                user_id=user_id,
                started_at=now,
                duration_seconds=self.duration_seconds,
            )
            self._store(user_id, session)
            logger.info(f"Timer started: {self.duration_seconds}sec for user {user_id}")
            return TimerUpdate(
                status=TimerStatus.TIMER_STARTED,
                session=session.model_copy(),
                remaining_seconds=self.duration_seconds,
                progress_percent=0,
            )

    def poll(self, user_id: Optional[str] = None) -> TimerUpdate:
        """
        Check a user's session, completing the current cycle if it has expired.

        Returns:
            NO_ACTIVE_TIMER, ACTIVE, SESSION_COMPLETE or CLONE_ACTIVATED
        """
        user_id = user_id or DEFAULT_USER_ID
        with self._lock:
            session = self._sessions.get(user_id)
            if not session or not session.active:
                return TimerUpdate(status=TimerStatus.NO_ACTIVE_TIMER)

            self._sessions.move_to_end(user_id)
            now = self._clock()
            if self._elapsed_seconds(session, now) < session.duration_seconds:
                remaining = self._remaining_seconds(session, now)
                return TimerUpdate(
                    status=TimerStatus.ACTIVE,
                    session=session.model_copy(),
                    remaining_seconds=remaining,
                    progress_percent=self._progress(session, remaining),
                )

            return self._complete_cycle(user_id, session, now)

    def _complete_cycle(self, user_id: str, session: TimerSession, now: datetime) -> TimerUpdate:
        session.cycle_count += 1

        if session.cycle_count < CYCLES_BEFORE_CLONE:
            session.started_at = now
            logger.info(f"Session cycle {session.cycle_count}/{CYCLES_BEFORE_CLONE} completed for user {user_id}")
            return TimerUpdate(
                status=TimerStatus.SESSION_COMPLETE,
                session=session.model_copy(),
                remaining_seconds=session.duration_seconds,
                progress_percent=0,
            )

        session.active = False
        del self._sessions[user_id]
        logger.info(f"All {CYCLES_BEFORE_CLONE} cycles completed for user {user_id}, clone activated")
        return TimerUpdate(
            status=TimerStatus.CLONE_ACTIVATED,
            session=session.model_copy(),
            remaining_seconds=0,
            progress_percent=100,
        )

    def _store(self, user_id: str, session: TimerSession):
        self._sessions.pop(user_id, None)
        while len(self._sessions) >= self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.warning(f"Timer store full ({self.max_sessions}), evicted session for {evicted_id}")
        self._sessions[user_id] = session

    @staticmethod
    def _elapsed_seconds(session: TimerSession, now: datetime) -> float:
        return (now - session.started_at).total_seconds()

    @classmethod
    def _remaining_seconds(cls, session: TimerSession, now: datetime) -> int:
        return max(0, int(session.duration_seconds - cls._elapsed_seconds(session, now)))

    @staticmethod
    def _progress(session: TimerSession, remaining: int) -> int:
        return round((session.duration_seconds - remaining) / session.duration_seconds * 100)
