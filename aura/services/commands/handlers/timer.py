"""Work-session timer commands: start and status."""
from aura.services.timer.models.timer_state import CYCLES_BEFORE_CLONE, TimerStatus, TimerUpdate
from aura.services.timer.timer_manager import SessionTimerRegistry, get_motivational_message
from aura.utils.datetime_helper import format_clock
from ..base import CommandHandler
from ..models import (
    CloneActivatedResponse,
    CommandResponse,
    NoActiveTimerResponse,
    SessionAlreadyActiveResponse,
    SessionCompleteResponse,
    TimerActiveResponse,
    TimerStartedResponse,
)
from ..voice import generate_voice_response

SESSION_FEATURES = [
    "Stress monitoring active",
    "Break reminders enabled",
    "AI Clone on standby",
]

CLONE_ACTIVITIES = [
    "Summarizing your study materials",
    "Organizing notes and resources",
    "Preparing review questions",
    "Scheduling your next study session",
]


def _minutes_and_seconds(total_seconds: int):
    return divmod(max(0, total_seconds), 60)


def build_timer_response(update: TimerUpdate) -> CommandResponse:
    """Turn a registry snapshot into the client response for its status."""
    session = update.session

    if update.status == TimerStatus.TIMER_STARTED:
        minutes = session.duration_seconds // 60
        response: CommandResponse = TimerStartedResponse(
            message=f"Starting {minutes}-minute focused work session with AI monitoring",
            timer=format_clock(session.duration_seconds),
            session_number=session.session_number,
            features=list(SESSION_FEATURES),
        )
    elif update.status == TimerStatus.ALREADY_ACTIVE:
        minutes, seconds = _minutes_and_seconds(update.remaining_seconds)
        response = SessionAlreadyActiveResponse(
            message=(
                f"Work session {session.session_number} is already running with "
                f"{minutes} minutes {seconds} seconds remaining. I'll keep your current timer going."
            ),
            session_number=session.session_number,
            time_left=format_clock(update.remaining_seconds),
            progress=update.progress_percent,
        )
    elif update.status == TimerStatus.ACTIVE:
        minutes, seconds = _minutes_and_seconds(update.remaining_seconds)
        response = TimerActiveResponse(
            message=f"Work session {session.session_number} in progress. {minutes} minutes {seconds} seconds remaining.",
            time_left=format_clock(update.remaining_seconds),
            session_number=session.session_number,
            progress=update.progress_percent,
            motivational_message=get_motivational_message(minutes),
        )
    elif update.status == TimerStatus.SESSION_COMPLETE:
        completed = session.cycle_count
        response = SessionCompleteResponse(
            message=(
                f"Excellent! Session {completed} completed. Take a 5-minute break, "
                f"then we'll start session {session.session_number}."
            ),
            alarm_count=completed,
            session_number=session.session_number,
            break_duration="5 minutes",
            session_progress=f"{completed}/{CYCLES_BEFORE_CLONE} sessions completed",
            encouragement="You're building great study habits!",
        )
    elif update.status == TimerStatus.CLONE_ACTIVATED:
        total_minutes = session.duration_seconds * session.cycle_count // 60
        response = CloneActivatedResponse(
            message=(
                f"Outstanding! You've completed {total_minutes} minutes of focused work. "
                "AI Clone is now taking over your background tasks."
            ),
            alarm_count=session.cycle_count,
            total_work_time=f"{total_minutes} minutes",
            clone_activities=list(CLONE_ACTIVITIES),
            break_recommendation="Take a 10-15 minute break while I handle these tasks.",
        )
    else:
        response = NoActiveTimerResponse(
            message="No active work session. Start one to begin productive studying!",
            suggestion='Try: "start work session" or "start 40 minute session"',
        )

    response.voice_message = generate_voice_response(response.message, "timer")
    return response


class StartSessionHandler(CommandHandler):
    keywords = ("start work", "40 minute", "begin session")

    def __init__(self, timers: SessionTimerRegistry):
        self._timers = timers

    @property
    def name(self) -> str:
        return "start_session"

    def handle(self, command: str, user_id: str) -> CommandResponse:
        return build_timer_response(self._timers.start(user_id))


class TimerStatusHandler(CommandHandler):
    keywords = ("timer status", "time left", "how much time")

    def __init__(self, timers: SessionTimerRegistry):
        self._timers = timers

    @property
    def name(self) -> str:
        return "timer_status"

    def handle(self, command: str, user_id: str) -> CommandResponse:
        return build_timer_response(self._timers.poll(user_id))
