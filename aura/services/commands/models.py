"""Command response models.

Every response carries `status`, `message` and an optional `voiceMessage`;
subclasses add the fields the client needs for that status. Serialized with
camelCase keys and without unset (None) fields.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CommandResponse(BaseModel):
    """Base response for every routed command"""
    status: str
    message: str
    voice_message: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ConversationResponse(CommandResponse):
    status: str = "conversation"


class TimerStartedResponse(CommandResponse):
    status: str = "timer_started"
    timer: str
    session_number: int
    features: List[str]


class SessionAlreadyActiveResponse(CommandResponse):
    status: str = "session_already_active"
    session_number: int
    time_left: str
    progress: int


class NoActiveTimerResponse(CommandResponse):
    status: str = "no_active_timer"
    suggestion: str


class TimerActiveResponse(CommandResponse):
    status: str = "active"
    time_left: str
    session_number: int
    progress: int
    motivational_message: str


class SessionCompleteResponse(CommandResponse):
    status: str = "session_complete"
    alarm_count: int
    session_number: int
    next_session: str = "ready_to_start"
    break_duration: str
    session_progress: str
    encouragement: str


class CloneActivatedResponse(CommandResponse):
    status: str = "ai_clone_activated"
    alarm_count: int
    action: str = "clone_mode"
    total_work_time: str
    clone_activities: List[str]
    break_recommendation: str


class BreathingExercise(BaseModel):
    instruction: str
    pattern: str
    duration: str
    benefit: str


class SafeModeResponse(CommandResponse):
    status: str = "safe_mode_active"
    stress_level: int
    actions: List[str]
    breathing_exercise: BreathingExercise
    next_steps: str


class CloneResponse(CommandResponse):
    """Manually requested clone (standard or advanced)"""
    tasks: List[str]
    working_time: str
    notification: str


class ScanReadyResponse(CommandResponse):
    status: str = "scan_mode_ready"
    action: str = "prepare_camera_scan"


class ScanRequestResponse(CommandResponse):
    """Voice request to scan: tells the client to open the camera"""
    status: str = "scan_request"
    action: str = "activate_camera"


class ModeResponse(CommandResponse):
    """`{mode}_mode_active`"""
    mode: str
    active_features: List[str]
    capabilities: str
