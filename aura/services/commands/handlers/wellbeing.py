"""Safe mode (stress relief) and AI clone commands."""
import random
from typing import Dict, Optional

from ..base import CommandHandler
from ..models import BreathingExercise, CloneResponse, CommandResponse, SafeModeResponse
from ..voice import generate_voice_response

SAFE_MODE_ACTIONS = [
    "Playing calming background sounds",
    "Activating breathing guide",
    "Dimming notifications",
    "Preparing relaxation exercises",
]

BREATHING_EXERCISE = BreathingExercise(
    instruction="Let's do some deep breathing together:",
    pattern="Inhale for 4 counts, hold for 4, exhale for 6",
    duration="2 minutes",
    benefit="This will activate your parasympathetic nervous system",
)

CLONE_PROFILES: Dict[str, Dict] = {
    "standard": {
        "status": "clone_activated",
        "message": "AI Clone activated and working autonomously in background.",
        "tasks": [
            "Document analysis and summarization",
            "Research compilation and organization",
            "Note structuring and review prep",
            "Schedule optimization for study sessions",
        ],
        "working_time": "15-20 minutes",
        "notification": "I'll notify you when tasks are completed.",
    },
    "advanced": {
        "status": "advanced_clone_active",
        "message": "Advanced AI Clone mode engaged - handling complex cognitive tasks.",
        "tasks": [
            "Deep document analysis with insights",
            "Cross-referencing multiple sources",
            "Creating comprehensive study guides",
            "Generating practice questions and quizzes",
            "Building concept maps and connections",
        ],
        "working_time": "25-30 minutes",
        "notification": "Advanced processing in progress - perfect time for your break.",
    },
}


class SafeModeHandler(CommandHandler):
    keywords = ("stressed", "anxious", "overwhelmed", "safe mode")

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    @property
    def name(self) -> str:
        return "safe_mode"

    def handle(self, command: str, user_id: str) -> CommandResponse:
        response = SafeModeResponse(
            message="Safe Mode activated. Detecting elevated stress levels - let's take care of your wellbeing.",
            # simulated reading, not measured
            stress_level=self._rng.randint(70, 100),
            actions=list(SAFE_MODE_ACTIONS),
            breathing_exercise=BREATHING_EXERCISE.model_copy(),
            next_steps="AI Clone will handle urgent tasks while you recover. Focus on your breathing.",
        )
        response.voice_message = generate_voice_response(response.message, "stress")
        return response


class CloneHandler(CommandHandler):
    keywords = ("clone", "background tasks", "auto work")

    @property
    def name(self) -> str:
        return "ai_clone"

    def handle(self, command: str, user_id: str) -> CommandResponse:
        profile = "advanced" if "advanced" in command.lower() else "standard"
        response = CloneResponse(**CLONE_PROFILES[profile])
        response.voice_message = generate_voice_response(response.message, "conversation")
        return response
