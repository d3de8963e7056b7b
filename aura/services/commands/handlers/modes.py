"""Scan-intent and mode-switch commands."""
from typing import Dict, Optional

from ..base import CommandHandler
from ..models import CommandResponse, ModeResponse, ScanReadyResponse
from ..voice import generate_voice_response

# mode -> (message, active features, capabilities)
MODE_PROFILES: Dict[str, Dict] = {
    "multi": {
        "message": (
            "Multi Mode activated! All AURA systems online: Voice AI, Timer, "
            "Stress Monitor, Document Scanner, and AI Clone."
        ),
        "active_features": ["Voice AI", "40-min Timer", "Stress Detection", "AI Clone", "Document Scanner"],
        "capabilities": "Full AURA experience with voice commands and document scanning.",
    },
    "focus": {
        "message": "Focus Mode activated. Distractions muted; timer and stress monitor stay on.",
        "active_features": ["40-min Timer", "Stress Detection"],
        "capabilities": "Minimal interruptions while you work through your session.",
    },
    "normal": {
        "message": "Normal Mode activated. Back to standard conversation.",
        "active_features": ["Voice AI"],
        "capabilities": "Ask questions by voice or text; special commands stay available.",
    },
}


class ScanIntentHandler(CommandHandler):
    keywords = ("scan", "read document", "analyze")

    @property
    def name(self) -> str:
        return "scan_intent"

    def handle(self, command: str, user_id: str) -> CommandResponse:
        return ScanReadyResponse(
            message="I am ready to scan and analyze documents. Please show me what you would like me to read.",
            voice_message=(
                "I am ready to scan documents for you. Please show the document to your camera "
                "and I will read and analyze it for you."
            ),
        )


class ModeSwitchHandler(CommandHandler):
    """Matches "<mode> mode" for each known mode."""

    @property
    def name(self) -> str:
        return "mode_switch"

    def _find_mode(self, lowered_command: str) -> Optional[str]:
        for mode in MODE_PROFILES:
            if f"{mode} mode" in lowered_command:
                return mode
        return None

    def matches(self, lowered_command: str) -> bool:
        return self._find_mode(lowered_command) is not None

    def handle(self, command: str, user_id: str) -> CommandResponse:
        mode = self._find_mode(command.lower()) or "normal"
        response = ModeResponse(status=f"{mode}_mode_active", mode=mode, **MODE_PROFILES[mode])
        response.voice_message = generate_voice_response(response.message, "conversation")
        return response
