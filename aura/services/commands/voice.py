"""Spoken phrasing for replies read aloud by the client"""
from typing import Dict, Tuple

# kind -> (prefix, suffix)
VOICE_FRAMES: Dict[str, Tuple[str, str]] = {
    "conversation": (
        "I understand what you're asking. ",
        " Is there anything else you'd like to know?",
    ),
    "scan": (
        "I've scanned the document. ",
        " Would you like me to explain any specific part?",
    ),
    "timer": (
        "Regarding your work session: ",
        " Keep up the great work!",
    ),
    "stress": (
        "I'm here to help with your wellbeing. ",
        " Take your time and breathe deeply.",
    ),
}


def generate_voice_response(text: str, kind: str = "conversation") -> str:
    """Wrap text in the spoken frame for `kind` (unknown kinds use conversation)"""
    prefix, suffix = VOICE_FRAMES.get(kind, VOICE_FRAMES["conversation"])
    return f"{prefix}{text}{suffix}"
