"""Local replies for when every hosted provider fails"""
from typing import Callable, List, Tuple, Union

from aura.utils.datetime_helper import format_wall_clock, utc_now

Reply = Union[str, Callable[[], str]]

# Ordered: the first keyword found in the message wins
FALLBACK_REPLIES: List[Tuple[str, Reply]] = [
    ("hello", "Hello! I am AURA, your AI study assistant. How can I help you today?"),
    ("hi", "Hi there! Ready to boost your productivity and learning?"),
    (
        "machine learning",
        "Machine learning is a branch of AI that enables computers to learn and make "
        "decisions from data without explicit programming.",
    ),
    (
        "programming",
        "Programming is the art of creating instructions for computers using languages "
        "like Python, JavaScript, or Java.",
    ),
    (
        "study",
        "Effective studying involves active recall, spaced repetition, and taking regular "
        "breaks. What subject are you working on?",
    ),
    (
        "stress",
        "I can help you manage stress through the 40-minute work sessions and safe mode activation.",
    ),
    ("weather", "I cannot check weather, but I hope you have a productive day ahead!"),
    ("time", lambda: f"It's currently around {format_wall_clock(utc_now().astimezone())}."),
    (
        "help",
        "I can assist with studies, manage your work sessions, activate AI Clone mode, "
        "and provide stress management support.",
    ),
]

DEFAULT_REPLY = (
    "I understand what you're asking. How can I help you with your studies or productivity today?"
)


def get_fallback_response(message: str) -> str:
    """
    Return a canned reply for a message using keyword matching.

    Args:
        message: Raw user message

    Returns:
        Reply of the first keyword contained in the lower-cased message,
        or DEFAULT_REPLY when nothing matches
    """
    lowered = (message or "").lower()
    for keyword, reply in FALLBACK_REPLIES:
        if keyword in lowered:
            return reply() if callable(reply) else reply
    return DEFAULT_REPLY
