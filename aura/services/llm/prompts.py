"""Prompts sent to hosted chat providers"""

AURA_SYSTEM_PROMPT = (
    "You are AURA, an AI study assistant. "
    "Keep responses conversational and helpful for students."
)


def build_completion_prompt(message: str) -> str:
    """Plain-text prompt for completion-style (non-chat) models"""
    return f"Human: {message}\nAURA:"
