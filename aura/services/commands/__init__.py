from .base import CommandHandler
from .models import CommandResponse
from .registry import CommandRegistry
from .router import CommandRouter, RoutedCommand
from .voice import generate_voice_response

__all__ = [
    "CommandHandler",
    "CommandResponse",
    "CommandRegistry",
    "CommandRouter",
    "RoutedCommand",
    "generate_voice_response",
]
