"""Command Router - built-in commands first, then the AI providers."""
import logging
from dataclasses import dataclass
from typing import Optional

from aura.services.llm.orchestrator import ResponseOrchestrator
from aura.services.timer.timer_manager import DEFAULT_USER_ID
from .models import CommandResponse, ConversationResponse, ScanRequestResponse
from .registry import CommandRegistry
from .voice import generate_voice_response

logger = logging.getLogger(__name__)

SYSTEM_COMMAND = "system_command"
AI_CONVERSATION = "ai_conversation"
INTERNAL_SYSTEM = "internal_system"
LOCAL_FALLBACK = "local_fallback"

VOICE_SCAN_KEYWORDS = ("scan", "document", "read")


@dataclass
class RoutedCommand:
    """Response plus how it was produced"""
    response: CommandResponse
    command_type: str
    api_used: str


class CommandRouter:
    """Dispatches free text to the first matching handler or to the orchestrator."""

    def __init__(self, registry: CommandRegistry, orchestrator: ResponseOrchestrator):
        self._registry = registry
        self._orchestrator = orchestrator

    async def route(self, command: str, user_id: Optional[str] = None) -> RoutedCommand:
        """
        Route a typed command.

        Args:
            command: Free text from the user
            user_id: User identifier for timer state (defaults to "default")

        Returns:
            RoutedCommand tagged system_command (built-in) or ai_conversation
        """
        user_id = user_id or DEFAULT_USER_ID
        handler = self._registry.match(command)
        if handler:
            logger.info(f"Command matched built-in handler: {handler.name} (user={user_id})")
            return RoutedCommand(
                response=handler.handle(command, user_id),
                command_type=SYSTEM_COMMAND,
                api_used=INTERNAL_SYSTEM,
            )

        reply = await self._orchestrator.respond(command)
        return RoutedCommand(
            response=ConversationResponse(message=reply.text),
            command_type=AI_CONVERSATION,
            api_used=reply.provider or LOCAL_FALLBACK,
        )

    async def route_voice(self, command: str) -> CommandResponse:
        """
        Route a transcribed voice command.
        Scan words open the camera; everything else is an AI reply phrased for speech.
        """
        lowered = (command or "").lower()
        if any(keyword in lowered for keyword in VOICE_SCAN_KEYWORDS):
            return ScanRequestResponse(
                message=(
                    "Please show me the document you want me to scan. I can analyze research papers, "
                    "textbooks, notes, or any written content."
                ),
                voice_message=(
                    "I'm ready to scan a document for you. Please show it to your camera and I'll "
                    "analyze the content and explain it to you."
                ),
            )

        text = await self._orchestrator.get_response(command)
        return ConversationResponse(
            message=text,
            voice_message=generate_voice_response(text, "conversation"),
        )
