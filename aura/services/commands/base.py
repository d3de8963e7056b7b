"""Base class for built-in command handlers."""
from abc import ABC, abstractmethod
from typing import Tuple

from .models import CommandResponse


class CommandHandler(ABC):
    """
    One built-in command = one handler.
    matches() is the predicate, handle() builds the response.
    Handlers never call an LLM.
    """

    # Substrings of the lower-cased command that trigger this handler
    keywords: Tuple[str, ...] = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """Handler identifier"""

    def matches(self, lowered_command: str) -> bool:
        return any(keyword in lowered_command for keyword in self.keywords)

    @abstractmethod
    def handle(self, command: str, user_id: str) -> CommandResponse:
        """Build the response for a matched command"""
