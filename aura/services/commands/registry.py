"""Command Registry - ordered handler list, first match wins."""
import logging
from typing import List, Optional

from .base import CommandHandler

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Keeps handlers in registration order; that order is the precedence."""

    def __init__(self):
        self._handlers: List[CommandHandler] = []

    def register(self, handler: CommandHandler):
        """Append a handler (lowest precedence so far)."""
        if self.get_handler(handler.name):
            raise ValueError(f"Command handler already registered: {handler.name}")
        self._handlers.append(handler)
        logger.info(f"Command handler registered: {handler.name}")

    def get_handler(self, name: str) -> Optional[CommandHandler]:
        for handler in self._handlers:
            if handler.name == name:
                return handler
        return None

    def match(self, command: str) -> Optional[CommandHandler]:
        """First handler whose predicate accepts the lower-cased command."""
        lowered = (command or "").lower()
        for handler in self._handlers:
            if handler.matches(lowered):
                return handler
        return None

    def get_handler_names(self) -> List[str]:
        return [handler.name for handler in self._handlers]
