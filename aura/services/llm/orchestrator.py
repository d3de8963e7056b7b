"""Response Orchestrator - ordered provider fallback with a sticky preference"""
import logging
import threading
from typing import Callable, Dict, List, Optional, Sequence

from pydantic import BaseModel

from aura.exceptions import ProviderCallError
from .fallback_content import get_fallback_response
from .providers import ProviderClient

logger = logging.getLogger(__name__)


class ProviderReply(BaseModel):
    """Reply text plus the provider that produced it (None = local fallback)"""
    text: str
    provider: Optional[str] = None


class ProviderPreference:
    """
    Ordered provider identifiers plus the one to try first.
    `current` is always a member of `order`.
    """

    def __init__(self, order: Sequence[str], current: Optional[str] = None):
        if not order:
            raise ValueError("provider order must not be empty")
        self._order = list(order)
        self._lock = threading.Lock()
        self._current = self._order[0]
        if current is not None:
            self.promote(current)

    @property
    def order(self) -> List[str]:
        return list(self._order)

    @property
    def current(self) -> str:
        with self._lock:
            return self._current

    def promote(self, name: str):
        """Make `name` the provider tried first on the next call"""
        if name not in self._order:
            raise ValueError(f"Unknown provider: {name}")
        with self._lock:
            self._current = name


class ResponseOrchestrator:
    """
    Tries providers in preference order and never raises to its caller.

    Concurrent calls may race on the preference: two requests failing over
    at once can each promote a different provider. The last write wins,
    which only costs a later call one extra attempt.
    """

    def __init__(
        self,
        clients: Sequence[ProviderClient],
        preference: Optional[ProviderPreference] = None,
        fallback: Callable[[str], str] = get_fallback_response,
    ):
        self._clients: Dict[str, ProviderClient] = {c.name: c for c in clients}
        self.preference = preference or ProviderPreference([c.name for c in clients])
        missing = [name for name in self.preference.order if name not in self._clients]
        if missing:
            raise ValueError(f"No client configured for providers: {missing}")
        self._fallback = fallback

    @property
    def current_provider(self) -> str:
        return self.preference.current

    def available_providers(self) -> List[str]:
        """Providers with a credential, in declared order"""
        return [name for name in self.preference.order if self._clients[name].has_credential]

    async def get_response(self, message: str) -> str:
        """Reply text for a message; always non-empty"""
        reply = await self.respond(message)
        return reply.text

    async def respond(self, message: str) -> ProviderReply:
        """
        Get a reply from the first provider that succeeds.

        1. Preferred provider (if it has a credential); success keeps the preference.
        2. Remaining providers in declared order, skipping uncredentialed ones;
           the first success becomes the preferred provider.
        3. Local keyword responder.
        """
        preferred = self.preference.current

        text = await self._try(preferred, message)
        if text is not None:
            logger.info(f"AI response from: {preferred}")
            return ProviderReply(text=text, provider=preferred)

        for name in self.preference.order:
            if name == preferred:
                continue
            text = await self._try(name, message)
            if text is not None:
                self.preference.promote(name)
                logger.info(f"Switched preferred provider: {preferred} -> {name}")
                return ProviderReply(text=text, provider=name)

        logger.warning("All providers unavailable, using local fallback response")
        text = self._fallback(message) or ""
        if not text.strip():
            text = get_fallback_response("")
        return ProviderReply(text=text, provider=None)

    async def _try(self, name: str, message: str) -> Optional[str]:
        client = self._clients[name]
        if not client.has_credential:
            logger.debug(f"Skipping provider without credential: {name}")
            return None
        try:
            return await client.complete(message)
        except ProviderCallError as e:
            logger.warning(f"Provider call failed: {e}")
            return None
        except Exception as e:
            logger.error(f"Unexpected error from provider {name}: {e}")
            return None
