"""Exceptions raised inside the AURA backend"""
from typing import Optional


class AuraError(Exception):
    """Base class for AURA errors"""


class ProviderCallError(AuraError):
    """A single provider call failed (transport, HTTP status or payload)"""

    def __init__(self, provider: str, reason: str, cause: Optional[BaseException] = None):
        self.provider = provider
        self.reason = reason
        self.cause = cause
        super().__init__(f"{provider}: {reason}")


class MalformedUploadError(AuraError):
    """Image or document payload is missing or unreadable"""
