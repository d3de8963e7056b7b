# API module exports
from aura.api import commands, scan, status, voice
from aura.api.base import api_router

__all__ = ["commands", "scan", "status", "voice", "api_router"]
