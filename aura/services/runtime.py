"""Process-wide service singletons, created on first use"""
import logging
from typing import Optional

from aura.config import get_settings
from aura.services.commands.handlers import register_default_handlers
from aura.services.commands.registry import CommandRegistry
from aura.services.commands.router import CommandRouter
from aura.services.llm.orchestrator import ProviderPreference, ResponseOrchestrator
from aura.services.llm.providers import build_provider_clients
from aura.services.scan.document_scan import DocumentScanStub
from aura.services.timer.timer_manager import SessionTimerRegistry

logger = logging.getLogger(__name__)

_orchestrator: Optional[ResponseOrchestrator] = None
_timer_registry: Optional[SessionTimerRegistry] = None
_command_router: Optional[CommandRouter] = None
_document_scanner: Optional[DocumentScanStub] = None


def get_response_orchestrator() -> ResponseOrchestrator:
    """Get or create the orchestrator singleton"""
    global _orchestrator

    if _orchestrator is None:
        settings = get_settings()
        clients = build_provider_clients(settings)
        preference = ProviderPreference(
            [client.name for client in clients],
            current=settings.preferred_provider,
        )
        _orchestrator = ResponseOrchestrator(clients, preference)
        logger.info(f"Response orchestrator ready, preferred provider: {preference.current}")

    return _orchestrator


def get_timer_registry() -> SessionTimerRegistry:
    """Get or create the timer registry singleton"""
    global _timer_registry

    if _timer_registry is None:
        settings = get_settings()
        _timer_registry = SessionTimerRegistry(
            restart_policy=settings.session_restart_policy,
            max_sessions=settings.max_timer_sessions,
        )

    return _timer_registry


def get_command_router() -> CommandRouter:
    """Get or create the command router singleton"""
    global _command_router

    if _command_router is None:
        registry = register_default_handlers(CommandRegistry(), get_timer_registry())
        _command_router = CommandRouter(registry, get_response_orchestrator())

    return _command_router


def get_document_scanner() -> DocumentScanStub:
    """Get or create the document scanner singleton"""
    global _document_scanner

    if _document_scanner is None:
        _document_scanner = DocumentScanStub()

    return _document_scanner


def reset_runtime():
    """Drop all singletons (useful for testing)"""
    global _orchestrator, _timer_registry, _command_router, _document_scanner
    _orchestrator = None
    _timer_registry = None
    _command_router = None
    _document_scanner = None
