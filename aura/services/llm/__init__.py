from .orchestrator import ProviderPreference, ProviderReply, ResponseOrchestrator
from .providers import ProviderClient, build_provider_clients

__all__ = [
    "ProviderPreference",
    "ProviderReply",
    "ResponseOrchestrator",
    "ProviderClient",
    "build_provider_clients",
]
