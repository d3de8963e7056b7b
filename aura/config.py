"""Application settings loaded from the environment"""
import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from aura.services.timer.models.timer_state import SessionRestartPolicy

load_dotenv(dotenv_path=".env")

# Declared provider order; fallback walks this list
PROVIDER_ORDER = ["groq", "openai", "huggingface", "gemini"]

GROQ_BASE_URL = "https://api.groq.com/openai/v1"
HUGGINGFACE_ENDPOINT = "https://api-inference.huggingface.co/models/{model}"


class ProviderSettings(BaseModel):
    """Connection settings for one chat-completion provider"""
    name: str
    api_key: str = ""
    model: str


class Settings(BaseModel):
    """Process-wide settings"""
    providers: List[ProviderSettings]
    preferred_provider: str = "groq"
    provider_timeout: float = 15.0
    session_restart_policy: SessionRestartPolicy = SessionRestartPolicy.REJECT
    max_timer_sessions: int = 10000
    upload_dir: str = "uploads"
    upload_cleanup_delay: float = 5.0
    max_upload_bytes: int = 10 * 1024 * 1024
    static_dir: Optional[str] = None

    def provider(self, name: str) -> ProviderSettings:
        for provider in self.providers:
            if provider.name == name:
                return provider
        raise KeyError(name)


def load_settings() -> Settings:
    """Build settings from environment variables (and .env)"""
    providers = [
        ProviderSettings(
            name="groq",
            api_key=os.getenv("GROQ_API_KEY", ""),
            model=os.getenv("GROQ_MODEL", "llama3-8b-8192"),
        ),
        ProviderSettings(
            name="openai",
            api_key=os.getenv("OPENAI_API_KEY", ""),
            model=os.getenv("OPENAI_MODEL", "gpt-3.5-turbo"),
        ),
        ProviderSettings(
            name="huggingface",
            api_key=os.getenv("HUGGINGFACE_TOKEN", ""),
            model=os.getenv("HUGGINGFACE_MODEL", "microsoft/DialoGPT-medium"),
        ),
        ProviderSettings(
            name="gemini",
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model=os.getenv("GEMINI_MODEL", "gemini-1.5-flash"),
        ),
    ]

    preferred = os.getenv("AURA_PREFERRED_PROVIDER", PROVIDER_ORDER[0])
    if preferred not in PROVIDER_ORDER:
        raise ValueError(f"AURA_PREFERRED_PROVIDER must be one of {PROVIDER_ORDER}, got {preferred!r}")

    restart_policy = os.getenv("AURA_SESSION_RESTART_POLICY", SessionRestartPolicy.REJECT.value)
    policies = [policy.value for policy in SessionRestartPolicy]
    if restart_policy not in policies:
        raise ValueError(f"AURA_SESSION_RESTART_POLICY must be one of {policies}, got {restart_policy!r}")

    return Settings(
        providers=providers,
        preferred_provider=preferred,
        provider_timeout=float(os.getenv("AURA_PROVIDER_TIMEOUT", "15")),
        session_restart_policy=SessionRestartPolicy(restart_policy),
        max_timer_sessions=int(os.getenv("AURA_MAX_TIMER_SESSIONS", "10000")),
        upload_dir=os.getenv("AURA_UPLOAD_DIR", "uploads"),
        upload_cleanup_delay=float(os.getenv("AURA_UPLOAD_CLEANUP_DELAY", "5")),
        max_upload_bytes=int(os.getenv("AURA_MAX_UPLOAD_BYTES", str(10 * 1024 * 1024))),
        static_dir=os.getenv("AURA_STATIC_DIR") or None,
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the settings singleton"""
    global _settings

    if _settings is None:
        _settings = load_settings()

    return _settings


def reset_settings():
    """Reset the settings singleton (useful for testing)"""
    global _settings
    _settings = None
