"""
Tests for environment-driven settings and the runtime singletons built from them.
"""
import pytest

from aura.config import get_settings, load_settings, reset_settings
from aura.services.runtime import get_document_scanner, get_timer_registry, reset_runtime
from aura.services.timer.models.timer_state import SessionRestartPolicy

AURA_ENV_VARS = [
    "GROQ_API_KEY", "GROQ_MODEL",
    "OPENAI_API_KEY", "OPENAI_MODEL",
    "HUGGINGFACE_TOKEN", "HUGGINGFACE_MODEL",
    "GEMINI_API_KEY", "GEMINI_MODEL",
    "AURA_PREFERRED_PROVIDER", "AURA_PROVIDER_TIMEOUT",
    "AURA_SESSION_RESTART_POLICY", "AURA_MAX_TIMER_SESSIONS",
    "AURA_UPLOAD_DIR", "AURA_UPLOAD_CLEANUP_DELAY",
    "AURA_MAX_UPLOAD_BYTES", "AURA_STATIC_DIR",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in AURA_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    reset_runtime()
    yield monkeypatch
    reset_settings()
    reset_runtime()


class TestLoadSettings:
    """Test parsing of environment variables."""

    def test_defaults(self, clean_env):
        settings = load_settings()

        assert settings.preferred_provider == "groq"
        assert settings.session_restart_policy == SessionRestartPolicy.REJECT
        assert settings.provider_timeout == 15.0
        assert settings.max_upload_bytes == 10 * 1024 * 1024
        assert settings.static_dir is None
        assert settings.provider("groq").model == "llama3-8b-8192"
        assert settings.provider("huggingface").api_key == ""

    def test_values_from_environment(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", "sk-test")
        clean_env.setenv("OPENAI_MODEL", "gpt-4o-mini")
        clean_env.setenv("AURA_PREFERRED_PROVIDER", "openai")
        clean_env.setenv("AURA_PROVIDER_TIMEOUT", "3.5")
        clean_env.setenv("AURA_SESSION_RESTART_POLICY", "restart")
        clean_env.setenv("AURA_MAX_UPLOAD_BYTES", "2048")
        clean_env.setenv("AURA_STATIC_DIR", "")

        settings = load_settings()

        assert settings.provider("openai").api_key == "sk-test"
        assert settings.provider("openai").model == "gpt-4o-mini"
        assert settings.preferred_provider == "openai"
        assert settings.provider_timeout == 3.5
        assert settings.session_restart_policy == SessionRestartPolicy.RESTART
        assert settings.max_upload_bytes == 2048
        assert settings.static_dir is None

    def test_unknown_preferred_provider_rejected(self, clean_env):
        clean_env.setenv("AURA_PREFERRED_PROVIDER", "anthropic")
        with pytest.raises(ValueError, match="AURA_PREFERRED_PROVIDER"):
            load_settings()

    def test_unknown_restart_policy_rejected(self, clean_env):
        clean_env.setenv("AURA_SESSION_RESTART_POLICY", "sometimes")
        with pytest.raises(ValueError, match="AURA_SESSION_RESTART_POLICY"):
            load_settings()

    def test_unknown_provider_lookup(self, clean_env):
        with pytest.raises(KeyError):
            load_settings().provider("anthropic")


class TestSingletons:
    """Test the settings and runtime singletons and their reset helpers."""

    def test_settings_cached_until_reset(self, clean_env):
        first = get_settings()
        clean_env.setenv("AURA_PROVIDER_TIMEOUT", "9")

        assert get_settings() is first

        reset_settings()
        assert get_settings().provider_timeout == 9.0

    def test_timer_registry_uses_configured_policy(self, clean_env):
        clean_env.setenv("AURA_SESSION_RESTART_POLICY", "restart")
        clean_env.setenv("AURA_MAX_TIMER_SESSIONS", "5")

        registry = get_timer_registry()

        assert registry.restart_policy == SessionRestartPolicy.RESTART
        assert registry.max_sessions == 5
        assert get_timer_registry() is registry

    def test_reset_runtime_drops_instances(self, clean_env):
        scanner = get_document_scanner()
        reset_runtime()
        assert get_document_scanner() is not scanner
