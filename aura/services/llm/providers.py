"""Provider clients - one outbound chat-completion call per provider"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

import httpx
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

from aura.config import GROQ_BASE_URL, HUGGINGFACE_ENDPOINT, PROVIDER_ORDER, Settings
from aura.exceptions import ProviderCallError
from .prompts import AURA_SYSTEM_PROMPT, build_completion_prompt

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7
CHAT_MAX_TOKENS = 150
COMPLETION_MAX_NEW_TOKENS = 100

# (api_key, timeout) -> chat model
ChatModelFactory = Callable[[str, float], BaseChatModel]


class ProviderClient(ABC):
    """
    Base class for provider clients.
    One provider = one client. complete() either returns non-empty text
    or raises ProviderCallError; callers never see other exception types.
    """

    def __init__(self, name: str, api_key: str, timeout: float):
        self.name = name
        self.api_key = api_key or ""
        self.timeout = timeout

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    async def complete(self, message: str) -> str:
        """Send one user message and return the provider's reply text"""
        if not self.has_credential:
            raise ProviderCallError(self.name, "no credential configured")

        try:
            text = await self._request(message)
        except ProviderCallError:
            raise
        except Exception as e:
            raise ProviderCallError(self.name, f"{type(e).__name__}: {e}", cause=e) from e

        text = (text or "").strip()
        if not text:
            raise ProviderCallError(self.name, "response contained no text")
        return text

    @abstractmethod
    async def _request(self, message: str) -> Optional[str]:
        """Perform the call and extract the raw reply text"""


def _message_text(content: Any) -> str:
    """Flatten LangChain message content (str or list of parts) to text"""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and isinstance(part.get("text"), str):
                parts.append(part["text"])
        return "".join(parts)
    return ""


class LangChainProviderClient(ProviderClient):
    """Chat provider backed by a LangChain chat model, built on first use"""

    def __init__(self, name: str, api_key: str, timeout: float, model_factory: ChatModelFactory):
        super().__init__(name, api_key, timeout)
        self._model_factory = model_factory
        self._llm: Optional[BaseChatModel] = None

    def _get_llm(self) -> BaseChatModel:
        if self._llm is None:
            self._llm = self._model_factory(self.api_key, self.timeout)
        return self._llm

    async def _request(self, message: str) -> Optional[str]:
        lc_messages = [
            SystemMessage(content=AURA_SYSTEM_PROMPT),
            HumanMessage(content=message),
        ]
        response = await self._get_llm().ainvoke(lc_messages)
        return _message_text(response.content)


class HuggingFaceProviderClient(ProviderClient):
    """Hugging Face Inference API (text generation) over plain HTTP"""

    def __init__(
        self,
        name: str,
        api_key: str,
        timeout: float,
        model: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(name, api_key, timeout)
        self.url = HUGGINGFACE_ENDPOINT.format(model=model)
        self._transport = transport

    async def _request(self, message: str) -> Optional[str]:
        prompt = build_completion_prompt(message)
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.post(
                self.url,
                json={
                    "inputs": prompt,
                    "parameters": {
                        "max_new_tokens": COMPLETION_MAX_NEW_TOKENS,
                        "temperature": TEMPERATURE,
                        "return_full_text": False,
                    },
                },
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
            )

        if not response.is_success:
            raise ProviderCallError(self.name, f"HTTP {response.status_code}")

        data = response.json()
        if isinstance(data, list) and data and isinstance(data[0], dict):
            generated = data[0].get("generated_text")
            if isinstance(generated, str):
                return generated.replace(prompt, "")
        raise ProviderCallError(self.name, "response has no generated_text")


def openai_chat_factory(model: str, base_url: Optional[str] = None) -> ChatModelFactory:
    """Factory for OpenAI-compatible chat endpoints (OpenAI, Groq)"""
    def factory(api_key: str, timeout: float) -> BaseChatModel:
        return ChatOpenAI(
            model=model,
            api_key=api_key,
            base_url=base_url,
            temperature=TEMPERATURE,
            max_tokens=CHAT_MAX_TOKENS,
            timeout=timeout,
            max_retries=0,
        )
    return factory


def gemini_chat_factory(model: str) -> ChatModelFactory:
    """Factory for Google Gemini chat models"""
    def factory(api_key: str, timeout: float) -> BaseChatModel:
        return ChatGoogleGenerativeAI(
            model=model,
            google_api_key=api_key,
            temperature=TEMPERATURE,
            max_output_tokens=CHAT_MAX_TOKENS,
            timeout=timeout,
            max_retries=0,
        )
    return factory


def build_provider_clients(settings: Settings) -> List[ProviderClient]:
    """Create one client per configured provider, in declared order"""
    clients: List[ProviderClient] = []
    for name in PROVIDER_ORDER:
        provider = settings.provider(name)
        if name == "groq":
            client: ProviderClient = LangChainProviderClient(
                name, provider.api_key, settings.provider_timeout,
                openai_chat_factory(provider.model, base_url=GROQ_BASE_URL),
            )
        elif name == "openai":
            client = LangChainProviderClient(
                name, provider.api_key, settings.provider_timeout,
                openai_chat_factory(provider.model),
            )
        elif name == "gemini":
            client = LangChainProviderClient(
                name, provider.api_key, settings.provider_timeout,
                gemini_chat_factory(provider.model),
            )
        else:
            client = HuggingFaceProviderClient(
                name, provider.api_key, settings.provider_timeout, provider.model,
            )
        clients.append(client)
        logger.info(f"Provider configured: {name} (model={provider.model}, credential={'yes' if client.has_credential else 'no'})")
    return clients
