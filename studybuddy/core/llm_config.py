from typing import Optional
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_openai import ChatOpenAI
from pydantic import SecretStr

from studybuddy.core.config import Settings, settings as default_settings
from studybuddy.core.exceptions import ConfigurationError

PLACEHOLDER_API_KEYS = {"", "your_groq_api_key_here"}


class LLMFactory:
    """Factory for creating configured chat model instances.

    Building the client is deferred until a handler actually needs it, so a
    missing API key only fails the requests that call the model.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings

    def create_llm(
        self,
        max_tokens: int = 1024,
        temperature: float = 0.4,
        model: Optional[str] = None,
    ) -> BaseChatModel:
        """
        Create a configured ChatOpenAI instance.

        Args:
            max_tokens: Upper bound on generated tokens.
            temperature: The temperature for generation.
            model: The model name to use, defaults to settings.

        Raises:
            ConfigurationError: If no usable API key is configured.
        """
        api_key = (self.settings.GROQ_API_KEY or "").strip()
        if api_key in PLACEHOLDER_API_KEYS:
            raise ConfigurationError("AI API key not configured")

        return ChatOpenAI(
            model=model or self.settings.LLM_MODEL,
            api_key=SecretStr(api_key),
            base_url=self.settings.LLM_BASE_URL,
            max_tokens=max_tokens,
            temperature=temperature,
            max_retries=0,
        )
