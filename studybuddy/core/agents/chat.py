"""
Single round trip to the chat model.
"""
import logging

import openai
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from studybuddy.core.exceptions import UpstreamUnavailableError

logger = logging.getLogger(__name__)


def invoke_chat(llm: BaseChatModel, system_prompt: str, user_prompt: str) -> str:
    """
    Send one system + user exchange and return the generated text, stripped.

    No retry: a failed call surfaces immediately.

    Raises:
        UpstreamUnavailableError: On network/HTTP failure.
    """
    messages = [SystemMessage(content=system_prompt), HumanMessage(content=user_prompt)]
    try:
        response = llm.invoke(messages)
    except openai.APIError as e:
        logger.error(f"LLM request failed: {e}")
        raise UpstreamUnavailableError("AI service unavailable") from e

    content = response.content
    if isinstance(content, list):
        content = "".join(
            part if isinstance(part, str) else str(part.get("text", ""))
            for part in content
        )
    return (content or "").strip()
