import logging

from studybuddy.core.agents.chat import invoke_chat
from studybuddy.core.agents.prompts import (
    NOTE_SUMMARY_SYSTEM_PROMPT,
    NOTE_SUMMARY_USER_PROMPT,
    PDF_SUMMARY_SYSTEM_PROMPT,
    PDF_SUMMARY_USER_PROMPT,
)
from studybuddy.core.exceptions import UpstreamUnavailableError
from studybuddy.core.llm_config import LLMFactory

logger = logging.getLogger(__name__)


class Summarizer:
    """Turns note bodies and PDF text into bullet point summaries."""

    def __init__(self, llm_factory: LLMFactory):
        self.llm_factory = llm_factory

    def summarize_note(self, body: str) -> str:
        llm = self.llm_factory.create_llm(max_tokens=500, temperature=0.4)
        summary = invoke_chat(
            llm,
            NOTE_SUMMARY_SYSTEM_PROMPT,
            NOTE_SUMMARY_USER_PROMPT.format(body=body),
        )
        return self._require_text(summary)

    def summarize_pdf(self, text: str) -> str:
        llm = self.llm_factory.create_llm(max_tokens=600, temperature=0.4)
        summary = invoke_chat(
            llm,
            PDF_SUMMARY_SYSTEM_PROMPT,
            PDF_SUMMARY_USER_PROMPT.format(text=text),
        )
        return self._require_text(summary)

    @staticmethod
    def _require_text(summary: str) -> str:
        if not summary:
            logger.warning("LLM returned an empty summary")
            raise UpstreamUnavailableError("AI service unavailable: empty response from model")
        return summary
