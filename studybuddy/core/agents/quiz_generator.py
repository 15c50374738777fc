"""
Quiz generator for course quizzes.
Uses the LLM to write multiple choice questions from a course's notes and PDF summaries.
"""
import json
import logging
import re
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError

from studybuddy.core.agents.chat import invoke_chat
from studybuddy.core.agents.prompts import (
    QUIZ_GENERATION_SYSTEM_PROMPT,
    QUIZ_GENERATION_USER_PROMPT,
)
from studybuddy.core.exceptions import UpstreamFormatError
from studybuddy.core.llm_config import LLMFactory
from studybuddy.models.course import Note, Pdf
from studybuddy.schemas.quiz import QuizQuestion

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "\n...(truncated)"

FENCE_OPEN = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
FENCE_CLOSE = re.compile(r"\s*```$")


class _GeneratedQuestion(BaseModel):
    """Shape every item of the model's JSON array must have."""

    question: StrictStr = Field(..., min_length=1)
    options: List[StrictStr]
    correctIndex: StrictInt


def build_material(notes: Iterable[Note], pdfs: Iterable[Pdf]) -> str:
    """
    Concatenate notes and summarized PDFs into one labelled text block.

    PDFs without a stored summary are skipped.
    """
    material = ""
    notes = list(notes)
    pdfs = [p for p in pdfs if p.summary and p.summary.strip()]

    if notes:
        material += "NOTES:\n"
        for note in notes:
            material += f"\n--- {note.title} ---\n{note.body or '(empty)'}\n"
    if pdfs:
        material += "\nPDF SUMMARIES:\n"
        for pdf in pdfs:
            material += f"\n--- {pdf.original_name} ---\n{pdf.summary}\n"
    return material


def truncate_material(material: str, max_chars: int) -> str:
    """Cut the tail off material longer than ``max_chars`` and mark the cut."""
    if len(material) <= max_chars:
        return material
    return material[:max_chars] + TRUNCATION_MARKER


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence, if the model added one."""
    text = text.strip()
    if text.startswith("```"):
        text = FENCE_OPEN.sub("", text, count=1)
        text = FENCE_CLOSE.sub("", text, count=1)
    return text.strip()


def normalize_questions(
    raw: object,
    question_count: int = 5,
    option_count: int = 4,
) -> List[QuizQuestion]:
    """
    Validate the parsed model output and clip it to the quiz shape.

    Extra questions and extra options are dropped. Anything else that
    deviates (missing fields, wrong types, fewer options than required,
    an answer index outside the kept options) fails the whole quiz.

    Raises:
        UpstreamFormatError: If the output cannot be turned into a quiz.
    """
    if not isinstance(raw, list) or not raw:
        raise UpstreamFormatError("AI returned empty quiz. Please try again.")

    questions: List[QuizQuestion] = []
    for position, item in enumerate(raw[:question_count], start=1):
        try:
            parsed = _GeneratedQuestion.model_validate(item)
        except PydanticValidationError as e:
            logger.warning(f"Rejected quiz question {position}: {e.errors()}")
            raise UpstreamFormatError() from e

        if not parsed.question.strip():
            raise UpstreamFormatError()
        if len(parsed.options) < option_count:
            logger.warning(f"Question {position} has {len(parsed.options)} options, expected {option_count}")
            raise UpstreamFormatError()

        options = parsed.options[:option_count]
        if not 0 <= parsed.correctIndex < len(options):
            logger.warning(f"Question {position} has out of range correctIndex {parsed.correctIndex}")
            raise UpstreamFormatError()

        questions.append(
            QuizQuestion(question=parsed.question, options=options, correct_index=parsed.correctIndex)
        )
    return questions


class QuizGenerator:
    """
    Generates multiple choice questions from study material using the LLM.
    """

    def __init__(
        self,
        llm_factory: LLMFactory,
        question_count: int = 5,
        option_count: int = 4,
    ):
        self.llm_factory = llm_factory
        self.question_count = question_count
        self.option_count = option_count

    def generate_questions(self, material: str) -> List[QuizQuestion]:
        """
        Ask the model for a quiz over ``material``.

        Args:
            material: Course text, already truncated to the context budget

        Returns:
            Validated list of questions

        Raises:
            ConfigurationError: No API key configured
            UpstreamUnavailableError: The LLM call failed
            UpstreamFormatError: The answer was not a usable quiz
        """
        llm = self.llm_factory.create_llm(max_tokens=1500, temperature=0.5)

        system_prompt = QUIZ_GENERATION_SYSTEM_PROMPT.format(
            count=self.question_count,
            options=self.option_count,
            last_index=self.option_count - 1,
        )
        user_prompt = QUIZ_GENERATION_USER_PROMPT.format(material=material)

        logger.info(f"Generating {self.question_count} questions with LLM...")
        response_text = invoke_chat(llm, system_prompt, user_prompt)

        questions = normalize_questions(
            self._parse_response(response_text),
            question_count=self.question_count,
            option_count=self.option_count,
        )
        logger.info(f"Successfully generated {len(questions)} questions")
        return questions

    def _parse_response(self, response_text: str) -> Optional[object]:
        """Parse LLM response."""
        try:
            return json.loads(strip_code_fences(response_text))
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse quiz JSON: {e}")
            raise UpstreamFormatError() from e
