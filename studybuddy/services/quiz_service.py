"""
Quiz engine: generation, scoring and history for course quizzes.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from studybuddy.core.agents.quiz_generator import QuizGenerator, build_material, truncate_material
from studybuddy.core.config import Settings, settings as default_settings
from studybuddy.core.exceptions import NotFoundError, QuizAlreadySubmittedError, ValidationError
from studybuddy.core.llm_config import LLMFactory
from studybuddy.core.permissions import get_owned_course
from studybuddy.models.course import Note, Pdf
from studybuddy.models.quiz import Quiz
from studybuddy.models.user import User
from studybuddy.schemas.quiz import QuestionResult, QuizQuestion, QuizResult

logger = logging.getLogger(__name__)

NOT_ENOUGH_MATERIAL = (
    "Not enough study material to generate a quiz. "
    "Add more notes or summarize your PDFs first."
)


def percentage(score: int, total: int) -> int:
    """Whole percentage, rounding halves up."""
    if total <= 0:
        return 0
    return (200 * score + total) // (2 * total)


def score_answers(
    questions: Sequence[QuizQuestion], answers: Sequence[int]
) -> Tuple[int, List[QuestionResult]]:
    """
    Compare each answer with the question's correct index.

    One point per exact match, no partial credit or negative marking.
    Callers make sure both sequences have the same length.
    """
    score = 0
    results: List[QuestionResult] = []
    for question, selected in zip(questions, answers):
        correct = selected == question.correct_index
        if correct:
            score += 1
        results.append(
            QuestionResult(
                question=question.question,
                options=list(question.options),
                correct_index=question.correct_index,
                selected_index=selected,
                correct=correct,
            )
        )
    return score, results


def quiz_title(course_name: str, created: Optional[datetime] = None) -> str:
    created = created or datetime.now()
    return f"{course_name} Quiz ({created:%b} {created.day})"


class QuizService:
    """Quiz operations for one request, bound to its database session."""

    def __init__(
        self,
        db: Session,
        llm_factory: LLMFactory,
        settings: Optional[Settings] = None,
    ):
        self.db = db
        self.settings = settings or default_settings
        self.generator = QuizGenerator(
            llm_factory,
            question_count=self.settings.QUIZ_QUESTION_COUNT,
            option_count=self.settings.QUIZ_OPTION_COUNT,
        )

    def get_quiz(self, course_id: int, quiz_id: int, user: User) -> Quiz:
        quiz = self.db.query(Quiz).filter(
            Quiz.id == quiz_id,
            Quiz.course_id == course_id,
            Quiz.user_id == user.id
        ).first()
        if not quiz:
            raise NotFoundError("Quiz not found")
        return quiz

    def generate(self, course_id: int, user: User) -> Quiz:
        """
        Build a new quiz from the course's notes and PDF summaries.

        Nothing is written unless the model output validated.
        """
        course = get_owned_course(course_id, user, self.db)

        notes = self.db.query(Note).filter(Note.course_id == course.id).order_by(Note.id).all()
        pdfs = self.db.query(Pdf).filter(
            Pdf.course_id == course.id,
            Pdf.summary.isnot(None),
            Pdf.summary != ""
        ).order_by(Pdf.id).all()

        material = build_material(notes, pdfs)
        if len(material.strip()) < self.settings.QUIZ_MIN_MATERIAL_CHARS:
            raise ValidationError(NOT_ENOUGH_MATERIAL)

        material = truncate_material(material, self.settings.QUIZ_MAX_MATERIAL_CHARS)
        questions = self.generator.generate_questions(material)

        quiz = Quiz(
            user_id=user.id,
            course_id=course.id,
            title=quiz_title(course.name),
            questions=questions,
            total=len(questions),
        )
        self.db.add(quiz)
        self.db.commit()
        self.db.refresh(quiz)

        logger.info(f"Quiz {quiz.id} generated for course {course.id} by user {user.id}")
        return quiz

    def submit(
        self, course_id: int, quiz_id: int, user: User, answers: Optional[List[int]]
    ) -> QuizResult:
        """
        Score a quiz and store the attempt.

        A quiz accepts exactly one submission.
        """
        quiz = self.get_quiz(course_id, quiz_id, user)
        if quiz.is_completed:
            raise QuizAlreadySubmittedError()

        questions: List[QuizQuestion] = quiz.questions
        if answers is None or len(answers) != len(questions):
            raise ValidationError(f"Expected {len(questions)} answers")

        score, results = score_answers(questions, answers)

        # Only the first of two racing submissions matches completed_at IS NULL
        updated = self.db.query(Quiz).filter(
            Quiz.id == quiz.id,
            Quiz.completed_at.is_(None)
        ).update(
            {
                Quiz.answers: list(answers),
                Quiz.score: score,
                Quiz.completed_at: datetime.now(timezone.utc),
            },
            synchronize_session=False,
        )
        if not updated:
            self.db.rollback()
            raise QuizAlreadySubmittedError()
        self.db.commit()

        logger.info(f"Quiz {quiz.id} submitted: {score}/{len(questions)}")
        return QuizResult(
            score=score,
            total=len(questions),
            percentage=percentage(score, len(questions)),
            results=results,
        )

    def history(self, course_id: int, user: User) -> List[Quiz]:
        """Caller's quizzes for a course, newest first."""
        return self.db.query(Quiz).filter(
            Quiz.course_id == course_id,
            Quiz.user_id == user.id
        ).order_by(Quiz.created_at.desc(), Quiz.id.desc()).all()
