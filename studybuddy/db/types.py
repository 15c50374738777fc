"""
Custom column types.
"""
import json
from typing import Any, List, Optional

from sqlalchemy import Text
from sqlalchemy.types import TypeDecorator

from studybuddy.schemas.quiz import QuizQuestion


class QuestionList(TypeDecorator):
    """
    Ordered list of ``QuizQuestion`` values stored as JSON text.

    Rows hold the same JSON shape the API exposes
    (``{"question", "options", "correctIndex"}``), Python code only ever
    sees ``QuizQuestion`` instances.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Optional[List[Any]], dialect) -> Optional[str]:
        if value is None:
            return None
        items = [QuizQuestion.model_validate(q).model_dump(by_alias=True) for q in value]
        return json.dumps(items)

    def process_result_value(self, value: Optional[str], dialect) -> Optional[List[QuizQuestion]]:
        if value is None:
            return None
        return [QuizQuestion.model_validate(item) for item in json.loads(value)]
