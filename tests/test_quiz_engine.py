import json
from datetime import datetime
from types import SimpleNamespace

import pytest

from studybuddy.core.agents.quiz_generator import (
    QuizGenerator,
    build_material,
    normalize_questions,
    strip_code_fences,
    truncate_material,
)
from studybuddy.core.config import Settings
from studybuddy.core.exceptions import ConfigurationError, UpstreamFormatError, UpstreamUnavailableError
from studybuddy.core.llm_config import LLMFactory
from studybuddy.schemas.quiz import QuizQuestion
from studybuddy.services.quiz_service import percentage, quiz_title, score_answers


def make_raw(count=5, options=4):
    return [
        {
            "question": f"Question {i}?",
            "options": [f"Option {i}.{j}" for j in range(options)],
            "correctIndex": i % min(options, 4),
        }
        for i in range(count)
    ]


def test_percentage_rounds_half_up():
    assert percentage(3, 5) == 60
    assert percentage(1, 8) == 13  # 12.5
    assert percentage(1, 3) == 33
    assert percentage(2, 3) == 67
    assert percentage(5, 5) == 100
    assert percentage(0, 5) == 0


def test_percentage_of_empty_quiz_is_zero():
    assert percentage(0, 0) == 0


def test_score_answers_counts_exact_matches():
    questions = normalize_questions(make_raw())
    answers = [q.correct_index for q in questions]
    answers[1] = (answers[1] + 1) % 4
    answers[3] = -1

    score, results = score_answers(questions, answers)

    assert score == 3
    assert [r.correct for r in results] == [True, False, True, False, True]
    assert results[3].selected_index == -1
    assert results[0].model_dump(by_alias=True)["correctIndex"] == questions[0].correct_index


def test_normalize_passes_well_formed_quiz_through_unchanged():
    raw = make_raw()
    questions = normalize_questions(raw)

    assert [q.model_dump(by_alias=True) for q in questions] == raw
    again = normalize_questions([q.model_dump(by_alias=True) for q in questions])
    assert again == questions


def test_normalize_clips_extra_questions_and_options():
    questions = normalize_questions(make_raw(count=7, options=6))

    assert len(questions) == 5
    assert all(len(q.options) == 4 for q in questions)


def test_normalize_accepts_fewer_questions():
    assert len(normalize_questions(make_raw(count=3))) == 3


@pytest.mark.parametrize("raw", [
    [],
    {"questions": make_raw()},
    "not a list",
    None,
])
def test_normalize_rejects_non_list_or_empty(raw):
    with pytest.raises(UpstreamFormatError):
        normalize_questions(raw)


@pytest.mark.parametrize("broken", [
    {"options": ["a", "b", "c", "d"], "correctIndex": 0},
    {"question": "Q?", "options": ["a", "b", "c"], "correctIndex": 0},
    {"question": "Q?", "options": ["a", "b", "c", "d"], "correctIndex": 4},
    {"question": "Q?", "options": ["a", "b", "c", "d"], "correctIndex": -1},
    {"question": "Q?", "options": ["a", "b", "c", "d"], "correctIndex": "1"},
    {"question": "Q?", "options": ["a", "b", "c", "d"]},
    {"question": "   ", "options": ["a", "b", "c", "d"], "correctIndex": 0},
    {"question": "Q?", "options": ["a", 2, "c", "d"], "correctIndex": 0},
    "Q?",
])
def test_normalize_fails_closed_on_malformed_item(broken):
    raw = make_raw(count=4) + [broken]
    with pytest.raises(UpstreamFormatError):
        normalize_questions(raw)


def test_normalize_rejects_answer_index_in_dropped_option():
    raw = make_raw(count=1, options=6)
    raw[0]["correctIndex"] = 5
    with pytest.raises(UpstreamFormatError):
        normalize_questions(raw)


def test_strip_code_fences():
    assert strip_code_fences('```json\n[1, 2]\n```') == "[1, 2]"
    assert strip_code_fences('```\n[1]\n```') == "[1]"
    assert strip_code_fences('  [3]  ') == "[3]"
    assert strip_code_fences('```JSON [4]```') == "[4]"


def test_strip_code_fences_leaves_backticks_inside_questions_alone():
    raw = make_raw(count=1)
    raw[0]["question"] = "What does ```json mark in markdown?"
    text = json.dumps(raw)

    assert json.loads(strip_code_fences(text)) == raw
    assert json.loads(strip_code_fences(f"```json\n{text}\n```")) == raw


def test_build_material_labels_notes_and_skips_unsummarized_pdfs():
    notes = [
        SimpleNamespace(title="Cells", body="Cells are the basic unit of life."),
        SimpleNamespace(title="Empty", body=""),
    ]
    pdfs = [
        SimpleNamespace(original_name="genetics.pdf", summary="• DNA stores information"),
        SimpleNamespace(original_name="raw.pdf", summary=None),
    ]

    material = build_material(notes, pdfs)

    assert material.startswith("NOTES:\n")
    assert "--- Cells ---\nCells are the basic unit of life." in material
    assert "--- Empty ---\n(empty)" in material
    assert "PDF SUMMARIES:" in material
    assert "--- genetics.pdf ---" in material
    assert "raw.pdf" not in material


def test_build_material_without_anything_is_empty():
    assert build_material([], []) == ""


def test_truncate_material():
    assert truncate_material("short", 10) == "short"
    cut = truncate_material("x" * 20, 10)
    assert cut == "x" * 10 + "\n...(truncated)"


def test_quiz_title_uses_month_and_day():
    assert quiz_title("Biology", datetime(2026, 3, 7)) == "Biology Quiz (Mar 7)"


def test_quiz_question_accepts_both_field_names():
    by_alias = QuizQuestion.model_validate({"question": "Q", "options": ["a"], "correctIndex": 0})
    by_name = QuizQuestion(question="Q", options=["a"], correct_index=0)
    assert by_alias == by_name


def test_generator_parses_fenced_json(llm):
    llm.reply("```json\n" + json.dumps(make_raw()) + "\n```")
    questions = QuizGenerator(llm).generate_questions("material")

    assert len(questions) == 5
    assert llm.calls == [{"max_tokens": 1500, "temperature": 0.5}]


def test_generator_rejects_prose(llm):
    llm.reply("Sure! Here are some questions about biology.")
    with pytest.raises(UpstreamFormatError):
        QuizGenerator(llm).generate_questions("material")


def test_generator_maps_connection_errors(llm):
    llm.fail()
    with pytest.raises(UpstreamUnavailableError):
        QuizGenerator(llm).generate_questions("material")


@pytest.mark.parametrize("key", ["", "your_groq_api_key_here"])
def test_llm_factory_requires_api_key(key):
    factory = LLMFactory(Settings(GROQ_API_KEY=key))
    with pytest.raises(ConfigurationError):
        factory.create_llm()


def test_llm_factory_builds_client_for_configured_endpoint():
    factory = LLMFactory(Settings(GROQ_API_KEY="gsk_test", LLM_MODEL="llama-3.1-8b-instant"))
    chat = factory.create_llm(max_tokens=500, temperature=0.4)

    assert chat.model_name == "llama-3.1-8b-instant"
    assert chat.max_tokens == 500
    assert chat.max_retries == 0
