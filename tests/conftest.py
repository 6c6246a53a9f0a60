"""
Shared pytest fixtures for the evaluation and scoring tests.

This module provides:
- Factories for questions and test questions of each kind
- A small mixed-kind test used by the pipeline tests
"""

import pytest

from assess import Question, QuestionKind, TestQuestion


@pytest.fixture
def make_question():
    """Factory for Question models with sensible defaults per kind."""
    counter = iter(range(1, 10_000))

    def _factory(kind: QuestionKind, **kwargs) -> Question:
        kwargs.setdefault("id", f"q{next(counter)}")
        return Question(kind=kind, **kwargs)

    return _factory


@pytest.fixture
def make_test_question(make_question):
    """Factory for TestQuestion models wrapping a fresh Question."""
    def _factory(
        kind: QuestionKind,
        marks: float | None = 4,
        negative_marks: float | None = 1,
        section_id: str = "physics",
        subsection_id: str = "mechanics",
        order: int = 0,
        **question_kwargs,
    ) -> TestQuestion:
        return TestQuestion(
            question=make_question(kind, **question_kwargs),
            marks=marks,
            negative_marks=negative_marks,
            section_id=section_id,
            subsection_id=subsection_id,
            order=order,
        )

    return _factory


@pytest.fixture
def mixed_test(make_test_question) -> list[TestQuestion]:
    """Four questions: single choice, multi choice, numerical, single choice."""
    return [
        make_test_question(QuestionKind.SINGLE_CHOICE, correct_options=[1], order=1),
        make_test_question(QuestionKind.MULTI_CHOICE, correct_options=[0, 2], order=2),
        make_test_question(
            QuestionKind.NUMERICAL,
            correct_answer="98",
            order=3,
            section_id="chemistry",
            subsection_id="stoichiometry",
        ),
        make_test_question(QuestionKind.SINGLE_CHOICE, correct_options=[3], marks=2, negative_marks=0.5, order=4),
    ]
