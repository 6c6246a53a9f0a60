"""
Per-question scoring records.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from assess.answers import StudentAnswer


class Response(BaseModel):
    """
    Scored response for one question of a submission.

    Created once at scoring time and never modified.

    Attributes:
        question_index: Zero-based position in the submitted test
        question_id: Question bank identifier
        section_id: Section the question belongs to in this test
        subsection_id: Subsection the question belongs to in this test
        student_answer: The submitted answer, ``Unanswered`` when absent
        correct_answer: Correct option indices, or the numeric answer string
        is_correct: Whether the answer was judged correct
        marks_obtained: Signed marks; 0 when unanswered
    """

    model_config = ConfigDict(frozen=True)

    question_index: int
    question_id: str
    section_id: str = ""
    subsection_id: str = ""
    student_answer: StudentAnswer
    correct_answer: list[int] | str | None = None
    is_correct: bool = False
    marks_obtained: float = 0.0

    @property
    def is_answered(self) -> bool:
        return self.student_answer.is_answered
