"""
Pytest configuration and fixtures.

Provides shared fixtures for testing the scoring API.
"""

import pytest
from typing import Any, Dict

from fastapi.testclient import TestClient

from assess_api.core.config import Settings
from assess_api.main import app


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client"""
    return TestClient(app)


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a small submission limit"""
    return Settings(MAX_QUESTIONS_PER_SUBMISSION=3, NUMERIC_TOLERANCE=1e-4)


@pytest.fixture
def submission_payload() -> Dict[str, Any]:
    """Three-question submission as sent by a client"""
    return {
        "questions": [
            {
                "question": {"id": "q-single", "kind": "mcq_single", "correct_options": [2], "marks": 1},
                "marks": 4,
                "negative_marks": 1,
                "section_id": "physics",
                "subsection_id": "kinematics",
                "order": 1,
            },
            {
                "question": {"id": "q-multi", "kind": "mcq_multiple", "correct_options": [0, 2]},
                "marks": 4,
                "negative_marks": 2,
                "section_id": "physics",
                "subsection_id": "optics",
                "order": 2,
            },
            {
                "question": {"id": "q-num", "kind": "numerical", "correct_answer": "98"},
                "marks": 4,
                "negative_marks": 0,
                "section_id": "chemistry",
                "subsection_id": "",
                "order": 3,
            },
        ],
        "answers": {"0": 1, "1": [2, 0]},
    }
