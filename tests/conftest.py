import pytest

from quiz_biblico.models import Question
from quiz_biblico.session import start_session


SAMPLE_PAYLOAD = [
    {
        "question": "Q1",
        "options": ["A", "B"],
        "answer": "A",
        "explanation": "A is right.",
    },
    {
        "question": "Q2",
        "options": ["C", "D"],
        "answer": "D",
        "explanation": "D is right.",
    },
]


@pytest.fixture(autouse=True)
def no_api_url_override(monkeypatch):
    monkeypatch.delenv("QUIZ_API_URL", raising=False)


@pytest.fixture
def payload():
    return [dict(item, options=list(item["options"])) for item in SAMPLE_PAYLOAD]


@pytest.fixture
def questions(payload):
    return [Question.from_dict(item) for item in payload]


@pytest.fixture
def state(questions):
    return start_session(questions)
