"""Shared test fixtures and configuration for pytest."""

import pytest
from langchain_core.messages import AIMessage

from quizcraft.models.quiz import (
    EditableQuestion,
    GenerationRequest,
    QuestionDifficulty,
    QuestionRecord,
    QuestionSchema,
)

CAPITAL_OF_FRANCE = """Question 1
What is the capital of France?
Options:
A) Paris
B) Lyon
C) Nice
D) Marseille
Answer: Paris
"""

THREE_QUESTIONS = """**Question 1**
What is 2 + 2?
Options:
A) 3
B) 4
C) 5
D) 6
Answer: 4

**Question 2**
Which planet is known as the red planet?
Options:
A) Venus
B) Mars
C) Jupiter
D) Saturn
**Answer:** Mars

**Question 3**
Who wrote '1984'?
Options:
A) Aldous Huxley
B) George Orwell
C) Ray Bradbury
D) Philip K. Dick
Answer: George Orwell
"""


class FakeChatModel:
    """Stand-in chat model returning canned responses in order."""

    def __init__(self, responses: list, error: Exception | None = None):
        self.responses = list(responses)
        self.error = error
        self.calls: list = []

    def invoke(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.responses.pop(0))


@pytest.fixture
def capital_text() -> str:
    """Single multiple choice question in the heading layout."""
    return CAPITAL_OF_FRANCE


@pytest.fixture
def three_question_text() -> str:
    """Three multiple choice questions with bold headings."""
    return THREE_QUESTIONS


@pytest.fixture
def sample_records() -> list[QuestionRecord]:
    """Create a list of sample question records for testing."""
    return [
        QuestionRecord(
            prompt="What is the capital of France?",
            choices=["Paris", "Lyon", "Nice", "Marseille"],
            correct_answer="Paris",
        ),
        QuestionRecord(
            prompt="The sky is blue.",
            choices=["True", "False"],
            correct_answer="True",
        ),
        QuestionRecord(
            prompt="Define osmosis.",
            choices=None,
            correct_answer="Movement of water across a semi-permeable membrane.",
        ),
    ]


@pytest.fixture
def editable_questions(sample_records: list[QuestionRecord]) -> list[EditableQuestion]:
    """Wrap the sample records for editing."""
    return [EditableQuestion(record=record) for record in sample_records]


@pytest.fixture
def sample_request() -> GenerationRequest:
    """Create a small generation request."""
    return GenerationRequest(
        num_questions=3,
        difficulty=QuestionDifficulty.EASY,
        option_count=4,
        question_schema=QuestionSchema.MULTIPLE_CHOICE,
    )


@pytest.fixture
def fake_llm_class() -> type[FakeChatModel]:
    """Factory for canned chat models."""
    return FakeChatModel
