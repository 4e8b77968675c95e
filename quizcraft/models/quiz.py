"""Pydantic models for parsed quiz data structures."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator


class QuestionSchema(str, Enum):
    """Question types a block of quiz text can be parsed as."""

    MULTIPLE_CHOICE = "multiple_choice"
    MULTIPLE_CHOICE_MULTI_SELECT = "multiple_choice_multi_select"
    TRUE_FALSE = "true_false"
    FILL_IN_BLANK = "fill_in_blank"
    SHORT_ANSWER = "short_answer"
    FAQ = "faq"
    HIGHER_ORDER = "higher_order"

    @property
    def has_choices(self) -> bool:
        """Whether questions of this type carry enumerated choices."""
        return self in {
            QuestionSchema.MULTIPLE_CHOICE,
            QuestionSchema.MULTIPLE_CHOICE_MULTI_SELECT,
            QuestionSchema.TRUE_FALSE,
        }


class SegmentationConvention(str, Enum):
    """How raw quiz text is cut into question blocks."""

    HEADING = "heading"
    PARAGRAPH = "paragraph"


class QuestionDifficulty(str, Enum):
    """Question difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class PresentationMode(str, Enum):
    """Which parts of a question are shown on screen and exported."""

    PROMPTS_AND_ANSWERS = "prompts_and_answers"
    PROMPTS_ONLY = "prompts_only"
    ANSWERS_ONLY = "answers_only"


class QuestionRecord(BaseModel):
    """A single question recovered from quiz text."""

    prompt: str = Field(..., min_length=1, description="The question text")
    choices: list[str] | None = Field(
        None,
        description="Enumerated options, only for choice-based question types",
    )
    correct_answer: str = Field(
        "",
        description="Raw answer text (a choice letter, a choice value or free text)",
    )

    @field_validator("prompt")
    @classmethod
    def validate_prompt(cls, v: str) -> str:
        """Reject prompts made only of whitespace."""
        if not v.strip():
            raise ValueError("Prompt cannot be empty")
        return v

    model_config = {
        "json_schema_extra": {
            "example": {
                "prompt": "What is the capital of France?",
                "choices": ["Paris", "Lyon", "Nice", "Marseille"],
                "correct_answer": "Paris",
            }
        }
    }


class EditableQuestion(BaseModel):
    """View-model wrapper carrying the transient editing flag of a question."""

    record: QuestionRecord
    is_being_edited: bool = False


class PresentedQuestion(BaseModel):
    """A question filtered for display or export; stripped fields are None."""

    prompt: str | None = None
    choices: list[str] | None = None
    correct_answer: str | None = None


class ParserConfig(BaseModel):
    """Settings for a single parsing pass."""

    option_count: int = Field(
        default=4,
        ge=2,
        description="Required number of choices for multiple choice questions",
    )
    question_schema: QuestionSchema = Field(
        default=QuestionSchema.MULTIPLE_CHOICE,
        description="Question type every block is validated against",
    )
    convention: SegmentationConvention = Field(
        default=SegmentationConvention.HEADING,
        description="Segmentation convention used to find question blocks",
    )

    @model_validator(mode="after")
    def validate_convention(self) -> "ParserConfig":
        """The paragraph convention only knows four-option multiple choice."""
        if (
            self.convention == SegmentationConvention.PARAGRAPH
            and self.question_schema != QuestionSchema.MULTIPLE_CHOICE
        ):
            raise ValueError(
                "The paragraph convention only supports multiple choice questions"
            )
        return self


class ParseResult(BaseModel):
    """Accepted records plus the blocks that could not be turned into records."""

    records: list[QuestionRecord] = Field(default_factory=list)
    rejected_blocks: list[str] = Field(default_factory=list)

    @property
    def accepted_count(self) -> int:
        """Number of blocks that became records."""
        return len(self.records)

    @property
    def rejected_count(self) -> int:
        """Number of blocks dropped during extraction or validation."""
        return len(self.rejected_blocks)

    @property
    def blocks_seen(self) -> int:
        """Total number of candidate question blocks found in the text."""
        return self.accepted_count + self.rejected_count

    @property
    def is_empty_input(self) -> bool:
        """True when the text held no question blocks at all."""
        return self.blocks_seen == 0


class GenerationRequest(BaseModel):
    """Parameters sent to the quiz generator along with the source text."""

    num_questions: int = Field(
        default=10,
        ge=1,
        le=50,
        description="Number of questions to generate",
    )
    difficulty: QuestionDifficulty = Field(
        default=QuestionDifficulty.MEDIUM,
        description="Overall difficulty level",
    )
    option_count: int = Field(
        default=4,
        ge=2,
        le=26,
        description="Options per multiple choice question",
    )
    question_schema: QuestionSchema = Field(
        default=QuestionSchema.MULTIPLE_CHOICE,
        description="Question type to generate",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "num_questions": 10,
                "difficulty": "medium",
                "option_count": 4,
                "question_schema": "multiple_choice",
            }
        }
    }
