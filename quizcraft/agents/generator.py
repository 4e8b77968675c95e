"""Quiz Generator Agent - Asks the model for quiz text in the parser's format."""

import logging

from langchain_aws import ChatBedrock
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from quizcraft.config.settings import get_settings
from quizcraft.errors import GenerationError
from quizcraft.models.quiz import GenerationRequest, QuestionSchema

logger = logging.getLogger(__name__)

SCHEMA_DESCRIPTIONS = {
    QuestionSchema.MULTIPLE_CHOICE: "multiple-choice questions with exactly one correct option",
    QuestionSchema.MULTIPLE_CHOICE_MULTI_SELECT: "multiple-choice questions where more than one option can be correct",
    QuestionSchema.TRUE_FALSE: "true/false questions",
    QuestionSchema.FILL_IN_BLANK: "fill-in-the-blank questions, marking the blank with ____",
    QuestionSchema.SHORT_ANSWER: "short answer questions",
    QuestionSchema.FAQ: "frequently asked questions with their answers",
    QuestionSchema.HIGHER_ORDER: "higher-order thinking questions (analysis, evaluation, application) with model answers",
}


def format_instructions(request: GenerationRequest) -> str:
    """
    Describe the exact text layout the parser expects for a question type.

    Args:
        request: Generation request

    Returns:
        Layout instructions including a worked example
    """
    schema = request.question_schema

    if schema == QuestionSchema.TRUE_FALSE:
        return """Use exactly this layout for every question:

Question 1
<statement>
Options:
A) True
B) False
Answer: <True or False>"""

    if schema.has_choices:
        letters = [chr(65 + i) for i in range(request.option_count)]
        option_lines = "\n".join(f"{letter}) <option>" for letter in letters)
        answer_hint = (
            "<all correct option letters, comma separated>"
            if schema == QuestionSchema.MULTIPLE_CHOICE_MULTI_SELECT
            else "<text of the correct option>"
        )
        return f"""Use exactly this layout for every question, with exactly {request.option_count} options:

Question 1
<question text on one line>
Options:
{option_lines}
Answer: {answer_hint}"""

    return """Use exactly this layout for every question:

Question 1
<question text on one line>
Answer: <answer on one line>"""


def build_generation_messages(source_text: str, request: GenerationRequest) -> list:
    """Build the system and user messages for a generation call."""
    system_prompt = f"""You are an expert teacher who writes quizzes from study material.

Requirements:
- Only use facts stated in the provided text
- Questions should be clear and unambiguous
- Match the requested difficulty level
- Do not add commentary before or after the questions

{format_instructions(request)}"""

    user_prompt = f"""Write {request.num_questions} {SCHEMA_DESCRIPTIONS[request.question_schema]}.

Difficulty level: {request.difficulty.value}

Study material:
\"\"\"
{source_text}
\"\"\""""

    return [
        SystemMessage(content=system_prompt),
        HumanMessage(content=user_prompt),
    ]


def _message_text(content) -> str:
    # Anthropic models may answer with a list of content blocks
    if isinstance(content, str):
        return content
    return "".join(
        part.get("text", "") if isinstance(part, dict) else str(part) for part in content
    )


def generate_quiz_text(
    source_text: str,
    request: GenerationRequest,
    llm: BaseChatModel | None = None,
) -> str:
    """
    Generate raw quiz text from study material.

    Args:
        source_text: Text the quiz is generated from
        request: Number of questions, difficulty, option count and question type
        llm: Chat model to use, defaults to the configured Bedrock model

    Returns:
        Raw quiz text for the parser

    Raises:
        ValueError: If the source text is empty
        GenerationError: If the model call fails or returns nothing
    """
    if not source_text or not source_text.strip():
        raise ValueError("Please provide some text to generate a quiz from.")

    if llm is None:
        settings = get_settings()
        llm = ChatBedrock(
            model=settings.model_name,
            temperature=settings.generation_temperature,
        )

    messages = build_generation_messages(source_text, request)

    try:
        response = llm.invoke(messages)
    except Exception as e:
        logger.error("Quiz generation failed: %s", e)
        raise GenerationError(f"An error occurred while generating the quiz: {e}") from e

    quiz_text = _message_text(response.content)
    if not quiz_text.strip():
        raise GenerationError("No quiz generated from the text.")

    logger.debug("Model returned %d characters of quiz text", len(quiz_text))
    return quiz_text
