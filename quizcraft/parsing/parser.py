"""Quiz text parser - turns loosely formatted model output into question records."""

import logging

from quizcraft.models.quiz import (
    ParserConfig,
    ParseResult,
    QuestionRecord,
    QuestionSchema,
    SegmentationConvention,
)
from quizcraft.parsing.strategies import get_strategy
from quizcraft.parsing.validation import accepts, to_record

logger = logging.getLogger(__name__)


class QuizTextParser:
    """
    Parse raw quiz text into validated question records.

    Malformed or incomplete blocks never raise; they are collected in
    ``ParseResult.rejected_blocks`` so callers can report how many questions
    could not be recognised.
    """

    def __init__(self, config: ParserConfig | None = None):
        self.config = config or ParserConfig()
        self.strategy = get_strategy(self.config.convention)

    def parse(self, raw_text: str) -> ParseResult:
        """
        Parse raw quiz text.

        Args:
            raw_text: Unparsed model output, may be empty

        Returns:
            ParseResult with accepted records in input order and rejected blocks
        """
        result = ParseResult()
        if not raw_text or not raw_text.strip():
            return result

        for block in self.strategy.split_blocks(raw_text):
            candidate = self.strategy.extract(block)
            if accepts(candidate, self.config):
                result.records.append(to_record(candidate, self.config))
            else:
                logger.debug(
                    "Dropping block that is not a valid %s question: %r",
                    self.config.question_schema.value,
                    block[:80],
                )
                result.rejected_blocks.append(block)

        if result.rejected_count:
            logger.info(
                "%d of %d question blocks could not be parsed",
                result.rejected_count,
                result.blocks_seen,
            )
        return result


def parse_quiz_text(
    raw_text: str,
    option_count: int = 4,
    question_schema: QuestionSchema = QuestionSchema.MULTIPLE_CHOICE,
    convention: SegmentationConvention = SegmentationConvention.HEADING,
) -> list[QuestionRecord]:
    """
    Parse raw quiz text and return only the accepted questions.

    Args:
        raw_text: Unparsed model output
        option_count: Required choices per multiple choice question
        question_schema: Question type every block is validated against
        convention: Segmentation convention of the text

    Returns:
        List of question records in the order they appear in the text
    """
    config = ParserConfig(
        option_count=option_count,
        question_schema=question_schema,
        convention=convention,
    )
    return QuizTextParser(config).parse(raw_text).records
