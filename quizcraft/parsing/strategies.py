"""Segmentation strategies that cut raw quiz text into candidate questions."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from quizcraft.models.quiz import SegmentationConvention

# "Question 1", "**Question 2**", "### Question 3:", "Question:" at the start of a line
QUESTION_BOUNDARY = re.compile(
    r"^[ \t]*(?:#+[ \t]*)?(?:\*\*|__)?Question(?![a-z])[ \t]*\d*[ \t]*[:.]?[ \t]*(?:\*\*|__(?!_))?",
    re.IGNORECASE | re.MULTILINE,
)

PARAGRAPH_BOUNDARY = re.compile(
    r"^[ \t]*(?:#+[ \t]*)?(?:\*\*|__)?Paragraph[ \t]*\d+[ \t]*:?[ \t]*(?:\*\*|__)?",
    re.IGNORECASE | re.MULTILINE,
)

PARAGRAPH_QUESTION_START = re.compile(
    r"^(?=[ \t]*(?:\*\*)?Question[ \t]*\d*[ \t]*:)",
    re.IGNORECASE | re.MULTILINE,
)

PARAGRAPH_QUESTION = re.compile(
    r"Question[ \t]*\d*[ \t]*:\s*(?P<prompt>.*?)\s*"
    r"Options[ \t]*:\s*(?P<options>.*?)\s*"
    r"Answer[ \t]*:\s*\(?(?P<answer>[A-D])\b",
    re.IGNORECASE | re.DOTALL,
)

# Lowercase labels need a following space so "e.g. apples" keeps its text
CHOICE_LABEL = re.compile(r"^(?:[A-Z][).]\s*|[a-z][).]\s+)")
PARAGRAPH_CHOICE_SPLIT = re.compile(r"\n|(?=\b[A-D][).]\s)")

OPTIONS_LABEL = "options:"
ANSWER_LABEL = "answer:"


@dataclass
class CandidateQuestion:
    """Fields pulled out of one block, before schema validation."""

    prompt: str = ""
    choices: list[str] = field(default_factory=list)
    answer: str = ""


def strip_choice_label(text: str) -> str:
    """Remove a leading enumeration marker such as "A)" or "b." from an option."""
    return CHOICE_LABEL.sub("", text.strip(), count=1).strip()


def clean_lines(block: str) -> list[str]:
    """Split a block into trimmed, non-empty lines with bold markers removed."""
    lines = (line.replace("**", "").strip() for line in block.splitlines())
    return [line for line in lines if line]


def _starts_with(line: str, label: str) -> bool:
    return line.lower().startswith(label)


class SegmentationStrategy(ABC):
    """Finds question blocks in raw text and pulls fields out of each block."""

    convention: SegmentationConvention

    @abstractmethod
    def split_blocks(self, raw_text: str) -> list[str]:
        """Return the candidate question blocks in the order they appear."""

    @abstractmethod
    def extract(self, block: str) -> CandidateQuestion:
        """Pull prompt, choices and answer out of a single block."""


class HeadingStrategy(SegmentationStrategy):
    """Blocks separated by "Question N" headings, fields marked by labels.

    Within a block the prompt is the first line that is not an ``Options:`` or
    ``Answer:`` line, the choices are the lines between ``Options:`` and
    ``Answer:``, and the answer is whatever follows the ``Answer:`` label.
    """

    convention = SegmentationConvention.HEADING

    def split_blocks(self, raw_text: str) -> list[str]:
        fragments = (fragment.strip() for fragment in QUESTION_BOUNDARY.split(raw_text))
        return [fragment for fragment in fragments if fragment]

    def extract(self, block: str) -> CandidateQuestion:
        lines = clean_lines(block)

        prompt = next(
            (
                line
                for line in lines
                if not _starts_with(line, OPTIONS_LABEL)
                and not _starts_with(line, ANSWER_LABEL)
            ),
            "",
        )

        answer = ""
        answer_line = next((line for line in lines if _starts_with(line, ANSWER_LABEL)), None)
        if answer_line is not None:
            answer = answer_line[len(ANSWER_LABEL):].strip()

        choices: list[str] = []
        options_index = next(
            (i for i, line in enumerate(lines) if _starts_with(line, OPTIONS_LABEL)),
            None,
        )
        if options_index is not None:
            for line in lines[options_index + 1:]:
                if _starts_with(line, ANSWER_LABEL):
                    break
                choices.append(strip_choice_label(line))

        return CandidateQuestion(prompt=prompt, choices=choices, answer=answer)


class ParagraphStrategy(SegmentationStrategy):
    """Legacy layout: "Paragraph N:" sections holding four-option questions.

    Each question reads ``Question: ... Options: A) .. D) .. Answer: B`` and
    the answer is always a single letter A-D.
    """

    convention = SegmentationConvention.PARAGRAPH
    choice_count = 4

    def split_blocks(self, raw_text: str) -> list[str]:
        blocks = []
        for paragraph in PARAGRAPH_BOUNDARY.split(raw_text):
            for fragment in PARAGRAPH_QUESTION_START.split(paragraph):
                fragment = fragment.strip()
                # The reading passage itself sits in front of the first question
                if fragment and PARAGRAPH_QUESTION_START.match(fragment):
                    blocks.append(fragment)
        return blocks

    def extract(self, block: str) -> CandidateQuestion:
        match = PARAGRAPH_QUESTION.search(block.replace("**", ""))
        if match is None:
            return CandidateQuestion()

        prompt = " ".join(match.group("prompt").split())
        pieces = PARAGRAPH_CHOICE_SPLIT.split(match.group("options"))
        choices = [strip_choice_label(piece) for piece in pieces if piece.strip()]
        choices = [choice for choice in choices if choice][: self.choice_count]

        return CandidateQuestion(
            prompt=prompt,
            choices=choices,
            answer=match.group("answer").upper(),
        )


_STRATEGIES: dict[SegmentationConvention, type[SegmentationStrategy]] = {
    SegmentationConvention.HEADING: HeadingStrategy,
    SegmentationConvention.PARAGRAPH: ParagraphStrategy,
}


def get_strategy(convention: SegmentationConvention) -> SegmentationStrategy:
    """Return the strategy implementing a segmentation convention."""
    return _STRATEGIES[SegmentationConvention(convention)]()
