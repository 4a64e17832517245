"""Text cleanup, segmentation and scoring helpers."""

import re
import uuid

MIN_PARAGRAPH_LENGTH = 10
LONG_TEXT_LENGTH = 100
SHORT_TEXT_LENGTH = 20
LONG_TEXT_BONUS = 0.05
SHORT_TEXT_PENALTY = 0.1

_LINE_ENDINGS = re.compile(r'\r\n?')
_HORIZONTAL_WHITESPACE = re.compile(r'[^\S\n]+')
_SPACE_AROUND_BREAK = re.compile(r' ?\n ?')
_EXCESS_BREAKS = re.compile(r'\n{3,}')
_PARAGRAPH_BREAK = re.compile(r'\n{2,}')


def generate_id() -> str:
    """Generate a unique identifier for a content unit."""
    return str(uuid.uuid4())


def normalize_text(text: str) -> str:
    """
    Clean up raw decoder text.

    Line endings become ``\\n``, tabs and other horizontal whitespace runs
    become a single space, whitespace hugging a line break is removed and
    blank-line runs shrink to one paragraph break. The result is trimmed.
    """
    text = _LINE_ENDINGS.sub('\n', text)
    text = text.replace('\t', ' ')
    text = _HORIZONTAL_WHITESPACE.sub(' ', text)
    text = _SPACE_AROUND_BREAK.sub('\n', text)
    text = _EXCESS_BREAKS.sub('\n\n', text)
    return text.strip()


def split_into_paragraphs(text: str) -> list[str]:
    """Split text on runs of two or more line breaks, dropping empty pieces."""
    paragraphs = (piece.strip() for piece in _PARAGRAPH_BREAK.split(text))
    return [p for p in paragraphs if p]


def calculate_confidence(text: str, score: float) -> float:
    """
    Adjust a classifier score for the length of the classified text.

    Long text gets a small bonus, very short text a penalty. The result
    is clamped to [0, 1] and rounded to two decimals.
    """
    confidence = score

    if len(text) > LONG_TEXT_LENGTH:
        confidence = min(1.0, confidence + LONG_TEXT_BONUS)

    if len(text) < SHORT_TEXT_LENGTH:
        confidence = max(0.0, confidence - SHORT_TEXT_PENALTY)

    confidence = min(1.0, max(0.0, confidence))
    return round(confidence, 2)
