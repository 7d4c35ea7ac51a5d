"""
Boundary Detection Module
=========================
Finds sentence boundaries inside a transcript segment's text.

Boundary Types:
- Sentence endings (full-width and half-width period, exclamation mark,
  question mark, semicolon)

Parts are sliced with the delimiter included, so a punctuation mark always
stays with the text before it and never opens a new part.
"""

from dataclasses import dataclass
from typing import List
import re


TERMINAL_PUNCTUATION = "。．.！!？?；;"

# A run of terminal marks ("?!", "。。") is one boundary
BOUNDARY_PATTERN = re.compile("[" + re.escape(TERMINAL_PUNCTUATION) + "]+")


@dataclass(frozen=True)
class SentencePart:
    """
    One sentence-sized slice of a segment's text.

    Attributes:
        text: Trimmed part text, terminal punctuation included
        start: Offset of the slice in the source text
        end: Offset one past the slice (after its punctuation)
    """
    text: str
    start: int
    end: int

    def __len__(self) -> int:
        return len(self.text)


def has_terminal_punctuation(text: str) -> bool:
    """True if text contains at least one sentence-terminal mark."""
    return BOUNDARY_PATTERN.search(text) is not None


def split_sentence_parts(text: str) -> List[SentencePart]:
    """
    Partition text at terminal-punctuation boundaries.

    Each part runs from the end of the previous boundary to the end of the
    next one. Text after the last boundary forms a final part without
    punctuation. Parts whose body (the text before the punctuation) is empty
    or whitespace-only are dropped together with their punctuation.

    Args:
        text: Segment text, normally already trimmed

    Returns:
        Ordered list of non-empty SentencePart objects
    """
    parts = []
    prev_end = 0

    for match in BOUNDARY_PATTERN.finditer(text):
        body = text[prev_end:match.start()]
        if body.strip():
            parts.append(SentencePart(
                text=body.strip() + match.group(),
                start=prev_end,
                end=match.end(),
            ))
        prev_end = match.end()

    tail = text[prev_end:]
    if tail.strip():
        parts.append(SentencePart(text=tail.strip(), start=prev_end, end=len(text)))

    return parts
