"""Heuristic resume detection.

Each signal is an independent regex rule with a weight. All rules are
evaluated against the full text; the summed weight decides acceptance.
"""

import re
from typing import NamedTuple

from models.documents import ClassificationResult

MIN_RESUME_LENGTH = 100
ACCEPT_THRESHOLD = 5

REJECTION_MESSAGE = (
    "The uploaded file does not appear to be a resume. "
    "Please upload a valid resume document."
)


class Signal(NamedTuple):
    name: str
    pattern: re.Pattern
    weight: int


RESUME_SIGNALS: tuple[Signal, ...] = (
    Signal("experience", re.compile(r"experience|work history|employment", re.IGNORECASE), 2),
    Signal("education", re.compile(r"education|academic", re.IGNORECASE), 2),
    Signal("skills", re.compile(r"skills|technical|programming", re.IGNORECASE), 1),
    Signal("dates", re.compile(r"\b(?:19\d{2}|20\d{2}|present|current)\b", re.IGNORECASE), 1),
    Signal("bullets", re.compile(r"•|-|\*|\d\."), 1),
    Signal(
        "job_titles",
        re.compile(
            r"\b(?:intern|developer|engineer|analyst|manager|director|lead|senior|junior)\b",
            re.IGNORECASE,
        ),
        1,
    ),
)

MAX_SCORE = sum(s.weight for s in RESUME_SIGNALS)


def evaluate_signals(text: str) -> dict[str, bool]:
    """Return which signals fire for the text. Every rule is always evaluated."""
    return {signal.name: bool(signal.pattern.search(text)) for signal in RESUME_SIGNALS}


def classify(text: str) -> ClassificationResult:
    """Score text for resume-likeness (0-8) and accept at ACCEPT_THRESHOLD or above."""
    if not text or len(text) < MIN_RESUME_LENGTH:
        return ClassificationResult(accepted=False, score=0, signals={})

    signals = evaluate_signals(text)
    score = sum(s.weight for s in RESUME_SIGNALS if signals[s.name])
    return ClassificationResult(accepted=score >= ACCEPT_THRESHOLD, score=score, signals=signals)
