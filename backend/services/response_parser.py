"""Locate and parse the JSON payload embedded in noisy generator output.

Generator replies may be wrapped in Markdown fences, surrounded by prose or
truncated. Every parser here returns a ParseResult and never raises: the
caller sees either the parsed value or its own fallback, tagged with why.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from models.interview import QUESTIONS_PER_CATEGORY, AnswerFeedback, QuestionSet

logger = logging.getLogger(__name__)

T = TypeVar("T")

_FENCE_RE = re.compile(r"```[A-Za-z0-9_-]*")

DEFAULT_SCORE = 75

# First match wins; "very good" must be tested before "good".
SENTIMENT_SCORES: tuple[tuple[tuple[str, ...], int], ...] = (
    (("excellent", "outstanding", "perfect"), 95),
    (("very good", "great"), 85),
    (("good", "solid"), 78),
    (("average", "adequate"), 70),
    (("below average", "needs improvement"), 60),
    (("poor", "weak"), 50),
)


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    value: T
    source: Literal["parsed", "heuristic", "fallback"] = "parsed"
    reason: str | None = None

    @property
    def is_fallback(self) -> bool:
        return self.source != "parsed"


def strip_code_fences(text: str) -> str:
    """Remove every ``` / ```lang fence marker, keeping the enclosed text."""
    return _FENCE_RE.sub("", text).strip()


def isolate_json_object(text: str) -> str | None:
    """Keep the span from the first '{' to the last '}', or None if there is none."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return None
    return text[start : end + 1]


def clamp_score(value: Any, default: int = DEFAULT_SCORE) -> int:
    """Coerce to int and clamp to 0-100. Non-numeric values become ``default``."""
    if isinstance(value, bool):
        return default
    try:
        score = int(round(float(value)))
    except (TypeError, ValueError, OverflowError):
        return default
    return max(0, min(100, score))


def extract_payload(raw_text: str | None, fallback: T) -> ParseResult[dict | T]:
    """Parse the JSON object inside ``raw_text``; return ``fallback`` untouched on failure."""
    if not raw_text:
        return ParseResult(fallback, "fallback", "empty response")

    block = isolate_json_object(strip_code_fences(raw_text))
    if block is None:
        return ParseResult(fallback, "fallback", "no JSON object found")

    try:
        data = json.loads(block)
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse generator response as JSON: %s", e)
        return ParseResult(fallback, "fallback", f"invalid JSON: {e.msg}")

    if not isinstance(data, dict):
        return ParseResult(fallback, "fallback", "JSON payload is not an object")
    return ParseResult(data, "parsed")


def _to_str_list(x: Any) -> list[str]:
    """Convert None, str, or list to list[str], discarding blank entries."""
    if x is None:
        return []
    if isinstance(x, list):
        out = []
        for item in x:
            if isinstance(item, str):
                item = item.strip()
                if item:
                    out.append(item)
        return out
    if isinstance(x, str):
        s = x.strip()
        return [s] if s else []
    return []


def placeholder_question(category: str, difficulty: str) -> str:
    if category == "technical":
        return f"Technical question about {difficulty} concepts"
    return "Behavioral question about teamwork and collaboration"


def pad_questions(questions: list[str], category: str, difficulty: str) -> list[str]:
    """Truncate or right-pad to exactly QUESTIONS_PER_CATEGORY entries."""
    padded = list(questions[:QUESTIONS_PER_CATEGORY])
    while len(padded) < QUESTIONS_PER_CATEGORY:
        padded.append(placeholder_question(category, difficulty))
    return padded


def parse_question_set(
    raw_text: str | None, difficulty: str, fallback: QuestionSet
) -> ParseResult[QuestionSet]:
    result = extract_payload(raw_text, fallback)
    if result.is_fallback:
        return result

    data = result.value
    technical = data.get("technicalQuestions")
    behavioral = data.get("behavioralQuestions")
    if not isinstance(technical, list) or not isinstance(behavioral, list):
        logger.warning("Question payload missing technicalQuestions/behavioralQuestions arrays")
        return ParseResult(fallback, "fallback", "missing question arrays")

    return ParseResult(
        QuestionSet(
            technical=pad_questions(_to_str_list(technical), "technical", difficulty),
            behavioral=pad_questions(_to_str_list(behavioral), "behavioral", difficulty),
        )
    )


def heuristic_score(raw_text: str) -> int:
    """Score free text by the first qualitative term found, in fixed priority order."""
    text = raw_text.lower()
    for terms, score in SENTIMENT_SCORES:
        if any(term in text for term in terms):
            return clamp_score(score)
    return DEFAULT_SCORE


def _heuristic_feedback(raw_text: str) -> AnswerFeedback:
    excerpt = raw_text[:200] + "..." if len(raw_text) > 200 else raw_text
    return AnswerFeedback(
        score=heuristic_score(raw_text),
        feedback="Your answer has been evaluated. " + excerpt,
        strengths=["Answer submitted", "Relevant to question"],
        improvements=["Review feedback above for specific improvements"],
        explanation="Score determined based on answer quality analysis",
        score_source="heuristic",
    )


def parse_answer_feedback(raw_text: str | None) -> ParseResult[AnswerFeedback]:
    """Parse a scoring reply, falling back to the keyword heuristic on malformed JSON."""
    result = extract_payload(raw_text, None)
    if result.is_fallback:
        return ParseResult(_heuristic_feedback(raw_text or ""), "heuristic", result.reason)

    data = result.value
    strengths = _to_str_list(data.get("strengths"))
    improvements = _to_str_list(data.get("improvements"))
    feedback = data.get("feedback")
    explanation = data.get("ratingExplanation", data.get("explanation"))

    return ParseResult(
        AnswerFeedback(
            score=clamp_score(data.get("score")),
            feedback=feedback.strip()
            if isinstance(feedback, str) and feedback.strip()
            else "Your answer shows understanding. Consider adding more specific examples.",
            strengths=strengths or ["Clear communication"],
            improvements=improvements or ["Add more specific examples"],
            explanation=explanation.strip()
            if isinstance(explanation, str) and explanation.strip()
            else "Based on general answer quality",
            score_source="parsed",
        )
    )
