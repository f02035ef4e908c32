import pytest

from models.interview import QuestionSet
from services.response_parser import (
    clamp_score,
    extract_payload,
    heuristic_score,
    isolate_json_object,
    pad_questions,
    parse_answer_feedback,
    parse_question_set,
    strip_code_fences,
)

FALLBACK = QuestionSet(technical=["t"] * 5, behavioral=["b"] * 5)


def test_fenced_json_matches_bare_json():
    fenced = extract_payload('```json {"a":1} ```', fallback=None)
    bare = extract_payload('{"a":1}', fallback=None)
    assert fenced.value == bare.value == {"a": 1}
    assert fenced.source == "parsed"


def test_fence_without_language_tag():
    assert extract_payload('```\n{"a": 2}\n```', None).value == {"a": 2}


def test_surrounding_prose_discarded():
    raw = 'Sure! Here you go: {"a": {"b": 3}} Hope that helps.'
    assert extract_payload(raw, None).value == {"a": {"b": 3}}


@pytest.mark.parametrize("raw", ['{"a": 1', "no json here", "", None, "} backwards {", "[1, 2]"])
def test_invalid_payload_returns_fallback_unchanged(raw):
    sentinel = object()
    result = extract_payload(raw, sentinel)
    assert result.value is sentinel
    assert result.source == "fallback"
    assert result.reason


def test_strip_and_isolate_helpers():
    assert strip_code_fences("```python\nx = 1\n```") == "x = 1"
    assert isolate_json_object("pre {x} mid {y} post") == "{x} mid {y}"
    assert isolate_json_object("nothing") is None


@pytest.mark.parametrize("value, expected", [(-5, 0), (150, 100), (42, 42), (0, 0), (100, 100), (87.6, 88), ("64", 64)])
def test_clamp_score(value, expected):
    assert clamp_score(value) == expected


@pytest.mark.parametrize("value", [None, "abc", True, [], float("inf")])
def test_clamp_score_non_numeric_uses_default(value):
    assert clamp_score(value) == 75


@pytest.mark.parametrize("n", range(8))
def test_pad_questions_always_five(n):
    questions = [f"q{i}" for i in range(n)]
    padded = pad_questions(questions, "technical", "advanced")
    assert len(padded) == 5
    assert padded[: min(n, 5)] == questions[:5]


def test_pad_questions_placeholders_reference_category():
    assert pad_questions([], "technical", "beginner")[0] == "Technical question about beginner concepts"
    assert "Behavioral" in pad_questions([], "behavioral", "beginner")[0]


def test_parse_question_set_pads_and_truncates():
    raw = '```json\n{"technicalQuestions": ["a", "b"], "behavioralQuestions": ["1","2","3","4","5","6","7"]}\n```'
    result = parse_question_set(raw, "medium", FALLBACK)
    assert result.source == "parsed"
    assert result.value.technical[:2] == ["a", "b"]
    assert result.value.technical[2] == "Technical question about medium concepts"
    assert result.value.behavioral == ["1", "2", "3", "4", "5"]


def test_parse_question_set_drops_non_string_entries():
    raw = '{"technicalQuestions": ["a", 3, "  ", null], "behavioralQuestions": []}'
    result = parse_question_set(raw, "medium", FALLBACK)
    assert result.value.technical[0] == "a"
    assert len(result.value.technical) == 5
    assert len(result.value.behavioral) == 5


def test_parse_question_set_missing_array_uses_fallback():
    result = parse_question_set('{"technicalQuestions": ["a"]}', "medium", FALLBACK)
    assert result.value is FALLBACK
    assert result.is_fallback


def test_parse_question_set_truncated_json_uses_fallback():
    result = parse_question_set('{"technicalQuestions": ["a", "b"', "medium", FALLBACK)
    assert result.value is FALLBACK


def test_parse_answer_feedback_valid():
    raw = '{"score": 130, "feedback": "Nice", "strengths": ["x"], "improvements": ["y"], "ratingExplanation": "why"}'
    result = parse_answer_feedback(raw)
    fb = result.value
    assert fb.score == 100
    assert fb.feedback == "Nice"
    assert fb.strengths == ["x"]
    assert fb.improvements == ["y"]
    assert fb.explanation == "why"
    assert fb.score_source == "parsed"


def test_parse_answer_feedback_fills_missing_fields():
    fb = parse_answer_feedback('{"score": -20}').value
    assert fb.score == 0
    assert fb.strengths == ["Clear communication"]
    assert fb.improvements == ["Add more specific examples"]
    assert fb.feedback
    assert fb.explanation


def test_parse_answer_feedback_missing_score_defaults():
    assert parse_answer_feedback('{"feedback": "ok"}').value.score == 75


def test_parse_answer_feedback_heuristic_on_malformed():
    raw = "This answer was excellent, but I cannot produce JSON right now"
    result = parse_answer_feedback(raw)
    assert result.source == "heuristic"
    assert result.value.score == 95
    assert result.value.score_source == "heuristic"
    assert result.value.feedback.startswith("Your answer has been evaluated. ")


def test_heuristic_feedback_excerpt_truncated():
    raw = "weak " * 100
    fb = parse_answer_feedback(raw).value
    assert fb.feedback.endswith("...")
    assert len(fb.feedback) == len("Your answer has been evaluated. ") + 203


@pytest.mark.parametrize("text, expected", [
    ("An OUTSTANDING response", 95),
    ("very good structure", 85),
    ("Great examples", 85),
    ("a solid attempt", 78),
    ("adequate coverage", 70),
    ("needs improvement overall", 60),
    ("poor structure", 50),
    ("no qualitative words", 75),
    # fixed priority: "average" is checked before "below average"
    ("below average depth", 70),
    # "good" wins over "weak"
    ("good start but weak ending", 78),
])
def test_heuristic_score_priority(text, expected):
    assert heuristic_score(text) == expected
