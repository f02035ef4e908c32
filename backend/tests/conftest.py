"""Shared test configuration, fakes and pytest markers."""

import json

import pytest

from services.errors import GenerationError

SAMPLE_RESUME = """Jane Doe
jane.doe@email.com | (555) 123-4567

Summary
Backend engineer with 6 years of experience building Python services.

Work Experience
Senior Software Engineer | TechCorp | 2021 - Present
• Built REST APIs serving 1M requests/day
• Led team of 5 engineers

Education
B.S. Computer Science | State University | 2017

Technical Skills
Python, FastAPI, PostgreSQL, Docker, AWS
"""

QUESTIONS_REPLY = json.dumps({
    "technicalQuestions": [f"How did you scale API {i}?" for i in range(1, 6)],
    "behavioralQuestions": [f"Tell me about a time you led project {i}." for i in range(1, 6)],
})

SCORING_REPLY = """Here is my evaluation:
```json
{"score": 88, "feedback": "Clear and specific.", "strengths": ["Concrete metrics"],
 "improvements": ["Mention trade-offs"], "ratingExplanation": "Good depth"}
```"""

SAMPLE_ANSWER_REPLY = """SAMPLE ANSWER:
I would start by profiling the slowest endpoints.

DETAILED EXPLANATION:
• Add caching
• Batch database queries
"""

FOLLOW_UP_REPLY = "  How would you invalidate that cache?  "

# Markers that identify each prompt template
DEFAULT_REPLIES = (
    ("generate personalized interview questions", QUESTIONS_REPLY),
    ("strict technical interview evaluator", SCORING_REPLY),
    ("COMPLETE SAMPLE ANSWER", SAMPLE_ANSWER_REPLY),
    ("follow-up question", FOLLOW_UP_REPLY),
)


class FakeGenerationClient:
    """Answers prompts from a marker table instead of calling Gemini."""

    def __init__(self, replies=DEFAULT_REPLIES, error: GenerationError | None = None) -> None:
        self.replies = replies
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt, attachment=None):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        for marker, reply in self.replies:
            if marker in prompt:
                return reply
        return ""


@pytest.fixture
def fake_client():
    return FakeGenerationClient()


@pytest.fixture
def failing_client():
    return FakeGenerationClient(error=GenerationError(503, "service unavailable"))
