"""Interview entities produced by the parsing pipeline and held by the session store."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from models.documents import ClassificationResult

QuestionType = Literal["technical", "behavioral"]
Difficulty = Literal["beginner", "medium", "advanced"]
ScoreSource = Literal["parsed", "heuristic", "default"]

QUESTIONS_PER_CATEGORY = 5


def answer_key(question_type: str, index: int) -> str:
    """Session mapping key for one question, e.g. ``technical-2``."""
    return f"{question_type}-{index}"


class QuestionSet(BaseModel):
    technical: list[str] = []
    behavioral: list[str] = []

    def for_type(self, question_type: str) -> list[str]:
        return self.technical if question_type == "technical" else self.behavioral


class AnswerFeedback(BaseModel):
    score: int = 75  # 0-100
    feedback: str = ""
    strengths: list[str] = []
    improvements: list[str] = []
    explanation: str = ""
    # Where the score came from: parsed JSON, keyword heuristic, or hardcoded default
    score_source: ScoreSource = "parsed"


class Section(BaseModel):
    title: str = ""
    points: list[str] = []
    is_emphasized: bool = False


class FormattedText(BaseModel):
    is_structured: bool = False
    content: str = ""
    sections: list[Section] = []


class TranscriptFragment(BaseModel):
    text: str
    is_final: bool = False


class SessionState(BaseModel):
    """Immutable snapshot of one interview practice session."""

    model_config = ConfigDict(frozen=True)

    resume_file: str | None = None
    resume_text: str = ""
    classification: ClassificationResult | None = None
    job_description: str = ""
    difficulty_level: Difficulty = "medium"
    selected_level: Difficulty | None = None
    interview_mode: Literal["classic", "interactive"] | None = None
    current_type: QuestionType = "technical"
    current_index: int = 0
    questions: QuestionSet = QuestionSet()
    answers: dict[str, str] = {}
    feedback: dict[str, AnswerFeedback] = {}
    suggestions: dict[str, FormattedText] = {}
    follow_ups: dict[str, str] = {}


class PerformanceStats(BaseModel):
    total_questions: int = 0
    answered_questions: int = 0
    average_score: int = 0
    completion_rate: int = 0
    avg_technical_score: int = 0
    avg_behavioral_score: int = 0
    technical_answered: int = 0
    behavioral_answered: int = 0
