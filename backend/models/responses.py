from pydantic import BaseModel

from models.documents import ClassificationResult
from models.interview import AnswerFeedback, FormattedText, SessionState


class ExtractionResponse(BaseModel):
    file_name: str
    text: str
    classification: ClassificationResult


class SessionResponse(BaseModel):
    state: SessionState
    current_question: str | None = None


class AnswerResponse(BaseModel):
    key: str
    feedback: AnswerFeedback
    suggestion: FormattedText


class FollowUpResponse(BaseModel):
    key: str
    follow_up: str
