from pydantic import BaseModel, Field

from models.interview import QuestionType


class AnswerRequest(BaseModel):
    question_type: QuestionType
    index: int = Field(..., ge=0, le=4)
    answer: str = Field(..., min_length=1, max_length=10000, description="Candidate answer text")


class FollowUpRequest(BaseModel):
    question_type: QuestionType
    index: int = Field(..., ge=0, le=4)


class TranscriptRequest(BaseModel):
    question_type: QuestionType
    index: int = Field(..., ge=0, le=4)
    transcript: str = Field(..., max_length=10000, description="Final voice transcript to append")


class FormatRequest(BaseModel):
    text: str = Field(..., max_length=50000, description="Free text to split into sections")
