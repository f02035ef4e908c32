"""Shared dependencies for API routes."""

from fastapi import Request

from models.interview import SessionState
from services.gemini_client import GeminiClient, GenerationClient
from services.interview_coach import InterviewCoach
from services.interview_session import InterviewSession
from services.state_store import Store


def create_session(client: GenerationClient | None = None) -> InterviewSession:
    """Build the single session context the app hands to its routes."""
    return InterviewSession(Store(SessionState()), InterviewCoach(client or GeminiClient()))


def get_session(request: Request) -> InterviewSession:
    return request.app.state.session
