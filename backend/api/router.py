from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_session
from config import settings
from models.documents import RawDocument
from models.interview import Difficulty, FormattedText, PerformanceStats, answer_key
from models.requests import AnswerRequest, FollowUpRequest, FormatRequest, TranscriptRequest
from models.responses import (
    AnswerResponse,
    ExtractionResponse,
    FollowUpResponse,
    SessionResponse,
)
from services import document_extractor, resume_classifier
from services.errors import ClassificationRejection, ExtractionError
from services.interview_session import InterviewSession
from services.text_formatter import format_text

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _too_large() -> HTTPException:
    return HTTPException(
        status_code=413,
        detail=f"File too large. Please upload a file smaller than {settings.max_upload_size_mb}MB.",
    )


async def _read_upload(upload: UploadFile) -> RawDocument:
    """Read the upload, never buffering more than one byte past the size cap."""
    if upload.size is not None and upload.size > settings.max_upload_bytes:
        raise _too_large()
    content = await upload.read(settings.max_upload_bytes + 1)
    if len(content) > settings.max_upload_bytes:
        raise _too_large()
    return RawDocument(content=content, file_name=upload.filename or "")


def _session_response(session: InterviewSession) -> SessionResponse:
    return SessionResponse(state=session.state, current_question=session.current_question())


@router.get("/health")
async def health(session: InterviewSession = Depends(get_session)):
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
        "session_active": session.state.resume_file is not None,
    }


@router.post("/resume/extract", response_model=ExtractionResponse)
@limiter.limit(settings.rate_limit)
async def extract_resume(request: Request, resume_file: UploadFile = File(...)):
    document = await _read_upload(resume_file)
    try:
        extracted = await document_extractor.extract(document)
    except ExtractionError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return ExtractionResponse(
        file_name=extracted.source_file_name,
        text=extracted.text,
        classification=resume_classifier.classify(extracted.text),
    )


@router.post("/interview/start", response_model=SessionResponse)
@limiter.limit(settings.rate_limit)
async def start_interview(
    request: Request,
    resume_file: UploadFile = File(...),
    job_description: str = Form("", max_length=10000),
    difficulty: Difficulty = Form("medium"),
    session: InterviewSession = Depends(get_session),
):
    document = await _read_upload(resume_file)
    try:
        await session.upload_resume(document, job_description, difficulty)
    except ExtractionError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except ClassificationRejection as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return _session_response(session)


@router.post("/interview/answer", response_model=AnswerResponse)
@limiter.limit(settings.rate_limit)
async def submit_answer(
    request: Request,
    body: AnswerRequest,
    session: InterviewSession = Depends(get_session),
):
    try:
        feedback, suggestion = await session.submit_answer(body.question_type, body.index, body.answer)
    except IndexError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return AnswerResponse(
        key=answer_key(body.question_type, body.index),
        feedback=feedback,
        suggestion=suggestion,
    )


@router.post("/interview/follow-up", response_model=FollowUpResponse)
@limiter.limit(settings.rate_limit)
async def follow_up(
    request: Request,
    body: FollowUpRequest,
    session: InterviewSession = Depends(get_session),
):
    try:
        question = await session.request_follow_up(body.question_type, body.index)
    except IndexError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return FollowUpResponse(key=answer_key(body.question_type, body.index), follow_up=question)


@router.post("/interview/transcript", response_model=SessionResponse)
async def append_transcript(body: TranscriptRequest, session: InterviewSession = Depends(get_session)):
    session.append_transcript(body.question_type, body.index, body.transcript)
    return _session_response(session)


@router.post("/interview/next", response_model=SessionResponse)
async def next_question(session: InterviewSession = Depends(get_session)):
    if not session.next_question():
        raise HTTPException(status_code=409, detail="No more questions in this session")
    return _session_response(session)


@router.get("/interview/state", response_model=SessionResponse)
async def get_state(session: InterviewSession = Depends(get_session)):
    return _session_response(session)


@router.get("/interview/stats", response_model=PerformanceStats)
async def get_stats(session: InterviewSession = Depends(get_session)):
    return session.stats()


@router.post("/format", response_model=FormattedText)
async def format_free_text(body: FormatRequest):
    return format_text(body.text)
