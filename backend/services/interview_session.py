"""Interview session controller: the only writer of the session store."""

import asyncio
import logging
from collections.abc import AsyncIterable
from typing import get_args

from models.documents import RawDocument
from models.interview import (
    AnswerFeedback,
    Difficulty,
    FormattedText,
    PerformanceStats,
    QuestionSet,
    SessionState,
    TranscriptFragment,
    answer_key,
)
from services import document_extractor, resume_classifier
from services.errors import ClassificationRejection
from services.interview_coach import InterviewCoach
from services.performance import compute_stats
from services.state_store import Store
from services.transcription import append_transcript, collect_transcript

logger = logging.getLogger(__name__)


def _check_level(level: str) -> None:
    if level not in get_args(Difficulty):
        raise ValueError(f"Unknown difficulty level: {level}")


class InterviewSession:
    def __init__(self, store: Store[SessionState], coach: InterviewCoach) -> None:
        self.store = store
        self.coach = coach

    @property
    def state(self) -> SessionState:
        return self.store.get_state()

    def current_question(self) -> str | None:
        state = self.state
        questions = state.questions.for_type(state.current_type)
        if 0 <= state.current_index < len(questions):
            return questions[state.current_index]
        return None

    def question_at(self, question_type: str, index: int) -> str:
        questions = self.state.questions.for_type(question_type)
        if not 0 <= index < len(questions):
            raise IndexError(f"No {question_type} question at index {index}")
        return questions[index]

    def select_level(self, level: str) -> None:
        _check_level(level)
        self.store.set_state({"difficulty_level": level, "selected_level": level})

    def set_mode(self, mode: str) -> None:
        if mode not in ("classic", "interactive"):
            raise ValueError(f"Unknown interview mode: {mode}")
        self.store.set_state({"interview_mode": mode})

    async def upload_resume(
        self, document: RawDocument, job_description: str = "", difficulty: str | None = None
    ) -> QuestionSet:
        """Extract, gate on classification, then generate questions.

        Extraction errors propagate; a rejected classification raises
        ClassificationRejection. Question generation never fails. A
        ``difficulty`` is committed together with the questions, so a failed
        upload leaves the session untouched.
        """
        if difficulty is not None:
            _check_level(difficulty)
        extracted = await document_extractor.extract(document)
        result = resume_classifier.classify(extracted.text)
        if not result.accepted:
            logger.info("Rejected %s as non-resume (score %d)", document.file_name, result.score)
            raise ClassificationRejection(result, resume_classifier.REJECTION_MESSAGE)

        level = difficulty or self.state.difficulty_level
        questions = await self.coach.generate_questions(extracted.text, job_description, level)

        self.store.set_state({
            "difficulty_level": level,
            "selected_level": difficulty or self.state.selected_level,
            "resume_file": extracted.source_file_name,
            "resume_text": extracted.text,
            "classification": result,
            "job_description": job_description,
            "questions": questions,
            "current_type": "technical",
            "current_index": 0,
            "answers": {},
            "feedback": {},
            "suggestions": {},
            "follow_ups": {},
        })
        return questions

    async def submit_answer(
        self, question_type: str, index: int, answer: str
    ) -> tuple[AnswerFeedback, FormattedText]:
        question = self.question_at(question_type, index)
        key = answer_key(question_type, index)

        self.store.set_state(lambda s: {"answers": {**s.answers, key: answer}})

        feedback, suggestion = await asyncio.gather(
            self.coach.analyze_answer(question, answer),
            self.coach.suggest_answer(question),
        )

        self.store.set_state(lambda s: {
            "feedback": {**s.feedback, key: feedback},
            "suggestions": {**s.suggestions, key: suggestion},
        })
        return feedback, suggestion

    async def request_follow_up(self, question_type: str, index: int) -> str:
        question = self.question_at(question_type, index)
        key = answer_key(question_type, index)
        answer = self.state.answers.get(key, "")

        follow_up = await self.coach.follow_up(question, answer)
        self.store.set_state(lambda s: {"follow_ups": {**s.follow_ups, key: follow_up}})
        return follow_up

    def append_transcript(self, question_type: str, index: int, transcript: str) -> str:
        key = answer_key(question_type, index)
        updated = append_transcript(self.state.answers.get(key, ""), transcript)
        self.store.set_state(lambda s: {"answers": {**s.answers, key: updated}})
        return updated

    async def record_transcript(
        self, question_type: str, index: int, stream: AsyncIterable[TranscriptFragment]
    ) -> str:
        """Consume a recognizer stream and append its final text once the stream ends."""
        self.question_at(question_type, index)
        transcript = await collect_transcript(stream)
        return self.append_transcript(question_type, index, transcript)

    def next_question(self) -> bool:
        """Advance through technical then behavioral questions. False at the end."""
        state = self.state
        questions = state.questions.for_type(state.current_type)

        if state.current_index < len(questions) - 1:
            self.store.set_state({"current_index": state.current_index + 1})
            return True
        if state.current_type == "technical" and state.questions.behavioral:
            self.store.set_state({"current_type": "behavioral", "current_index": 0})
            return True
        return False

    def stats(self) -> PerformanceStats:
        return compute_stats(self.state)
