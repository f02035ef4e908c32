"""Generation flows for the interview: questions, scoring, sample answers, follow-ups.

Every flow degrades instead of raising:
1. GenerationError (service down, no API key) -> hardcoded default data
2. Malformed reply -> parser fallback (default set, or keyword heuristic for scores)
"""

import logging

from models.interview import AnswerFeedback, FormattedText, QuestionSet
from services import defaults, prompt_builder, response_parser
from services.errors import GenerationError
from services.gemini_client import GenerationClient
from services.text_formatter import format_text

logger = logging.getLogger(__name__)


class InterviewCoach:
    def __init__(self, client: GenerationClient) -> None:
        self.client = client

    async def generate_questions(
        self, resume_text: str, job_description: str = "", difficulty: str = "medium"
    ) -> QuestionSet:
        fallback = defaults.fallback_questions(difficulty)
        prompt = prompt_builder.build_questions_prompt(resume_text, job_description, difficulty)

        try:
            raw = await self.client.generate(prompt)
        except GenerationError as e:
            logger.warning("Question generation unavailable (%s), using %s fallback set", e.status, difficulty)
            return fallback

        result = response_parser.parse_question_set(raw, difficulty, fallback)
        if result.is_fallback:
            logger.warning("Could not parse generated questions: %s", result.reason)
        return result.value

    async def analyze_answer(self, question: str, answer: str) -> AnswerFeedback:
        try:
            raw = await self.client.generate(prompt_builder.build_scoring_prompt(question, answer))
        except GenerationError as e:
            logger.warning("Answer scoring unavailable (%s), using default feedback", e.status)
            return defaults.default_feedback()

        result = response_parser.parse_answer_feedback(raw)
        if result.is_fallback:
            logger.warning("Scoring reply was not JSON (%s), score derived heuristically", result.reason)
        return result.value

    async def suggest_answer(self, question: str) -> FormattedText:
        try:
            raw = await self.client.generate(prompt_builder.build_sample_answer_prompt(question))
        except GenerationError as e:
            logger.warning("Sample answer unavailable (%s), using template", e.status)
            raw = defaults.default_sample_answer(question)
        return format_text(raw)

    async def follow_up(self, question: str, answer: str) -> str:
        try:
            raw = await self.client.generate(prompt_builder.build_follow_up_prompt(question, answer))
        except GenerationError as e:
            logger.warning("Follow-up generation unavailable (%s)", e.status)
            return defaults.DEFAULT_FOLLOW_UP
        return raw.strip() or defaults.DEFAULT_FOLLOW_UP
