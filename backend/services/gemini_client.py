"""Google Gemini API wrapper with error handling."""

import base64
import binascii
import logging
from typing import Protocol

from google import genai
from google.genai import errors, types

from config import settings
from models.documents import Attachment, GenerationRequest, GenerationResponse
from services.errors import GenerationError

logger = logging.getLogger(__name__)


class GenerationClient(Protocol):
    """Anything that turns a prompt (plus optional attachment) into text."""

    async def generate(self, prompt: str, attachment: Attachment | None = None) -> str: ...


def _build_contents(request: GenerationRequest) -> list:
    if request.attachment is None:
        return [request.prompt]
    try:
        data = base64.b64decode(request.attachment.base64_data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise GenerationError(400, f"Attachment is not valid base64: {e}") from e
    return [
        types.Part.from_bytes(data=data, mime_type=request.attachment.mime_type),
        request.prompt,
    ]


class GeminiClient:
    def __init__(self, api_key: str | None = None, model: str | None = None) -> None:
        self._api_key = settings.gemini_api_key if api_key is None else api_key
        self._model = model or settings.gemini_model
        self._client: genai.Client | None = None

    def _get_client(self) -> genai.Client:
        if not self._api_key:
            logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
            raise GenerationError(503, "GEMINI_API_KEY is not configured")
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def complete(self, request: GenerationRequest) -> GenerationResponse:
        client = self._get_client()
        contents = _build_contents(request)

        try:
            response = await client.aio.models.generate_content(
                model=self._model,
                contents=contents,
                config=types.GenerateContentConfig(
                    temperature=settings.generation_temperature,
                ),
            )
        except errors.APIError as e:
            logger.error("Gemini API error: %s", e)
            raise GenerationError(e.code or 500, e.message or str(e)) from e
        except Exception as e:
            logger.error("Gemini request failed: %s", e)
            raise GenerationError(500, str(e)) from e

        text = response.text
        if not text:
            raise GenerationError(502, "Gemini returned an empty response")
        return GenerationResponse(raw_text=text)

    async def generate(self, prompt: str, attachment: Attachment | None = None) -> str:
        response = await self.complete(GenerationRequest(prompt=prompt, attachment=attachment))
        return response.raw_text
