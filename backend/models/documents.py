"""Contracts for uploaded documents and their classification."""

from pathlib import PurePath

from pydantic import BaseModel


class RawDocument(BaseModel):
    """An uploaded file as read in full from the client."""

    content: bytes
    file_name: str

    @property
    def declared_extension(self) -> str:
        """Lowercase filename suffix without the dot ('' when absent)."""
        return PurePath(self.file_name).suffix.lower().lstrip(".")

    @property
    def size(self) -> int:
        return len(self.content)


class ExtractedText(BaseModel):
    text: str
    source_file_name: str


class ClassificationResult(BaseModel):
    accepted: bool = False
    score: int = 0  # 0-8
    signals: dict[str, bool] = {}


class Attachment(BaseModel):
    mime_type: str
    base64_data: str


class GenerationRequest(BaseModel):
    prompt: str
    attachment: Attachment | None = None


class GenerationResponse(BaseModel):
    raw_text: str = ""
