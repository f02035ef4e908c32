"""Assemble a voice transcript from recognizer fragments."""

from collections.abc import AsyncIterable

from models.interview import TranscriptFragment


class TranscriptBuffer:
    """Collects final fragments while recording; interim fragments are ignored."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def feed(self, fragment: TranscriptFragment) -> None:
        if fragment.is_final and fragment.text.strip():
            self._parts.append(fragment.text.strip())

    def stop(self) -> str:
        """Return the trailing transcript and reset for the next recording."""
        transcript = " ".join(self._parts)
        self._parts = []
        return transcript


async def collect_transcript(stream: AsyncIterable[TranscriptFragment]) -> str:
    buffer = TranscriptBuffer()
    async for fragment in stream:
        buffer.feed(fragment)
    return buffer.stop()


def append_transcript(answer: str, transcript: str) -> str:
    transcript = transcript.strip()
    if not transcript:
        return answer
    if not answer.strip():
        return transcript
    return f"{answer.rstrip()} {transcript}"
