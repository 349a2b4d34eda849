"""HTTP client for the text-to-speech commentary service.

Audio is best effort: every failure is logged and reported as "no audio",
so score, events and text commentary are never affected.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import aiohttp

from app.config import settings
from app.engine.errors import AudioGenerationError
from app.engine.types import Commentary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VoiceSettings:
    """Speech parameters for a single line, scaled by excitement"""

    volume: float
    rate: float
    pitch: float

    @classmethod
    def for_excitement(cls, excitement: int) -> "VoiceSettings":
        return cls(
            volume=min(1.0, 0.6 + excitement * 0.1),
            rate=min(1.3, 0.9 + excitement * 0.1),
            pitch=min(1.2, 0.8 + excitement * 0.1),
        )

    def as_dict(self) -> dict[str, float]:
        return {"volume": self.volume, "rate": self.rate, "pitch": self.pitch}


class AudioCommentaryClient:
    """Invoke the TTS service's /synthesize endpoint."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        enabled: Optional[bool] = None,
        session: Optional[aiohttp.ClientSession] = None,
        request_timeout: Optional[float] = None,
    ) -> None:
        self._base_url = (base_url if base_url is not None else settings.AUDIO_SERVICE_URL).rstrip("/")
        self._enabled = settings.AUDIO_ENABLED if enabled is None else enabled
        self._timeout = aiohttp.ClientTimeout(
            total=request_timeout if request_timeout is not None else settings.AUDIO_TIMEOUT_SECONDS
        )
        self._session = session
        self._owns_session = session is None

    @property
    def available(self) -> bool:
        return self._enabled and bool(self._base_url)

    async def synthesize(self, commentary: Commentary) -> Optional[str]:
        """Return an audio URL for the line; raises AudioGenerationError on failure"""
        if not self.available:
            return None

        payload: dict[str, Any] = {
            "text": commentary.text,
            "excitement": commentary.excitement,
            "phase": commentary.phase.value,
            "voice": VoiceSettings.for_excitement(commentary.excitement).as_dict(),
        }
        session = await self._ensure_session()
        url = f"{self._base_url}/synthesize"

        try:
            async with session.post(url, json=payload) as resp:
                if resp.status >= 400:
                    raise AudioGenerationError(f"TTS service returned HTTP {resp.status}")
                data = await resp.json()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            raise AudioGenerationError(f"TTS request failed: {exc}") from exc

        audio_url = data.get("audio_url") if isinstance(data, dict) else None
        if not audio_url:
            raise AudioGenerationError("TTS response did not include an audio_url")
        return str(audio_url)

    async def close(self) -> None:
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
            self._owns_session = True
        return self._session


async def generate_commentary_audio(client: AudioCommentaryClient, commentary: Commentary) -> Optional[str]:
    """Best-effort audio for one line; None when the service cannot provide it"""
    try:
        return await client.synthesize(commentary)
    except AudioGenerationError as exc:
        logger.warning("No audio for commentary at %d min: %s", commentary.time, exc)
        return None


async def generate_match_audio(
    client: AudioCommentaryClient, lines: Sequence[Commentary]
) -> list[Optional[str]]:
    """Audio for every line, requested concurrently; aligned with the input order"""
    return list(await asyncio.gather(*(generate_commentary_audio(client, line) for line in lines)))


async def narrate_match(
    lines: Sequence[Commentary], client: Optional[AudioCommentaryClient] = None
) -> list[Optional[str]]:
    """Audio for a commentary feed using the configured TTS service; the client is closed afterwards"""
    client = client if client is not None else AudioCommentaryClient()
    try:
        if not client.available:
            logger.info("Audio commentary disabled, skipping %d lines", len(lines))
            return [None] * len(lines)
        return await generate_match_audio(client, lines)
    finally:
        await client.close()
