from app.services.match_simulation import simulate_match
from app.services.audio_commentary import (
    AudioCommentaryClient,
    generate_commentary_audio,
    generate_match_audio,
    narrate_match,
)

__all__ = [
    "simulate_match",
    "AudioCommentaryClient",
    "generate_commentary_audio",
    "generate_match_audio",
    "narrate_match",
]
