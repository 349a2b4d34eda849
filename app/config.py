"""
Simulation configuration
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class SimulationSettings:
    """Simulation settings from environment variables"""

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Local match result store (SQLite)
    DATABASE_PATH: str = os.getenv("DATABASE_PATH", "dream_league.db")

    # Engine tuning
    PHASE_LENGTH: int = int(os.getenv("PHASE_LENGTH", "5"))  # events per game phase
    UPSET_CHANCE: float = float(os.getenv("UPSET_CHANCE", "0.2"))

    # Commentary booth, comma-separated
    COMMENTATORS: list[str] = [
        c.strip() for c in os.getenv("COMMENTATORS", "PastryTime,CaptainFlowers").split(",") if c.strip()
    ]

    # Text-to-speech service
    AUDIO_ENABLED: bool = _env_bool("AUDIO_ENABLED", False)
    AUDIO_SERVICE_URL: str = os.getenv("AUDIO_SERVICE_URL", "")
    AUDIO_TIMEOUT_SECONDS: float = float(os.getenv("AUDIO_TIMEOUT_SECONDS", "5.0"))

    # Extra CORS origins, comma-separated
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")


settings = SimulationSettings()
