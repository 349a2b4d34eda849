"""
Result recording boundary - the payload handed to the match result recorder,
plus a local SQLite recorder for offline play.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.match_record import MatchRecord
from app.engine.errors import RecorderError
from app.engine.types import MatchResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResultPayload:
    match_id: str
    winner_id: str
    loser_id: str
    score: tuple[int, int]
    match_stats: bytes
    tournament_id: Optional[str] = None


def encode_match_stats(score: tuple[int, int]) -> bytes:
    """Two-byte [score_a, score_b] encoding; each score clamped to a byte"""
    return bytes(max(0, min(255, s)) for s in score)


def decode_match_stats(data: bytes) -> tuple[int, int]:
    if len(data) != 2:
        raise ValueError(f"Expected 2 bytes of match stats, got {len(data)}")
    return (data[0], data[1])


def build_result_payload(match_id: str, result: MatchResult, tournament_id: Optional[str] = None) -> MatchResultPayload:
    return MatchResultPayload(
        match_id=match_id,
        winner_id=result.winner.id,
        loser_id=result.loser.id,
        score=result.score,
        match_stats=encode_match_stats(result.score),
        tournament_id=tournament_id,
    )


class MatchResultRecorder(Protocol):
    def record(self, payload: MatchResultPayload) -> bool: ...


class LocalMatchRecorder:
    """Stores result payloads in the local database"""

    def __init__(self, session: Session):
        self.session = session

    def record(self, payload: MatchResultPayload) -> bool:
        """Persist a payload; returns False instead of raising when storage fails"""
        try:
            self._store(payload)
        except RecorderError as exc:
            logger.error("Failed to record match %s: %s", payload.match_id, exc)
            return False
        logger.info("Recorded match %s (%d-%d)", payload.match_id, *payload.score)
        return True

    def _store(self, payload: MatchResultPayload):
        existing = self.session.query(MatchRecord).filter_by(match_id=payload.match_id).first()
        if existing:
            raise RecorderError(f"Match {payload.match_id} already recorded")

        record = MatchRecord(
            match_id=payload.match_id,
            winner_id=payload.winner_id,
            loser_id=payload.loser_id,
            score_a=payload.score[0],
            score_b=payload.score[1],
            match_stats=payload.match_stats,
            tournament_id=payload.tournament_id,
        )
        try:
            self.session.add(record)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise RecorderError(str(exc)) from exc

    def get(self, match_id: str) -> Optional[MatchRecord]:
        return self.session.query(MatchRecord).filter_by(match_id=match_id).first()
