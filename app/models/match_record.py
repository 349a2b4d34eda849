from typing import Optional
from sqlalchemy import String, Integer, DateTime, LargeBinary
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime
from app.database import Base


class MatchRecord(Base):
    """A simulated match result as handed to the result recorder"""
    __tablename__ = "match_records"

    id: Mapped[int] = mapped_column(primary_key=True)
    match_id: Mapped[str] = mapped_column(String(100), unique=True, index=True)

    winner_id: Mapped[str] = mapped_column(String(100))
    loser_id: Mapped[str] = mapped_column(String(100))

    score_a: Mapped[int] = mapped_column(Integer)
    score_b: Mapped[int] = mapped_column(Integer)

    # Opaque stats payload, currently [score_a, score_b] as two bytes
    match_stats: Mapped[bytes] = mapped_column(LargeBinary)

    tournament_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    recorded_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    @property
    def score(self) -> tuple[int, int]:
        return (self.score_a, self.score_b)

    def __repr__(self):
        return f"<MatchRecord {self.match_id}: {self.score_a}-{self.score_b}>"
