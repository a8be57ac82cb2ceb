"""
SQLAlchemy ORM models.

Tables:
- games: one row per game (secret stored as JSON)
- guesses: one row per guess (history), deleted together with its game
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import String, Integer, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship, Mapped, mapped_column

from .db import Base


class Game(Base):
    __tablename__ = "games"

    # UUIDs generated in code; stored as strings
    id: Mapped[str] = mapped_column(String(36), primary_key=True)

    # Secret code (list[int], digits 1..6); never leaves the server
    secret: Mapped[list[int]] = mapped_column(JSON, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)

    guesses: Mapped[list["Guess"]] = relationship(
        back_populates="game",
        cascade="all, delete-orphan",
        order_by="Guess.id.asc()",
    )


class Guess(Base):
    __tablename__ = "guesses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    game_id: Mapped[str] = mapped_column(String(36), ForeignKey("games.id", ondelete="CASCADE"), index=True)
    game: Mapped[Game] = relationship(back_populates="guesses")

    # The player's guess as sent on the wire ("1234")
    guess: Mapped[str] = mapped_column(String(16), nullable=False)

    # Engine output
    black: Mapped[int] = mapped_column(Integer, nullable=False)
    white: Mapped[int] = mapped_column(Integer, nullable=False)
    message: Mapped[str] = mapped_column(String(64), nullable=False)

    timestamp: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
