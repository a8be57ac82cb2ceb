"""
DB-backed store for remote games.

Public methods:
- create(secret) -> game_id
- get(game_id) -> GameInfoOut | None
- guess(game_id, code) -> GuessOut | None
- delete(game_id) -> bool

Routes only deal with these DTOs; the secret never leaves this module
except through the engine.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import Game as GameORM, Guess as GuessORM
from ..engine import score_guess
from ..schemas import GameInfoOut, GuessEntryOut, GuessOut
from ..types import Code, CODE_LENGTH
from ..validator import format_code

logger = logging.getLogger(__name__)

# --- Small DTO builders so routes stay free of ORM objects ---

def _to_guess_out(g: GuessORM) -> GuessEntryOut:
    return GuessEntryOut(
        guess=g.guess,
        black=g.black,
        white=g.white,
        message=g.message,
        timestamp=g.timestamp.timestamp(),
    )

def _feedback_message(black: int, white: int) -> str:
    if black == 0 and white == 0:
        return "all incorrect"
    return f"{black} correct location(s) and {white} misplaced number(s)"


class DBGameStore:
    def __init__(self, db: Session):
        self.db = db

    def _history(self, game_id: str) -> list[GuessORM]:
        return list(
            self.db.execute(select(GuessORM).where(GuessORM.game_id == game_id).order_by(GuessORM.id.asc()))
            .scalars()
            .all()
        )

    def create(self, secret: Code) -> str:
        gid = str(uuid4())
        now = datetime.utcnow()
        self.db.add(GameORM(id=gid, secret=list(secret), created_at=now, updated_at=now))
        self.db.commit()
        logger.info("Game %s created", gid)
        return gid

    def get(self, game_id: str) -> Optional[GameInfoOut]:
        game = self.db.get(GameORM, game_id)
        if not game:
            return None
        history = self._history(game_id)
        return GameInfoOut(
            game_id=game.id,
            guesses_made=len(history),
            solved=any(h.black == CODE_LENGTH for h in history),
            history=[_to_guess_out(h) for h in history],
        )

    def guess(self, game_id: str, attempt: Code) -> Optional[GuessOut]:
        game = self.db.get(GameORM, game_id)
        if not game:
            return None

        black, white = score_guess(game.secret, attempt)
        now = datetime.utcnow()
        self.db.add(GuessORM(
            game_id=game.id,
            guess=format_code(attempt),
            black=black,
            white=white,
            message=_feedback_message(black, white),
            timestamp=now,
        ))
        game.updated_at = now
        self.db.commit()
        return GuessOut(black=black, white=white)

    def delete(self, game_id: str) -> bool:
        game = self.db.get(GameORM, game_id)
        if not game:
            return False
        self.db.delete(game)
        self.db.commit()
        logger.info("Game %s deleted", game_id)
        return True
