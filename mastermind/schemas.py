"""
Pydantic models for the remote game protocol.
- The server uses them to validate requests and shape responses.
- The API client uses the same models to decode what the server sends back,
  so both sides agree on one wire format.
"""

from typing import List
from pydantic import BaseModel, Field

from .types import CODE_LENGTH

# 1. Response when a new game is created (the secret is never returned)
class CreateGameOut(BaseModel):
    game_id: str = Field(..., min_length=1, description="Opaque id of the remote game")

# 2. A guess submitted for an existing game
class GuessIn(BaseModel):
    game_id: str = Field(..., description="Id returned by POST /game")
    guess: str = Field(..., description=f"{CODE_LENGTH} digits, each between 1 and 6, e.g. '1234'")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"game_id": "3f2b8c1e-0000-4000-8000-000000000000", "guess": "1234"},
            ]
        }
    }

# 3. Feedback for one guess
class GuessOut(BaseModel):
    black: int = Field(..., ge=0, le=CODE_LENGTH, description="Right digit, right position")
    white: int = Field(..., ge=0, le=CODE_LENGTH, description="Right digit, wrong position")

# 4. Every non-2xx response carries this body
class ErrorOut(BaseModel):
    error: str = Field(..., description="What went wrong")

# 5. One history row (debug view)
class GuessEntryOut(BaseModel):
    guess: str
    black: int
    white: int
    message: str
    timestamp: float

# 6. Debug view of a game; still never includes the secret
class GameInfoOut(BaseModel):
    game_id: str
    guesses_made: int
    solved: bool
    history: List[GuessEntryOut]
