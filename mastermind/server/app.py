'''
Reference Mastermind game service (the remote side of `mastermind-api`)

Endpoints:
POST   /game             -> start a game, {"game_id"}
POST   /guess            -> score a guess, {"black", "white"}
DELETE /game/{game_id}   -> drop a game and its history

Extras:
GET    /game/{game_id}   -> guess history (never the secret)

Every error response has the shape {"error": "..."}.
The service does not cap attempts; that is left to the client.
'''

import logging

import uvicorn

from fastapi import FastAPI, Depends, HTTPException, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..config import configure_logging, get_settings
from ..sources import generate_secret
from ..types import CODE_LENGTH, DIGIT_MIN, DIGIT_MAX
from ..validator import parse_guess
from .db import get_db
from .repository import DBGameStore
from .bootstrap_db import create_all
from ..schemas import CreateGameOut, GameInfoOut, GuessIn, GuessOut, ErrorOut

logger = logging.getLogger(__name__)

APP_ENV = get_settings().app_env

app = FastAPI(title="Mastermind game service", version="1.0.0")

# --- Dev convenience: auto-create tables locally ---
if APP_ENV == "local":
    @app.on_event("startup")
    def _dev_create_tables():
        create_all()

# --- Error bodies: {"error": "..."} instead of FastAPI's {"detail": ...} ---
@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=ErrorOut(error=str(exc.detail)).model_dump())

@app.exception_handler(RequestValidationError)
async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    first = exc.errors()[0] if exc.errors() else {}
    where = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"invalid request: {where} {first.get('msg', '')}".strip()
    return JSONResponse(status_code=400, content=ErrorOut(error=message).model_dump())

# Per-request store bound to the current DB session
def get_store(session = Depends(get_db)) -> DBGameStore:
    return DBGameStore(session)

# ---------------- Routes ----------------

ERROR_RESPONSES = {400: {"model": ErrorOut}, 404: {"model": ErrorOut}}

@app.post("/game", status_code=201, response_model=CreateGameOut, summary="Start a new game")
def create_game(store: DBGameStore = Depends(get_store)) -> CreateGameOut:
    secret = generate_secret()
    return CreateGameOut(game_id=store.create(secret))

@app.post("/guess", response_model=GuessOut, responses=ERROR_RESPONSES, summary="Submit a guess")
def submit_guess(payload: GuessIn, store: DBGameStore = Depends(get_store)) -> GuessOut:
    code = parse_guess(payload.guess)
    if code is None:
        raise HTTPException(
            status_code=400,
            detail=f"guess must be exactly {CODE_LENGTH} digits between {DIGIT_MIN} and {DIGIT_MAX}",
        )
    result = store.guess(payload.game_id, code)
    if result is None:
        raise HTTPException(status_code=404, detail="game not found")
    return result

@app.get("/game/{game_id}", response_model=GameInfoOut, responses=ERROR_RESPONSES, summary="Get guess history")
def get_game(game_id: str, store: DBGameStore = Depends(get_store)) -> GameInfoOut:
    info = store.get(game_id)
    if info is None:
        raise HTTPException(status_code=404, detail="game not found")
    return info

@app.delete("/game/{game_id}", status_code=204, responses=ERROR_RESPONSES, summary="Delete a game")
def delete_game(game_id: str, store: DBGameStore = Depends(get_store)) -> Response:
    if not store.delete(game_id):
        raise HTTPException(status_code=404, detail="game not found")
    return Response(status_code=204)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Serving on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
