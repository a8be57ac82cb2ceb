"""
HTTP client for the remote Mastermind service.

Endpoints used:
POST   /game            -> {"game_id": "..."}           (200 or 201)
POST   /guess           -> {"black": int, "white": int} (200)
DELETE /game/{game_id}  -> best effort, result ignored

Any other status may carry {"error": "..."}; we surface the status code and
that message as a BadStatusError. A 404 on /guess means the game is gone.
"""

import logging
from typing import Optional

import requests
from pydantic import ValidationError

from .errors import APIError, BadStatusError, DecodingError, NetworkError
from .schemas import CreateGameOut, ErrorOut, GuessOut

logger = logging.getLogger(__name__)

API_URL = "https://mastermind.darkube.app"
# seconds, applied to every request
API_TIMEOUT = 10.0

JSON_HEADERS = {"Accept": "application/json"}


def _error_message(response) -> Optional[str]:
    """Pull {"error": "..."} out of a failed response, if it is there."""
    try:
        return ErrorOut.model_validate(response.json()).error
    except (ValueError, ValidationError):
        return None


class MastermindAPI:
    """
    Thin wrapper over a requests-style session.

    `session` only needs .post()/.delete() returning objects with
    .status_code and .json(); tests pass a wrapper around TestClient.
    """

    def __init__(
        self,
        base_url: str = API_URL,
        timeout: float = API_TIMEOUT,
        session=None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def _url(self, *parts: str) -> str:
        return "/".join([self.base_url, *parts])

    def _send(self, method: str, url: str, **kwargs):
        try:
            return getattr(self.session, method)(
                url, headers=JSON_HEADERS, timeout=self.timeout, **kwargs
            )
        except requests.RequestException as exc:
            logger.info("%s %s failed: %s", method.upper(), url, exc)
            raise NetworkError(exc) from exc

    def create_game(self) -> str:
        response = self._send("post", self._url("game"))
        if response.status_code not in (200, 201):
            raise BadStatusError(response.status_code, _error_message(response))
        try:
            game_id = CreateGameOut.model_validate(response.json()).game_id
        except (ValueError, ValidationError) as exc:
            raise DecodingError(exc) from exc
        logger.info("Created remote game %s", game_id)
        return game_id

    def make_guess(self, game_id: str, guess: str) -> GuessOut:
        response = self._send(
            "post", self._url("guess"), json={"game_id": game_id, "guess": guess}
        )
        if response.status_code != 200:
            raise BadStatusError(response.status_code, _error_message(response))
        try:
            return GuessOut.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise DecodingError(exc) from exc

    def delete_game(self, game_id: str) -> None:
        # Best effort: whatever happens here never reaches the player
        try:
            self._send("delete", self._url("game", game_id))
        except APIError as exc:
            logger.debug("Ignoring failed delete of game %s: %s", game_id, exc)
            return
        logger.info("Deleted remote game %s", game_id)
