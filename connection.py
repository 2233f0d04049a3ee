# connection.py
# HTTP session with the cycles game server.
#
#   POST /join   {"name": ...}                         -> 200 when the bot is admitted
#   GET  /state  ?name=...                             -> 200 snapshot, 410 once the game is over
#   POST /move   {"name": ..., "direction": ..., "code": ...}

import logging

import requests

import settings
from cycles_game import GameState

logger = logging.getLogger(__name__)


class Connection:
    def __init__(self, base_url=None, timeout=None, session=None):
        self.base_url = (base_url or settings.CYCLES_SERVER_URL).rstrip("/")
        self.timeout = settings.CYCLES_TIMEOUT if timeout is None else timeout
        self.session = session or requests.Session()
        self.name = None
        self.active = False

    def establish_session(self, name):
        """Join the game as ``name``. The session stays inactive on any failure."""
        self.name = name
        try:
            response = self.session.post(f"{self.base_url}/join", json={"name": name}, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("%s: could not reach %s: %s", name, self.base_url, e)
            self.active = False
            return False
        self.active = response.status_code == 200
        if not self.active:
            logger.error("%s: join rejected with status %s", name, response.status_code)
        return self.active

    def is_session_active(self):
        return self.active

    def fetch_state(self):
        """Block until the next snapshot arrives. Returns None once the session has ended."""
        try:
            # No read timeout: the server answers once the next tick is ready
            response = self.session.get(
                f"{self.base_url}/state", params={"name": self.name}, timeout=(self.timeout, None)
            )
        except requests.RequestException as e:
            logger.error("%s: lost connection: %s", self.name, e)
            self.active = False
            return None

        if response.status_code == 410:
            logger.info("%s: game over", self.name)
            self.active = False
            return None
        if response.status_code != 200:
            logger.error("%s: unexpected status %s while waiting for state", self.name, response.status_code)
            self.active = False
            return None

        try:
            data = response.json()
            if data.get("active") is False:
                logger.info("%s: game over", self.name)
                self.active = False
                return None
            return GameState.from_dict(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error("%s: malformed state payload: %s", self.name, e)
            self.active = False
            return None

    def submit_move(self, direction):
        """Fire-and-forget: the server's reply is not inspected."""
        payload = {"name": self.name, "direction": direction.name, "code": direction.code}
        try:
            self.session.post(f"{self.base_url}/move", json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("%s: failed to send move %s: %s", self.name, direction.name, e)

    def close(self):
        self.active = False
        self.session.close()
