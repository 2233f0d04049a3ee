# bot_client.py
# Plays one bot against the cycles game server: fetch a snapshot, decide, send the move, repeat.
# Usage: python bot_client.py <bot_name>

import logging
import sys

import settings
from agent_floodfill import FloodFillAgent
from connection import Connection
from cycles_game import GridSizeChangedError, SnapshotError

logger = logging.getLogger(__name__)


class BotClient:
    """
    Conservative bot: keeps as much open space as possible and only leans toward
    the nearest opponent's predicted cell when one is on the board.
    All per-bot state lives on the instance so several bots can share a process.
    """

    def __init__(self, name, connection=None, agent=None):
        self.name = name
        self.connection = connection
        self.agent = agent or FloodFillAgent()
        self.previous_direction = -1  # code of the last move sent, -1 before the first
        self.grid_size = None  # fixed by the first snapshot of the session
        self.ticks = 0

    def connect(self):
        self.connection.establish_session(self.name)
        if not self.connection.is_session_active():
            logger.critical("%s: Connection failed", self.name)
            sys.exit(1)

    def decide(self, state):
        """Pick this tick's direction from a fresh snapshot.

        Raises PlayerNotFoundError when this bot is missing from the roster;
        the previous position is never reused.
        """
        me = state.find_player(self.name)
        if self.grid_size is None:
            self.grid_size = state.grid.size
        elif state.grid.size != self.grid_size:
            raise GridSizeChangedError(self.grid_size, state.grid.size)

        direction = self.agent.choose_direction(state, me)
        self.previous_direction = direction.code
        self.ticks += 1
        logger.debug("%s frame %d: at %s moving %s", self.name, state.frame, me.position, direction.name)
        return direction

    def run(self):
        while self.connection.is_session_active():
            state = self.connection.fetch_state()
            if state is None:
                break
            try:
                move = self.decide(state)
            except SnapshotError as e:
                logger.warning("%s: skipping frame %d: %s", self.name, state.frame, e)
                continue
            self.connection.submit_move(move)
        logger.info("%s: session ended after %d moves", self.name, self.ticks)


def main(argv=None):
    argv = sys.argv if argv is None else argv
    if len(argv) != 2:
        print(f"Usage: {argv[0]} <bot_name>", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    connection = Connection()
    bot = BotClient(argv[1], connection)
    try:
        bot.connect()
        bot.run()
    finally:
        connection.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
