"""
Flood-fill agent server for judge-driven matches.
The judge pushes each snapshot to /send-state and pulls the move from /send-move.
"""

import logging
from threading import Lock

from flask import Flask, request, jsonify

import settings
from bot_client import BotClient
from cycles_game import GameState, PlayerNotFoundError, SnapshotError

logger = logging.getLogger(__name__)

app = Flask(__name__)

bot = BotClient(settings.AGENT_NAME)

# Latest snapshot pushed by the judge
game_state = {"state": None}
game_lock = Lock()


@app.route("/", methods=["GET"])
def info():
    """Basic health/info endpoint used by the judge to check connectivity."""
    return jsonify({"participant": settings.PARTICIPANT, "agent_name": bot.name}), 200


@app.route("/send-state", methods=["POST"])
def receive_state():
    """Judge calls this to push the current game state to the agent server."""
    data = request.get_json(silent=True)
    if not data:
        return jsonify({"error": "no json body"}), 400
    try:
        state = GameState.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"error": f"invalid state: {e}"}), 400

    with game_lock:
        game_state["state"] = state
    return jsonify({"status": "state received"}), 200


@app.route("/send-move", methods=["GET"])
def send_move():
    """Judge calls this (GET) to request the agent's move for the current tick.

    Return format: {"move": "NORTH", "code": 0}
    """
    with game_lock:
        state = game_state["state"]
        if state is None:
            return jsonify({"error": "no state received yet"}), 425
        try:
            move = bot.decide(state)
        except PlayerNotFoundError as e:
            logger.warning("%s", e)
            return jsonify({"error": str(e)}), 409
        except SnapshotError as e:
            logger.warning("%s", e)
            return jsonify({"error": str(e)}), 400

    return jsonify({"move": move.name, "code": move.code}), 200


@app.route("/end", methods=["POST"])
def end_game():
    """Judge notifies agent that the match finished."""
    data = request.get_json(silent=True) or {}
    logger.info("Game over! Result: %s", data.get("result", "UNKNOWN"))
    with game_lock:
        game_state["state"] = None
        bot.grid_size = None
    return jsonify({"status": "acknowledged"}), 200


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    logger.info("Starting %s (%s) on port %d...", bot.name, settings.PARTICIPANT, settings.PORT)
    app.run(host="0.0.0.0", port=settings.PORT, debug=False)
