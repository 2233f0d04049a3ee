"""Tests for the HTTP session with the game server."""

from unittest.mock import MagicMock

import requests

from connection import Connection
from cycles_game import Cell, Direction

SNAPSHOT = {
    "grid": [[0, 0, 0], [0, 1, 0], [0, 0, 0]],
    "players": [{"name": "me", "position": [1, 1]}],
    "frame": 7,
}


def response(status, payload=None):
    r = MagicMock()
    r.status_code = status
    if isinstance(payload, Exception):
        r.json.side_effect = payload
    else:
        r.json.return_value = payload
    return r


def make_connection():
    session = MagicMock()
    return Connection("http://server:3101/", timeout=0.5, session=session), session


class TestEstablishSession:
    def test_join_accepted(self):
        conn, session = make_connection()
        session.post.return_value = response(200)
        assert conn.establish_session("me")
        assert conn.is_session_active()
        session.post.assert_called_once_with("http://server:3101/join", json={"name": "me"}, timeout=0.5)

    def test_join_rejected(self):
        conn, session = make_connection()
        session.post.return_value = response(409)
        assert not conn.establish_session("me")
        assert not conn.is_session_active()

    def test_server_unreachable(self):
        conn, session = make_connection()
        session.post.side_effect = requests.ConnectionError("refused")
        assert not conn.establish_session("me")
        assert not conn.is_session_active()


class TestFetchState:
    def joined(self):
        conn, session = make_connection()
        session.post.return_value = response(200)
        conn.establish_session("me")
        return conn, session

    def test_parses_snapshot(self):
        conn, session = self.joined()
        session.get.return_value = response(200, SNAPSHOT)
        state = conn.fetch_state()
        assert state.frame == 7
        assert state.find_player("me").position == Cell(1, 1)
        session.get.assert_called_once_with(
            "http://server:3101/state", params={"name": "me"}, timeout=(0.5, None)
        )
        assert conn.is_session_active()

    def test_waits_for_slow_tick(self):
        conn, session = self.joined()
        session.get.return_value = response(200, SNAPSHOT)
        conn.fetch_state()
        connect_timeout, read_timeout = session.get.call_args.kwargs["timeout"]
        assert connect_timeout == 0.5
        assert read_timeout is None

    def test_non_object_payload_ends_session(self):
        conn, session = self.joined()
        session.get.return_value = response(200, [[0, 0], [0, 0]])
        assert conn.fetch_state() is None
        assert not conn.is_session_active()

    def test_gone_ends_session(self):
        conn, session = self.joined()
        session.get.return_value = response(410)
        assert conn.fetch_state() is None
        assert not conn.is_session_active()

    def test_inactive_payload_ends_session(self):
        conn, session = self.joined()
        session.get.return_value = response(200, {"active": False})
        assert conn.fetch_state() is None
        assert not conn.is_session_active()

    def test_malformed_payload_ends_session(self):
        conn, session = self.joined()
        session.get.return_value = response(200, ValueError("not json"))
        assert conn.fetch_state() is None
        assert not conn.is_session_active()

    def test_connect_timeout_ends_session(self):
        conn, session = self.joined()
        session.get.side_effect = requests.ConnectTimeout()
        assert conn.fetch_state() is None
        assert not conn.is_session_active()


class TestSubmitMove:
    def test_posts_direction(self):
        conn, session = make_connection()
        session.post.return_value = response(200)
        conn.establish_session("me")
        conn.submit_move(Direction.SOUTH)
        session.post.assert_called_with(
            "http://server:3101/move",
            json={"name": "me", "direction": "SOUTH", "code": 2},
            timeout=0.5,
        )

    def test_send_failure_is_not_raised(self):
        conn, session = make_connection()
        session.post.side_effect = requests.ConnectionError("reset")
        conn.submit_move(Direction.WEST)

    def test_close(self):
        conn, session = make_connection()
        session.post.return_value = response(200)
        conn.establish_session("me")
        conn.close()
        assert not conn.is_session_active()
        session.close.assert_called_once()
