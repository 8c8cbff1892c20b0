from __future__ import annotations

import os
import sys
import threading
import uuid
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

try:
    from .game import (  # type: ignore
        CONFIGURATIONS,
        GameSession,
        SelectResult,
        UnknownConfiguration,
        configuration_names,
        configuration_or_default,
    )
except ImportError:
    from game import (  # type: ignore
        CONFIGURATIONS,
        GameSession,
        SelectResult,
        UnknownConfiguration,
        configuration_names,
        configuration_or_default,
    )


def default_configuration() -> str:
    return configuration_or_default(os.getenv("HIQ_CONFIGURATION"))


app = Flask(__name__)

MAX_SESSIONS = int(os.getenv("HIQ_MAX_SESSIONS", "1000"))

# Insertion order doubles as recency: lookups move a session to the end.
_sessions: Dict[str, GameSession] = {}
_sessions_lock = threading.Lock()


def _get_session(session_id: Any) -> Optional[GameSession]:
    with _sessions_lock:
        session = _sessions.pop(str(session_id), None)
        if session is not None:
            _sessions[str(session_id)] = session
        return session


def _store_session(session: GameSession) -> str:
    """Registers a session, evicting the least recently used ones past MAX_SESSIONS."""
    session_id = uuid.uuid4().hex
    with _sessions_lock:
        _sessions[session_id] = session
        while len(_sessions) > max(1, MAX_SESSIONS):
            _sessions.pop(next(iter(_sessions)))
    return session_id


def _result_to_json(res: SelectResult) -> Dict[str, Any]:
    def _c(coord):
        return None if coord is None else [int(coord[0]), int(coord[1])]

    return {
        "outcome": res.outcome.value,
        "source": _c(res.source),
        "destination": _c(res.destination),
        "captured": _c(res.captured),
        "targets": [[int(r), int(c)] for (r, c) in res.targets],
    }


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _int_field(body: Dict[str, Any], key: str) -> int:
    value = body[key]
    # bool is an int subclass; JSON true/false is not a coordinate
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return value


def _coord_from(body: Dict[str, Any]) -> Tuple[int, int]:
    return _int_field(body, "row"), _int_field(body, "col")


def _unknown_configuration(e: UnknownConfiguration) -> Any:
    return jsonify({"ok": False, "error": str(e), "configurations": configuration_names()}), 400


def _missing_session(session_id: Any) -> Any:
    return jsonify({"ok": False, "error": f"unknown session {session_id!r}"}), 404


@app.get("/api/configurations")
def api_configurations() -> Any:
    return jsonify({
        "ok": True,
        "default": default_configuration(),
        "configurations": [
            {"name": name, "startingPegs": CONFIGURATIONS[name].starting_pegs}
            for name in configuration_names()
        ],
    })


@app.post("/api/new")
def api_new() -> Any:
    body = _body()
    name = body.get("configuration") or default_configuration()
    try:
        session = GameSession(name)
    except UnknownConfiguration as e:
        return _unknown_configuration(e)
    session_id = _store_session(session)
    return jsonify({"ok": True, "id": session_id, "state": session.snapshot()})


@app.get("/api/state/<session_id>")
def api_state(session_id: str) -> Any:
    session = _get_session(session_id)
    if session is None:
        return _missing_session(session_id)
    return jsonify({"ok": True, "id": session_id, "state": session.snapshot()})


@app.post("/api/select")
def api_select() -> Any:
    body = _body()
    session = _get_session(body.get("id"))
    if session is None:
        return _missing_session(body.get("id"))
    try:
        row, col = _coord_from(body)
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad coordinate: {e}"}), 400
    res = session.select_peg(row, col)
    return jsonify({"ok": True, "id": body.get("id"), "result": _result_to_json(res), "state": session.snapshot()})


@app.post("/api/configure")
def api_configure() -> Any:
    body = _body()
    session = _get_session(body.get("id"))
    if session is None:
        return _missing_session(body.get("id"))
    try:
        session.configure(body.get("configuration"))
    except UnknownConfiguration as e:
        return _unknown_configuration(e)
    return jsonify({"ok": True, "id": body.get("id"), "state": session.snapshot()})


@app.post("/api/reset")
def api_reset() -> Any:
    body = _body()
    session = _get_session(body.get("id"))
    if session is None:
        return _missing_session(body.get("id"))
    session.reset()
    return jsonify({"ok": True, "id": body.get("id"), "state": session.snapshot()})


@app.delete("/api/session/<session_id>")
def api_delete(session_id: str) -> Any:
    with _sessions_lock:
        removed = _sessions.pop(session_id, None)
    if removed is None:
        return _missing_session(session_id)
    return jsonify({"ok": True})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
