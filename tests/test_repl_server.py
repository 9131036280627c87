import json

import pytest

from minirack_lsp.repl_server import ReplServer


@pytest.fixture
def server():
    return ReplServer(host="127.0.0.1", port=0, prelude=None)


def request(server, payload):
    return server.handle_request(json.dumps(payload).encode("utf-8"))


def test_eval_returns_display_string(server):
    assert request(server, {"cmd": "eval", "code": "(list 1 2)"}) == {"ok": True, "result": "(1 2)"}


def test_state_persists_between_requests(server):
    request(server, {"cmd": "eval", "code": "(define x 41)"})
    assert request(server, {"cmd": "eval", "code": "(+ x 1)"})["result"] == "42"


def test_empty_code_has_no_result(server):
    assert request(server, {"cmd": "eval", "code": ""}) == {"ok": True, "result": None}


def test_evaluation_errors_are_reported(server):
    resp = request(server, {"cmd": "eval", "code": "(car 1)"})
    assert resp["ok"] is False
    assert resp["error"].startswith("MinirackTypeError")


def test_unknown_command(server):
    assert request(server, {"cmd": "shutdown"}) == {"ok": False, "error": "Unknown cmd: shutdown"}


@pytest.mark.parametrize(
    "line",
    [
        b"not json",
        b"[1, 2]",
        b"\xff",
        b'{"cmd": "eval", "code": null}',
        b'{"cmd": "eval", "code": 5}',
    ],
)
def test_invalid_requests(server, line):
    resp = server.handle_request(line)
    assert resp["ok"] is False


def test_address_from_environment(monkeypatch):
    monkeypatch.setenv("MINIRACK_REPL_HOST", "0.0.0.0")
    monkeypatch.setenv("MINIRACK_REPL_PORT", "9999")
    srv = ReplServer(prelude=None)
    assert (srv.host, srv.port) == ("0.0.0.0", 9999)


@pytest.mark.parametrize("code", [None, 5, ["(+ 1 2)"]])
def test_code_must_be_a_string(server, code):
    assert request(server, {"cmd": "eval", "code": code}) == {
        "ok": False,
        "error": "Invalid request: code must be a string",
    }
    # The session keeps serving afterwards
    assert request(server, {"cmd": "eval", "code": "(+ 1 2)"})["result"] == "3"
