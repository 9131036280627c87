from __future__ import annotations

"""
Simple TCP REPL server for minirack.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(define x 1)"}
- Response: {"ok": true, "result": <display string>} or {"ok": false, "error": <message>}

The server keeps a single Interpreter alive so that definitions persist
across requests and clients; evaluation is serialized with a lock.
"""

import json
import logging
import socket
import threading
from typing import Tuple

from minirack.config import get_repl_address
from minirack.errors import MinirackError
from minirack.interpreter import Interpreter
from minirack.printer import display_string

logger = logging.getLogger(__name__)


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None, prelude: str | None = 'auto'):
        default_host, default_port = get_repl_address()
        self.host = default_host if host is None else host
        self.port = default_port if port is None else port
        # Keep a single interpreter to maintain session state
        self.interp = Interpreter(prelude=prelude)
        self._lock = threading.Lock()

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("minirack REPL server listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def handle_request(self, line: bytes) -> dict:
        """Decode one request line and evaluate it against the session."""
        try:
            req = json.loads(line.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        if not isinstance(req, dict) or req.get("cmd") != "eval":
            cmd = req.get("cmd") if isinstance(req, dict) else None
            return {"ok": False, "error": f"Unknown cmd: {cmd}"}

        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "Invalid request: code must be a string"}
        try:
            with self._lock:
                result = self.interp.eval(code)
        except (MinirackError, RecursionError) as ex:
            return {"ok": False, "error": f"{type(ex).__name__}: {ex}"}
        return {"ok": True, "result": None if result is None else display_string(result)}

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.info("client connected: %s:%d", *addr)
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = self.handle_request(line)
                    if not resp["ok"]:
                        logger.warning("request from %s:%d failed: %s", addr[0], addr[1], resp["error"])
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))


def main():
    logging.basicConfig(level=logging.INFO)
    ReplServer().serve_forever()


if __name__ == "__main__":
    main()
