"""
Simple TCP REPL server for Yisp.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(define x 1)"}
- Response: {"ok": true, "result": <printed value>}
            or {"ok": false, "error": <message>, "kind": <error kind>}

All clients share one Interpreter so that definitions persist across
evaluations; evaluation is serialized with a lock because every client
writes into the same global frame.
"""

from __future__ import annotations

import json
import logging
import socket
import threading
from typing import Any, Tuple

from yisp.config import get_repl_address
from yisp.errors import YispError
from yisp.interpreter import Interpreter
from yisp.printer import to_str

logger = logging.getLogger(__name__)


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None):
        default_host, default_port = get_repl_address()
        self.host = host or default_host
        self.port = port or default_port
        # Keep a single interpreter to maintain session state
        self.interp = Interpreter()
        self._lock = threading.Lock()

    def handle_request(self, req: Any) -> dict:
        if not isinstance(req, dict):
            return {"ok": False, "error": "Invalid request: expected a JSON object"}
        if req.get("cmd") != "eval":
            return {"ok": False, "error": f"Unknown cmd: {req.get('cmd')}"}
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "Invalid request: code must be a string"}
        try:
            with self._lock:
                result = self.interp.eval(code)
        except YispError as ex:
            return {"ok": False, "error": str(ex), "kind": ex.kind}
        return {"ok": True, "result": to_str(result)}

    def handle_line(self, line: bytes) -> dict:
        try:
            req = json.loads(line.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        return self.handle_request(req)

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("yisp REPL server listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

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
                    resp = self.handle_line(line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        logger.info("client disconnected: %s:%d", *addr)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    ReplServer().serve_forever()


if __name__ == "__main__":
    main()
