from __future__ import annotations

import json
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Dict, Iterator, List

import pytest

from microya import ApiProvider, HttpxTransport


@pytest.fixture
def received_requests() -> List[Dict[str, Any]]:
    return []


@pytest.fixture
def local_api_server(received_requests: List[Dict[str, Any]]) -> Iterator[str]:
    class Handler(BaseHTTPRequestHandler):
        def _reply(self, status: int, body: bytes = b"", content_type: str = "application/json") -> None:
            self.send_response(status)
            self.send_header("Content-Type", content_type)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def _record(self) -> None:
            length = int(self.headers.get("Content-Length") or 0)
            received_requests.append(
                {
                    "method": self.command,
                    "path": self.path,
                    "headers": {key.lower(): value for key, value in self.headers.items()},
                    "body": self.rfile.read(length) if length else b"",
                }
            )

        def do_GET(self) -> None:  # noqa: N802
            self._record()
            if self.path.startswith("/posts/1"):
                self._reply(200, json.dumps({"id": 1, "title": "first"}).encode())
                return
            if self.path.startswith("/posts/broken"):
                self._reply(200, b"{not json")
                return
            if self.path.startswith("/posts/missing-json"):
                self._reply(404, json.dumps({"message": "post not found"}).encode())
                return
            if self.path.startswith("/posts/missing-html"):
                self._reply(404, b"<h1>Not Found</h1>", content_type="text/html")
                return
            if self.path.startswith("/unavailable"):
                self._reply(503, b"maintenance")
                return
            if self.path.startswith("/moved"):
                self.send_response(302)
                self.send_header("Location", "/posts/1")
                self.send_header("Content-Length", "0")
                self.end_headers()
                return
            if self.path.startswith("/slow"):
                time.sleep(0.5)
                self._reply(200, b"{}")
                return
            self._reply(404, b"")

        def do_POST(self) -> None:  # noqa: N802
            self._record()
            self._reply(201, json.dumps({"id": 2, "title": "created"}).encode())

        def do_DELETE(self) -> None:  # noqa: N802
            self._record()
            self._reply(204)

        def log_message(self, format: str, *args: Any) -> None:  # noqa: A003
            return

    server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        host, port = server.server_address[:2]
        yield f"http://{host}:{port}"
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=1)


@pytest.fixture
def integration_provider(local_api_server: str) -> Iterator[ApiProvider]:
    with ApiProvider(local_api_server, transport=HttpxTransport(timeout=5.0)) as provider:
        yield provider
