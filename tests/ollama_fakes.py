# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-11
# Description: ollama_fakes.py
# -----------------------------------------------------------------------------
import asyncio
import json
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Dict, List, Optional, Sequence

import httpx

from config.Config import Config
from corpus.CorpusIndex import CorpusIndex
from embedding.OllamaEmbedder import OllamaEmbedder
from services.VerseSearchService import VerseSearchService

TEST_OLLAMA_URL = "http://ollama.test:11434"


class FakeOllama:
    """
    Stand-in for the Ollama /api/embed endpoint, served through httpx.MockTransport.

    Texts listed in `vectors` get that vector, everything else gets `default`.
    Texts in `fail_on` (or every text when `status_code` is not 200) get an error response.
    """

    def __init__(
            self,
            vectors: Optional[Dict[str, List[float]]] = None,
            default: Sequence[float] = (0.0, 1.0),
            status_code: int = 200,
            fail_on: Sequence[str] = (),
            delays: Optional[Dict[str, float]] = None,
    ) -> None:
        self.vectors = vectors or {}
        self.default = list(default)
        self.status_code = status_code
        self.fail_on = set(fail_on)
        self.delays = delays or {}
        self.requests: List[httpx.Request] = []

    @property
    def inputs(self) -> List[str]:
        return [json.loads(r.content)["input"] for r in self.requests]

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        text = json.loads(request.content)["input"]

        delay = self.delays.get(text)
        if delay:
            await asyncio.sleep(delay)

        if self.status_code != 200 or text in self.fail_on:
            status = self.status_code if self.status_code != 200 else 500
            return httpx.Response(status, text="model failed to load")

        return httpx.Response(200, json={"embeddings": [self.vectors.get(text, self.default)]})


def make_embedder(handler, cfg: Optional[Config] = None) -> OllamaEmbedder:
    return OllamaEmbedder(
        cfg or Config(ollama_url=TEST_OLLAMA_URL),
        transport=httpx.MockTransport(handler),
    )


def make_service(groups, handler, **kwargs) -> VerseSearchService:
    return VerseSearchService(CorpusIndex(groups), make_embedder(handler), **kwargs)


class LocalOllamaServer:
    """
    Minimal /api/embed server on a real 127.0.0.1 socket, for tests that must
    go through httpx's own connection pool instead of a MockTransport.

    Speaks HTTP/1.1 with keep-alive so pooled connections are reused.
    """

    def __init__(self, vectors: Dict[str, List[float]], default: Sequence[float] = (0.0, 1.0)) -> None:
        self.vectors = vectors
        self.default = list(default)
        self.inputs: List[str] = []
        self._server = ThreadingHTTPServer(("127.0.0.1", 0), self._handler_class())
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)

    @property
    def url(self) -> str:
        host, port = self._server.server_address[:2]
        return f"http://{host}:{port}"

    def _handler_class(self):
        server = self

        class Handler(BaseHTTPRequestHandler):
            protocol_version = "HTTP/1.1"

            def do_POST(self):
                length = int(self.headers.get("Content-Length", "0"))
                text = json.loads(self.rfile.read(length))["input"]
                server.inputs.append(text)

                body = json.dumps({"embeddings": [server.vectors.get(text, server.default)]}).encode()
                self.send_response(200)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(body)))
                self.end_headers()
                self.wfile.write(body)

            def log_message(self, format, *args):
                pass

        return Handler

    def __enter__(self) -> "LocalOllamaServer":
        self._thread.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self._server.shutdown()
        self._server.server_close()


class SilentSocket:
    """Accepts TCP connections into the backlog but never answers."""

    def __init__(self) -> None:
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._sock.bind(("127.0.0.1", 0))
        self._sock.listen(8)

    @property
    def url(self) -> str:
        host, port = self._sock.getsockname()
        return f"http://{host}:{port}"

    def __enter__(self) -> "SilentSocket":
        return self

    def __exit__(self, *exc_info) -> None:
        self._sock.close()
